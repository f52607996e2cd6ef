import unittest

from gunamilan.domain.horoscope import tables
from gunamilan.domain.horoscope.constants import (
    Nakshatra,
    NAKSHATRA_ORDER,
    Rashi,
    RASHI_ORDER,
)
from gunamilan.domain.horoscope.errors import TableIntegrityError


class TestNakshatraPartitions(unittest.TestCase):

    def _membership_counts(self, groups):
        counts = {nakshatra: 0 for nakshatra in NAKSHATRA_ORDER}
        for members in groups:
            for nakshatra in members:
                counts[nakshatra] += 1
        return counts

    def test_canonical_order_has_27_entries(self):
        self.assertEqual(len(NAKSHATRA_ORDER), 27)
        self.assertEqual(NAKSHATRA_ORDER[0], Nakshatra.ASHWINI)
        self.assertEqual(NAKSHATRA_ORDER[-1], Nakshatra.REVATI)

    def test_every_nakshatra_in_exactly_one_gana(self):
        counts = self._membership_counts(tables.GANA_GROUPS.values())
        self.assertTrue(all(count == 1 for count in counts.values()), counts)
        self.assertEqual(len(tables.GANA_OF), 27)

    def test_every_nakshatra_in_exactly_one_nadi(self):
        counts = self._membership_counts(tables.NADI_GROUPS.values())
        self.assertTrue(all(count == 1 for count in counts.values()), counts)
        self.assertEqual(len(tables.NADI_OF), 27)

    def test_nadi_groups_have_nine_each(self):
        for members in tables.NADI_GROUPS.values():
            self.assertEqual(len(members), 9)

    def test_every_nakshatra_in_exactly_one_friendly_group(self):
        counts = self._membership_counts(tables.FRIENDLY_GROUPS)
        self.assertTrue(all(count == 1 for count in counts.values()), counts)

    def test_nine_friendly_groups_of_three(self):
        self.assertEqual(len(tables.FRIENDLY_GROUPS), 9)
        for group in tables.FRIENDLY_GROUPS:
            self.assertEqual(len(group), 3)


class TestRashiTables(unittest.TestCase):

    def test_every_rashi_has_compatibility_sets(self):
        for rashi in RASHI_ORDER:
            entry = tables.RASHI_COMPATIBILITY[rashi]
            self.assertTrue(entry.compatible)
            self.assertTrue(entry.neutral)
            self.assertTrue(entry.incompatible)

    def test_compatibility_sets_are_disjoint(self):
        for rashi in RASHI_ORDER:
            entry = tables.RASHI_COMPATIBILITY[rashi]
            self.assertFalse(entry.compatible & entry.neutral)
            self.assertFalse(entry.compatible & entry.incompatible)
            self.assertFalse(entry.neutral & entry.incompatible)

    def test_opposites_are_mutual(self):
        for rashi in RASHI_ORDER:
            opposite = tables.RASHI_OPPOSITES[rashi]
            self.assertNotEqual(opposite, rashi)
            self.assertEqual(tables.RASHI_OPPOSITES[opposite], rashi)

    def test_known_opposites(self):
        self.assertEqual(tables.RASHI_OPPOSITES[Rashi.ARIES], Rashi.LIBRA)
        self.assertEqual(tables.RASHI_OPPOSITES[Rashi.VIRGO], Rashi.PISCES)

    def test_varna_classes_alternate(self):
        self.assertEqual(tables.VARNA_CLASS[Rashi.ARIES], 1)
        self.assertEqual(tables.VARNA_CLASS[Rashi.TAURUS], 2)
        self.assertEqual(set(tables.VARNA_CLASS.values()), {1, 2})

    def test_bhakoot_pairs(self):
        self.assertEqual(len(tables.BHAKOOT_INCOMPATIBLE_PAIRS), 6)
        self.assertIn(
            frozenset({Rashi.AQUARIUS, Rashi.PISCES}),
            tables.BHAKOOT_INCOMPATIBLE_PAIRS,
        )

    def test_shipped_compatibility_is_symmetric(self):
        # Lookups only read table[rashi1]; this pins that the shipped data
        # makes the order of the two people irrelevant.
        for first in RASHI_ORDER:
            for second in RASHI_ORDER:
                entry = tables.RASHI_COMPATIBILITY[first]
                reverse = tables.RASHI_COMPATIBILITY[second]
                self.assertEqual(
                    second in entry.compatible, first in reverse.compatible,
                    f"{first.value} / {second.value}",
                )
                self.assertEqual(
                    second in entry.neutral, first in reverse.neutral,
                    f"{first.value} / {second.value}",
                )


class TestValidateTables(unittest.TestCase):

    def test_shipped_tables_are_valid(self):
        tables.validate_tables()

    def test_duplicate_membership_is_rejected(self):
        groups = [
            ("a", set(NAKSHATRA_ORDER)),
            ("b", {Nakshatra.ASHWINI}),
        ]
        with self.assertRaises(TableIntegrityError):
            tables._check_partition("test", groups)

    def test_missing_membership_is_rejected(self):
        groups = [("a", set(NAKSHATRA_ORDER[:-1]))]
        with self.assertRaises(TableIntegrityError) as ctx:
            tables._check_partition("test", groups)
        self.assertIn("Revati", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
