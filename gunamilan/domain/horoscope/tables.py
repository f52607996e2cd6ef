"""
Static Guna Milan lookup tables.

All tables are built once at import, wrapped read-only, and checked by
validate_tables() before the module finishes loading.
"""

from types import MappingProxyType
from typing import FrozenSet, NamedTuple

from gunamilan.domain.horoscope.constants import (
    Gana,
    Nadi,
    Nakshatra,
    NAKSHATRA_ORDER,
    Rashi,
    RASHI_ORDER,
)
from gunamilan.domain.horoscope.errors import TableIntegrityError

R = Rashi
N = Nakshatra


class RashiCompatibility(NamedTuple):
    compatible: FrozenSet[Rashi]
    neutral: FrozenSet[Rashi]
    incompatible: FrozenSet[Rashi]


def _compat(compatible, neutral, incompatible) -> RashiCompatibility:
    return RashiCompatibility(
        frozenset(compatible), frozenset(neutral), frozenset(incompatible)
    )


# ─────────────────────────────────────────────
# Rashi tables
# ─────────────────────────────────────────────

# Lookups are one-directional: RASHI_COMPATIBILITY[rashi1] only.
# Each sign lists itself as neutral.
RASHI_COMPATIBILITY = MappingProxyType({
    R.ARIES: _compat(
        [R.LEO, R.SAGITTARIUS, R.GEMINI, R.AQUARIUS], [R.LIBRA, R.ARIES], [R.CANCER, R.CAPRICORN]
    ),
    R.TAURUS: _compat(
        [R.VIRGO, R.CAPRICORN, R.CANCER, R.PISCES], [R.SCORPIO, R.TAURUS], [R.LEO, R.AQUARIUS]
    ),
    R.GEMINI: _compat(
        [R.LIBRA, R.AQUARIUS, R.ARIES, R.LEO], [R.SAGITTARIUS, R.GEMINI], [R.VIRGO, R.PISCES]
    ),
    R.CANCER: _compat(
        [R.SCORPIO, R.PISCES, R.TAURUS, R.VIRGO], [R.CAPRICORN, R.CANCER], [R.ARIES, R.LIBRA]
    ),
    R.LEO: _compat(
        [R.SAGITTARIUS, R.ARIES, R.GEMINI, R.LIBRA], [R.AQUARIUS, R.LEO], [R.TAURUS, R.SCORPIO]
    ),
    R.VIRGO: _compat(
        [R.CAPRICORN, R.TAURUS, R.CANCER, R.SCORPIO], [R.PISCES, R.VIRGO], [R.GEMINI, R.SAGITTARIUS]
    ),
    R.LIBRA: _compat(
        [R.AQUARIUS, R.GEMINI, R.LEO, R.SAGITTARIUS], [R.ARIES, R.LIBRA], [R.CANCER, R.CAPRICORN]
    ),
    R.SCORPIO: _compat(
        [R.PISCES, R.CANCER, R.VIRGO, R.CAPRICORN], [R.TAURUS, R.SCORPIO], [R.LEO, R.AQUARIUS]
    ),
    R.SAGITTARIUS: _compat(
        [R.ARIES, R.LEO, R.LIBRA, R.AQUARIUS], [R.GEMINI, R.SAGITTARIUS], [R.VIRGO, R.PISCES]
    ),
    R.CAPRICORN: _compat(
        [R.TAURUS, R.VIRGO, R.SCORPIO, R.PISCES], [R.CANCER, R.CAPRICORN], [R.ARIES, R.LIBRA]
    ),
    R.AQUARIUS: _compat(
        [R.GEMINI, R.LIBRA, R.SAGITTARIUS, R.ARIES], [R.LEO, R.AQUARIUS], [R.TAURUS, R.SCORPIO]
    ),
    R.PISCES: _compat(
        [R.CANCER, R.SCORPIO, R.CAPRICORN, R.TAURUS], [R.VIRGO, R.PISCES], [R.GEMINI, R.SAGITTARIUS]
    ),
})

# 7th sign from each rashi
RASHI_OPPOSITES = MappingProxyType({
    rashi: RASHI_ORDER[(index + 6) % len(RASHI_ORDER)]
    for index, rashi in enumerate(RASHI_ORDER)
})

# Binary varna class: fire/air signs = 1, earth/water signs = 2
VARNA_CLASS = MappingProxyType({
    rashi: 1 if index % 2 == 0 else 2
    for index, rashi in enumerate(RASHI_ORDER)
})

BHAKOOT_INCOMPATIBLE_PAIRS = frozenset({
    frozenset({R.ARIES, R.VIRGO}),
    frozenset({R.TAURUS, R.LIBRA}),
    frozenset({R.GEMINI, R.SCORPIO}),
    frozenset({R.CANCER, R.SAGITTARIUS}),
    frozenset({R.LEO, R.CAPRICORN}),
    frozenset({R.PISCES, R.AQUARIUS}),
})


# ─────────────────────────────────────────────
# Nakshatra tables
# ─────────────────────────────────────────────

# Shared by Tara and Yoni
FRIENDLY_GROUPS = (
    frozenset({N.ASHWINI, N.MAGHA, N.MULA}),
    frozenset({N.BHARANI, N.PURVA_PHALGUNI, N.PURVA_ASHADHA}),
    frozenset({N.KRITTIKA, N.UTTARA_PHALGUNI, N.UTTARA_ASHADHA}),
    frozenset({N.ROHINI, N.HASTA, N.SHRAVANA}),
    frozenset({N.MRIGASHIRA, N.CHITRA, N.DHANISHTA}),
    frozenset({N.ARDRA, N.SWATI, N.SHATABHISHA}),
    frozenset({N.PUNARVASU, N.VISHAKHA, N.PURVA_BHADRAPADA}),
    frozenset({N.PUSHYA, N.ANURADHA, N.UTTARA_BHADRAPADA}),
    frozenset({N.ASHLESHA, N.JYESHTHA, N.REVATI}),
)

FRIENDLY_GROUP_OF = MappingProxyType({
    nakshatra: index
    for index, group in enumerate(FRIENDLY_GROUPS)
    for nakshatra in group
})

GANA_GROUPS = MappingProxyType({
    Gana.DEVA: frozenset({
        N.ASHWINI, N.MRIGASHIRA, N.PUNARVASU, N.PUSHYA,
        N.HASTA, N.SWATI, N.ANURADHA, N.SHRAVANA,
    }),
    Gana.MANUSHYA: frozenset({
        N.BHARANI, N.ROHINI, N.ARDRA, N.PURVA_PHALGUNI,
        N.UTTARA_PHALGUNI, N.PURVA_ASHADHA, N.UTTARA_ASHADHA, N.REVATI,
    }),
    Gana.RAKSHASA: frozenset({
        N.KRITTIKA, N.ASHLESHA, N.MAGHA, N.CHITRA, N.VISHAKHA, N.JYESHTHA,
        N.MULA, N.DHANISHTA, N.SHATABHISHA, N.PURVA_BHADRAPADA, N.UTTARA_BHADRAPADA,
    }),
})

NADI_GROUPS = MappingProxyType({
    Nadi.ADI: frozenset({
        N.ASHWINI, N.ARDRA, N.PUNARVASU, N.UTTARA_PHALGUNI, N.HASTA,
        N.JYESHTHA, N.MULA, N.SHRAVANA, N.PURVA_BHADRAPADA,
    }),
    Nadi.MADHYA: frozenset({
        N.BHARANI, N.MRIGASHIRA, N.PUSHYA, N.PURVA_PHALGUNI, N.CHITRA,
        N.ANURADHA, N.PURVA_ASHADHA, N.DHANISHTA, N.UTTARA_BHADRAPADA,
    }),
    Nadi.ANTYA: frozenset({
        N.KRITTIKA, N.ROHINI, N.ASHLESHA, N.MAGHA, N.SWATI,
        N.VISHAKHA, N.UTTARA_ASHADHA, N.SHATABHISHA, N.REVATI,
    }),
})

GANA_OF = MappingProxyType({
    nakshatra: gana
    for gana, members in GANA_GROUPS.items()
    for nakshatra in members
})

NADI_OF = MappingProxyType({
    nakshatra: nadi
    for nadi, members in NADI_GROUPS.items()
    for nakshatra in members
})


# ─────────────────────────────────────────────
# Integrity checks
# ─────────────────────────────────────────────

def _check_partition(name: str, groups) -> None:
    """
    Every nakshatra must appear in exactly one of the groups.
    """
    seen = {}
    for label, members in groups:
        for nakshatra in members:
            if nakshatra in seen:
                raise TableIntegrityError(
                    f"{name}: {nakshatra.value} appears in both "
                    f"{seen[nakshatra]} and {label}"
                )
            seen[nakshatra] = label

    missing = [n.value for n in NAKSHATRA_ORDER if n not in seen]
    if missing:
        raise TableIntegrityError(f"{name}: missing {', '.join(missing)}")


def validate_tables() -> None:
    """
    Check the completeness invariants of every table.

    Raises TableIntegrityError on the first violation found.
    """
    _check_partition("Gana groups", GANA_GROUPS.items())
    _check_partition("Nadi groups", NADI_GROUPS.items())
    _check_partition("Friendly groups", enumerate(FRIENDLY_GROUPS))

    if len(FRIENDLY_GROUPS) != 9 or any(len(g) != 3 for g in FRIENDLY_GROUPS):
        raise TableIntegrityError("Friendly groups must be 9 groups of 3")

    all_rashis = frozenset(RASHI_ORDER)

    for rashi in RASHI_ORDER:
        entry = RASHI_COMPATIBILITY.get(rashi)
        if entry is None:
            raise TableIntegrityError(f"Rashi compatibility: missing {rashi.value}")
        for field in entry._fields:
            if not getattr(entry, field) <= all_rashis:
                raise TableIntegrityError(
                    f"Rashi compatibility: {rashi.value}.{field} has unknown signs"
                )

        opposite = RASHI_OPPOSITES.get(rashi)
        if opposite is None or opposite == rashi:
            raise TableIntegrityError(f"Rashi opposites: bad entry for {rashi.value}")
        if RASHI_OPPOSITES.get(opposite) != rashi:
            raise TableIntegrityError(
                f"Rashi opposites: {rashi.value} and {opposite.value} are not mutual"
            )

        if rashi not in VARNA_CLASS:
            raise TableIntegrityError(f"Varna classes: missing {rashi.value}")

    if len(BHAKOOT_INCOMPATIBLE_PAIRS) != 6 or any(
        len(pair) != 2 or not pair <= all_rashis
        for pair in BHAKOOT_INCOMPATIBLE_PAIRS
    ):
        raise TableIntegrityError("Bhakoot pairs must be 6 distinct pairs of signs")


validate_tables()
