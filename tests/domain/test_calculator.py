import unittest
from datetime import date, datetime

from gunamilan.domain.horoscope.calculator import (
    FALLBACK_SOURCE,
    FallbackHoroscopeCalculator,
    manglik_status_for,
    nakshatra_for_date,
    parse_birth_date,
    rashi_for_date,
)
from gunamilan.domain.horoscope.constants import Nakshatra, Rashi
from gunamilan.domain.horoscope.errors import InvalidBirthDataError
from gunamilan.domain.horoscope.schemas import ManglikStatus


class TestRashiForDate(unittest.TestCase):

    def test_sign_boundaries(self):
        cases = [
            (date(1990, 1, 1), Rashi.CAPRICORN),
            (date(1990, 1, 19), Rashi.CAPRICORN),
            (date(1990, 1, 20), Rashi.AQUARIUS),
            (date(1990, 2, 19), Rashi.PISCES),
            (date(1990, 3, 20), Rashi.PISCES),
            (date(1990, 3, 21), Rashi.ARIES),
            (date(1990, 4, 19), Rashi.ARIES),
            (date(1990, 4, 20), Rashi.TAURUS),
            (date(1990, 7, 23), Rashi.LEO),
            (date(1990, 11, 21), Rashi.SCORPIO),
            (date(1990, 12, 21), Rashi.SAGITTARIUS),
            (date(1990, 12, 22), Rashi.CAPRICORN),
        ]
        for birth_date, expected in cases:
            self.assertEqual(rashi_for_date(birth_date), expected, birth_date)


class TestNakshatraForDate(unittest.TestCase):

    def test_day_of_year_cycle(self):
        self.assertEqual(nakshatra_for_date(date(2023, 1, 1)), Nakshatra.BHARANI)
        self.assertEqual(nakshatra_for_date(date(2023, 1, 27)), Nakshatra.ASHWINI)
        self.assertEqual(nakshatra_for_date(date(2023, 1, 26)), Nakshatra.REVATI)


class TestManglik(unittest.TestCase):

    def test_manglik_signs(self):
        for rashi in (Rashi.ARIES, Rashi.LEO, Rashi.SCORPIO, Rashi.CAPRICORN):
            self.assertEqual(manglik_status_for(rashi), ManglikStatus.MANGLIK)
        self.assertEqual(manglik_status_for(Rashi.TAURUS), ManglikStatus.NON_MANGLIK)


class TestParseBirthDate(unittest.TestCase):

    def test_accepted_shapes(self):
        self.assertEqual(parse_birth_date(date(1995, 5, 15)), date(1995, 5, 15))
        self.assertEqual(parse_birth_date(datetime(1995, 5, 15, 10, 30)), date(1995, 5, 15))
        self.assertEqual(parse_birth_date("1995-05-15"), date(1995, 5, 15))
        self.assertEqual(parse_birth_date("1995-05-15T10:30:00"), date(1995, 5, 15))

    def test_missing(self):
        with self.assertRaises(InvalidBirthDataError):
            parse_birth_date(None)
        with self.assertRaises(InvalidBirthDataError):
            parse_birth_date("")

    def test_malformed(self):
        with self.assertRaises(InvalidBirthDataError):
            parse_birth_date("15/05/1995")
        with self.assertRaises(InvalidBirthDataError):
            parse_birth_date("1995-02-30")


class TestFallbackHoroscopeCalculator(unittest.TestCase):

    def test_calculate(self):
        derived = FallbackHoroscopeCalculator().calculate("1995-05-15", "10:30", "Mumbai")

        self.assertEqual(derived.rashi, "Taurus")
        self.assertEqual(derived.nakshatra, "Ashwini")
        self.assertEqual(derived.manglik_status, ManglikStatus.NON_MANGLIK)
        self.assertEqual(derived.source, FALLBACK_SOURCE)
        self.assertTrue(derived.note)

    def test_time_and_place_do_not_matter(self):
        calculator = FallbackHoroscopeCalculator()
        self.assertEqual(
            calculator.calculate("1995-05-15"),
            calculator.calculate("1995-05-15", "23:59", "Delhi"),
        )


if __name__ == "__main__":
    unittest.main()
