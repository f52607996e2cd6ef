"""
Birth details → rashi / nakshatra derivation.

Only a calendar-based fallback lives here. It is an approximation for
profiles whose owners do not know their moon sign, not an astronomical
calculation.
"""

import logging
from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Optional, Union

from gunamilan.domain.horoscope.constants import NAKSHATRA_ORDER, NAKSHATRA_COUNT, Rashi
from gunamilan.domain.horoscope.errors import InvalidBirthDataError
from gunamilan.domain.horoscope.schemas import DerivedHoroscope, ManglikStatus


logger = logging.getLogger(__name__)

BirthDate = Union[date, datetime, str, None]

# (month, first day) each sign begins on, in calendar order.
# Dates before 20 January fall in Capricorn.
SIGN_START_DATES = (
    ((1, 20), Rashi.AQUARIUS),
    ((2, 19), Rashi.PISCES),
    ((3, 21), Rashi.ARIES),
    ((4, 20), Rashi.TAURUS),
    ((5, 21), Rashi.GEMINI),
    ((6, 21), Rashi.CANCER),
    ((7, 23), Rashi.LEO),
    ((8, 23), Rashi.VIRGO),
    ((9, 23), Rashi.LIBRA),
    ((10, 23), Rashi.SCORPIO),
    ((11, 22), Rashi.SAGITTARIUS),
    ((12, 22), Rashi.CAPRICORN),
)

MANGLIK_RASHIS = frozenset({Rashi.ARIES, Rashi.LEO, Rashi.SCORPIO, Rashi.CAPRICORN})

FALLBACK_SOURCE = "fallback_calculation"
FALLBACK_NOTE = (
    "For more accurate calculations, please use an astrology API "
    "or consult an astrologer"
)


def parse_birth_date(value: BirthDate) -> date:
    """
    Accept a date, a datetime or an ISO string (date or datetime).
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value or not isinstance(value, str):
        raise InvalidBirthDataError("Date of birth is required")

    text = value.strip()
    try:
        return date.fromisoformat(text[:10])
    except ValueError as exc:
        raise InvalidBirthDataError(f"Invalid date of birth: {value!r}") from exc


def rashi_for_date(birth_date: date) -> Rashi:
    """
    Sign whose calendar range contains the date.
    """
    key = (birth_date.month, birth_date.day)
    rashi = Rashi.CAPRICORN
    for start, sign in SIGN_START_DATES:
        if key >= start:
            rashi = sign
    return rashi


def nakshatra_for_date(birth_date: date):
    """
    Nakshatra by day of year (1 January = day 1), cycling every 27 days.
    """
    day_of_year = birth_date.timetuple().tm_yday
    return NAKSHATRA_ORDER[day_of_year % NAKSHATRA_COUNT]


def manglik_status_for(rashi: Rashi) -> ManglikStatus:
    if rashi in MANGLIK_RASHIS:
        return ManglikStatus.MANGLIK
    return ManglikStatus.NON_MANGLIK


class BaseHoroscopeCalculator(ABC):
    """
    Abstract base for anything that turns birth details into a horoscope.

    Remote astrology APIs plug in here by subclassing.
    """

    source: str

    @abstractmethod
    def calculate(
        self,
        date_of_birth: BirthDate,
        time_of_birth: Optional[str] = None,
        place_of_birth: Optional[str] = None,
    ) -> DerivedHoroscope:
        raise NotImplementedError


class FallbackHoroscopeCalculator(BaseHoroscopeCalculator):
    """
    Calendar-based derivation.

    Uses the date only; time and place are accepted for interface
    compatibility and ignored.
    """

    source = FALLBACK_SOURCE

    def calculate(
        self,
        date_of_birth: BirthDate,
        time_of_birth: Optional[str] = None,
        place_of_birth: Optional[str] = None,
    ) -> DerivedHoroscope:
        birth_date = parse_birth_date(date_of_birth)

        rashi = rashi_for_date(birth_date)
        nakshatra = nakshatra_for_date(birth_date)

        logger.debug(
            "Fallback horoscope for %s: %s / %s", birth_date, rashi.value, nakshatra.value
        )

        return DerivedHoroscope(
            rashi=rashi.value,
            nakshatra=nakshatra.value,
            manglik_status=manglik_status_for(rashi),
            source=self.source,
            note=FALLBACK_NOTE,
        )
