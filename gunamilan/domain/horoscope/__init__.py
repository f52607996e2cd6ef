"""
Horoscope Domain

Guna Milan (Ashta Koot) tables, factor scorers and result schemas.
"""

from gunamilan.domain.horoscope.constants import Rashi, Nakshatra, Gana, Nadi
from gunamilan.domain.horoscope.errors import (
    HoroscopeError,
    TableIntegrityError,
    InvalidBirthDataError,
)
from gunamilan.domain.horoscope.schemas import (
    HoroscopeAttributes,
    FactorName,
    FactorResult,
    MatchStatus,
    MatchResult,
    HoroscopeEcho,
    DerivedHoroscope,
    ManglikStatus,
)

__all__ = [
    "Rashi",
    "Nakshatra",
    "Gana",
    "Nadi",
    "HoroscopeError",
    "TableIntegrityError",
    "InvalidBirthDataError",
    "HoroscopeAttributes",
    "FactorName",
    "FactorResult",
    "MatchStatus",
    "MatchResult",
    "HoroscopeEcho",
    "DerivedHoroscope",
    "ManglikStatus",
]
