from enum import Enum
from types import MappingProxyType
from typing import Optional, Union


class Rashi(str, Enum):
    """
    Vedic moon sign, in zodiac order.
    """
    ARIES = "Aries"
    TAURUS = "Taurus"
    GEMINI = "Gemini"
    CANCER = "Cancer"
    LEO = "Leo"
    VIRGO = "Virgo"
    LIBRA = "Libra"
    SCORPIO = "Scorpio"
    SAGITTARIUS = "Sagittarius"
    CAPRICORN = "Capricorn"
    AQUARIUS = "Aquarius"
    PISCES = "Pisces"


class Nakshatra(str, Enum):
    """
    Lunar mansion, in canonical order (Ashwini → Revati).
    """
    ASHWINI = "Ashwini"
    BHARANI = "Bharani"
    KRITTIKA = "Krittika"
    ROHINI = "Rohini"
    MRIGASHIRA = "Mrigashira"
    ARDRA = "Ardra"
    PUNARVASU = "Punarvasu"
    PUSHYA = "Pushya"
    ASHLESHA = "Ashlesha"
    MAGHA = "Magha"
    PURVA_PHALGUNI = "Purva Phalguni"
    UTTARA_PHALGUNI = "Uttara Phalguni"
    HASTA = "Hasta"
    CHITRA = "Chitra"
    SWATI = "Swati"
    VISHAKHA = "Vishakha"
    ANURADHA = "Anuradha"
    JYESHTHA = "Jyeshtha"
    MULA = "Mula"
    PURVA_ASHADHA = "Purva Ashadha"
    UTTARA_ASHADHA = "Uttara Ashadha"
    SHRAVANA = "Shravana"
    DHANISHTA = "Dhanishta"
    SHATABHISHA = "Shatabhisha"
    PURVA_BHADRAPADA = "Purva Bhadrapada"
    UTTARA_BHADRAPADA = "Uttara Bhadrapada"
    REVATI = "Revati"


class Gana(str, Enum):
    DEVA = "deva"
    MANUSHYA = "manushya"
    RAKSHASA = "rakshasa"


class Nadi(str, Enum):
    ADI = "adi"
    MADHYA = "madhya"
    ANTYA = "antya"


RASHI_ORDER = tuple(Rashi)
NAKSHATRA_ORDER = tuple(Nakshatra)
NAKSHATRA_COUNT = len(NAKSHATRA_ORDER)  # 27

NAKSHATRA_INDEX = MappingProxyType(
    {nakshatra: index for index, nakshatra in enumerate(NAKSHATRA_ORDER)}
)

_RASHI_BY_NAME = MappingProxyType({rashi.value: rashi for rashi in Rashi})
_NAKSHATRA_BY_NAME = MappingProxyType({nak.value: nak for nak in Nakshatra})


# ─────────────────────────────────────────────
# Coercion
# ─────────────────────────────────────────────

def coerce_rashi(value: Union[str, Rashi, None]) -> Optional[Rashi]:
    """
    Return the Rashi for a canonical sign name, or None.

    Empty strings, None and unknown names all map to None.
    """
    if isinstance(value, Rashi):
        return value
    if not isinstance(value, str):
        return None
    return _RASHI_BY_NAME.get(value.strip())


def coerce_nakshatra(value: Union[str, Nakshatra, None]) -> Optional[Nakshatra]:
    """
    Return the Nakshatra for a canonical name, or None.
    """
    if isinstance(value, Nakshatra):
        return value
    if not isinstance(value, str):
        return None
    return _NAKSHATRA_BY_NAME.get(value.strip())
