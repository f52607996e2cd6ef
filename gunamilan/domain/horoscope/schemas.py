from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


# Nominal Guna Milan scale; totals and percentages are expressed against it
MAX_TOTAL_SCORE = 36


class CamelModel(BaseModel):
    """
    Base for schemas exchanged with the frontend (camelCase on the wire).
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ─────────────────────────────────────────────
# Input
# ─────────────────────────────────────────────

class HoroscopeAttributes(CamelModel):
    """
    Birth-derived attributes of one person, as stored on a profile.

    Values are kept raw here; unknown or empty names are treated as
    absent when a match is calculated.
    """
    rashi: Optional[str] = Field(None, examples=["Aries"])
    nakshatra: Optional[str] = Field(None, examples=["Ashwini"])
    star_sign: Optional[str] = Field(None, examples=["Aries"])


# ─────────────────────────────────────────────
# Output
# ─────────────────────────────────────────────

class FactorName(str, Enum):
    VARNA = "Varna"
    VASYA = "Vasya"
    TARA = "Tara"
    YONI = "Yoni"
    GRAHA_MAITRI = "Graha Maitri"
    GANA = "Gana"
    BHAKOOT = "Bhakoot"
    NADI = "Nadi"


FACTOR_MAX = {
    FactorName.VARNA: 4,
    FactorName.VASYA: 2,
    FactorName.TARA: 3,
    FactorName.YONI: 4,
    FactorName.GRAHA_MAITRI: 5,
    FactorName.GANA: 6,
    FactorName.BHAKOOT: 7,
    FactorName.NADI: 8,
}

# The per-factor ceilings add up to 39, so a total can exceed the nominal 36
MAX_FACTOR_SUM = sum(FACTOR_MAX.values())


class MatchStatus(str, Enum):
    INSUFFICIENT_DATA = "insufficient_data"
    LOW = "low"
    AVERAGE = "average"
    MODERATE = "moderate"
    GOOD = "good"
    EXCELLENT = "excellent"


class FactorResult(CamelModel):
    """
    Score of a single koot.

    matched=False with score 0 means either missing data or a dosha;
    detail says which.
    """
    model_config = ConfigDict(frozen=True)

    name: FactorName
    score: int = Field(..., ge=0)
    max: int = Field(..., gt=0)
    matched: bool
    detail: str

    @model_validator(mode="after")
    def check_score_within_max(self) -> "FactorResult":
        if self.score > self.max:
            raise ValueError(
                f"{self.name.value} score {self.score} exceeds its maximum {self.max}"
            )
        return self


class HoroscopeEcho(CamelModel):
    """
    Normalized attributes of one person, echoed back for display.
    """
    model_config = ConfigDict(frozen=True)

    rashi: Optional[str] = None
    nakshatra: Optional[str] = None
    star_sign: Optional[str] = None


class MatchResult(CamelModel):
    """
    Composite Guna Milan result for two people.
    """
    model_config = ConfigDict(frozen=True)

    total_score: int = Field(..., ge=0, le=MAX_FACTOR_SUM)
    max_score: int = MAX_TOTAL_SCORE
    percentage: int = Field(..., ge=0)
    status: MatchStatus
    message: str
    doshas: List[str] = Field(default_factory=list)
    details: List[FactorResult] = Field(default_factory=list)
    horoscope1: HoroscopeEcho
    horoscope2: HoroscopeEcho


# ─────────────────────────────────────────────
# Birth-detail derivation
# ─────────────────────────────────────────────

class ManglikStatus(str, Enum):
    MANGLIK = "manglik"
    NON_MANGLIK = "non-manglik"


class DerivedHoroscope(CamelModel):
    """
    Astrological attributes derived from birth details.
    """
    model_config = ConfigDict(frozen=True)

    rashi: str
    nakshatra: str
    manglik_status: ManglikStatus
    source: str
    note: Optional[str] = None
