"""
Horoscope API Routes

Guna Milan matching between two sets of horoscope attributes, and
rashi / nakshatra derivation from birth details. Profile lookup and
authentication happen upstream; these routes take the attributes
directly.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import Field

from gunamilan.api.dependencies import get_horoscope_service, get_matching_service
from gunamilan.api.validators import (
    validate_date_format,
    validate_place,
    validate_time_format,
)
from gunamilan.domain.horoscope.errors import InvalidBirthDataError
from gunamilan.domain.horoscope.schemas import (
    CamelModel,
    DerivedHoroscope,
    HoroscopeAttributes,
    MatchResult,
)
from gunamilan.services.horoscope_service import HoroscopeService
from gunamilan.services.matching_service import MatchingService


logger = logging.getLogger(__name__)

router = APIRouter()


# ─────────────────────────────────────────────
# Request / Response Schemas
# ─────────────────────────────────────────────

class MatchRequest(CamelModel):
    """Horoscope attributes of both people."""
    horoscope1: HoroscopeAttributes = Field(default_factory=HoroscopeAttributes)
    horoscope2: HoroscopeAttributes = Field(default_factory=HoroscopeAttributes)


class MatchResponse(CamelModel):
    status: bool = True
    message: str
    data: MatchResult


class BirthDetailsRequest(CamelModel):
    date_of_birth: str = Field(..., examples=["1995-05-15"])
    time_of_birth: Optional[str] = Field(None, examples=["10:30"])
    place_of_birth: Optional[str] = Field(None, examples=["Mumbai"])


class CalculateResponse(CamelModel):
    status: bool = True
    message: str
    data: DerivedHoroscope


# ─────────────────────────────────────────────
# Endpoints
# ─────────────────────────────────────────────

@router.post(
    "/match",
    response_model=MatchResponse,
    summary="Guna Milan score for two horoscopes",
)
async def match_horoscopes(
    payload: MatchRequest,
    service: MatchingService = Depends(get_matching_service),
):
    """
    Calculate the 36-point compatibility score.

    Insufficient data is reported in data.status, not as an error.
    """
    result = service.calculate_matching(payload.horoscope1, payload.horoscope2)

    return MatchResponse(
        message="Horoscope matching calculated successfully",
        data=result,
    )


@router.post(
    "/calculate",
    response_model=CalculateResponse,
    summary="Derive rashi and nakshatra from birth details",
)
async def calculate_horoscope(
    payload: BirthDetailsRequest,
    service: HoroscopeService = Depends(get_horoscope_service),
):
    """
    Approximate rashi, nakshatra and manglik status from date of birth.
    """
    date_of_birth = validate_date_format(payload.date_of_birth)
    time_of_birth = validate_time_format(payload.time_of_birth)
    place_of_birth = validate_place(payload.place_of_birth)

    try:
        derived = service.calculate_horoscope(date_of_birth, time_of_birth, place_of_birth)
    except InvalidBirthDataError as e:
        logger.info(f"Rejected birth details: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    return CalculateResponse(
        message="Horoscope calculated successfully",
        data=derived,
    )
