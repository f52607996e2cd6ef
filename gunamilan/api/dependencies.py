from functools import lru_cache

from gunamilan.services.horoscope_service import HoroscopeService
from gunamilan.services.matching_service import MatchingService


@lru_cache
def get_matching_service() -> MatchingService:
    """
    Shared matching facade. Stateless, so one instance serves every request.
    """
    return MatchingService()


@lru_cache
def get_horoscope_service() -> HoroscopeService:
    """
    Birth-detail calculator chain (calendar fallback only).
    """
    return HoroscopeService()
