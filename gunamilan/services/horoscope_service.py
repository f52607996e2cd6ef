"""
Horoscope Calculation Service

Derives rashi / nakshatra / manglik status from birth details.
"""

import logging
from typing import List, Optional

from gunamilan.domain.horoscope.calculator import (
    BaseHoroscopeCalculator,
    BirthDate,
    FallbackHoroscopeCalculator,
    parse_birth_date,
)
from gunamilan.domain.horoscope.errors import CalculationError
from gunamilan.domain.horoscope.schemas import DerivedHoroscope


logger = logging.getLogger(__name__)


class HoroscopeService:
    """
    Tries each configured calculator in order; the calendar fallback
    always runs last.
    """

    def __init__(self, calculators: Optional[List[BaseHoroscopeCalculator]] = None):
        self.calculators = list(calculators or [])
        self.fallback = FallbackHoroscopeCalculator()

    def calculate_horoscope(
        self,
        date_of_birth: BirthDate,
        time_of_birth: Optional[str] = None,
        place_of_birth: Optional[str] = None,
    ) -> DerivedHoroscope:
        """
        Raises InvalidBirthDataError if the date of birth is missing or
        malformed.
        """
        birth_date = parse_birth_date(date_of_birth)

        for calculator in self.calculators:
            try:
                return calculator.calculate(birth_date, time_of_birth, place_of_birth)
            except CalculationError as e:
                logger.warning(f"{type(calculator).__name__} failed, trying next: {e}")

        return self.fallback.calculate(birth_date, time_of_birth, place_of_birth)
