"""
Guna Milan (Ashta Koot Matching) Service

Calculates the 36-point compatibility score between two horoscopes.
"""

import logging
from typing import Any, Mapping, Optional, Tuple, Union

from gunamilan.domain.horoscope.constants import (
    Nakshatra,
    Rashi,
    coerce_nakshatra,
    coerce_rashi,
)
from gunamilan.domain.horoscope.dosha_detector import DoshaDetector
from gunamilan.domain.horoscope.factors import FACTOR_SCORERS, RASHI
from gunamilan.domain.horoscope.schemas import (
    HoroscopeAttributes,
    HoroscopeEcho,
    MatchResult,
    MatchStatus,
)
from gunamilan.domain.horoscope.scoring import (
    INSUFFICIENT_DATA_MESSAGE,
    aggregate,
    classify,
)


logger = logging.getLogger(__name__)

HoroscopeInput = Union[HoroscopeAttributes, Mapping[str, Any], None]


class _Normalized:
    """
    One person's attributes after the single normalization step.
    """

    __slots__ = ("rashi", "nakshatra", "star_sign")

    def __init__(
        self,
        rashi: Optional[Rashi],
        nakshatra: Optional[Nakshatra],
        star_sign: Optional[str],
    ):
        self.rashi = rashi
        self.nakshatra = nakshatra
        self.star_sign = star_sign

    def echo(self) -> HoroscopeEcho:
        return HoroscopeEcho(
            rashi=self.rashi.value if self.rashi else None,
            nakshatra=self.nakshatra.value if self.nakshatra else None,
            star_sign=self.star_sign,
        )


def _field(source: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = source.get(key)
        if value is not None:
            return value
    return None


def normalize_horoscope(horoscope: HoroscopeInput) -> _Normalized:
    """
    Reduce any accepted input shape to enum-or-None values.

    Empty strings, unknown names and missing keys are all absent.
    """
    if isinstance(horoscope, HoroscopeAttributes):
        rashi, nakshatra, star_sign = horoscope.rashi, horoscope.nakshatra, horoscope.star_sign
    elif isinstance(horoscope, Mapping):
        rashi = _field(horoscope, "rashi")
        nakshatra = _field(horoscope, "nakshatra")
        star_sign = _field(horoscope, "starSign", "star_sign")
    else:
        rashi = nakshatra = star_sign = None

    if isinstance(star_sign, str):
        star_sign = star_sign.strip() or None
    else:
        star_sign = None

    return _Normalized(coerce_rashi(rashi), coerce_nakshatra(nakshatra), star_sign)


class MatchingService:
    """
    Facade over the Guna Milan scorers.

    Stateless: every call builds a fresh MatchResult from its two inputs
    and the read-only tables, so one instance can be shared freely.
    """

    def __init__(self):
        self.dosha_detector = DoshaDetector()

    # ─────────────────────────────────────────────
    # Public API
    # ─────────────────────────────────────────────

    def calculate_matching(
        self,
        horoscope1: HoroscopeInput,
        horoscope2: HoroscopeInput,
    ) -> MatchResult:
        """
        Calculate Guna Milan compatibility between two people.

        Args:
            horoscope1: First person's attributes (model, mapping or None)
            horoscope2: Second person's attributes

        Returns:
            MatchResult. Never raises for missing or unknown attributes;
            callers branch on status == insufficient_data instead.
        """
        first = normalize_horoscope(horoscope1)
        second = normalize_horoscope(horoscope2)

        if not self._has_basic_info(first, second):
            logger.debug("Insufficient horoscope data for matching")
            return MatchResult(
                total_score=0,
                percentage=0,
                status=MatchStatus.INSUFFICIENT_DATA,
                message=INSUFFICIENT_DATA_MESSAGE,
                doshas=[],
                details=[],
                horoscope1=first.echo(),
                horoscope2=second.echo(),
            )

        details = [
            scorer(*self._inputs_for(kind, first, second))
            for _, scorer, kind in FACTOR_SCORERS
        ]

        total_score, percentage = aggregate(details)
        status, message = classify(percentage)
        doshas = self.dosha_detector.detect(details)

        logger.debug(
            "Guna Milan: %s/36 (%s%%, %s), doshas=%s",
            total_score, percentage, status.value, doshas,
        )

        return MatchResult(
            total_score=total_score,
            percentage=percentage,
            status=status,
            message=message,
            doshas=doshas,
            details=details,
            horoscope1=first.echo(),
            horoscope2=second.echo(),
        )

    # ─────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────

    @staticmethod
    def _has_basic_info(first: _Normalized, second: _Normalized) -> bool:
        has_rashis = first.rashi is not None and second.rashi is not None
        has_nakshatras = first.nakshatra is not None and second.nakshatra is not None
        return has_rashis or has_nakshatras

    @staticmethod
    def _inputs_for(kind: str, first: _Normalized, second: _Normalized) -> Tuple:
        if kind == RASHI:
            return first.rashi, second.rashi
        return first.nakshatra, second.nakshatra


_default_service = MatchingService()


def calculate_matching(
    horoscope1: HoroscopeInput,
    horoscope2: HoroscopeInput,
) -> MatchResult:
    """
    Module-level shortcut using a shared MatchingService.
    """
    return _default_service.calculate_matching(horoscope1, horoscope2)
