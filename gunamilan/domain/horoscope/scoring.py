from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Tuple

from gunamilan.domain.horoscope.schemas import (
    FactorResult,
    MatchStatus,
    MAX_TOTAL_SCORE,
)


INSUFFICIENT_DATA_MESSAGE = "Insufficient horoscope information for matching"

# (lower bound on percentage, status, message), highest band first
STATUS_BANDS = (
    (75, MatchStatus.EXCELLENT, "Excellent match! Highly compatible"),
    (60, MatchStatus.GOOD, "Good match with good compatibility"),
    (45, MatchStatus.MODERATE, "Moderate compatibility"),
    (30, MatchStatus.AVERAGE, "Average compatibility"),
    (0, MatchStatus.LOW, "Low compatibility - Not recommended"),
)


def to_percentage(total_score: int) -> int:
    """
    Percentage of the 36-point scale, rounded half up. Totals above 36
    give more than 100.
    """
    ratio = Decimal(total_score) * 100 / MAX_TOTAL_SCORE
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def aggregate(details: Iterable[FactorResult]) -> Tuple[int, int]:
    """
    Sum the factor scores.

    Returns:
        (total_score, percentage)
    """
    total_score = sum(factor.score for factor in details)
    return total_score, to_percentage(total_score)


def classify(percentage: int) -> Tuple[MatchStatus, str]:
    """
    Map a percentage to its status band and message.
    """
    for lower_bound, status, message in STATUS_BANDS:
        if percentage >= lower_bound:
            return status, message
    return MatchStatus.LOW, STATUS_BANDS[-1][2]
