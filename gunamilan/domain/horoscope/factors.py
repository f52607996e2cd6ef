"""
Ashta Koot factor scorers.

Each scorer takes the two people's values for one attribute (rashi or
nakshatra, raw strings or enum members) and returns a FactorResult.
Missing or unknown values short-circuit to a no-data result before any
table is read.
"""

from typing import Callable, Optional, Tuple, Union

from gunamilan.domain.horoscope.constants import (
    Gana,
    Nakshatra,
    NAKSHATRA_COUNT,
    NAKSHATRA_INDEX,
    Rashi,
    coerce_nakshatra,
    coerce_rashi,
)
from gunamilan.domain.horoscope.schemas import FACTOR_MAX, FactorName, FactorResult
from gunamilan.domain.horoscope.tables import (
    BHAKOOT_INCOMPATIBLE_PAIRS,
    FRIENDLY_GROUP_OF,
    GANA_OF,
    NADI_OF,
    RASHI_COMPATIBILITY,
    RASHI_OPPOSITES,
    VARNA_CLASS,
)


RashiInput = Union[str, Rashi, None]
NakshatraInput = Union[str, Nakshatra, None]

# Tara: nakshatras at most this far apart (circularly) are "nearby"
TARA_NEARBY_DISTANCE = 6

RASHI_MISSING = "Rashi information not available"
NAKSHATRA_MISSING = "Nakshatra information not available"


def _result(name: FactorName, score: int, matched: bool, detail: str) -> FactorResult:
    return FactorResult(
        name=name,
        score=score,
        max=FACTOR_MAX[name],
        matched=matched,
        detail=detail,
    )


def _no_data(name: FactorName, detail: str) -> FactorResult:
    return _result(name, 0, False, detail)


def _rashi_pair(rashi1: RashiInput, rashi2: RashiInput) -> Optional[Tuple[Rashi, Rashi]]:
    first, second = coerce_rashi(rashi1), coerce_rashi(rashi2)
    if first is None or second is None:
        return None
    return first, second


def _nakshatra_pair(
    nakshatra1: NakshatraInput,
    nakshatra2: NakshatraInput,
) -> Optional[Tuple[Nakshatra, Nakshatra]]:
    first, second = coerce_nakshatra(nakshatra1), coerce_nakshatra(nakshatra2)
    if first is None or second is None:
        return None
    return first, second


def _is_blank(value) -> bool:
    if isinstance(value, str):
        return not value.strip()
    return not value


def _same_friendly_group(first: Nakshatra, second: Nakshatra) -> bool:
    group = FRIENDLY_GROUP_OF.get(first)
    return group is not None and group == FRIENDLY_GROUP_OF.get(second)


# ─────────────────────────────────────────────
# Rashi-based factors
# ─────────────────────────────────────────────

def score_varna(rashi1: RashiInput, rashi2: RashiInput) -> FactorResult:
    """Varna (4): varna class of each moon sign."""
    pair = _rashi_pair(rashi1, rashi2)
    if pair is None:
        return _no_data(FactorName.VARNA, RASHI_MISSING)

    diff = abs(VARNA_CLASS[pair[0]] - VARNA_CLASS[pair[1]])
    if diff == 0:
        return _result(FactorName.VARNA, 4, True, "Same Varna - Perfect match")
    if diff == 1:
        return _result(FactorName.VARNA, 2, True, "Adjacent Varna - Good match")
    return _result(FactorName.VARNA, 0, True, "Different Varna - Basic compatibility")


def score_vasya(rashi1: RashiInput, rashi2: RashiInput) -> FactorResult:
    """Vasya (2): mutual attraction of the signs."""
    pair = _rashi_pair(rashi1, rashi2)
    if pair is None:
        return _no_data(FactorName.VASYA, RASHI_MISSING)
    first, second = pair

    if RASHI_OPPOSITES[first] == second or RASHI_OPPOSITES[second] == first:
        return _result(FactorName.VASYA, 2, True, "Opposite signs - Perfect attraction")
    if second in RASHI_COMPATIBILITY[first].compatible:
        return _result(FactorName.VASYA, 1, True, "Compatible signs - Good attraction")
    return _result(FactorName.VASYA, 0, True, "Basic compatibility")


def score_graha_maitri(rashi1: RashiInput, rashi2: RashiInput) -> FactorResult:
    """Graha Maitri (5): friendship of the sign lords."""
    pair = _rashi_pair(rashi1, rashi2)
    if pair is None:
        return _no_data(FactorName.GRAHA_MAITRI, RASHI_MISSING)
    first, second = pair

    compatibility = RASHI_COMPATIBILITY[first]
    if second in compatibility.compatible:
        return _result(FactorName.GRAHA_MAITRI, 5, True, "Planetary friendship - Excellent")
    if second in compatibility.neutral:
        return _result(FactorName.GRAHA_MAITRI, 3, True, "Planetary neutrality - Good")
    return _result(FactorName.GRAHA_MAITRI, 1, True, "Basic planetary compatibility")


def score_bhakoot(rashi1: RashiInput, rashi2: RashiInput) -> FactorResult:
    """Bhakoot (7): relative placement of the moon signs."""
    pair = _rashi_pair(rashi1, rashi2)
    if pair is None:
        return _no_data(FactorName.BHAKOOT, RASHI_MISSING)
    first, second = pair

    if frozenset(pair) in BHAKOOT_INCOMPATIBLE_PAIRS:
        return _result(FactorName.BHAKOOT, 0, False, "Bhakoot incompatible - Not recommended")
    if second in RASHI_COMPATIBILITY[first].compatible:
        return _result(FactorName.BHAKOOT, 7, True, "Bhakoot compatible - Excellent")
    return _result(FactorName.BHAKOOT, 3, True, "Bhakoot compatibility - Moderate")


# ─────────────────────────────────────────────
# Nakshatra-based factors
# ─────────────────────────────────────────────

def score_tara(nakshatra1: NakshatraInput, nakshatra2: NakshatraInput) -> FactorResult:
    """
    Tara (3): friendly group first, then circular distance between
    the nakshatras.

    A name outside the canonical 27 scores the average (1) instead of
    the no-data result, as long as both values are present.
    """
    if _is_blank(nakshatra1) or _is_blank(nakshatra2):
        return _no_data(FactorName.TARA, NAKSHATRA_MISSING)

    first, second = coerce_nakshatra(nakshatra1), coerce_nakshatra(nakshatra2)
    if first is None or second is None:
        return _result(FactorName.TARA, 1, True, "Nakshatra compatibility - Average")

    if _same_friendly_group(first, second):
        return _result(FactorName.TARA, 3, True, "Same friendly group - Perfect match")

    distance = abs(NAKSHATRA_INDEX[first] - NAKSHATRA_INDEX[second])
    distance = min(distance, NAKSHATRA_COUNT - distance)

    if distance == 0:
        return _result(FactorName.TARA, 3, True, "Same/Adjacent Nakshatra - Perfect")
    if distance <= TARA_NEARBY_DISTANCE:
        return _result(FactorName.TARA, 2, True, "Nearby Nakshatras - Good match")
    return _result(FactorName.TARA, 1, True, "Nakshatra compatibility - Average")


def score_yoni(nakshatra1: NakshatraInput, nakshatra2: NakshatraInput) -> FactorResult:
    """Yoni (4): same friendly group or not."""
    pair = _nakshatra_pair(nakshatra1, nakshatra2)
    if pair is None:
        return _no_data(FactorName.YONI, NAKSHATRA_MISSING)

    if _same_friendly_group(*pair):
        return _result(FactorName.YONI, 4, True, "Same Yoni group - Perfect compatibility")
    return _result(FactorName.YONI, 2, True, "Yoni compatibility - Moderate")


def score_gana(nakshatra1: NakshatraInput, nakshatra2: NakshatraInput) -> FactorResult:
    """Gana (6): temperament of each nakshatra."""
    pair = _nakshatra_pair(nakshatra1, nakshatra2)
    if pair is None:
        return _no_data(FactorName.GANA, NAKSHATRA_MISSING)

    ganas = {GANA_OF[pair[0]], GANA_OF[pair[1]]}
    if len(ganas) == 1:
        return _result(FactorName.GANA, 6, True, "Same Gana - Perfect match")
    if ganas == {Gana.DEVA, Gana.MANUSHYA}:
        return _result(FactorName.GANA, 3, True, "Deva-Manushya combination - Acceptable")
    return _result(
        FactorName.GANA, 0, False, "Incompatible Gana combination - Not recommended"
    )


def score_nadi(nakshatra1: NakshatraInput, nakshatra2: NakshatraInput) -> FactorResult:
    """Nadi (8): the heaviest koot; same nadi is a dosha."""
    pair = _nakshatra_pair(nakshatra1, nakshatra2)
    if pair is None:
        return _no_data(FactorName.NADI, NAKSHATRA_MISSING)

    if NADI_OF[pair[0]] == NADI_OF[pair[1]]:
        return _result(FactorName.NADI, 0, False, "Same Nadi - Highly incompatible (Dosha)")
    return _result(FactorName.NADI, 8, True, "Different Nadi - Perfect match")


# ─────────────────────────────────────────────
# Registry
# ─────────────────────────────────────────────

RASHI = "rashi"
NAKSHATRA = "nakshatra"

Scorer = Callable[[Optional[str], Optional[str]], FactorResult]

# Fixed output order of MatchResult.details
FACTOR_SCORERS: Tuple[Tuple[FactorName, Scorer, str], ...] = (
    (FactorName.VARNA, score_varna, RASHI),
    (FactorName.VASYA, score_vasya, RASHI),
    (FactorName.TARA, score_tara, NAKSHATRA),
    (FactorName.YONI, score_yoni, NAKSHATRA),
    (FactorName.GRAHA_MAITRI, score_graha_maitri, RASHI),
    (FactorName.GANA, score_gana, NAKSHATRA),
    (FactorName.BHAKOOT, score_bhakoot, RASHI),
    (FactorName.NADI, score_nadi, NAKSHATRA),
)
