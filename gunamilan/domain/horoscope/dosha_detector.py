from typing import Iterable, List

from gunamilan.domain.horoscope.schemas import FactorName, FactorResult


# Only these koots raise a dosha, reported in this order
DOSHA_LABELS = (
    (FactorName.NADI, "Nadi Dosha - Same Nadi"),
    (FactorName.GANA, "Gana Dosha - Incompatible Gana"),
    (FactorName.BHAKOOT, "Bhakoot Dosha - Incompatible signs"),
)


class DoshaDetector:
    """
    Flags named incompatibilities in a set of koot scores.

    A dosha is reported whenever its factor scored zero, whether that
    zero came from an incompatible pair or from missing data.
    """

    def detect(
        self,
        details: Iterable[FactorResult],
    ) -> List[str]:
        scores = {factor.name: factor.score for factor in details}

        doshas: List[str] = []
        for name, label in DOSHA_LABELS:
            if scores.get(name) == 0:
                doshas.append(label)

        return doshas
