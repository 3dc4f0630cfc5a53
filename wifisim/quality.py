"""Signal quality bands used for colouring readings.

strong   > 70 %   green
moderate > 40 %   amber
weak     otherwise red
"""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class QualityBand:
    label: str
    color: str
    min_percent: float  # exclusive lower bound


QUALITY_BANDS: List[QualityBand] = [
    QualityBand("Strong", "#16a34a", 70.0),
    QualityBand("Moderate", "#f59e0b", 40.0),
    QualityBand("Weak", "#dc2626", float("-inf")),
]


def signal_quality(strength_percent: float) -> QualityBand:
    for band in QUALITY_BANDS:
        if strength_percent > band.min_percent:
            return band
    return QUALITY_BANDS[-1]


def color_for_strength(strength_percent: float) -> str:
    return signal_quality(strength_percent).color
