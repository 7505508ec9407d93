"""
ScaleReconciler - decides whether series share one scale.

A series whose maximum is tiny next to another's would render as flat bars on
a shared axis. When the largest series max exceeds the smallest by more than
``ratio_threshold`` (default 20x), each series is scaled by its own max.
"""

from dataclasses import dataclass, field
from typing import List, Sequence

from src.shared_lib.core.settings import SEPARATE_SCALE_RATIO
from src.shared_lib.models.schema import SeriesSpec
from src.shared_lib.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ScaleDecision:
    """
    Scale facts for a set of series.

    Attributes:
        series_max: Per-series max (never below 1), in series order
        shared_max: Largest series max, the common denominator
        min_series_max: Smallest positive series max
        use_separate_scale: True when each series uses its own max
    """

    series_max: List[float] = field(default_factory=list)
    shared_max: float = 1.0
    min_series_max: float = 1.0
    use_separate_scale: bool = False

    @property
    def ratio(self) -> float:
        return self.shared_max / self.min_series_max

    def denominator_for(self, index: int) -> float:
        """Bar height denominator for the series at *index*."""
        if self.use_separate_scale and index < len(self.series_max):
            return self.series_max[index] or 1.0
        return self.shared_max


def series_maximum(data: Sequence[float]) -> float:
    """Max of *data* floored at 0, then floored to 1 to avoid division by zero."""
    return max(1.0, max(data, default=0.0), 0.0)


class ScaleReconciler:
    """Computes a ScaleDecision from built series."""

    def __init__(self, ratio_threshold: float = SEPARATE_SCALE_RATIO):
        self.ratio_threshold = ratio_threshold

    def reconcile(self, series: Sequence[SeriesSpec]) -> ScaleDecision:
        series_max = [series_maximum(s.data) for s in series]
        shared_max = max(series_max, default=1.0)

        positive = [value for value in series_max if value > 0]
        if len(series_max) < 2 or not positive:
            min_series_max = 1.0
        else:
            min_series_max = min(positive)

        use_separate_scale = (
            len(series_max) >= 2 and shared_max / min_series_max > self.ratio_threshold
        )

        if use_separate_scale:
            logger.info(
                f"Series maxima differ by {shared_max / min_series_max:,.1f}x "
                f"(> {self.ratio_threshold:g}x), scaling series independently"
            )

        return ScaleDecision(
            series_max=series_max,
            shared_max=shared_max,
            min_series_max=min_series_max,
            use_separate_scale=use_separate_scale,
        )
