"""
Layout geometry for report charts.

Pure functions that turn a ChartSpec into the numbers the plotly generators
draw: bar height fractions and label placement, normalised line tracks, pie
slice percentages and legend entries. Nothing here touches plotly, so the
rules can be checked without building figures.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from src.chart_pipeline.scale_reconciler import ScaleDecision, series_maximum
from src.chart_pipeline.value_formatter import ValueFormatter
from src.chart_renderer.core.settings import (
    BAR_LABEL_INSIDE_MIN_FRACTION,
    DEFAULT_Y_AXIS_TITLE,
)
from src.chart_renderer.utils.color_manager import ColorManager
from src.shared_lib.models.schema import ChartSpec, SeriesSpec

LABEL_INSIDE = "inside"
LABEL_OUTSIDE = "outside"


@dataclass(frozen=True)
class LegendEntry:
    index: int
    name: str
    color: str


@dataclass(frozen=True)
class BarSegment:
    """One bar: a series value inside a category group."""

    category_index: int
    series_index: int
    value: float
    fraction: float
    formatted: str
    label: Optional[str] = None
    label_position: Optional[str] = None


@dataclass(frozen=True)
class LineTrack:
    """One series drawn on its own track, points normalised to 0..1."""

    series_index: int
    name: str
    color: str
    points: List[Tuple[float, float]]
    max_value: float


@dataclass(frozen=True)
class PieSlice:
    category: str
    value: float
    percent: str
    text: str
    color: str


def series_label(series: SeriesSpec, index: int) -> str:
    """Display name of a series; unnamed series become "Series <n>"."""
    return series.name or f"Series {index + 1}"


def build_legend(
    spec: ChartSpec, color_manager: Optional[ColorManager] = None
) -> List[LegendEntry]:
    colors = color_manager or ColorManager()
    return [
        LegendEntry(index=i, name=series_label(s, i), color=colors.color_for(i))
        for i, s in enumerate(spec.series)
    ]


def axis_titles(spec: ChartSpec) -> Tuple[str, str]:
    """X title trimmed; an empty Y title falls back to "Value"."""
    return spec.x_label.strip(), spec.y_label or DEFAULT_Y_AXIS_TITLE


def scale_for_spec(spec: ChartSpec) -> ScaleDecision:
    """Denominators for the spec's series, honouring its useSeparateScale flag."""
    series_max = [series_maximum(s.data) for s in spec.series]
    return ScaleDecision(
        series_max=series_max,
        shared_max=max(series_max, default=1.0),
        use_separate_scale=spec.display_options.use_separate_scale,
    )


def compute_bar_layout(
    spec: ChartSpec,
    formatter: Optional[ValueFormatter] = None,
    inside_min_fraction: float = BAR_LABEL_INSIDE_MIN_FRACTION,
) -> List[List[BarSegment]]:
    """
    Bar geometry grouped by category.

    Height fraction is ``value / denominator`` where the denominator is the
    series' own max under separate scaling and the shared max otherwise.
    Negative values clamp to a zero-height bar. A value label is produced only
    when ``showValuesOnBars`` is set and the value is positive; it sits inside
    the bar when the fraction reaches ``inside_min_fraction``.

    Returns:
        One list per category, one BarSegment per series in series order
    """
    formatter = formatter or ValueFormatter()
    scale = scale_for_spec(spec)
    show_values = spec.display_options.show_values_on_bars

    groups: List[List[BarSegment]] = []
    for ci in range(len(spec.categories)):
        group = []
        for si, series in enumerate(spec.series):
            value = series.data[ci]
            fraction = max(0.0, value) / scale.denominator_for(si)
            formatted = formatter.format(value, spec.format_for(series))

            label = position = None
            if show_values and value > 0:
                label = formatted
                position = LABEL_INSIDE if fraction >= inside_min_fraction else LABEL_OUTSIDE

            group.append(
                BarSegment(
                    category_index=ci,
                    series_index=si,
                    value=value,
                    fraction=fraction,
                    formatted=formatted,
                    label=label,
                    label_position=position,
                )
            )
        groups.append(group)
    return groups


def normalize_track(data: Sequence[float]) -> List[Tuple[float, float]]:
    """
    Sparkline points for one series.

    ``x = i / max(1, n - 1)`` and ``y = value / max(1, max(values))``; each
    series uses its own max regardless of useSeparateScale.
    """
    peak = max(1.0, *data) if data else 1.0
    span = max(1, len(data) - 1)
    return [(i / span, value / peak) for i, value in enumerate(data)]


def compute_line_tracks(
    spec: ChartSpec, color_manager: Optional[ColorManager] = None
) -> List[LineTrack]:
    colors = color_manager or ColorManager()
    return [
        LineTrack(
            series_index=i,
            name=series_label(s, i),
            color=colors.color_for(i),
            points=normalize_track(s.data),
            max_value=max(1.0, *s.data) if s.data else 1.0,
        )
        for i, s in enumerate(spec.series)
    ]


def compute_pie_slices(
    spec: ChartSpec,
    formatter: Optional[ValueFormatter] = None,
    color_manager: Optional[ColorManager] = None,
) -> List[PieSlice]:
    """
    Pie slices from the first series only.

    A zero total renders every slice as ``0.0%``. Without any series each
    category still gets a zero-valued slice. Slice text is
    ``"<formatted value> (<pct>%)"``.
    """
    formatter = formatter or ValueFormatter()
    colors = color_manager or ColorManager()
    if spec.series:
        series = spec.series[0]
        fmt = spec.format_for(series)
        values = series.data
    else:
        fmt = None
        values = [0.0] * len(spec.categories)
    total = sum(values)

    slices = []
    for i, (category, value) in enumerate(zip(spec.categories, values)):
        percent = f"{value / total * 100:.1f}" if total else "0.0"
        formatted = formatter.format(value, fmt)
        slices.append(
            PieSlice(
                category=category,
                value=value,
                percent=percent,
                text=f"{formatted} ({percent}%)",
                color=colors.color_for(i),
            )
        )
    return slices
