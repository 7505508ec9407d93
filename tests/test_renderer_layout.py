"""Tests for bar, line, pie and legend geometry."""

from __future__ import annotations

import pytest

from src.chart_renderer.layout import (
    LABEL_INSIDE,
    LABEL_OUTSIDE,
    axis_titles,
    build_legend,
    compute_bar_layout,
    compute_line_tracks,
    compute_pie_slices,
    normalize_track,
)
from src.chart_renderer.utils.color_manager import ColorManager

pytestmark = pytest.mark.unit


def test_bar_fractions_use_shared_max(make_spec) -> None:
    """Divide every bar by the largest series max on a shared scale."""

    spec = make_spec(series={"a": [50.0, 100.0], "b": [25.0, 10.0]})

    groups = compute_bar_layout(spec)

    assert [[seg.fraction for seg in group] for group in groups] == [[0.5, 0.25], [1.0, 0.1]]


def test_bar_fractions_use_own_max_under_separate_scale(make_spec) -> None:
    """Divide each bar by its own series max when scaled independently."""

    spec = make_spec(
        series={"sales": [100.0, 9000.0], "profit": [2.0, 3.0]},
        use_separate_scale=True,
    )

    groups = compute_bar_layout(spec)

    assert groups[1][0].fraction == 1.0
    assert groups[0][1].fraction == pytest.approx(2 / 3)
    assert groups[1][1].fraction == 1.0


def test_negative_values_clamp_to_zero_height(make_spec) -> None:
    """Draw negative values as zero-height bars."""

    spec = make_spec(series={"delta": [-40.0, 80.0]})

    groups = compute_bar_layout(spec)

    assert groups[0][0].fraction == 0.0
    assert groups[0][0].formatted == "-40"


def test_value_labels_only_for_positive_values_when_enabled(make_spec) -> None:
    """Label positive bars only when showValuesOnBars is set."""

    hidden = compute_bar_layout(make_spec(series={"s": [10.0, 100.0]}))
    shown = compute_bar_layout(
        make_spec(series={"s": [0.0, 100.0]}, show_values_on_bars=True)
    )

    assert all(seg.label is None for group in hidden for seg in group)
    assert shown[0][0].label is None
    assert shown[1][0].label == "100"


def test_label_goes_inside_at_half_height(make_spec) -> None:
    """Place labels inside bars reaching half the scale, outside otherwise."""

    spec = make_spec(
        categories=["a", "b", "c"],
        series={"s": [50.0, 49.0, 100.0]},
        formats={"s": "currency"},
        show_values_on_bars=True,
    )

    groups = compute_bar_layout(spec)

    assert [g[0].label_position for g in groups] == [LABEL_INSIDE, LABEL_OUTSIDE, LABEL_INSIDE]
    assert [g[0].label for g in groups] == ["$50", "$49", "$100"]


def test_inside_threshold_is_configurable(make_spec) -> None:
    """Honour a custom inside-label height fraction."""

    spec = make_spec(series={"s": [50.0, 100.0]}, show_values_on_bars=True)

    groups = compute_bar_layout(spec, inside_min_fraction=0.75)

    assert groups[0][0].label_position == LABEL_OUTSIDE


def test_line_tracks_normalize_each_series_by_its_own_max(make_spec) -> None:
    """Place points at i / (n - 1) and value / max(1, max)."""

    spec = make_spec(
        categories=["a", "b", "c"],
        series={"big": [0.0, 50.0, 200.0], "small": [0.5, 0.25, 0.0]},
    )

    tracks = compute_line_tracks(spec)

    assert tracks[0].points == [(0.0, 0.0), (0.5, 0.25), (1.0, 1.0)]
    assert tracks[1].points == [(0.0, 0.5), (0.5, 0.25), (1.0, 0.0)]
    assert tracks[1].max_value == 1.0


def test_single_point_and_empty_tracks() -> None:
    """Handle one-point and empty series without dividing by zero."""

    assert normalize_track([5.0]) == [(0.0, 1.0)]
    assert normalize_track([]) == []


def test_pie_uses_first_series_and_formats_text(make_spec) -> None:
    """Compute percentages of the first series with formatted slice text."""

    spec = make_spec(
        categories=["a", "b", "c"],
        series={"sales": [50.0, 25.0, 25.0], "ignored": [1.0, 1.0, 1.0]},
        formats={"sales": "currency:2"},
    )

    slices = compute_pie_slices(spec)

    assert [s.percent for s in slices] == ["50.0", "25.0", "25.0"]
    assert slices[0].text == "$50.00 (50.0%)"
    assert [s.color for s in slices] == ["#2f80ed", "#27ae60", "#f2994a"]


def test_pie_rounds_percent_to_one_decimal(make_spec) -> None:
    """Show one decimal place for slice percentages."""

    spec = make_spec(categories=["a", "b", "c"], series={"s": [1.0, 1.0, 1.0]})

    assert [s.percent for s in compute_pie_slices(spec)] == ["33.3", "33.3", "33.3"]


def test_pie_without_series_has_zero_slices_per_category(make_spec) -> None:
    """Give every category a 0.0% slice when the spec carries no series."""

    slices = compute_pie_slices(make_spec(chart_type="pie", series={}))

    assert [s.category for s in slices] == ["East", "West"]
    assert [s.value for s in slices] == [0.0, 0.0]
    assert [s.text for s in slices] == ["0 (0.0%)", "0 (0.0%)"]


def test_legend_cycles_palette_and_names_unnamed_series(make_spec) -> None:
    """Assign palette colours cyclically and label unnamed series."""

    series = {f"s{i}": [1.0, 1.0] for i in range(8)}
    series[""] = [1.0, 1.0]
    spec = make_spec(series=series)

    legend = build_legend(spec)

    assert legend[0].color == legend[7].color == "#2f80ed"
    assert legend[6].color == "#f2c94c"
    assert legend[8].name == "Series 9"
    assert ColorManager().get_color_sequence(3) == ["#2f80ed", "#27ae60", "#f2994a"]


def test_axis_titles_trim_x_and_default_y(make_spec) -> None:
    """Trim the X title and fall back to "Value" for an empty Y title."""

    spec = make_spec().model_copy(update={"x_label": "  Region ", "y_label": ""})

    assert axis_titles(spec) == ("Region", "Value")
    assert axis_titles(make_spec()) == ("Region", "Sales")
