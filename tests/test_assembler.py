"""Tests for ChartSpecAssembler end to end over the pipeline stages."""

from __future__ import annotations

import pytest

from src.chart_pipeline.assembler import ChartSpecAssembler, selected_field_names
from src.chart_renderer.layout import compute_pie_slices
from src.shared_lib.models.schema import (
    AxisLabels,
    ChartConfig,
    ChartSpec,
    DisplayOptions,
    QueryResult,
    TableSpec,
)

pytestmark = pytest.mark.unit


def test_single_series_bar_chart(assembler: ChartSpecAssembler, sales_rows) -> None:
    """Build categories from the text field and one series from the numeric one."""

    spec = assembler.assemble(["region", "sales"], sales_rows, "bar")

    assert isinstance(spec, ChartSpec)
    assert spec.categories == ["East", "West"]
    assert [(s.name, s.data) for s in spec.series] == [("sales", [100.0, 9000.0])]
    assert spec.display_options.use_separate_scale is False


def test_mismatched_series_ranges_use_separate_scale(
    assembler: ChartSpecAssembler, sales_profit_rows
) -> None:
    """Flag separate scaling when series maxima differ by more than 20x."""

    spec = assembler.assemble(["region", "sales", "profit"], sales_profit_rows, "bar")

    assert [s.data for s in spec.series] == [[100.0, 9000.0], [2.0, 3.0]]
    assert spec.display_options.use_separate_scale is True


def test_unit_suffixed_values_plot_their_numbers(
    assembler: ChartSpecAssembler,
) -> None:
    """Chart percentage and unit strings by their leading number."""

    rows = [{"region": "East", "share": "45%"}, {"region": "West", "share": "12.5 kg"}]

    spec = assembler.assemble(["region", "share"], rows, "bar")

    assert spec.categories == ["East", "West"]
    assert spec.series[0].data == [45.0, 12.5]


def test_table_returns_selected_columns_and_rows_unmodified(
    assembler: ChartSpecAssembler,
) -> None:
    """Pass rows through untouched for the table chart type."""

    spec = assembler.assemble(["a", "b"], [{"a": 1, "b": 2}], "table")

    assert isinstance(spec, TableSpec)
    assert spec.to_payload() == {"type": "table", "columns": ["a", "b"], "rows": [{"a": 1, "b": 2}]}


def test_pie_with_all_zero_values_reports_zero_percent(
    assembler: ChartSpecAssembler,
) -> None:
    """Render every slice as 0.0% when the pie total is zero."""

    rows = [{"region": "East", "sales": 0}, {"region": "West", "sales": 0}]

    spec = assembler.assemble(["region", "sales"], rows, "pie")
    slices = compute_pie_slices(spec)

    assert [s.percent for s in slices] == ["0.0", "0.0"]
    assert [s.text for s in slices] == ["0 (0.0%)", "0 (0.0%)"]


@pytest.mark.parametrize("selection", [None, [], {}, {"region": False, "sales": False}])
def test_nothing_selected_returns_none(
    assembler: ChartSpecAssembler, sales_rows, selection
) -> None:
    """Return no spec when no field is selected."""

    assert assembler.assemble(selection, sales_rows, "bar") is None


def test_unknown_chart_type_returns_none(assembler: ChartSpecAssembler, sales_rows) -> None:
    """Return no spec for chart types no renderer supports."""

    assert assembler.assemble(["region", "sales"], sales_rows, "radar") is None


def test_selection_mapping_preserves_display_order() -> None:
    """Keep the insertion order of selected fields."""

    selection = {"sales": True, "cost": False, "region": True}

    assert selected_field_names(selection) == ["sales", "region"]
    assert selected_field_names(["b", "", "a"]) == ["b", "a"]


def test_formats_and_display_names_are_rekeyed_by_series_name(
    assembler: ChartSpecAssembler, sales_rows
) -> None:
    """Look up formats by raw field and expose them by display name."""

    spec = assembler.assemble(
        ["region", "sales"],
        sales_rows,
        "bar",
        series_formats={"sales": "currency", "region": "number"},
        display_names={"sales": "Revenue"},
        axis_labels=AxisLabels(x="Region", y="USD"),
        display_options=DisplayOptions(show_values_on_bars=True, use_separate_scale=True),
    )

    assert spec.series[0].name == "Revenue"
    assert spec.series_formats == {"Revenue": "currency"}
    assert (spec.x_label, spec.y_label) == ("Region", "USD")
    assert spec.display_options.show_values_on_bars is True
    assert spec.display_options.use_separate_scale is False


def test_every_series_is_aligned_to_categories(assembler: ChartSpecAssembler) -> None:
    """Give each series one value per category whatever the cell contents."""

    rows = [
        {"Product": "A", "Units": "3", "Price": None},
        {"Product": "B", "Units": "n/a", "Price": 9.5},
        {"Product": "C"},
    ]

    for chart_type in ("bar", "line", "pie"):
        spec = assembler.assemble(["product", "units", "price"], rows, chart_type)
        assert spec.categories == ["A", "B", "C"]
        assert all(len(s.data) == len(spec.categories) for s in spec.series)


def test_no_rows_yields_empty_categories(assembler: ChartSpecAssembler) -> None:
    """Build an empty chart when the result has no rows."""

    spec = assembler.assemble(["region", "sales"], [], "line")

    assert spec.categories == []
    assert [s.data for s in spec.series] == [[]]


def test_assemble_from_config(sales_profit_rows) -> None:
    """Assemble from a saved config and a query result."""

    result = QueryResult(rows=sales_profit_rows)
    config = ChartConfig.from_payload(
        {
            "selectedFields": {"region": True, "profit": True, "sales": False},
            "chartType": "pie",
            "seriesFormats": {"profit": "percentage"},
        }
    )

    spec = ChartSpecAssembler().assemble_from_config(result, config)

    assert spec.type == "pie"
    assert [s.name for s in spec.series] == ["profit"]
    assert spec.series_formats == {"profit": "percentage"}
