"""Tests for category and series construction."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from src.chart_pipeline.series_builder import SeriesBuilder, stringify_category

pytestmark = pytest.mark.unit


def test_build_aligns_every_series_to_categories() -> None:
    """Give every series exactly one value per category, in value field order."""

    rows = [
        {"region": "East", "sales": 100, "profit": "2"},
        {"region": "West", "sales": "n/a", "profit": None},
        {"region": None, "sales": 5.5},
    ]

    categories, series = SeriesBuilder().build(rows, "region", ["profit", "sales"])

    assert categories == ["East", "West", ""]
    assert [s.name for s in series] == ["profit", "sales"]
    assert series[0].data == [2.0, 0.0, 0.0]
    assert series[1].data == [100.0, 0.0, 5.5]
    assert all(len(s.data) == len(categories) for s in series)


def test_display_names_override_series_name_only() -> None:
    """Apply display names while keeping the raw field as original_name."""

    rows = [{"region": "East", "total_sales": 1}]

    _, series = SeriesBuilder().build(
        rows, "region", ["total_sales"], display_names={"total_sales": "Revenue"}
    )

    assert series[0].name == "Revenue"
    assert series[0].original_name == "total_sales"


def test_empty_display_name_keeps_field_name() -> None:
    """Ignore blank display name overrides."""

    _, series = SeriesBuilder().build(
        [{"r": "a", "v": 1}], "r", ["v"], display_names={"v": ""}
    )

    assert series[0].name == "v"


def test_no_value_fields_yields_categories_only() -> None:
    """Build categories even when only the category field is selected."""

    categories, series = SeriesBuilder().build([{"r": "a"}, {"r": "b"}], "r", [])

    assert categories == ["a", "b"]
    assert series == []


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, ""),
        (float("nan"), ""),
        ("East", "East"),
        (2015.0, "2015"),
        (12.5, "12.5"),
        (7, "7"),
        (True, "true"),
        (date(2024, 1, 31), "2024-01-31"),
        (datetime(2024, 1, 31, 8, 30), "2024-01-31T08:30:00"),
    ],
)
def test_stringify_category(value, expected: str) -> None:
    """Render category cells as stable labels."""

    assert stringify_category(value) == expected


def test_values_with_units_use_their_leading_number() -> None:
    """Read "45%" as 45 and "12.5 kg" as 12.5 rather than zero."""

    rows = [
        {"region": "East", "share": "45%"},
        {"region": "West", "share": "12.5 kg"},
        {"region": "North", "share": "about 3"},
    ]

    _, series = SeriesBuilder().build(rows, "region", ["share"])

    assert series[0].data == [45.0, 12.5, 0.0]
