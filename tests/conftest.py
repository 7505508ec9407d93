"""Pytest fixtures shared across the chart pipeline and renderer tests."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from src.chart_pipeline.assembler import ChartSpecAssembler
from src.shared_lib.models.schema import ChartSpec, DisplayOptions, SeriesSpec


@pytest.fixture
def sales_rows() -> list[dict]:
    """Return two regions whose sales differ by 90x."""

    return [
        {"region": "East", "sales": 100},
        {"region": "West", "sales": 9000},
    ]


@pytest.fixture
def sales_profit_rows() -> list[dict]:
    """Return rows with a large sales series and a tiny profit series."""

    return [
        {"region": "East", "sales": 100, "profit": 2},
        {"region": "West", "sales": 9000, "profit": 3},
    ]


@pytest.fixture
def assembler() -> ChartSpecAssembler:
    """Return an assembler with default settings."""

    return ChartSpecAssembler()


@pytest.fixture
def make_spec():
    """Return a factory for ChartSpec instances used by renderer tests."""

    def _make(
        chart_type: str = "bar",
        categories: Sequence[str] = ("East", "West"),
        series: dict[str, list[float]] | None = None,
        formats: dict[str, str] | None = None,
        **display: bool,
    ) -> ChartSpec:
        series = series if series is not None else {"sales": [100.0, 9000.0]}
        return ChartSpec(
            type=chart_type,
            categories=list(categories),
            series=[
                SeriesSpec(name=name, original_name=name, data=data)
                for name, data in series.items()
            ],
            x_label="Region",
            y_label="Sales",
            series_formats=formats or {},
            display_options=DisplayOptions(**display),
        )

    return _make


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no filesystem access.
    - `integration`: tests that write files or drive the command line.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            invalid.append(item.nodeid)

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            f"`@pytest.mark.integration`.\nOffending tests:\n{joined}"
        )
