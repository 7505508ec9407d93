"""Data models shared by the chart pipeline and the renderer."""

from src.shared_lib.models.schema import (
    AxisLabels,
    ChartConfig,
    ChartSpec,
    ChartTypeLiteral,
    DisplayOptions,
    QueryResult,
    RenderableSpec,
    SeriesSpec,
    TableSpec,
)

__all__ = [
    "AxisLabels",
    "ChartConfig",
    "ChartSpec",
    "ChartTypeLiteral",
    "DisplayOptions",
    "QueryResult",
    "RenderableSpec",
    "SeriesSpec",
    "TableSpec",
]
