"""
Report Charts - query-result-to-chart pipeline.

This package turns a tabular SQL result plus a user chart configuration into a
renderer-ready chart description and draws it with Plotly:
- Field classification, series building and scale decisions (chart_pipeline)
- Plotly rendering of bar, line, pie and table charts (chart_renderer)
- Shared settings, schemas and utilities (shared_lib)

Architecture:
    src/
    ├── shared_lib/        # Settings, pydantic schemas, logging, JSON helpers
    ├── chart_pipeline/    # QueryResult + ChartConfig -> ChartSpec
    ├── chart_renderer/    # ChartSpec -> plotly Figure / HTML
    └── chart_session/     # Command-line entry point
"""

__version__ = "1.0.0"

from src.chart_pipeline import ChartSpecAssembler
from src.chart_renderer import ReportChartRenderer

__all__ = [
    "ChartSpecAssembler",
    "ReportChartRenderer",
]
