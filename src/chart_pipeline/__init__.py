"""
Chart Pipeline

Transforms a tabular query result and a chart configuration into a
renderer-ready ChartSpec.

Modules:
    - field_resolver: Fuzzy column lookup and numeric coercion
    - field_classifier: Category field vs value fields
    - series_builder: Aligned categories and numeric series
    - scale_reconciler: Shared vs separate scaling
    - value_formatter / category_label_formatter: Presentation strings
    - assembler: Orchestrates the stages above
"""

from src.chart_pipeline.assembler import ChartSpecAssembler
from src.chart_pipeline.category_label_formatter import (
    CategoryLabelFormatter,
    format_category_label,
)
from src.chart_pipeline.field_classifier import FieldRoleClassifier, FieldRoles
from src.chart_pipeline.field_resolver import FieldValueResolver, coerce_numeric
from src.chart_pipeline.scale_reconciler import ScaleDecision, ScaleReconciler
from src.chart_pipeline.series_builder import SeriesBuilder
from src.chart_pipeline.value_formatter import ValueFormatter, format_value

__version__ = "1.0.0"
__all__ = [
    "ChartSpecAssembler",
    "CategoryLabelFormatter",
    "FieldRoleClassifier",
    "FieldRoles",
    "FieldValueResolver",
    "ScaleDecision",
    "ScaleReconciler",
    "SeriesBuilder",
    "ValueFormatter",
    "coerce_numeric",
    "format_category_label",
    "format_value",
]
