"""
ChartSpecAssembler - Main orchestrator of the chart pipeline.

Pipeline:
    QueryResult + field selection + ChartConfig
        ↓
    [FieldRoleClassifier]   category field + value fields
        ↓
    [SeriesBuilder]         aligned categories + numeric series
        ↓
    [ScaleReconciler]       shared vs separate scale
        ↓
    ChartSpec (bar/line/pie) or TableSpec (table)

The assembler is pure: no I/O, no caching, no shared state. It is called again
whenever the configuration or the data changes, and it never raises for data
problems; it yields a complete spec or None.
"""

from typing import Any, Dict, Mapping, Optional, Sequence, Union

from src.chart_pipeline.field_classifier import FieldRoleClassifier
from src.chart_pipeline.field_resolver import FieldValueResolver
from src.chart_pipeline.scale_reconciler import ScaleReconciler
from src.chart_pipeline.series_builder import SeriesBuilder
from src.shared_lib.core.settings import DEFAULT_CHART_TYPE
from src.shared_lib.models.schema import (
    AxisLabels,
    ChartConfig,
    ChartSpec,
    DisplayOptions,
    QueryResult,
    RenderableSpec,
    SeriesSpec,
    TableSpec,
)
from src.shared_lib.utils.logger import get_logger

logger = get_logger(__name__)

FieldSelectionInput = Union[Mapping[str, bool], Sequence[str]]

PLOT_CHART_TYPES = ("bar", "line", "pie")


def selected_field_names(selection: Optional[FieldSelectionInput]) -> list:
    """Selected fields in display order from a selection mapping or list."""
    if not selection:
        return []
    if isinstance(selection, Mapping):
        return [field for field, selected in selection.items() if selected]
    return [field for field in selection if field]


class ChartSpecAssembler:
    """
    Builds a renderer-ready spec from rows and chart settings.

    Example Usage:
        >>> assembler = ChartSpecAssembler()
        >>> spec = assembler.assemble(
        ...     selected_fields=["region", "sales"],
        ...     rows=[{"region": "East", "sales": 100}, {"region": "West", "sales": 9000}],
        ...     chart_type="bar",
        ... )
        >>> spec.categories
        ['East', 'West']
        >>> spec.display_options.use_separate_scale
        False
    """

    def __init__(
        self,
        resolver: Optional[FieldValueResolver] = None,
        classifier: Optional[FieldRoleClassifier] = None,
        series_builder: Optional[SeriesBuilder] = None,
        scale_reconciler: Optional[ScaleReconciler] = None,
    ):
        """
        Initialize the assembler.

        Args:
            resolver: Shared field resolver (one per assembler keeps the key index warm)
            classifier: Field role classifier (default uses the shared resolver)
            series_builder: Series builder (default uses the shared resolver)
            scale_reconciler: Scale reconciler (default ratio from settings)
        """
        self.resolver = resolver or FieldValueResolver()
        self.classifier = classifier or FieldRoleClassifier(resolver=self.resolver)
        self.series_builder = series_builder or SeriesBuilder(resolver=self.resolver)
        self.scale_reconciler = scale_reconciler or ScaleReconciler()

    def assemble(
        self,
        selected_fields: Optional[FieldSelectionInput],
        rows: Sequence[Mapping[str, Any]],
        chart_type: Optional[str] = None,
        series_formats: Optional[Dict[str, str]] = None,
        display_names: Optional[Dict[str, str]] = None,
        axis_labels: Optional[AxisLabels] = None,
        display_options: Optional[DisplayOptions] = None,
    ) -> Optional[RenderableSpec]:
        """
        Assemble a ChartSpec or TableSpec.

        Args:
            selected_fields: Field selection mapping (column -> bool) or ordered list
            rows: Query result rows
            chart_type: "bar", "line", "pie" or "table" (default from settings)
            series_formats: Field -> format string, looked up by raw field name
            display_names: Field -> series display name
            axis_labels: Axis titles
            display_options: User display options (useSeparateScale is recomputed)

        Returns:
            TableSpec for tables, ChartSpec otherwise, None when nothing is
            selected or no category field can be established
        """
        selected = selected_field_names(selected_fields)
        if not selected:
            logger.debug("No fields selected, nothing to chart")
            return None

        chart_type = chart_type or DEFAULT_CHART_TYPE
        rows = list(rows or [])

        if chart_type == "table":
            return TableSpec(columns=selected, rows=rows)

        if chart_type not in PLOT_CHART_TYPES:
            logger.warning(f"Unsupported chart type '{chart_type}', nothing to chart")
            return None

        roles = self.classifier.classify(selected, rows)
        if roles.category_field is None:
            logger.warning("No category field could be established, nothing to chart")
            return None

        categories, series = self.series_builder.build(
            rows,
            category_field=roles.category_field,
            value_fields=roles.value_fields,
            display_names=display_names,
        )
        scale = self.scale_reconciler.reconcile(series)

        axis_labels = axis_labels or AxisLabels()
        display_options = (display_options or DisplayOptions()).model_copy(
            update={"use_separate_scale": scale.use_separate_scale}
        )

        spec = ChartSpec(
            type=chart_type,
            categories=categories,
            series=series,
            x_label=axis_labels.x,
            y_label=axis_labels.y,
            series_formats=self._formats_by_display_name(series, series_formats or {}),
            display_options=display_options,
        )

        logger.debug(
            f"Assembled {chart_type} spec: {len(categories)} categories, "
            f"{len(series)} series, separate_scale={scale.use_separate_scale}"
        )
        return spec

    def assemble_from_config(
        self, query_result: QueryResult, chart_config: ChartConfig
    ) -> Optional[RenderableSpec]:
        """Assemble from a QueryResult and a saved ChartConfig."""
        return self.assemble(
            selected_fields=chart_config.selected_fields,
            rows=query_result.rows,
            chart_type=chart_config.chart_type,
            series_formats=chart_config.series_formats,
            display_names=chart_config.series_display_names,
            axis_labels=chart_config.axis_labels,
            display_options=chart_config.display_options,
        )

    @staticmethod
    def _formats_by_display_name(
        series: Sequence[SeriesSpec], series_formats: Dict[str, str]
    ) -> Dict[str, str]:
        """Re-key formats from raw field names to series display names."""
        formats: Dict[str, str] = {}
        for s in series:
            fmt = series_formats.get(s.original_name)
            if fmt:
                formats[s.name] = fmt
        return formats
