"""
ReportChartRenderer - Main orchestrator of the rendering layer.

Workflow:
    ChartSpec / TableSpec (from ChartSpecAssembler)
        ↓
    [GeneratorRouter]      chart type -> generator
        ↓
    [Generator.validate]   spec shape checks
        ↓
    [Generator.generate]   plotly Figure
        ↓
    [FileSaver]            optional HTML + JSON on disk

Render failures never propagate: they are logged and returned as a result
dict with ``status="error"``.
"""

import time
from pathlib import Path
from typing import Any, Dict, Optional

from src.chart_pipeline.assembler import ChartSpecAssembler
from src.chart_renderer.core.settings import (
    OUTPUT_DIR,
    SAVE_HTML_DEFAULT,
    SAVE_JSON_DEFAULT,
)
from src.chart_renderer.generators.router import GeneratorRouter
from src.chart_renderer.utils.file_saver import FileSaver
from src.chart_renderer.utils.plot_styler import PlotStyler
from src.shared_lib.models.schema import ChartConfig, QueryResult, RenderableSpec
from src.shared_lib.utils.logger import get_logger

logger = get_logger(__name__)

STATUS_SUCCESS = "success"
STATUS_EMPTY = "empty"
STATUS_ERROR = "error"

EMPTY_STATE_MESSAGE = "Select at least one field to build a chart."


class ReportChartRenderer:
    """
    Renders assembled report specs into interactive Plotly figures.

    Example Usage:
        >>> renderer = ReportChartRenderer(save_html=False)
        >>> result = renderer.render(spec)
        >>> result["status"]
        'success'
        >>> result["figure"].data[0].type
        'bar'
    """

    def __init__(
        self,
        output_dir: Optional[Path] = None,
        save_html: bool = SAVE_HTML_DEFAULT,
        save_json: bool = SAVE_JSON_DEFAULT,
        styler: Optional[PlotStyler] = None,
        assembler: Optional[ChartSpecAssembler] = None,
    ):
        """
        Initialize the renderer.

        Args:
            output_dir: Directory for saved charts (default from settings)
            save_html: Save each rendered figure as HTML
            save_json: Save each rendered spec as JSON next to the HTML
            styler: Shared PlotStyler (palette, layout, labels)
            assembler: Assembler used by render_config()
        """
        self.output_dir = Path(output_dir or OUTPUT_DIR)
        self.save_html = save_html
        self.save_json = save_json
        self.styler = styler or PlotStyler()
        self.router = GeneratorRouter(self.styler)
        self.assembler = assembler or ChartSpecAssembler()
        self._file_saver: Optional[FileSaver] = None

        self._stats: Dict[str, Any] = {
            "total_renders": 0,
            "successful_renders": 0,
            "failed_renders": 0,
            "empty_renders": 0,
            "total_render_time": 0.0,
            "average_render_time": 0.0,
            "charts_by_type": {},
        }

        logger.info(
            f"ReportChartRenderer initialized (save_html={save_html}, "
            f"save_json={save_json}, output_dir={self.output_dir})"
        )

    @property
    def file_saver(self) -> FileSaver:
        """FileSaver created on first use so that rendering alone never touches disk."""
        if self._file_saver is None:
            self._file_saver = FileSaver(self.output_dir)
        return self._file_saver

    def render(self, spec: Optional[RenderableSpec]) -> Dict[str, Any]:
        """
        Render a spec into a Plotly figure.

        Args:
            spec: Output of ChartSpecAssembler; None means nothing is selected

        Returns:
            Dict containing:
            - status: "success", "empty" or "error"
            - chart_type: str or None
            - figure: plotly.graph_objects.Figure (if success)
            - file_path: str path of the saved HTML (if saved)
            - spec_path: str path of the saved JSON spec (if saved)
            - message: empty-state text (if status="empty")
            - error: {"type", "message"} (if status="error")
            - render_time: seconds spent
        """
        start_time = time.perf_counter()
        self._stats["total_renders"] += 1

        if spec is None:
            logger.info("Nothing selected, returning empty state")
            self._stats["empty_renders"] += 1
            return self._create_response(
                STATUS_EMPTY, None, start_time, message=EMPTY_STATE_MESSAGE
            )

        chart_type = spec.type
        logger.info(f"Rendering '{chart_type}' chart")

        try:
            generator = self.router.get_generator(chart_type)
        except ValueError as e:
            logger.error(f"Generator selection failed: {e}")
            return self._create_error_response(
                chart_type, "UnsupportedChartTypeError", str(e), start_time
            )

        try:
            generator.validate(spec)
        except ValueError as e:
            logger.error(f"Spec validation failed for {chart_type}: {e}")
            return self._create_error_response(
                chart_type, "SpecValidationError", str(e), start_time
            )

        try:
            figure = generator.generate(spec)
        except Exception as e:
            logger.error(f"Figure generation failed: {e}", exc_info=True)
            return self._create_error_response(
                chart_type,
                "GenerationError",
                f"Failed to generate figure: {e}",
                start_time,
            )

        file_path = spec_path = None
        if self.save_html:
            try:
                file_path = str(self.file_saver.save_html(figure, chart_type=chart_type))
            except IOError as e:
                logger.warning(f"Failed to save HTML: {e}")
        if self.save_json:
            try:
                spec_path = str(self.file_saver.save_json(spec))
            except IOError as e:
                logger.warning(f"Failed to save JSON spec: {e}")

        response = self._create_response(
            STATUS_SUCCESS,
            chart_type,
            start_time,
            figure=figure,
            file_path=file_path,
            spec_path=spec_path,
        )
        self._update_stats(chart_type, response["render_time"], success=True)

        logger.info(
            f"Chart rendered: {chart_type} with {generator.__class__.__name__} "
            f"({response['render_time']:.3f}s, output={file_path or 'not saved'})"
        )
        return response

    def render_config(
        self, query_result: QueryResult, chart_config: ChartConfig
    ) -> Dict[str, Any]:
        """Assemble a spec from a result and a saved config, then render it."""
        spec = self.assembler.assemble_from_config(query_result, chart_config)
        response = self.render(spec)
        response["spec"] = spec
        return response

    def get_statistics(self) -> Dict[str, Any]:
        """
        Usage statistics: totals per outcome, render times, charts by type
        and ``success_rate`` (percentage of attempted renders that succeeded).
        """
        stats = dict(self._stats)
        stats["charts_by_type"] = dict(self._stats["charts_by_type"])

        attempted = stats["successful_renders"] + stats["failed_renders"]
        if attempted > 0:
            stats["success_rate"] = stats["successful_renders"] / attempted * 100
        else:
            stats["success_rate"] = 0.0

        return stats

    def _update_stats(self, chart_type: str, render_time: float, success: bool) -> None:
        if success:
            self._stats["successful_renders"] += 1
        else:
            self._stats["failed_renders"] += 1

        self._stats["total_render_time"] += render_time
        self._stats["average_render_time"] = (
            self._stats["total_render_time"] / self._stats["total_renders"]
        )

        by_type = self._stats["charts_by_type"]
        by_type[chart_type] = by_type.get(chart_type, 0) + 1

    def _create_response(
        self, status: str, chart_type: Optional[str], start_time: float, **fields: Any
    ) -> Dict[str, Any]:
        response = {
            "status": status,
            "chart_type": chart_type,
            "figure": None,
            "file_path": None,
            "spec_path": None,
            "error": None,
            "render_time": time.perf_counter() - start_time,
        }
        response.update(fields)
        return response

    def _create_error_response(
        self, chart_type: str, error_type: str, error_message: str, start_time: float
    ) -> Dict[str, Any]:
        """Create standardized error response."""
        response = self._create_response(
            STATUS_ERROR,
            chart_type,
            start_time,
            error={"type": error_type, "message": error_message},
        )
        self._update_stats(chart_type, response["render_time"], success=False)
        return response
