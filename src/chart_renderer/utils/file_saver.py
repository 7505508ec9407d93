"""
File Saver Utility for report charts

Saves rendered charts to disk:
- HTML (interactive Plotly figure)
- JSON (the ChartSpec/TableSpec payload the figure was rendered from)
"""

from datetime import datetime
from pathlib import Path
from typing import Optional, Union

import plotly.graph_objects as go

from src.chart_renderer.core.settings import PLOTLY_JS_MODE
from src.shared_lib.models.schema import RenderableSpec
from src.shared_lib.utils.json_serialization import json_dumps
from src.shared_lib.utils.logger import get_logger

logger = get_logger(__name__)


def resolve_plotlyjs_mode(mode: str) -> Union[str, bool]:
    """Map a CHART_PLOTLY_JS_MODE value to ``write_html(include_plotlyjs=...)``."""
    if mode == "inline":
        return True
    return mode


class FileSaver:
    """
    Manager for saving report charts to disk.

    Example Usage:
        >>> saver = FileSaver(output_dir=Path("charts"))
        >>> html_path = saver.save_html(fig, chart_type="bar")
        >>> json_path = saver.save_json(spec)
    """

    def __init__(self, output_dir: Path):
        """
        Initialize FileSaver.

        Args:
            output_dir: Directory where charts will be saved
                        Will be created if it doesn't exist
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        logger.debug(f"FileSaver initialized with output_dir: {self.output_dir}")

    def save_html(
        self,
        fig: go.Figure,
        filename: Optional[str] = None,
        chart_type: str = "chart",
        include_plotlyjs: Optional[str] = None,
    ) -> Path:
        """
        Save chart as interactive HTML file.

        Args:
            fig: Plotly Figure object to save
            filename: Custom filename (auto-generated if None)
            chart_type: Used in the generated filename
            include_plotlyjs: "cdn", "inline" or "directory" (default from settings)

        Returns:
            Path: Full path to saved HTML file

        Raises:
            IOError: If file cannot be written
        """
        filepath = self.output_dir / (filename or self._generate_filename(chart_type, "html"))
        mode = resolve_plotlyjs_mode(include_plotlyjs or PLOTLY_JS_MODE)

        try:
            fig.write_html(
                str(filepath),
                include_plotlyjs=mode,
                config={"displayModeBar": True, "displaylogo": False},
            )
        except Exception as e:
            logger.error(f"Failed to save HTML file: {e}", exc_info=True)
            raise IOError(f"Could not save HTML to {filepath}: {e}") from e

        logger.info(f"Chart saved as HTML: {filepath} ({self._get_file_size(filepath)})")
        return filepath

    def save_json(self, spec: RenderableSpec, filename: Optional[str] = None) -> Path:
        """
        Save the spec payload (camelCase keys) as JSON.

        Raises:
            IOError: If file cannot be written
        """
        filepath = self.output_dir / (filename or self._generate_filename(spec.type, "json"))

        try:
            filepath.write_text(json_dumps(spec.to_payload(), indent=2), encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to save JSON file: {e}", exc_info=True)
            raise IOError(f"Could not save JSON to {filepath}: {e}") from e

        logger.info(f"Chart spec saved as JSON: {filepath}")
        return filepath

    def _generate_filename(self, chart_type: str, extension: str) -> str:
        """
        Generate unique filename based on timestamp and chart type.

        Format: chart_{chart_type}_{timestamp}.{extension}
        Example: chart_bar_20251112_143022_123456.html
        """
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        filename = f"chart_{chart_type or 'chart'}_{timestamp}.{extension}"
        logger.debug(f"Generated filename: {filename}")
        return filename

    def _get_file_size(self, filepath: Path) -> str:
        """Human-readable file size (e.g. "1.2 MB", "345.0 KB")."""
        size_bytes = filepath.stat().st_size

        if size_bytes < 1024:
            return f"{size_bytes} bytes"
        elif size_bytes < 1024 * 1024:
            return f"{size_bytes / 1024:.1f} KB"
        return f"{size_bytes / (1024 * 1024):.1f} MB"
