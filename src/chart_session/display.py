"""
Display Module

Rich display helpers for the report-chart command line.
"""

from typing import Any, Dict, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from src.chart_pipeline.scale_reconciler import series_maximum
from src.chart_pipeline.value_formatter import ValueFormatter
from src.chart_renderer.core.settings import SEPARATE_SCALE_NOTE
from src.shared_lib.models.schema import ChartSpec, QueryResult, RenderableSpec


class DisplayHelper:
    """
    Helper class for Rich display formatting.

    Provides consistent formatting for query results, assembled specs and
    render outcomes.
    """

    def __init__(self, console: Optional[Console] = None):
        """
        Initialize display helper.

        Args:
            console: Rich Console instance (creates new if None)
        """
        self.console = console or Console()
        self.formatter = ValueFormatter()

    def show_query_result(self, result: QueryResult):
        """One-line description of the loaded result."""
        self.console.print(
            f"[cyan]ℹ Loaded {result.row_count} row(s) with "
            f"{len(result.columns)} column(s):[/cyan] {', '.join(result.columns)}"
        )

    def show_spec(self, spec: RenderableSpec):
        """
        Display an assembled spec.

        Charts show one line per series with its format and max, followed by
        the scale decision. Tables show their column list and row count.
        """
        if not isinstance(spec, ChartSpec):
            self.console.print(
                Panel(
                    f"[bold]Columns:[/bold] {', '.join(spec.columns)}\n"
                    f"[bold]Rows:[/bold] {len(spec.rows)}",
                    title="Table",
                    border_style="cyan",
                    box=box.ROUNDED,
                )
            )
            return

        table = Table(
            title=f"{spec.type.title()} chart: {len(spec.categories)} categories",
            box=box.ROUNDED,
            show_header=True,
            header_style="bold magenta",
        )
        table.add_column("#", justify="right", style="dim")
        table.add_column("Series", style="cyan")
        table.add_column("Field")
        table.add_column("Format")
        table.add_column("Max", justify="right", style="green")

        for i, series in enumerate(spec.series, start=1):
            fmt = spec.format_for(series)
            table.add_row(
                str(i),
                series.name,
                series.original_name,
                fmt or "number",
                str(self.formatter.format(series_maximum(series.data), fmt)),
            )

        self.console.print(table)

        if spec.display_options.use_separate_scale:
            self.show_warning(SEPARATE_SCALE_NOTE)
        else:
            self.show_info("All series share one scale")

    def show_render_result(self, result: Dict[str, Any]):
        """Outcome of ReportChartRenderer.render()."""
        if result["status"] == "error":
            error = result.get("error") or {}
            self.show_error(error.get("message", "Render failed"), error.get("type"))
            return

        self.show_success(
            f"Rendered {result['chart_type']} chart in {result['render_time']:.3f}s"
        )
        if result.get("file_path"):
            self.show_info(f"HTML: {result['file_path']}")
        if result.get("spec_path"):
            self.show_info(f"Spec: {result['spec_path']}")

    def show_empty_state(self, message: str):
        self.console.print(
            Panel(f"[dim]{message}[/dim]", border_style="dim", box=box.ROUNDED)
        )

    def show_error(self, error_msg: str, details: Optional[str] = None):
        """
        Display error message.

        Args:
            error_msg: Main error message
            details: Additional error details
        """
        content = f"[bold red]Error:[/bold red] {error_msg}"
        if details:
            content += f"\n\n[dim]{details}[/dim]"

        panel = Panel(content, title="Error", border_style="red", box=box.ROUNDED)
        self.console.print(panel)

    def show_warning(self, warning_msg: str):
        self.console.print(f"[yellow]⚠ {warning_msg}[/yellow]")

    def show_success(self, success_msg: str):
        self.console.print(f"[green]✓ {success_msg}[/green]")

    def show_info(self, info_msg: str):
        self.console.print(f"[cyan]ℹ {info_msg}[/cyan]")
