"""
report-chart command line.

Loads a query result (JSON payload or CSV) and an optional chart config
(JSON or YAML), assembles the chart spec, renders it with Plotly and prints
a summary.

Usage:
    report-chart --result result.json --config chart.yaml --output-dir charts
    report-chart --result sales.csv --type pie --no-html --json
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

import pandas as pd
import yaml
from pydantic import ValidationError
from rich.console import Console

from src.chart_renderer.report_chart_renderer import (
    EMPTY_STATE_MESSAGE,
    STATUS_EMPTY,
    STATUS_ERROR,
    ReportChartRenderer,
)
from src.chart_renderer.core.settings import (
    validate_settings as validate_renderer_settings,
)
from src.chart_session.display import DisplayHelper
from src.shared_lib.core.settings import VALID_CHART_TYPES, validate_settings
from src.shared_lib.models.schema import ChartConfig, QueryResult
from src.shared_lib.utils.json_serialization import json_dumps
from src.shared_lib.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_PAYLOAD = 2


def load_query_result(path: Path) -> QueryResult:
    """
    Read a query result file.

    ``.csv`` files are read with pandas; anything else is parsed as JSON and
    may be the flat result, the cached-result envelope or a bare list of rows.
    """
    if path.suffix.lower() == ".csv":
        return QueryResult.from_dataframe(pd.read_csv(path))

    payload = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(payload, list):
        payload = {"rows": payload}
    return QueryResult.from_payload(payload)


def load_chart_config(path: Optional[Path], result: QueryResult) -> ChartConfig:
    """Read a JSON or YAML chart config; without one, every column is selected."""
    if path is None:
        return ChartConfig.initial_for_columns(result.columns)

    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in (".yaml", ".yml"):
        payload = yaml.safe_load(text)
    else:
        payload = json.loads(text)
    return ChartConfig.from_payload(payload)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="report-chart",
        description="Render a report query result as an interactive chart",
    )
    parser.add_argument(
        "--result", "-r", required=True, type=Path,
        help="Query result file (.json payload or .csv)",
    )
    parser.add_argument(
        "--config", "-c", type=Path,
        help="Chart config file (.json, .yaml or .yml)",
    )
    parser.add_argument(
        "--type", "-t", choices=VALID_CHART_TYPES,
        help="Override the configured chart type",
    )
    parser.add_argument("--output-dir", "-o", type=Path, help="Directory for saved charts")
    parser.add_argument("--no-html", action="store_true", help="Do not save the HTML chart")
    parser.add_argument(
        "--save-spec", action="store_true", help="Save the assembled spec as JSON"
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the assembled spec as JSON"
    )
    parser.add_argument("--log-file", help="Log file (default from LOG_FILE)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    return parser


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    """
    Entry point for the ``report-chart`` command.

    Returns:
        0 on success or empty selection, 1 on load/render failure,
        2 when a payload fails validation
    """
    args = build_parser().parse_args(argv)

    setup_logging(
        level="DEBUG" if args.verbose else None,
        log_file=args.log_file,
        console_output=args.verbose,
    )
    # stdout is reserved for the spec when --json is set
    if console is None and args.json:
        console = Console(stderr=True)
    display = DisplayHelper(console)

    try:
        validate_settings()
        validate_renderer_settings()
    except ValueError as e:
        logger.error(f"Invalid settings: {e}")
        display.show_error("Invalid settings", str(e))
        return EXIT_FAILURE

    try:
        result = load_query_result(args.result)
        config = load_chart_config(args.config, result)
    except ValidationError as e:
        logger.error(f"Invalid payload: {e}")
        display.show_error("Invalid payload", str(e))
        return EXIT_INVALID_PAYLOAD
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Could not load input: {e}")
        display.show_error(f"Could not load input: {e}")
        return EXIT_FAILURE

    if args.type:
        config = config.with_updates(chart_type=args.type)

    display.show_query_result(result)

    renderer = ReportChartRenderer(
        output_dir=args.output_dir,
        save_html=not args.no_html,
        save_json=args.save_spec,
    )
    outcome = renderer.render_config(result, config)
    spec = outcome["spec"]

    if args.json:
        sys.stdout.write(json_dumps(spec.to_payload() if spec else None, indent=2) + "\n")

    if outcome["status"] == STATUS_EMPTY:
        display.show_empty_state(EMPTY_STATE_MESSAGE)
        return EXIT_OK

    if spec is not None:
        display.show_spec(spec)
    display.show_render_result(outcome)

    return EXIT_FAILURE if outcome["status"] == STATUS_ERROR else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
