"""Tests for the report-chart command line."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest
from rich.console import Console

from src.chart_session.cli import load_chart_config, load_query_result, main
from src.shared_lib.models.schema import QueryResult

pytestmark = pytest.mark.integration


def _console() -> Console:
    return Console(file=io.StringIO(), width=120)


def _write_result(tmp_path: Path) -> Path:
    path = tmp_path / "result.json"
    path.write_text(
        json.dumps(
            {
                "executedAt": "2024-05-01T10:00:00",
                "data": {
                    "columns": ["region", "sales", "profit"],
                    "rows": [
                        {"region": "East", "sales": 100, "profit": 2},
                        {"region": "West", "sales": 9000, "profit": 3},
                    ],
                    "rowCount": 2,
                    "executionTimeMs": 4,
                },
                "error": None,
            }
        ),
        encoding="utf-8",
    )
    return path


def _args(tmp_path: Path, *extra: str) -> list[str]:
    return [*extra, "--log-file", str(tmp_path / "logs" / "errors.log")]


def test_cli_renders_html_with_default_config(tmp_path: Path) -> None:
    """Render every column as a bar chart and save the HTML."""

    console = _console()
    output_dir = tmp_path / "charts"

    code = main(
        _args(tmp_path, "--result", str(_write_result(tmp_path)), "--output-dir", str(output_dir)),
        console=console,
    )

    assert code == 0
    assert len(list(output_dir.glob("chart_bar_*.html"))) == 1
    text = console.file.getvalue()
    assert "Rendered bar chart" in text
    assert "scaled independently" in text


def test_cli_prints_spec_json_with_yaml_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Apply a YAML config and print the assembled spec as JSON."""

    config_path = tmp_path / "chart.yaml"
    config_path.write_text(
        "selectedFields:\n"
        "  region: true\n"
        "  sales: true\n"
        "chartType: pie\n"
        "seriesFormats:\n"
        "  sales: currency\n"
        "seriesDisplayNames:\n"
        "  sales: Revenue\n",
        encoding="utf-8",
    )

    code = main(
        _args(
            tmp_path,
            "--result", str(_write_result(tmp_path)),
            "--config", str(config_path),
            "--no-html",
            "--json",
        ),
        console=_console(),
    )

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["type"] == "pie"
    assert payload["categories"] == ["East", "West"]
    assert payload["series"][0]["name"] == "Revenue"
    assert payload["seriesFormats"] == {"Revenue": "currency"}


def test_cli_type_override_and_csv_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Read CSV results with pandas and override the chart type."""

    csv_path = tmp_path / "sales.csv"
    csv_path.write_text("region,sales\nEast,10\nWest,\n", encoding="utf-8")

    code = main(
        _args(tmp_path, "--result", str(csv_path), "--type", "table", "--no-html", "--json"),
        console=_console(),
    )

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload == {
        "type": "table",
        "columns": ["region", "sales"],
        "rows": [{"region": "East", "sales": 10.0}, {"region": "West", "sales": None}],
    }


def test_cli_empty_selection_shows_empty_state(tmp_path: Path) -> None:
    """Show the empty state when the config selects nothing."""

    config_path = tmp_path / "chart.json"
    config_path.write_text(json.dumps({"selectedFields": {"region": False}}), encoding="utf-8")
    console = _console()

    code = main(
        _args(tmp_path, "--result", str(_write_result(tmp_path)), "--config", str(config_path), "--no-html"),
        console=console,
    )

    assert code == 0
    assert "Select at least one field" in console.file.getvalue()


def test_cli_invalid_config_exits_with_2(tmp_path: Path) -> None:
    """Exit with status 2 when the config fails validation."""

    config_path = tmp_path / "chart.json"
    config_path.write_text(json.dumps({"chartType": "radar"}), encoding="utf-8")
    console = _console()

    code = main(
        _args(tmp_path, "--result", str(_write_result(tmp_path)), "--config", str(config_path)),
        console=console,
    )

    assert code == 2
    assert "Invalid payload" in console.file.getvalue()


def test_cli_failed_query_and_missing_file_exit_with_1(tmp_path: Path) -> None:
    """Exit with status 1 for error envelopes and unreadable inputs."""

    failed = tmp_path / "failed.json"
    failed.write_text(json.dumps({"data": None, "error": "timeout"}), encoding="utf-8")

    assert main(_args(tmp_path, "--result", str(failed)), console=_console()) == 1
    assert main(_args(tmp_path, "--result", str(tmp_path / "missing.json")), console=_console()) == 1


def test_loaders_accept_bare_rows_and_default_config(tmp_path: Path) -> None:
    """Load a bare list of rows and derive the initial config from it."""

    path = tmp_path / "rows.json"
    path.write_text(json.dumps([{"a": "x", "b": 1}]), encoding="utf-8")

    result = load_query_result(path)
    config = load_chart_config(None, result)

    assert isinstance(result, QueryResult)
    assert result.columns == ["a", "b"]
    assert config.selected_field_names() == ["a", "b"]
    assert config.display_options.show_values_on_bars is True
