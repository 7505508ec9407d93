"""Tests for logging setup."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from src.shared_lib.utils.logger import get_logger, setup_logging

pytestmark = pytest.mark.unit


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Put the root logger back the way pytest configured it."""

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_setup_logging_writes_errors_to_file_and_info_to_stderr(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], restore_root_logger: None
) -> None:
    """Keep stdout clean and record only errors in the log file."""

    log_file = tmp_path / "logs" / "errors.log"
    setup_logging(level="INFO", log_file=str(log_file))
    logger = get_logger("report_charts.test")

    logger.info("assembled spec")
    logger.error("render failed")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "assembled spec" in captured.err
    contents = log_file.read_text(encoding="utf-8")
    assert "render failed" in contents
    assert "assembled spec" not in contents


def test_setup_logging_quiets_listed_loggers(
    tmp_path: Path, restore_root_logger: None
) -> None:
    """Raise the listed third-party loggers to WARNING."""

    setup_logging(
        level="DEBUG",
        log_file=str(tmp_path / "errors.log"),
        console_output=False,
        quiet=("noisy.library",),
    )

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("noisy.library").level == logging.WARNING
