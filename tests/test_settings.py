"""Tests for pipeline and renderer settings."""

from __future__ import annotations

import pytest

from src.chart_renderer.core import settings as renderer_settings
from src.shared_lib.core import settings as pipeline_settings

pytestmark = pytest.mark.unit


def test_default_settings_are_valid() -> None:
    """Accept the shipped defaults."""

    assert pipeline_settings.validate_settings() is True
    assert renderer_settings.validate_settings() is True


def test_pipeline_settings_reject_unknown_default_chart_type(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Reject a default chart type outside the supported set."""

    monkeypatch.setattr(pipeline_settings, "DEFAULT_CHART_TYPE", "radar")

    with pytest.raises(ValueError, match="CHART_DEFAULT_TYPE"):
        pipeline_settings.validate_settings()


def test_renderer_settings_reject_out_of_range_fraction(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Require the inside-label fraction to lie between 0 and 1."""

    monkeypatch.setattr(renderer_settings, "BAR_LABEL_INSIDE_MIN_FRACTION", 1.5)

    with pytest.raises(ValueError, match="CHART_BAR_LABEL_INSIDE_MIN_FRACTION"):
        renderer_settings.validate_settings()


def test_default_layout_config_carries_font_and_margins() -> None:
    """Expose the common plotly layout."""

    layout = renderer_settings.get_default_layout_config()

    assert layout["font"]["size"] == renderer_settings.FONT_SIZE
    assert set(layout["margin"]) == {"l", "r", "t", "b"}
