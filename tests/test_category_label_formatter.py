"""Tests for category axis label cleanup."""

from __future__ import annotations

import pytest

from src.chart_pipeline.category_label_formatter import format_category_label

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("12345.678", "12,345.68"),
        ("12345.6", "12,345.6"),
        ("12345.001", "12,345"),
        ("-5000.125", "-5,000.13"),
        ("100.5", "100.5"),
        ("99.999", "99.999"),
        ("12345", "12345"),
        ("Widget A", "Widget A"),
        ("v1.2", "v1.2"),
        ("2500.75 kg", "2,500.75"),
        ("", ""),
    ],
)
def test_format_category_label(label: str, expected: str) -> None:
    """Shorten long decimal labels above 100 and leave other labels alone."""

    assert format_category_label(label) == expected


def test_non_string_labels_are_returned_unchanged() -> None:
    """Pass through labels that are not strings."""

    assert format_category_label(12345.678) == 12345.678
    assert format_category_label(None) is None
