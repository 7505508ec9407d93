"""
Category axis label cleanup.

Reports sometimes select a numeric average as the category column, which
yields labels such as "12345.678123". Those are shortened to a grouped number
with at most two fraction digits; every other label is left alone.
"""

from typing import Any

from src.chart_pipeline.field_resolver import coerce_numeric
from src.chart_pipeline.value_formatter import round_half_up


class CategoryLabelFormatter:
    """
    Example:
        >>> CategoryLabelFormatter().format("12345.678")
        '12,345.68'
        >>> CategoryLabelFormatter().format("Widget A")
        'Widget A'
    """

    MIN_MAGNITUDE = 100
    MAX_FRACTION_DIGITS = 2

    def format(self, label: Any) -> Any:
        if not isinstance(label, str) or "." not in label:
            return label

        number = coerce_numeric(label)
        if number is None or abs(number) <= self.MIN_MAGNITUDE:
            return label

        rounded = round_half_up(number, self.MAX_FRACTION_DIGITS)
        text = f"{rounded:,.{self.MAX_FRACTION_DIGITS}f}"
        return text.rstrip("0").rstrip(".")


_DEFAULT_FORMATTER = CategoryLabelFormatter()


def format_category_label(label: Any) -> Any:
    """Module-level shortcut for ``CategoryLabelFormatter().format``."""
    return _DEFAULT_FORMATTER.format(label)
