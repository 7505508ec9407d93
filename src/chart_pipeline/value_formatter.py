"""
Presentation strings for series values.

Series formats are stored as ``"<type>[:<decimals>]"`` where type is one of
``number``, ``currency`` or ``percentage``:

    "currency"      -> $1,235
    "currency:2"    -> $1,234.50
    "percentage"    -> 85.0%
    "number:1"      -> 1,234.5

Percentages are NOT multiplied by 100. Reports compute percentages in SQL and
other consumers already rely on pre-scaled inputs (85 means 85%), so 0.85 is
rendered as "0.9%".

Rounding is half away from zero on the decimal value, matching the en-US
number formatting users see elsewhere in the product.
"""

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from numbers import Real
from typing import Any, Dict, Optional, Union

from src.shared_lib.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SeriesFormat:
    """Parsed series format."""

    kind: str
    decimals: int


class ValueFormatter:
    """
    Formats numbers for value labels, tooltips and legends.

    A single currency convention is used (US dollar, comma grouping);
    there is no per-call currency code.

    Example:
        >>> formatter = ValueFormatter()
        >>> formatter.format(1234.5, "currency")
        '$1,235'
        >>> formatter.format(85, "percentage")
        '85.0%'
    """

    DEFAULT_DECIMALS: Dict[str, int] = {
        "number": 0,
        "currency": 0,
        "percentage": 1,
    }
    CURRENCY_SYMBOL = "$"

    def parse_format(self, fmt: Optional[str]) -> SeriesFormat:
        """
        Parse ``"<type>[:<decimals>]"``.

        Unknown types fall back to ``number``; missing or invalid decimals
        fall back to the default of the type.
        """
        kind, _, decimals_str = (fmt or "number").partition(":")
        kind = kind.strip().lower()
        if kind not in self.DEFAULT_DECIMALS:
            logger.debug(f"Unknown series format '{fmt}', formatting as number")
            kind = "number"

        decimals = self.DEFAULT_DECIMALS[kind]
        if decimals_str.strip():
            try:
                decimals = max(0, int(decimals_str))
            except ValueError:
                logger.debug(f"Invalid decimals in series format '{fmt}', using {decimals}")

        return SeriesFormat(kind=kind, decimals=decimals)

    def format(self, value: Any, fmt: Optional[str] = None) -> Union[str, Any]:
        """
        Format *value* according to *fmt*.

        Non-finite and non-numeric values are returned unchanged.
        """
        if isinstance(value, bool) or not isinstance(value, Real):
            return value
        if not math.isfinite(value):
            return value

        spec = self.parse_format(fmt)
        grouped = group_thousands(value, spec.decimals)

        if spec.kind == "currency":
            if grouped.startswith("-"):
                return f"-{self.CURRENCY_SYMBOL}{grouped[1:]}"
            return f"{self.CURRENCY_SYMBOL}{grouped}"

        if spec.kind == "percentage":
            return f"{grouped}%"

        return grouped


def round_half_up(value: Real, decimals: int) -> Decimal:
    """Round *value* half away from zero to *decimals* places."""
    exponent = Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        # floats reach 1e308; quantize needs every integer digit in precision
        ctx.prec = 320 + decimals
        return Decimal(repr(float(value))).quantize(exponent, rounding=ROUND_HALF_UP)


def group_thousands(value: Real, decimals: int) -> str:
    """Comma-grouped fixed-point string with exactly *decimals* places."""
    rounded = round_half_up(value, decimals)
    if rounded == 0:
        rounded = abs(rounded)
    return f"{rounded:,.{decimals}f}"


_DEFAULT_FORMATTER = ValueFormatter()


def format_value(value: Any, fmt: Optional[str] = None) -> Union[str, Any]:
    """Module-level shortcut for ``ValueFormatter().format``."""
    return _DEFAULT_FORMATTER.format(value, fmt)
