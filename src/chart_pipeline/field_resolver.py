"""
Field value lookup and numeric coercion for query result rows.

SQL engines and saved chart configurations disagree on the casing and
underscoring of column names ("Total_Sales", "total sales", "TOTALSALES").
FieldValueResolver reconciles them with an ordered list of key matchers:

1. exact key
2. case-insensitive key
3. normalized key (lower-case, whitespace and underscores removed)

The matched key for each (row key-set, field) pair is cached, so resolving
a field across thousands of rows with identical columns scans the keys once.
"""

import math
import re
from functools import lru_cache
from numbers import Real
from typing import Any, Callable, List, Mapping, Optional, Tuple

import pandas as pd

from src.shared_lib.utils.logger import get_logger

logger = get_logger(__name__)

_NORMALIZE_PATTERN = re.compile(r"[\s_]")
_LEADING_NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def normalize_key(key: Any) -> str:
    """Lower-case *key* and strip whitespace and underscores."""
    return _NORMALIZE_PATTERN.sub("", str(key if key is not None else "").lower())


def is_missing(value: Any) -> bool:
    """True for None, float NaN and pandas NA/NaT scalars."""
    if value is None:
        return True
    if isinstance(value, (list, tuple, dict, set)):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def coerce_numeric(value: Any) -> Optional[float]:
    """
    Convert a cell value to a finite float.

    Real numbers (bools excluded) are converted directly. Strings yield their
    leading decimal number after trimming, so "45%" reads 45 and "12.5 kg"
    reads 12.5. NaN, infinities and strings without a leading number give
    None, and each caller decides its own fallback.

    Example:
        >>> coerce_numeric("12.5 kg")
        12.5
        >>> coerce_numeric("Widget A") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Real):
        number = float(value)
    elif isinstance(value, str):
        match = _LEADING_NUMBER_PATTERN.match(value.strip())
        if match is None:
            return None
        number = float(match.group(0))
    else:
        return None

    return number if math.isfinite(number) else None


KeyMatcher = Callable[[str, List[str]], Optional[str]]


def _match_exact(field: str, keys: List[str]) -> Optional[str]:
    return field if field in keys else None


def _match_case_insensitive(field: str, keys: List[str]) -> Optional[str]:
    target = field.lower()
    return next((key for key in keys if str(key).lower() == target), None)


def _match_normalized(field: str, keys: List[str]) -> Optional[str]:
    target = normalize_key(field)
    return next((key for key in keys if normalize_key(key) == target), None)


class FieldValueResolver:
    """
    Resolves a selected field name to a value in one row.

    Matchers run in order and the first hit wins. Matches are cached per
    (field, row key-set) in a bounded LRU cache, so one resolver instance can
    be reused for all rows of a result set and across result sets.

    Example:
        >>> resolver = FieldValueResolver()
        >>> resolver.resolve({"TOTAL_SALES": 10}, "Total_Sales")
        10
    """

    MATCHERS: Tuple[KeyMatcher, ...] = (
        _match_exact,
        _match_case_insensitive,
        _match_normalized,
    )

    def __init__(self, cache_size: int = 256):
        self.cache_size = cache_size
        self._cached_match = lru_cache(maxsize=cache_size)(self._match)

    def find_key(self, row: Optional[Mapping[str, Any]], field: Optional[str]) -> Optional[str]:
        """Return the row key matching *field*, or None when nothing matches."""
        if not row or not field:
            return None

        if field in row:
            return field

        key = self._cached_match(field, tuple(row.keys()))
        if key is None:
            logger.debug(f"Field '{field}' not found in row keys {list(row.keys())}")
        return key

    def resolve(self, row: Optional[Mapping[str, Any]], field: Optional[str]) -> Any:
        """Value of *field* in *row*; None when the field is not found."""
        key = self.find_key(row, field)
        if key is None:
            return None
        return row[key]

    def cache_info(self):
        return self._cached_match.cache_info()

    def clear_cache(self) -> None:
        self._cached_match.cache_clear()

    def _match(self, field: str, keys: Tuple[str, ...]) -> Optional[str]:
        key_list = list(keys)
        for matcher in self.MATCHERS:
            match = matcher(field, key_list)
            if match is not None:
                return match
        return None
