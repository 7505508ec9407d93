"""Shared JSON serialization helpers.

Query results arrive from SQL engines and pandas with values the stdlib `json`
module cannot encode (`datetime`, `Decimal`, numpy scalars, NaN). Chart specs
and results are written to disk and printed by the CLI, so both pass through
these helpers first.

This module provides:
- `sanitize_for_json`: recursively converts objects into JSON-serializable types
- `json_default`: a `json.dumps(default=...)` compatible hook
- `json_dumps`: convenience wrapper around `json.dumps` using the default hook
"""

from __future__ import annotations

import json
import math
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd
from pydantic import BaseModel


def sanitize_for_json(obj: Any) -> Any:
    """Recursively convert *obj* to JSON-serializable primitives.

    Converts:
    - datetime/date/time -> ISO-8601 strings
    - timedelta -> total seconds (float)
    - Path -> str
    - Decimal -> float (or int when exact)
    - Enum -> value
    - NaN / infinity / pandas NA -> None
    - numpy scalars and arrays, pandas Timestamps, pydantic models

    Falls back to `str(obj)` for unknown objects.
    """

    if obj is None or isinstance(obj, (str, bool, int)):
        return obj

    if obj is pd.NA or obj is pd.NaT:
        return None

    if isinstance(obj, float):
        return obj if math.isfinite(obj) else None

    if isinstance(obj, pd.Timestamp):
        return obj.isoformat() if pd.notna(obj) else None

    if isinstance(obj, (datetime, date, time)):
        return obj.isoformat()

    if isinstance(obj, timedelta):
        return obj.total_seconds()

    if isinstance(obj, Path):
        return str(obj)

    if isinstance(obj, Decimal):
        if not obj.is_finite():
            return None
        # Preserve integers when possible (e.g. Decimal('3'))
        if obj == obj.to_integral_value():
            return int(obj)
        return float(obj)

    if isinstance(obj, Enum):
        return sanitize_for_json(obj.value)

    if isinstance(obj, BaseModel):
        return sanitize_for_json(obj.model_dump(by_alias=True))

    if isinstance(obj, dict):
        return {str(k): sanitize_for_json(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple, set)):
        return [sanitize_for_json(v) for v in obj]

    if isinstance(obj, np.datetime64):
        return str(obj.astype("datetime64[ms]")) if not np.isnat(obj) else None

    if isinstance(obj, np.ndarray):
        return [sanitize_for_json(v) for v in obj.tolist()]

    if isinstance(obj, np.generic):
        return sanitize_for_json(obj.item())

    # Best-effort fallback
    return str(obj)


def json_default(obj: Any) -> Any:
    """Hook for `json.dumps(default=...)`.

    This function is called only for objects `json` doesn't know how to encode.
    """

    return sanitize_for_json(obj)


def json_dumps(data: Any, **kwargs: Any) -> str:
    """`json.dumps` wrapper that sanitizes *data* first.

    NaN floats are valid Python floats, so `json` would emit the non-standard
    `NaN` token without ever calling the default hook.
    """

    if "default" not in kwargs:
        kwargs["default"] = json_default
    return json.dumps(sanitize_for_json(data), **kwargs)


__all__ = [
    "sanitize_for_json",
    "json_default",
    "json_dumps",
]
