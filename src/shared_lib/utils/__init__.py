"""Utilities module for shared helper functions."""

from .logger import setup_logging, get_logger
from .json_serialization import sanitize_for_json, json_default, json_dumps

__all__ = [
    "setup_logging",
    "get_logger",
    "sanitize_for_json",
    "json_default",
    "json_dumps",
]
