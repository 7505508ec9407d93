"""Core module - Project-wide settings."""

from src.shared_lib.core.settings import (
    LOG_LEVEL,
    LOG_FILE,
    CLASSIFIER_SAMPLE_SIZE,
    SEPARATE_SCALE_RATIO,
    DEFAULT_CHART_TYPE,
    VALID_CHART_TYPES,
    validate_settings,
)

__all__ = [
    "LOG_LEVEL",
    "LOG_FILE",
    "CLASSIFIER_SAMPLE_SIZE",
    "SEPARATE_SCALE_RATIO",
    "DEFAULT_CHART_TYPE",
    "VALID_CHART_TYPES",
    "validate_settings",
]
