"""
Environment settings and configuration variables.

This module loads environment variables and defines project-wide constants
used by the chart pipeline and the logging setup.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Project root directory
# settings.py is in src/shared_lib/core/settings.py
# so we need to go up 4 levels to reach project root
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

# Logging Configuration
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE: str = os.getenv("LOG_FILE", str(PROJECT_ROOT / "logs" / "report_charts.log"))

# Field classification: how many non-null values are sampled per field
CLASSIFIER_SAMPLE_SIZE: int = int(os.getenv("CHART_CLASSIFIER_SAMPLE_SIZE", "3"))

# Ratio between the largest and smallest series max above which series are
# scaled independently
SEPARATE_SCALE_RATIO: float = float(os.getenv("CHART_SEPARATE_SCALE_RATIO", "20"))

# Chart type used when a config does not name one
DEFAULT_CHART_TYPE: str = os.getenv("CHART_DEFAULT_TYPE", "bar")

# Valid Chart Types
VALID_CHART_TYPES = [
    "bar",
    "line",
    "pie",
    "table",
]


def validate_settings() -> bool:
    """
    Validate pipeline settings.

    Returns:
        True if every setting is within range

    Raises:
        ValueError: If a setting is invalid
    """
    if CLASSIFIER_SAMPLE_SIZE < 1:
        raise ValueError(
            f"CHART_CLASSIFIER_SAMPLE_SIZE must be >= 1: {CLASSIFIER_SAMPLE_SIZE}"
        )

    if SEPARATE_SCALE_RATIO <= 1:
        raise ValueError(
            f"CHART_SEPARATE_SCALE_RATIO must be > 1: {SEPARATE_SCALE_RATIO}"
        )

    if DEFAULT_CHART_TYPE not in VALID_CHART_TYPES:
        raise ValueError(
            f"CHART_DEFAULT_TYPE must be one of {VALID_CHART_TYPES}: {DEFAULT_CHART_TYPE}"
        )

    return True
