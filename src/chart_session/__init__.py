"""
Chart Session

Command line entry point (``report-chart``) and its rich display helpers.
"""

from src.chart_session.cli import main
from src.chart_session.display import DisplayHelper

__all__ = ["DisplayHelper", "main"]
