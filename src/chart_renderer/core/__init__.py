"""
Core module - Configuracoes e settings do renderizador.
"""

from src.chart_renderer.core.settings import (
    BAR_LABEL_INSIDE_MIN_FRACTION,
    OUTPUT_DIR,
    PLOTLY_JS_MODE,
    SUPPORTED_CHART_TYPES,
    get_default_layout_config,
    validate_settings,
)

__all__ = [
    "BAR_LABEL_INSIDE_MIN_FRACTION",
    "OUTPUT_DIR",
    "PLOTLY_JS_MODE",
    "SUPPORTED_CHART_TYPES",
    "get_default_layout_config",
    "validate_settings",
]
