"""
Settings e configuracoes do renderizador de graficos de relatorio.

Define constantes, diretorios e configuracoes padrao para a renderizacao
de ChartSpec/TableSpec em figuras Plotly.
"""

import os
from pathlib import Path
from typing import List
from dotenv import load_dotenv

load_dotenv()

# Raiz do projeto
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

# Diretorio de saida para graficos gerados
OUTPUT_DIR = os.getenv("CHART_OUTPUT_DIR", str(PROJECT_ROOT / "generated_charts"))

# Tipos de grafico suportados pelo renderizador
SUPPORTED_CHART_TYPES: List[str] = ["bar", "line", "pie", "table"]

# Configuracoes de salvamento
SAVE_HTML_DEFAULT = os.getenv("CHART_SAVE_HTML", "true").lower() == "true"
SAVE_JSON_DEFAULT = os.getenv("CHART_SAVE_JSON", "false").lower() == "true"

# Configuracoes de Plotly.js: "cdn", "inline" ou "directory"
PLOTLY_JS_MODE = os.getenv("CHART_PLOTLY_JS_MODE", "cdn")
PLOTLY_JS_MODES = ("cdn", "inline", "directory")

# Configuracoes de estilo
FONT_FAMILY = os.getenv("CHART_FONT_FAMILY", "Segoe UI, Arial, sans-serif")
FONT_SIZE = int(os.getenv("CHART_FONT_SIZE", "12"))

# Margens padrao
MARGIN_LEFT = int(os.getenv("CHART_MARGIN_LEFT", "60"))
MARGIN_RIGHT = int(os.getenv("CHART_MARGIN_RIGHT", "40"))
MARGIN_TOP = int(os.getenv("CHART_MARGIN_TOP", "60"))
MARGIN_BOTTOM = int(os.getenv("CHART_MARGIN_BOTTOM", "80"))

# Cores de fundo
PLOT_BGCOLOR = os.getenv("CHART_PLOT_BGCOLOR", "white")
PAPER_BGCOLOR = os.getenv("CHART_PAPER_BGCOLOR", "white")

# Barras: fracao minima da altura para o rotulo ficar dentro da barra
BAR_LABEL_INSIDE_MIN_FRACTION = float(
    os.getenv("CHART_BAR_LABEL_INSIDE_MIN_FRACTION", "0.5")
)

# Angulo dos rotulos de categoria quando rotateCategoryLabels esta ativo
CATEGORY_LABEL_ROTATION = -45

# Titulo do eixo Y quando o relatorio nao define yLabel
DEFAULT_Y_AXIS_TITLE = "Value"

SEPARATE_SCALE_NOTE = (
    "Note: Series are scaled independently for visibility; "
    "bar heights are not cross-comparable."
)


def validate_settings() -> bool:
    """
    Valida as configuracoes do renderizador.

    Verificacoes:
    - PLOTLY_JS_MODE e um modo conhecido
    - Margens nao negativas e FONT_SIZE positivo
    - BAR_LABEL_INSIDE_MIN_FRACTION entre 0 e 1

    Returns:
        True se todas as validacoes passarem

    Raises:
        ValueError: Se alguma configuracao for invalida
    """
    if PLOTLY_JS_MODE not in PLOTLY_JS_MODES:
        raise ValueError(
            f"CHART_PLOTLY_JS_MODE deve ser um de {PLOTLY_JS_MODES}: {PLOTLY_JS_MODE}"
        )

    margins = [MARGIN_LEFT, MARGIN_RIGHT, MARGIN_TOP, MARGIN_BOTTOM]
    if any(m < 0 for m in margins):
        raise ValueError(
            f"Margens devem ser positivas: L={MARGIN_LEFT}, R={MARGIN_RIGHT}, "
            f"T={MARGIN_TOP}, B={MARGIN_BOTTOM}"
        )

    if FONT_SIZE <= 0:
        raise ValueError(f"FONT_SIZE deve ser positivo: {FONT_SIZE}")

    if not 0 <= BAR_LABEL_INSIDE_MIN_FRACTION <= 1:
        raise ValueError(
            "CHART_BAR_LABEL_INSIDE_MIN_FRACTION deve estar entre 0 e 1: "
            f"{BAR_LABEL_INSIDE_MIN_FRACTION}"
        )

    return True


def get_default_layout_config() -> dict:
    """
    Retorna configuracao de layout padrao para graficos Plotly.

    Returns:
        Dicionario com configuracoes de layout
    """
    return {
        "font": {"family": FONT_FAMILY, "size": FONT_SIZE},
        "margin": {
            "l": MARGIN_LEFT,
            "r": MARGIN_RIGHT,
            "t": MARGIN_TOP,
            "b": MARGIN_BOTTOM,
        },
        "plot_bgcolor": PLOT_BGCOLOR,
        "paper_bgcolor": PAPER_BGCOLOR,
    }
