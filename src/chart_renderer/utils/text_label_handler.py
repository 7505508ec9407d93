"""
TextLabelHandler - Rotulos de categoria no eixo X.

Aplica nos eixos categoricos:
- Formatacao de rotulos numericos longos (CategoryLabelFormatter)
- Quebra de linha em rotulos longos
- Rotacao de -45 graus quando o usuario pede rotacao

O texto original de cada rotulo fica disponivel no hover.
"""

import textwrap
from typing import Any, Dict, List, Sequence

import plotly.graph_objects as go

from src.chart_pipeline.category_label_formatter import CategoryLabelFormatter
from src.chart_renderer.core.settings import CATEGORY_LABEL_ROTATION
from src.shared_lib.utils.logger import get_logger

logger = get_logger(__name__)


class TextLabelHandler:
    """
    Gerenciador de rotulos de texto para eixos categoricos.

    Exemplo de uso:
        >>> handler = TextLabelHandler()
        >>> handler.process_labels(["12345.678", "Widget A"])
        ['12,345.68', 'Widget A']
    """

    DEFAULT_MAX_CHARS_PER_LINE = 20
    LINE_BREAK = "<br>"

    def __init__(
        self,
        max_chars_per_line: int = DEFAULT_MAX_CHARS_PER_LINE,
        label_formatter: CategoryLabelFormatter = None,
    ):
        """
        Inicializa o handler.

        Args:
            max_chars_per_line: Caracteres por linha antes de quebrar
            label_formatter: Formatador de rotulos de categoria
        """
        self.max_chars_per_line = max_chars_per_line
        self.label_formatter = label_formatter or CategoryLabelFormatter()

    def wrap_label(self, label: str) -> str:
        """Quebra *label* em linhas de ate ``max_chars_per_line`` caracteres."""
        if len(label) <= self.max_chars_per_line:
            return label
        lines = textwrap.wrap(
            label, width=self.max_chars_per_line, break_long_words=True
        )
        return self.LINE_BREAK.join(lines) if lines else label

    def process_labels(self, labels: Sequence[Any]) -> List[str]:
        """Formata e quebra cada rotulo de categoria."""
        return [
            self.wrap_label(str(self.label_formatter.format(label)))
            for label in labels
        ]

    def apply_categorical_axis_config(
        self,
        fig: go.Figure,
        labels: Sequence[Any],
        rotate: bool = False,
        tickvals: Sequence[float] = None,
        row: int = None,
        col: int = None,
    ) -> Dict[str, Any]:
        """
        Aplica rotulos processados a um eixo X categorico.

        Args:
            fig: Figure Plotly a ser configurada
            labels: Categorias na ordem do eixo
            rotate: Se True, rotaciona os rotulos em -45 graus
            tickvals: Posicoes dos ticks (padrao: 0..n-1)
            row, col: Subplot alvo (figuras criadas com make_subplots)

        Returns:
            Dicionario com configuracoes aplicadas (para referencia/debug)
        """
        processed = self.process_labels(labels)
        if tickvals is None:
            tickvals = list(range(len(processed)))
        angle = CATEGORY_LABEL_ROTATION if rotate else 0

        fig.update_xaxes(
            tickmode="array",
            tickvals=list(tickvals),
            ticktext=processed,
            tickangle=angle,
            automargin=True,
            row=row,
            col=col,
        )

        logger.debug(
            f"Rotulos aplicados no eixo X: {len(processed)} rotulos, angulo={angle}"
        )
        return {
            "applied": bool(processed),
            "labels": processed,
            "rotation_angle": angle,
        }
