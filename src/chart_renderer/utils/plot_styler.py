"""
PlotStyler - Gerenciador de estilos visuais para graficos Plotly.

Centraliza a logica de styling para garantir consistencia visual entre
barras, linhas, pizza e tabela.
"""

from typing import Any, Optional, Sequence

import plotly.graph_objects as go

from src.chart_renderer.core.settings import get_default_layout_config
from src.chart_renderer.utils.color_manager import ColorManager
from src.chart_renderer.utils.text_label_handler import TextLabelHandler
from src.shared_lib.utils.logger import get_logger

logger = get_logger(__name__)


class PlotStyler:
    """
    Gerenciador de estilos visuais para graficos Plotly.

    Centraliza logica de:
    - Cores das series (ColorManager)
    - Layout comum (fonte, margens, fundo)
    - Configuracao de eixos e rotulos de categoria
    - Estilos de legenda e notas de rodape

    Exemplo:
        >>> styler = PlotStyler()
        >>> styler.color_for(1)
        '#27ae60'
        >>> styler.apply_axis_config(fig, "Regiao", "Vendas", ["Norte", "Sul"])
    """

    def __init__(
        self,
        color_manager: Optional[ColorManager] = None,
        text_handler: Optional[TextLabelHandler] = None,
    ):
        self.color_manager = color_manager or ColorManager()
        self.text_handler = text_handler or TextLabelHandler()

    def color_for(self, index: int) -> str:
        return self.color_manager.color_for(index)

    def apply_common_layout(self, fig: go.Figure) -> None:
        """Aplica fonte, margens e cores de fundo padrao."""
        fig.update_layout(**get_default_layout_config())

    def apply_axis_config(
        self,
        fig: go.Figure,
        x_title: str,
        y_title: str,
        categories: Sequence[Any],
        rotate_labels: bool = False,
        show_y_values: bool = False,
    ) -> None:
        """
        Configura os eixos de um grafico categorico.

        O eixo Y dos graficos de relatorio mostra alturas relativas (0..1),
        por isso os ticks numericos ficam ocultos por padrao.

        Args:
            fig: Figure Plotly a ser configurada
            x_title: Titulo do eixo X
            y_title: Titulo do eixo Y
            categories: Categorias na ordem do eixo
            rotate_labels: Rotaciona os rotulos de categoria em -45 graus
            show_y_values: Exibe os ticks numericos do eixo Y
        """
        fig.update_xaxes(title=x_title or None, showgrid=False, zeroline=False)
        fig.update_yaxes(
            title=y_title or None,
            showgrid=True,
            gridcolor="lightgray",
            gridwidth=0.5,
            zeroline=True,
            zerolinecolor="gray",
            showticklabels=show_y_values,
        )
        self.text_handler.apply_categorical_axis_config(
            fig, categories, rotate=rotate_labels
        )

        logger.debug(f"Eixos configurados: X='{x_title}', Y='{y_title}'")

    def apply_legend_style(self, fig: go.Figure, position: str = "bottom") -> None:
        """
        Aplica estilo consistente de legenda.

        Args:
            fig: Figure Plotly a ser configurada
            position: "top" (acima do grafico) ou "bottom" (abaixo)
        """
        positions = {
            "top": {
                "orientation": "h",
                "yanchor": "bottom",
                "y": 1.02,
                "xanchor": "left",
                "x": 0,
            },
            "bottom": {
                "orientation": "h",
                "yanchor": "top",
                "y": -0.2,
                "xanchor": "left",
                "x": 0,
            },
        }
        fig.update_layout(showlegend=True, legend=positions.get(position, positions["bottom"]))

    def add_footnote(self, fig: go.Figure, text: str) -> None:
        """Adiciona uma nota de rodape abaixo da area do grafico."""
        fig.add_annotation(
            text=text,
            xref="paper",
            yref="paper",
            x=0,
            y=-0.35,
            xanchor="left",
            yanchor="top",
            showarrow=False,
            font={"size": 11, "color": "#666"},
        )
