"""
BarGenerator - Generator para graficos de barras agrupadas.

- Um grupo por categoria, uma barra por serie
- Eixo Y em altura relativa (0..1): escala compartilhada ou por serie
- Rotulo de valor dentro da barra quando a altura permite, acima caso contrario
"""

from typing import List

import plotly.graph_objects as go

from src.chart_renderer.core.settings import SEPARATE_SCALE_NOTE
from src.chart_renderer.generators.base import BaseChartGenerator
from src.chart_renderer.layout import (
    BarSegment,
    axis_titles,
    build_legend,
    compute_bar_layout,
)
from src.shared_lib.models.schema import ChartSpec

# Folga acima de 1.0 para rotulos posicionados fora da barra
Y_AXIS_HEADROOM = 1.15


class BarGenerator(BaseChartGenerator):
    """
    Generator para graficos de barras verticais agrupadas.

    Validacao:
    - Spec do tipo "bar"

    Exemplo de Uso:
        >>> generator = BarGenerator(PlotStyler())
        >>> fig = generator.generate(spec)
        >>> [trace.type for trace in fig.data]
        ['bar', 'bar']
    """

    chart_type = "bar"

    def validate(self, spec: ChartSpec) -> None:
        self._check_type(spec)
        self.logger.debug(
            f"Validacao OK: {len(spec.categories)} categorias, {len(spec.series)} series"
        )

    def generate(self, spec: ChartSpec) -> go.Figure:
        """
        Gera grafico de barras.

        Processo:
        1. Calcular alturas relativas e rotulos (layout.compute_bar_layout)
        2. Criar um trace go.Bar por serie
        3. Configurar eixos, rotulos de categoria e legenda
        4. Adicionar nota quando as series usam escalas independentes
        """
        self.validate(spec)

        groups = compute_bar_layout(spec, formatter=self.formatter)
        legend = build_legend(spec, self.styler.color_manager)
        positions = list(range(len(spec.categories)))

        fig = go.Figure()
        for entry in legend:
            segments: List[BarSegment] = [group[entry.index] for group in groups]
            fig.add_trace(
                go.Bar(
                    x=positions,
                    y=[seg.fraction for seg in segments],
                    name=entry.name,
                    marker_color=entry.color,
                    text=[seg.label or "" for seg in segments],
                    textposition=[seg.label_position or "none" for seg in segments],
                    insidetextanchor="middle",
                    customdata=[seg.formatted for seg in segments],
                    hovertemplate=f"{entry.name}: %{{customdata}}<extra></extra>",
                )
            )

        x_title, y_title = axis_titles(spec)

        fig.update_layout(barmode="group", bargap=0.2, bargroupgap=0.1)
        self._apply_common_layout(fig)
        self.styler.apply_axis_config(
            fig,
            x_title=x_title,
            y_title=y_title,
            categories=spec.categories,
            rotate_labels=spec.display_options.rotate_category_labels,
        )
        fig.update_yaxes(range=[0, Y_AXIS_HEADROOM])
        self.styler.apply_legend_style(fig)

        if spec.display_options.use_separate_scale:
            self.styler.add_footnote(fig, SEPARATE_SCALE_NOTE)
            self.logger.info("Series em escalas independentes, nota adicionada")

        self.logger.info(
            f"Grafico de barras gerado: {len(spec.categories)} categorias, "
            f"{len(spec.series)} series"
        )
        return fig
