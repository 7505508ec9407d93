"""
PieGenerator - Generator para graficos de pizza.

- Usa somente a primeira serie do spec
- Labels: categorias; Values: valores da serie
- Texto de cada fatia: "<valor formatado> (<pct>%)"
"""

import plotly.graph_objects as go

from src.chart_renderer.generators.base import BaseChartGenerator
from src.chart_renderer.layout import compute_pie_slices
from src.shared_lib.models.schema import ChartSpec


class PieGenerator(BaseChartGenerator):
    """
    Generator para graficos de pizza.

    Validacao:
    - Spec do tipo "pie"

    Sem series, cada categoria vira uma fatia zerada "0 (0.0%)".

    Exemplo de Uso:
        >>> generator = PieGenerator(PlotStyler())
        >>> fig = generator.generate(spec)
        >>> fig.data[0].type
        'pie'
    """

    chart_type = "pie"

    def validate(self, spec: ChartSpec) -> None:
        self._check_type(spec)
        if len(spec.series) > 1:
            self.logger.debug(
                f"pie usa apenas a primeira serie; {len(spec.series) - 1} ignorada(s)"
            )

    def generate(self, spec: ChartSpec) -> go.Figure:
        """
        Gera grafico de pizza.

        Raises:
            ValueError: Se o spec nao for do tipo "pie"
        """
        self.validate(spec)

        slices = compute_pie_slices(
            spec, formatter=self.formatter, color_manager=self.styler.color_manager
        )
        name = spec.series[0].name if spec.series else ""

        fig = go.Figure(
            go.Pie(
                labels=[s.category for s in slices],
                values=[s.value for s in slices],
                text=[s.text for s in slices],
                textinfo="text",
                hovertemplate="%{label}<br>%{text}<extra></extra>",
                marker={"colors": [s.color for s in slices]},
                sort=False,
                direction="clockwise",
                name=name,
            )
        )

        self._apply_common_layout(fig)
        self.styler.apply_legend_style(fig, position="top")

        self.logger.info(f"Grafico de pizza gerado: {len(slices)} fatias de '{name}'")
        return fig
