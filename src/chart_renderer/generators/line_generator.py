"""
LineGenerator - Generator para graficos de linha (sparklines por serie).

Cada serie e desenhada em sua propria faixa, normalizada pelo proprio maximo:
x = i / max(1, n-1), y = valor / max(1, max(valores)).
"""

import plotly.graph_objects as go
from plotly.subplots import make_subplots

from src.chart_renderer.generators.base import BaseChartGenerator
from src.chart_renderer.layout import axis_titles, compute_line_tracks
from src.shared_lib.models.schema import ChartSpec

TRACK_HEIGHT = 110


class LineGenerator(BaseChartGenerator):
    """
    Generator para graficos de linha.

    Validacao:
    - Spec do tipo "line"

    Sem series, gera uma figura vazia apenas com os rotulos de categoria.
    """

    chart_type = "line"

    def validate(self, spec: ChartSpec) -> None:
        self._check_type(spec)

    def generate(self, spec: ChartSpec) -> go.Figure:
        self.validate(spec)

        tracks = compute_line_tracks(spec, self.styler.color_manager)
        if not tracks:
            fig = go.Figure()
            self._apply_common_layout(fig)
            self.styler.text_handler.apply_categorical_axis_config(
                fig,
                spec.categories,
                rotate=spec.display_options.rotate_category_labels,
                tickvals=self._tick_positions(len(spec.categories)),
            )
            self.logger.info("Grafico de linha sem series, apenas categorias")
            return fig

        fig = make_subplots(
            rows=len(tracks),
            cols=1,
            shared_xaxes=True,
            vertical_spacing=min(0.08, 0.3 / len(tracks)),
            subplot_titles=[track.name for track in tracks],
        )

        for row, track in enumerate(tracks, start=1):
            series = spec.series[track.series_index]
            fmt = spec.format_for(series)
            fig.add_trace(
                go.Scatter(
                    x=[x for x, _ in track.points],
                    y=[y for _, y in track.points],
                    mode="lines",
                    name=track.name,
                    line={"color": track.color, "width": 2},
                    customdata=[
                        [category, self.formatter.format(value, fmt)]
                        for category, value in zip(spec.categories, series.data)
                    ],
                    hovertemplate=(
                        f"{track.name}<br>%{{customdata[0]}}: %{{customdata[1]}}"
                        "<extra></extra>"
                    ),
                ),
                row=row,
                col=1,
            )
            fig.update_yaxes(
                range=[-0.05, 1.05],
                showticklabels=False,
                showgrid=False,
                row=row,
                col=1,
            )

        self._apply_common_layout(fig)
        fig.update_layout(
            showlegend=False,
            height=max(300, TRACK_HEIGHT * len(tracks) + 120),
            plot_bgcolor="#f7f9fb",
        )
        fig.update_xaxes(range=[-0.02, 1.02], showgrid=False)
        self.styler.text_handler.apply_categorical_axis_config(
            fig,
            spec.categories,
            rotate=spec.display_options.rotate_category_labels,
            tickvals=self._tick_positions(len(spec.categories)),
            row=len(tracks),
            col=1,
        )
        x_title, _ = axis_titles(spec)
        if x_title:
            fig.update_xaxes(title=x_title, row=len(tracks), col=1)

        self.logger.info(
            f"Grafico de linha gerado: {len(tracks)} series, "
            f"{len(spec.categories)} pontos"
        )
        return fig

    @staticmethod
    def _tick_positions(count: int) -> list:
        span = max(1, count - 1)
        return [i / span for i in range(count)]
