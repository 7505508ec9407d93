"""
TableGenerator - Generator para a visualizacao em tabela.

Cabecalho = colunas selecionadas; corpo = linhas do resultado, com cada
celula resolvida pelo FieldValueResolver (mesma tolerancia de nomes usada
nos graficos). Sem eixos e sem escala.
"""

from typing import Any, List

import plotly.graph_objects as go

from src.chart_pipeline.field_resolver import FieldValueResolver, is_missing
from src.chart_renderer.generators.base import BaseChartGenerator
from src.shared_lib.models.schema import TableSpec


class TableGenerator(BaseChartGenerator):
    """
    Generator para tabelas.

    Validacao:
    - Spec do tipo "table"
    - Ao menos 1 coluna
    """

    chart_type = "table"

    def __init__(self, styler, formatter=None, resolver: FieldValueResolver = None):
        super().__init__(styler, formatter)
        self.resolver = resolver or FieldValueResolver()

    def validate(self, spec: TableSpec) -> None:
        self._check_type(spec)
        if not spec.columns:
            raise ValueError("table requer ao menos 1 coluna selecionada")

    def build_cells(self, spec: TableSpec) -> List[List[Any]]:
        """Valores das celulas por coluna (formato esperado por go.Table)."""
        cells = []
        for column in spec.columns:
            values = []
            for row in spec.rows:
                value = self.resolver.resolve(row, column)
                values.append("" if is_missing(value) else value)
            cells.append(values)
        return cells

    def generate(self, spec: TableSpec) -> go.Figure:
        self.validate(spec)

        fig = go.Figure(
            go.Table(
                header={
                    "values": list(spec.columns),
                    "fill_color": self.styler.color_for(0),
                    "font": {"color": "white"},
                    "align": "left",
                },
                cells={"values": self.build_cells(spec), "align": "left"},
            )
        )
        self._apply_common_layout(fig)

        self.logger.info(
            f"Tabela gerada: {len(spec.columns)} colunas, {len(spec.rows)} linhas"
        )
        return fig
