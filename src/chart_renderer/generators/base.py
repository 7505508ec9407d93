"""
BaseChartGenerator - Classe abstrata base para os generators de graficos.

Define a interface comum e metodos utilitarios reutilizaveis por todos os
generators especificos.
"""

from abc import ABC, abstractmethod

import plotly.graph_objects as go

from src.chart_pipeline.value_formatter import ValueFormatter
from src.chart_renderer.utils.plot_styler import PlotStyler
from src.shared_lib.models.schema import RenderableSpec
from src.shared_lib.utils.logger import get_logger

logger = get_logger(__name__)


class BaseChartGenerator(ABC):
    """
    Classe base abstrata para todos os generators de graficos Plotly.

    Define a interface comum que todos os generators devem implementar:
    - validate(): Valida requisitos especificos do tipo de grafico
    - generate(): Gera o objeto Plotly Figure

    Exemplo de Subclasse:
        >>> class AreaGenerator(BaseChartGenerator):
        ...     chart_type = "area"
        ...     def validate(self, spec):
        ...         pass
        ...     def generate(self, spec):
        ...         return go.Figure()
    """

    chart_type: str = ""

    def __init__(self, styler: PlotStyler, formatter: ValueFormatter = None):
        """
        Inicializa o generator.

        Args:
            styler: Instancia de PlotStyler para aplicar estilos
            formatter: Formatador de valores das series
        """
        self.styler = styler
        self.formatter = formatter or ValueFormatter()
        self.logger = get_logger(self.__class__.__name__)

        self.logger.debug(f"{self.__class__.__name__} inicializado")

    @abstractmethod
    def validate(self, spec: RenderableSpec) -> None:
        """
        Valida requisitos especificos do tipo de grafico.

        Args:
            spec: ChartSpec ou TableSpec produzido pelo ChartSpecAssembler

        Raises:
            ValueError: Se validacao falhar com descricao do erro
        """

    @abstractmethod
    def generate(self, spec: RenderableSpec) -> go.Figure:
        """
        Gera objeto Plotly Figure.

        Args:
            spec: ChartSpec ou TableSpec ja validado

        Returns:
            go.Figure pronto para renderizacao
        """

    def _check_type(self, spec: RenderableSpec) -> None:
        """Garante que o spec e do tipo tratado por este generator."""
        if spec.type != self.chart_type:
            raise ValueError(
                f"{self.__class__.__name__} gera '{self.chart_type}', "
                f"recebeu spec do tipo '{spec.type}'"
            )

    def _apply_common_layout(self, fig: go.Figure) -> None:
        self.styler.apply_common_layout(fig)
        self.logger.debug("Layout comum aplicado")
