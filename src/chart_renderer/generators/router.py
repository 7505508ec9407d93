"""
GeneratorRouter - Roteador que seleciona o generator apropriado pelo tipo do spec.

Usa pattern Registry para permitir adicionar novos generators sem modificar
o codigo existente.
"""

from typing import Dict, List, Type

from src.chart_renderer.generators.bar_generator import BarGenerator
from src.chart_renderer.generators.base import BaseChartGenerator
from src.chart_renderer.generators.line_generator import LineGenerator
from src.chart_renderer.generators.pie_generator import PieGenerator
from src.chart_renderer.generators.table_generator import TableGenerator
from src.chart_renderer.utils.plot_styler import PlotStyler
from src.shared_lib.utils.logger import get_logger

logger = get_logger(__name__)


class GeneratorRouter:
    """
    Roteador que seleciona o generator apropriado baseado em chart_type.

    - Adicionar novo generator: router.register("area", AreaGenerator)
    - Obter generator: router.get_generator("area")

    Exemplo:
        >>> router = GeneratorRouter(PlotStyler())
        >>> type(router.get_generator("bar")).__name__
        'BarGenerator'
    """

    DEFAULT_GENERATORS: Dict[str, Type[BaseChartGenerator]] = {
        "bar": BarGenerator,
        "line": LineGenerator,
        "pie": PieGenerator,
        "table": TableGenerator,
    }

    def __init__(self, styler: PlotStyler):
        """
        Inicializa o router com um PlotStyler.

        Args:
            styler: Instancia de PlotStyler para passar aos generators
        """
        self.styler = styler
        self._registry: Dict[str, Type[BaseChartGenerator]] = {}
        self._instances: Dict[str, BaseChartGenerator] = {}
        for chart_type, generator_class in self.DEFAULT_GENERATORS.items():
            self.register(chart_type, generator_class)
        logger.info(f"GeneratorRouter inicializado com {len(self._registry)} generators")

    def register(
        self, chart_type: str, generator_class: Type[BaseChartGenerator]
    ) -> None:
        """
        Registra um generator no router, substituindo um registro anterior.

        Raises:
            TypeError: Se generator_class nao herdar de BaseChartGenerator
        """
        if not (
            isinstance(generator_class, type)
            and issubclass(generator_class, BaseChartGenerator)
        ):
            raise TypeError(
                f"{generator_class!r} deve herdar de BaseChartGenerator"
            )
        self._registry[chart_type] = generator_class
        self._instances.pop(chart_type, None)
        logger.debug(f"Generator registrado: {chart_type} -> {generator_class.__name__}")

    def get_generator(self, chart_type: str) -> BaseChartGenerator:
        """
        Retorna a instancia do generator para *chart_type*.

        Raises:
            ValueError: Se chart_type nao estiver registrado
        """
        if chart_type not in self._registry:
            raise ValueError(
                f"Tipo de grafico '{chart_type}' nao suportado. "
                f"Tipos disponiveis: {', '.join(self.list_supported_types())}"
            )
        if chart_type not in self._instances:
            self._instances[chart_type] = self._registry[chart_type](self.styler)
        return self._instances[chart_type]

    def list_supported_types(self) -> List[str]:
        return sorted(self._registry)

    def is_supported(self, chart_type: str) -> bool:
        return chart_type in self._registry
