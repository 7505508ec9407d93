"""
Generators de graficos (um por tipo) e o roteador que os seleciona.
"""

from src.chart_renderer.generators.bar_generator import BarGenerator
from src.chart_renderer.generators.base import BaseChartGenerator
from src.chart_renderer.generators.line_generator import LineGenerator
from src.chart_renderer.generators.pie_generator import PieGenerator
from src.chart_renderer.generators.router import GeneratorRouter
from src.chart_renderer.generators.table_generator import TableGenerator

__all__ = [
    "BarGenerator",
    "BaseChartGenerator",
    "GeneratorRouter",
    "LineGenerator",
    "PieGenerator",
    "TableGenerator",
]
