"""
Chart Renderer

Renderiza ChartSpec/TableSpec produzidos pelo chart_pipeline em figuras
Plotly interativas.

Modulos:
    - core: Configuracoes do renderizador
    - layout: Geometria pura (alturas, faixas, fatias, legenda)
    - generators: Geradores de graficos (um por tipo)
    - utils: Utilitarios reutilizaveis (cores, rotulos, styling, saving)
"""

from src.chart_renderer.report_chart_renderer import ReportChartRenderer

__version__ = "1.0.0"
__all__ = ["ReportChartRenderer"]
