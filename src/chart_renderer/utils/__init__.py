from src.chart_renderer.utils.color_manager import ColorManager
from src.chart_renderer.utils.file_saver import FileSaver
from src.chart_renderer.utils.plot_styler import PlotStyler
from src.chart_renderer.utils.text_label_handler import TextLabelHandler

__all__ = ["ColorManager", "FileSaver", "PlotStyler", "TextLabelHandler"]
