"""
ColorManager - Cores das series e fatias dos graficos de relatorio.

Os relatorios usam uma paleta fixa de 7 cores; a serie (ou fatia) de indice i
recebe a cor ``i % 7``. A mesma serie tem sempre a mesma cor em barras,
linhas e legenda.
"""

from typing import List, Sequence

from src.shared_lib.utils.logger import get_logger

logger = get_logger(__name__)


class ColorManager:
    """
    Gerenciador de cores para graficos Plotly.

    Exemplo:
        >>> manager = ColorManager()
        >>> manager.color_for(0)
        '#2f80ed'
        >>> manager.color_for(7)
        '#2f80ed'
    """

    SERIES_PALETTE: Sequence[str] = (
        "#2f80ed",
        "#27ae60",
        "#f2994a",
        "#9b51e0",
        "#eb5757",
        "#219653",
        "#f2c94c",
    )

    def __init__(self, palette: Sequence[str] = SERIES_PALETTE):
        """
        Inicializa o ColorManager.

        Args:
            palette: Sequencia de cores hex (padrao: paleta dos relatorios)
        """
        if not palette:
            raise ValueError("Paleta de cores nao pode ser vazia")
        self.palette = tuple(palette)
        logger.debug(f"ColorManager inicializado com {len(self.palette)} cores")

    def color_for(self, index: int) -> str:
        """Cor da serie/fatia de indice *index* (ciclica)."""
        return self.palette[index % len(self.palette)]

    def get_color_sequence(self, count: int) -> List[str]:
        """
        Retorna *count* cores na ordem da paleta, repetindo ciclicamente.

        Args:
            count: Numero de cores necessarias

        Returns:
            Lista com ``count`` cores hex
        """
        return [self.color_for(i) for i in range(max(0, count))]
