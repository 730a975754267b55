"""
DotMatrix - LED / dot-matrix display widget for pygame.
"""

from .config import DotMatrixConfig
from .dot_matrix import DotMatrix
from .events import DotMatrixEvent
from .matrix_font import MATRIX_FONT_3X5, MATRIX_FONT_8X8, MatrixFont
from .renderer import DotShape

__version__ = "0.1.0"
