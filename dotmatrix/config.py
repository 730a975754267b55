"""
DotMatrix - Configuration
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from .color_codec import pack, pack_float
from .geometry import clamp_spacer_size_factor
from .matrix_font import MATRIX_FONT_8X8, MatrixFont
from .renderer import DotShape

# Demo window
SCREEN_W = 800
SCREEN_H = 320
NAV_H    = 40
FPS      = 60

# Logging
LOG_LEVEL = os.environ.get("DOTMATRIX_LOG_LEVEL", "INFO")

# Widget defaults
DEFAULT_COLS               = 32
DEFAULT_ROWS               = 32
DEFAULT_PREF_SIZE          = (250.0, 250.0)
DEFAULT_ACTIVE_COLOR       = pack(255, 55, 0)
DEFAULT_INACTIVE_COLOR     = pack_float(0.2, 0.2, 0.2, 0.5)   # rgb(51, 51, 51) at 50 %
DEFAULT_SPACER_SIZE_FACTOR = 0.05


@dataclass(frozen=True)
class DotMatrixConfig:
    """Everything a DotMatrix needs at construction.

    Colors are packed ``0xAARRGGBB`` ints (see color_codec.to_color_value to
    build them from names, hex strings or tuples).  ``padding`` is
    (top, right, bottom, left) in pixels.  ``min_size`` / ``max_size`` bound
    what resize() accepts; ``None`` means unbounded.

    The spacer factor is clamped to [0, 0.2]; non-positive cols or rows
    raise ValueError.
    """

    cols: int = DEFAULT_COLS
    rows: int = DEFAULT_ROWS
    active_color: int = DEFAULT_ACTIVE_COLOR
    inactive_color: int = DEFAULT_INACTIVE_COLOR
    dot_shape: DotShape = DotShape.RECTANGLE
    matrix_font: MatrixFont = field(default=MATRIX_FONT_8X8)
    use_spacer: bool = True
    spacer_size_factor: float = DEFAULT_SPACER_SIZE_FACTOR
    square_dots: bool = True
    pref_size: tuple[float, float] = DEFAULT_PREF_SIZE
    min_size: Optional[tuple[float, float]] = None
    max_size: Optional[tuple[float, float]] = None
    padding: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        if self.cols <= 0 or self.rows <= 0:
            raise ValueError(
                f"DotMatrix needs positive cols and rows, got {self.cols}x{self.rows}"
            )
        if len(self.padding) != 4:
            raise ValueError(f"padding must be (top, right, bottom, left), got {self.padding!r}")
        # frozen dataclass: clamp through object.__setattr__
        object.__setattr__(
            self, "spacer_size_factor", clamp_spacer_size_factor(self.spacer_size_factor)
        )
