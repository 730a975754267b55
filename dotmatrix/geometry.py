"""
DotMatrix - Dot Geometry and Hit-Testing

Given the space available to the widget and the grid dimensions, works out
how big each dot is and how much spacer surrounds it:

    dot_size   = min(width / cols, height / rows)
    dot_width  = width / cols      (dot_size when square_dots)
    dot_height = height / rows     (dot_size when square_dots)
    spacer     = dot_size * spacer_size_factor   (0 when not use_spacer)

The spacer insets every side of a cell, so the drawable area of cell (x, y)
starts at (x * dot_width + spacer, y * dot_height + spacer) and measures
(dot_width - 2 * spacer) x (dot_height - 2 * spacer).  The factor is clamped
to [0, 0.2], which keeps the spacer well under half a dot.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

MIN_SPACER_SIZE_FACTOR = 0.0
MAX_SPACER_SIZE_FACTOR = 0.2

# Rounded-rect corner radius as a fraction of dot_size.
CORNER_RADIUS_FACTOR = 0.125


def clamp(minimum: float, maximum: float, value: float) -> float:
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


def clamp_spacer_size_factor(factor: float) -> float:
    return clamp(MIN_SPACER_SIZE_FACTOR, MAX_SPACER_SIZE_FACTOR, factor)


@dataclass(frozen=True)
class DotGeometry:
    """Derived layout of one grid at one widget size.  Never mutated."""

    cols: int
    rows: int
    dot_size: float = 0.0
    dot_width: float = 0.0
    dot_height: float = 0.0
    spacer: float = 0.0

    @classmethod
    def compute(
        cls,
        width: float,
        height: float,
        cols: int,
        rows: int,
        spacer_size_factor: float,
        use_spacer: bool = True,
        square_dots: bool = True,
    ) -> "DotGeometry":
        """Lay out *cols* x *rows* dots inside *width* x *height* pixels.

        Negative sizes (insets larger than the widget) are treated as zero.
        """
        width = max(0.0, float(width))
        height = max(0.0, float(height))
        factor = clamp_spacer_size_factor(spacer_size_factor)

        dot_width = width / cols
        dot_height = height / rows
        dot_size = min(dot_width, dot_height)
        if square_dots:
            dot_width = dot_height = dot_size
        spacer = dot_size * factor if use_spacer else 0.0

        return cls(
            cols=cols,
            rows=rows,
            dot_size=dot_size,
            dot_width=dot_width,
            dot_height=dot_height,
            spacer=spacer,
        )

    # ------------------------------------------------------------------
    # Derived sizes
    # ------------------------------------------------------------------

    @property
    def drawable_width(self) -> float:
        return max(0.0, self.dot_width - 2 * self.spacer)

    @property
    def drawable_height(self) -> float:
        return max(0.0, self.dot_height - 2 * self.spacer)

    @property
    def corner_radius(self) -> float:
        return self.dot_size * CORNER_RADIUS_FACTOR

    @property
    def matrix_width(self) -> float:
        return self.cols * self.dot_width

    @property
    def matrix_height(self) -> float:
        return self.rows * self.dot_height

    @property
    def is_empty(self) -> bool:
        return self.dot_width <= 0 or self.dot_height <= 0

    # ------------------------------------------------------------------
    # Cell rectangles and hit-testing
    # ------------------------------------------------------------------

    def dot_rect(self, x: int, y: int) -> tuple[float, float, float, float]:
        """Return ``(left, top, width, height)`` of cell (*x*, *y*)'s drawable area."""
        return (
            x * self.dot_width + self.spacer,
            y * self.dot_height + self.spacer,
            self.drawable_width,
            self.drawable_height,
        )

    def cell_at(self, px: float, py: float) -> Optional[tuple[int, int]]:
        """Return the cell whose drawable area contains (*px*, *py*), or None.

        Coordinates are canvas-local.  Cells are scanned in row-major order
        and bounds are inclusive, so the first match wins on a shared edge.
        Points that land in the spacer gap between dots hit nothing.
        """
        if self.is_empty:
            return None
        spacer = self.spacer
        right_offset = spacer + self.drawable_width
        bottom_offset = spacer + self.drawable_height
        for y in range(self.rows):
            top = y * self.dot_height
            if not (top + spacer <= py <= top + bottom_offset):
                continue
            for x in range(self.cols):
                left = x * self.dot_width
                if left + spacer <= px <= left + right_offset:
                    return x, y
        return None
