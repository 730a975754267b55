"""
DotMatrix - Dot Renderer

Draws the whole grid onto a canvas surface, one filled shape per cell:

  RECTANGLE     pygame.draw.rect
  ELLIPSE       pygame.draw.ellipse
  ROUNDED_RECT  pygame.draw.rect with border_radius = dot_size * 0.125

The canvas is expected to be a per-pixel-alpha surface (pygame.SRCALPHA).
pygame.draw writes RGBA values straight into such a surface, so the alpha
stored in each packed color survives until the canvas is blitted.

There is no dirty-region tracking: every call clears and repaints all cells.
"""

from __future__ import annotations

import enum

import pygame

from .color_codec import to_rgba
from .geometry import DotGeometry
from .grid import DotGrid


class DotShape(enum.Enum):
    RECTANGLE    = "rectangle"
    ELLIPSE      = "ellipse"
    ROUNDED_RECT = "rounded_rect"


CLEAR_COLOR = (0, 0, 0, 0)


def _pixel_rect(left: float, top: float, width: float, height: float) -> pygame.Rect:
    """Snap a float rect to whole pixels without opening gaps between cells."""
    x0 = round(left)
    y0 = round(top)
    return pygame.Rect(x0, y0, round(left + width) - x0, round(top + height) - y0)


def draw_matrix(
    canvas: pygame.Surface,
    grid: DotGrid,
    geometry: DotGeometry,
    shape: DotShape = DotShape.RECTANGLE,
) -> int:
    """Clear *canvas* and paint every cell of *grid*.

    Args:
        canvas:   Target surface, origin at the top-left dot.
        grid:     Colors to paint.
        geometry: Layout matching the canvas size.
        shape:    Dot shape.

    Returns:
        Number of shapes drawn (0 when the geometry is empty).
    """
    canvas.fill(CLEAR_COLOR)
    if geometry.is_empty:
        return 0

    drawn = 0
    if shape is DotShape.ROUNDED_RECT:
        radius = max(0, round(geometry.corner_radius))
        for x, y, value in grid.iter_cells():
            rect = _pixel_rect(*geometry.dot_rect(x, y))
            pygame.draw.rect(canvas, to_rgba(value), rect, border_radius=radius)
            drawn += 1
    elif shape is DotShape.ELLIPSE:
        for x, y, value in grid.iter_cells():
            rect = _pixel_rect(*geometry.dot_rect(x, y))
            pygame.draw.ellipse(canvas, to_rgba(value), rect)
            drawn += 1
    else:
        for x, y, value in grid.iter_cells():
            rect = _pixel_rect(*geometry.dot_rect(x, y))
            pygame.draw.rect(canvas, to_rgba(value), rect)
            drawn += 1
    return drawn
