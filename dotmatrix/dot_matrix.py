"""
DotMatrix - LED / Dot-Matrix Widget

A pygame widget that shows a cols x rows grid of colored dots.

Ownership:
  DotMatrix owns one DotGrid (the colors), one DotGeometry (derived from
  its current size) and one per-pixel-alpha canvas surface the dots are
  painted onto.  Hosts call draw(surface) each frame to blit that canvas.

Redraw policy:
  Every mutation marks the canvas stale; the whole grid is repainted the
  next time the canvas is needed (draw(), the ``canvas`` property) or
  immediately via draw_matrix() / set_pixel_with_redraw().  A burst of
  writes in one frame therefore costs a single repaint.

Host-driven inputs:
  resize(width, height) / set_bounds(rect)  recompute geometry, repaint
  handle_event(event)                       MOUSEBUTTONDOWN → press()
  press(local_x, local_y, screen_x, screen_y) hit-test, notify listeners

Everything runs on the thread that owns the pygame loop; the widget does no
locking.
"""

from __future__ import annotations

import dataclasses
import logging
import math
from typing import Optional

import pygame

from .color_codec import to_color_value, to_rgba
from .config import DotMatrixConfig
from .events import DotMatrixEvent, DotMatrixListener
from .geometry import DotGeometry, clamp_spacer_size_factor
from .grid import DotGrid
from .matrix_font import MatrixFont, get_bit_at
from .renderer import DotShape, draw_matrix

log = logging.getLogger(__name__)


class DotMatrix:
    """Dot-matrix display widget.

    Args:
        config:    Full configuration; defaults to ``DotMatrixConfig()``.
        **overrides: Individual DotMatrixConfig fields, applied on top of
                   *config* (e.g. ``DotMatrix(cols=128, rows=16)``).

    Raises:
        ValueError: If the resulting configuration has non-positive cols/rows.
        TypeError:  If an override names an unknown field.
    """

    def __init__(self, config: Optional[DotMatrixConfig] = None, **overrides) -> None:
        config = config or DotMatrixConfig()
        if overrides:
            config = dataclasses.replace(config, **overrides)

        self._active_color: int = config.active_color
        self._inactive_color: int = config.inactive_color
        self._dot_shape: DotShape = config.dot_shape
        self._matrix_font: MatrixFont = config.matrix_font
        self._use_spacer: bool = config.use_spacer
        self._square_dots: bool = config.square_dots
        self._spacer_size_factor: float = config.spacer_size_factor

        self._pref_size = config.pref_size
        self._min_size = config.min_size
        self._max_size = config.max_size
        self._padding = config.padding

        self._grid = DotGrid(config.cols, config.rows, self._inactive_color)

        # Widget box on the host surface; sized to the preferred size until
        # the host lays it out.
        self._bounds = pygame.Rect(0, 0, 0, 0)
        self._width = 0.0
        self._height = 0.0
        self._geometry = DotGeometry(cols=config.cols, rows=config.rows)
        self._canvas = pygame.Surface((0, 0), pygame.SRCALPHA)
        self._dirty = True

        self._listeners: list[DotMatrixListener] = []
        self._disposed = False

        self.resize(*self._pref_size)

    def __repr__(self) -> str:
        return (
            f"DotMatrix({self.cols}x{self.rows}, {self._dot_shape.name}, "
            f"{self._width:g}x{self._height:g})"
        )

    # ------------------------------------------------------------------
    # Grid dimensions
    # ------------------------------------------------------------------

    @property
    def cols(self) -> int:
        return self._grid.cols

    @property
    def rows(self) -> int:
        return self._grid.rows

    def set_cols_and_rows(self, cols: int, rows: int) -> None:
        """Reallocate the grid; all cells reset to the inactive color.

        Non-positive dimensions are ignored (logged at WARNING).
        """
        if cols <= 0 or rows <= 0:
            log.warning("Ignoring non-positive grid size %sx%s", cols, rows)
            return
        self._grid = DotGrid(cols, rows, self._inactive_color)
        log.debug("Grid reallocated to %dx%d", cols, rows)
        self.layout()

    # ------------------------------------------------------------------
    # Appearance properties
    # ------------------------------------------------------------------

    @property
    def active_color(self) -> int:
        return self._active_color

    @active_color.setter
    def active_color(self, color) -> None:
        self._active_color = to_color_value(color)
        self._invalidate()

    @property
    def inactive_color(self) -> int:
        return self._inactive_color

    @inactive_color.setter
    def inactive_color(self, color) -> None:
        # Changing the "off" color repaints every dot as off.
        self._inactive_color = to_color_value(color)
        self._grid.fill(self._inactive_color)
        self._invalidate()

    @property
    def dot_shape(self) -> DotShape:
        return self._dot_shape

    @dot_shape.setter
    def dot_shape(self, shape: DotShape) -> None:
        self._dot_shape = DotShape(shape)
        self._invalidate()

    @property
    def matrix_font(self) -> MatrixFont:
        return self._matrix_font

    @matrix_font.setter
    def matrix_font(self, font: MatrixFont) -> None:
        self._matrix_font = font
        self._invalidate()

    @property
    def use_spacer(self) -> bool:
        return self._use_spacer

    @use_spacer.setter
    def use_spacer(self, value: bool) -> None:
        self._use_spacer = bool(value)
        self.layout()

    @property
    def square_dots(self) -> bool:
        return self._square_dots

    @square_dots.setter
    def square_dots(self, value: bool) -> None:
        self._square_dots = bool(value)
        self.layout()

    @property
    def spacer_size_factor(self) -> float:
        return self._spacer_size_factor

    @spacer_size_factor.setter
    def spacer_size_factor(self, factor: float) -> None:
        self._spacer_size_factor = clamp_spacer_size_factor(factor)
        self.layout()

    # ------------------------------------------------------------------
    # Pixel API
    # ------------------------------------------------------------------

    def _color_value(self, value) -> int:
        if isinstance(value, bool):
            return self._active_color if value else self._inactive_color
        return to_color_value(value)

    def set_pixel(self, x: int, y: int, value) -> None:
        """Set one dot; silently ignore out-of-bounds coordinates.

        Args:
            x, y:  Grid coordinates.
            value: ``True``/``False`` for the active/inactive color, a packed
                   int, or anything color_codec.to_color_value accepts.
        """
        if self._grid.set(x, y, self._color_value(value)):
            self._invalidate()

    def set_pixel_with_redraw(self, x: int, y: int, value) -> None:
        self.set_pixel(x, y, value)
        self.draw_matrix()

    def set_char_at(self, character: str, x: int, y: int, color=None) -> None:
        """Blit one glyph with its top-left dot at (*x*, *y*).

        "On" bits take *color* (active color by default); "off" bits are
        written as the inactive color, so the glyph's whole box is replaced.
        """
        self._blit_character(character, x, y, color, clear_background=True)

    def set_char_at_with_background(self, character: str, x: int, y: int, color=None) -> None:
        """Like set_char_at, but "off" bits leave the existing dots alone."""
        self._blit_character(character, x, y, color, clear_background=False)

    def set_text_at(self, text: str, x: int, y: int, color=None, spacing: int = 0) -> None:
        """Write *text* left to right starting at (*x*, *y*).

        Each character advances by the font width plus *spacing* dots.
        """
        advance = self._matrix_font.character_width + spacing
        for i, ch in enumerate(text):
            self._blit_character(ch, x + i * advance, y, color, clear_background=True)

    def _blit_character(self, character: str, pos_x: int, pos_y: int, color,
                        clear_background: bool) -> None:
        value = self._active_color if color is None else self._color_value(color)
        font = self._matrix_font
        glyph = font.get_character(character)
        width = font.character_width
        width_minus_one = width - 1
        inactive = self._inactive_color
        grid = self._grid
        for x in range(width):
            for y in range(font.character_height):
                # glyph columns are stored mirrored: highest bit is leftmost
                if get_bit_at(width_minus_one - x, y, glyph):
                    grid.set(pos_x + x, pos_y + y, value)
                elif clear_background:
                    grid.set(pos_x + x, pos_y + y, inactive)
        self._invalidate()

    def get_color_value_at(self, x: int, y: int) -> int:
        """Return the packed color at (*x*, *y*).

        Raises:
            IndexError: If (*x*, *y*) is outside the grid.
        """
        return self._grid.get(x, y)

    def get_color_at(self, x: int, y: int) -> pygame.Color:
        return pygame.Color(*to_rgba(self._grid.get(x, y)))

    @property
    def matrix(self) -> list[list[int]]:
        """Copy of the grid as ``matrix[x][y]`` packed colors."""
        return self._grid.columns()

    def shift_left(self) -> None:
        self._grid.shift_left()
        self._invalidate()

    def shift_right(self) -> None:
        self._grid.shift_right()
        self._invalidate()

    def shift_up(self) -> None:
        self._grid.shift_up()
        self._invalidate()

    def shift_down(self) -> None:
        self._grid.shift_down()
        self._invalidate()

    def set_all_dots_on(self) -> None:
        self._grid.fill(self._active_color)
        self._invalidate()

    def set_all_dots_off(self) -> None:
        self._grid.fill(self._inactive_color)
        self._invalidate()

    # ------------------------------------------------------------------
    # Sizing and layout
    # ------------------------------------------------------------------

    @property
    def preferred_size(self) -> tuple[float, float]:
        return self._pref_size

    @property
    def min_size(self) -> Optional[tuple[float, float]]:
        return self._min_size

    @property
    def max_size(self) -> Optional[tuple[float, float]]:
        return self._max_size

    @property
    def padding(self) -> tuple[float, float, float, float]:
        return self._padding

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def bounds(self) -> pygame.Rect:
        return pygame.Rect(self._bounds)

    @property
    def geometry(self) -> DotGeometry:
        return self._geometry

    @property
    def dot_size(self) -> float:
        return self._geometry.dot_size

    @property
    def dot_width(self) -> float:
        return self._geometry.dot_width

    @property
    def dot_height(self) -> float:
        return self._geometry.dot_height

    @property
    def spacer(self) -> float:
        return self._geometry.spacer

    @property
    def matrix_width(self) -> float:
        return self._geometry.matrix_width

    @property
    def matrix_height(self) -> float:
        return self._geometry.matrix_height

    @property
    def matrix_bounds(self) -> pygame.Rect:
        """Where the canvas lands on the host surface."""
        ox, oy = self._canvas_origin()
        return pygame.Rect(round(ox), round(oy),
                           self._canvas.get_width(), self._canvas.get_height())

    def _clamp_size(self, width: float, height: float) -> tuple[float, float]:
        if self._min_size is not None:
            width = max(width, self._min_size[0])
            height = max(height, self._min_size[1])
        if self._max_size is not None:
            width = min(width, self._max_size[0])
            height = min(height, self._max_size[1])
        return width, height

    def resize(self, width: float, height: float) -> None:
        """Size-changed notification from the host.

        The size is clamped into [min_size, max_size], the geometry is
        recomputed and the canvas repainted.  Ignored after dispose().
        """
        if self._disposed:
            return
        self._width, self._height = self._clamp_size(float(width), float(height))
        self._bounds.size = (round(self._width), round(self._height))
        self.layout()

    def set_bounds(self, rect) -> None:
        """Place the widget at *rect* (anything pygame.Rect accepts) and resize."""
        if self._disposed:
            return
        rect = pygame.Rect(rect)
        self._bounds.topleft = rect.topleft
        self.resize(rect.width, rect.height)

    def layout(self) -> None:
        """Recompute dot geometry from the current size and repaint."""
        top, right, bottom, left = self._padding
        self._geometry = DotGeometry.compute(
            self._width - left - right,
            self._height - top - bottom,
            self._grid.cols,
            self._grid.rows,
            self._spacer_size_factor,
            use_spacer=self._use_spacer,
            square_dots=self._square_dots,
        )
        size = (
            math.ceil(self._geometry.matrix_width),
            math.ceil(self._geometry.matrix_height),
        )
        if self._canvas.get_size() != size:
            self._canvas = pygame.Surface(size, pygame.SRCALPHA)
        log.debug("Layout %s: dot %.2fx%.2f spacer %.2f",
                  self, self._geometry.dot_width, self._geometry.dot_height,
                  self._geometry.spacer)
        self.draw_matrix()

    def _canvas_origin(self) -> tuple[float, float]:
        """Top-left of the canvas on the host surface (centered in the content box)."""
        top, right, bottom, left = self._padding
        content_w = self._width - left - right
        content_h = self._height - top - bottom
        return (
            self._bounds.x + left + (content_w - self._geometry.matrix_width) * 0.5,
            self._bounds.y + top + (content_h - self._geometry.matrix_height) * 0.5,
        )

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _invalidate(self) -> None:
        self._dirty = True

    def draw_matrix(self) -> None:
        """Repaint the whole grid onto the canvas now."""
        draw_matrix(self._canvas, self._grid, self._geometry, self._dot_shape)
        self._dirty = False

    @property
    def canvas(self) -> pygame.Surface:
        """The painted canvas, repainted first if anything changed."""
        if self._dirty:
            self.draw_matrix()
        return self._canvas

    def draw(self, surface: pygame.Surface) -> None:
        """Blit the canvas onto *surface* inside the widget's bounds."""
        ox, oy = self._canvas_origin()
        surface.blit(self.canvas, (round(ox), round(oy)))

    # ------------------------------------------------------------------
    # Pointer input and hit-testing
    # ------------------------------------------------------------------

    def handle_event(self, event) -> Optional[DotMatrixEvent]:
        """Translate a left-button MOUSEBUTTONDOWN into press().

        pygame reports window coordinates; they are passed on as the
        "screen" position and converted to canvas-local for hit-testing.
        The conversion uses the same rounded origin draw() blits at, and
        tests the centre of the clicked pixel, so every painted pixel of a
        dot resolves to that dot.
        """
        if event.type != pygame.MOUSEBUTTONDOWN or getattr(event, "button", 1) != 1:
            return None
        sx, sy = event.pos
        ox, oy = self._canvas_origin()
        return self.press(sx - round(ox) + 0.5, sy - round(oy) + 0.5, sx, sy)

    def press(self, local_x: float, local_y: float,
              screen_x: float, screen_y: float) -> Optional[DotMatrixEvent]:
        """Hit-test a canvas-local point and fire one event for the cell hit.

        Returns:
            The fired event, or ``None`` if no dot was hit (spacer gap,
            outside the canvas, or the widget is disposed).
        """
        if self._disposed:
            return None
        cell = self._geometry.cell_at(local_x, local_y)
        if cell is None:
            return None
        evt = DotMatrixEvent(cell[0], cell[1], screen_x, screen_y)
        self.fire_event(evt)
        return evt

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def add_listener(self, listener: DotMatrixListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    set_on_dot_matrix_event = add_listener

    def remove_listener(self, listener: DotMatrixListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def remove_all_listeners(self) -> None:
        self._listeners.clear()

    @property
    def listeners(self) -> tuple[DotMatrixListener, ...]:
        return tuple(self._listeners)

    def fire_event(self, evt: DotMatrixEvent) -> None:
        """Notify listeners synchronously, in registration order."""
        # iterate a snapshot so listeners may unregister themselves
        for listener in list(self._listeners):
            listener(evt)

    # ------------------------------------------------------------------
    # Disposal
    # ------------------------------------------------------------------

    @property
    def disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        """Drop all listeners and stop reacting to resize and press input."""
        if self._disposed:
            return
        self._listeners.clear()
        self._disposed = True
        log.debug("Disposed %s", self)
