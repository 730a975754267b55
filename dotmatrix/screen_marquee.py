"""
DotMatrix - Marquee Demo Screen

Scrolls a line of text right-to-left across a 128 x 16 matrix, one column
per scroll step.  Characters alternate lime and red.  Once the whole text
has left the matrix on the left it re-enters from the right.

Construction:
  ScreenMarquee()                – default 128 x 16 matrix and text
  ScreenMarquee(matrix, text)    – inject a matrix (tests) or other text
"""

from __future__ import annotations

import logging

import pygame

from . import color_codec
from .config import DotMatrixConfig
from .dot_matrix import DotMatrix
from .events import DotMatrixEvent

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

TEXT            = "DOTMATRIX ON PYGAME "
TEXT_Y          = 4         # top row of the glyphs
RESTART_GAP     = 7         # columns of blank before the text re-enters
SCROLL_INTERVAL = 0.02      # seconds per one-column step
PADDING         = 10        # px around the matrix

BG_COLOR = (20, 20, 20)

COLS, ROWS = 128, 16
MARQUEE_CONFIG = DotMatrixConfig(
    cols=COLS,
    rows=ROWS,
    pref_size=(264.0, 33.0),
    active_color=color_codec.pack(255, 55, 0),
)

_CHAR_COLORS = (color_codec.LIME, color_codec.RED)


class ScreenMarquee:
    """Scrolling-text demo.

    Args:
        matrix: Matrix to scroll across; a 128 x 16 one is built if omitted.
        text:   Text to scroll.
    """

    def __init__(self, matrix: DotMatrix | None = None, text: str = TEXT) -> None:
        self.matrix = matrix if matrix is not None else DotMatrix(MARQUEE_CONFIG)
        self.text = text
        self._char_w = self.matrix.matrix_font.character_width
        self.text_width = len(text) * self._char_w

        self.x = self.restart_x
        self._elapsed = 0.0
        self.last_click: DotMatrixEvent | None = None
        self._rect = pygame.Rect(0, 0, 0, 0)

        self.matrix.add_listener(self._on_dot_clicked)

    @property
    def restart_x(self) -> int:
        return self.matrix.cols + RESTART_GAP

    # ------------------------------------------------------------------
    # Animation
    # ------------------------------------------------------------------

    def step(self) -> None:
        """Draw the text at the current offset and move one column left."""
        if self.x < -self.text_width:
            self.x = self.restart_x
        for i, ch in enumerate(self.text):
            self.matrix.set_char_at(ch, self.x + i * self._char_w, TEXT_Y,
                                    _CHAR_COLORS[i % 2])
        self.x -= 1

    # ------------------------------------------------------------------
    # Screen interface
    # ------------------------------------------------------------------

    def update(self, dt: float) -> None:
        self._elapsed += dt
        while self._elapsed >= SCROLL_INTERVAL:
            self._elapsed -= SCROLL_INTERVAL
            self.step()

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(BG_COLOR, self._rect)
        self.matrix.draw(surface)

    def handle_event(self, event) -> None:
        self.matrix.handle_event(event)

    def on_resize(self, content_rect: pygame.Rect) -> None:
        self._rect = pygame.Rect(content_rect)
        self.matrix.set_bounds(self._rect.inflate(-2 * PADDING, -2 * PADDING))

    def on_exit(self) -> None:
        self._elapsed = 0.0

    def _on_dot_clicked(self, evt: DotMatrixEvent) -> None:
        self.last_click = evt
        log.info("Marquee dot (%d, %d) clicked at %s", evt.x, evt.y, evt.mouse_screen_pos)
