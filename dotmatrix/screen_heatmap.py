"""
DotMatrix - Calendar Heat-Map Demo Screen

One year of daily values laid out as a weeks x 7 matrix (one column per
week, one row per weekday), color-coded into five buckets.

Layout (inside the content area):

           Oct   Nov   Dec   ...                Oct
      Wed  ■ ■ ■ ■ ■ ■ ■ ■ ■ ■ ■ ■ ■ ■ ■ ■ ■ ■ ■ ■
      ...  ■ ■ ■ ■ ■ ■ ■ ■ ■ ■ ■ ■ ■ ■ ■ ■ ■ ■ ■ ■
                                 Less ■ ■ ■ ■ ■ More

Clicking a dot shows a tooltip with the date and value at the pointer.  The
tooltip hides itself TOOLTIP_TIMEOUT seconds later; another click restarts
the countdown.

Date range:
  end   = last day of the current month
  start = end - 1 year - (days in the same month a year earlier) + 1 day
  weeks = ceil((end - start).days / 7)
"""

from __future__ import annotations

import calendar
import logging
import math
import random
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

import pygame

from .color_codec import to_color_value, to_rgba
from .config import DotMatrixConfig
from .dot_matrix import DotMatrix
from .events import DotMatrixEvent
from .renderer import DotShape
from .ui_manager import draw_text, load_font

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

TOOLTIP_TIMEOUT = 2.0       # seconds
DAYS_PER_WEEK   = 7
MONTH_LABELS    = 13

# Value thresholds, highest first: a value takes the color of the first
# threshold it is strictly greater than.
COLOR_CODING: tuple[tuple[float, str], ...] = (
    (8.0, "#1F6823"),
    (6.0, "#45A340"),
    (4.0, "#8CC665"),
    (2.0, "#D6E685"),
    (0.0, "#EEEEEE"),
)

# Matrix anchors inside the content area: top, right, bottom, left
_MATRIX_INSETS = (30, 10, 30, 30)

BG_COLOR       = (255, 255, 255)
TEXT_COLOR     = (40,  40,  40)
TOOLTIP_BG     = (50,  50,  50)
TOOLTIP_FG     = (240, 240, 240)
SWATCH_SIZE    = 10
LEGEND_GAP     = 5

HEATMAP_CONFIG = DotMatrixConfig(
    pref_size=(600.0, 80.0),
    use_spacer=True,
    spacer_size_factor=0.1,
    dot_shape=DotShape.RECTANGLE,
    inactive_color=to_color_value(COLOR_CODING[-1][1]),
)


# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------

@dataclass
class HeatmapDatum:
    x: int
    y: int
    value: float
    day: date


def _minus_years(d: date, years: int) -> date:
    """Same calendar day *years* earlier; Feb 29 becomes Feb 28."""
    try:
        return d.replace(year=d.year - years)
    except ValueError:
        return d.replace(year=d.year - years, day=28)


def add_months(d: date, months: int) -> date:
    """Shift *d* by whole months, clamping the day to the target month."""
    year, month_index = divmod(d.month - 1 + months, 12)
    year += d.year
    month = month_index + 1
    day = min(d.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def date_range(today: date) -> tuple[date, date, int]:
    """Return ``(start, end, weeks)`` for the year ending with *today*'s month."""
    last_day = calendar.monthrange(today.year, today.month)[1]
    end = today.replace(day=last_day)
    days_in_month = calendar.monthrange(today.year - 1, today.month)[1]
    start = _minus_years(end, 1) - timedelta(days=days_in_month) + timedelta(days=1)
    weeks = math.ceil((end - start).days / DAYS_PER_WEEK)
    return start, end, weeks


def build_dataset(start: date, weeks: int, rng: random.Random) -> list[HeatmapDatum]:
    """One random value in [0, 10) per day, laid out column-per-week."""
    data: list[HeatmapDatum] = []
    for x in range(weeks):
        for y in range(DAYS_PER_WEEK):
            value = rng.random() * 10
            data.append(HeatmapDatum(x, y, value, start + timedelta(days=x * DAYS_PER_WEEK + y)))
    return data


def color_for_value(value: float) -> int:
    """Packed color of the first threshold strictly below *value*."""
    for threshold, color in COLOR_CODING:
        if value > threshold:
            return to_color_value(color)
    return to_color_value(COLOR_CODING[-1][1])


def format_tooltip(datum: Optional[HeatmapDatum]) -> str:
    if datum is None:
        return "Date : -\nValue: -"
    return f"Date : {datum.day:%d.%m.%Y}\nValue: {datum.value:.1f}"


# ---------------------------------------------------------------------------
# Screen
# ---------------------------------------------------------------------------

class ScreenHeatmap:
    """Calendar heat-map demo.

    Args:
        today: Reference date; defaults to ``date.today()``.
        rng:   Random source for the sample values (seed it in tests).
    """

    def __init__(self, today: date | None = None, rng: random.Random | None = None) -> None:
        today = today or date.today()
        self.start_date, self.end_date, self.weeks = date_range(today)

        self.matrix = DotMatrix(HEATMAP_CONFIG, cols=self.weeks, rows=DAYS_PER_WEEK)

        self.data = build_dataset(self.start_date, self.weeks, rng or random.Random())
        self._by_cell = {(d.x, d.y): d for d in self.data}
        for datum in self.data:
            self.matrix.set_pixel(datum.x, datum.y, color_for_value(datum.value))

        self.tooltip_text: str | None = None
        self.tooltip_pos: tuple[float, float] = (0.0, 0.0)
        self._tooltip_remaining = 0.0

        self._rect = pygame.Rect(0, 0, 0, 0)
        self._fonts: dict[str, pygame.font.Font] | None = None

        self.matrix.add_listener(self._on_dot_clicked)
        log.info("Heat-map %s .. %s, %d weeks", self.start_date, self.end_date, self.weeks)

    # ------------------------------------------------------------------
    # Tooltip
    # ------------------------------------------------------------------

    def datum_at(self, x: int, y: int) -> Optional[HeatmapDatum]:
        return self._by_cell.get((x, y))

    def _on_dot_clicked(self, evt: DotMatrixEvent) -> None:
        self.tooltip_text = format_tooltip(self.datum_at(evt.x, evt.y))
        self.tooltip_pos = evt.mouse_screen_pos
        self._tooltip_remaining = TOOLTIP_TIMEOUT

    @property
    def tooltip_visible(self) -> bool:
        return self.tooltip_text is not None

    def hide_tooltip(self) -> None:
        self.tooltip_text = None
        self._tooltip_remaining = 0.0

    # ------------------------------------------------------------------
    # Screen interface
    # ------------------------------------------------------------------

    def update(self, dt: float) -> None:
        if self.tooltip_text is None:
            return
        self._tooltip_remaining -= dt
        if self._tooltip_remaining <= 0:
            self.hide_tooltip()

    def handle_event(self, event) -> None:
        self.matrix.handle_event(event)

    def on_resize(self, content_rect: pygame.Rect) -> None:
        self._rect = pygame.Rect(content_rect)
        top, right, bottom, left = _MATRIX_INSETS
        self.matrix.set_bounds((
            self._rect.x + left,
            self._rect.y + top,
            self._rect.width - left - right,
            self._rect.height - top - bottom,
        ))

    def on_exit(self) -> None:
        self.hide_tooltip()

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(BG_COLOR, self._rect)
        self.matrix.draw(surface)

        fonts = self._get_fonts()
        mb = self.matrix.matrix_bounds
        self._draw_month_labels(surface, fonts["label"], mb)
        self._draw_weekday_labels(surface, fonts["small"], mb)
        self._draw_legend(surface, fonts["label"], mb)
        if self.tooltip_text is not None:
            self._draw_tooltip(surface, fonts["label"])

    # ------------------------------------------------------------------
    # Private drawing
    # ------------------------------------------------------------------

    def _get_fonts(self) -> dict[str, pygame.font.Font]:
        if self._fonts is None:
            pygame.font.init()
            self._fonts = {
                "label": load_font("dejavusans", 12),
                "small": load_font("dejavusans", 9),
            }
        return self._fonts

    def _draw_month_labels(self, surface, font, mb: pygame.Rect) -> None:
        cell_w = mb.width / MONTH_LABELS
        for i in range(MONTH_LABELS):
            label = f"{add_months(self.start_date, i):%b}"
            cx = mb.x + (i + 0.5) * cell_w
            draw_text(surface, label, font, TEXT_COLOR, round(cx), mb.y - 4, anchor="midbottom")

    def _draw_weekday_labels(self, surface, font, mb: pygame.Rect) -> None:
        dot_h = self.matrix.dot_height
        for i in range(DAYS_PER_WEEK):
            label = f"{self.start_date + timedelta(days=i):%a}"
            cy = mb.y + (i + 0.5) * dot_h
            draw_text(surface, label, font, TEXT_COLOR, mb.x - 4, round(cy), anchor="midright")

    def _draw_legend(self, surface, font, mb: pygame.Rect) -> None:
        y = mb.bottom + 6 + SWATCH_SIZE // 2
        x = mb.right
        more = draw_text(surface, "More", font, TEXT_COLOR, x, y, anchor="midright")
        x = more.left - LEGEND_GAP
        # swatches drawn right-to-left: highest bucket next to "More"
        for _, color in COLOR_CODING:
            swatch = pygame.Rect(0, 0, SWATCH_SIZE, SWATCH_SIZE)
            swatch.midright = (x, y)
            pygame.draw.rect(surface, to_rgba(to_color_value(color)), swatch)
            x = swatch.left - LEGEND_GAP
        draw_text(surface, "Less", font, TEXT_COLOR, x, y, anchor="midright")

    def _draw_tooltip(self, surface, font) -> None:
        lines = self.tooltip_text.split("\n")
        rendered = [font.render(line, True, TOOLTIP_FG) for line in lines]
        w = max(r.get_width() for r in rendered) + 12
        h = sum(r.get_height() for r in rendered) + 8

        box = pygame.Rect(0, 0, w, h)
        box.topleft = (round(self.tooltip_pos[0]) + 12, round(self.tooltip_pos[1]) + 12)
        box.clamp_ip(self._rect)
        pygame.draw.rect(surface, TOOLTIP_BG, box, border_radius=4)

        y = box.y + 4
        for r in rendered:
            surface.blit(r, (box.x + 6, y))
            y += r.get_height()
