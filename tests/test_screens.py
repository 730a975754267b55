"""
Tests for the two demo screens: the scrolling marquee and the calendar
heat-map.
"""

import random
import unittest
from datetime import date

import pygame

from dotmatrix.color_codec import LIME, RED, to_color_value
from dotmatrix.dot_matrix import DotMatrix
from dotmatrix.screen_heatmap import (
    HeatmapDatum,
    ScreenHeatmap,
    TOOLTIP_TIMEOUT,
    add_months,
    build_dataset,
    color_for_value,
    date_range,
    format_tooltip,
)
from dotmatrix.screen_marquee import RESTART_GAP, TEXT, TEXT_Y, ScreenMarquee

CONTENT = pygame.Rect(0, 0, 800, 280)


def _press_cell(matrix, x, y):
    """Press the centre of dot (x, y) through the widget's local coordinates."""
    left, top, w, h = matrix.geometry.dot_rect(x, y)
    cx, cy = left + w / 2, top + h / 2
    return matrix.press(cx, cy, cx + 1, cy + 2)


# ---------------------------------------------------------------------------
# Marquee
# ---------------------------------------------------------------------------

class TestScreenMarquee(unittest.TestCase):

    def setUp(self):
        self.matrix = DotMatrix(cols=16, rows=16)
        self.screen = ScreenMarquee(self.matrix, text="I")

    def test_default_matrix(self):
        screen = ScreenMarquee()
        self.assertEqual((screen.matrix.cols, screen.matrix.rows), (128, 16))
        self.assertEqual(screen.text, TEXT)
        self.assertEqual(screen.x, 128 + RESTART_GAP)

    def test_starts_off_screen_right(self):
        self.assertEqual(self.screen.x, 16 + RESTART_GAP)
        self.assertEqual(self.screen.text_width, 8)

    def test_step_draws_text_and_moves_left(self):
        self.screen.x = 0
        self.screen.step()
        self.assertEqual(self.screen.x, -1)
        # 'I' top bar covers glyph columns 1..6
        self.assertEqual(self.matrix.get_color_value_at(1, TEXT_Y), LIME)
        self.assertEqual(self.matrix.get_color_value_at(0, TEXT_Y), self.matrix.inactive_color)
        self.assertEqual(self.matrix.get_color_value_at(3, TEXT_Y + 1), LIME)

    def test_characters_alternate_colors(self):
        screen = ScreenMarquee(DotMatrix(cols=16, rows=16), text="II")
        screen.x = 0
        screen.step()
        self.assertEqual(screen.matrix.get_color_value_at(1, TEXT_Y), LIME)
        self.assertEqual(screen.matrix.get_color_value_at(9, TEXT_Y), RED)

    def test_restarts_after_text_has_left(self):
        self.screen.x = -self.screen.text_width - 1
        self.screen.step()
        self.assertEqual(self.screen.x, self.screen.restart_x - 1)

    def test_update_steps_on_interval(self):
        start = self.screen.x
        self.screen.update(0.05)
        self.assertEqual(self.screen.x, start - 2)

    def test_update_accumulates_small_frames(self):
        start = self.screen.x
        self.screen.update(0.01)
        self.assertEqual(self.screen.x, start)
        self.screen.update(0.011)
        self.assertEqual(self.screen.x, start - 1)

    def test_click_records_event(self):
        self.screen.on_resize(CONTENT)
        evt = _press_cell(self.matrix, 2, 3)
        self.assertEqual(self.screen.last_click, evt)
        self.assertEqual((evt.x, evt.y), (2, 3))

    def test_draw_on_surface(self):
        surface = pygame.Surface(CONTENT.size)
        self.screen.on_resize(CONTENT)
        self.screen.update(0.1)
        self.screen.draw(surface)


# ---------------------------------------------------------------------------
# Heat-map data
# ---------------------------------------------------------------------------

class TestHeatmapData(unittest.TestCase):

    def test_date_range(self):
        start, end, weeks = date_range(date(2026, 10, 19))
        self.assertEqual(start, date(2025, 10, 1))
        self.assertEqual(end, date(2026, 10, 31))
        self.assertEqual(weeks, 57)

    def test_date_range_in_leap_february(self):
        start, end, weeks = date_range(date(2024, 2, 10))
        self.assertEqual(end, date(2024, 2, 29))
        self.assertEqual(start, date(2023, 2, 1))
        self.assertEqual(weeks, 57)

    def test_add_months_clamps_day(self):
        self.assertEqual(add_months(date(2025, 1, 31), 1), date(2025, 2, 28))
        self.assertEqual(add_months(date(2025, 11, 15), 2), date(2026, 1, 15))

    def test_build_dataset_layout(self):
        start = date(2025, 10, 1)
        data = build_dataset(start, 3, random.Random(1))
        self.assertEqual(len(data), 21)
        self.assertEqual((data[8].x, data[8].y), (1, 1))
        self.assertEqual(data[8].day, date(2025, 10, 9))
        self.assertTrue(all(0 <= d.value < 10 for d in data))

    def test_color_for_value(self):
        self.assertEqual(color_for_value(9.0), to_color_value("#1F6823"))
        self.assertEqual(color_for_value(8.0), to_color_value("#45A340"))
        self.assertEqual(color_for_value(5.0), to_color_value("#8CC665"))
        self.assertEqual(color_for_value(2.5), to_color_value("#D6E685"))
        self.assertEqual(color_for_value(1.0), to_color_value("#EEEEEE"))
        self.assertEqual(color_for_value(0.0), to_color_value("#EEEEEE"))

    def test_format_tooltip(self):
        datum = HeatmapDatum(0, 0, 3.14159, date(2025, 10, 1))
        self.assertEqual(format_tooltip(datum), "Date : 01.10.2025\nValue: 3.1")

    def test_format_tooltip_without_datum(self):
        self.assertEqual(format_tooltip(None), "Date : -\nValue: -")


# ---------------------------------------------------------------------------
# Heat-map screen
# ---------------------------------------------------------------------------

class TestScreenHeatmap(unittest.TestCase):

    def setUp(self):
        self.screen = ScreenHeatmap(today=date(2026, 10, 19), rng=random.Random(7))
        self.screen.on_resize(CONTENT)

    def test_matrix_shape(self):
        m = self.screen.matrix
        self.assertEqual((m.cols, m.rows), (57, 7))

    def test_cells_are_colour_coded(self):
        for datum in self.screen.data[:20]:
            self.assertEqual(
                self.screen.matrix.get_color_value_at(datum.x, datum.y),
                color_for_value(datum.value),
            )

    def test_click_shows_tooltip(self):
        evt = _press_cell(self.screen.matrix, 3, 2)
        self.assertTrue(self.screen.tooltip_visible)
        self.assertEqual(self.screen.tooltip_text,
                         format_tooltip(self.screen.datum_at(3, 2)))
        self.assertEqual(self.screen.tooltip_pos, evt.mouse_screen_pos)

    def test_tooltip_hides_after_timeout(self):
        _press_cell(self.screen.matrix, 0, 0)
        self.screen.update(TOOLTIP_TIMEOUT / 2)
        self.assertTrue(self.screen.tooltip_visible)
        self.screen.update(TOOLTIP_TIMEOUT)
        self.assertFalse(self.screen.tooltip_visible)

    def test_second_click_restarts_timeout(self):
        _press_cell(self.screen.matrix, 0, 0)
        self.screen.update(TOOLTIP_TIMEOUT * 0.75)
        _press_cell(self.screen.matrix, 1, 0)
        self.screen.update(TOOLTIP_TIMEOUT * 0.75)
        self.assertTrue(self.screen.tooltip_visible)

    def test_leaving_screen_hides_tooltip(self):
        _press_cell(self.screen.matrix, 0, 0)
        self.screen.on_exit()
        self.assertFalse(self.screen.tooltip_visible)

    def test_datum_outside_range(self):
        self.assertIsNone(self.screen.datum_at(99, 0))

    def test_draw_with_tooltip(self):
        surface = pygame.Surface(CONTENT.size)
        _press_cell(self.screen.matrix, 56, 6)
        self.screen.draw(surface)
        self.assertEqual(surface.get_at((2, 2))[:3], (255, 255, 255))


if __name__ == "__main__":
    unittest.main()
