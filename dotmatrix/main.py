"""
DotMatrix - Demo Entry Point

Opens the demo window with two screens:

  marquee  – scrolling text on a 128 x 16 matrix
  heatmap  – calendar heat-map with click tooltips

Controls:
    LEFT / RIGHT arrow keys   cycle through screens
    Mouse click               nav bar tabs, or dots on the active matrix
    Escape / window-close     quit

Set DOTMATRIX_LOG_LEVEL=DEBUG to see widget layout and lifecycle logging.
"""

import logging
import sys
import time

import pygame

from . import config
from .screen_heatmap import ScreenHeatmap
from .screen_marquee import ScreenMarquee
from .ui_manager import UIManager

log = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )

    mgr = UIManager()

    marquee = ScreenMarquee()
    heatmap = ScreenHeatmap()

    mgr.register_screen("marquee", marquee, label="Marquee")
    mgr.register_screen("heatmap", heatmap, label="Heat-map")
    mgr.switch_to("marquee")

    log.info("DotMatrix demo started")

    last_t = time.monotonic()
    try:
        running = True
        while running:
            now = time.monotonic()
            dt = now - last_t
            last_t = now

            running = mgr.handle_events()
            mgr.update(dt)
            mgr.draw()
    finally:
        marquee.matrix.dispose()
        heatmap.matrix.dispose()
        pygame.quit()
        log.info("Pygame quit")


if __name__ == "__main__":
    main()
