"""
DotMatrix - Click Events

One event type: the grid cell that was pressed plus the pointer position on
screen.  Created per press, handed to every listener, then dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class DotMatrixEvent:
    x: int
    y: int
    mouse_screen_x: float
    mouse_screen_y: float

    @property
    def mouse_screen_pos(self) -> tuple[float, float]:
        return (self.mouse_screen_x, self.mouse_screen_y)


DotMatrixListener = Callable[[DotMatrixEvent], None]
