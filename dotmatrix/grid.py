"""
DotMatrix - Dot Grid Model

Dense cols x rows buffer of packed colors, addressed as ``matrix[x][y]``
(column-major).  Every cell always holds a valid packed value.

Writes outside the grid are silently ignored: animation code routinely
computes coordinates a little off the edge (scrolling text, moving
sprites).  Reads outside the grid raise IndexError.

Shifts rotate rather than shift-and-fill: the column or row that leaves one
edge comes back in on the opposite edge.
"""

from __future__ import annotations

from typing import Iterator


class DotGrid:
    """Owned 2-D color buffer with bounds-checked access.

    Args:
        cols: Number of columns (> 0).
        rows: Number of rows (> 0).
        fill: Packed color every cell starts with.

    Raises:
        ValueError: If *cols* or *rows* is not positive.
    """

    def __init__(self, cols: int, rows: int, fill: int) -> None:
        if cols <= 0 or rows <= 0:
            raise ValueError(f"Grid needs positive dimensions, got {cols}x{rows}")
        self._cols = cols
        self._rows = rows
        self._cells: list[list[int]] = [[fill] * rows for _ in range(cols)]

    def __repr__(self) -> str:
        return f"DotGrid({self._cols}x{self._rows})"

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def rows(self) -> int:
        return self._rows

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._cols and 0 <= y < self._rows

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def get(self, x: int, y: int) -> int:
        """Return the packed color at (*x*, *y*).

        Raises:
            IndexError: If (*x*, *y*) lies outside the grid.
        """
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) outside {self._cols}x{self._rows} grid")
        return self._cells[x][y]

    def set(self, x: int, y: int, value: int) -> bool:
        """Store *value* at (*x*, *y*); silently ignore out-of-bounds.

        Returns:
            ``True`` if a cell was written.
        """
        if not self.in_bounds(x, y):
            return False
        self._cells[x][y] = value
        return True

    def fill(self, value: int) -> None:
        for column in self._cells:
            column[:] = [value] * self._rows

    def columns(self) -> list[list[int]]:
        """Return a copy of the buffer as a list of columns."""
        return [list(column) for column in self._cells]

    def iter_cells(self) -> Iterator[tuple[int, int, int]]:
        """Yield ``(x, y, value)`` in row-major order (rows outer)."""
        cells = self._cells
        for y in range(self._rows):
            for x in range(self._cols):
                yield x, y, cells[x][y]

    # ------------------------------------------------------------------
    # Ring rotation
    # ------------------------------------------------------------------

    def shift_left(self) -> None:
        self._cells.append(self._cells.pop(0))

    def shift_right(self) -> None:
        self._cells.insert(0, self._cells.pop())

    def shift_up(self) -> None:
        for column in self._cells:
            column.append(column.pop(0))

    def shift_down(self) -> None:
        for column in self._cells:
            column.insert(0, column.pop())
