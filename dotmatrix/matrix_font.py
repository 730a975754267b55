"""
DotMatrix - Bitmap Matrix Fonts

A MatrixFont maps a character to a fixed-size glyph: one int per row, one
bit per column.  Bit ``x`` (counted from the least significant bit) is one
column; 1 means "dot on".

Column order: the highest bit is the LEFTMOST column.  The widget reads
columns mirrored, i.e. column ``x`` uses bit ``character_width - 1 - x``:

    row value 0x60 in an 8-wide font  ->  .XX.....

Characters a font does not carry resolve to the font's fallback glyph
(blank unless given), so rendering loops never see a missing glyph.

Exports:
    MatrixFont       – glyph provider
    MATRIX_FONT_8X8  – printable ASCII, 8x8 (widget default)
    MATRIX_FONT_3X5  – digits, uppercase and a few symbols, 3x5
    get_bit_at       – (glyph[y] >> x) & 1
"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence


def get_bit_at(x: int, y: int, glyph: Sequence[int]) -> int:
    """Return bit *x* of row *y* (0 or 1)."""
    return (glyph[y] >> x) & 1


def is_bit_set(x: int, y: int, glyph: Sequence[int]) -> bool:
    return get_bit_at(x, y, glyph) == 1


class MatrixFont:
    """Read-only glyph table shared by every widget that uses it.

    Args:
        name:     Human-readable name, used in logs and repr.
        width:    Glyph width in dots (bits used per row).
        height:   Glyph height in dots (rows per glyph).
        glyphs:   Mapping of single characters to row tuples.
        fallback: Glyph returned for unsupported characters; blank if None.

    Raises:
        ValueError: If a glyph has the wrong number of rows.
    """

    def __init__(
        self,
        name: str,
        width: int,
        height: int,
        glyphs: Mapping[str, Sequence[int]],
        fallback: Optional[Sequence[int]] = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Font size must be positive, got {width}x{height}")
        self.name = name
        self._width = width
        self._height = height

        self._glyphs: dict[str, tuple[int, ...]] = {}
        for ch, rows in glyphs.items():
            if len(rows) != height:
                raise ValueError(
                    f"Glyph {ch!r} in {name} has {len(rows)} rows, expected {height}"
                )
            self._glyphs[ch] = tuple(rows)

        self._fallback: tuple[int, ...] = (
            tuple(fallback) if fallback is not None else (0,) * height
        )

    def __repr__(self) -> str:
        return f"MatrixFont({self.name!r}, {self._width}x{self._height})"

    @property
    def character_width(self) -> int:
        return self._width

    @property
    def character_height(self) -> int:
        return self._height

    def get_character(self, ch: str) -> tuple[int, ...]:
        """Return the glyph rows for *ch*.

        Lowercase letters missing from the table fall back to their
        uppercase glyph; anything else unknown returns the fallback glyph.
        """
        glyph = self._glyphs.get(ch)
        if glyph is None and len(ch) == 1 and ch.islower():
            glyph = self._glyphs.get(ch.upper())
        if glyph is None:
            return self._fallback
        return glyph


# ---------------------------------------------------------------------------
# 8x8 font: printable ASCII 0x20..0x7E
# ---------------------------------------------------------------------------

_GLYPHS_8X8: dict[str, tuple[int, ...]] = {
    ' ': (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00),
    '!': (0x18, 0x18, 0x18, 0x18, 0x18, 0x00, 0x18, 0x00),
    '"': (0x6C, 0x6C, 0x24, 0x00, 0x00, 0x00, 0x00, 0x00),
    '#': (0x6C, 0x6C, 0xFE, 0x6C, 0xFE, 0x6C, 0x6C, 0x00),
    '$': (0x18, 0x3E, 0x60, 0x3C, 0x06, 0x7C, 0x18, 0x00),
    '%': (0x00, 0x66, 0xAC, 0xD8, 0x36, 0x6A, 0xCC, 0x00),
    '&': (0x38, 0x6C, 0x68, 0x76, 0xDC, 0xCE, 0x7B, 0x00),
    '\'': (0x18, 0x18, 0x30, 0x00, 0x00, 0x00, 0x00, 0x00),
    '(': (0x0C, 0x18, 0x30, 0x30, 0x30, 0x18, 0x0C, 0x00),
    ')': (0x30, 0x18, 0x0C, 0x0C, 0x0C, 0x18, 0x30, 0x00),
    '*': (0x00, 0x66, 0x3C, 0xFF, 0x3C, 0x66, 0x00, 0x00),
    '+': (0x00, 0x18, 0x18, 0x7E, 0x18, 0x18, 0x00, 0x00),
    ',': (0x00, 0x00, 0x00, 0x00, 0x00, 0x18, 0x18, 0x30),
    '-': (0x00, 0x00, 0x00, 0x7E, 0x00, 0x00, 0x00, 0x00),
    '.': (0x00, 0x00, 0x00, 0x00, 0x00, 0x18, 0x18, 0x00),
    '/': (0x06, 0x0C, 0x18, 0x30, 0x60, 0xC0, 0x80, 0x00),
    '0': (0x3C, 0x66, 0x6E, 0x7E, 0x76, 0x66, 0x3C, 0x00),
    '1': (0x18, 0x38, 0x18, 0x18, 0x18, 0x18, 0x7E, 0x00),
    '2': (0x3C, 0x66, 0x06, 0x0C, 0x18, 0x30, 0x7E, 0x00),
    '3': (0x3C, 0x66, 0x06, 0x1C, 0x06, 0x66, 0x3C, 0x00),
    '4': (0x0C, 0x1C, 0x3C, 0x6C, 0x7E, 0x0C, 0x0C, 0x00),
    '5': (0x7E, 0x60, 0x7C, 0x06, 0x06, 0x66, 0x3C, 0x00),
    '6': (0x1C, 0x30, 0x60, 0x7C, 0x66, 0x66, 0x3C, 0x00),
    '7': (0x7E, 0x06, 0x0C, 0x18, 0x30, 0x30, 0x30, 0x00),
    '8': (0x3C, 0x66, 0x66, 0x3C, 0x66, 0x66, 0x3C, 0x00),
    '9': (0x3C, 0x66, 0x66, 0x3E, 0x06, 0x0C, 0x38, 0x00),
    ':': (0x00, 0x00, 0x18, 0x18, 0x00, 0x18, 0x18, 0x00),
    ';': (0x00, 0x00, 0x18, 0x18, 0x00, 0x18, 0x18, 0x30),
    '<': (0x0C, 0x18, 0x30, 0x60, 0x30, 0x18, 0x0C, 0x00),
    '=': (0x00, 0x00, 0x7E, 0x00, 0x7E, 0x00, 0x00, 0x00),
    '>': (0x30, 0x18, 0x0C, 0x06, 0x0C, 0x18, 0x30, 0x00),
    '?': (0x3C, 0x66, 0x06, 0x0C, 0x18, 0x00, 0x18, 0x00),
    '@': (0x3C, 0x66, 0x6E, 0x6A, 0x6E, 0x60, 0x3C, 0x00),
    'A': (0x18, 0x3C, 0x66, 0x66, 0x7E, 0x66, 0x66, 0x00),
    'B': (0x7C, 0x66, 0x66, 0x7C, 0x66, 0x66, 0x7C, 0x00),
    'C': (0x3C, 0x66, 0x60, 0x60, 0x60, 0x66, 0x3C, 0x00),
    'D': (0x78, 0x6C, 0x66, 0x66, 0x66, 0x6C, 0x78, 0x00),
    'E': (0x7E, 0x60, 0x60, 0x7C, 0x60, 0x60, 0x7E, 0x00),
    'F': (0x7E, 0x60, 0x60, 0x7C, 0x60, 0x60, 0x60, 0x00),
    'G': (0x3C, 0x66, 0x60, 0x6E, 0x66, 0x66, 0x3E, 0x00),
    'H': (0x66, 0x66, 0x66, 0x7E, 0x66, 0x66, 0x66, 0x00),
    'I': (0x7E, 0x18, 0x18, 0x18, 0x18, 0x18, 0x7E, 0x00),
    'J': (0x3E, 0x0C, 0x0C, 0x0C, 0x0C, 0x6C, 0x38, 0x00),
    'K': (0x66, 0x6C, 0x78, 0x70, 0x78, 0x6C, 0x66, 0x00),
    'L': (0x60, 0x60, 0x60, 0x60, 0x60, 0x60, 0x7E, 0x00),
    'M': (0xC6, 0xEE, 0xFE, 0xD6, 0xC6, 0xC6, 0xC6, 0x00),
    'N': (0x66, 0x66, 0x76, 0x7E, 0x6E, 0x66, 0x66, 0x00),
    'O': (0x3C, 0x66, 0x66, 0x66, 0x66, 0x66, 0x3C, 0x00),
    'P': (0x7C, 0x66, 0x66, 0x7C, 0x60, 0x60, 0x60, 0x00),
    'Q': (0x3C, 0x66, 0x66, 0x66, 0x6A, 0x6C, 0x36, 0x00),
    'R': (0x7C, 0x66, 0x66, 0x7C, 0x6C, 0x66, 0x66, 0x00),
    'S': (0x3C, 0x66, 0x60, 0x3C, 0x06, 0x66, 0x3C, 0x00),
    'T': (0x7E, 0x18, 0x18, 0x18, 0x18, 0x18, 0x18, 0x00),
    'U': (0x66, 0x66, 0x66, 0x66, 0x66, 0x66, 0x3C, 0x00),
    'V': (0x66, 0x66, 0x66, 0x66, 0x66, 0x3C, 0x18, 0x00),
    'W': (0xC6, 0xC6, 0xC6, 0xD6, 0xFE, 0xEE, 0xC6, 0x00),
    'X': (0x66, 0x66, 0x3C, 0x18, 0x3C, 0x66, 0x66, 0x00),
    'Y': (0x66, 0x66, 0x66, 0x3C, 0x18, 0x18, 0x18, 0x00),
    'Z': (0x7E, 0x06, 0x0C, 0x18, 0x30, 0x60, 0x7E, 0x00),
    '[': (0x3C, 0x30, 0x30, 0x30, 0x30, 0x30, 0x3C, 0x00),
    '\\': (0xC0, 0x60, 0x30, 0x18, 0x0C, 0x06, 0x03, 0x00),
    ']': (0x3C, 0x0C, 0x0C, 0x0C, 0x0C, 0x0C, 0x3C, 0x00),
    '^': (0x18, 0x3C, 0x66, 0x00, 0x00, 0x00, 0x00, 0x00),
    '_': (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0xFF),
    '`': (0x30, 0x18, 0x0C, 0x00, 0x00, 0x00, 0x00, 0x00),
    'a': (0x00, 0x00, 0x3C, 0x06, 0x3E, 0x66, 0x3E, 0x00),
    'b': (0x60, 0x60, 0x7C, 0x66, 0x66, 0x66, 0x7C, 0x00),
    'c': (0x00, 0x00, 0x3C, 0x66, 0x60, 0x66, 0x3C, 0x00),
    'd': (0x06, 0x06, 0x3E, 0x66, 0x66, 0x66, 0x3E, 0x00),
    'e': (0x00, 0x00, 0x3C, 0x66, 0x7E, 0x60, 0x3C, 0x00),
    'f': (0x1C, 0x30, 0x30, 0x7C, 0x30, 0x30, 0x30, 0x00),
    'g': (0x00, 0x00, 0x3E, 0x66, 0x66, 0x3E, 0x06, 0x3C),
    'h': (0x60, 0x60, 0x7C, 0x66, 0x66, 0x66, 0x66, 0x00),
    'i': (0x18, 0x00, 0x38, 0x18, 0x18, 0x18, 0x3C, 0x00),
    'j': (0x0C, 0x00, 0x1C, 0x0C, 0x0C, 0x0C, 0x6C, 0x38),
    'k': (0x60, 0x60, 0x66, 0x6C, 0x78, 0x6C, 0x66, 0x00),
    'l': (0x38, 0x18, 0x18, 0x18, 0x18, 0x18, 0x3C, 0x00),
    'm': (0x00, 0x00, 0xEC, 0xFE, 0xD6, 0xC6, 0xC6, 0x00),
    'n': (0x00, 0x00, 0x7C, 0x66, 0x66, 0x66, 0x66, 0x00),
    'o': (0x00, 0x00, 0x3C, 0x66, 0x66, 0x66, 0x3C, 0x00),
    'p': (0x00, 0x00, 0x7C, 0x66, 0x66, 0x7C, 0x60, 0x60),
    'q': (0x00, 0x00, 0x3E, 0x66, 0x66, 0x3E, 0x06, 0x06),
    'r': (0x00, 0x00, 0x7C, 0x66, 0x60, 0x60, 0x60, 0x00),
    's': (0x00, 0x00, 0x3E, 0x60, 0x3C, 0x06, 0x7C, 0x00),
    't': (0x30, 0x30, 0x7C, 0x30, 0x30, 0x30, 0x1C, 0x00),
    'u': (0x00, 0x00, 0x66, 0x66, 0x66, 0x66, 0x3E, 0x00),
    'v': (0x00, 0x00, 0x66, 0x66, 0x66, 0x3C, 0x18, 0x00),
    'w': (0x00, 0x00, 0xC6, 0xC6, 0xD6, 0xFE, 0x6C, 0x00),
    'x': (0x00, 0x00, 0x66, 0x3C, 0x18, 0x3C, 0x66, 0x00),
    'y': (0x00, 0x00, 0x66, 0x66, 0x66, 0x3E, 0x06, 0x3C),
    'z': (0x00, 0x00, 0x7E, 0x0C, 0x18, 0x30, 0x7E, 0x00),
    '{': (0x0E, 0x18, 0x18, 0x70, 0x18, 0x18, 0x0E, 0x00),
    '|': (0x18, 0x18, 0x18, 0x18, 0x18, 0x18, 0x18, 0x00),
    '}': (0x70, 0x18, 0x18, 0x0E, 0x18, 0x18, 0x70, 0x00),
    '~': (0x00, 0x00, 0x60, 0x92, 0x0C, 0x00, 0x00, 0x00),
}

MATRIX_FONT_8X8 = MatrixFont("8x8", 8, 8, _GLYPHS_8X8)


# ---------------------------------------------------------------------------
# 3x5 font
#
# Encoding reminder:
#   "X.X"  ->  0b101  -> 5
#   ".X."  ->  0b010  -> 2
#   "XX."  ->  0b110  -> 6
# ---------------------------------------------------------------------------

_GLYPHS_3X5: dict[str, tuple[int, ...]] = {
    # ---- Digits -------------------------------------------------------
    '0': (7, 5, 5, 5, 7),
    '1': (2, 6, 2, 2, 7),
    '2': (7, 1, 7, 4, 7),
    '3': (7, 1, 7, 1, 7),
    '4': (5, 5, 7, 1, 1),
    '5': (7, 4, 7, 1, 7),
    '6': (7, 4, 7, 5, 7),
    '7': (7, 1, 1, 2, 2),
    '8': (7, 5, 7, 5, 7),
    '9': (7, 5, 7, 1, 7),

    # ---- Uppercase letters --------------------------------------------
    'A': (2, 5, 7, 5, 5),
    'B': (6, 5, 6, 5, 6),
    'C': (3, 4, 4, 4, 3),
    'D': (6, 5, 5, 5, 6),
    'E': (7, 4, 7, 4, 7),
    'F': (7, 4, 7, 4, 4),
    'G': (3, 4, 5, 5, 3),
    'H': (5, 5, 7, 5, 5),
    'I': (7, 2, 2, 2, 7),
    'J': (1, 1, 1, 5, 2),
    'K': (5, 5, 6, 5, 5),
    'L': (4, 4, 4, 4, 7),
    'M': (5, 7, 5, 5, 5),
    'N': (5, 7, 7, 5, 5),
    'O': (2, 5, 5, 5, 2),
    'P': (7, 5, 7, 4, 4),
    # .X. / X.X / X.X / XX. / .XX
    'Q': (2, 5, 5, 6, 3),
    'R': (7, 5, 7, 6, 5),
    'S': (3, 4, 2, 1, 6),
    'T': (7, 2, 2, 2, 2),
    'U': (5, 5, 5, 5, 7),
    'V': (5, 5, 5, 5, 2),
    'W': (5, 5, 5, 7, 5),
    'X': (5, 5, 2, 5, 5),
    'Y': (5, 5, 2, 2, 2),
    'Z': (7, 1, 2, 4, 7),

    # ---- Specials -----------------------------------------------------
    'Ω': (2, 5, 5, 2, 5),
    # SI prefixes kept lowercase so they do not fold onto K / M
    'k': (4, 5, 6, 5, 5),
    'm': (0, 5, 7, 5, 5),
    '.': (0, 0, 0, 0, 2),
    ':': (0, 2, 0, 2, 0),
    '-': (0, 0, 7, 0, 0),
    '+': (0, 2, 7, 2, 0),
    '/': (1, 1, 2, 4, 4),
    '!': (2, 2, 2, 0, 2),
    '?': (7, 1, 2, 0, 2),
    '@': (2, 5, 7, 4, 3),
    '_': (0, 0, 0, 0, 7),
    ' ': (0, 0, 0, 0, 0),
}

MATRIX_FONT_3X5 = MatrixFont("3x5", 3, 5, _GLYPHS_3X5)
