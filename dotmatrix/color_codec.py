"""
DotMatrix - Packed Color Codec

Every dot in the grid stores its color as one unsigned 32-bit integer with
the byte layout A R G B (alpha in the most significant byte):

    0xAARRGGBB

Packing from floating-point channels rounds half-up to the nearest 8-bit
value, so a round trip is lossless only to 8 bits per channel.

Exports:
    pack            – 0..255 int channels → packed value
    pack_float      – 0..1 float channels → packed value
    unpack          – packed value → (r, g, b, a) floats in 0..1
    to_rgba         – packed value → (r, g, b, a) ints, ready for pygame
    to_color_value  – int / pygame.Color / tuple / color string → packed value
"""

from __future__ import annotations

import math

import pygame

# ---------------------------------------------------------------------------
# Masks
# ---------------------------------------------------------------------------

ALPHA_MASK = 0xFF << 24
RED_MASK   = 0xFF << 16
GREEN_MASK = 0xFF << 8
BLUE_MASK  = 0xFF

ALPHA_FACTOR = 1.0 / 255.0

# Opaque primaries used by the demos and the tests.
RED   = 0xFFFF0000
LIME  = 0xFF00FF00
BLUE  = 0xFF0000FF


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _clamp_byte(value: int) -> int:
    return 0 if value < 0 else 255 if value > 255 else int(value)


def _float_to_byte(value: float) -> int:
    """Scale a 0..1 channel to 0..255, rounding half-up like ``Math.round``."""
    return _clamp_byte(math.floor(255.0 * value + 0.5))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def pack(red: int, green: int, blue: int, alpha: int = 255) -> int:
    """Pack 8-bit channels into a single ``0xAARRGGBB`` value.

    Channels outside 0..255 are clamped rather than wrapped.
    """
    return ((_clamp_byte(alpha) << 24)
            | (_clamp_byte(red) << 16)
            | (_clamp_byte(green) << 8)
            | _clamp_byte(blue))


def pack_float(red: float, green: float, blue: float, alpha: float = 1.0) -> int:
    """Pack 0..1 float channels; each is rounded to the nearest 8-bit step."""
    return pack(
        _float_to_byte(red),
        _float_to_byte(green),
        _float_to_byte(blue),
        _float_to_byte(alpha),
    )


def alpha(value: int) -> int:
    return (value & ALPHA_MASK) >> 24


def red(value: int) -> int:
    return (value & RED_MASK) >> 16


def green(value: int) -> int:
    return (value & GREEN_MASK) >> 8


def blue(value: int) -> int:
    return value & BLUE_MASK


def unpack(value: int) -> tuple[float, float, float, float]:
    """Return ``(r, g, b, a)`` of a packed value as floats in 0..1."""
    return (
        red(value) * ALPHA_FACTOR,
        green(value) * ALPHA_FACTOR,
        blue(value) * ALPHA_FACTOR,
        alpha(value) * ALPHA_FACTOR,
    )


def to_rgba(value: int) -> tuple[int, int, int, int]:
    """Return ``(r, g, b, a)`` as 8-bit ints, the tuple pygame.draw expects."""
    return (red(value), green(value), blue(value), alpha(value))


def to_color_value(color) -> int:
    """Coerce any supported color description into a packed value.

    Accepts:
        int                  – already packed, masked to 32 bits
        pygame.Color         – r, g, b, a used directly
        (r, g, b[, a]) tuple – 8-bit channels, alpha defaults to 255
        str                  – anything ``pygame.Color`` parses, e.g.
                               ``"red"``, ``"#1F6823"``, ``"#1F6823CC"``

    Raises:
        ValueError: If a string is not a color name pygame knows.
        TypeError:  For any other type (including ``bool``, which the widget
                    handles itself as on/off).
    """
    if isinstance(color, bool):
        raise TypeError("bool is not a color; use DotMatrix.set_pixel(x, y, True/False)")
    if isinstance(color, int):
        return color & 0xFFFFFFFF
    if isinstance(color, pygame.Color):
        return pack(color.r, color.g, color.b, color.a)
    if isinstance(color, str):
        return to_color_value(pygame.Color(color))
    if isinstance(color, (tuple, list)) and len(color) in (3, 4):
        r, g, b = color[0], color[1], color[2]
        a = color[3] if len(color) == 4 else 255
        return pack(r, g, b, a)
    raise TypeError(f"Unsupported color description: {color!r}")
