import colorsys
import math
import re
from collections import namedtuple

Color = namedtuple("Color", ["hex", "rgb", "hsl"])

_SHORT_HEX = re.compile(r"^[0-9a-fA-F]{3}$")
_LONG_HEX = re.compile(r"^[0-9a-fA-F]{6}$")


def clamp(value, min_value, max_value):
    """Clamp a value into [min_value, max_value]. NaN and non-numbers map to min_value."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return min_value
    if math.isnan(number):
        return min_value
    return min(max(number, min_value), max_value)


def _normalize_hue(h):
    try:
        hue = float(h)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(hue):
        return 0.0
    return hue % 360


def normalize_hex(value):
    """Canonicalize a 3- or 6-digit hex string (optional '#') to '#RRGGBB'.

    Returns None for anything else, including non-string input.
    """
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    if trimmed.startswith("#"):
        trimmed = trimmed[1:]
    if _SHORT_HEX.match(trimmed):
        return "#" + "".join(char * 2 for char in trimmed).upper()
    if _LONG_HEX.match(trimmed):
        return "#" + trimmed.upper()
    return None


def hex_to_rgb(hex_color):
    normalized = normalize_hex(hex_color)
    if normalized is None:
        return None
    value = normalized[1:]
    return tuple(int(value[i : i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(r, g, b):
    """Round and clamp each channel to [0, 255], then format as '#RRGGBB'."""
    channels = (int(round(clamp(c, 0, 255))) for c in (r, g, b))
    return "#" + "".join(f"{c:02X}" for c in channels)


def rgb_to_hsl(r, g, b):
    """Convert 0-255 RGB to (h, s, l).

    h is a whole degree in [0, 360); s and l are fractions in [0, 1].
    """
    r, g, b = (clamp(c, 0, 255) / 255 for c in (r, g, b))
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    return (int(round(h * 360)) % 360, clamp(s, 0, 1), clamp(l, 0, 1))


def hsl_to_rgb(h, s, l):
    """Convert (h, s, l) to rounded 0-255 RGB. Out-of-range input is normalized first."""
    h = _normalize_hue(h) / 360
    r, g, b = colorsys.hls_to_rgb(h, clamp(l, 0, 1), clamp(s, 0, 1))
    return tuple(int(round(clamp(c * 255, 0, 255))) for c in (r, g, b))


def create_color(r, g, b):
    """Create a Color namedtuple with all representations"""
    r, g, b = (int(round(clamp(c, 0, 255))) for c in (r, g, b))
    return Color(hex=rgb_to_hex(r, g, b), rgb=(r, g, b), hsl=rgb_to_hsl(r, g, b))


def color_from_hex(value):
    rgb = hex_to_rgb(value)
    if rgb is None:
        return None
    return create_color(*rgb)


def color_from_hsl(h, s, l):
    return create_color(*hsl_to_rgb(h, s, l))


WHITE = create_color(255, 255, 255)
BLACK = create_color(0, 0, 0)
