from collections import OrderedDict
from enum import Enum

import numpy as np

from .color import hex_to_rgb, normalize_hex


DEFAULT_CACHE_CAPACITY = 1000


class ComplianceMode(Enum):
    """WCAG compliance target and the contrast thresholds it implies."""

    AA = "AA"
    AAA = "AAA"

    @property
    def text_contrast(self):
        return 7.0 if self is ComplianceMode.AAA else 4.5

    @property
    def outline_contrast(self):
        return 4.5 if self is ComplianceMode.AAA else 3.0

    @classmethod
    def parse(cls, value):
        """Accept a mode, or a case-insensitive 'AA'/'AAA' string. Anything else is None."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


class ContrastCache:
    """Bounded memo of contrast ratios keyed by an unordered pair of hex colors.

    Oldest entries are evicted first once capacity is reached.
    """

    def __init__(self, capacity=DEFAULT_CACHE_CAPACITY):
        self.capacity = max(1, int(capacity))
        self._entries = OrderedDict()

    @staticmethod
    def key(hex_a, hex_b):
        return tuple(sorted((hex_a, hex_b)))

    def get(self, hex_a, hex_b):
        return self._entries.get(self.key(hex_a, hex_b))

    def put(self, hex_a, hex_b, ratio):
        key = self.key(hex_a, hex_b)
        if key in self._entries:
            return
        if len(self._entries) >= self.capacity:
            self._entries.popitem(last=False)
        self._entries[key] = ratio

    def clear(self):
        self._entries.clear()

    def __len__(self):
        return len(self._entries)

    def __contains__(self, pair):
        return self.key(*pair) in self._entries


def _linearize(channel):
    c = channel / 255
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb):
    """Calculate relative luminance per WCAG 2.0"""
    r, g, b = rgb
    return 0.2126 * _linearize(r) + 0.7152 * _linearize(g) + 0.0722 * _linearize(b)


def contrast_ratio(hex_a, hex_b, cache=None):
    """Calculate the WCAG contrast ratio between two hex colors.

    Args:
        hex_a: First color, any form accepted by normalize_hex
        hex_b: Second color
        cache: Optional ContrastCache used to memoize the result

    Returns:
        float in [1, 21], or None if either color cannot be parsed
    """
    a = normalize_hex(hex_a)
    b = normalize_hex(hex_b)
    if a is None or b is None:
        return None

    if cache is not None:
        cached = cache.get(a, b)
        if cached is not None:
            return cached

    lum_a = relative_luminance(hex_to_rgb(a))
    lum_b = relative_luminance(hex_to_rgb(b))
    lighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    ratio = (lighter + 0.05) / (darker + 0.05)

    if cache is not None:
        cache.put(a, b, ratio)
    return ratio


def contrast_matrix(hex_colors):
    """Build the full background x foreground contrast matrix for a list of colors.

    Rows are backgrounds, columns are foregrounds. Unparsable colors are skipped,
    so the matrix is always square over the valid inputs.

    Returns:
        tuple: (list of canonical hex values, numpy array of ratios)
    """
    valid = [h for h in (normalize_hex(c) for c in hex_colors) if h is not None]
    if not valid:
        return [], np.zeros((0, 0))

    rgb = np.array([hex_to_rgb(h) for h in valid], dtype=float) / 255
    linear = np.where(rgb <= 0.03928, rgb / 12.92, ((rgb + 0.055) / 1.055) ** 2.4)
    luminance = linear @ np.array([0.2126, 0.7152, 0.0722])

    lighter = np.maximum.outer(luminance, luminance)
    darker = np.minimum.outer(luminance, luminance)
    return valid, (lighter + 0.05) / (darker + 0.05)


def matrix_pass_counts(matrix, mode):
    """Count matrix cells that pass for normal text (strong) or only large text (weak)."""
    mode = ComplianceMode.parse(mode) or ComplianceMode.AA
    strong = int(np.count_nonzero(matrix >= mode.text_contrast))
    weak = int(
        np.count_nonzero(
            (matrix >= mode.outline_contrast) & (matrix < mode.text_contrast)
        )
    )
    return strong, weak
