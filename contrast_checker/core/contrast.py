"""WCAG 2.0 contrast evaluation.

Hex parsing, relative luminance, contrast ratio and the four AA/AAA
threshold checks. Everything here is a pure function over its inputs:
no I/O, no logging, no defaults substituted for bad colours.

Only hex colours are accepted (#rgb or #rrggbb, '#' optional, any case).
Use contrast_checker.core.css_colour to normalise rgb()/named/tw.* values first.
"""

import re

import numpy as np

from contrast_checker.core.types import RGB, ContrastReport, InvalidColorFormat

_HEX_RE = re.compile(r'[0-9a-fA-F]{3}|[0-9a-fA-F]{6}')

# WCAG 2.0 sRGB linearisation and Rec. 709 channel weights
_LINEAR_THRESHOLD = 0.03928
_WEIGHTS = (0.2126, 0.7152, 0.0722)

AA_NORMAL = 4.5
AAA_NORMAL = 7.0
AA_LARGE = 3.0
AAA_LARGE = 4.5


def parse_hex_color(text: str) -> RGB:
    """Parse '#rgb' / '#rrggbb' (hash optional, case-insensitive) into an RGB triple."""
    if not isinstance(text, str):
        raise InvalidColorFormat(text)
    digits = text[1:] if text.startswith('#') else text
    if not _HEX_RE.fullmatch(digits):
        raise InvalidColorFormat(text)
    if len(digits) == 3:
        digits = ''.join(ch * 2 for ch in digits)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def _linear_channel(c: int) -> float:
    s = c / 255
    if s <= _LINEAR_THRESHOLD:
        return s / 12.92
    return ((s + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: RGB) -> float:
    """Relative luminance in [0, 1] of an sRGB triple."""
    r, g, b = rgb
    wr, wg, wb = _WEIGHTS
    return wr * _linear_channel(r) + wg * _linear_channel(g) + wb * _linear_channel(b)


def _ratio(l1: float, l2: float) -> float:
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def contrast_ratio(color_a: str, color_b: str) -> float:
    """WCAG contrast ratio in [1, 21]. Order of the arguments does not matter."""
    l1 = relative_luminance(parse_hex_color(color_a))
    l2 = relative_luminance(parse_hex_color(color_b))
    return _ratio(l1, l2)


def is_aa_normal(ratio: float) -> bool:
    return ratio >= AA_NORMAL


def is_aaa_normal(ratio: float) -> bool:
    return ratio >= AAA_NORMAL


def is_aa_large(ratio: float) -> bool:
    return ratio >= AA_LARGE


def is_aaa_large(ratio: float) -> bool:
    return ratio >= AAA_LARGE


def evaluate(foreground: str, background: str) -> ContrastReport:
    """Compute the ratio for a pair and classify it against all four thresholds."""
    ratio = contrast_ratio(foreground, background)
    return ContrastReport(
        ratio=ratio,
        aa_normal=is_aa_normal(ratio),
        aaa_normal=is_aaa_normal(ratio),
        aa_large=is_aa_large(ratio),
        aaa_large=is_aaa_large(ratio),
    )


def contrast_matrix(colours: list[str]) -> np.ndarray:
    """Pairwise contrast ratios for a list of hex colours.

    Returns an (n, n) float array, symmetric, with 1.0 on the diagonal.
    Luminance is vectorised with the same constants as relative_luminance().
    """
    # float64, not uint8
    rgb = np.array([parse_hex_color(c) for c in colours], dtype=float).reshape(-1, 3)
    s = rgb / 255.0
    linear = np.where(s <= _LINEAR_THRESHOLD, s / 12.92, ((s + 0.055) / 1.055) ** 2.4)
    lum = linear @ np.array(_WEIGHTS)

    lighter = np.maximum.outer(lum, lum)
    darker = np.minimum.outer(lum, lum)
    return (lighter + 0.05) / (darker + 0.05)
