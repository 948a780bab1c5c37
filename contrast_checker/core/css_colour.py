"""Normalise style-computed colour strings into #rrggbb for the evaluator.

Accepts:
  - hex:          '#abc', 'AABBCC', ' #f5f5f5 '
  - rgb()/rgba(): 'rgb(25, 118, 210)', 'rgb(25 118 210)', 'rgba(0, 0, 0, 1)'
  - CSS named:    'white', 'navy', ...  (CSS level 1 set plus orange)
  - Tailwind:     'tw.slate50'

rgba() is only accepted when fully opaque: a translucent colour has no
contrast ratio until it is composited over its backdrop.

Anything else raises UnsupportedColour. No default colour is ever substituted.
"""

import re

from contrast_checker.core.contrast import parse_hex_color
from contrast_checker.core.palette import resolve_tw
from contrast_checker.core.types import InvalidColorFormat

CSS_NAMED: dict[str, str] = {
    'black': '#000000',
    'silver': '#c0c0c0',
    'gray': '#808080',
    'white': '#ffffff',
    'maroon': '#800000',
    'red': '#ff0000',
    'purple': '#800080',
    'fuchsia': '#ff00ff',
    'green': '#008000',
    'lime': '#00ff00',
    'olive': '#808000',
    'yellow': '#ffff00',
    'navy': '#000080',
    'blue': '#0000ff',
    'teal': '#008080',
    'aqua': '#00ffff',
    'orange': '#ffa500',
}

_SEP = r'(?:\s*,\s*|\s+)'
_RGB_RE = re.compile(
    rf'rgba?\(\s*(\d{{1,3}}){_SEP}(\d{{1,3}}){_SEP}(\d{{1,3}})\s*(?:[,/]\s*(\d*\.?\d+)(%?)\s*)?\)',
    re.IGNORECASE,
)


class UnsupportedColour(ValueError):
    """Raised when a colour string cannot be normalised to hex."""

    def __init__(self, value: object, reason: str = 'unsupported colour notation'):
        self.value = value
        self.reason = reason
        super().__init__(f'{reason}: {value!r}')


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f'#{r:02x}{g:02x}{b:02x}'


def _from_rgb_function(text: str, m: re.Match) -> str:
    channels = [int(m.group(i)) for i in (1, 2, 3)]
    if any(c > 255 for c in channels):
        raise UnsupportedColour(text, 'rgb channel out of range 0-255')
    if m.group(4) is not None:
        alpha = float(m.group(4))
        if m.group(5):
            alpha /= 100.0
        if alpha != 1.0:
            raise UnsupportedColour(text, 'translucent colour has no contrast without its backdrop')
    return rgb_to_hex(*channels)


def normalise_colour(value: str) -> str:
    """Return value as lower-case '#rrggbb', or raise UnsupportedColour."""
    if not isinstance(value, str):
        raise UnsupportedColour(value)
    text = value.strip()
    lowered = text.lower()

    if lowered.startswith('tw.'):
        resolved = resolve_tw(lowered)
        if resolved is None:
            raise UnsupportedColour(value, 'unknown Tailwind colour')
        return resolved

    if lowered in CSS_NAMED:
        return CSS_NAMED[lowered]

    m = _RGB_RE.fullmatch(lowered)
    if m:
        return _from_rgb_function(value, m)

    try:
        r, g, b = parse_hex_color(text)
    except InvalidColorFormat as exc:
        raise UnsupportedColour(value) from exc
    return rgb_to_hex(r, g, b)
