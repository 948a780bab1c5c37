"""Regex-based parser for .theme files.

Extracts the Theme name and all Pair declarations with their fg/bg colours.
Does NOT attempt to fully parse the Dart-like syntax — regex is sufficient.

    Theme('login',
      /// Heading on the card
      Pair('heading', fg: '#000000', bg: '#f5f5f5', size: large),
      Pair('button', fg: tw.white, bg: 'rgb(25, 118, 210)'),
    )

Colour values may be any notation css_colour.normalise_colour() accepts.
Pair names must be unique within a file. Pairs after a `//` comment marker
on their line are ignored.
"""

import re

from contrast_checker.core.css_colour import UnsupportedColour, normalise_colour
from contrast_checker.core.types import ColourPair, ThemeSpec


def parse_theme_file(path: str) -> ThemeSpec:
    """Parse a .theme file from disk."""
    with open(path, encoding='utf-8') as f:
        text = f.read()
    return parse_theme_string(text)


def parse_theme_string(text: str) -> ThemeSpec:
    """Parse a .theme spec from a string."""
    name = _extract_theme_name(text) or 'unknown'
    pairs = _extract_pairs(text)
    return ThemeSpec(name=name, pairs=pairs, raw=text)


def _extract_theme_name(text: str) -> str | None:
    m = re.search(r"Theme\(\s*['\"]([^'\"]+)['\"]", text)
    return m.group(1) if m else None


def _extract_pairs(text: str) -> list[ColourPair]:
    """Find all Pair declarations that have both fg and bg."""
    pairs = []
    pair_pattern = re.compile(r"Pair\(\s*['\"]([^'\"]+)['\"]\s*,")
    seen: set[str] = set()
    for m in pair_pattern.finditer(text):
        pair_name = m.group(1)
        start = m.start()
        if _in_line_comment(text, start):
            continue
        block = _extract_block(text, start)
        fg = _extract_colour(block, 'fg')
        bg = _extract_colour(block, 'bg')
        if fg is None or bg is None:
            # Half a pair has no contrast
            continue
        try:
            fg_hex = normalise_colour(fg)
            bg_hex = normalise_colour(bg)
        except UnsupportedColour as exc:
            raise UnsupportedColour(exc.value, f'pair {pair_name!r}: {exc.reason}') from exc
        if pair_name in seen:
            raise ValueError(f'Duplicate pair name: {pair_name!r}')
        seen.add(pair_name)
        pairs.append(
            ColourPair(
                name=pair_name,
                fg=fg_hex,
                bg=bg_hex,
                large=_extract_size(block) == 'large',
                doc=_extract_doc_comment(text, start),
            )
        )
    return pairs


def _in_line_comment(text: str, pos: int) -> bool:
    """True if `pos` sits after a `//` comment marker on its line (quotes respected)."""
    line_start = text.rfind('\n', 0, pos) + 1
    prefix = text[line_start:pos]
    quote = None
    for i, ch in enumerate(prefix):
        if quote:
            if ch == quote:
                quote = None
        elif ch in '"\'':
            quote = ch
        elif prefix.startswith('//', i):
            return True
    return False


def _extract_block(text: str, start: int) -> str:
    """Extract the text block for a Pair starting at `start`.

    Walks forward counting parens to find the matching close.
    Returns up to 500 chars as a safety limit.
    """
    depth = 0
    i = start
    end = min(len(text), start + 500)
    while i < end:
        if text[i] == '(':
            depth += 1
        elif text[i] == ')':
            depth -= 1
            if depth == 0:
                return text[start : i + 1]
        i += 1
    return text[start:end]


def _extract_colour(block: str, key: str) -> str | None:
    """Extract a colour value for `key` — quoted string or tw.name shorthand."""
    m = re.search(rf"\b{key}:\s*(?:'([^']+)'|\"([^\"]+)\"|(tw\.\w+))", block)
    if m:
        return m.group(1) or m.group(2) or m.group(3)
    return None


def _extract_size(block: str) -> str:
    m = re.search(r'\bsize:\s*(large|normal)\b', block)
    return m.group(1) if m else 'normal'


def _extract_doc_comment(text: str, pair_start: int) -> str | None:
    """Extract /// doc comments immediately preceding the Pair declaration."""
    lines_before = text[:pair_start].rstrip().split('\n')
    doc_lines = []
    for line in reversed(lines_before):
        stripped = line.strip()
        if stripped.startswith('///'):
            doc_lines.append(stripped[3:].strip())
        else:
            break
    if doc_lines:
        doc_lines.reverse()
        return '\n'.join(doc_lines)
    return None
