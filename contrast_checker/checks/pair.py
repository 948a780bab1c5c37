"""Evaluate one foreground/background pair.

Takes exactly two colours: FG then BG. Any notation the style adapter
accepts works: hex (#767676, fff), rgb(118, 118, 118), CSS named colours,
and tw.* Tailwind shorthand. Use --large to judge the pair as large text.

Prints the ratio and all four WCAG flags (AA / AAA, normal / large).

Example:
    uv run contrast-tool pair '#767676' '#ffffff'
    uv run contrast-tool pair 'rgb(25, 118, 210)' white --level AAA --large
"""

from contrast_checker.core.contrast import evaluate
from contrast_checker.core.css_colour import normalise_colour
from contrast_checker.core.types import Check, ColourPair, Report

check = Check(
    name='pair',
    help='Evaluate one FG/BG colour pair against WCAG AA/AAA thresholds.',
)


@check.run
def run(report: Report, args) -> None:
    values = getattr(args, 'values', None) or []
    if len(values) != 2:
        raise ValueError(f'pair: expected FG BG, got {len(values)} colour(s)')

    fg = normalise_colour(values[0])
    bg = normalise_colour(values[1])
    pair = ColourPair(name=f'{fg} on {bg}', fg=fg, bg=bg, large=bool(getattr(args, 'large', False)))
    report.add_pair(pair, evaluate(pair.fg, pair.bg))
