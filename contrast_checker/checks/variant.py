"""Evaluate the built-in theme variants.

Each variant is a palette (text, background, primary colours). The check
evaluates the pairs a login form renders with it: heading on the card
(large text), secondary text on the card, button label on the primary
colour, and body text on the page background.

With no arguments every variant is checked. Name variants to limit it.

Example:
    uv run contrast-tool variant
    uv run contrast-tool variant inaccessible --json
"""

from contrast_checker.core.contrast import evaluate
from contrast_checker.core.themes import variant_names, variant_pairs
from contrast_checker.core.types import Check, Report

check = Check(
    name='variant',
    help='Evaluate the built-in accessible/inaccessible theme variants.',
)


@check.run
def run(report: Report, args) -> None:
    # dict.fromkeys: drop repeated names, keep order
    names = list(dict.fromkeys(getattr(args, 'values', None) or variant_names()))
    for name in names:
        for pair in variant_pairs(name):
            report.add_pair(pair, evaluate(pair.fg, pair.bg))
