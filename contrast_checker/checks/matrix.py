"""Pairwise contrast ratio matrix for a set of colours.

Takes colours as arguments, or every distinct colour used in a --theme
file. Prints an n×n table of ratios (symmetric, 1.00 on the diagonal),
which makes it quick to see which palette entries can sit on which.

Example:
    uv run contrast-tool matrix '#000' '#767676' '#fff' tw.blue600
    uv run contrast-tool matrix --theme login.theme --json
"""

import numpy as np

from contrast_checker.core.contrast import contrast_matrix
from contrast_checker.core.css_colour import normalise_colour
from contrast_checker.core.env import default_theme
from contrast_checker.core.theme_parser import parse_theme_file
from contrast_checker.core.types import Check, Report

check = Check(
    name='matrix',
    help='Pairwise contrast ratio matrix for a set of colours.',
)


def _theme_colours(path: str) -> list[str]:
    spec = parse_theme_file(path)
    colours: list[str] = []
    for pair in spec.pairs:
        for colour in (pair.fg, pair.bg):
            if colour not in colours:
                colours.append(colour)
    return colours


@check.run
def run(report: Report, args) -> None:
    values = getattr(args, 'values', None) or []
    if values:
        colours = [normalise_colour(v) for v in values]
    else:
        path = getattr(args, 'theme', None) or default_theme()
        if not path:
            raise ValueError('matrix: pass colours or --theme FILE')
        colours = _theme_colours(path)
        report.theme_path = path

    if len(colours) < 2:
        raise ValueError(f'matrix: need at least 2 colours, got {len(colours)}')

    ratios = contrast_matrix(colours)
    # Off-diagonal extremes
    off = ratios[~np.eye(len(colours), dtype=bool)]
    report.add(
        'matrix',
        {
            'colours': colours,
            'ratios': np.round(ratios, 2).tolist(),
            'min': round(float(off.min()), 2),
            'max': round(float(off.max()), 2),
        },
    )
