"""Evaluate every Pair(...) declared in a .theme file.

Parses the file given by --theme (or CONTRAST_TOOL_THEME) and evaluates
each pair. Pairs marked `size: large` are judged against the large-text
thresholds; all others against normal text.

Use --fail-on-level in CI to exit 1 when any pair misses the level.

Example:
    uv run contrast-tool theme --theme login.theme
    uv run contrast-tool theme --theme login.theme --level AAA --fail-on-level
"""

from contrast_checker.core.contrast import evaluate
from contrast_checker.core.env import default_theme
from contrast_checker.core.theme_parser import parse_theme_file
from contrast_checker.core.types import Check, Report

check = Check(
    name='theme',
    help='Evaluate every Pair(...) in a .theme file.',
)


@check.run
def run(report: Report, args) -> None:
    path = getattr(args, 'theme', None) or default_theme()
    if not path:
        raise ValueError('theme: --theme FILE required (or set CONTRAST_TOOL_THEME)')

    spec = parse_theme_file(path)
    report.theme_path = path
    for pair in spec.pairs:
        report.add_pair(pair, evaluate(pair.fg, pair.bg))
