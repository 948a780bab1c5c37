"""contrast-tool — WCAG 2.0 colour contrast checks for foreground/background pairs.

Usage: uv run contrast-tool <check> [colours...] [options]

Checks are auto-discovered from contrast_checker/checks/.
Each check module's docstring is its documentation.
Run `contrast-tool help <check>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, contrast-tool looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import sys

from contrast_checker import registry
from contrast_checker.core.env import default_level, load_env
from contrast_checker.core.report import format_json, format_text
from contrast_checker.core.types import LEVELS, Report


def _load_check_module(name: str) -> object:
    """Load the raw module for a check (for docstring access)."""
    return importlib.import_module(f'contrast_checker.checks.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_check_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    checks = registry.all_checks()

    epilog = (
        'Examples:\n'
        "  contrast-tool pair '#767676' '#ffffff'\n"
        "  contrast-tool pair 'rgb(25, 118, 210)' white --level AAA --large\n"
        '  contrast-tool variant inaccessible --json\n'
        '  contrast-tool theme --theme login.theme --fail-on-level\n'
        '  contrast-tool matrix --theme login.theme\n'
        '  contrast-tool help theme\n'
        '\n'
        'Env vars (set in .env or environment):\n'
        '  CONTRAST_TOOL_LEVEL  default conformance level (AA or AAA)\n'
        '  CONTRAST_TOOL_THEME  default .theme file for theme/matrix\n'
    )
    parser = argparse.ArgumentParser(
        prog='contrast-tool',
        description='WCAG 2.0 colour contrast checks for foreground/background pairs.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global --env-file option before subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='check', help='Check to run')

    # Auto-register each check as a subcommand using module docstring
    for name, chk in sorted(checks.items()):
        p = sub.add_parser(name, help=_short_help(name, chk.help))
        p.add_argument('values', nargs='*', metavar='VALUE', help='Colours (pair/matrix) or variant names (variant)')
        p.add_argument('-t', '--theme', help='Path to .theme file')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument(
            '-l',
            '--level',
            default=None,
            type=str.upper,
            choices=LEVELS,
            help='Conformance level to judge pass/fail (default: $CONTRAST_TOOL_LEVEL or AA)',
        )
        p.add_argument('--large', action='store_true', help='Judge ad-hoc pairs as large text')
        p.add_argument(
            '-f',
            '--fail-on-level',
            action='store_true',
            help='Exit 1 if any pair misses the conformance level (CI gating)',
        )

    # `help` subcommand prints full module docstring for a check
    help_parser = sub.add_parser('help', help='Print full docs for a check')
    help_parser.add_argument('command', nargs='?', help='Check name')

    return parser


def _print_help(command: str | None) -> None:
    """Print full module docstring for a check."""
    checks = registry.all_checks()

    if command is None:
        print('Available checks:\n')
        for name, chk in sorted(checks.items()):
            print(f'  {name:<10} {_short_help(name, chk.help)}')
        print('\nRun: contrast-tool help <check> for full docs.')
        return

    if command not in checks:
        print(f'Unknown check: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(checks))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_check_module(command).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {command!r})')
        return
    print(doc)


def _resolve_level(explicit: str | None) -> str:
    level = (explicit or default_level()).upper()
    if level not in LEVELS:
        print(f'contrast-tool: unknown level {level!r} (expected one of {", ".join(LEVELS)})', file=sys.stderr)
        sys.exit(2)
    return level


def _check_fail_on_level(report: Report) -> bool:
    """Return True if any pair missed the report's level."""
    if report.failed:
        print(f'\nFAIL: {len(report.failed)} pair(s) below WCAG {report.level}:')
        for name in report.failed:
            print(f'  {name}: {report.pairs[name]["ratio"]:.2f}:1')
        return True
    return False


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'contrast-tool: loaded {env_path}', file=sys.stderr)

    if not args.check:
        parser.print_help()
        sys.exit(1)

    if args.check == 'help':
        _print_help(getattr(args, 'command', None))
        return

    report = Report(level=_resolve_level(args.level))

    chk = registry.get(args.check)
    try:
        chk.execute(report, args)
    except KeyError as exc:
        print(f'contrast-tool: {exc.args[0]}', file=sys.stderr)
        sys.exit(2)
    except (ValueError, OSError) as exc:
        print(f'contrast-tool: {exc}', file=sys.stderr)
        sys.exit(2)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))

    # CI gate after output so the report is visible even on failure
    if args.fail_on_level and _check_fail_on_level(report):
        sys.exit(1)


if __name__ == '__main__':
    main()
