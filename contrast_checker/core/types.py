"""Shared types for contrast-tool: RGB, ContrastReport, ColourPair, ThemeSpec, Check, Report."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

RGB = tuple[int, int, int]

LEVELS = ('AA', 'AAA')


class InvalidColorFormat(ValueError):
    """Raised when a colour is not 3 or 6 hex digits with an optional leading '#'."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f'Invalid hex colour: {value!r} (expected #rgb or #rrggbb)')


@dataclass(frozen=True)
class ContrastReport:
    """Result of evaluating one foreground/background pair."""

    ratio: float
    aa_normal: bool  # >= 4.5
    aaa_normal: bool  # >= 7.0
    aa_large: bool  # >= 3.0
    aaa_large: bool  # >= 4.5

    def passes(self, level: str = 'AA', large: bool = False) -> bool:
        """Return the flag for a conformance level and text size."""
        key = level.upper()
        if key not in LEVELS:
            raise ValueError(f'Unknown conformance level: {level}. Available: {", ".join(LEVELS)}')
        if key == 'AA':
            return self.aa_large if large else self.aa_normal
        return self.aaa_large if large else self.aaa_normal


@dataclass
class ColourPair:
    """A named foreground/background pair, from a theme file or a built-in variant."""

    name: str
    fg: str  # normalised #rrggbb
    bg: str  # normalised #rrggbb
    large: bool = False  # large text (>= 18pt, or 14pt bold)
    doc: str | None = None  # /// doc comments


@dataclass
class ThemeSpec:
    """Parsed .theme file."""

    name: str
    pairs: list[ColourPair] = field(default_factory=list)
    raw: str = ''  # original file text


class Check:
    """A self-registering contrast check.

    Usage in a check module:

        check = Check(name='pair', help='Evaluate one foreground/background pair')

        @check.run
        def run(report, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, report: Report, args: Any) -> None:
        """Execute the check's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Check {self.name} has no run function')
        self._run_fn(report, args)


@dataclass
class Report:
    """Accumulates results from checks for text/JSON output."""

    level: str = 'AA'
    theme_path: str | None = None
    pairs: dict[str, dict[str, Any]] = field(default_factory=dict)
    sections: dict[str, dict[str, Any]] = field(default_factory=dict)
    passed: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)

    @property
    def pass_count(self) -> int:
        return len(self.passed)

    @property
    def fail_count(self) -> int:
        return len(self.failed)

    def add_pair(self, pair: ColourPair, result: ContrastReport) -> bool:
        """Record one evaluated pair. Returns whether it meets the report's level."""
        if pair.name in self.pairs:
            raise ValueError(f'Duplicate pair name: {pair.name!r}')
        passed = result.passes(self.level, large=pair.large)
        self.pairs[pair.name] = {
            'fg': pair.fg,
            'bg': pair.bg,
            'large': pair.large,
            'ratio': round(result.ratio, 2),
            'aa_normal': result.aa_normal,
            'aaa_normal': result.aaa_normal,
            'aa_large': result.aa_large,
            'aaa_large': result.aaa_large,
            'pass': passed,
        }
        if pair.doc:
            self.pairs[pair.name]['doc'] = pair.doc
        if passed:
            self.record_pass(pair.name)
        else:
            self.record_fail(pair.name)
        return passed

    def add(self, section: str, data: dict[str, Any]) -> None:
        """Add free-form results (e.g. a ratio matrix) under a section name."""
        self.sections[section] = data

    def record_pass(self, pair_name: str) -> None:
        self.passed.append(pair_name)

    def record_fail(self, pair_name: str) -> None:
        self.failed.append(pair_name)
