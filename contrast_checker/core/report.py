"""Report builder — text and JSON output for contrast-tool results."""

import json
import os
from typing import Any

from contrast_checker.core.types import Report

_FLAGS = (
    ('aa_normal', 'AA'),
    ('aaa_normal', 'AAA'),
    ('aa_large', 'AA large'),
    ('aaa_large', 'AAA large'),
)


def _mark(ok: bool) -> str:
    return '✓' if ok else '✗'


def _format_matrix(data: dict[str, Any]) -> list[str]:
    colours = data.get('colours', [])
    ratios = data.get('ratios', [])
    lines = [' ' * 9 + ''.join(f'{c:>9}' for c in colours)]
    for colour, row in zip(colours, ratios):
        lines.append(f'{colour:>9}' + ''.join(f'{r:>9.2f}' for r in row))
    if 'min' in data:
        lines.append(f'  lowest {data["min"]:.2f}:1  highest {data["max"]:.2f}:1')
    return lines


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    header = f'contrast-tool: level {report.level}'
    if report.theme_path:
        header += f' — {os.path.basename(report.theme_path)} ({len(report.pairs)} pairs)'
    lines.append(header)
    lines.append('')

    for pair_name, data in report.pairs.items():
        size = ', large' if data.get('large') else ''
        lines.append(f'── {pair_name} [{data["fg"]} on {data["bg"]}{size}]')
        if data.get('doc'):
            for doc_line in data['doc'].splitlines():
                lines.append(f'  /// {doc_line}')
        lines.append(f'  ratio: {data["ratio"]:.2f}:1')
        lines.append('  ' + '  '.join(f'{label} {_mark(data[key])}' for key, label in _FLAGS))
        verdict = 'PASS' if data['pass'] else 'FAIL'
        lines.append(f'  {verdict} {report.level}{" large" if data.get("large") else ""}')
        lines.append('')

    for section, data in report.sections.items():
        lines.append(f'── {section}')
        if section == 'matrix':
            lines.extend(_format_matrix(data))
        else:
            for k, v in data.items():
                lines.append(f'  {section}.{k}: {v}')
        lines.append('')

    total = report.pass_count + report.fail_count
    if total > 0:
        lines.append(f'PASS {report.pass_count}/{total} pairs  FAIL {report.fail_count}/{total} pairs')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {'level': report.level}
    if report.theme_path:
        obj['theme'] = report.theme_path

    obj['pairs'] = []
    for pair_name, data in report.pairs.items():
        obj['pairs'].append({'name': pair_name, **data})

    if report.sections:
        obj['sections'] = report.sections

    obj['summary'] = {
        'total': report.pass_count + report.fail_count,
        'pass': report.pass_count,
        'fail': report.fail_count,
    }
    return json.dumps(obj, indent=2)
