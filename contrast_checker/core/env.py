"""Environment variable loading for contrast-tool.

Load order (first wins):
  1. Existing OS environment variables — never overwrite.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Walking stops at .git so we never load a .env from outside the repo.
Only sets variables that are NOT already in os.environ.

Recognised variables:
  CONTRAST_TOOL_LEVEL   default conformance level (AA or AAA)
  CONTRAST_TOOL_THEME   default .theme file for the theme/matrix checks
"""

import os
from pathlib import Path

LEVEL_VAR = 'CONTRAST_TOOL_LEVEL'
THEME_VAR = 'CONTRAST_TOOL_THEME'


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    here = start.resolve()
    for directory in (here, *here.parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or file (worktree)
        if (directory / '.git').exists():
            return None
    return None


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in '"\'':
        return value[1:-1]
    return value


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict.

    Handles KEY=value, KEY="value", KEY='value' and a leading `export `.
    Lines without `=` and `#` comments are ignored.
    """
    result: dict[str, str] = {}
    for raw_line in path.read_text(encoding='utf-8').splitlines():
        line = raw_line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        if line.startswith('export '):
            line = line[len('export ') :].lstrip()
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = _unquote(value.strip())
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)

    return path


def default_level() -> str:
    return os.environ.get(LEVEL_VAR) or 'AA'


def default_theme() -> str | None:
    return os.environ.get(THEME_VAR) or None
