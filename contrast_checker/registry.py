"""Check auto-discovery and registration.

Scans contrast_checker/checks/ for modules that define a `check` object
of type Check. Collects them into a dict keyed by name.

Handles both normal Python (pkgutil.iter_modules) and frozen PyInstaller
binaries (where iter_modules returns nothing — falls back to explicit
imports from checks/__init__.py).
"""

import importlib
import pkgutil

from contrast_checker.core.types import Check

_registry: dict[str, Check] = {}

# Known check module names, fallback for frozen binaries
_CHECK_MODULES = [
    'matrix',
    'pair',
    'theme',
    'variant',
]


def discover() -> dict[str, Check]:
    """Import all check modules and return the registry."""
    if _registry:
        return _registry

    import contrast_checker.checks as pkg

    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]

    # Frozen binary fallback: pkgutil finds nothing, use known list
    if not found_modules:
        found_modules = _CHECK_MODULES

    for modname in found_modules:
        module = importlib.import_module(f'contrast_checker.checks.{modname}')
        chk = getattr(module, 'check', None)
        if isinstance(chk, Check):
            _registry[chk.name] = chk

    return _registry


def get(name: str) -> Check:
    """Get a check by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown check: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_checks() -> dict[str, Check]:
    """Return all registered checks."""
    return discover()
