"""Auto-discovery of check modules.

Every .py file in this package that defines a `check` object is
auto-registered by contrast_checker.registry.discover().

The explicit imports below ensure PyInstaller includes these modules
in the frozen binary. Without them, pkgutil.iter_modules cannot find
the check files at runtime.
"""

# PyInstaller hidden imports: keep this list in sync with check modules
import contrast_checker.checks.matrix as _matrix  # noqa: F401
import contrast_checker.checks.pair as _pair  # noqa: F401
import contrast_checker.checks.theme as _theme  # noqa: F401
import contrast_checker.checks.variant as _variant  # noqa: F401
