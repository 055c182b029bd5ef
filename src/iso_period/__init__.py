from typing import TYPE_CHECKING, Any

import autosemver

if TYPE_CHECKING:
    # These imports are only for static type checkers (e.g., Pyright, IDEs).
    # At runtime, they are not executed, so the modules won't be imported unless needed.
    from iso_period.period import Period, format_period, parse_period

try:
    __version__ = autosemver.packaging.get_current_version(project_name="iso_period")
except Exception:
    __version__ = "0.0.0"


# Declare the public API of the package. This tells `from iso_period import *` what to include.
__all__ = ["Period", "parse_period", "format_period"]  # noqa


def __getattr__(name: str) -> Any:
    # NOTE: We use __getattr__ for lazy imports instead of top-level imports because setuptools may evaluate
    #   this module during build (e.g., to use the value of iso_period.__version__), before submodules like
    #   `iso_period.period` exist. This avoids import-time errors when building from source using pyproject.toml
    #   and ensures compatibility with dynamic versioning tools like autosemver.

    if name in ("Period", "parse_period", "format_period"):
        from iso_period import period  # noqa: PLC0415

        return getattr(period, name)

    raise AttributeError(f"module {__name__} has no attribute {name}")
