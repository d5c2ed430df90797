"""Top-level package for examtex.

Provides subpackages:
- examtex.core – data models, escaping, schema validation, serialization
- examtex.builder – content/layout generators, compositor and the exam paper generator
"""

from importlib.metadata import PackageNotFoundError, version


def _get_version() -> str:
    """Get version from installed package metadata."""
    try:
        return version("examtex")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

__all__ = ["__version__"]
