"""
minicalc - a tiny expression calculator.

Lexes, parses and evaluates arithmetic, comparison and assignment
expressions over 64-bit floats.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

# Re-export commonly used types for convenience
from .core import ir
from .core.errors import EvalError, LexError, MinicalcError, ParseError
from .core.pipeline import evaluate_source, parse_source


def _get_version() -> str:
    """Get version from installed package metadata."""
    try:
        return _metadata_version("minicalc")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "ir",
    "MinicalcError",
    "LexError",
    "ParseError",
    "EvalError",
    "evaluate_source",
    "parse_source",
]
