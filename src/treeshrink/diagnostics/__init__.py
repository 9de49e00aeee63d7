"""Diagnostic system for treeshrink errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    GeneratorConstructionError,
    NoContextBoundError,
    NoDefaultGeneratorError,
    TreeShrinkError,
)
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "GeneratorConstructionError",
    "NoContextBoundError",
    "NoDefaultGeneratorError",
    "TreeShrinkError",
]
