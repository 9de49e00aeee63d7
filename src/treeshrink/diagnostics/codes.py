"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Construction errors (generator lookup and composition)
        2000-2999: Context errors (ambient binding misuse)
        3000-3999: Configuration errors
    """

    # Construction errors (1000-1999)
    NO_DEFAULT_GENERATOR = 1001
    UNSUPPORTED_TYPE_ARGUMENTS = 1002
    EMPTY_TUPLE_GENERATOR = 1003

    # Context errors (2000-2999)
    NO_CONTEXT_BOUND = 2001

    # Configuration errors (3000-3999)
    NEGATIVE_SIZE = 3001
    INVALID_BIT_WIDTH = 3002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        subject: Name of the type or generator the error is about
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    subject: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic as a multi-line report.

        Example output:
            error[NO_DEFAULT_GENERATOR]: No default generator for type 'Decimal'
              = subject: Decimal
              = help: Register one with register_default() or pass a generator

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.subject is not None:
            lines.append(f"  = subject: {self.subject}")
        if self.hint is not None:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
