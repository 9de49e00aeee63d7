"""treeshrink exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class TreeShrinkError(Exception):
    """Base exception for all treeshrink errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TreeShrinkError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class GeneratorConstructionError(TreeShrinkError):
    """A generator could not be built from the given arguments.

    Raised while composing generators, before any value is produced.
    """


class NoDefaultGeneratorError(GeneratorConstructionError):
    """No default generator exists for the requested type.

    Example:
        arbitrary(Decimal)  # nothing registered for Decimal
    """


class NoContextBoundError(TreeShrinkError):
    """The ambient generation context was read outside any binding."""
