"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here so exception constructors receive
    ready-made Diagnostic objects instead of ad-hoc strings.
    """

    @staticmethod
    def no_default_generator(type_name: str) -> Diagnostic:
        """No generator registered for a requested type.

        Args:
            type_name: Printable name of the requested type

        Returns:
            Diagnostic for NO_DEFAULT_GENERATOR
        """
        msg = f"No default generator for type '{type_name}'"
        return Diagnostic(
            code=DiagnosticCode.NO_DEFAULT_GENERATOR,
            message=msg,
            hint="Register one with register_default() or pass a generator explicitly",
            subject=type_name,
        )

    @staticmethod
    def unsupported_type_arguments(type_name: str) -> Diagnostic:
        """Generic type used without the arguments its generator needs.

        Args:
            type_name: Printable name of the generic type

        Returns:
            Diagnostic for UNSUPPORTED_TYPE_ARGUMENTS
        """
        msg = f"Type '{type_name}' needs concrete type arguments"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_TYPE_ARGUMENTS,
            message=msg,
            hint="Use e.g. list[int], dict[str, int] or tuple[int, bool]",
            subject=type_name,
        )

    @staticmethod
    def empty_tuple_generator() -> Diagnostic:
        """Tuple generator constructed without components.

        Returns:
            Diagnostic for EMPTY_TUPLE_GENERATOR
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_TUPLE_GENERATOR,
            message="Tuple generator requires at least one component",
            hint="Pass one generator per tuple position",
        )

    @staticmethod
    def no_context_bound() -> Diagnostic:
        """Ambient generation context requested outside any binding.

        Returns:
            Diagnostic for NO_CONTEXT_BOUND
        """
        return Diagnostic(
            code=DiagnosticCode.NO_CONTEXT_BOUND,
            message="No generation context is bound",
            hint="Call pick() only from inside a generator or a bind_context() block",
        )

    @staticmethod
    def negative_size(size: int) -> Diagnostic:
        """Size parameter below zero.

        Args:
            size: The rejected size

        Returns:
            Diagnostic for NEGATIVE_SIZE
        """
        msg = f"Size must be >= 0, got {size}"
        return Diagnostic(code=DiagnosticCode.NEGATIVE_SIZE, message=msg)

    @staticmethod
    def invalid_bit_width(bits: int) -> Diagnostic:
        """Integer generator constructed with an unsupported width.

        Args:
            bits: The rejected bit width

        Returns:
            Diagnostic for INVALID_BIT_WIDTH
        """
        msg = f"Bit width must be between 1 and 64, got {bits}"
        return Diagnostic(code=DiagnosticCode.INVALID_BIT_WIDTH, message=msg)
