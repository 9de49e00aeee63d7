"""Type-indexed lookup of default generators.

arbitrary(tp) resolves a type to its default generator when the generator
is being built, never while values flow. Scalar types are looked up in a
GeneratorRegistry; tuple[...], list[T] and dict[K, V] are composed from the
defaults of their type arguments. A type with no default fails right there
with NoDefaultGeneratorError.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, get_args, get_origin

from treeshrink.diagnostics import (
    ErrorTemplate,
    GeneratorConstructionError,
    NoDefaultGeneratorError,
)

from .base import Generator
from .booleans import booleans
from .collection import dicts, lists, text
from .integers import int64
from .reals import float64
from .tuples import TupleGenerator

__all__ = [
    "GeneratorRegistry",
    "arbitrary",
    "create_default_registry",
    "get_shared_registry",
    "register_default",
]

logger = logging.getLogger(__name__)


def _type_name(tp: object) -> str:
    return getattr(tp, "__name__", None) or repr(tp)


class GeneratorRegistry:
    """Mapping from scalar types to their default generators.

    Example:
        >>> registry = create_default_registry()
        >>> int in registry
        True
        >>> registry.arbitrary(list[bool])
        <CollectionGenerator element=<BooleanGenerator>>
    """

    __slots__ = ("_frozen", "_generators")

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._generators: dict[object, Generator[Any]] = {}
        self._frozen = False

    def register(self, tp: object, generator: Generator[Any]) -> None:
        """Make generator the default for tp.

        Raises:
            TypeError: If the registry is frozen
        """
        if self._frozen:
            msg = "Cannot register on a frozen GeneratorRegistry; use copy() first"
            raise TypeError(msg)
        if tp in self._generators:
            logger.warning("Replacing default generator for %s", _type_name(tp))
        self._generators[tp] = generator
        logger.debug("Registered default generator for %s: %r", _type_name(tp), generator)

    def freeze(self) -> None:
        """Reject further registrations."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        """Whether register() is rejected."""
        return self._frozen

    def copy(self) -> GeneratorRegistry:
        """Return an unfrozen copy with the same registrations."""
        registry = GeneratorRegistry()
        registry._generators = dict(self._generators)
        return registry

    def arbitrary(self, tp: object) -> Generator[Any]:
        """Return the default generator for tp.

        Raises:
            NoDefaultGeneratorError: If tp (or one of its type arguments) has
                no default generator
            GeneratorConstructionError: If a generic type lacks usable
                type arguments
        """
        registered = self._generators.get(tp)
        if registered is not None:
            return registered

        origin = get_origin(tp)
        args = get_args(tp)
        if origin is tuple:
            if not args or Ellipsis in args:
                raise GeneratorConstructionError(
                    ErrorTemplate.unsupported_type_arguments(repr(tp))
                )
            return TupleGenerator(*(self.arbitrary(arg) for arg in args))
        if origin is list and len(args) == 1:
            return lists(self.arbitrary(args[0]))
        if origin is dict and len(args) == 2:  # noqa: PLR2004 - key and value
            return dicts(self.arbitrary(args[0]), self.arbitrary(args[1]))
        name = repr(tp) if origin is not None else _type_name(tp)
        raise NoDefaultGeneratorError(ErrorTemplate.no_default_generator(name))

    def __contains__(self, tp: object) -> bool:
        """Whether tp has a registered scalar default."""
        return tp in self._generators

    def __iter__(self) -> Iterator[object]:
        """Iterate over registered types."""
        return iter(self._generators)

    def __len__(self) -> int:
        """Number of registered types."""
        return len(self._generators)

    def __repr__(self) -> str:
        """Return representation for debugging."""
        return f"GeneratorRegistry(types={len(self._generators)}, frozen={self._frozen})"


def create_default_registry() -> GeneratorRegistry:
    """Create a fresh registry with the built-in scalar defaults.

    int -> int64, float -> float64, bool -> booleans, str -> text().
    """
    registry = GeneratorRegistry()
    registry.register(int, int64)
    registry.register(float, float64)
    registry.register(bool, booleans)
    registry.register(str, text())
    return registry


# Module-level registry behind arbitrary() and register_default().
# Initialized lazily on first access to avoid import-time side effects.
_SHARED_REGISTRY: GeneratorRegistry | None = None


def get_shared_registry() -> GeneratorRegistry:
    """Return the registry used by arbitrary() and register_default()."""
    global _SHARED_REGISTRY  # noqa: PLW0603 - lazy module-level singleton
    if _SHARED_REGISTRY is None:
        _SHARED_REGISTRY = create_default_registry()
    return _SHARED_REGISTRY


def arbitrary(tp: object) -> Generator[Any]:
    """Default generator for tp from the shared registry.

    Example:
        >>> gen = arbitrary(dict[str, tuple[int, bool]])
    """
    return get_shared_registry().arbitrary(tp)


def register_default(tp: object, generator: Generator[Any]) -> None:
    """Register generator as the shared default for tp."""
    get_shared_registry().register(tp, generator)
