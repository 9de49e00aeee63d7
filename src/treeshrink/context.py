"""Generation context and scoped ambient binding.

Provides the state every generator call reads:
    - GenerationContext: Explicit, immutable per-request context
      (size, random engine, replay node) passed down the call chain
    - bind_context: Context manager publishing a GenerationContext through a
      ContextVar so nested generator code can reach it via pick()

Architecture:
    Generators receive the context explicitly. The ContextVar binding only
    exists for user-written generator functions that call pick() without
    threading the context themselves. Each binding is pushed on entry and
    restored from its token on exit, so inner bindings never leak into
    outer calls.

Thread Safety:
    GenerationContext is frozen. The ContextVar gives each thread and async
    task its own binding; the RandomEngine inside a context is the only
    mutable, request-scoped state.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace

from treeshrink.constants import DEFAULT_SEED, REFERENCE_SIZE
from treeshrink.diagnostics import ErrorTemplate, NoContextBoundError
from treeshrink.engine import AtomNode, RandomEngine

__all__ = [
    "GenerationContext",
    "bind_context",
    "current_context",
    "current_node",
    "current_size",
    "pick_atom",
]

logger = logging.getLogger(__name__)

_current_context: ContextVar[GenerationContext | None] = ContextVar(
    "treeshrink_generation_context", default=None
)


@dataclass(frozen=True, slots=True)
class GenerationContext:
    """Explicit context for one generation request.

    Attributes:
        size: Magnitude control for generated values (>= 0)
        engine: Source of fresh atoms
        node: Recorded atom to replay instead of drawing, or None

    Example:
        >>> ctx = GenerationContext.create(size=10, seed=1)
        >>> ctx.resized(0).size
        0
        >>> ctx.for_child(0).node is None
        True
    """

    size: int
    engine: RandomEngine
    node: AtomNode | None = None

    def __post_init__(self) -> None:
        """Validate size.

        Raises:
            ValueError: If size is negative
        """
        if self.size < 0:
            msg = str(ErrorTemplate.negative_size(self.size))
            raise ValueError(msg)

    @classmethod
    def create(
        cls, size: int = REFERENCE_SIZE, seed: int = DEFAULT_SEED
    ) -> GenerationContext:
        """Create a context with a fresh engine seeded from seed."""
        return cls(size=size, engine=RandomEngine(seed))

    def resized(self, size: int) -> GenerationContext:
        """Return the same context with a different size."""
        return replace(self, size=size)

    def with_node(self, node: AtomNode | None) -> GenerationContext:
        """Return the same context replaying node."""
        return replace(self, node=node)

    def for_child(self, index: int) -> GenerationContext:
        """Context for the index-th nested draw of a composite value.

        Shares size and engine; replays the recorded child atom if the
        current node has one, otherwise draws fresh.
        """
        if self.node is None:
            return self
        return replace(self, node=self.node.child(index))


def pick_atom(context: GenerationContext) -> int:
    """Return the atom for one primitive draw.

    Replays the recorded atom when the context carries a node, otherwise
    draws a fresh atom from the engine.
    """
    if context.node is not None:
        return context.node.atom
    return context.engine.next_atom()


@contextmanager
def bind_context(context: GenerationContext) -> Iterator[GenerationContext]:
    """Publish context as the ambient generation context for the block.

    Usage:
        with bind_context(GenerationContext.create(size=20, seed=7)):
            value = pick(lists(int32))
    """
    token = _current_context.set(context)
    logger.debug("Bound generation context (size=%d)", context.size)
    try:
        yield context
    finally:
        _current_context.reset(token)


def current_context() -> GenerationContext:
    """Return the innermost bound context.

    Raises:
        NoContextBoundError: If no bind_context() block is active
    """
    context = _current_context.get()
    if context is None:
        raise NoContextBoundError(ErrorTemplate.no_context_bound())
    return context


def current_size() -> int:
    """Size of the innermost bound context."""
    return current_context().size


def current_node() -> AtomNode | None:
    """Replay node of the innermost bound context, if any."""
    return current_context().node
