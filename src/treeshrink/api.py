"""Top-level entry points for drivers and custom generators.

Provides:
    - GenerationConfig: Validated size and seed for one generation request
    - sample: Generate one Shrinkable from a fresh, isolated context
    - pick: Generate a value under the currently bound context

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from treeshrink.constants import DEFAULT_SEED, DEFAULT_SIZE
from treeshrink.context import GenerationContext, bind_context, current_context
from treeshrink.diagnostics import ErrorTemplate
from treeshrink.engine import AtomNode
from treeshrink.gen import Generator
from treeshrink.shrinkable import Shrinkable

__all__ = ["GenerationConfig", "pick", "sample"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GenerationConfig:
    """Immutable configuration for one generation request.

    Attributes:
        size: Magnitude control (default: DEFAULT_SIZE)
        seed: Seed of the random engine (default: DEFAULT_SEED)

    Example:
        >>> from treeshrink.gen import lists, int32
        >>> tree = sample(lists(int32), GenerationConfig(size=10, seed=3))
        >>> len(tree.value) <= 10
        True
    """

    size: int = DEFAULT_SIZE
    seed: int = DEFAULT_SEED

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If size is negative
        """
        if self.size < 0:
            msg = str(ErrorTemplate.negative_size(self.size))
            raise ValueError(msg)

    def to_context(self, node: AtomNode | None = None) -> GenerationContext:
        """Build a fresh context (new engine) for this configuration."""
        return GenerationContext.create(size=self.size, seed=self.seed).with_node(node)


def sample[T](
    generator: Generator[T],
    config: GenerationConfig | None = None,
    *,
    node: AtomNode | None = None,
) -> Shrinkable[T]:
    """Generate one value and its shrink tree in an isolated context.

    Args:
        generator: What to generate
        config: Size and seed (default: GenerationConfig())
        node: Recorded atoms to replay instead of drawing fresh ones

    Returns:
        Shrinkable rooted at the generated value
    """
    if config is None:
        config = GenerationConfig()
    context = config.to_context(node)
    logger.debug(
        "Sampling %r (size=%d, seed=%d, replay=%s)",
        generator,
        config.size,
        config.seed,
        node is not None,
    )
    with bind_context(context):
        return generator.generate(context.size, context)


def pick[T](generator: Generator[T]) -> T:
    """Generate a value with the currently bound context.

    Intended for generator code running inside sample() or an explicit
    bind_context() block.

    Raises:
        NoContextBoundError: If no context is bound
    """
    context = current_context()
    return generator.generate(context.size, context).value
