"""treeshrink - value generation and shrink trees for property-based testing.

Generators map a seeded source of 64-bit atoms into typed values whose
magnitude is controlled by a size parameter. Every generated value comes
with a lazily built tree of simpler candidates that a test driver walks to
minimize a failing example.

Public API:
    Shrinkable - Value plus lazy shrink children
    Generator - Base class of all generators
    arbitrary - Default generator for a type
    sample - Generate one Shrinkable from a size and seed
    pick - Generate a value under the bound context
    GenerationConfig - Validated size and seed
    GenerationContext - Explicit size/engine/replay context
    RandomEngine, AtomNode - Fresh and replayed randomness

Exceptions:
    TreeShrinkError - Base exception class
    NoDefaultGeneratorError - No default generator for a type
    NoContextBoundError - pick() outside any bound context

Submodules:
    treeshrink.gen - Primitive and composite generators
    treeshrink.shrink - Value and collection shrink combinators
    treeshrink.shrinkable - Shrinkable tree, Maybe, tree transforms
"""

from .api import GenerationConfig, pick, sample
from .context import GenerationContext, bind_context, current_context
from .diagnostics import NoContextBoundError, NoDefaultGeneratorError, TreeShrinkError
from .engine import AtomNode, RandomEngine
from .gen import Generator, arbitrary, register_default
from .shrinkable import ABSENT, Absent, Maybe, Present, Shrinkable

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("treeshrink")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ABSENT",
    "Absent",
    "AtomNode",
    "GenerationConfig",
    "GenerationContext",
    "Generator",
    "Maybe",
    "NoContextBoundError",
    "NoDefaultGeneratorError",
    "Present",
    "RandomEngine",
    "Shrinkable",
    "TreeShrinkError",
    "__version__",
    "arbitrary",
    "bind_context",
    "current_context",
    "pick",
    "register_default",
    "sample",
]
