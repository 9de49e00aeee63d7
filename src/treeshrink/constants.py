"""Shared constants for treeshrink.

Centralized configuration constants used by the generators, the random
source and the shrink combinators. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Size: Magnitude control shared by all generators
- Randomness: Atom width and derived limits
- Shrinking: Fixed candidates used by primitive shrinkers

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Size
    "REFERENCE_SIZE",
    "DEFAULT_SIZE",
    "REAL_GROWTH_BASE",
    "MAX_REAL_EXPONENT",
    # Randomness
    "ATOM_BITS",
    "ATOM_MAX",
    "INT64_MAX",
    "DEFAULT_SEED",
    # Shrinking
    "SIMPLE_CHARACTERS",
]

# ============================================================================
# SIZE
# ============================================================================

# Reference ceiling for the size parameter.
# Integral generators scale their bit width linearly with size up to this
# value; at REFERENCE_SIZE the full range of the type is reachable.
REFERENCE_SIZE: int = 100

# Size used by sample() when no configuration is given.
DEFAULT_SIZE: int = REFERENCE_SIZE

# Real numbers grow as REAL_GROWTH_BASE ** size.
# 1.2 ** 100 is roughly 8.3e7, so magnitudes stay well inside binary32 range.
REAL_GROWTH_BASE: float = 1.2

# Exponent cap for real generation. 1.2 ** 400 is about 3.3e31, inside binary32
# range, so float32 rounding never overflows however large the size gets.
MAX_REAL_EXPONENT: int = 400

# ============================================================================
# RANDOMNESS
# ============================================================================

# Width of one atom drawn from the random source.
ATOM_BITS: int = 64

ATOM_MAX: int = (1 << ATOM_BITS) - 1

# Normalization divisor for real-number generation.
INT64_MAX: int = (1 << 63) - 1

DEFAULT_SEED: int = 0

# ============================================================================
# SHRINKING
# ============================================================================

# Characters every other character shrinks towards, simplest first.
SIMPLE_CHARACTERS: str = "abc"
