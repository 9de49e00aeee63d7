"""Shrink combinators package.

Value-level candidate sequences for primitive shrinkers, and element-tree
strategies for collections.

Python 3.13+.
"""

from .collection import (
    CollectionShrinkStrategy,
    default_strategy,
    removal_then_elements,
    remove_chunks,
    shrink_each,
)
from .sequences import constant, map_values, nothing, sequentially, towards

__all__ = [
    "CollectionShrinkStrategy",
    "constant",
    "default_strategy",
    "map_values",
    "nothing",
    "removal_then_elements",
    "remove_chunks",
    "sequentially",
    "shrink_each",
    "towards",
]
