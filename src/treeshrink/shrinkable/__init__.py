"""Shrinkable tree package.

Provides the lazy shrink tree, its structural transforms, and the Maybe
result used when a transform may remove the whole tree.

Python 3.13+.
"""

from . import transform
from .core import Shrinkable, just, shrink_recur, shrinkable, walk_first
from .maybe import ABSENT, Absent, Maybe, Present, is_present

__all__ = [
    "ABSENT",
    "Absent",
    "Maybe",
    "Present",
    "Shrinkable",
    "is_present",
    "just",
    "shrink_recur",
    "shrinkable",
    "transform",
    "walk_first",
]
