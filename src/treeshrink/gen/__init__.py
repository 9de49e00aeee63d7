"""Generators package.

Primitive generators (integers, reals, booleans, characters), composite
generators (tuples, pairs, lists, dicts, text), and the type-indexed
default lookup.

Python 3.13+.
"""

from .base import (
    Generator,
    MappedGenerator,
    ResizedGenerator,
    ValueGenerator,
    generate_nested,
)
from .booleans import BooleanGenerator, booleans
from .characters import CharacterGenerator, characters
from .collection import CollectionGenerator, dicts, lists, text
from .integers import (
    IntegerGenerator,
    int8,
    int16,
    int32,
    int64,
    uint8,
    uint16,
    uint32,
    uint64,
)
from .reals import RealGenerator, float32, float64
from .registry import (
    GeneratorRegistry,
    arbitrary,
    create_default_registry,
    get_shared_registry,
    register_default,
)
from .tuples import TupleGenerator, pairs, tuples

__all__ = [
    "BooleanGenerator",
    "CharacterGenerator",
    "CollectionGenerator",
    "Generator",
    "GeneratorRegistry",
    "IntegerGenerator",
    "MappedGenerator",
    "RealGenerator",
    "ResizedGenerator",
    "TupleGenerator",
    "ValueGenerator",
    "arbitrary",
    "booleans",
    "characters",
    "create_default_registry",
    "dicts",
    "float32",
    "float64",
    "generate_nested",
    "get_shared_registry",
    "int8",
    "int16",
    "int32",
    "int64",
    "lists",
    "pairs",
    "register_default",
    "text",
    "tuples",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
]
