"""
setlib: Mathematical sets with nested members

A mutable Set type with structural equality, a brace-delimited literal
grammar, pure and in-place set algebra, and power-set generation.
"""

__version__ = "1.0.0"

from setlib.core.algebra import (
    are_disjoint,
    create_complex_set,
    create_set,
    difference,
    equals,
    intersection,
    is_proper_subset,
    is_subset,
    symmetric_difference,
    union,
)
from setlib.core.errors import (
    DefinitionError,
    MalformedLiteralError,
    NullElementError,
    NullOperandError,
    SetError,
    UnsupportedElementError,
)
from setlib.core.parser import format_set, parse
from setlib.core.power_set import power_set
from setlib.core.schema import Float, Integer, Nested, Text
from setlib.core.sets import Set, SetOfSets

__all__ = [
    "__version__",
    "Set",
    "SetOfSets",
    "Integer",
    "Float",
    "Text",
    "Nested",
    "parse",
    "format_set",
    "power_set",
    "union",
    "intersection",
    "difference",
    "symmetric_difference",
    "is_subset",
    "is_proper_subset",
    "are_disjoint",
    "equals",
    "create_set",
    "create_complex_set",
    "SetError",
    "NullElementError",
    "NullOperandError",
    "MalformedLiteralError",
    "UnsupportedElementError",
    "DefinitionError",
]
