"""
Core schema definitions for set elements and container capabilities.

These protocols and dataclasses form the foundation of the setlib
element model.
"""

from setlib.core.schema.element import (
    ELEMENT_TYPES,
    Element,
    Float,
    Integer,
    Nested,
    Text,
    format_element,
    to_element,
)
from setlib.core.schema.set_like import SetLike

__all__ = [
    "ELEMENT_TYPES",
    "Element",
    "Float",
    "Integer",
    "Nested",
    "Text",
    "format_element",
    "to_element",
    "SetLike",
]
