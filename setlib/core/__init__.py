"""
Core components for setlib.

This package contains the element schema, the generic container, the Set
and SetOfSets types, the literal parser, set algebra and power-set
generation.
"""

__all__ = []
