"""Pure set algebra and predicates.

Every operation here leaves its operands untouched and returns a new Set
(or a bool). The named functions are the primary API; the Set operators
``+ | * & - ^ <= <`` are sugar over them.

Null handling differs by kind of operation:

- union, intersection, difference and symmetric_difference raise
  NullOperandError when either operand is None
- is_subset returns False and are_disjoint returns True when an operand
  is None
"""

from typing import Any, Optional

from setlib.core.errors import NullOperandError
from setlib.core.sets import Set


def _require_operands(set1: Optional[Set], set2: Optional[Set]) -> None:
    if set1 is None:
        raise NullOperandError("Set operand cannot be None", operand="set1")
    if set2 is None:
        raise NullOperandError("Set operand cannot be None", operand="set2")


def union(set1: Optional[Set], set2: Optional[Set]) -> Set:
    """Return a new set with the members of both sets.

    set1 is deep-copied first, then every member of set2 is added.

    Raises:
        NullOperandError: If either operand is None

    Example:
        >>> union(Set([1, 2, 3]), Set([3, 4, 5])) == Set([1, 2, 3, 4, 5])
        True
    """
    _require_operands(set1, set2)
    result = Set.copy_of(set1)
    for element in set2:
        result.add(element)
    return result


def intersection(set1: Optional[Set], set2: Optional[Set]) -> Set:
    """Return a new set with the members of set1 that set2 contains.

    Raises:
        NullOperandError: If either operand is None
    """
    _require_operands(set1, set2)
    result = Set()
    for element in set1:
        if set2.contains(element):
            result.add(element)
    return result


def difference(set1: Optional[Set], set2: Optional[Set]) -> Set:
    """Return a new set with the members of set1 that set2 lacks.

    Raises:
        NullOperandError: If either operand is None

    Example:
        >>> difference(Set([1, 2, 3, 4]), Set([3, 4, 5])) == Set([1, 2])
        True
    """
    _require_operands(set1, set2)
    result = Set()
    for element in set1:
        if not set2.contains(element):
            result.add(element)
    return result


def symmetric_difference(set1: Optional[Set], set2: Optional[Set]) -> Set:
    """Return the members that are in exactly one of the two sets.

    Computed as ``union(difference(set1, set2), difference(set2, set1))``.

    Raises:
        NullOperandError: If either operand is None
    """
    _require_operands(set1, set2)
    return union(difference(set1, set2), difference(set2, set1))


def is_subset(set1: Optional[Set], set2: Optional[Set]) -> bool:
    """Check whether every member of set1 is in set2.

    The empty set is a subset of every set. Returns False if either operand
    is None, including when both are.
    """
    if set1 is None or set2 is None:
        return False
    return all(set2.contains(element) for element in set1)


def is_proper_subset(set1: Optional[Set], set2: Optional[Set]) -> bool:
    """Check whether set1 is a subset of set2 and strictly smaller."""
    return is_subset(set1, set2) and len(set1) < len(set2)


def are_disjoint(set1: Optional[Set], set2: Optional[Set]) -> bool:
    """Check whether the sets share no members.

    Returns True if either operand is None.
    """
    if set1 is None or set2 is None:
        return True
    return intersection(set1, set2).is_empty()


def equals(set1: Optional[Set], set2: Optional[Set]) -> bool:
    """Structural equality; two None operands are equal, one None is not."""
    if set1 is None or set2 is None:
        return set1 is None and set2 is None
    return set1 == set2


def create_set(*elements: Any) -> Set:
    """Create a set from the given elements.

    Example:
        >>> len(create_set(1, "hello", 3.14))
        3
    """
    return Set(elements)


def create_complex_set() -> Set:
    """Build the nested example set ``{a, b, c, {a, b}, {}, {a, {c}}}``."""
    from setlib.core.parser import parse

    return parse("{a, b, c, {a, b}, {}, {a, {c}}}")
