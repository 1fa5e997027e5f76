"""Set and SetOfSets containers.

Set is the mathematical set of heterogeneous, possibly nested Elements.
SetOfSets is the same generic container holding Sets directly; it is what
power-set generation returns.

Example::

    >>> s = Set([1, "a", 2.5, Set(["x"])])
    >>> len(s)
    4
    >>> 1 in s, 1.0 in s
    (True, False)
    >>> s == Set.from_string("{a, 2.5, {x}, 1}")
    True
"""

import logging
from typing import Any, Iterable, List, Optional

from setlib.core.container import HashedSet
from setlib.core.errors import NullOperandError, UnsupportedElementError
from setlib.core.identity import issued_count, next_id
from setlib.core.schema.element import Element, Nested, format_element, to_element

logger = logging.getLogger(__name__)


class Set(HashedSet[Element]):
    """Mutable mathematical set with structural equality.

    Members are Integer, Float, Text or Nested elements; plain int, float,
    str and Set values are coerced on the way in. Every instance receives a
    unique id from the process-wide identity registry. The id is for
    debugging only and never affects equality or hashing.

    Construction:
        - ``Set()``: empty set
        - ``Set(iterable)``: set of the given values
        - ``Set(other_set)``: independent deep copy of other_set
        - ``Set.from_string("{1, {a}}")``: parsed literal

    Attributes:
        id: Unique identifier assigned at construction
    """

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._id = next_id()
        if isinstance(items, Set):
            items = items._copied_members()
        super().__init__(items)

    @property
    def id(self) -> int:
        return self._id

    @classmethod
    def created_count(cls) -> int:
        """Total number of Set instances created in this process."""
        return issued_count()

    @classmethod
    def copy_of(cls, other: Optional["Set"]) -> "Set":
        """Deep copy constructor.

        Raises:
            NullOperandError: If other is None
        """
        if other is None:
            raise NullOperandError("Cannot copy None", operand="other")
        return cls(other)

    @staticmethod
    def from_string(literal: str) -> "Set":
        """Parse a literal such as ``"{1, 2, {a, b}}"``.

        Raises:
            MalformedLiteralError: If the literal is not wrapped in braces
        """
        from setlib.core.parser import parse

        return parse(literal)

    def deep_copy(self) -> "Set":
        """Copy the set, recursively copying nested sets.

        Scalar members are shared since they are immutable; every Nested
        member gets a fresh inner Set with a fresh id.
        """
        return Set(self)

    def __deepcopy__(self, memo: dict) -> "Set":
        return self.deep_copy()

    def __copy__(self) -> "Set":
        return Set(list(self._elements))

    def _copied_members(self) -> List[Element]:
        return [
            Nested(e.value.deep_copy()) if isinstance(e, Nested) else e
            for e in self._elements
        ]

    # ------------------------------------------------------------------
    # Container hooks
    # ------------------------------------------------------------------

    def _coerce(self, value: Any) -> Element:
        return to_element(value)

    def _format_member(self, member: Element) -> str:
        return format_element(member)

    def add(self, element: Any) -> None:
        """Add an element; adding an equal element again is a no-op.

        If this set is reachable from a Set being added (``s.add(s)`` or a
        nested path back to s), a deep-copy snapshot is added instead so the
        structure stays acyclic.

        Adding a nested set costs O(m), where m is the total number of
        members in its subtree: the reachability walk visits every nested
        set, and hashing rebuilds a frozenset of members at every level
        because set hashes are not cached. Building deep or wide nested
        structures one member at a time (as parse and union do) is therefore
        quadratic in the worst case.

        Raises:
            NullElementError: If element is None
            UnsupportedElementError: If element is not int, float, str,
                Set or an Element, or is an int outside the signed 64-bit
                range
        """
        inner = element.value if isinstance(element, Nested) else element
        if isinstance(inner, Set) and self._is_reachable_from(inner):
            logger.debug(f"Set {self.id} reachable from added set {inner.id}, adding a snapshot")
            element = Nested(inner.deep_copy())
        super().add(element)

    def _is_reachable_from(self, root: "Set") -> bool:
        stack = [root]
        seen = set()
        while stack:
            current = stack.pop()
            if current is self:
                return True
            if id(current) in seen:
                continue
            seen.add(id(current))
            stack.extend(e.value for e in current._elements if isinstance(e, Nested))
        return False

    def power_set(self) -> "SetOfSets":
        """Build the set of all subsets of this set.

        See setlib.core.power_set.power_set for complexity notes.
        """
        from setlib.core.power_set import power_set

        return power_set(self)

    # ------------------------------------------------------------------
    # Operators (sugar over setlib.core.algebra)
    # ------------------------------------------------------------------

    def __add__(self, other: Optional["Set"]) -> "Set":
        if other is not None and not isinstance(other, Set):
            return NotImplemented
        from setlib.core.algebra import union

        return union(self, other)

    def __radd__(self, other: Optional["Set"]) -> "Set":
        if other is not None and not isinstance(other, Set):
            return NotImplemented
        from setlib.core.algebra import union

        return union(other, self)

    def __mul__(self, other: Optional["Set"]) -> "Set":
        if other is not None and not isinstance(other, Set):
            return NotImplemented
        from setlib.core.algebra import intersection

        return intersection(self, other)

    def __rmul__(self, other: Optional["Set"]) -> "Set":
        if other is not None and not isinstance(other, Set):
            return NotImplemented
        from setlib.core.algebra import intersection

        return intersection(other, self)

    def __sub__(self, other: Optional["Set"]) -> "Set":
        if other is not None and not isinstance(other, Set):
            return NotImplemented
        from setlib.core.algebra import difference

        return difference(self, other)

    def __rsub__(self, other: Optional["Set"]) -> "Set":
        if other is not None and not isinstance(other, Set):
            return NotImplemented
        from setlib.core.algebra import difference

        return difference(other, self)

    def __xor__(self, other: Optional["Set"]) -> "Set":
        if other is not None and not isinstance(other, Set):
            return NotImplemented
        from setlib.core.algebra import symmetric_difference

        return symmetric_difference(self, other)

    def __rxor__(self, other: Optional["Set"]) -> "Set":
        if other is not None and not isinstance(other, Set):
            return NotImplemented
        from setlib.core.algebra import symmetric_difference

        return symmetric_difference(other, self)

    __or__ = __add__
    __ror__ = __radd__
    __and__ = __mul__
    __rand__ = __rmul__

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        from setlib.core.algebra import is_subset

        return is_subset(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        from setlib.core.algebra import is_proper_subset

        return is_proper_subset(self, other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return other.__le__(self)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return other.__lt__(self)

    def __repr__(self) -> str:
        return f"Set(id={self._id}, {self})"


class SetOfSets(HashedSet[Set]):
    """Container whose members are Sets, compared by Set equality.

    Returned by power-set generation. Its storage is independent from the
    Set it was generated from. Nested elements are unwrapped to their inner
    Set on the way in.
    """

    def _coerce(self, value: Any) -> Set:
        if isinstance(value, Nested):
            return value.value
        if isinstance(value, Set):
            return value
        raise UnsupportedElementError(
            f"SetOfSets members must be Sets, got {type(value).__name__}", value=value
        )

    def __repr__(self) -> str:
        return f"SetOfSets({self})"
