"""Generic hash-backed set container.

HashedSet implements the full container contract once, parameterized over
its member type. It is instantiated twice: Set holds Elements and SetOfSets
holds Sets (the power-set result). Subclasses only decide how incoming
values are coerced and how members are rendered.

Null handling is deliberately asymmetric:

- add(None) raises NullElementError
- remove(None) and contains(None) return False
"""

from typing import Any, Generic, Iterable, Iterator, List, Optional, Set as PySet, TypeVar

from setlib.core.errors import NullElementError, SetError
from setlib.core.schema.set_like import SetLike

T = TypeVar("T")


class HashedSet(Generic[T]):
    """Deduplicated, unordered collection of hashable members.

    Members are deduplicated with their own __eq__/__hash__, so structural
    equality of members carries through. Two containers are equal when they
    have the same size and every member of one is contained in the other.
    The hash combines member hashes independently of insertion order.

    Iteration order is unspecified and may change after any mutation.
    """

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        """Initialize the container.

        Args:
            items: Optional iterable of values to add. Each value goes
                   through add(), so None members raise NullElementError.
        """
        self._elements: PySet[T] = set()
        if items is not None:
            for item in items:
                self.add(item)

    # ------------------------------------------------------------------
    # Hooks for subclasses
    # ------------------------------------------------------------------

    def _coerce(self, value: Any) -> T:
        """Convert an incoming value to the member type.

        Raises:
            SetError subclass if the value cannot be a member.
        """
        return value

    def _format_member(self, member: T) -> str:
        return str(member)

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------

    @property
    def count(self) -> int:
        """Number of members."""
        return len(self._elements)

    def add(self, element: Any) -> None:
        """Add an element; adding an equal element again is a no-op.

        Raises:
            NullElementError: If element is None
        """
        if element is None:
            raise NullElementError(
                f"Cannot add None to {type(self).__name__}", container=self
            )
        self._elements.add(self._coerce(element))

    def remove(self, element: Any) -> bool:
        """Remove an element equal to the given one.

        Returns:
            True if an element was removed; False if it was absent, None,
            or not a valid member value.
        """
        member = self._lookup_key(element)
        if member is None or member not in self._elements:
            return False
        self._elements.remove(member)
        return True

    def contains(self, element: Any) -> bool:
        """Check membership; None and invalid values are never members."""
        member = self._lookup_key(element)
        return member is not None and member in self._elements

    def __contains__(self, element: Any) -> bool:
        return self.contains(element)

    def __getitem__(self, element: Any) -> bool:
        """Membership indexer: ``s[x]`` is ``s.contains(x)``."""
        return self.contains(element)

    def is_empty(self) -> bool:
        return not self._elements

    def clear(self) -> None:
        self._elements.clear()

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)

    def _lookup_key(self, element: Any) -> Optional[T]:
        if element is None:
            return None
        try:
            return self._coerce(element)
        except SetError:
            return None

    # ------------------------------------------------------------------
    # In-place algebra
    # ------------------------------------------------------------------

    def union_with(self, other: Optional[SetLike]) -> None:
        """Add every member of other to this container (no-op for None)."""
        if other is None:
            return
        for element in list(other):
            self.add(element)

    def intersect_with(self, other: Optional[SetLike]) -> None:
        """Keep only members that other also contains (no-op for None)."""
        if other is None:
            return
        to_remove: List[T] = [e for e in self._elements if e not in other]
        for element in to_remove:
            self._elements.discard(element)

    def except_with(self, other: Optional[SetLike]) -> None:
        """Remove every member of other from this container (no-op for None)."""
        if other is None:
            return
        for element in list(other):
            self.remove(element)

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, HashedSet):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(element in other._elements for element in self._elements)

    def __hash__(self) -> int:
        # frozenset hashing is independent of iteration order
        return hash(frozenset(self._elements))

    def __str__(self) -> str:
        if not self._elements:
            return "{}"
        return "{" + ", ".join(self._format_member(e) for e in self._elements) + "}"
