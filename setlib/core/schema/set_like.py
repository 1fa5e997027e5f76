"""SetLike protocol for collaborators of the in-place set operations."""

from typing import Any, Iterator, Protocol, runtime_checkable


@runtime_checkable
class SetLike(Protocol):
    """Minimal capability set of a finite collection.

    The in-place mutators (union_with, intersect_with, except_with) accept
    any object providing these three methods, not only the concrete Set
    type. This lets the algebra run against alternative container
    implementations such as SetOfSets, builtin frozensets of Elements, or
    test doubles.

    Example:
        class ListBacked:
            def __init__(self, items):
                self.items = list(items)

            def __len__(self):
                return len(self.items)

            def __contains__(self, item):
                return item in self.items

            def __iter__(self):
                return iter(self.items)
    """

    def __len__(self) -> int:
        """Number of members."""
        ...

    def __contains__(self, item: Any) -> bool:
        """Membership test."""
        ...

    def __iter__(self) -> Iterator[Any]:
        """Iterate over members."""
        ...
