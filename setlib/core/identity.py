"""Process-wide identity registry for Set instances.

Every Set receives a unique integer id when it is constructed. Ids are a
debugging aid only: they never take part in equality, hashing or ordering.
"""

import threading


class IdentityRegistry:
    """Monotonic counter handing out set ids.

    The counter starts at 0 and each call to next_id() returns the
    post-increment value, so the first id issued is 1. Increments are
    guarded by a lock, which keeps ids unique when sets are built from
    several threads.

    Example:
        >>> registry = IdentityRegistry()
        >>> registry.next_id()
        1
        >>> registry.next_id()
        2
        >>> registry.issued_count
        2
    """

    def __init__(self) -> None:
        self._count = 0
        self._lock = threading.Lock()

    def next_id(self) -> int:
        """Increment the counter and return the new value."""
        with self._lock:
            self._count += 1
            return self._count

    @property
    def issued_count(self) -> int:
        """Number of ids issued so far."""
        return self._count


_registry = IdentityRegistry()


def next_id() -> int:
    """Issue the next id from the process-wide registry."""
    return _registry.next_id()


def issued_count() -> int:
    """Total number of ids issued by the process-wide registry."""
    return _registry.issued_count
