"""Set-specific exceptions for error handling."""

from typing import Any, Optional


class SetError(Exception):
    """Base class for all errors raised by setlib."""


class NullElementError(SetError, ValueError):
    """Raised when an absent element (None) is added to a set.

    Membership queries and removals never raise this error; they report
    False instead.

    Attributes:
        message: Description of the failure
        container: The container that rejected the element (optional)
    """

    def __init__(self, message: str, container: Optional[Any] = None) -> None:
        """Initialize NullElementError exception.

        Args:
            message: Error message describing the failure
            container: The container that rejected the element (optional)
        """
        super().__init__(message)
        self.container = container


class UnsupportedElementError(SetError, TypeError):
    """Raised when a value outside the closed element model is added.

    Only int, float, str and Set values (or already-built Elements) can
    become members of a Set.

    Attributes:
        message: Description of the failure
        value: The rejected value
    """

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class NullOperandError(SetError, ValueError):
    """Raised when a pure set operation receives an absent operand.

    This covers union, intersection, difference, symmetric difference,
    copying and power-set generation. Predicates such as is_subset and
    are_disjoint do not raise it.

    Attributes:
        message: Description of the failure
        operand: Name of the absent parameter (e.g. "set1")
    """

    def __init__(self, message: str, operand: Optional[str] = None) -> None:
        """Initialize NullOperandError exception.

        Args:
            message: Error message describing the failure
            operand: Name of the absent parameter (optional)
        """
        super().__init__(message)
        self.operand = operand


class MalformedLiteralError(SetError, ValueError):
    """Raised when a set literal is not wrapped in matching braces.

    This is the only failure mode of the parser; any other content inside
    the braces degrades to Text members.

    Attributes:
        message: Description of the failure
        literal: The offending input (optional)
    """

    def __init__(self, message: str, literal: Optional[str] = None) -> None:
        super().__init__(message)
        self.literal = literal


class DefinitionError(SetError):
    """Raised when a set definition file contains an unusable entry.

    Attributes:
        message: Description of the failure
        name: Name of the offending definition (optional)
        path: Path of the definition file (optional)
    """

    def __init__(
        self, message: str, name: Optional[str] = None, path: Optional[str] = None
    ) -> None:
        super().__init__(message)
        self.name = name
        self.path = path
