"""Closed element model for set members.

A set member is exactly one of four variants:

- Integer: a whole number
- Float: a floating point number
- Text: a string
- Nested: another Set

Each variant is a frozen dataclass, so equality and hashing are generated
per variant. Distinct variants never compare equal, which keeps Integer(1)
and Float(1.0) apart even though 1 == 1.0 in Python.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

from setlib.core.errors import NullElementError, UnsupportedElementError

if TYPE_CHECKING:
    from setlib.core.sets import Set


QUOTE_CHARS = ('"', "'")

INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1


def in_int64_range(value: int) -> bool:
    """Check whether value fits in a signed 64-bit integer."""
    return INT64_MIN <= value <= INT64_MAX


@dataclass(frozen=True)
class Integer:
    """Integer member, e.g. the 1 in ``{1, 2}``.

    Values are limited to the signed 64-bit range.

    Raises:
        UnsupportedElementError: If value is outside the signed 64-bit range
    """
    value: int

    def __post_init__(self) -> None:
        if not in_int64_range(self.value):
            raise UnsupportedElementError(
                f"Integer {self.value} is outside the signed 64-bit range",
                value=self.value,
            )


@dataclass(frozen=True)
class Float:
    """Floating point member, e.g. the 2.5 in ``{1, 2.5}``."""
    value: float


@dataclass(frozen=True)
class Text:
    """Text member, e.g. the a in ``{a, b}``."""
    value: str


@dataclass(frozen=True)
class Nested:
    """Set member, e.g. the {c, d} in ``{a, b, {c, d}}``.

    Equality and hashing delegate to the inner Set, which compares by value
    and hashes independently of insertion order. The dataclass is frozen but
    the inner Set is not; mutating a Set while it is nested inside another
    one invalidates the outer Set's storage.

    Attributes:
        value: The inner Set
    """
    value: "Set"


Element = Union[Integer, Float, Text, Nested]
"""Any member of a Set."""

ELEMENT_TYPES = (Integer, Float, Text, Nested)


def to_element(value: Any) -> Element:
    """Coerce a Python value into an Element.

    Elements pass through unchanged. int becomes Integer, float becomes
    Float, str becomes Text and Set becomes Nested (by reference).

    Args:
        value: Value to coerce

    Returns:
        The matching Element variant

    Raises:
        NullElementError: If value is None
        UnsupportedElementError: For bool, an int outside the signed 64-bit
            range, or any other type

    Example:
        >>> to_element(3)
        Integer(value=3)
        >>> to_element(3.0)
        Float(value=3.0)
        >>> to_element("a")
        Text(value='a')
    """
    if isinstance(value, ELEMENT_TYPES):
        return value
    if value is None:
        raise NullElementError("Element cannot be None")
    # bool is an int subclass but not part of the element model
    if isinstance(value, bool):
        raise UnsupportedElementError(
            f"Unsupported element type: {type(value).__name__}", value=value
        )
    if isinstance(value, int):
        return Integer(value)
    if isinstance(value, float):
        return Float(value)
    if isinstance(value, str):
        return Text(value)

    from setlib.core.sets import Set

    if isinstance(value, Set):
        return Nested(value)

    raise UnsupportedElementError(
        f"Unsupported element type: {type(value).__name__}", value=value
    )


def format_element(element: Element) -> str:
    """Render an Element in literal syntax.

    Integers use str(), floats use repr() so they stay locale-invariant and
    always read back as Float (3.0 rather than 3). Nested sets render
    recursively. Text renders verbatim unless it would not survive parsing,
    in which case it is wrapped in double quotes.

    Args:
        element: Element to render

    Returns:
        Literal text for the element
    """
    if isinstance(element, Integer):
        return str(element.value)
    if isinstance(element, Float):
        return repr(element.value)
    if isinstance(element, Text):
        return _format_text(element.value)
    if isinstance(element, Nested):
        return str(element.value)
    raise UnsupportedElementError(
        f"Unsupported element type: {type(element).__name__}", value=element
    )


def _format_text(text: str) -> str:
    if not text or text != text.strip() or _is_quoted(text):
        return f'"{text}"'
    return text


def _is_quoted(text: str) -> bool:
    return len(text) >= 2 and text[0] == text[-1] and text[0] in QUOTE_CHARS
