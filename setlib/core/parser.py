"""Recursive-descent parser for set literals.

Grammar::

    Set          := '{' WS? ElementList? WS? '}'
    ElementList  := Element (',' Element)*
    Element      := Set | QuotedString | NumberLiteral | BareToken
    QuotedString := '"' ... '"' | "'" ... "'"

Commas split elements only at brace depth 0, so ``{a, {b, c}}`` has two
members. Tokens that are not nested literals are tried as Integer, then
Float, and otherwise kept verbatim as Text. Integers outside the signed
64-bit range read as Float. The only failure mode is a literal that is not
wrapped in braces.
"""

import logging
import re
from typing import List, Optional

from setlib.core.errors import MalformedLiteralError, NullOperandError
from setlib.core.schema.element import (
    QUOTE_CHARS,
    Element,
    Float,
    Integer,
    Nested,
    Text,
    in_int64_range,
)
from setlib.core.sets import Set

logger = logging.getLogger(__name__)

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
# Significant digits of the widest signed 64-bit value
INT64_DIGITS = 19
FLOAT_PATTERN = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[+-]?(?:inf|infinity)",
    re.IGNORECASE,
)


def parse(literal: Optional[str]) -> Set:
    """Parse a set literal into a Set.

    Args:
        literal: Text such as ``"{1, 2.5, 'text', {a, b}}"``

    Returns:
        New Set containing the parsed members

    Raises:
        MalformedLiteralError: If the literal is None or not enclosed in
            curly braces

    Example:
        >>> s = parse("{1, 2, {3, 4}}")
        >>> len(s)
        3
        >>> parse("{}").is_empty()
        True
    """
    if literal is None:
        raise MalformedLiteralError("Invalid set format: literal is None", literal=literal)

    trimmed = literal.strip()
    if len(trimmed) < 2 or not trimmed.startswith("{") or not trimmed.endswith("}"):
        raise MalformedLiteralError(
            "Invalid set format: must be enclosed in curly braces", literal=literal
        )

    result = Set()
    content = trimmed[1:-1].strip()
    if not content:
        return result

    for segment in split_top_level(content):
        token = segment.strip()
        if not token:
            continue
        result.add(parse_token(token))

    return result


def split_top_level(content: str) -> List[str]:
    """Split literal content on commas at brace depth 0.

    Segments are returned untrimmed. Commas inside nested ``{...}`` belong
    to the nested literal.

    Example:
        >>> split_top_level("a, {b, c}, d")
        ['a', ' {b, c}', ' d']
    """
    segments: List[str] = []
    depth = 0
    start = 0

    for i, char in enumerate(content):
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        elif char == "," and depth == 0:
            segments.append(content[start:i])
            start = i + 1

    tail = content[start:]
    if tail:
        segments.append(tail)

    logger.debug(f"Split literal content into {len(segments)} segments")
    return segments


def parse_token(token: str) -> Element:
    """Convert one trimmed segment into an Element.

    A ``{...}`` token is parsed recursively. Otherwise one layer of matching
    quotes is stripped, then Integer, Float and finally Text are tried.

    Example:
        >>> parse_token("42")
        Integer(value=42)
        >>> parse_token("'2.5'")
        Float(value=2.5)
        >>> parse_token("abc")
        Text(value='abc')
    """
    if token.startswith("{") and token.endswith("}"):
        return Nested(parse(token))

    if len(token) >= 2 and token[0] == token[-1] and token[0] in QUOTE_CHARS:
        token = token[1:-1]

    number = _parse_number(token)
    if number is not None:
        return number
    return Text(token)


def _parse_number(token: str) -> Optional[Element]:
    candidate = token.strip()
    # Out-of-range integers fall through to Float
    if (
        INTEGER_PATTERN.fullmatch(candidate)
        and len(candidate.lstrip("+-").lstrip("0")) <= INT64_DIGITS
    ):
        value = int(candidate)
        if in_int64_range(value):
            return Integer(value)
    if FLOAT_PATTERN.fullmatch(candidate):
        return Float(float(candidate))
    return None


def format_set(value: Optional[Set]) -> str:
    """Render a Set in the literal syntax accepted by parse().

    Raises:
        NullOperandError: If value is None

    Example:
        >>> format_set(parse("{}"))
        '{}'
        >>> format_set(parse("{1.0}"))
        '{1.0}'
    """
    if value is None:
        raise NullOperandError("Cannot format None", operand="value")
    return str(value)
