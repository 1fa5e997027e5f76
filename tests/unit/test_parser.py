"""Tests for the set literal parser."""

import pytest

from setlib.core.errors import MalformedLiteralError, NullOperandError
from setlib.core.parser import format_set, parse, parse_token, split_top_level
from setlib.core.schema.element import Float, Integer, Nested, Text
from setlib.core.sets import Set


class TestParse:
    """Tests for parse()."""

    def test_empty_set(self):
        """Test parsing the empty literal."""
        s = parse("{}")
        assert s.is_empty()
        assert str(s) == "{}"

    def test_whitespace_interior(self):
        """Test that a blank interior gives the empty set."""
        assert parse("{   }").is_empty()
        assert parse("  {}  ").is_empty()

    def test_single_element(self):
        """Test a single text member."""
        s = parse("{a}")
        assert len(s) == 1
        assert s.contains("a")

    def test_multiple_text_elements(self):
        """Test several bare tokens."""
        s = parse("{a, b, c}")
        assert s == Set(["a", "b", "c"])

    def test_mixed_scalars(self):
        """Test integer, float and quoted text."""
        s = parse('{1, 2.5, "text"}')

        assert len(s) == 3
        assert Integer(1) in s
        assert Float(2.5) in s
        assert Text("text") in s

    def test_nested_set(self):
        """Test a nested literal."""
        s = parse("{1, 2, {3, 4}}")

        assert len(s) == 3
        assert s.contains(1)
        assert s.contains(2)
        assert s.contains(Set([3, 4]))

    def test_deeply_nested(self):
        """Test commas inside several nesting levels."""
        s = parse("{a, {b, {c, d}}, {}}")

        assert len(s) == 3
        assert s.contains(Set(["b", Set(["c", "d"])]))
        assert s.contains(Set())

    def test_duplicates_collapse(self):
        """Test that duplicate tokens become one member."""
        assert len(parse("{a, a, {b}, {b}}")) == 2

    def test_nested_order_irrelevant(self):
        """Test that nested members compare by value."""
        assert parse("{{1, 2}}") == parse("{{2, 1}}")

    def test_empty_segments_skipped(self):
        """Test that empty segments between commas are ignored."""
        assert parse("{a,,b}") == Set(["a", "b"])
        assert parse("{a, }") == Set(["a"])

    def test_single_quotes(self):
        """Test single-quoted tokens."""
        assert parse("{'hello world'}") == Set(["hello world"])

    def test_quoted_number_becomes_number(self):
        """Test that quotes are stripped before numeric parsing."""
        assert parse('{"42"}') == Set([42])

    def test_negative_and_signed_numbers(self):
        """Test signs on numbers."""
        assert parse("{-3, +4, -2.5}") == Set([-3, 4, -2.5])

    def test_exponent_float(self):
        """Test exponent notation."""
        assert parse("{1e3}") == Set([1000.0])

    def test_unparseable_number_is_text(self):
        """Test that partial numbers stay text."""
        assert parse("{1.2.3, 12abc}") == Set(["1.2.3", "12abc"])

    def test_nan_is_text(self):
        """Test that nan is not parsed as a float."""
        assert parse("{nan}") == Set(["nan"])

    def test_infinity_is_float(self):
        """Test that infinities are floats."""
        assert parse("{inf, -Infinity}") == Set([float("inf"), float("-inf")])

    def test_unbalanced_inner_brace_degrades_to_text(self):
        """Test that inner garbage becomes text rather than failing."""
        s = parse("{a}}")
        assert s == Set(["a}"])

    def test_missing_braces_raise(self):
        """Test that literals without braces are rejected."""
        for literal in ("a, b", "{a, b", "a, b}", "", "   ", "{"):
            with pytest.raises(MalformedLiteralError) as exc_info:
                parse(literal)
            assert exc_info.value.literal == literal

    def test_none_raises(self):
        """Test that None is rejected."""
        with pytest.raises(MalformedLiteralError):
            parse(None)

    def test_malformed_is_value_error(self):
        """Test that MalformedLiteralError can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse("abc")

    def test_from_string_alias(self):
        """Test Set.from_string."""
        assert Set.from_string("{1, {a}}") == parse("{1, {a}}")


class TestSplitTopLevel:
    """Tests for split_top_level()."""

    def test_flat(self):
        """Test splitting flat content."""
        assert split_top_level("a,b,c") == ["a", "b", "c"]

    def test_nested_commas_kept(self):
        """Test that nested commas do not split."""
        assert split_top_level("a, {b, c}, d") == ["a", " {b, c}", " d"]

    def test_trailing_comma(self):
        """Test that a trailing comma leaves no tail segment."""
        assert split_top_level("a,") == ["a"]


class TestParseToken:
    """Tests for parse_token()."""

    def test_integer(self):
        """Test integer tokens."""
        assert parse_token("42") == Integer(42)

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("9223372036854775807", Integer(9223372036854775807)),
            ("-9223372036854775808", Integer(-9223372036854775808)),
            ("9223372036854775808", Float(float(2 ** 63))),
            ("-9223372036854775809", Float(float("-9223372036854775809"))),
            ("0009223372036854775807", Integer(9223372036854775807)),
            ("123456789012345678901234567890", Float(float("123456789012345678901234567890"))),
        ],
    )
    def test_int64_boundaries(self, token, expected):
        """Test that integers outside the signed 64-bit range read as Float."""
        assert parse_token(token) == expected

    def test_float(self):
        """Test float tokens."""
        assert parse_token("2.5") == Float(2.5)
        assert parse_token(".5") == Float(0.5)

    def test_quoted_float(self):
        """Test that quoted floats are still floats."""
        assert parse_token("'2.5'") == Float(2.5)

    def test_text(self):
        """Test text tokens."""
        assert parse_token("abc") == Text("abc")

    def test_lone_quote_is_text(self):
        """Test that a single quote character is kept as text."""
        assert parse_token('"') == Text('"')

    def test_mismatched_quotes_kept(self):
        """Test that mismatched quotes are not stripped."""
        assert parse_token("'abc\"") == Text("'abc\"")

    def test_only_one_quote_layer_stripped(self):
        """Test that nested quotes survive."""
        assert parse_token("\"'x'\"") == Text("'x'")

    def test_quoted_braces_are_text(self):
        """Test that a quoted literal is text, not a nested set."""
        assert parse_token("'{a}'") == Text("{a}")

    def test_nested(self):
        """Test nested literal tokens."""
        assert parse_token("{1}") == Nested(Set([1]))


class TestFormatRoundTrip:
    """Tests for parse(str(s)) == s."""

    @pytest.mark.parametrize(
        "literal",
        [
            "{}",
            "{a, b, c}",
            "{1, 2.5, text}",
            "{a, b, {c, d}}",
            "{3.0, 3}",
            "{-1, {}, {{}}, {a, {b, {c}}}}",
        ],
    )
    def test_round_trip(self, literal):
        """Test that formatting then parsing preserves the set."""
        s = parse(literal)
        assert parse(str(s)) == s

    def test_round_trip_with_quoted_text(self):
        """Test round trip of text that needs quoting."""
        s = Set(["", " padded ", "'q'"])
        assert parse(str(s)) == s


class TestFormatSet:
    """Tests for format_set()."""

    def test_empty(self):
        """Test the empty set literal."""
        assert format_set(Set()) == "{}"

    def test_float_keeps_fraction(self):
        """Test that whole floats stay distinguishable from integers."""
        assert format_set(Set([3.0])) == "{3.0}"
        assert format_set(Set([3])) == "{3}"

    def test_nested(self):
        """Test recursive formatting."""
        assert format_set(Set([Set(["a"])])) == "{{a}}"

    def test_matches_str(self):
        """Test that format_set agrees with str()."""
        s = parse("{a, 1, {b}}")
        assert format_set(s) == str(s)

    def test_none_raises(self):
        """Test that None raises NullOperandError."""
        with pytest.raises(NullOperandError) as exc_info:
            format_set(None)
        assert exc_info.value.operand == "value"
