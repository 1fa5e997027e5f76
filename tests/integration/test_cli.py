"""End-to-end tests for the setlib command-line interface."""

import pytest

from setlib.cli.main import main
from setlib.core.parser import parse


def _lines(output: str):
    return [line for line in output.splitlines() if line]


class TestParseCommand:
    """Tests for `setlib parse`."""

    def test_parse_literal(self, capsys):
        """Test parsing and printing a literal."""
        exit_code = main(["parse", "{1, 2, {a, b}}"])
        out = capsys.readouterr().out

        assert exit_code == 0
        lines = _lines(out)
        assert parse(lines[0]) == parse("{1, 2, {a, b}}")
        assert lines[1] == "Cardinality: 3"

    def test_malformed_literal(self, capsys):
        """Test that malformed literals exit with status 1."""
        exit_code = main(["parse", "1, 2"])
        err = capsys.readouterr().err

        assert exit_code == 1
        assert "Error:" in err
        assert "curly braces" in err


class TestOpCommand:
    """Tests for `setlib op`."""

    @pytest.mark.parametrize(
        "operation,expected",
        [
            ("union", "{1, 2, 3, 4, 5}"),
            ("intersection", "{3}"),
            ("difference", "{1, 2}"),
            ("symmetric-difference", "{1, 2, 4, 5}"),
        ],
    )
    def test_operations(self, capsys, operation, expected):
        """Test each operation on literal operands."""
        exit_code = main(["op", operation, "{1, 2, 3}", "{3, 4, 5}"])
        out = capsys.readouterr().out

        assert exit_code == 0
        assert parse(_lines(out)[0]) == parse(expected)

    def test_unknown_operation_rejected(self):
        """Test that argparse rejects unknown operations."""
        with pytest.raises(SystemExit):
            main(["op", "product", "{1}", "{2}"])

    def test_definitions_file(self, capsys, tmp_path):
        """Test named operands from a YAML file."""
        defs = tmp_path / "sets.yaml"
        defs.write_text('A: "{1, 2, 3, 4}"\nB: [3, 4, 5]\n')

        exit_code = main(["op", "difference", "A", "B", "--defs", str(defs)])
        out = capsys.readouterr().out

        assert exit_code == 0
        assert parse(_lines(out)[0]) == parse("{1, 2}")

    def test_missing_definitions_file(self, capsys, tmp_path):
        """Test that a missing definitions file is reported."""
        exit_code = main(["op", "union", "A", "B", "--defs", str(tmp_path / "nope.yaml")])

        assert exit_code == 1
        assert "Error:" in capsys.readouterr().err


class TestCheckCommand:
    """Tests for `setlib check`."""

    @pytest.mark.parametrize(
        "predicate,left,right,expected",
        [
            ("subset", "{1, 2}", "{1, 2, 3}", "true"),
            ("proper-subset", "{1, 2}", "{1, 2, 3}", "true"),
            ("proper-subset", "{1, 2, 3}", "{1, 2, 3}", "false"),
            ("disjoint", "{1}", "{2}", "true"),
            ("equal", "{a, {b}}", "{{b}, a}", "true"),
            ("equal", "{1}", "{1.0}", "false"),
        ],
    )
    def test_predicates(self, capsys, predicate, left, right, expected):
        """Test each predicate."""
        exit_code = main(["check", predicate, left, right])

        assert exit_code == 0
        assert _lines(capsys.readouterr().out) == [expected]


class TestPowersetCommand:
    """Tests for `setlib powerset`."""

    def test_powerset(self, capsys):
        """Test printing every subset."""
        exit_code = main(["powerset", "{1, 2}"])
        lines = _lines(capsys.readouterr().out)

        assert exit_code == 0
        assert lines[-1] == "Subsets: 4"
        printed = [parse(line) for line in lines[:-1]]
        assert len(printed) == 4
        assert printed[0] == parse("{}")
        assert parse("{1, 2}") in printed


class TestDemoCommand:
    """Tests for `setlib demo`."""

    def test_demo(self, capsys):
        """Test the nested example demo."""
        exit_code = main(["demo"])
        lines = _lines(capsys.readouterr().out)

        assert exit_code == 0
        assert lines[1] == "Members: 6"
        assert lines[2] == "Power set size: 64"


class TestNoCommand:
    """Tests for invoking the CLI without a command."""

    def test_prints_help(self, capsys):
        """Test that no command prints help and fails."""
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out
