"""setlib CLI - Command-line interface for set literals.

This module provides the main CLI entrypoint for setlib, allowing users
to parse set literals and run set algebra from the command line.
"""

import argparse
import logging
import sys
from typing import List, Optional

from setlib.cli.definitions import load_definitions, resolve_operand
from setlib.core.algebra import (
    are_disjoint,
    create_complex_set,
    difference,
    equals,
    intersection,
    is_proper_subset,
    is_subset,
    symmetric_difference,
    union,
)
from setlib.core.config import get_config_value
from setlib.core.errors import SetError
from setlib.core.power_set import power_set

logger = logging.getLogger(__name__)

OPERATIONS = {
    "union": union,
    "intersection": intersection,
    "difference": difference,
    "symmetric-difference": symmetric_difference,
}

PREDICATES = {
    "subset": is_subset,
    "proper-subset": is_proper_subset,
    "disjoint": are_disjoint,
    "equal": equals,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entrypoint for setlib."""
    parser = argparse.ArgumentParser(
        prog="setlib",
        description="setlib - nested mathematical sets from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Parse and normalize a literal
  setlib parse "{1, 2, {a, b}}"

  # Set algebra
  setlib op union "{1, 2, 3}" "{3, 4, 5}"

  # Predicates
  setlib check proper-subset "{1, 2}" "{1, 2, 3}"

  # Power set
  setlib powerset "{1, 2}"

  # Use named sets from a YAML file
  setlib op difference A B --defs sets.yaml

Note:
  Operands are literals or names from the --defs file.
  Set {'power_set': {'warn_threshold': 16}} in setlib.json to tune the
  large power set warning.
"""
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--defs",
        help="Path to a YAML file of named sets"
    )
    common.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Parse command
    parse_parser = subparsers.add_parser(
        "parse",
        parents=[common],
        help="Parse a set literal and print it"
    )
    parse_parser.add_argument(
        "set",
        help="Set literal or defined name"
    )

    # Op command
    op_parser = subparsers.add_parser(
        "op",
        parents=[common],
        help="Apply a set operation"
    )
    op_parser.add_argument(
        "operation",
        choices=sorted(OPERATIONS),
        help="Operation to apply"
    )
    op_parser.add_argument("left", help="Left operand")
    op_parser.add_argument("right", help="Right operand")

    # Check command
    check_parser = subparsers.add_parser(
        "check",
        parents=[common],
        help="Evaluate a set predicate"
    )
    check_parser.add_argument(
        "predicate",
        choices=sorted(PREDICATES),
        help="Predicate to evaluate"
    )
    check_parser.add_argument("left", help="Left operand")
    check_parser.add_argument("right", help="Right operand")

    # Powerset command
    powerset_parser = subparsers.add_parser(
        "powerset",
        parents=[common],
        help="Print every subset of a set"
    )
    powerset_parser.add_argument(
        "set",
        help="Set literal or defined name"
    )

    # Demo command
    subparsers.add_parser(
        "demo",
        parents=[common],
        help="Show the nested example set"
    )

    args = parser.parse_args(argv)

    # Setup logging
    if getattr(args, "verbose", False):
        level = logging.INFO
    else:
        level_name = str(get_config_value(["cli", "log_level"], default="WARNING")).upper()
        level = getattr(logging, level_name, logging.WARNING)
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format='%(levelname)s: %(message)s')

    handlers = {
        "parse": cmd_parse,
        "op": cmd_op,
        "check": cmd_check,
        "powerset": cmd_powerset,
        "demo": cmd_demo,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except SetError as e:
        print(f"Error: {e}", file=sys.stderr)
        logger.debug("Command failed", exc_info=True)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _definitions(args):
    if not getattr(args, "defs", None):
        return None
    definitions = load_definitions(args.defs)
    logger.info(f"Loaded {len(definitions)} definitions from {args.defs}")
    return definitions


def cmd_parse(args) -> int:
    """Handle parse command."""
    target = resolve_operand(args.set, _definitions(args))
    print(target)
    print(f"Cardinality: {len(target)}")
    return 0


def cmd_op(args) -> int:
    """Handle op command."""
    definitions = _definitions(args)
    left = resolve_operand(args.left, definitions)
    right = resolve_operand(args.right, definitions)

    result = OPERATIONS[args.operation](left, right)
    logger.info(f"{args.operation}: {len(left)} and {len(right)} members -> {len(result)}")
    print(result)
    return 0


def cmd_check(args) -> int:
    """Handle check command."""
    definitions = _definitions(args)
    left = resolve_operand(args.left, definitions)
    right = resolve_operand(args.right, definitions)

    outcome = PREDICATES[args.predicate](left, right)
    print("true" if outcome else "false")
    return 0


def cmd_powerset(args) -> int:
    """Handle powerset command."""
    source = resolve_operand(args.set, _definitions(args))
    subsets = power_set(source)

    for subset in sorted(subsets, key=lambda s: (len(s), str(s))):
        print(subset)
    print(f"Subsets: {len(subsets)}")
    return 0


def cmd_demo(args) -> int:
    """Handle demo command."""
    example = create_complex_set()
    print(f"Example set: {example}")
    print(f"Members: {len(example)}")
    print(f"Power set size: {len(power_set(example))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
