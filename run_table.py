#!/usr/bin/env python3
# run_table.py
# This file is part of Proptab - A Propositional Truth Table Toolkit
#
# Command-line interface for printing truth tables with configurable logging levels

import sys
import argparse

from connectives.defaults import ALL_LEVELS
from connectives.exceptions import ConfigurationError
from semantics import ColumnType, TableOptions, TableUsageError, entails
from syntax import FormulaParser, FormulaSyntaxError
from utils.logger import LogLevel, get_logger


def configure_logging_for_table(debug: bool = False) -> None:
    """Configure logging levels for the table printer.

    Results are printed at INFO, so INFO is the floor here.

    Args:
        debug: Enable DEBUG level logging
    """
    logger = get_logger()

    if debug:
        logger.set_level(LogLevel.DEBUG)
    else:
        logger.set_level(LogLevel.INFO)


def build_parser(args: argparse.Namespace) -> FormulaParser:
    """Create a formula parser configured from command line flags."""
    parser = FormulaParser()
    if args.minimal:
        parser.use_minimal_connectives()
    for precedence in args.left:
        parser.set_associativity(precedence, False)
    if args.no_literals:
        parser.set_literals((), ())
    return parser


def build_options(args: argparse.Namespace) -> TableOptions:
    columns = {ColumnType.ATOMS, ColumnType.ROOT}
    if args.formulas:
        columns.add(ColumnType.FORMULAS)
    depth = ALL_LEVELS if args.all_sub_columns else args.sub_columns
    return TableOptions(frozenset(columns), depth)


def print_verdict(table) -> None:
    logger = get_logger()
    if table.is_tautology():
        logger.info("✅ Tautology")
    elif table.is_contradiction():
        logger.info("❌ Contradiction")
    else:
        logger.info("❓ Contingent")


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Proptab Propositional Truth Table Printer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_table.py "P -> (Q -> P)"
  python run_table.py "P -> Q -> P" --left 20 --tree
  python run_table.py "(P -> Q) & P" --all-sub-columns
  python run_table.py "Q" --premise "P -> Q" --premise "P"
        """,
    )

    parser.add_argument("formula", help="Formula to evaluate (conclusion with --premise)")

    parser.add_argument(
        "--premise",
        action="append",
        default=[],
        help="Premise; when given, checks whether the premises entail the formula",
    )

    parser.add_argument(
        "--sub-columns",
        type=int,
        default=0,
        metavar="N",
        help="Show operand sub-columns down to level N",
    )

    parser.add_argument(
        "--all-sub-columns", action="store_true", help="Show operand sub-columns at every level"
    )

    parser.add_argument(
        "--formulas", action="store_true", help="Add a column for every non-root sub-formula"
    )

    parser.add_argument(
        "--left",
        type=int,
        action="append",
        default=[],
        metavar="PRECEDENCE",
        help="Make the connectives at PRECEDENCE left-associative",
    )

    parser.add_argument(
        "--minimal", action="store_true", help="Only recognize ¬ ∧ ∨ → ↔"
    )

    parser.add_argument(
        "--no-literals", action="store_true", help="Treat T/F/1/0 as ordinary atoms"
    )

    parser.add_argument("--tree", action="store_true", help="Print the syntax tree")

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Also print atom and table size details"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output"
    )

    return parser


def main() -> int:
    """Main entry point for the truth table printer.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    arg_parser = create_argument_parser()
    args = arg_parser.parse_args()

    configure_logging_for_table(debug=args.debug)
    logger = get_logger()

    try:
        parser = build_parser(args)

        if args.premise:
            valid = entails(parser, args.premise, args.formula)
            premises = ", ".join(args.premise)
            logger.info(f"{premises} ⊨ {args.formula}: {'✅ valid' if valid else '❌ invalid'}")
            return 0

        tree = parser.parse(args.formula)
        logger.info(f"📋 Formula: {tree.canonical_string()}")

        if args.tree:
            logger.info(tree.print_tree())

        table = tree.build_table(build_options(args))
        if args.verbose:
            atoms = ", ".join(atom.name for atom in tree.atoms)
            logger.info(f"🔢 Atoms: {atoms} ({table.row_count} rows, {table.column_count} columns)")

        logger.info(table.render())
        print_verdict(table)
        return 0

    except FormulaSyntaxError as e:
        logger.error(f"Formula syntax error: {e}")
        return 1

    except ConfigurationError as e:
        logger.error(f"Connective configuration error: {e}")
        return 2

    except TableUsageError as e:
        logger.error(f"Table option error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 4


if __name__ == "__main__":
    sys.exit(main())
