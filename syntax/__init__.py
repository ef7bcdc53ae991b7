# syntax/__init__.py
# This file is part of Proptab - A Propositional Truth Table Toolkit
#
# Formula lexing, parsing and syntax tree components

"""Propositional formula parsing over a reconfigurable connective registry.

The parsing pipeline normalizes formula text against the registry (aliases
to official symbols, all parentheses to ``()``, whitespace removed), lexes it
into a flat token list with parenthesized regions kept opaque, and splits
that list recursively at its loosest connective. The result is a
``FormulaTree`` whose leaves share one ``Atom`` object per distinct name.

Core Components:
    FormulaParser: parser owning a registry copy, configurable between parses
    FormulaTree: parsed formula with tree queries and truth table building
    FormulaSyntaxError: raised for any malformed input, with a caret indicator

Grammar Features:
    - Precedence and associativity read from the registry on every parse
    - Right-associative default at every precedence level
    - Prefix unary connectives bind to their immediate operand
    - Redundant parentheses are ignored

Example:
    >>> from syntax import parse
    >>> tree = parse("P -> Q -> P")
    >>> tree.canonical_string()
    '(P→(Q→P))'
"""

from typing import Optional

from connectives.registry import ConnectiveRegistry
from .ast_nodes import Atom, Formula, LocalAtom, Node, TreePrinter
from .exceptions import FormulaSyntaxError, generate_indicator
from .grammar import FormulaParser
from .lexer import FormulaLexer
from .tokens import Token, TokenType
from .tree import FormulaTree
from utils.logger import get_logger


def parse(source: str, registry: Optional[ConnectiveRegistry] = None) -> FormulaTree:
    """Parse formula text with a fresh parser.

    Each call builds its own ``FormulaParser``, so the registry passed in (or
    the default one) is copied and never mutated.

    Args:
        source: Formula text using registered symbols or their aliases
        registry: Connective registry to parse with; defaults apply if omitted

    Returns:
        FormulaTree of the parsed formula

    Raises:
        FormulaSyntaxError: Formula text is empty or malformed
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    parser = FormulaParser(registry)

    try:
        tree = parser.parse(source)
        logger.debug(f"Formula parsed successfully with {len(tree.atoms)} atom(s)")
        return tree

    except FormulaSyntaxError as exc:
        logger.debug(f"FormulaSyntaxError encountered during parsing: {exc.reason}")
        raise


__all__ = [
    "parse",
    "Atom",
    "Formula",
    "FormulaLexer",
    "FormulaParser",
    "FormulaSyntaxError",
    "FormulaTree",
    "LocalAtom",
    "Node",
    "Token",
    "TokenType",
    "TreePrinter",
    "generate_indicator",
]
