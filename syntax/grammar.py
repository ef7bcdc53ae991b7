# syntax/grammar.py
# This file is part of Proptab - A Propositional Truth Table Toolkit
#
# Precedence-climbing parser over a runtime-configurable connective registry

"""Formula parser producing ``FormulaTree`` objects.

The parser repeatedly splits a token list at its loosest top-level
connective. Precedence and associativity come from the registry at parse
time, which is why no generated LALR table is used here: a parser can be
reconfigured (aliases, precedences, associativity, removed connectives)
between any two calls to ``parse``.

Split selection:
- the connective with the numerically lowest precedence wins
- on ties, the leftmost one wins at a right-associative level and the
  rightmost one at a left-associative level
- a unary connective can only be chosen at index 0
"""

from typing import Dict, Optional, Sequence, Union

from connectives.connective import PRECEDENCE_DEFAULT, PRECEDENCE_HIGHEST, Connective
from connectives.registry import ConnectiveRegistry
from .ast_nodes import Atom, Formula, LocalAtom, Node
from .exceptions import FormulaSyntaxError
from .lexer import FormulaLexer
from .tokens import Token, TokenType
from .tree import FormulaTree
from utils.logger import get_logger


class FormulaParser:
    """Parser owning its own copy of a connective registry.

    Configuration methods delegate to the registry and return the parser for
    method chaining. They must be called between parses.

    Args:
        registry: Registry to copy; the default connective set if omitted
    """

    def __init__(self, registry: Optional[ConnectiveRegistry] = None):
        self.registry = ConnectiveRegistry() if registry is None else registry.copy()
        self._atoms: Dict[str, Atom] = {}
        self._lexer: Optional[FormulaLexer] = None

    # Configuration

    def set_associativity(self, precedence: int, right: bool) -> "FormulaParser":
        self.registry.set_associativity(precedence, right)
        return self

    def set_connectives(self, *connectives: Connective) -> "FormulaParser":
        self.registry.set_connectives(*connectives)
        return self

    def replace_connective(self, symbol: str, connective: Connective) -> "FormulaParser":
        self.registry.replace_connective(symbol, connective)
        return self

    def remove_connectives(self, *connectives: Union[Connective, str]) -> "FormulaParser":
        self.registry.remove(*connectives)
        return self

    def use_minimal_connectives(self) -> "FormulaParser":
        self.registry.use_minimal_connectives()
        return self

    def set_literals(self, true_literals=None, false_literals=None) -> "FormulaParser":
        self.registry.set_literals(true_literals, false_literals)
        return self

    # Parsing

    def parse(self, formula: str) -> FormulaTree:
        """Parse formula text into a tree.

        Args:
            formula: Formula using registered symbols or their aliases

        Returns:
            FormulaTree with the root node and interned atoms

        Raises:
            FormulaSyntaxError: The text is empty, malformed or nested too deeply
        """
        if formula is None:
            raise FormulaSyntaxError(0, "Empty formula", "")

        logger = get_logger()
        self._atoms = {}
        normalized = self.registry.normalize(formula)
        try:
            with self.registry.freeze():
                logger.parse_started(formula, normalized)

                self._lexer = FormulaLexer(self.registry, normalized)
                root = self._parse_tokens(self._lexer.lex(), 0)
                atoms = tuple(self._atoms.values())

            tree = FormulaTree(root, atoms, self.registry.copy(), formula)
            logger.debug(f"Parsed {tree.canonical_string()} with {len(atoms)} atom(s)")
        except RecursionError as exc:
            raise FormulaSyntaxError(0, "Formula is nested too deeply", normalized) from exc
        finally:
            self._atoms = {}
            self._lexer = None

        return tree

    def _intern(self, name: str) -> Atom:
        atom = self._atoms.get(name)
        if atom is None:
            atom = Atom(name)
            self._atoms[name] = atom
        return atom

    def _parse_tokens(self, tokens: Sequence[Token], depth: int) -> Node:
        if len(tokens) == 1:
            token = tokens[0]
            if token.type is TokenType.ATOM:
                return LocalAtom(self._intern(token.value), depth)
            if token.type is TokenType.PARSED_FORMULA:
                return self._parse_tokens(token.tokens, depth)
            if token.type is TokenType.FORMULA:
                return self._parse_tokens(self._lexer.lex(token.value, token.index), depth)

        split = self._select_split(tokens)
        if split is None:
            raise FormulaSyntaxError(
                tokens[0].index, "Missing connective between operands", self._lexer.source
            )

        connective = self.registry.lookup(tokens[split].value)
        get_logger().split_selected(connective.symbol, split, connective.precedence, depth)

        if split == 0:
            operand = self._parse_tokens(tokens[1:], depth + 1)
            return Formula(connective, (operand,), depth)

        left = self._parse_tokens(tokens[:split], depth + 1)
        right = self._parse_tokens(tokens[split + 1 :], depth + 1)
        return Formula(connective, (left, right), depth)

    def _precedence(self, token: Token) -> int:
        if token.is_operand:
            return PRECEDENCE_HIGHEST
        connective = self.registry.lookup(token.value)
        return PRECEDENCE_DEFAULT if connective is None else connective.precedence

    def _select_split(self, tokens: Sequence[Token]) -> Optional[int]:
        best: Optional[int] = None
        lowest = PRECEDENCE_DEFAULT
        for i, token in enumerate(tokens):
            precedence = self._precedence(token)
            if precedence >= PRECEDENCE_DEFAULT:
                continue
            if token.type is TokenType.UNARY_CONNECTIVE and i > 0:
                continue

            if precedence < lowest:
                best, lowest = i, precedence
            elif precedence == lowest and not self.registry.lookup(token.value).right_associative:
                best = i
        return best

