# connectives/connective.py
# This file is part of Proptab - A Propositional Truth Table Toolkit
#
# Connective definition: symbols, arity, precedence, associativity and truth function

"""Logical connectives as a single tagged type.

A connective is either unary or binary; the arity tag decides how its truth
function is called. Everything else (official symbol, aliases, precedence,
associativity) is shared by both kinds.

Precedence follows the convention that a smaller value binds more loosely,
so the connective with the smallest precedence in a token list becomes the
outermost node of the tree.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Tuple

from .exceptions import ConfigurationError

# Reserved precedence values. Anything at or above PRECEDENCE_DEFAULT is not a
# connective for the parser; atoms and grouped formulas sit at PRECEDENCE_HIGHEST.
PRECEDENCE_DEFAULT = 60
PRECEDENCE_HIGHEST = 70

OPEN_PARENTHESES = ("(", "{", "[")
CLOSE_PARENTHESES = (")", "}", "]")

_RESERVED = set(OPEN_PARENTHESES) | set(CLOSE_PARENTHESES)


class Arity(Enum):
    """Number of operands a connective takes."""

    UNARY = 1
    BINARY = 2


def _check_symbol(symbol: str, what: str):
    if not isinstance(symbol, str) or not symbol:
        raise ConfigurationError(f"{what} must be a non-empty string")
    if any(ch.isspace() for ch in symbol):
        raise ConfigurationError(f"{what} {symbol!r} contains whitespace")
    if any(ch.isalnum() for ch in symbol):
        raise ConfigurationError(f"{what} {symbol!r} contains alphanumeric characters")
    if any(ch in _RESERVED for ch in symbol):
        raise ConfigurationError(f"{what} {symbol!r} contains a parenthesis")


class Connective:
    """A logical operator with a fixed symbol set and a pure truth function.

    The official symbol is the single character the lexer recognizes; aliases
    are rewritten to it by ``ConnectiveRegistry.normalize`` before lexing.
    Symbols, arity, precedence and function are read-only. Associativity is the
    only mutable attribute and is normally set per precedence level through
    the registry.

    Attributes:
        right_associative: True if chains at this connective's level nest to
            the right (the default)
    """

    __slots__ = ("_symbol", "_aliases", "_arity", "_precedence", "_function", "right_associative")

    def __init__(
        self,
        function: Callable[..., bool],
        symbol: str,
        precedence: int,
        *aliases: str,
        arity: Arity = Arity.BINARY,
        right_associative: bool = True,
    ):
        if function is None or not callable(function):
            raise ConfigurationError("Connective requires a callable truth function")
        _check_symbol(symbol, "Official symbol")
        if len(symbol) != 1:
            raise ConfigurationError(
                f"Official symbol {symbol!r} must be exactly one character"
            )
        for alias in aliases:
            _check_symbol(alias, "Alias")
        if symbol in aliases:
            raise ConfigurationError(f"Alias {symbol!r} repeats the official symbol")
        if not isinstance(precedence, int) or isinstance(precedence, bool):
            raise ConfigurationError(f"Precedence of '{symbol}' must be an integer")
        if precedence >= PRECEDENCE_DEFAULT:
            raise ConfigurationError(
                f"Precedence of '{symbol}' must be lower than {PRECEDENCE_DEFAULT}"
            )
        if not isinstance(arity, Arity):
            raise ConfigurationError(f"Arity of '{symbol}' must be an Arity member")

        self._function = function
        self._symbol = symbol
        self._aliases = tuple(dict.fromkeys(aliases))
        self._precedence = precedence
        self._arity = arity
        self.right_associative = right_associative

    @classmethod
    def unary(cls, function: Callable[[bool], bool], symbol: str, precedence: int, *aliases: str) -> Connective:
        """Create a prefix connective such as negation."""
        return cls(function, symbol, precedence, *aliases, arity=Arity.UNARY)

    @classmethod
    def binary(
        cls, function: Callable[[bool, bool], bool], symbol: str, precedence: int, *aliases: str
    ) -> Connective:
        """Create an infix connective such as conjunction."""
        return cls(function, symbol, precedence, *aliases, arity=Arity.BINARY)

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def aliases(self) -> Tuple[str, ...]:
        return self._aliases

    @property
    def all_symbols(self) -> Tuple[str, ...]:
        return (self._symbol,) + self._aliases

    @property
    def precedence(self) -> int:
        return self._precedence

    @property
    def arity(self) -> Arity:
        return self._arity

    @property
    def function(self) -> Callable[..., bool]:
        return self._function

    @property
    def is_unary(self) -> bool:
        return self._arity is Arity.UNARY

    @property
    def is_binary(self) -> bool:
        return self._arity is Arity.BINARY

    def compute(self, *values: bool) -> bool:
        """Apply the truth function to one or two operand values.

        Raises:
            ValueError: If the number of operands does not match the arity
        """
        if len(values) != self._arity.value:
            raise ValueError(
                f"'{self._symbol}' takes {self._arity.value} operand(s), got {len(values)}"
            )
        if self._arity is Arity.UNARY:
            return bool(self._function(values[0]))
        return bool(self._function(values[0], values[1]))

    @property
    def possible_truths(self) -> Tuple[bool, ...]:
        """Output over all inputs in table order: (T, F) or (TT, TF, FT, FF)."""
        if self._arity is Arity.UNARY:
            return tuple(self.compute(v) for v in (True, False))
        return tuple(self.compute(l, r) for l, r in _BINARY_INPUTS)

    @property
    def swapped_truths(self) -> Tuple[bool, ...]:
        """Signature with the operands exchanged; equals possible_truths for unary."""
        if self._arity is Arity.UNARY:
            return self.possible_truths
        return tuple(self.compute(r, l) for l, r in _BINARY_INPUTS)

    @property
    def is_commutative(self) -> bool:
        return self.possible_truths == self.swapped_truths

    def is_converse_of(self, other: Connective) -> bool:
        """True if ``other`` computes this connective with its operands swapped."""
        return (
            self.is_binary
            and other.is_binary
            and self.possible_truths == other.swapped_truths
        )

    def same_semantics(self, other: Connective) -> bool:
        """Identity, equal official symbol, or equal arity and truth signature."""
        return (
            self is other
            or self._symbol == other.symbol
            or (self._arity is other.arity and self.possible_truths == other.possible_truths)
        )

    def copy(self) -> Connective:
        return Connective(
            self._function,
            self._symbol,
            self._precedence,
            *self._aliases,
            arity=self._arity,
            right_associative=self.right_associative,
        )

    def __repr__(self) -> str:
        assoc = "right" if self.right_associative else "left"
        return (
            f"Connective({self._symbol!r}, {self._arity.name.lower()}, "
            f"precedence={self._precedence}, {assoc}, aliases={list(self._aliases)})"
        )

    def __str__(self) -> str:
        return self._symbol


_BINARY_INPUTS: Tuple[Tuple[bool, bool], ...] = (
    (True, True),
    (True, False),
    (False, True),
    (False, False),
)
