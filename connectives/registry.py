# connectives/registry.py
# This file is part of Proptab - A Propositional Truth Table Toolkit
#
# Mutable, cloneable set of connectives owned by one parser

"""Connective registry used by the lexer and the parser.

The registry is an owned value rather than global state: every parser holds
its own copy, so reconfiguring one parser never affects another. It is
mutated only between parses; while a parse runs it is frozen and any
mutation raises ``ConfigurationError``.
"""

from __future__ import annotations

import re
from contextlib import contextmanager
from typing import Iterable, Iterator, List, Optional, Pattern, Sequence, Tuple, Union

from .connective import CLOSE_PARENTHESES, OPEN_PARENTHESES, Connective
from .defaults import DEFAULT_CONNECTIVES, FALSE_LITERALS, NON_MINIMAL_CONNECTIVES, TRUE_LITERALS
from .exceptions import ConfigurationError
from utils.logger import get_logger

_WHITESPACE = re.compile(r"\s+")

_PARENTHESES = str.maketrans(
    {ch: "(" for ch in OPEN_PARENTHESES} | {ch: ")" for ch in CLOSE_PARENTHESES}
)


class ConnectiveRegistry:
    """Active connectives plus the true/false literal symbol sets.

    Args:
        connectives: Initial connectives (copied); defaults to the standard set
        true_literals: Atom names that always evaluate to true
        false_literals: Atom names that always evaluate to false
    """

    def __init__(
        self,
        connectives: Optional[Iterable[Connective]] = None,
        true_literals: Sequence[str] = TRUE_LITERALS,
        false_literals: Sequence[str] = FALSE_LITERALS,
    ):
        self._connectives: List[Connective] = []
        self._frozen = False
        self._alias_pattern: Optional[Pattern] = None
        self.true_literals: Tuple[str, ...] = tuple(true_literals)
        self.false_literals: Tuple[str, ...] = tuple(false_literals)

        source = DEFAULT_CONNECTIVES if connectives is None else connectives
        for con in source:
            self.register(con.copy())

    def copy(self) -> ConnectiveRegistry:
        """Snapshot of this registry with independent connective objects.

        The list is cloned as is. Going through ``register`` would merge
        connectives that share a truth signature, which ``replace_connective``
        allows.
        """
        clone = ConnectiveRegistry((), self.true_literals, self.false_literals)
        clone._connectives = [con.copy() for con in self._connectives]
        return clone

    # Read access

    @property
    def connectives(self) -> Tuple[Connective, ...]:
        return tuple(self._connectives)

    def __iter__(self) -> Iterator[Connective]:
        return iter(tuple(self._connectives))

    def __len__(self) -> int:
        return len(self._connectives)

    def __contains__(self, item) -> bool:
        if isinstance(item, Connective):
            return self._index_of(item) is not None
        return self.lookup(item) is not None

    def lookup(self, symbol: str) -> Optional[Connective]:
        """Connective whose official symbol is ``symbol``, or None."""
        for con in self._connectives:
            if con.symbol == symbol:
                return con
        return None

    def find_by_truths(self, truths: Sequence[bool]) -> Optional[Connective]:
        """First connective whose truth signature equals ``truths``."""
        wanted = tuple(truths)
        for con in self._connectives:
            if con.possible_truths == wanted:
                return con
        return None

    def is_unary(self, symbol: str) -> bool:
        con = self.lookup(symbol)
        return con is not None and con.is_unary

    def is_binary(self, symbol: str) -> bool:
        con = self.lookup(symbol)
        return con is not None and con.is_binary

    def precedence_levels(self) -> List[int]:
        return sorted({con.precedence for con in self._connectives})

    def is_literal(self, name: str) -> bool:
        return name in self.true_literals or name in self.false_literals

    # Mutation

    @property
    def frozen(self) -> bool:
        return self._frozen

    @contextmanager
    def freeze(self):
        """Reject mutations for the duration of the ``with`` block."""
        previous = self._frozen
        self._frozen = True
        try:
            yield self
        finally:
            self._frozen = previous

    def _check_mutable(self):
        if self._frozen:
            raise ConfigurationError("Connective registry cannot change while a parse is running")

    def _index_of(self, connective: Connective) -> Optional[int]:
        for i, con in enumerate(self._connectives):
            if con is connective:
                return i
        for i, con in enumerate(self._connectives):
            if con.symbol == connective.symbol:
                return i
        return None

    def register(self, connective: Connective) -> ConnectiveRegistry:
        """Add a connective, or replace the one it stands for.

        A connective with the same official symbol as an existing one replaces
        it; failing that, one of the same arity with the same truth signature
        replaces that. Any symbol shared with a different connective is a
        configuration error.

        Returns:
            This registry for method chaining

        Raises:
            ConfigurationError: Missing connective or colliding symbols
        """
        self._check_mutable()
        if connective is None:
            raise ConfigurationError("Cannot register a missing connective")
        if not isinstance(connective, Connective):
            raise ConfigurationError(f"Expected a Connective, got {type(connective).__name__}")

        slot = None
        for i, con in enumerate(self._connectives):
            if con.symbol == connective.symbol:
                slot = i
                break
        if slot is None:
            for i, con in enumerate(self._connectives):
                if con.arity is connective.arity and con.possible_truths == connective.possible_truths:
                    slot = i
                    break

        new_symbols = set(connective.all_symbols)
        for i, con in enumerate(self._connectives):
            if i == slot:
                continue
            shared = new_symbols & set(con.all_symbols)
            if shared:
                raise ConfigurationError(
                    f"Symbol(s) {sorted(shared)} of '{connective.symbol}' already belong to '{con.symbol}'"
                )

        if slot is None:
            self._connectives.append(connective)
            get_logger().registry_changed("added", connective.symbol)
        else:
            replaced = self._connectives[slot]
            self._connectives[slot] = connective
            get_logger().registry_changed(f"replaced '{replaced.symbol}' with", connective.symbol)

        self._alias_pattern = None
        return self

    def set_connectives(self, *connectives: Connective) -> ConnectiveRegistry:
        """Register several connectives in order."""
        for con in connectives:
            self.register(con)
        return self

    def replace_connective(self, symbol: str, connective: Connective) -> ConnectiveRegistry:
        """Replace the connective with official symbol ``symbol`` in place.

        Raises:
            ConfigurationError: No connective has that symbol, or the new one collides
        """
        self._check_mutable()
        target = self.lookup(symbol)
        if target is None:
            raise ConfigurationError(f"No connective with official symbol '{symbol}'")
        if connective is None:
            raise ConfigurationError("Cannot register a missing connective")

        slot = self._connectives.index(target)
        new_symbols = set(connective.all_symbols)
        for i, con in enumerate(self._connectives):
            if i != slot and new_symbols & set(con.all_symbols):
                raise ConfigurationError(
                    f"Symbol(s) of '{connective.symbol}' already belong to '{con.symbol}'"
                )

        self._connectives[slot] = connective
        self._alias_pattern = None
        get_logger().registry_changed(f"replaced '{symbol}' with", connective.symbol)
        return self

    def remove(self, *connectives: Union[Connective, str]) -> ConnectiveRegistry:
        """Remove connectives given as objects or official symbols.

        Raises:
            ConfigurationError: A connective is not registered
        """
        self._check_mutable()
        for item in connectives:
            if item is None:
                raise ConfigurationError("Cannot remove a missing connective")
            if isinstance(item, Connective):
                index = self._index_of(item)
                label = item.symbol
            else:
                con = self.lookup(item)
                index = None if con is None else self._connectives.index(con)
                label = item
            if index is None:
                raise ConfigurationError(f"Connective '{label}' is not registered")
            del self._connectives[index]
            get_logger().registry_changed("removed", label)
        self._alias_pattern = None
        return self

    def use_minimal_connectives(self) -> ConnectiveRegistry:
        """Keep only ¬ ∧ ∨ → ↔ from the default set."""
        self._check_mutable()
        for con in NON_MINIMAL_CONNECTIVES:
            if self._index_of(con) is not None:
                self.remove(con)
        return self

    def set_associativity(self, precedence: int, right: bool) -> ConnectiveRegistry:
        """Set associativity of every connective at ``precedence``.

        Levels are expected to be associativity-uniform; this is what keeps
        them so.
        """
        self._check_mutable()
        for con in self._connectives:
            if con.precedence == precedence:
                con.right_associative = right
        get_logger().registry_changed(
            f"associativity {'right' if right else 'left'} at precedence", str(precedence)
        )
        return self

    def set_literals(
        self,
        true_literals: Optional[Sequence[str]] = None,
        false_literals: Optional[Sequence[str]] = None,
    ) -> ConnectiveRegistry:
        """Replace the true and/or false literal symbol sets; None keeps the current set."""
        self._check_mutable()
        if true_literals is not None:
            self.true_literals = tuple(true_literals)
        if false_literals is not None:
            self.false_literals = tuple(false_literals)
        return self

    # Normalization

    def _aliases(self) -> Pattern:
        if self._alias_pattern is None:
            aliases = sorted(
                {alias for con in self._connectives for alias in con.aliases},
                key=len,
                reverse=True,
            )
            if aliases:
                self._alias_pattern = re.compile("|".join(re.escape(a) for a in aliases))
            else:
                self._alias_pattern = re.compile(r"(?!)")
        return self._alias_pattern

    def normalize(self, text: str) -> str:
        """Strip whitespace, unify parentheses and rewrite aliases to official symbols.

        Longer aliases are matched first, so ``<->`` is never split into
        ``<-`` followed by ``>``.
        """
        text = _WHITESPACE.sub("", text).translate(_PARENTHESES)
        owners = {alias: con.symbol for con in self._connectives for alias in con.aliases}
        return self._aliases().sub(lambda m: owners[m.group(0)], text)

    def __repr__(self) -> str:
        symbols = " ".join(con.symbol for con in self._connectives)
        return f"ConnectiveRegistry({symbols})"
