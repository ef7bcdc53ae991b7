# syntax/tokens.py
# This file is part of Proptab - A Propositional Truth Table Toolkit
#
# Token kinds and token values produced by the formula lexer

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple


class TokenType(Enum):
    """Kinds of tokens handed from the lexer to the parser."""

    ATOM = auto()  # alphanumeric run, literal glyph, or parenthesized atom
    UNARY_CONNECTIVE = auto()
    BINARY_CONNECTIVE = auto()
    FORMULA = auto()  # parenthesized text, re-lexed on demand
    PARSED_FORMULA = auto()  # unary prefix run collapsed with its operand


@dataclass(frozen=True, slots=True)
class Token:
    """A lexed unit of formula text.

    Attributes:
        type: Token kind
        value: Token text; for FORMULA the inner text without its parentheses
        index: Offset of ``value`` in the normalized formula
        tokens: Sub-tokens of a PARSED_FORMULA, empty otherwise
    """

    type: TokenType
    value: str
    index: int
    tokens: Tuple[Token, ...] = ()

    @property
    def is_operand(self) -> bool:
        return self.type in (TokenType.ATOM, TokenType.FORMULA, TokenType.PARSED_FORMULA)

    @property
    def is_connective(self) -> bool:
        return self.type in (TokenType.UNARY_CONNECTIVE, TokenType.BINARY_CONNECTIVE)

    @property
    def text(self) -> str:
        """Source text of the token, parentheses included."""
        if self.type is TokenType.FORMULA:
            return f"({self.value})"
        return self.value

    def __str__(self) -> str:
        return self.text
