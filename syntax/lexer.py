# syntax/lexer.py
# This file is part of Proptab - A Propositional Truth Table Toolkit
#
# Lexical analyzer for propositional formulas over a configurable connective set

"""Lexical analysis of normalized formula strings.

Scanning happens in two layers. ``FormulaScanner`` is a SLY lexer that cuts
the text into alphanumeric runs, parentheses and single symbol characters.
``FormulaLexer`` classifies those pieces against the connective registry,
groups every parenthesized region into one opaque token, validates local
syntax and collapses unary prefix runs with their operand.

Token sequence examples:
    "P∧Q"        -> ATOM "P", BINARY "∧", ATOM "Q"
    "((P∧Q))"    -> ATOM "P", BINARY "∧", ATOM "Q"
    "(P∧Q)→R"    -> FORMULA "P∧Q", BINARY "→", ATOM "R"
    "¬¬P∨Q"      -> PARSED_FORMULA "¬¬P", BINARY "∨", ATOM "Q"
"""

from typing import List, Optional, Set

from sly import Lexer

from connectives.registry import ConnectiveRegistry
from .exceptions import FormulaSyntaxError
from .tokens import Token, TokenType
from utils.logger import get_logger


class FormulaScanner(Lexer):
    """SLY-based character scanner for normalized formula text.

    Only four raw token kinds exist; connective symbols, literal glyphs and
    unknown characters all arrive as SYMBOL and are told apart by
    ``FormulaLexer`` using the registry.
    """

    tokens = {
        "ATOM",
        "LPAREN",
        "RPAREN",
        "SYMBOL",
    }

    ignore = " \t\r\n"

    # Maximal run of letters and digits, underscore excluded
    ATOM = r"[^\W_]+"
    LPAREN = r"\("
    RPAREN = r"\)"
    SYMBOL = r"."


class FormulaLexer:
    """Registry-aware lexer over one normalized formula.

    Every position it reports, in tokens and in errors, is an offset into
    ``source`` so nested groups can be re-lexed later without losing track of
    where they came from.

    Args:
        registry: Connectives and literal symbols to recognize
        source: The whole normalized formula
    """

    def __init__(self, registry: ConnectiveRegistry, source: str):
        self.registry = registry
        self.source = source
        self._scanner = FormulaScanner()
        # Source offsets of groups already lexed once
        self._validated: Set[int] = set()

    def error(self, index: int, reason: str) -> FormulaSyntaxError:
        return FormulaSyntaxError(index, reason, self.source)

    def lex(self, text: Optional[str] = None, offset: int = 0) -> List[Token]:
        """Tokenize ``text``, which starts at ``offset`` in the source.

        Redundant outer parentheses are peeled until the text is either a
        single atom or more than one token.

        Raises:
            FormulaSyntaxError: Any lexical or local structural defect
        """
        if text is None:
            text = self.source

        tokens = self._scan(text, offset)
        while len(tokens) == 1 and tokens[0].type is TokenType.FORMULA:
            text, offset = tokens[0].value, tokens[0].index
            tokens = self._scan(text, offset)

        tokens = self._collapse_unary(tokens)
        get_logger().tokens_lexed(text, tokens)
        return tokens

    def _scan(self, text: str, offset: int) -> List[Token]:
        raw = list(self._scanner.tokenize(text))

        if not raw:
            raise self.error(offset, "Empty formula")

        tokens: List[Token] = []
        i = 0
        while i < len(raw):
            tok = raw[i]
            position = offset + tok.index

            if tok.type == "LPAREN":
                close = self._matching_parenthesis(raw, i, text, offset)
                inner = text[tok.index + 1 : raw[close].index]
                if not inner:
                    raise self.error(
                        offset + raw[close].index, "Empty formula or atom within parentheses"
                    )
                kind = TokenType.ATOM if self._is_atomic(inner) else TokenType.FORMULA
                token = Token(kind, inner, position + 1)
                # A group spanning the whole text is peeled and scanned by lex
                whole = i == 0 and close == len(raw) - 1
                i = close + 1

            elif tok.type == "RPAREN":
                raise self.error(position, "Closing parenthesis without matching opening parenthesis")

            elif tok.type == "ATOM":
                token = Token(TokenType.ATOM, tok.value, position)
                i += 1

            else:
                token = Token(self._classify(tok.value, position), tok.value, position)
                i += 1

            self._check_adjacent(tokens[-1] if tokens else None, token, position)
            if token.type is TokenType.FORMULA and not whole and token.index not in self._validated:
                # Surface errors inside the group before anything to its right
                self.lex(token.value, token.index)
                self._validated.add(token.index)
            tokens.append(token)

        if tokens[-1].is_connective:
            raise self.error(
                offset + len(text), "Missing atom or formula at the end of the expression"
            )
        return tokens

    def _classify(self, symbol: str, position: int) -> TokenType:
        if self.registry.is_binary(symbol):
            return TokenType.BINARY_CONNECTIVE
        if self.registry.is_unary(symbol):
            return TokenType.UNARY_CONNECTIVE
        if self.registry.is_literal(symbol):
            return TokenType.ATOM
        raise self.error(position, f'Unrecognized character "{symbol}"')

    def _is_atomic(self, text: str) -> bool:
        return text.isalnum() or self.registry.is_literal(text)

    def _matching_parenthesis(self, raw, start: int, text: str, offset: int) -> int:
        depth = 0
        for j in range(start, len(raw)):
            if raw[j].type == "LPAREN":
                depth += 1
            elif raw[j].type == "RPAREN":
                depth -= 1
                if depth == 0:
                    return j

        end = offset + len(text)
        if raw[-1].type == "LPAREN":
            raise self.error(end, "Missing atom or formula at the end of the expression")
        raise self.error(end, "Missing closing parenthesis")

    def _check_adjacent(self, previous: Optional[Token], current: Token, position: int):
        if previous is None:
            if current.type is TokenType.BINARY_CONNECTIVE:
                raise self.error(
                    position, f'Missing atom or formula before connective "{current.value}"'
                )
            return

        if previous.is_operand and (
            current.is_operand or current.type is TokenType.UNARY_CONNECTIVE
        ):
            raise self.error(position, f'Unexpected character "{self.source[position]}"')

        if previous.is_connective and current.type is TokenType.BINARY_CONNECTIVE:
            raise self.error(position, f'Unexpected character "{current.value}"')

    def _collapse_unary(self, tokens: List[Token]) -> List[Token]:
        """Fold each run of unary connectives into one token with its operand."""
        collapsed: List[Token] = []
        pending: List[Token] = []
        for token in tokens:
            if token.type is TokenType.UNARY_CONNECTIVE:
                pending.append(token)
                continue
            if pending:
                parts = tuple(pending) + (token,)
                collapsed.append(
                    Token(
                        TokenType.PARSED_FORMULA,
                        "".join(part.text for part in parts),
                        pending[0].index,
                        parts,
                    )
                )
                pending = []
            else:
                collapsed.append(token)
        return collapsed
