# semantics/render.py
# This file is part of Proptab - A Propositional Truth Table Toolkit
#
# Plain-text rendering of truth tables with aligned sub-columns

"""Text layout of a truth table.

Each column is as wide as its name, plus one when the name length is even so
that a single character can sit in the middle, plus a one-space margin on
each side. A border line of ``+`` and ``-`` goes above the header, below it
and below every row::

    +---+---+-----------+
    | P | Q | (P→(Q→P)) |
    +---+---+-----------+
    | T | T |     T     |
    +---+---+-----------+

With sub-columns, a formula cell spells out a value for each shown operand
directly under that operand's text, and the formula's own value under its
connective::

    | (P→(Q→P)) |
    |  TT TTT   |
"""

from typing import List

from syntax.ast_nodes import Atom
from .column import Column

TRUE_CHAR = "T"
FALSE_CHAR = "F"


def truth_char(value: bool) -> str:
    return TRUE_CHAR if value else FALSE_CHAR


def column_width(name: str) -> int:
    """Odd width that fits ``name``."""
    return len(name) + 1 if len(name) % 2 == 0 else len(name)


class TableRenderer:
    """Renders one ``TruthTable`` as text."""

    def __init__(self, table):
        self.table = table
        self.widths: List[int] = [column_width(column.name) for column in table.columns]

    def render(self) -> str:
        border = self.border()
        lines = [border, self.header(), border]
        for row in range(self.table.row_count):
            lines.append(self.row_line(row))
            lines.append(border)
        return "\n".join(lines)

    def border(self) -> str:
        return "+" + "+".join("-" * (width + 2) for width in self.widths) + "+"

    def header(self) -> str:
        cells = [
            "| " + column.name.ljust(width) + " "
            for column, width in zip(self.table.columns, self.widths)
        ]
        return "".join(cells) + "|"

    def row_line(self, row: int) -> str:
        cells = [
            "| " + self.cell_text(column, width, row) + " "
            for column, width in zip(self.table.columns, self.widths)
        ]
        return "".join(cells) + "|"

    def cell_text(self, column: Column, width: int, row: int) -> str:
        if self.table.shows_sub_columns and not column.is_atom:
            return nested_text(column, row).ljust(width)

        text = [" "] * width
        text[width // 2] = truth_char(column.values[row])
        return "".join(text)


def nested_text(column: Column, row: int) -> str:
    """Cell text as long as the column name, with operand values under their text.

    An operand without a column of its own leaves blanks under its text.
    """
    char = truth_char(column.values[row])
    source = column.source

    if isinstance(source, Atom):
        size = len(source.name)
        return " " * (size // 2) + char + " " * (size - size // 2 - 1)

    parts = [" "]
    if source.left is not None:
        parts.append(_operand_text(column.left, source.left.string, row))
    parts.append(char)
    parts.append(_operand_text(column.right, source.right.string, row))
    parts.append(" ")
    return "".join(parts)


def _operand_text(column, text: str, row: int) -> str:
    if column is None:
        return " " * len(text)
    return nested_text(column, row)
