# semantics/column.py
# This file is part of Proptab - A Propositional Truth Table Toolkit
#
# Truth table column with optional nested operand sub-columns

from __future__ import annotations

from typing import Optional, Tuple, Union

from syntax.ast_nodes import Atom, Formula
from .options import ColumnType


class Column:
    """A named vector of truth values in a table.

    A formula column shown with sub-columns also carries the columns of its
    operands. Unary formulas only ever have a right sub-column.

    Attributes:
        kind: Column category
        source: The Atom or Formula the values belong to
        values: One truth value per row
        left: Left operand column, or None
        right: Right operand column, or None
    """

    __slots__ = ("kind", "source", "values", "left", "right")

    def __init__(
        self,
        kind: ColumnType,
        source: Union[Atom, Formula],
        values: Tuple[bool, ...],
        left: Optional[Column] = None,
        right: Optional[Column] = None,
    ):
        self.kind = kind
        self.source = source
        self.values = tuple(values)
        self.left = left
        self.right = right

    @property
    def name(self) -> str:
        if isinstance(self.source, Atom):
            return self.source.name
        return self.source.string

    @property
    def is_atom(self) -> bool:
        return isinstance(self.source, Atom)

    @property
    def has_sub_columns(self) -> bool:
        return self.left is not None or self.right is not None

    def is_tautology(self) -> bool:
        return all(self.values)

    def is_contradiction(self) -> bool:
        return not any(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __repr__(self) -> str:
        return f"Column({self.kind.name}, {self.name!r})"
