# semantics/table.py
# This file is part of Proptab - A Propositional Truth Table Toolkit
#
# Computed truth table with row, column and verdict queries

from typing import List, Optional, Tuple

from .column import Column
from .exceptions import TableUsageError
from .options import ColumnType, TableOptions
from .render import TableRenderer


class TruthTable:
    """Ordered columns sharing one row count.

    When a root column is present it is always the last one.

    Attributes:
        tree: The FormulaTree the table was computed from
        options: The options the table was built with
    """

    def __init__(self, tree, columns: List[Column], options: TableOptions, row_count: int):
        self.tree = tree
        self.options = options
        self._columns: Tuple[Column, ...] = tuple(columns)
        self._row_count = row_count

    @property
    def row_count(self) -> int:
        return self._row_count

    @property
    def column_count(self) -> int:
        return len(self._columns)

    @property
    def columns(self) -> Tuple[Column, ...]:
        return self._columns

    @property
    def sub_column_depth(self) -> int:
        return self.options.sub_column_depth

    @property
    def shows_sub_columns(self) -> bool:
        return self.options.shows_sub_columns

    @property
    def root_column(self) -> Optional[Column]:
        if self._columns and self._columns[-1].kind is ColumnType.ROOT:
            return self._columns[-1]
        return None

    def atom_columns(self) -> List[Column]:
        return [column for column in self._columns if column.kind is ColumnType.ATOMS]

    def _check_row(self, row: int):
        if not 0 <= row < self._row_count:
            raise TableUsageError(f"Row {row} out of range 0..{self._row_count - 1}")

    def _check_column(self, col: int):
        if not 0 <= col < len(self._columns):
            raise TableUsageError(f"Column {col} out of range 0..{len(self._columns) - 1}")

    def cell(self, row: int, col: int) -> bool:
        self._check_row(row)
        self._check_column(col)
        return self._columns[col].values[row]

    def row(self, row: int) -> Tuple[bool, ...]:
        """Truth values of one row, one per column."""
        self._check_row(row)
        return tuple(column.values[row] for column in self._columns)

    def column(self, col: int) -> Column:
        self._check_column(col)
        return self._columns[col]

    def _require_root(self) -> Column:
        root = self.root_column
        if root is None:
            raise TableUsageError("Table has no root column; include ColumnType.ROOT")
        return root

    def is_tautology(self) -> bool:
        return self._require_root().is_tautology()

    def is_contradiction(self) -> bool:
        return self._require_root().is_contradiction()

    def render(self) -> str:
        return TableRenderer(self).render()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"TruthTable({self._row_count} rows, {[c.name for c in self._columns]})"
