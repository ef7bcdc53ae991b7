# semantics/options.py
# This file is part of Proptab - A Propositional Truth Table Toolkit
#
# Column selection and detail settings for truth table building

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional, Tuple

from connectives.defaults import ALL_LEVELS
from .exceptions import TableUsageError


class ColumnType(Enum):
    """Categories of columns a table can show."""

    ATOMS = "atoms"
    FORMULAS = "formulas"  # non-root formulas, one per occurrence
    ROOT = "root"


DEFAULT_COLUMNS = frozenset({ColumnType.ATOMS, ColumnType.ROOT})


@dataclass(frozen=True)
class TableOptions:
    """Settings for one ``build_table`` call.

    Attributes:
        columns: Column categories to include, in fixed order atoms, formulas, root
        sub_column_depth: 0 for none, -1 for every level, else the deepest level shown
        true_literals: Atom names fixed to true; None uses the tree's registry
        false_literals: Atom names fixed to false; None uses the tree's registry
    """

    columns: FrozenSet[ColumnType] = field(default=DEFAULT_COLUMNS)
    sub_column_depth: int = 0
    true_literals: Optional[Tuple[str, ...]] = None
    false_literals: Optional[Tuple[str, ...]] = None

    def __post_init__(self):
        object.__setattr__(self, "columns", frozenset(self.columns))
        if not self.columns:
            raise TableUsageError("At least one column category is required")
        for kind in self.columns:
            if not isinstance(kind, ColumnType):
                raise TableUsageError(f"Unknown column category: {kind!r}")

        if self.sub_column_depth < ALL_LEVELS:
            raise TableUsageError(
                f"Sub-column depth must be {ALL_LEVELS} or more, got {self.sub_column_depth}"
            )

        if self.true_literals is not None:
            object.__setattr__(self, "true_literals", tuple(self.true_literals))
        if self.false_literals is not None:
            object.__setattr__(self, "false_literals", tuple(self.false_literals))

    @property
    def shows_sub_columns(self) -> bool:
        return self.sub_column_depth != 0

    @classmethod
    def all_columns(cls, sub_column_depth: int = 0) -> "TableOptions":
        return cls(frozenset(ColumnType), sub_column_depth)
