# semantics/__init__.py
# This file is part of Proptab - A Propositional Truth Table Toolkit
#
# Truth table computation, rendering and validity checks

"""Truth tables over parsed formula trees.

Core Components:
    TruthCalculator: enumerates atom values and propagates them bottom-up
    TruthTable: columns with row, cell and tautology queries plus rendering
    TableOptions: column categories, sub-column depth and literal atom sets
    entails: semantic validity of premises against a conclusion

Example:
    >>> from syntax import parse
    >>> table = parse("P & ~P").build_table()
    >>> table.is_contradiction()
    True
"""

from .calculator import TruthCalculator
from .column import Column
from .exceptions import TableUsageError
from .options import DEFAULT_COLUMNS, ColumnType, TableOptions
from .render import TableRenderer
from .table import TruthTable
from .validity import corresponding_conditional, entails

__all__ = [
    "Column",
    "ColumnType",
    "DEFAULT_COLUMNS",
    "TableOptions",
    "TableRenderer",
    "TableUsageError",
    "TruthCalculator",
    "TruthTable",
    "corresponding_conditional",
    "entails",
]
