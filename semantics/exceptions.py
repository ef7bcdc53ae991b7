# semantics/exceptions.py
# This file is part of Proptab - A Propositional Truth Table Toolkit
#
# Usage errors raised by truth table building and querying


class TableUsageError(RuntimeError):
    """A truth table operation was called outside its preconditions.

    Raised for out-of-range row or column indices, invalid table options, and
    tautology or contradiction queries on a table without a root column.
    """
