# syntax/exceptions.py
# This file is part of Proptab - A Propositional Truth Table Toolkit
#
# Syntax errors raised while lexing and parsing formula text

"""Domain-specific exceptions for formula text processing.

A syntax error always carries the 0-based position of the defect inside the
normalized formula (whitespace removed, aliases rewritten) and a two-line
indicator: the normalized formula, then a caret under the error column.
Parsing either fully succeeds or raises; no partial tree is ever returned.
"""


def generate_indicator(formula: str, index: int) -> str:
    """Return ``formula`` followed by a line with ``^`` under ``index``."""
    return f"{formula}\n{' ' * index}^"


class FormulaSyntaxError(RuntimeError):
    """Exception raised when formula text is malformed.

    Attributes:
        index: 0-based character offset into the normalized formula
        reason: Human-readable description of the defect
        formula: The normalized formula the index refers to
        indicator: Formula line plus caret line
    """

    def __init__(self, index: int, reason: str, formula: str):
        self.index = index
        self.reason = reason
        self.formula = formula
        self.indicator = generate_indicator(formula, index)
        super().__init__(f"Index {index} - {reason}\n{self.indicator}")
