# semantics/calculator.py
# This file is part of Proptab - A Propositional Truth Table Toolkit
#
# Truth value enumeration, bottom-up propagation and column assembly

"""Truth calculation over a parsed formula tree.

Three phases run on every ``compute`` call:

1. Atom enumeration. Free atoms, in order of first appearance, get
   alternating blocks of truth values: atom ``i`` (1-based) alternates in
   blocks of ``rows / 2**i`` starting with true, so the first atom changes
   slowest and the last changes every row. Literal atoms get a constant
   vector and take no enumeration slot.
2. Formula propagation, deepest level first, so both operands of a formula
   are always known before the formula itself.
3. Column assembly for the requested categories, with operand sub-columns
   down to the requested depth.

Every phase overwrites what a previous run stored, so computing the same
tree twice with the same options gives identical tables.
"""

from typing import List, Optional, Tuple

from syntax.ast_nodes import Formula, LocalAtom, Node
from syntax.tree import FormulaTree
from connectives.defaults import ALL_LEVELS
from .column import Column
from .options import ColumnType, TableOptions
from .table import TruthTable
from utils.logger import get_logger


class TruthCalculator:
    """Computes a ``TruthTable`` for one formula tree.

    Args:
        tree: Parsed formula
        options: Table settings; atom and root columns without sub-columns if omitted
    """

    def __init__(self, tree: FormulaTree, options: Optional[TableOptions] = None):
        self.tree = tree
        self.options = TableOptions() if options is None else options

        registry = tree.registry
        self.true_literals = (
            registry.true_literals if self.options.true_literals is None else self.options.true_literals
        )
        self.false_literals = (
            registry.false_literals if self.options.false_literals is None else self.options.false_literals
        )

        free = [atom for atom in tree.atoms if not self._is_literal(atom.name)]
        self.free_atom_count = len(free)
        self.row_count = 2 ** len(free)

    def _is_literal(self, name: str) -> bool:
        return name in self.true_literals or name in self.false_literals

    def compute(self) -> TruthTable:
        self._fill_atom_truths()
        self._compute_formula_truths()

        columns = self._assemble_columns()
        get_logger().table_built(self.tree.canonical_string(), self.row_count, len(columns))
        return TruthTable(self.tree, columns, self.options, self.row_count)

    def _fill_atom_truths(self):
        rows = self.row_count
        slot = 0
        for atom in self.tree.atoms:
            if atom.name in self.true_literals:
                atom.truths = (True,) * rows
            elif atom.name in self.false_literals:
                atom.truths = (False,) * rows
            else:
                slot += 1
                block = rows // 2**slot
                atom.truths = tuple((r // block) % 2 == 0 for r in range(rows))

    def _compute_formula_truths(self):
        for level in range(self.tree.levels, -1, -1):
            for node in self.tree.nodes_at_level(level):
                if not isinstance(node, Formula):
                    continue

                connective = node.connective
                if connective.is_unary:
                    operand = node.right.truths
                    node.truths = tuple(connective.compute(value) for value in operand)
                else:
                    left, right = node.left.truths, node.right.truths
                    node.truths = tuple(
                        connective.compute(lhs, rhs) for lhs, rhs in zip(left, right)
                    )

    def _assemble_columns(self) -> List[Column]:
        kinds = self.options.columns
        columns: List[Column] = []

        if ColumnType.ATOMS in kinds:
            for atom in self.tree.atoms:
                columns.append(Column(ColumnType.ATOMS, atom, atom.truths))

        if ColumnType.FORMULAS in kinds:
            for formula in self.tree.formulas():
                if formula.is_root:
                    continue
                columns.append(self._formula_column(ColumnType.FORMULAS, formula))

        if ColumnType.ROOT in kinds:
            root = self.tree.root
            if isinstance(root, LocalAtom):
                columns.append(Column(ColumnType.ROOT, root.atom, root.truths))
            else:
                columns.append(self._formula_column(ColumnType.ROOT, root))

        return columns

    def _formula_column(self, kind: ColumnType, formula: Formula) -> Column:
        if not self.options.shows_sub_columns:
            return Column(kind, formula, formula.truths)
        left, right = self._operand_columns(formula, 0)
        return Column(kind, formula, formula.truths, left, right)

    def _operand_columns(self, formula: Formula, level: int) -> Tuple[Optional[Column], Optional[Column]]:
        left = None if formula.left is None else self._sub_column(formula.left, level + 1)
        return left, self._sub_column(formula.right, level + 1)

    def _sub_column(self, node: Node, level: int) -> Optional[Column]:
        depth = self.options.sub_column_depth
        if depth != ALL_LEVELS and level > depth:
            return None

        if isinstance(node, LocalAtom):
            return Column(ColumnType.ATOMS, node.atom, node.truths)

        left, right = self._operand_columns(node, level)
        return Column(ColumnType.FORMULAS, node, node.truths, left, right)
