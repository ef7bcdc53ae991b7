# syntax/tree.py
# This file is part of Proptab - A Propositional Truth Table Toolkit
#
# Handle over one parsed formula: root node, interned atoms and tree queries

from __future__ import annotations

from typing import List, Optional, Tuple

from connectives.registry import ConnectiveRegistry
from .ast_nodes import Atom, Formula, LocalAtom, Node, TreePrinter


class FormulaTree:
    """The abstract syntax tree produced by one ``FormulaParser.parse`` call.

    Attributes:
        root: Root node, a Formula or a LocalAtom
        atoms: Distinct atoms in order of first appearance
        registry: Snapshot of the registry the formula was parsed with
        source: The formula text as given to the parser
    """

    def __init__(
        self,
        root: Node,
        atoms: Tuple[Atom, ...],
        registry: ConnectiveRegistry,
        source: str = "",
    ):
        self.root = root
        self.atoms = atoms
        self.registry = registry
        self.source = source
        self._nodes: List[Node] = list(root.walk())
        self.levels = max(node.depth for node in self._nodes)

    def canonical_string(self) -> str:
        """Fully parenthesized text of the formula with official symbols."""
        return self.root.string

    def walk(self) -> List[Node]:
        """All nodes in post-order (children before their parent)."""
        return list(self._nodes)

    def nodes_at_level(self, level: int) -> List[Node]:
        return [node for node in self._nodes if node.depth == level]

    def formulas(self) -> List[Formula]:
        return [node for node in self._nodes if isinstance(node, Formula)]

    def local_atoms(self) -> List[LocalAtom]:
        return [node for node in self._nodes if isinstance(node, LocalAtom)]

    def atom(self, name: str) -> Optional[Atom]:
        for atom in self.atoms:
            if atom.name == name:
                return atom
        return None

    def print_tree(self) -> str:
        """Indented listing of every node with its level."""
        return TreePrinter().render(self.root)

    def build_table(self, options=None):
        """Compute a truth table for this formula.

        Args:
            options: ``semantics.TableOptions``; defaults to atom and root columns

        Returns:
            ``semantics.TruthTable``
        """
        from semantics.calculator import TruthCalculator

        return TruthCalculator(self, options).compute()

    def is_tautology(self) -> bool:
        return self.build_table().is_tautology()

    def is_contradiction(self) -> bool:
        return self.build_table().is_contradiction()

    def structure_equals(self, other: FormulaTree) -> bool:
        return self.root.structure_equals(other.root)

    def __str__(self) -> str:
        return self.canonical_string()

    def __repr__(self) -> str:
        return f"FormulaTree({self.canonical_string()!r}, atoms={[a.name for a in self.atoms]})"
