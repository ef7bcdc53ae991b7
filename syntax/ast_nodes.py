# syntax/ast_nodes.py
# This file is part of Proptab - A Propositional Truth Table Toolkit
#
# Abstract Syntax Tree node classes for propositional formulas

"""AST node classes for representing parsed propositional formulas.

Node Types:
    Atom: the shared propositional variable, one object per distinct name
    LocalAtom: a leaf, one positional occurrence of an Atom in the tree
    Formula: an internal node, a connective applied to one or two children

Atoms are shared between all of their occurrences, so every LocalAtom with
the same name sees the same truth values. Truth values are the only state
assigned after construction; the truth calculator sets them once per table.

All nodes support the visitor design pattern for traversal.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Protocol, Sequence, Tuple

from connectives.connective import Arity, Connective


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern."""

    def visit_atom(self, n: LocalAtom): ...

    def visit_formula(self, n: Formula): ...


class Atom:
    """Canonical propositional variable identified by its name.

    Equality and hashing use the name only.

    Attributes:
        name: Surface name of the variable
        truths: Truth vector assigned by the truth calculator, or None
    """

    __slots__ = ("name", "truths")

    def __init__(self, name: str):
        self.name = name
        self.truths: Optional[Tuple[bool, ...]] = None

    @property
    def is_set(self) -> bool:
        return self.truths is not None

    def __eq__(self, other) -> bool:
        return isinstance(other, Atom) and other.name == self.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Atom({self.name!r})"

    def __str__(self) -> str:
        return self.name


class Node:
    """Base class for tree nodes.

    Attributes:
        depth: Tree level, 0 for the root
        parent: Enclosing formula, None for the root
    """

    __slots__ = ("depth", "parent")

    def __init__(self, depth: int):
        self.depth = depth
        self.parent: Optional[Formula] = None

    @property
    def string(self) -> str:
        raise NotImplementedError

    @property
    def truths(self) -> Optional[Tuple[bool, ...]]:
        raise NotImplementedError

    @property
    def is_formula(self) -> bool:
        return isinstance(self, Formula)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def children(self) -> Tuple[Node, ...]:
        return ()

    def accept(self, v: Visitor):
        raise NotImplementedError

    def walk(self) -> Iterator[Node]:
        """Post-order traversal: children before the node itself."""
        for child in self.children:
            yield from child.walk()
        yield self

    def structure_equals(self, other: Node) -> bool:
        """Compare tree shape and connectives, tolerating commuted operands.

        Two nodes are structurally equal when they are atoms of the same name,
        or formulas whose connectives have the same arity, are semantically
        the same (identity, official symbol or truth signature) and whose
        children are structurally equal. Binary formulas with swapped
        children also match when the connective is commutative (P∧Q, Q∧P) or
        the two connectives are converses (P→Q, Q←P).
        """
        if self is other:
            return True
        if isinstance(self, LocalAtom) or isinstance(other, LocalAtom):
            return (
                isinstance(self, LocalAtom)
                and isinstance(other, LocalAtom)
                and self.name == other.name
            )

        con1, con2 = self.connective, other.connective
        if con1.arity is not con2.arity:
            return False

        if con1.arity is Arity.UNARY:
            return con1.same_semantics(con2) and self.children[0].structure_equals(
                other.children[0]
            )

        left1, right1 = self.children
        left2, right2 = other.children
        if (
            con1.same_semantics(con2)
            and left1.structure_equals(left2)
            and right1.structure_equals(right2)
        ):
            return True

        if left1.structure_equals(right2) and right1.structure_equals(left2):
            if con1.same_semantics(con2) and con1.is_commutative:
                return True
            return con1.is_converse_of(con2)
        return False

    def __str__(self) -> str:
        return self.string


class LocalAtom(Node):
    """Leaf occurrence of a shared Atom.

    Owns no truth data; ``truths`` reads the shared atom's vector.
    """

    __slots__ = ("atom",)

    def __init__(self, atom: Atom, depth: int):
        super().__init__(depth)
        self.atom = atom

    @property
    def name(self) -> str:
        return self.atom.name

    @property
    def string(self) -> str:
        return self.atom.name

    @property
    def truths(self) -> Optional[Tuple[bool, ...]]:
        return self.atom.truths

    def accept(self, v: Visitor):
        return v.visit_atom(self)

    def __repr__(self) -> str:
        return f"LocalAtom({self.atom.name!r}, depth={self.depth})"


class Formula(Node):
    """Internal node: a connective applied to its operand nodes.

    The canonical string is rebuilt from the children and is always fully
    parenthesized: ``(left∧right)`` or ``(¬right)``.
    """

    __slots__ = ("connective", "_children", "_string", "_truths")

    def __init__(self, connective: Connective, children: Sequence[Node], depth: int):
        super().__init__(depth)
        if len(children) != connective.arity.value:
            raise ValueError(
                f"'{connective.symbol}' takes {connective.arity.value} operand(s), "
                f"got {len(children)}"
            )
        self.connective = connective
        self._children: Tuple[Node, ...] = tuple(children)
        for child in self._children:
            child.parent = self
        self._string = "(" + "".join(self._parts()) + ")"
        self._truths: Optional[Tuple[bool, ...]] = None

    def _parts(self) -> List[str]:
        if self.connective.arity is Arity.UNARY:
            return [self.connective.symbol, self._children[0].string]
        left, right = self._children
        return [left.string, self.connective.symbol, right.string]

    @property
    def children(self) -> Tuple[Node, ...]:
        return self._children

    @property
    def left(self) -> Optional[Node]:
        """Left operand, None for unary formulas."""
        return self._children[0] if self.connective.arity is Arity.BINARY else None

    @property
    def right(self) -> Node:
        return self._children[-1]

    @property
    def string(self) -> str:
        return self._string

    @property
    def truths(self) -> Optional[Tuple[bool, ...]]:
        return self._truths

    @truths.setter
    def truths(self, values: Tuple[bool, ...]):
        self._truths = tuple(values)

    def accept(self, v: Visitor):
        return v.visit_formula(self)

    def __repr__(self) -> str:
        return f"Formula({self._string!r}, depth={self.depth})"


class TreePrinter:
    """Visitor producing the indented listing of a tree.

    Format per line: ``[indent]FORMULA(level): string (CONNECTIVE: symbol)`` or
    ``[indent]ATOM(level): name``; the root line is prefixed with ``ROOT_``.
    """

    INDENT = "  "

    def __init__(self):
        self._lines: List[str] = []

    def render(self, root: Node) -> str:
        self._lines = []
        root.accept(self)
        self._lines[0] = "ROOT_" + self._lines[0]
        return "\n".join(self._lines)

    def _indent(self, node: Node) -> str:
        return self.INDENT * node.depth

    def visit_atom(self, n: LocalAtom):
        self._lines.append(f"{self._indent(n)}ATOM({n.depth}): {n.name}")

    def visit_formula(self, n: Formula):
        self._lines.append(
            f"{self._indent(n)}FORMULA({n.depth}): {n.string} (CONNECTIVE: {n.connective.symbol})"
        )
        for child in n.children:
            child.accept(self)
