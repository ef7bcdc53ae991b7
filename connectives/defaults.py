# connectives/defaults.py
# This file is part of Proptab - A Propositional Truth Table Toolkit
#
# Default connectives, parenthesis sets and true/false literal symbols

"""Default configuration shared by every new registry.

The registry copies these connectives on construction, so changing the
associativity of a registry never touches the module-level objects.

Operator precedence (loosest to tightest):
    10: ↔
    20: → ↛ ← ↚
    30: ∨ ↓ ⊕
    40: ∧ ↑
    50: ¬
"""

from .connective import Connective

NEG = Connective.unary(lambda right: not right, "¬", 50, "~", "!")

AND = Connective.binary(
    lambda left, right: left and right, "∧", 40, "/\\", "&", "^", "×", "•", "⋅"
)

NAND = Connective.binary(lambda left, right: not left or not right, "↑", 40, "⊼")

OR = Connective.binary(lambda left, right: left or right, "∨", 30, "\\/", "|", "+", "∥")

NOR = Connective.binary(lambda left, right: not left and not right, "↓", 30, "⊽")

XOR = Connective.binary(
    lambda left, right: left != right, "⊕", 30, "⊻", "<-/->", "<=/=>", "↮", "≢"
)

IF = Connective.binary(lambda left, right: not left or right, "→", 20, "->", "=>", "⇒", "⊃", ">")

NIF = Connective.binary(lambda left, right: left and not right, "↛", 20, "-/>", "=/>")

IF_CON = Connective.binary(lambda left, right: left or not right, "←", 20, "<-", "<=", "⇐", "⊂", "<")

NIF_CON = Connective.binary(lambda left, right: not left and right, "↚", 20, "</-", "</=", "<-/")

IFF = Connective.binary(
    lambda left, right: left == right, "↔", 10, "<>", "<->", "<=>", "≡", "⇔", "="
)

DEFAULT_CONNECTIVES = (
    NEG,
    AND,
    NAND,
    OR,
    NOR,
    XOR,
    IFF,
    NIF,
    NIF_CON,
    IF_CON,
    IF,
)

# Connectives dropped by ConnectiveRegistry.use_minimal_connectives()
NON_MINIMAL_CONNECTIVES = (NAND, NOR, XOR, NIF, IF_CON, NIF_CON)

TRUE_LITERALS = ("T", "⊤", "1")

FALSE_LITERALS = ("F", "⊥", "0")

# Sub-column depth meaning "every level"
ALL_LEVELS = -1
