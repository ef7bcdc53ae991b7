# tests/syntax_tests/test_precedence.py
# This file is part of Proptab - A Propositional Truth Table Toolkit
#
# Test suite for parser precedence, associativity and reconfiguration

"""Test suite for operator precedence and associativity.

Default precedence (loosest to tightest):
1. ↔
2. → ↛ ← ↚
3. ∨ ↓ ⊕
4. ∧ ↑
5. ¬ (prefix, always binds its immediate operand)

Every level is right-associative until reconfigured.
"""

import pytest
from connectives import Connective, ConfigurationError
from syntax import FormulaParser, FormulaSyntaxError, parse
from utils.logger import get_logger


class TestDefaultPrecedence:
    """Canonical strings show the grouping chosen by the parser."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    # Test cases: (input formula, expected canonical string)
    PRECEDENCE_TEST_CASES = [
        # Conjunction binds tighter than disjunction
        ("P∧Q∨R", "((P∧Q)∨R)"),
        ("P∨Q∧R", "(P∨(Q∧R))"),
        ("P∨¬Q∧R", "(P∨((¬Q)∧R))"),
        # Conditional and biconditional
        ("P↔Q→R", "(P↔(Q→R))"),
        ("P→Q↔R", "((P→Q)↔R)"),
        ("P -> Q <-> ~Q -> ~P", "((P→Q)↔((¬Q)→(¬P)))"),
        # Right-associative defaults
        ("P→Q→P", "(P→(Q→P))"),
        ("P∧Q∧R", "(P∧(Q∧R))"),
        ("P∧Q↑R", "(P∧(Q↑R))"),
        ("P→Q←R", "(P→(Q←R))"),
        # Unary prefixes
        ("¬P∧Q", "((¬P)∧Q)"),
        ("¬(P∧Q)", "(¬(P∧Q))"),
        ("¬¬P", "(¬(¬P))"),
        ("¬¬(P∨Q)→R", "((¬(¬(P∨Q)))→R)"),
        # Parentheses override precedence
        ("(P∨Q)∧R", "((P∨Q)∧R)"),
        ("[P → Q] & {Q → P}", "((P→Q)∧(Q→P))"),
        ("((P))", "P"),
    ]

    @pytest.mark.parametrize("formula, expected", PRECEDENCE_TEST_CASES)
    def test_precedence(self, formula, expected):
        tree = parse(formula)
        self.logger.debug(f"{formula} -> {tree.canonical_string()}")
        assert tree.canonical_string() == expected

    def test_right_associative_equivalence(self):
        assert parse("P→Q→P").structure_equals(parse("P→(Q→P)"))
        assert not parse("P→Q→P").structure_equals(parse("(P→Q)→P"))


class TestReconfiguredGrammar:
    """Associativity flips, precedence changes and removed connectives."""

    def setup_method(self):
        self.parser = FormulaParser()
        self.logger = get_logger()

    # Test cases: (formula, expected canonical string) with precedence 20 left-associative
    LEFT_ASSOCIATIVE_CASES = [
        ("P→Q→P", "((P→Q)→P)"),
        ("P→Q→R→S", "(((P→Q)→R)→S)"),
        ("P→Q←R", "((P→Q)←R)"),
        ("P∧Q∧R", "(P∧(Q∧R))"),
    ]

    @pytest.mark.parametrize("formula, expected", LEFT_ASSOCIATIVE_CASES)
    def test_left_associative_level(self, formula, expected):
        self.parser.set_associativity(20, False)
        assert self.parser.parse(formula).canonical_string() == expected

    def test_left_associative_equivalence(self):
        self.parser.set_associativity(20, False)
        assert self.parser.parse("P→Q→P").structure_equals(self.parser.parse("(P→Q)→P"))

    def test_associativity_flip_back(self):
        self.parser.set_associativity(40, False)
        assert self.parser.parse("P∧Q∧R∨S").canonical_string() == "(((P∧Q)∧R)∨S)"
        self.parser.set_associativity(40, True)
        assert self.parser.parse("P∧Q∧R∨S").canonical_string() == "((P∧(Q∧R))∨S)"

    def test_parsers_do_not_share_configuration(self):
        other = FormulaParser()
        self.parser.set_associativity(20, False)
        assert other.parse("P→Q→P").canonical_string() == "(P→(Q→P))"

    def test_reassigned_precedence(self):
        loose_and = Connective.binary(lambda left, right: left and right, "∧", 5, "&")
        self.parser.set_connectives(loose_and)
        assert self.parser.parse("P∧Q↔R").canonical_string() == "(P∧(Q↔R))"
        assert self.parser.parse("P & Q").canonical_string() == "(P∧Q)"

    def test_custom_binary_connective(self):
        proj = Connective.binary(lambda left, right: left, "⊗", 25, "**")
        self.parser.set_connectives(proj)
        assert self.parser.parse("P ** Q ∨ R").canonical_string() == "(P⊗(Q∨R))"

    def test_custom_unary_connective(self):
        ident = Connective.unary(lambda value: value, "#", 50)
        self.parser.set_connectives(ident)
        assert self.parser.parse("#P∧Q").canonical_string() == "((#P)∧Q)"

    def test_replace_connective(self):
        arrow = Connective.binary(lambda left, right: not left or right, "⊃", 20, "=>")
        self.parser.replace_connective("→", arrow)
        assert self.parser.parse("P => Q").canonical_string() == "(P⊃Q)"
        with pytest.raises(FormulaSyntaxError):
            self.parser.parse("P→Q")

    def test_removed_connective_is_unrecognized(self):
        self.parser.remove_connectives("⊕")
        with pytest.raises(FormulaSyntaxError) as exc_info:
            self.parser.parse("P⊕Q")
        assert exc_info.value.reason == 'Unrecognized character "⊕"'
        assert exc_info.value.index == 1

    def test_minimal_connectives(self):
        self.parser.use_minimal_connectives()
        assert self.parser.parse("P∧Q→R").canonical_string() == "((P∧Q)→R)"
        with pytest.raises(FormulaSyntaxError):
            self.parser.parse("P↑Q")

    def test_remove_unknown_connective(self):
        with pytest.raises(ConfigurationError):
            self.parser.remove_connectives("⊗")

    def test_methods_chain(self):
        parser = FormulaParser().use_minimal_connectives().set_associativity(20, False)
        assert parser.parse("P→Q→R").canonical_string() == "((P→Q)→R)"
