# tests/semantics_tests/test_validity.py
# This file is part of Proptab - A Propositional Truth Table Toolkit
#
# Test suite for semantic entailment through the corresponding conditional

"""Test suite for entails and corresponding_conditional."""

import pytest
from connectives import Connective, ConfigurationError
from semantics import corresponding_conditional, entails
from syntax import FormulaParser, FormulaSyntaxError


class TestEntailment:
    """Classic valid and invalid argument forms."""

    def setup_method(self):
        """Initialize a default parser for each test method."""
        self.parser = FormulaParser()

    # Test cases: (premises, conclusion, valid)
    ARGUMENT_CASES = [
        (["P→Q", "P"], "Q", True),  # modus ponens
        (["P→Q", "¬Q"], "¬P", True),  # modus tollens
        (["P∨Q", "¬P"], "Q", True),  # disjunctive syllogism
        (["P→Q", "Q→R"], "P→R", True),  # hypothetical syllogism
        (["P→Q", "Q"], "P", False),  # affirming the consequent
        (["P→Q", "¬P"], "¬Q", False),  # denying the antecedent
        (["P", "¬P"], "Q", True),  # explosion
        ([], "P∨¬P", True),
        ([], "P", False),
    ]

    @pytest.mark.parametrize("premises, conclusion, valid", ARGUMENT_CASES)
    def test_entails(self, premises, conclusion, valid):
        assert entails(self.parser, premises, conclusion) is valid

    def test_corresponding_conditional(self):
        formula = corresponding_conditional(self.parser, ["P -> Q", "P"], "Q")
        assert formula == "(((P→Q))∧(P))→(Q)"

    def test_no_premises_tests_conclusion(self):
        assert corresponding_conditional(self.parser, [], "P & Q") == "(P∧Q)"

    def test_uses_registered_symbols(self):
        self.parser.replace_connective(
            "∧", Connective.binary(lambda left, right: left and right, "⊗", 40)
        )
        formula = corresponding_conditional(self.parser, ["P", "Q"], "P")
        assert formula == "((P)⊗(Q))→(P)"
        assert entails(self.parser, ["P", "Q"], "P")

    def test_missing_conditional(self):
        self.parser.remove_connectives("→")
        with pytest.raises(ConfigurationError):
            entails(self.parser, ["P"], "P")

    def test_malformed_premise(self):
        with pytest.raises(FormulaSyntaxError):
            entails(self.parser, ["P∧"], "P")
