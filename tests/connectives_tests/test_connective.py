# tests/connectives_tests/test_connective.py
# This file is part of Proptab - A Propositional Truth Table Toolkit
#
# Test suite for connective construction, truth signatures and validation

"""Test suite for single connectives.

Covers the truth signature of every default connective, the symmetric
relations used for structural comparison, and rejection of malformed
definitions.
"""

import pytest
from connectives import Arity, Connective, ConfigurationError, defaults
from utils.logger import get_logger

T, F = True, False


class TestConnectiveSignatures:
    """Truth signatures of the default connectives in table order."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    # Test cases: (connective, expected possible_truths)
    SIGNATURE_CASES = [
        (defaults.NEG, (F, T)),
        (defaults.AND, (T, F, F, F)),
        (defaults.NAND, (F, T, T, T)),
        (defaults.OR, (T, T, T, F)),
        (defaults.NOR, (F, F, F, T)),
        (defaults.XOR, (F, T, T, F)),
        (defaults.IF, (T, F, T, T)),
        (defaults.NIF, (F, T, F, F)),
        (defaults.IF_CON, (T, T, F, T)),
        (defaults.NIF_CON, (F, F, T, F)),
        (defaults.IFF, (T, F, F, T)),
    ]

    @pytest.mark.parametrize("connective, expected", SIGNATURE_CASES)
    def test_possible_truths(self, connective, expected):
        self.logger.debug(f"Signature of {connective!r}")
        assert connective.possible_truths == expected

    @pytest.mark.parametrize(
        "connective, commutative",
        [
            (defaults.AND, True),
            (defaults.OR, True),
            (defaults.NAND, True),
            (defaults.XOR, True),
            (defaults.IFF, True),
            (defaults.IF, False),
            (defaults.NIF, False),
        ],
    )
    def test_commutativity(self, connective, commutative):
        assert connective.is_commutative is commutative

    def test_converse_pairs(self):
        assert defaults.IF.is_converse_of(defaults.IF_CON)
        assert defaults.IF_CON.is_converse_of(defaults.IF)
        assert defaults.NIF.is_converse_of(defaults.NIF_CON)
        assert not defaults.IF.is_converse_of(defaults.IF)
        assert not defaults.NEG.is_converse_of(defaults.NEG)

    def test_compute_checks_operand_count(self):
        assert defaults.AND.compute(True, True) is True
        assert defaults.NEG.compute(False) is True
        with pytest.raises(ValueError):
            defaults.AND.compute(True)
        with pytest.raises(ValueError):
            defaults.NEG.compute(True, False)

    def test_same_semantics_by_signature(self):
        star = Connective.binary(lambda left, right: left and right, "*", 40)
        assert star.same_semantics(defaults.AND)
        assert not star.same_semantics(defaults.OR)

    def test_copy_is_independent(self):
        copy = defaults.IF.copy()
        copy.right_associative = False
        assert defaults.IF.right_associative is True
        assert copy.symbol == "→"
        assert copy.aliases == defaults.IF.aliases
        assert copy.arity is Arity.BINARY


class TestConnectiveValidation:
    """Malformed connective definitions raise ConfigurationError."""

    INVALID_DEFINITIONS = [
        # (symbol, precedence, aliases, description)
        ("", 20, (), "Empty official symbol"),
        ("->", 20, (), "Multi-character official symbol"),
        ("a", 20, (), "Alphanumeric official symbol"),
        ("(", 20, (), "Parenthesis as official symbol"),
        ("⊗", 60, (), "Precedence at the not-a-connective sentinel"),
        ("⊗", 70, (), "Precedence reserved for atoms"),
        ("⊗", 20, ("o",), "Alphanumeric alias"),
        ("⊗", 20, ("x x",), "Alias containing whitespace"),
        ("⊗", 20, ("⊗",), "Alias repeating the official symbol"),
    ]

    @pytest.mark.parametrize("symbol, precedence, aliases, description", INVALID_DEFINITIONS)
    def test_invalid_definition(self, symbol, precedence, aliases, description):
        with pytest.raises(ConfigurationError):
            Connective.binary(lambda left, right: left, symbol, precedence, *aliases)

    def test_missing_function(self):
        with pytest.raises(ConfigurationError):
            Connective.unary(None, "¬", 50)

    def test_duplicate_aliases_collapse(self):
        con = Connective.binary(lambda left, right: left, "⊗", 20, "**", "**")
        assert con.aliases == ("**",)
