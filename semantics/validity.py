# semantics/validity.py
# This file is part of Proptab - A Propositional Truth Table Toolkit
#
# Semantic entailment check through the corresponding conditional

"""Semantic validity of an argument.

Premises ``p1 … pn`` entail a conclusion ``c`` exactly when the corresponding
conditional ``((p1)∧…∧(pn))→(c)`` is a tautology. The conjunction and
conditional are whichever registered connectives have the truth signatures of
∧ and →, so an argument can be checked under any symbol set that still has
them. With no premises the conclusion itself must be a tautology.
"""

from typing import Sequence

from connectives.connective import Connective
from connectives.exceptions import ConfigurationError
from syntax.grammar import FormulaParser
from utils.logger import get_logger

CONJUNCTION_TRUTHS = (True, False, False, False)
CONDITIONAL_TRUTHS = (True, False, True, True)


def _binary_by_truths(parser: FormulaParser, truths, name: str) -> Connective:
    connective = parser.registry.find_by_truths(truths)
    if connective is None or not connective.is_binary:
        raise ConfigurationError(f"No {name} connective is registered")
    return connective


def corresponding_conditional(
    parser: FormulaParser, premises: Sequence[str], conclusion: str
) -> str:
    """Formula text stating that the premises imply the conclusion.

    Each premise and the conclusion is parsed first, so a malformed one is
    reported with positions in its own text rather than in the combined
    formula.

    Raises:
        FormulaSyntaxError: A premise or the conclusion is malformed
        ConfigurationError: The registry lacks a conjunction or a conditional
    """
    conclusion_text = parser.parse(conclusion).canonical_string()
    premise_texts = [parser.parse(premise).canonical_string() for premise in premises]

    if not premise_texts:
        return conclusion_text

    conjunction = _binary_by_truths(parser, CONJUNCTION_TRUTHS, "conjunction")
    conditional = _binary_by_truths(parser, CONDITIONAL_TRUTHS, "conditional")

    antecedent = conjunction.symbol.join(f"({text})" for text in premise_texts)
    return f"({antecedent}){conditional.symbol}({conclusion_text})"


def entails(parser: FormulaParser, premises: Sequence[str], conclusion: str) -> bool:
    """True if no row makes every premise true and the conclusion false."""
    formula = corresponding_conditional(parser, premises, conclusion)
    valid = parser.parse(formula).is_tautology()
    get_logger().debug(f"Entailment {formula}: {'valid' if valid else 'invalid'}")
    return valid
