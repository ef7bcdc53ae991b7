# connectives/__init__.py
# This file is part of Proptab - A Propositional Truth Table Toolkit
#
# Connective definitions and the runtime-configurable connective registry

"""Connectives and the registry that lexer and parser consult.

Core Components:
    Connective: symbol set, arity, precedence, associativity and truth function
    ConnectiveRegistry: owned, cloneable set of connectives plus literal symbols
    ConfigurationError: raised by invalid connective definitions or mutations

Example:
    >>> from connectives import ConnectiveRegistry, defaults
    >>> registry = ConnectiveRegistry().remove(defaults.XOR).set_associativity(20, False)
    >>> registry.normalize("P <-> Q")
    'P↔Q'
"""

from . import defaults
from .connective import Arity, Connective, PRECEDENCE_DEFAULT, PRECEDENCE_HIGHEST
from .exceptions import ConfigurationError
from .registry import ConnectiveRegistry

__all__ = [
    "Arity",
    "Connective",
    "ConnectiveRegistry",
    "ConfigurationError",
    "PRECEDENCE_DEFAULT",
    "PRECEDENCE_HIGHEST",
    "defaults",
]
