# connectives/exceptions.py
# This file is part of Proptab - A Propositional Truth Table Toolkit
#
# Exceptions raised by connective definitions and registry mutations

"""Configuration errors for the connective registry.

Raised synchronously by the call that attempted the invalid mutation, never
deferred to parse time.
"""


class ConfigurationError(ValueError):
    """Exception raised when a connective or a registry mutation is invalid.

    Covers missing connectives, malformed symbols, alias collisions between
    two connectives, unknown connectives on removal and attempts to mutate a
    registry while a parse is using it.
    """

    pass
