"""
Exception types for the emissions engine.

ValidationError is raised at the input boundary (form / JSON / CLI
parsing) and its message is shown to the user verbatim. DomainError
guards the calculator against arithmetic on physically invalid inputs
that slipped past validation.
"""


class EmissionsError(Exception):
    """Base class for all emissions engine errors."""


class ValidationError(EmissionsError, ValueError):
    """Invalid or missing user input. Computation does not proceed."""


class DomainError(EmissionsError, ArithmeticError):
    """A resolved parameter is outside the domain of the model."""
