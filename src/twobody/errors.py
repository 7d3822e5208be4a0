"""Exceptions raised by twobody."""


class DomainError(ValueError):
    """An input lies outside the physical domain of a formula.

    Raised for zero or negative distances, negative gravitational
    parameters and negative masses. Subclasses ``ValueError`` so callers
    that already guard against invalid arguments keep working.
    """
