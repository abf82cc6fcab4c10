"""Exceptions raised by rkz."""

from __future__ import annotations


class RKZError(Exception):
    """Base class for all rkz errors."""


class CompositionError(RKZError, ValueError):
    """Invalid gas specification (syntax, fractions)."""


class SubstanceNotFoundError(CompositionError, LookupError):
    """The requested substance id is not in the registry."""

    def __init__(self, substance_id: str):
        super().__init__(f"substance not referenced: {substance_id}")
        self.substance_id = substance_id


class RangeError(RKZError, ValueError):
    """A number or a start:stop[:step] range could not be parsed."""


class NoRootFoundError(RKZError, ArithmeticError):
    """The cubic equation of state has no real root."""


class EosError(RKZError, ValueError):
    """Unknown equation of state name."""
