"""Exception hierarchy for the (a,b)-tree."""

from __future__ import annotations


class ABTreeError(Exception):
    """Base exception for all (a,b)-tree errors."""
    pass


class InvalidParameters(ABTreeError, ValueError):
    """Raised when the branching factors violate 2 <= a <= b/2."""

    def __init__(self, a: int, b: int) -> None:
        super().__init__(f"Require 2 <= a <= b/2, got a={a}, b={b}")
        self.a = a
        self.b = b


class InvariantViolation(ABTreeError):
    """Raised by ABTree.validate() when a structural invariant does not hold."""
    pass
