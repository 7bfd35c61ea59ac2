"""Core type definitions for euclid-gcd."""

from __future__ import annotations

from pydantic import BaseModel, Field


class InputParseError(ValueError):
    """Raised when input text does not hold two integers."""


class DegenerateInputError(ValueError):
    """Raised when gcd(0, 0) is requested and zero pairs are disallowed."""


class EuclidStep(BaseModel):
    """One iteration of the Euclidean loop.

    Holds the pair before reassignment and the remainder computed from it.
    """

    a: int
    b: int
    remainder: int

    def __str__(self) -> str:
        """Format the step as ``a rem b = r``."""
        return f"{self.a} rem {self.b} = {self.remainder}"


class GcdResult(BaseModel):
    """Result of a GCD computation."""

    a: int
    b: int
    result: int
    steps: list[EuclidStep] = Field(default_factory=list)

    @property
    def iterations(self) -> int:
        """Number of loop iterations performed."""
        return len(self.steps)

    def __str__(self) -> str:
        """Format the result the way the CLI prints it."""
        return str(self.result)
