"""Euclid GCD - greatest common divisor via the Euclidean algorithm."""

from euclid_gcd.core.euclid import are_coprime, gcd, gcd_steps, lcm
from euclid_gcd.core.types import (
    DegenerateInputError,
    EuclidStep,
    GcdResult,
    InputParseError,
)

__version__ = "0.1.0"

__all__ = [
    "DegenerateInputError",
    "EuclidStep",
    "GcdResult",
    "InputParseError",
    "are_coprime",
    "gcd",
    "gcd_steps",
    "lcm",
]
