"""Core modules for euclid-gcd.

Primary modules:
- euclid: Euclidean algorithm (gcd, gcd_steps, lcm, are_coprime)
- GcdCalculator: Config-aware facade used by the CLI
- types: Type definitions (GcdResult, EuclidStep, errors)
"""

from euclid_gcd.core.calculator import GcdCalculator
from euclid_gcd.core.config import GcdConfig
from euclid_gcd.core.euclid import are_coprime, gcd, gcd_steps, lcm
from euclid_gcd.core.parser import parse_int, parse_pair
from euclid_gcd.core.types import (
    DegenerateInputError,
    EuclidStep,
    GcdResult,
    InputParseError,
)

__all__ = [
    # Types
    "DegenerateInputError",
    "EuclidStep",
    "GcdResult",
    "InputParseError",
    # Functions
    "are_coprime",
    "gcd",
    "gcd_steps",
    "lcm",
    "parse_int",
    "parse_pair",
    # Primary modules
    "GcdCalculator",
    "GcdConfig",
]
