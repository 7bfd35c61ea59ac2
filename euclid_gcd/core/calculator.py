"""Config-aware entry point for GCD computations."""

from __future__ import annotations

import logging

from euclid_gcd.core.config import GcdConfig
from euclid_gcd.core.euclid import gcd_steps
from euclid_gcd.core.parser import parse_pair
from euclid_gcd.core.types import DegenerateInputError, GcdResult

logger = logging.getLogger(__name__)


class GcdCalculator:
    """Computes greatest common divisors under a GcdConfig."""

    def __init__(self, config: GcdConfig | None = None) -> None:
        """
        Initialize the calculator.

        Args:
            config: Configuration (defaults to GcdConfig())
        """
        self.config = config or GcdConfig()

    def compute(self, a: int, b: int) -> GcdResult:
        """
        Compute gcd(a, b) with the iteration trace.

        Raises:
            DegenerateInputError: If both inputs are zero and the config
                disallows the zero pair
        """
        if a == 0 and b == 0 and not self.config.allow_zero_pair:
            raise DegenerateInputError("gcd(0, 0) is undefined")

        result = gcd_steps(a, b)
        logger.debug(
            "gcd(%d, %d) = %d after %d iteration(s)",
            a, b, result.result, result.iterations,
        )
        return result

    def compute_text(self, text: str) -> GcdResult:
        """Parse two integers from text and compute their GCD."""
        a, b = parse_pair(text)
        return self.compute(a, b)
