"""Parsing of integer input for the GCD driver."""

from __future__ import annotations

import logging
import re

from euclid_gcd.core.types import InputParseError

logger = logging.getLogger(__name__)

# Optional sign followed by ASCII digits; rejects "1.5", "1_000", "0x10"
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int(token: str) -> int:
    """
    Parse a single decimal integer token.

    Args:
        token: Text of the token, without surrounding whitespace

    Returns:
        The parsed integer

    Raises:
        InputParseError: If the token is not a decimal integer, or has more
            digits than the interpreter converts from a string (4300 by
            default, see sys.set_int_max_str_digits)
    """
    if not _INT_PATTERN.fullmatch(token):
        raise InputParseError(f"not an integer: {token!r}")
    try:
        return int(token)
    except ValueError as e:
        digits = len(token.lstrip("+-"))
        raise InputParseError(f"integer too large: {digits} digits") from e


def parse_pair(text: str) -> tuple[int, int]:
    """
    Parse two whitespace-separated integers from text.

    Tokens after the second one are ignored.

    Args:
        text: Raw input, typically all of standard input

    Returns:
        Tuple of (a, b)

    Raises:
        InputParseError: If fewer than two tokens are present or either
            of the first two is not an integer
    """
    parts = text.split()
    if len(parts) < 2:
        raise InputParseError(
            f"expected two integers separated by whitespace, got {len(parts)} token(s)"
        )

    if len(parts) > 2:
        logger.debug("Ignoring %d trailing token(s)", len(parts) - 2)

    return parse_int(parts[0]), parse_int(parts[1])
