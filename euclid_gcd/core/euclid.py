"""Euclidean algorithm and the helpers built on it.

Provides: gcd, gcd_steps, lcm, are_coprime
"""

from __future__ import annotations

from collections.abc import Iterator

from euclid_gcd.core.types import EuclidStep, GcdResult


def _check_int(name: str, value: object) -> None:
    # bool is an int subclass but never a meaningful operand here
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got: {type(value).__name__}")


def trunc_rem(a: int, b: int) -> int:
    """Remainder of ``a / b`` truncated toward zero.

    The sign follows the dividend, unlike Python's ``%`` which follows the
    divisor.

    Raises:
        ZeroDivisionError: If b is zero
    """
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def _iterate(a: int, b: int) -> Iterator[tuple[int, int, int]]:
    """Yield (a, b, a rem b) for each iteration of the Euclidean loop."""
    while b != 0:
        c = trunc_rem(a, b)
        yield a, b, c
        a, b = b, c


def gcd(a: int, b: int) -> int:
    """
    Return the greatest common divisor of a and b.

    Iterative Euclid: while b is nonzero, replace (a, b) with (b, a rem b).
    The result is always nonnegative, and gcd(0, 0) is 0.

    Args:
        a: First integer
        b: Second integer

    Returns:
        Nonnegative greatest common divisor

    Raises:
        TypeError: If either argument is not an int
    """
    _check_int("a", a)
    _check_int("b", b)

    for _, b_before, _ in _iterate(a, b):
        a = b_before

    return abs(a)


def gcd_steps(a: int, b: int) -> GcdResult:
    """
    Run the Euclidean loop and record every iteration.

    Args:
        a: First integer
        b: Second integer

    Returns:
        GcdResult with the original inputs, the result and the steps taken
    """
    _check_int("a", a)
    _check_int("b", b)

    steps = [EuclidStep(a=x, b=y, remainder=c) for x, y, c in _iterate(a, b)]
    # after the last step the pair is (b, 0), so b holds the result
    last = steps[-1].b if steps else a

    return GcdResult(a=a, b=b, result=abs(last), steps=steps)


def lcm(a: int, b: int) -> int:
    """Return the nonnegative least common multiple of a and b (0 if either is 0)."""
    d = gcd(a, b)
    if d == 0:
        return 0
    return abs(a // d * b)


def are_coprime(a: int, b: int) -> bool:
    """Check whether a and b are coprime (greatest common divisor is 1)."""
    return gcd(a, b) == 1
