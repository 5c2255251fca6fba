"""
Binary exponentiation (exponentiation by squaring).

Computes base^exponent with O(log(exponent)) multiplications by walking the
binary representation of the exponent instead of multiplying exponent times.

Example, 10 in base 2 is 1010:

    2^10 = 2^8 * 2^2
    2^1 = 2
    2^2 = (2^1)^2 = 4
    2^4 = (2^2)^2 = 16
    2^8 = (2^4)^2 = 256

so only 2^8 and 2^2 are multiplied into the result; 2^1 and 2^4 are skipped.

All arithmetic is signed 64-bit and wraps on overflow, see int64.py.
"""

from int64 import multiply, to_int64


def _check_exponent(exponent):
    if exponent < 0:
        raise ValueError("exponent must be non-negative")


def binary_exponent_recursive(base: int, exponent: int):
    """
    Recursive binary exponentiation.

    Each call halves the exponent, so the recursion depth is
    O(log(exponent)).

    Args:
        base (int): Base value
        exponent (int): Non-negative exponent

    Returns:
        int: base^exponent wrapped to signed 64 bits

    Raises:
        ValueError: if exponent is negative
    """
    base, exponent = to_int64(base), to_int64(exponent)
    _check_exponent(exponent)

    if exponent == 0:
        return 1
    half = binary_exponent_recursive(base, exponent // 2)
    if exponent % 2:
        return multiply(multiply(half, half), base)
    else:
        return multiply(half, half)


def binary_exponent_iterative(base: int, exponent: int):
    """
    Iterative binary exponentiation, scanning the exponent from the LSB.

    Args:
        base (int): Base value
        exponent (int): Non-negative exponent

    Returns:
        int: base^exponent wrapped to signed 64 bits

    Raises:
        ValueError: if exponent is negative
    """
    base, exponent = to_int64(base), to_int64(exponent)
    _check_exponent(exponent)

    res = 1
    while exponent > 0:
        if exponent & 1:
            res = multiply(res, base)
        base = multiply(base, base)
        exponent >>= 1
    return res
