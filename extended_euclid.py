"""
GCD using the extended Euclidean algorithm.

Finds the coefficients x and y of Bezout's identity:

    gcd(a, b) = a * x + b * y

Division is truncating and arithmetic wraps to signed 64 bits (see int64.py),
so the gcd keeps the sign the descent leaves it with; it is not normalized.

The same algorithm gives the modular multiplicative inverse (MMI): if
(A * B) % M == 1 then B is MMI(A, M), and the x coefficient of
extended_euclid(A, M) provides B.
"""

from typing import NamedTuple

from int64 import INT64_MAX, multiply, subtract, to_int64, trunc_div, trunc_mod


class EuclidResult(NamedTuple):
    gcd: int
    x: int  # coefficient of a
    y: int  # coefficient of b


def extended_euclid_recursive(a: int, b: int):
    """
    Recursive extended Euclid.

    Applies gcd(a, b) = gcd(b, a mod b) until b reaches 0, where gcd = a,
    x = 1 and y = 0. On the way back up the coefficients are rebuilt with

        x = y1
        y = x1 - (a / b) * y1

    Args:
        a (int): First number
        b (int): Second number

    Returns:
        EuclidResult: (gcd, x, y) with a*x + b*y == gcd
    """
    a, b = to_int64(a), to_int64(b)
    if b == 0:
        return EuclidResult(a, 1, 0)

    gcd, x1, y1 = extended_euclid_recursive(b, trunc_mod(a, b))
    return EuclidResult(gcd, y1, subtract(x1, multiply(trunc_div(a, b), y1)))


def extended_euclid_iterative(a: int, b: int):
    """
    Iterative extended Euclid.

    Performs the same steps as the recursive version as a loop. Alongside
    (a, b) -> (b, a - q*b) it keeps two coefficient pairs (x0, y0) and
    (x1, y1) that are shifted with the same quotient q. When b reaches 0,
    (x0, y0) are the Bezout coefficients.

    Args:
        a (int): First number
        b (int): Second number

    Returns:
        EuclidResult: (gcd, x, y) with a*x + b*y == gcd
    """
    a, b = to_int64(a), to_int64(b)
    x0, y0, x1, y1 = 1, 0, 0, 1

    while b != 0:
        q = trunc_div(a, b)
        a, b = b, subtract(a, multiply(q, b))
        x0, x1 = x1, subtract(x0, multiply(q, x1))
        y0, y1 = y1, subtract(y0, multiply(q, y1))

    return EuclidResult(a, x0, y0)


def mod_inverse(a, m):
    """Modular inverse of a modulo m, in the range [0, m)."""
    if m <= 0:
        raise ValueError("Modulus must be positive")
    if m > INT64_MAX:
        raise ValueError("Modulus must fit in a signed 64-bit integer")
    gcd, x, _ = extended_euclid_iterative(a % m, m)
    if gcd != 1:
        raise ValueError("No modular inverse: a and m are not coprime")
    return x % m
