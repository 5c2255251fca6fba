"""
Fixed-width signed 64-bit integer helpers.

Python integers never overflow, so every operation here computes the exact
result and then folds it back into a 64-bit two's complement register, the
same way a native ``long long`` would wrap around.
"""

INT64_BITS = 64
INT64_MASK = (1 << INT64_BITS) - 1   # 0xFFFFFFFFFFFFFFFF
INT64_SIGN_BIT = 1 << (INT64_BITS - 1)
INT64_MIN = -INT64_SIGN_BIT
INT64_MAX = INT64_SIGN_BIT - 1


def to_int64(value):
    """Wrap an arbitrary integer into the signed 64-bit range."""
    value &= INT64_MASK
    if value & INT64_SIGN_BIT:
        value -= 1 << INT64_BITS  # Two's complement representation
    return value


def is_int64(value):
    """Check whether value fits in a signed 64-bit register without wrapping."""
    return INT64_MIN <= value <= INT64_MAX


def multiply(a, b):
    return to_int64(a * b)


def subtract(a, b):
    return to_int64(a - b)


def trunc_div(a, b):
    """
    Integer division rounding toward zero.

    Python's ``//`` rounds toward negative infinity; this matches the C
    behaviour instead, e.g. ``trunc_div(-7, 2) == -3``.

    Raises:
        ZeroDivisionError: if b is zero
    """
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return to_int64(q)


def trunc_mod(a, b):
    """Remainder of trunc_div, carrying the sign of the dividend."""
    return subtract(a, multiply(b, trunc_div(a, b)))
