"""
Example usage of binary exponentiation and the extended Euclidean algorithm.
Prints the recursive and iterative results side by side for a few inputs.
"""

from binary_exponent import binary_exponent_iterative, binary_exponent_recursive
from extended_euclid import extended_euclid_iterative, extended_euclid_recursive, mod_inverse


def main():
    print("Binary Exponentiation")
    print("=" * 55)

    # (base, exponent, expected)
    power_cases = [
        (2, 10, 1024),
        (3, 7, 2187),
        (4, 12, 16777216),
        (5, 15, 30517578125),
        (6, 20, 3656158440062976),
    ]

    for i, (base, exponent, expected) in enumerate(power_cases):
        print(f"Test {i}")
        print(f"Input: base = {base} and exponent = {exponent}")
        print(f"Expected:  {expected}")
        print(f"Recursive: {binary_exponent_recursive(base, exponent)}")
        print(f"Iterative: {binary_exponent_iterative(base, exponent)}")
        print()

    # 2^63 does not fit in a signed 64-bit integer
    print("Overflow: 2^63 wraps to", binary_exponent_iterative(2, 63))
    print()

    print("Extended Euclid")
    print("=" * 55)

    euclid_cases = [(30, 20), (101, 23), (55, 34)]

    for i, (a, b) in enumerate(euclid_cases):
        print(f"Test {i}")
        print(f"Input: a = {a} and b = {b}")
        for label, extended_gcd in (("Recursive", extended_euclid_recursive),
                                    ("Iterative", extended_euclid_iterative)):
            gcd, x, y = extended_gcd(a, b)
            print(f"{label} => gcd: {gcd}  x: {x}  y: {y}")
        print()

    # Example: modular multiplicative inverse
    print("Modular Inverse")
    print("-" * 30)
    a, m = 101, 23
    inv = mod_inverse(a, m)
    print(f"MMI({a}, {m}) = {inv}")
    print(f"Check: ({a} * {inv}) % {m} = {(a * inv) % m}")


if __name__ == "__main__":
    main()
