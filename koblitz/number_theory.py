#!/usr/bin/env python3

# Copyright (C) 2017-2022 The koblitz developers
#
# This file is part of koblitz. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of koblitz including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Number theory and modular arithmetic functions.

The modular square root follows the Tonelli-Shanks algorithm as described
in "Square roots from 1; 24, 51, 10 to Dan Shanks" by Ezra Brown, see also
https://eli.thegreenplace.net/2009/03/07/computing-modular-square-roots-in-python

Unlike the rest of the package, mod_sqrt and tonelli do not raise
when the square root does not exist: they return zero,
which is a valid root only when a = 0 (mod p).
"""

from typing import Tuple

from koblitz.exceptions import KoblitzValueError
from koblitz.utils import hex_string

HEX_THRESHOLD = 0xFFFFFFFF


def _int_repr(i: int) -> str:
    return f"'{hex_string(i)}'" if i > HEX_THRESHOLD else f"{i}"


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) such that a*x + b*y = g = gcd(x, y).

    based on Extended Euclidean Algorithm, see
    https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
    """

    x0, x1, y0, y1 = 0, 1, 1, 0
    while a != 0:
        q, b, a = b // a, a, b % a
        y0, y1 = y1, y0 - q * y1
        x0, x1 = x1, x0 - q * x1
    return b, x0, y0


def mod_inv(a: int, m: int) -> int:
    "Return the inverse of a (mod m). m does not have to be a prime."

    a %= m
    g, x, _ = xgcd(a, m)
    if g == 1:
        return x % m
    raise KoblitzValueError(f"No inverse for {_int_repr(a)} mod {_int_repr(m)}")


def legendre_symbol(a: int, p: int) -> int:
    """Compute the Legendre symbol a|p using Euler's criterion.

    p is an odd prime.
    It returns 0 if p divides a, 1 if a is a quadratic residue modulo p,
    -1 if it is a quadratic non-residue.
    """

    if a % p == 0:
        return 0
    ls = pow(a, (p - 1) // 2, p)
    return -1 if ls == p - 1 else 1


def mod_sqrt(a: int, p: int) -> int:
    """Return a square root of a (mod p); p must be a prime.

    Solve the equation:
        x^2 = a mod p

    and return x. Note that p - x is also a root.

    If a is a quadratic non-residue, zero is returned:
    the caller must not mistake it for the root of a = 0.
    The simple solution a^((p+1)/4) is used when p = 3 (mod 4),
    otherwise the Tonelli-Shanks algorithm.
    """

    a %= p
    if a == 0 or p == 2:
        return a
    if legendre_symbol(a, p) != 1:
        return 0

    if p % 4 == 3:  # all the Koblitz curves of SEC 2 but secp224k1
        return pow(a, (p + 1) // 4, p)

    return tonelli(a, p)


def tonelli(a: int, p: int) -> int:
    """Return a square root of a (mod p) using Tonelli-Shanks.

    p must be an odd prime. It works for any such p,
    even if mod_sqrt would take a faster path.
    Zero is returned when no root exists.
    """

    a %= p
    if a == 0:
        return 0
    if legendre_symbol(a, p) != 1:
        return 0

    # Partition p-1 to s * 2^e for an odd s
    s, e = p - 1, 0
    while s % 2 == 0:
        s //= 2
        e += 1

    # Find the smallest n with legendre symbol n|p = -1
    n = 2
    while legendre_symbol(n, p) != -1:
        n += 1

    # x is a guess of the square root that gets better with each iteration
    x = pow(a, (s + 1) // 2, p)
    # b is the "fudge factor": by how much the guess is off.
    # x^2 = a*b (mod p) holds throughout the loop
    b = pow(a, s, p)
    # successive powers of n, used to update both x and b
    g = pow(n, s, p)
    # the exponent, decreasing with each update
    r = e

    while True:
        t = b
        m = 0
        while m < r:
            if t == 1:
                break
            t = t * t % p
            m += 1

        if m == 0:
            return x

        gs = pow(g, 2 ** (r - m - 1), p)
        g = gs * gs % p
        x = x * gs % p
        b = b * g % p
        r = m
