#!/usr/bin/env python3

# Copyright (C) 2017-2022 The koblitz developers
#
# This file is part of koblitz. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of koblitz including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic CurveGroup class and functions.

CurveGroup is the group of the points of a Koblitz curve y^2 = x^3 + b
over Fp, i.e. a short Weierstrass curve with a = 0.
For the cyclic subgroup of prime order generated by G,
see the koblitz.curve module.

Arithmetic is performed in Jacobian coordinates: for an affine point (x, y)
the Jacobian coordinates are (X, Y, Z) with x = X/Z^2 and y = Y/Z^3.
Even for a single addition or doubling it is faster to apply
and reverse the transform than to operate in affine coordinates.
Formulae are from the Explicit-Formulas Database:
https://hyperelliptic.org/EFD/g1p/auto-shortw-jacobian-0.html

The point at infinity has no affine representation.
The Jacobian formulae do not handle it either:
they are meant for points of the prime order subgroup,
with scalars reduced mod n.
"""

from math import ceil
from typing import Optional

from koblitz.alias import Integer, JacPoint, Octets, Point
from koblitz.exceptions import KoblitzTypeError, KoblitzValueError, PointNotOnCurveError
from koblitz.number_theory import mod_inv, mod_sqrt
from koblitz.utils import bytes_from_octets, hex_string, int_from_integer

HEX_THRESHOLD = 0xFFFFFFFF


def jac_from_aff(Q: Point) -> JacPoint:
    """Return the Jacobian representation of the affine point.

    The input point is assumed to be on curve.
    """
    return Q[0], Q[1], 1


class CurveGroup:
    """Finite group of the points of a Koblitz elliptic curve over Fp.

    The elliptic curve is the set of points (x, y)
    that are solutions to the equation y^2 = x^3 + b,
    with x, y, and b in Fp (p being a prime).
    The constant b must satisfy 27 b^2 ≠ 0.
    """

    def __init__(self, p: Integer, b: Integer) -> None:
        # Parameters are checked according to SEC 1 v.2 3.1.1.2.1

        p = int_from_integer(p)
        b = int_from_integer(b)

        # 1) check that p is a prime
        # Fermat test will do as _probabilistic_ primality test...
        if p < 3 or p % 2 == 0 or pow(2, p - 1, p) != 1:
            err_msg = "p is not prime: "
            err_msg += f"'{hex_string(p)}'" if p > HEX_THRESHOLD else f"{p}"
            raise KoblitzValueError(err_msg)

        # byte-length
        self.p_size = ceil(p.bit_length() / 8)
        self.p_is_3_mod_4 = p % 4 == 3
        self.p = p

        # 2. check that b is an integer in the interval [0, p−1]
        if b < 0:
            raise KoblitzValueError(f"negative b: {b}")
        if p <= b:
            err_msg = "p <= b: " + (
                f"'{hex_string(p)}' <= '{hex_string(b)}'"
                if p > HEX_THRESHOLD
                else f"{p} <= {b}"
            )
            raise KoblitzValueError(err_msg)

        # 3. Check that 4*a^3 + 27*b^2 ≠ 0 (mod p), with a = 0
        if 27 * b * b % p == 0:
            raise KoblitzValueError("zero discriminant")
        self._b = b

    def __str__(self) -> str:
        result = "Curve"
        if self.p > HEX_THRESHOLD:
            result += f"\n p   = {hex_string(self.p)}"
        else:
            result += f"\n p   = {self.p}"
        result += "\n a   = 0"
        if self._b > HEX_THRESHOLD:
            result += f"\n b   = {hex_string(self._b)}"
        else:
            result += f"\n b   = {self._b}"
        return result

    def __repr__(self) -> str:
        result = "Curve("
        result += f"'{hex_string(self.p)}'" if self.p > HEX_THRESHOLD else f"{self.p}"
        if self._b > HEX_THRESHOLD:
            result += f", '{hex_string(self._b)}'"
        else:
            result += f", {self._b}"
        result += ")"
        return result

    @property
    def b(self) -> int:
        return self._b

    def negate(self, Q: Point) -> Point:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        if len(Q) == 2:
            return Q[0], (self.p - Q[1]) % self.p
        raise KoblitzTypeError("not a point")

    def aff_from_jac(self, Q: JacPoint) -> Point:
        """Return the affine point of the Jacobian coordinates.

        The input point is assumed to be on curve.
        """
        if Q[2] % self.p == 0:
            raise KoblitzValueError("infinity point has no affine representation")

        z_inv = mod_inv(Q[2], self.p)
        z_inv2 = z_inv * z_inv
        x = Q[0] * z_inv2 % self.p
        y = Q[1] * z_inv2 * z_inv % self.p
        return x, y

    def add_jac(self, Q: JacPoint, R: JacPoint) -> JacPoint:
        """Return the sum of two Jacobian points (add-2007-bl).

        The formula is not defined for equal or opposite points
        (it yields Z = 0 in both cases): doubling must go through
        double_jac and opposite points must not be added.
        """
        # points are assumed to be on curve
        p = self.p

        QZ2 = Q[2] * Q[2] % p
        RZ2 = R[2] * R[2] % p

        U1 = Q[0] * RZ2 % p
        U2 = R[0] * QZ2 % p
        H = (U2 - U1) % p
        I = (2 * H) ** 2
        J = H * I

        S1 = Q[1] * R[2] * RZ2 % p
        S2 = R[1] * Q[2] * QZ2 % p
        r = 2 * ((S2 - S1) % p)
        V = U1 * I

        X = (r * r - J - 2 * V) % p
        Y = (r * (V - X) - 2 * S1 * J) % p
        Z = (((Q[2] + R[2]) ** 2 - QZ2 - RZ2) % p) * H % p
        return X, Y, Z

    def double_jac(self, Q: JacPoint) -> JacPoint:
        "Return the double of a Jacobian point (dbl-2009-l)."
        # point is assumed to be on curve
        p = self.p

        A = Q[0] * Q[0]
        B = Q[1] * Q[1]
        C = B * B
        D = 2 * ((Q[0] + B) ** 2 - A - C)
        E = 3 * A
        F = E * E

        X = (F - 2 * D) % p
        Y = (E * (D - X) - 8 * C) % p
        Z = 2 * Q[1] * Q[2] % p
        return X, Y, Z

    def add(self, Q1: Point, Q2: Point) -> Optional[Point]:
        """Return the sum of two points.

        The input points are assumed to be on the curve.
        Equal points are doubled;
        None is returned for opposite points,
        as their sum is the infinity point.
        """
        if Q1[0] % self.p == Q2[0] % self.p:
            if Q1[1] % self.p == Q2[1] % self.p:
                return self.double(Q1)
            return None
        return self.aff_from_jac(self.add_jac(jac_from_aff(Q1), jac_from_aff(Q2)))

    def double(self, Q: Point) -> Point:
        """Return the double of a point.

        The input point is assumed to be on the curve.
        """
        return self.aff_from_jac(self.double_jac(jac_from_aff(Q)))

    def _y2(self, x: int) -> int:
        # skipping a crucial check here:
        # if sqrt(y*y) does not exist, then x is not valid.
        # This is a good reason to keep this method private
        return (x * x * x + self._b) % self.p

    def y(self, x: int) -> int:
        """Return the y coordinate from x, as in (x, y).

        Either y or p - y is returned,
        without any criterion to choose between the two.
        """
        if not 0 <= x < self.p:
            err_msg = "x-coordinate not in 0..p-1: "
            err_msg += f"'{hex_string(x)}'" if x > HEX_THRESHOLD else f"{x}"
            raise PointNotOnCurveError(err_msg)
        y2 = self._y2(x)
        root = mod_sqrt(y2, self.p)
        if root == 0 and y2 != 0:
            err_msg = "invalid x-coordinate: "
            err_msg += f"'{hex_string(x)}'" if x > HEX_THRESHOLD else f"{x}"
            raise PointNotOnCurveError(err_msg)
        return root

    def is_on_curve(self, Q: Point) -> bool:
        "Return True if the point is on the curve."
        if len(Q) != 2:
            raise KoblitzTypeError("point must be a tuple[int, int]")
        return self._y2(Q[0]) == Q[1] * Q[1] % self.p

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise PointNotOnCurveError(f"point not on curve: {Q}")


def mult_double_and_add(k: Octets, Q: Point, ec: CurveGroup) -> Optional[Point]:
    """Scalar multiplication of a curve point.

    This implementation uses
    'double & add' algorithm,
    'left-to-right' binary decomposition of the k coefficient,
    provided as big-endian octets of arbitrary length,
    Jacobian coordinates.
    It is not constant-time.

    As the infinity point has no affine representation,
    the running result is initialized with Q itself
    and the first set bit of k just selects it.
    None is returned if k has no set bits (k = 0)
    or if the result is the infinity point.

    The input point is assumed to be on curve and
    the k coefficient is assumed to have been reduced mod n
    (the order of Q).
    """

    k = bytes_from_octets(k)

    QJ = jac_from_aff(Q)
    R: Optional[JacPoint] = None
    for byte in k:
        for bit in range(7, -1, -1):
            if R is not None:
                R = ec.double_jac(R)
            if (byte >> bit) & 1:
                R = QJ if R is None else ec.add_jac(QJ, R)

    if R is None or R[2] == 0:
        return None
    return ec.aff_from_jac(R)
