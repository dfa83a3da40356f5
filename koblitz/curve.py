#!/usr/bin/env python3

# Copyright (C) 2017-2022 The koblitz developers
#
# This file is part of koblitz. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of koblitz including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve class.

Curve is the cyclic subgroup of prime order n
generated by G on a Koblitz curve y^2 = x^3 + b over Fp.

For the named SEC 2 Koblitz curves see the koblitz.curves module.
"""

from dataclasses import dataclass
from typing import Optional

from koblitz.alias import Integer, Octets, Point
from koblitz.curve_group import HEX_THRESHOLD, CurveGroup, mult_double_and_add
from koblitz.exceptions import KoblitzValueError
from koblitz.number_theory import mod_sqrt
from koblitz.sec_point import bytes_from_point, point_from_octets
from koblitz.utils import hex_string, int_from_integer


@dataclass(frozen=True)
class CurveParams:
    """Domain parameters of a Koblitz curve.

    p: field prime, n: order of the generator,
    b: curve coefficient, (gx, gy): generator,
    bit_size: bit length of the field prime.
    """

    p: int
    n: int
    b: int
    gx: int
    gy: int
    bit_size: int


class Curve(CurveGroup):
    "Prime order subgroup of the points of a Koblitz curve over Fp."

    def __init__(
        self,
        p: Integer,
        b: Integer,
        G: Point,
        n: Integer,
        bit_size: Optional[int] = None,
    ) -> None:

        super().__init__(p, b)

        # 2. check that xG and yG are integers in the interval [0, p−1]
        # 4. Check that yG^2 = xG^3 + b (mod p)
        if len(G) != 2:
            raise KoblitzValueError("Generator must a be a sequence[int, int]")
        self.G = (int_from_integer(G[0]), int_from_integer(G[1]))
        if not all(0 <= c < self.p for c in self.G):
            raise KoblitzValueError("Generator coordinates not in 0..p-1")
        if not self.is_on_curve(self.G):
            raise KoblitzValueError("Generator is not on the curve")

        self.bit_size = self.p.bit_length() if bit_size is None else bit_size
        if self.bit_size < self.p.bit_length():
            err_msg = f"bit_size too small: {self.bit_size} "
            err_msg += f"instead of {self.p.bit_length()}"
            raise KoblitzValueError(err_msg)
        # coordinates are encoded on ceil(bit_size / 8) bytes
        self.p_size = (self.bit_size + 7) // 8

        # 5. Check that n is prime.
        n = int_from_integer(n)
        if n < 3 or n % 2 == 0 or pow(2, n - 1, n) != 1:
            err_msg = "n is not prime: "
            err_msg += f"{hex_string(n)}" if n > HEX_THRESHOLD else f"{n}"
            raise KoblitzValueError(err_msg)
        self.n = n

        # 7. Check that nG = INF
        n_bytes = n.to_bytes((n.bit_length() + 7) // 8, byteorder="big")
        if mult_double_and_add(n_bytes, self.G, self) is not None:
            err_msg = "n is not the group order: "
            err_msg += f"{hex_string(n)}" if n > HEX_THRESHOLD else f"{n}"
            raise KoblitzValueError(err_msg)

        # 8. Check that n ≠ p
        if n == self.p:
            raise KoblitzValueError(f"n=p weak curve: {hex_string(n)}")

    def __str__(self) -> str:
        result = super().__str__()
        if self.p > HEX_THRESHOLD:
            result += f"\n x_G = {hex_string(self.G[0])}"
            result += f"\n y_G = {hex_string(self.G[1])}"
            result += f"\n n   = {hex_string(self.n)}"
        else:
            result += f"\n x_G = {self.G[0]}"
            result += f"\n y_G = {self.G[1]}"
            result += f"\n n   = {self.n}"
        return result

    def __repr__(self) -> str:
        result = super().__repr__()[:-1]
        if self.p > HEX_THRESHOLD:
            result += f", ('{hex_string(self.G[0])}', '{hex_string(self.G[1])}')"
            result += f", '{hex_string(self.n)}'"
        else:
            result += f", ({self.G[0]}, {self.G[1]}), {self.n}"
        result += ")"
        return result

    def parameters(self) -> CurveParams:
        "Return the domain parameters, for generic curve-consuming code."
        return CurveParams(
            p=self.p,
            n=self.n,
            b=self.b,
            gx=self.G[0],
            gy=self.G[1],
            bit_size=self.bit_size,
        )

    def scalar_mult(self, Q: Point, k: Octets) -> Optional[Point]:
        """Return k*Q, with k in big-endian form.

        None is returned when the result is the infinity point
        (e.g. when k is zero or empty).
        """
        return mult_double_and_add(k, Q, self)

    def scalar_base_mult(self, k: Octets) -> Optional[Point]:
        "Return k*G, with k in big-endian form."
        return mult_double_and_add(k, self.G, self)

    def compress_point(self, Q: Point) -> bytes:
        return bytes_from_point(Q, self, compressed=True)

    def decompress_point(self, octets: Octets) -> Point:
        return point_from_octets(octets, self)

    def sqrt(self, a: int) -> int:
        "Return a square root of a (mod p), zero if there is none."
        return mod_sqrt(a, self.p)
