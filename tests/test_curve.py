#!/usr/bin/env python3

# Copyright (C) 2017-2022 The koblitz developers
#
# This file is part of koblitz. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of koblitz including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `koblitz.curve` module."

import dataclasses
import secrets
from typing import Dict

import pytest

from koblitz.curve import Curve, CurveParams
from koblitz.curves import CURVES
from koblitz.exceptions import KoblitzValueError

# test curves: very low cardinality
low_card_curves: Dict[str, Curve] = {}
# 13 % 4 = 1
low_card_curves["ec13_19"] = Curve(13, 2, (1, 9), 19)
# 19 % 4 = 3
low_card_curves["ec19_13"] = Curve(19, 2, (4, 16), 13)

all_curves: Dict[str, Curve] = {}
all_curves.update(low_card_curves)
all_curves.update(CURVES)


def _scalar(k: int, ec: Curve) -> bytes:
    return k.to_bytes((ec.n.bit_length() + 7) // 8, byteorder="big")


def test_exceptions() -> None:

    # good curve
    Curve(13, 2, (1, 9), 19)

    with pytest.raises(KoblitzValueError, match="p is not prime: "):
        Curve(15, 2, (1, 9), 19)

    with pytest.raises(KoblitzValueError, match="negative b: "):
        Curve(13, -2, (1, 9), 19)

    with pytest.raises(KoblitzValueError, match="p <= b: "):
        Curve(13, 13, (1, 9), 19)

    with pytest.raises(KoblitzValueError, match="zero discriminant"):
        Curve(13, 0, (1, 9), 19)

    err_msg = "Generator must a be a sequence\\[int, int\\]"
    with pytest.raises(KoblitzValueError, match=err_msg):
        Curve(13, 2, (1, 9, 1), 19)  # type: ignore

    with pytest.raises(KoblitzValueError, match="Generator coordinates not in 0..p-1"):
        Curve(13, 2, (14, 9), 19)

    with pytest.raises(KoblitzValueError, match="Generator is not on the curve"):
        Curve(13, 2, (2, 9), 19)

    with pytest.raises(KoblitzValueError, match="bit_size too small: "):
        Curve(13, 2, (1, 9), 19, 3)

    with pytest.raises(KoblitzValueError, match="n is not prime: "):
        Curve(13, 2, (1, 9), 20)

    with pytest.raises(KoblitzValueError, match="n is not the group order: "):
        Curve(13, 2, (1, 9), 17)


def test_str_repr() -> None:
    ec = low_card_curves["ec13_19"]
    assert repr(ec) == "Curve(13, 2, (1, 9), 19)"
    expected = "Curve\n p   = 13\n a   = 0\n b   = 2\n x_G = 1\n y_G = 9\n n   = 19"
    assert str(ec) == expected

    ec = CURVES["secp256k1"]
    assert "x_G = 79BE667E F9DCBBAC" in str(ec)
    assert "n   = FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFE" in str(ec)
    assert repr(ec).endswith("'FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFE BAAEDCE6 AF48A03B BFD25E8C D0364141')")


def test_parameters() -> None:
    for ec in all_curves.values():
        params = ec.parameters()
        assert isinstance(params, CurveParams)
        assert params.p == ec.p
        assert params.n == ec.n
        assert params.b == ec.b
        assert (params.gx, params.gy) == ec.G
        assert params.bit_size == ec.bit_size
        assert params == ec.parameters()
        assert params.gy * params.gy % params.p == (params.gx ** 3 + params.b) % params.p

        with pytest.raises(dataclasses.FrozenInstanceError):
            params.p = 5  # type: ignore


def test_bit_size() -> None:
    ec = Curve(13, 2, (1, 9), 19)
    assert ec.bit_size == 4
    assert ec.p_size == 1

    ec = Curve(13, 2, (1, 9), 19, 16)
    assert ec.bit_size == 16
    assert ec.p_size == 2


def test_generator_on_curve() -> None:
    for ec in all_curves.values():
        assert ec.is_on_curve(ec.G)


def test_scalar_base_mult() -> None:
    for ec in all_curves.values():
        assert ec.scalar_base_mult(b"") is None
        assert ec.scalar_base_mult(_scalar(0, ec)) is None
        assert ec.scalar_base_mult(_scalar(1, ec)) == ec.G
        assert ec.scalar_base_mult(_scalar(2, ec)) == ec.double(ec.G)
        assert ec.scalar_base_mult(_scalar(ec.n - 1, ec)) == ec.negate(ec.G)
        assert ec.scalar_base_mult(_scalar(ec.n, ec)) is None

        k = 1 + secrets.randbelow(ec.n - 1)
        assert ec.scalar_base_mult(_scalar(k, ec)) == ec.scalar_mult(ec.G, _scalar(k, ec))
        assert ec.scalar_base_mult(_scalar(k, ec).hex()) == ec.scalar_mult(ec.G, _scalar(k, ec))


def test_scalar_mult_homomorphism() -> None:
    for ec in all_curves.values():
        for _ in range(4):
            k1 = 1 + secrets.randbelow(ec.n - 1)
            k2 = 1 + secrets.randbelow(ec.n - 1)
            Q1 = ec.scalar_base_mult(_scalar(k1, ec))
            Q2 = ec.scalar_base_mult(_scalar(k2, ec))
            assert Q1 is not None
            assert Q2 is not None
            Q = ec.scalar_base_mult(_scalar((k1 + k2) % ec.n, ec))
            # None on both sides if k1 + k2 = 0 (mod n)
            assert Q == ec.add(Q1, Q2)


def test_scalar_mult_of_points() -> None:
    for ec in all_curves.values():
        k1 = 1 + secrets.randbelow(ec.n - 1)
        k2 = 1 + secrets.randbelow(ec.n - 1)
        Q1 = ec.scalar_base_mult(_scalar(k1, ec))
        assert Q1 is not None
        # k2 * (k1 * G) = (k1 * k2) * G
        Q = ec.scalar_mult(Q1, _scalar(k2, ec))
        assert Q == ec.scalar_base_mult(_scalar(k1 * k2 % ec.n, ec))
        assert ec.scalar_mult(Q1, b"\x00") is None


def test_sqrt() -> None:
    for ec in all_curves.values():
        y2 = (ec.G[0] ** 3 + ec.b) % ec.p
        assert ec.sqrt(y2) in (ec.G[1], ec.p - ec.G[1])
        assert ec.sqrt(0) == 0

    ec = CURVES["secp256k1"]
    # p = 3 (mod 4), so -1 is not a quadratic residue
    assert ec.sqrt(ec.p - 1) == 0


def test_compress_decompress() -> None:
    for ec in all_curves.values():
        k = 1 + secrets.randbelow(ec.n - 1)
        Q = ec.scalar_base_mult(_scalar(k, ec))
        assert Q is not None
        Q_bytes = ec.compress_point(Q)
        assert len(Q_bytes) == 1 + (ec.bit_size + 7) // 8
        assert Q_bytes[0] == (0x03 if Q[1] & 1 else 0x02)
        assert ec.decompress_point(Q_bytes) == Q
        assert ec.decompress_point(Q_bytes.hex()) == Q
