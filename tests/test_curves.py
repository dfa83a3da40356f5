#!/usr/bin/env python3

# Copyright (C) 2017-2022 The koblitz developers
#
# This file is part of koblitz. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of koblitz including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `koblitz.curves` module."

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List

import pytest

from koblitz.curve import Curve
from koblitz.curves import CURVES, SEC2_KOBLITZ, CurveRegistry, s160, s192, s224, s256

low_card_definitions = {
    "ec13_19": ("0d", "02", ("01", "09"), "13", 4),
    "ec19_13": ("13", "02", ("04", "10"), "0d", 5),
}


def test_accessors() -> None:
    for accessor, ec_name, bit_size in (
        (s160, "secp160k1", 160),
        (s192, "secp192k1", 192),
        (s224, "secp224k1", 224),
        (s256, "secp256k1", 256),
    ):
        ec = accessor()
        assert ec is accessor()
        assert ec is CURVES[ec_name]
        assert ec.bit_size == bit_size
        assert ec.p.bit_length() == bit_size
        assert ec.p_size == bit_size // 8
        assert ec.b in (3, 5, 7)
        assert ec.is_on_curve(ec.G)


def test_accessors_with_registry() -> None:
    registry = CurveRegistry()
    ec = s256(registry)
    assert ec is registry["secp256k1"]
    assert ec is not s256()
    assert ec.parameters() == s256().parameters()


def test_sec2_parameters() -> None:
    params = s256().parameters()
    assert params.p == 2 ** 256 - 2 ** 32 - 977
    assert params.n == 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
    assert params.b == 7
    assert params.gx == 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
    assert params.gy == 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8
    assert params.gy & 1 == 0
    assert params.bit_size == 256

    params = s224().parameters()
    assert params.p == 2 ** 224 - 2 ** 32 - 6803
    assert params.n == 0x010000000000000000000000000001DCE8D2EC6184CAF0A971769FB1F7
    assert params.b == 5

    params = s192().parameters()
    assert params.p == 2 ** 192 - 2 ** 32 - 4553
    assert params.n == 0xFFFFFFFFFFFFFFFFFFFFFFFE26F2FC170F69466A74DEFD8D
    assert params.b == 3

    params = s160().parameters()
    assert params.p == 2 ** 160 - 2 ** 32 - 21389
    assert params.n == 0x0100000000000000000001B8FA16DFAB9ACA16B6B3
    assert params.b == 7


def test_mapping() -> None:
    assert len(CURVES) == 4
    assert list(CURVES) == list(SEC2_KOBLITZ)
    assert "secp256k1" in CURVES
    assert "secp256r1" not in CURVES
    assert CURVES.get("secp256r1") is None
    with pytest.raises(KeyError):
        CURVES["secp256r1"]  # pylint: disable=pointless-statement

    registry = CurveRegistry(low_card_definitions)
    assert len(registry) == 2
    ec = registry["ec13_19"]
    assert (ec.p, ec.b, ec.G, ec.n) == (13, 2, (1, 9), 19)
    assert ec.bit_size == 4


def test_lazy_initialization() -> None:
    registry = CurveRegistry(low_card_definitions)
    # keys are available without building any curve
    assert "ec13_19" in registry
    assert registry._curves is None  # pylint: disable=protected-access
    registry["ec19_13"]  # pylint: disable=pointless-statement
    assert registry._curves is not None  # pylint: disable=protected-access


def test_concurrent_initialization(monkeypatch: pytest.MonkeyPatch) -> None:
    registry = CurveRegistry(low_card_definitions)
    real_build = registry._build  # pylint: disable=protected-access
    calls: List[str] = []

    def slow_build() -> Dict[str, Curve]:
        calls.append(threading.current_thread().name)
        # widen the race window
        time.sleep(0.05)
        return real_build()

    monkeypatch.setattr(registry, "_build", slow_build)

    barrier = threading.Barrier(8)

    def lookup(_: int) -> Curve:
        barrier.wait()
        return registry["ec13_19"]

    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(lookup, range(8)))

    assert len(calls) == 1
    assert all(ec is results[0] for ec in results)
    assert results[0].is_on_curve(results[0].G)


def test_initialization_log(caplog: pytest.LogCaptureFixture) -> None:
    registry = CurveRegistry(low_card_definitions)
    with caplog.at_level(logging.DEBUG, logger="koblitz.curves"):
        registry["ec13_19"]  # pylint: disable=pointless-statement
        registry["ec19_13"]  # pylint: disable=pointless-statement
    records = [r for r in caplog.records if r.name == "koblitz.curves"]
    assert len(records) == 1
    assert "curve registry initialized: ec13_19, ec19_13" in records[0].getMessage()
