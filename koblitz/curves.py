#!/usr/bin/env python3

# Copyright (C) 2017-2022 The koblitz developers
#
# This file is part of koblitz. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of koblitz including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""SEC 2 Koblitz curves.

* SEC 2 v.1 curves
  http://www.secg.org/SEC2-Ver-1.0.pdf

The curve table of a registry is built at first access, once,
even when several threads race for it;
afterwards the curves are read-only and freely shared.
"""

import logging
import threading
from collections.abc import Mapping
from typing import Dict, Iterator, Optional, Tuple

from koblitz.curve import Curve

_LOGGER = logging.getLogger(__name__)

# name: (p, b, (x_G, y_G), n, bit_size)
CurveDefinition = Tuple[str, str, Tuple[str, str], str, int]

SEC2_KOBLITZ: Dict[str, CurveDefinition] = {
    # SEC 2 v.1 section 2.4.1
    "secp160k1": (
        "FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFE FFFFAC73",
        "00000000 00000000 00000000 00000000 00000007",
        (
            "3B4C382C E37AA192 A4019E76 3036F4F5 DD4D7EBB",
            "938CF935 318FDCED 6BC28286 531733C3 F03C4FEE",
        ),
        "01 00000000 00000000 0001B8FA 16DFAB9A CA16B6B3",
        160,
    ),
    # SEC 2 v.1 section 2.5.1
    "secp192k1": (
        "FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFE FFFFEE37",
        "00000000 00000000 00000000 00000000 00000000 00000003",
        (
            "DB4FF10E C057E9AE 26B07D02 80B7F434 1DA5D1B1 EAE06C7D",
            "9B2F2F6D 9C5628A7 844163D0 15BE8634 4082AA88 D95E2F9D",
        ),
        "FFFFFFFF FFFFFFFF FFFFFFFE 26F2FC17 0F69466A 74DEFD8D",
        192,
    ),
    # SEC 2 v.1 section 2.6.1
    "secp224k1": (
        "FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFE FFFFE56D",
        "00000000 00000000 00000000 00000000 00000000 00000000 00000005",
        (
            "A1455B33 4DF099DF 30FC28A1 69A467E9 E47075A9 0F7E650E B6B7A45C",
            "7E089FED 7FBA3442 82CAFBD6 F7E319F7 C0B0BD59 E2CA4BDB 556D61A5",
        ),
        "01 00000000 00000000 00000000 0001DCE8 D2EC6184 CAF0A971 769FB1F7",
        224,
    ),
    # SEC 2 v.1 section 2.7.1
    "secp256k1": (
        "FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFE FFFFFC2F",
        "00000000 00000000 00000000 00000000 00000000 00000000 00000000 00000007",
        (
            "79BE667E F9DCBBAC 55A06295 CE870B07 029BFCDB 2DCE28D9 59F2815B 16F81798",
            "483ADA77 26A3C465 5DA4FBFC 0E1108A8 FD17B448 A6855419 9C47D08F FB10D4B8",
        ),
        "FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFE BAAEDCE6 AF48A03B BFD25E8C D0364141",
        256,
    ),
}


class CurveRegistry(Mapping):
    """Read-only mapping of curve names to Curve instances.

    Curves are built lazily, all together, at the first lookup.
    """

    def __init__(self, definitions: Optional[Dict[str, CurveDefinition]] = None) -> None:
        self._definitions = dict(SEC2_KOBLITZ if definitions is None else definitions)
        self._curves: Optional[Dict[str, Curve]] = None
        self._lock = threading.Lock()

    def _build(self) -> Dict[str, Curve]:
        curves: Dict[str, Curve] = {}
        for ec_name, (p, b, G, n, bit_size) in self._definitions.items():
            curves[ec_name] = Curve(p, b, G, n, bit_size)
        _LOGGER.debug("curve registry initialized: %s", ", ".join(curves))
        return curves

    @property
    def curves(self) -> Dict[str, Curve]:
        # double-checked locking: the lock is only taken until initialized
        if self._curves is None:
            with self._lock:
                if self._curves is None:
                    self._curves = self._build()
        return self._curves

    def __getitem__(self, ec_name: str) -> Curve:
        return self.curves[ec_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, ec_name: object) -> bool:
        return ec_name in self._definitions


# process-wide default registry
CURVES = CurveRegistry()


def s160(registry: CurveRegistry = CURVES) -> Curve:
    "Return secp160k1 (SEC 2 v.1 section 2.4.1)."
    return registry["secp160k1"]


def s192(registry: CurveRegistry = CURVES) -> Curve:
    "Return secp192k1 (SEC 2 v.1 section 2.5.1)."
    return registry["secp192k1"]


def s224(registry: CurveRegistry = CURVES) -> Curve:
    "Return secp224k1 (SEC 2 v.1 section 2.6.1)."
    return registry["secp224k1"]


def s256(registry: CurveRegistry = CURVES) -> Curve:
    "Return secp256k1 (SEC 2 v.1 section 2.7.1)."
    return registry["secp256k1"]
