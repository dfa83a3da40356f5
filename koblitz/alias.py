#!/usr/bin/env python3

# Copyright (C) 2017-2022 The koblitz developers
#
# This file is part of koblitz. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of koblitz including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Tuple, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "deadbeef"
# "dead beef"
# "02 79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
#
# use koblitz.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for scalars (big-endian)
# and for compressed/uncompressed point encodings
Octets = Union[bytes, str]

# hex-string or bytes representation of an int
Integer = Union[bytes, str, int]

# Elliptic curve point in affine coordinates.
# Warning: to make Point a NamedTuple would slow down the code
#
# The point at infinity has no affine representation:
# operations whose result would be the infinity point return None instead.
Point = Tuple[int, int]

# Elliptic curve point in Jacobian coordinates:
# (X, Y, Z) represents the affine point (X/Z^2, Y/Z^3).
# Z == 1 for an affine point lifted to Jacobian coordinates,
# Z == 0 only for the infinity point, which cannot be converted back.
JacPoint = Tuple[int, int, int]
