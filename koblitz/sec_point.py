#!/usr/bin/env python3

# Copyright (C) 2017-2022 The koblitz developers
#
# This file is part of koblitz. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of koblitz including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""SEC compressed/uncompressed point representation.

See SEC 1 v.2, sections 2.3.3 and 2.3.4:
compressed points are 0x02 (even y) or 0x03 (odd y) followed by
the x-coordinate, uncompressed points are 0x04 followed by
both coordinates; coordinates are big-endian, ec.p_size bytes each.
"""

from koblitz.alias import Octets, Point
from koblitz.curve_group import CurveGroup
from koblitz.exceptions import (
    InvalidEncodingError,
    InvalidLengthError,
    PointNotOnCurveError,
)
from koblitz.utils import bytes_from_octets


def bytes_from_point(Q: Point, ec: CurveGroup, compressed: bool = True) -> bytes:
    """Return a point as compressed/uncompressed octet sequence.

    The x-coordinate is left-padded to ec.p_size bytes,
    so that the encoding has always the same length.
    The input point is assumed to be on the curve.
    """

    bytes_ = Q[0].to_bytes(ec.p_size, byteorder="big", signed=False)
    if compressed:
        return (b"\x03" if (Q[1] & 1) else b"\x02") + bytes_

    return b"\x04" + bytes_ + Q[1].to_bytes(ec.p_size, byteorder="big", signed=False)


def point_from_octets(pub_key: Octets, ec: CurveGroup) -> Point:
    """Return a tuple (x_Q, y_Q) that belongs to the curve.

    Both compressed and uncompressed representations are accepted.
    """

    pub_key = bytes_from_octets(pub_key)
    if not pub_key:
        raise InvalidEncodingError("not a point: empty octets")

    if pub_key[0] == 0x04:
        return point_from_uncompressed(pub_key, ec)
    if pub_key[0] not in (0x02, 0x03):
        raise InvalidEncodingError(f"not a point: invalid prefix {pub_key[0]:#04x}")

    bsize = len(pub_key)
    if bsize != ec.p_size + 1:
        err_msg = "invalid size for compressed point: "
        err_msg += f"{bsize} instead of {ec.p_size + 1}"
        raise InvalidLengthError(err_msg)

    x_Q = int.from_bytes(pub_key[1:], byteorder="big", signed=False)
    # also check x_Q validity
    y_Q = ec.y(x_Q)
    if y_Q & 1 != pub_key[0] & 1:
        y_Q = ec.p - y_Q
    return x_Q, y_Q


def point_from_uncompressed(pub_key: Octets, ec: CurveGroup) -> Point:
    "Return the curve point from its 0x04 uncompressed representation."

    pub_key = bytes_from_octets(pub_key)
    if not pub_key or pub_key[0] != 0x04:
        raise InvalidEncodingError("not an uncompressed point")

    bsize = len(pub_key)
    if bsize != 2 * ec.p_size + 1:
        err_msg = "invalid size for uncompressed point: "
        err_msg += f"{bsize} instead of {2 * ec.p_size + 1}"
        raise InvalidLengthError(err_msg)

    x_Q = int.from_bytes(pub_key[1 : ec.p_size + 1], byteorder="big", signed=False)
    y_Q = int.from_bytes(pub_key[ec.p_size + 1 :], byteorder="big", signed=False)
    if x_Q >= ec.p or y_Q >= ec.p:
        raise PointNotOnCurveError(f"coordinates not in 0..p-1: {(x_Q, y_Q)}")
    Q = x_Q, y_Q
    if not ec.is_on_curve(Q):
        raise PointNotOnCurveError(f"point not on curve: {Q}")
    return Q
