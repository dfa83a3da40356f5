#!/usr/bin/env python3

# Copyright (C) 2017-2022 The koblitz developers
#
# This file is part of koblitz. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of koblitz including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

KoblitzValueError and KoblitzTypeError are only meant to dicriminate
between Exceptions being raised by koblitz from those raised by other
codebase: users are usually better off just dealing with the regular
ValueError and TypeError from which they are derived.

The point decoding errors are the only ones a caller is expected
to handle, as they signal malformed input rather than misuse.
"""


class KoblitzValueError(ValueError):
    pass


class KoblitzTypeError(TypeError):
    pass


class InvalidEncodingError(KoblitzValueError):
    "Unrecognized point encoding tag byte."


class InvalidLengthError(KoblitzValueError):
    "Encoded point length does not match the curve size."


class PointNotOnCurveError(KoblitzValueError):
    "The decoded coordinates do not identify a curve point."
