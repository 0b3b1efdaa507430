#!/usr/bin/env python3

# Copyright (C) 2022 The pdalib developers
#
# This file is part of pdalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of pdalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Ed25519 curve membership.

Account public keys are points of the twisted Edwards curve

    -x^2 + y^2 = 1 + d x^2 y^2  (mod p)

with p = 2^255 - 19 and d = -121665/121666,
serialized according to RFC 8032, section 5.1.2:
the 32-byte little-endian encoding of y,
with the most significant bit carrying the sign (parity) of x.

https://datatracker.ietf.org/doc/html/rfc8032

Only point decoding is provided here:
a 32-byte string is on curve if it decodes to a curve point,
i.e. if (y^2 - 1) / (d y^2 + 1) is a square modulo p.
As in the reference decompression, non-canonical y values
(p <= y < 2^255) are reduced modulo p instead of being rejected,
and the sign bit is not checked against x = 0.
"""

from typing import Tuple

from pdalib.alias import Octets, Point
from pdalib.exceptions import PDAlibValueError
from pdalib.number_theory import legendre_symbol, mod_inv, mod_sqrt
from pdalib.utils import bytes_from_octets, hex_string

P = 2**255 - 19
D = -121665 * mod_inv(121666, P) % P
# a square root of -1
SQRT_M1 = pow(2, (P - 1) // 4, P)

# base point
G: Point = (
    15112221349535400772501151409588531511454012693041857206046113283949847762202,
    46316835694926478169428394003475163141307993866256225615783033603165251855960,
)

# encoded point size
P_SIZE = 32


def is_on_curve_point(Q: Point) -> bool:
    "Return True if the affine point Q satisfies the curve equation."

    x, y = Q
    if not (0 <= x < P and 0 <= y < P):
        return False
    x2 = x * x % P
    y2 = y * y % P
    return (y2 - x2 - 1 - D * x2 * y2) % P == 0


def _x2_from_y(y: int) -> int:
    # x^2 = (y^2 - 1) / (d y^2 + 1)
    # d is not a square, so the denominator is never zero
    y2 = y * y % P
    return (y2 - 1) * mod_inv(D * y2 + 1, P) % P


def x_from_y(y: int, sign: int = 0) -> int:
    """Return the x-coordinate of the point with the given y-coordinate.

    sign selects between the two roots: 0 for the even one, 1 for the odd.
    """

    if not 0 <= y < P:
        raise PDAlibValueError(f"y-coordinate not in 0..p-1: {y}")
    try:
        x = mod_sqrt(_x2_from_y(y), P)
    except PDAlibValueError as e:
        msg = f"invalid y-coordinate: '{hex_string(y)}'"
        raise PDAlibValueError(msg) from e
    return x if x & 1 == sign else (P - x) % P


def _y_and_sign(pub_key: Octets) -> Tuple[int, int]:
    pub_key = bytes_from_octets(pub_key, P_SIZE)
    i = int.from_bytes(pub_key, byteorder="little", signed=False)
    return (i & ((1 << 255) - 1)) % P, i >> 255


def point_from_octets(pub_key: Octets) -> Point:
    """Return a tuple (x_Q, y_Q) that belongs to the curve.

    Decoding is according to RFC 8032, section 5.1.3,
    with non-canonical y-coordinates reduced modulo p.
    """

    y, sign = _y_and_sign(pub_key)
    return x_from_y(y, sign), y


def is_on_curve(pub_key: Octets) -> bool:
    """Return True if the 32 bytes decode to an Ed25519 curve point.

    Equivalent to a successful point_from_octets,
    but it takes a single modular exponentiation.
    """

    y, _ = _y_and_sign(pub_key)
    return legendre_symbol(_x2_from_y(y), P) != -1
