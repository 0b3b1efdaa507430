#!/usr/bin/env python3

# Copyright (C) 2022 The pdalib developers
#
# This file is part of pdalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of pdalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted conversion utilities.

Most of them deal with the fixed-length byte buffers
(public keys, digests) the library is built upon.
"""

from collections.abc import Iterable as IterableCollection
from typing import Iterable, Optional, Union

from pdalib.exceptions import PDAlibValueError

NoneOneOrMoreInt = Optional[Union[int, Iterable[int]]]


def bytes_from_octets(
    octets: Union[bytes, bytearray, memoryview, str], out_size: NoneOneOrMoreInt = None
) -> bytes:
    """Return bytes from a hex-string, stripping leading/trailing spaces.

    If the input is not a string, then it is just turned into bytes.
    Optionally, it also ensures required output size.
    """

    if isinstance(octets, str):  # hex string
        octets = bytes.fromhex(octets)
    else:
        octets = bytes(octets)

    if (
        out_size is None
        or isinstance(out_size, int)
        and len(octets) == out_size
        or isinstance(out_size, IterableCollection)
        and len(octets) in out_size
    ):
        return octets

    err_msg = f"invalid size: {len(octets)} bytes instead of {out_size}"
    raise PDAlibValueError(err_msg)


def fixed_length_bytes(data: bytes, size: int = 32, keep: str = "left") -> bytes:
    """Return exactly size bytes, left-padding with zeros.

    Shorter input is left-padded with zero bytes.
    Longer input is silently truncated:
    keep="left" retains the leading bytes,
    keep="right" retains the trailing ones
    (i.e. the least significant bytes of a big-endian number).

    This is lossy for malformed input: the caller must be aware
    that no error is raised.
    """

    if keep not in ("left", "right"):
        raise PDAlibValueError(f"invalid keep: {keep!r}")

    if len(data) > size:
        data = data[:size] if keep == "left" else data[-size:]
    return b"\x00" * (size - len(data)) + data


def hex_string(i: int) -> str:
    """Return a hex-string representation of a non-negative int.

    Negative integers are not allowed.

    The resulting hex-string has an even number of hex-digits and
    includes a space every four bytes (i.e. every eight hex-digits).
    """

    if i < 0:
        raise PDAlibValueError(f"negative integer: {i}")
    a_str = hex(i)[2:]
    if len(a_str) % 2 != 0:
        a_str = "0" + a_str

    indx = list(reversed(range(len(a_str), 0, -8)))
    lresult = [(a_str[max(0, j - 8) : j]) for j in indx]
    result = " ".join(lresult)
    return result.upper()
