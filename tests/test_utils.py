#!/usr/bin/env python3

# Copyright (C) 2022 The pdalib developers
#
# This file is part of pdalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of pdalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `pdalib.utils` module."

import secrets

import pytest

from pdalib.exceptions import PDAlibValueError
from pdalib.utils import (
    bytes_from_octets,
    fixed_length_bytes,
    hex_string,
)


def test_bytes_from_octets() -> None:
    b = secrets.token_bytes(32)
    assert bytes_from_octets(b) == b
    assert bytes_from_octets(b.hex()) == b
    assert bytes_from_octets(" " + b.hex() + " ") == b
    assert bytes_from_octets(bytearray(b)) == b
    assert bytes_from_octets(memoryview(b)) == b

    assert bytes_from_octets(b, 32) == b
    assert bytes_from_octets(b, (31, 32)) == b

    with pytest.raises(PDAlibValueError, match="invalid size: "):
        bytes_from_octets(b, 33)
    with pytest.raises(PDAlibValueError, match="invalid size: "):
        bytes_from_octets(b.hex(), (31, 33))


def test_fixed_length_bytes() -> None:
    b = bytes(range(1, 33))
    assert fixed_length_bytes(b) == b
    assert fixed_length_bytes(b, keep="right") == b

    # left-padding
    assert fixed_length_bytes(b"\x01\x02") == b"\x00" * 30 + b"\x01\x02"
    assert fixed_length_bytes(b"\x01\x02", keep="right") == b"\x00" * 30 + b"\x01\x02"
    assert fixed_length_bytes(b"") == b"\x00" * 32
    assert fixed_length_bytes(b"\xff", 4) == b"\x00\x00\x00\xff"

    # truncation
    long_b = b + b"\xaa\xbb"
    assert fixed_length_bytes(long_b) == b
    assert fixed_length_bytes(long_b, keep="right") == b[2:] + b"\xaa\xbb"

    with pytest.raises(PDAlibValueError, match="invalid keep: "):
        fixed_length_bytes(b, keep="center")


def test_hex_string() -> None:
    int_ = 34492435054806958080
    assert hex_string(int_) == "01 DEADBEEF 00000000"
    assert hex_string(0) == "00"
    assert hex_string(0xABC) == "0ABC"

    i = secrets.randbits(256)
    assert int(hex_string(i).replace(" ", ""), 16) == i

    int_ = -1
    with pytest.raises(PDAlibValueError, match="negative integer: "):
        hex_string(int_)
