#!/usr/bin/env python3

# Copyright (C) 2022 The pdalib developers
#
# This file is part of pdalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of pdalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Base58 encoding and decoding functions.

Binary-to-text encoding schemes are used to transport binary data across
channels designed to deal with textual data. Public keys and
program derived addresses are usually displayed and exchanged
as Base58 text.

Base58 is similar to Base64, which uses 10 digits, 26 lowercase characters,
26 uppercase characters, '+' (plus sign), and '/' (forward slash).
Base58 omits the similar-looking letters
0 (zero), O (capital o), I (capital i), and l (lower case L)
to avoid ambiguity when printed; moreover, it removes '+' and '/'
so that a double-click does select the whole string.

Differently from Bitcoin Base58Check, public keys are encoded
without any checksum: data integrity is not guaranteed
at the decoding stage, only the alphabet is validated.

The interface mimics the native python3 base64 interface, i.e.
it supports encoding bytes-like objects to ASCII bytes,
and decoding ASCII bytes-like objects or ASCII strings to bytes.
"""

from typing import Optional

from pdalib.alias import String
from pdalib.exceptions import PDAlibValueError

_ALPHABET = b"123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
__BASE = len(_ALPHABET)


def _b58encode_from_int(i: int) -> bytes:

    result = b""
    while i or len(result) == 0:
        i, idx = divmod(i, __BASE)
        result = _ALPHABET[idx : idx + 1] + result

    return result


def b58encode(v: bytes, in_size: Optional[int] = None) -> bytes:
    """Encode a bytes-like object using Base58.

    Optionally, it also ensures required input size.
    """

    v = bytes(v)
    if in_size is not None and len(v) != in_size:
        err_msg = f"invalid size: {len(v)} bytes instead of {in_size}"
        raise PDAlibValueError(err_msg)

    # preserve leading-0s
    # leading-0s become base58 leading-1s
    n_pad = len(v)
    v = v.lstrip(b"\0")
    vlen = len(v)
    n_pad -= vlen
    result = _ALPHABET[:1] * n_pad

    if vlen:
        i = int.from_bytes(v, byteorder="big", signed=False)
        result += _b58encode_from_int(i)

    return result


def _b58decode_to_int(v: bytes) -> int:

    i = 0
    for char in v:
        i *= __BASE
        i += _ALPHABET.index(char)
    return i


def b58decode(v: String, out_size: Optional[int] = None) -> bytes:
    """Decode a Base58 encoded bytes-like object or ASCII string.

    Optionally, it also ensures required output size.
    """

    if isinstance(v, str):
        # do not trim spaces
        try:
            v = v.encode("ascii")
        except UnicodeEncodeError as e:
            msg = "Base58 string contains invalid characters"
            raise PDAlibValueError(msg) from e

    if any(x not in _ALPHABET for x in v):
        msg = "Base58 string contains invalid characters"
        raise PDAlibValueError(msg)

    # preserve leading-0s
    # base58 leading-1s become leading-0s
    n_pad = len(v)
    v = v.lstrip(_ALPHABET[:1])
    vlen = len(v)
    n_pad -= vlen
    result = b"\0" * n_pad

    if vlen:
        i = _b58decode_to_int(v)
        nbytes = (i.bit_length() + 7) // 8
        result = result + i.to_bytes(nbytes, byteorder="big", signed=False)

    if out_size is None or len(result) == out_size:
        return result

    err_msg = "invalid decoded size: "
    err_msg += f"{len(result)} bytes instead of {out_size}"
    raise PDAlibValueError(err_msg)
