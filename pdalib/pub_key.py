#!/usr/bin/env python3

# Copyright (C) 2022 The pdalib developers
#
# This file is part of pdalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of pdalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""32-byte public keys.

A PublicKey is either the public key of an account
or a program derived address: only its raw bytes
and their Base58 text representation matter.

The from_bytes, from_hex and from_base58 constructors
are lenient boundary helpers: they silently left-pad short input
and truncate long input to exactly 32 bytes.
public_key_from is the strict alternative, used by the rest of the library.
"""

from dataclasses import dataclass, field
from typing import Type, TypeVar, Union

from dataclasses_json import DataClassJsonMixin, config

from pdalib.alias import Octets, String
from pdalib.base58 import b58decode, b58encode
from pdalib.ed25519 import is_on_curve
from pdalib.exceptions import PDAlibTypeError, PDAlibValueError
from pdalib.utils import bytes_from_octets, fixed_length_bytes

PUBLIC_KEY_LENGTH = 32

_PublicKey = TypeVar("_PublicKey", bound="PublicKey")


@dataclass(frozen=True)
class PublicKey(DataClassJsonMixin):
    # 32 bytes
    key: bytes = field(
        metadata=config(
            encoder=lambda v: b58encode(v).decode("ascii"), decoder=b58decode
        )
    )

    def __init__(self, key: Octets, check_validity: bool = True) -> None:

        object.__setattr__(self, "key", bytes_from_octets(key))

        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        if len(self.key) != PUBLIC_KEY_LENGTH:
            err_msg = "invalid public key length: "
            err_msg += f"{len(self.key)} bytes instead of {PUBLIC_KEY_LENGTH}"
            raise PDAlibValueError(err_msg)

    def __bytes__(self) -> bytes:
        return self.key

    def __str__(self) -> str:
        return self.to_base58()

    def to_bytes(self) -> bytes:
        return self.key

    def to_base58(self) -> str:
        return b58encode(self.key).decode("ascii")

    def hex(self) -> str:
        return self.key.hex()

    def is_on_curve(self) -> bool:
        "Return True if the key is a valid Ed25519 point."
        return is_on_curve(self.key)

    @classmethod
    def from_bytes(cls: Type[_PublicKey], data: bytes) -> _PublicKey:
        """Return a PublicKey from any byte sequence.

        Short input is left-padded with zeros,
        long input is truncated to its leading 32 bytes.
        """
        return cls(fixed_length_bytes(bytes(data), PUBLIC_KEY_LENGTH, "left"))

    @classmethod
    def from_hex(cls: Type[_PublicKey], hex_str: str) -> _PublicKey:
        """Return a PublicKey from a hex-string.

        The hex-string is read as a big-endian number:
        an optional '0x' prefix is accepted, an odd number of digits
        is left-padded with '0', short input is left-padded with zeros
        and long input is truncated to its trailing 32 bytes.
        """

        hex_str = hex_str.strip()
        if hex_str[:2] in ("0x", "0X"):
            hex_str = hex_str[2:]
        if len(hex_str) % 2:
            hex_str = "0" + hex_str
        try:
            data = bytes.fromhex(hex_str)
        except ValueError as e:
            raise PDAlibValueError(f"invalid hex-string: {hex_str!r}") from e
        return cls(fixed_length_bytes(data, PUBLIC_KEY_LENGTH, "right"))

    @classmethod
    def from_base58(cls: Type[_PublicKey], b58: String) -> _PublicKey:
        """Return a PublicKey from its Base58 representation.

        Short decoded values are left-padded with zeros,
        long ones are truncated to their leading 32 bytes.
        """

        if isinstance(b58, str):
            b58 = b58.strip()
        data = b58decode(b58)
        return cls(fixed_length_bytes(data, PUBLIC_KEY_LENGTH, "left"))


ZERO_PUBLIC_KEY = PublicKey(b"\x00" * PUBLIC_KEY_LENGTH)

# PublicKey instance,
# 32 raw bytes,
# or Base58 string
PubKey = Union[PublicKey, bytes, bytearray, str]


def public_key_from(key: PubKey) -> PublicKey:
    """Return a PublicKey, enforcing the exact 32 bytes length.

    It supports:

    - PublicKey instances (returned untouched)
    - raw bytes
    - Base58 strings
    """

    if isinstance(key, PublicKey):
        return key
    if isinstance(key, str):
        return PublicKey(b58decode(key.strip(), PUBLIC_KEY_LENGTH))
    if isinstance(key, (bytes, bytearray)):
        return PublicKey(bytes(key))
    raise PDAlibTypeError(f"not a public key: {key!r}")
