#!/usr/bin/env python3

# Copyright (C) 2022 The pdalib developers
#
# This file is part of pdalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of pdalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Tuple, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "06ddf6e1d765a193d9cbe146ceeb79ac1cb485ed5f5b37913a8cf5857eff00a9"
# "06ddf6e1 d765a193 d9cbe146 ceeb79ac 1cb485ed 5f5b3791 3a8cf585 7eff00a9"
#
# use pdalib.utils.bytes_from_octets to convert Octets to bytes
Octets = Union[bytes, str]

# bytes or text string (not hex-string)
#
# this is for strings that can be
# converted to bytes using encode(),
# e.g. a text seed like "metadata"
#    if isinstance(seed, str):
#        seed = seed.encode()
#
# or 'ascii' strings like base58 public keys:
# "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
#
# base58 strings should always be stripped of leading/trailing blanks
String = Union[bytes, str]

# Integer coordinates, as in (x, y), of a point of a twisted Edwards curve.
# Edwards curves have no point at infinity: the neutral element is (0, 1).
Point = Tuple[int, int]
