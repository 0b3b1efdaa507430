#!/usr/bin/env python3

# Copyright (C) 2022 The pdalib developers
#
# This file is part of pdalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of pdalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions."""

import hashlib
from typing import Iterable

from pdalib.alias import Octets
from pdalib.utils import bytes_from_octets


def sha256(octets: Octets) -> bytes:
    """Return the SHA256(*) of the input octet sequence."""
    octets = bytes_from_octets(octets)
    return hashlib.sha256(octets).digest()


def sha256_chunks(chunks: Iterable[bytes]) -> bytes:
    """Return the SHA256 of the concatenation of the input chunks.

    The chunks are fed to the hash one at a time:
    no concatenated buffer is ever built.
    """
    h = hashlib.sha256()
    for chunk in chunks:
        h.update(chunk)
    return h.digest()
