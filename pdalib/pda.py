#!/usr/bin/env python3

# Copyright (C) 2022 The pdalib developers
#
# This file is part of pdalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of pdalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Program Derived Addresses (PDA).

A program derived address is a public key deterministically computed
from a program id and a list of seeds, such that no private key exists
for it: only the program can "sign" for it.

The candidate address is

    SHA256(seed_0 || ... || seed_n || program_id || "ProgramDerivedAddress")

and it is accepted only if it falls off the Ed25519 curve,
i.e. if it is not a valid account public key.
The trailing domain separation tag makes the hash
unusable for any other purpose.

About half of the candidates lie on the curve:
find_program_address appends a one-byte bump seed,
trying from 255 downward, and returns the first off-curve result.
That (address, bump) pair is the canonical one
programs expect: bump 0 is never tried.

https://docs.solana.com/developing/programming-model/calling-between-programs#program-derived-addresses
"""

import logging
from typing import List, Sequence, Tuple, Union

from pdalib.ed25519 import is_on_curve
from pdalib.exceptions import (
    NoViableAddressError,
    OnCurveError,
    PDAlibTypeError,
    SeedCountExceededError,
    SeedTooLongError,
)
from pdalib.hashes import sha256_chunks
from pdalib.pub_key import PubKey, PublicKey, public_key_from

logger = logging.getLogger(__name__)

MAX_SEEDS = 16
MAX_SEED_LENGTH = 32
PDA_MARKER = b"ProgramDerivedAddress"

# bytes-like, text (utf-8 encoded), or a PublicKey (its 32 raw bytes)
Seed = Union[bytes, bytearray, memoryview, str, PublicKey]


def bytes_from_seed(seed: Seed) -> bytes:
    "Return the raw bytes a seed contributes to the address hash."

    if isinstance(seed, PublicKey):
        return seed.key
    if isinstance(seed, str):
        return seed.encode("utf-8")
    if isinstance(seed, (bytes, bytearray, memoryview)):
        return bytes(seed)
    raise PDAlibTypeError(f"invalid seed type: {type(seed).__name__}")


def _seeds_bytes(seeds: Sequence[Seed]) -> List[bytes]:

    if len(seeds) > MAX_SEEDS:
        err_msg = f"too many seeds: {len(seeds)} instead of max {MAX_SEEDS}"
        raise SeedCountExceededError(err_msg)

    seeds_bytes = [bytes_from_seed(seed) for seed in seeds]
    for i, seed in enumerate(seeds_bytes):
        if len(seed) > MAX_SEED_LENGTH:
            err_msg = f"seed #{i} too long: "
            err_msg += f"{len(seed)} bytes instead of max {MAX_SEED_LENGTH}"
            raise SeedTooLongError(err_msg)
    return seeds_bytes


def create_program_address(seeds: Sequence[Seed], program_id: PubKey) -> PublicKey:
    """Return the program derived address for the given seeds.

    Raise OnCurveError if the resulting candidate is a valid
    Ed25519 public key, i.e. if it could have a private key.
    """

    seeds_bytes = _seeds_bytes(seeds)
    program_id = public_key_from(program_id)

    h = sha256_chunks([*seeds_bytes, program_id.key, PDA_MARKER])
    if is_on_curve(h):
        raise OnCurveError("invalid seeds, address must fall off the curve")
    return PublicKey(h)


def find_program_address(
    seeds: Sequence[Seed], program_id: PubKey
) -> Tuple[PublicKey, int]:
    """Return the canonical (address, bump) pair for the given seeds.

    The bump is the one-byte seed appended to the given ones:
    bump values are tried from 255 down to 1,
    the first off-curve address wins.
    """

    seeds = list(seeds)
    program_id = public_key_from(program_id)

    for bump in range(255, 0, -1):
        try:
            address = create_program_address(seeds + [bytes([bump])], program_id)
        except OnCurveError:
            logger.debug("bump %d rejected: address on curve", bump)
            continue
        logger.debug("bump %d accepted: %s", bump, address)
        return address, bump

    err_msg = "unable to find a viable program address"
    logger.error("%s for program %s", err_msg, program_id)
    raise NoViableAddressError(err_msg)
