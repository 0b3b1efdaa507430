#!/usr/bin/env python3

# Copyright (C) 2022 The pdalib developers
#
# This file is part of pdalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of pdalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Associated token account addresses.

The associated token account of a wallet for a given mint
is the program derived address of the associated token account program
for the seeds [wallet, token program id, mint].
"""

from typing import Tuple

from pdalib.pda import find_program_address
from pdalib.programs import ASSOCIATED_TOKEN_ACCOUNT_PROGRAM_ID, TOKEN_PROGRAM_ID
from pdalib.pub_key import PubKey, PublicKey, public_key_from


def find_associated_token_address(
    wallet: PubKey, mint: PubKey, token_program_id: PubKey = TOKEN_PROGRAM_ID
) -> Tuple[PublicKey, int]:
    """Return the (address, bump) pair of the associated token account.

    token_program_id defaults to the classic token program;
    mints of the token-2022 program need TOKEN_2022_PROGRAM_ID.
    """

    seeds = [
        public_key_from(wallet),
        public_key_from(token_program_id),
        public_key_from(mint),
    ]
    return find_program_address(seeds, ASSOCIATED_TOKEN_ACCOUNT_PROGRAM_ID)
