#!/usr/bin/env python3

# Copyright (C) 2022 The pdalib developers
#
# This file is part of pdalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of pdalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Well-known program ids.

The ids are loaded from the _data/programs.json file,
mapping program names to Base58 public keys.
"""

import json
from os import path
from typing import Dict, Optional

from pdalib.exceptions import PDAlibValueError
from pdalib.pub_key import PublicKey, public_key_from

PROGRAMS: Dict[str, PublicKey] = {}
datadir = path.join(path.dirname(__file__), "_data")
with open(path.join(datadir, "programs.json"), "r", encoding="ascii") as f:
    for name, b58 in json.load(f).items():
        PROGRAMS[name] = public_key_from(b58)


def program_id_from_name(name: str) -> PublicKey:
    name = name.strip().lower()
    if name not in PROGRAMS:
        err_msg = f"unknown program: {name!r}, "
        err_msg += f"not in {sorted(PROGRAMS)}"
        raise PDAlibValueError(err_msg)
    return PROGRAMS[name]


def name_from_program_id(program_id: PublicKey) -> Optional[str]:
    "Return the program name, if the program id is a well-known one."
    for name, value in PROGRAMS.items():
        if value == program_id:
            return name
    return None


SYSTEM_PROGRAM_ID = PROGRAMS["system"]
TOKEN_PROGRAM_ID = PROGRAMS["token"]
TOKEN_2022_PROGRAM_ID = PROGRAMS["token_2022"]
ASSOCIATED_TOKEN_ACCOUNT_PROGRAM_ID = PROGRAMS["associated_token_account"]
TOKEN_METADATA_PROGRAM_ID = PROGRAMS["token_metadata"]
