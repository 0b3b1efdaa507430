#!/usr/bin/env python3

# Copyright (C) 2022 The pdalib developers
#
# This file is part of pdalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of pdalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the pdalib package."

name = "pdalib"
__version__ = "2022.9.1"
__author__ = "The pdalib developers"
__author_email__ = "devs@pdalib.org"
__copyright__ = "Copyright (C) 2022 The pdalib developers"
__license__ = "MIT License"
