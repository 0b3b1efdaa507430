#!/usr/bin/env python3

# Copyright (C) 2022 The pdalib developers
#
# This file is part of pdalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of pdalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The generic ones are only meant to discriminate between Exceptions
being raised by pdalib from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the pdalib versions are derived.

The DerivationError family tells apart the ways a program derived
address derivation can fail.
"""


class PDAlibValueError(ValueError):
    pass


class PDAlibTypeError(TypeError):
    pass


class PDAlibRuntimeError(RuntimeError):
    pass


class DerivationError(PDAlibValueError):
    pass


class SeedCountExceededError(DerivationError):
    "More seeds than allowed in a single derivation."


class SeedTooLongError(DerivationError):
    "A seed longer than allowed."


class OnCurveError(DerivationError):
    """The candidate address is a valid Ed25519 point.

    It is expected for about half of the candidates:
    the bump search recovers from it by trying the next bump.
    """


class NoViableAddressError(DerivationError, PDAlibRuntimeError):
    "All bump values produced on-curve candidates."
