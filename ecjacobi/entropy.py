#!/usr/bin/env python3

# Copyright (C) 2026 The ecjacobi developers
#
# This file is part of ecjacobi. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecjacobi including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Random scalars from an entropy source.

The entropy source is an explicit parameter:
by default it is the system cryptographically strong
pseudo-random number generator (CSPRNG),
but a deterministic byte stream can be injected for testing.

A failing entropy source is never silently absorbed:
the failure is raised as EntropySourceError.
"""

import secrets

from ecjacobi.alias import EntropySource
from ecjacobi.ecc.curve import Curve
from ecjacobi.exceptions import EntropySourceError, InvalidBitLengthError


def randbits(bits: int, source: EntropySource = secrets.token_bytes) -> int:
    """Return a non-negative random int of (at most) the given bit length.

    bits must be a multiple of 8:
    bits/8 bytes are requested from the source
    and assembled into an int in little-endian byte order.
    """

    if bits < 0 or bits % 8 != 0:
        raise InvalidBitLengthError(f"bits must be a multiple of 8: {bits}")

    nbytes = bits // 8
    try:
        buffer = source(nbytes)
    except (OSError, NotImplementedError) as e:
        raise EntropySourceError(f"entropy source failure: {e}") from e

    if len(buffer) != nbytes:
        err_msg = f"entropy source returned {len(buffer)} bytes"
        err_msg += f" instead of {nbytes}"
        raise EntropySourceError(err_msg)

    return int.from_bytes(buffer, byteorder="little", signed=False)


def randscalar(ec: Curve, source: EntropySource = secrets.token_bytes) -> int:
    """Return a random scalar in [1, n-1].

    Rejection sampling: nsize random bytes are drawn
    until the resulting int falls in the required range.
    """

    while True:
        q = randbits(ec.nsize * 8, source)
        if 0 < q < ec.n:
            return q
