#!/usr/bin/env python3

# Copyright (C) 2026 The ecjacobi developers
#
# This file is part of ecjacobi. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecjacobi including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Callable, Tuple, Union

# hex-string or bytes representation of an int, e.g.:
# 3735928559
# "0xdeadbeef"
# "deadbeef"
# "dead beef"
# b'\xde\xad\xbe\xef'
Integer = Union[bytes, str, int]

# hex-strings are parsed after removing any whitespace, embedded included:
# "79BE667E F9DCBBAC 55A06295 CE870B07 029BFCDB 2DCE28D9 59F2815B 16F81798"
HexStr = str

# Elliptic curve point in affine coordinates.
# The infinity point has no affine representation:
# Jacobian points (see ecjacobi.ecc.point) are used everywhere else
Point = Tuple[int, int]

# Entropy source: given n, return n cryptographically secure random bytes,
# e.g. secrets.token_bytes or os.urandom.
# A fixed byte stream can be injected for deterministic tests
EntropySource = Callable[[int], bytes]
