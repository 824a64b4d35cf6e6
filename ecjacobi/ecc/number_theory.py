#!/usr/bin/env python3

# Copyright (C) 2026 The ecjacobi developers
#
# This file is part of ecjacobi. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecjacobi including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular inverse.

The inverse is computed with a reduced ("half") version of the
Extended Euclidean Algorithm, see
https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm

Only the Bézout coefficient of the first argument is tracked:
the second one is never needed to obtain an inverse.
"""

from typing import Tuple

from ecjacobi.exceptions import ECJacobiValueError, InverseNotFoundError
from ecjacobi.utils import int_repr


def half_xgcd(a: int, b: int) -> Tuple[int, int]:
    """Return (g, x) such that a*x + b*y = g = gcd(a, b) for some y.

    The iteration runs on (|a|, |b|);
    y is not calculated.
    """

    lastrem, rem = abs(a), abs(b)
    lastx, x = 1, 0
    while rem != 0:
        q, r = divmod(lastrem, rem)
        lastrem, rem = rem, r
        lastx, x = x, lastx - q * x
    return lastrem, lastx


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m) in [0, m-1].

    m does not have to be a prime,
    but a and m must be coprime: if they are not,
    then InverseNotFoundError is raised.
    """

    if m <= 0:
        raise ECJacobiValueError(f"non positive modulus: {m}")

    a %= m
    g, x = half_xgcd(a, m)
    if g != 1:
        err_msg = f"No inverse for {int_repr(a)} mod {int_repr(m)}"
        raise InverseNotFoundError(err_msg)
    return x % m
