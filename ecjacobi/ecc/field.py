#!/usr/bin/env python3

# Copyright (C) 2026 The ecjacobi developers
#
# This file is part of ecjacobi. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecjacobi including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Prime field arithmetic.

Field elements are plain ints; results are always
in the canonical range [0, p-1].
"""

from ecjacobi.ecc.number_theory import mod_inv


class PrimeField:
    "Multiplication, division, and exponentiation modulo the prime p."

    def __init__(self, p: int) -> None:
        self.p = p

    def mul(self, a: int, b: int) -> int:
        "Return a*b mod p."
        return a * b % self.p

    def div(self, num: int, den: int) -> int:
        """Return num/den mod p.

        This is the only expensive field operation,
        as it requires a modular inverse:
        InverseNotFoundError is raised if den = 0 mod p.
        """
        inv_den = mod_inv(den % self.p, self.p)
        return self.mul(num % self.p, inv_den)

    def exp(self, num: int, power: int) -> int:
        "Return num^power mod p."
        return pow(num % self.p, power, self.p)
