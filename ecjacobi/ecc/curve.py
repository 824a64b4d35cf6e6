#!/usr/bin/env python3

# Copyright (C) 2026 The ecjacobi developers
#
# This file is part of ecjacobi. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecjacobi including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve classes and the named-curve registry.

Named curves are read from the json file in the _data folder:

* SEC 2 v.2 curves
  http://www.secg.org/sec2-v2.pdf
* Federal Information Processing Standards Publication 186-4
  (NIST) curves
  https://oag.ca.gov/sites/all/files/agweb/pdfs/erds1/fips_pub_07_2013.pdf

Each Curve is built (and validated) once, at import time,
and it is never modified afterwards:
it can be shared without locking.
"""

import json
from dataclasses import dataclass, field
from math import sqrt
from os import path
from typing import Dict, Optional, Sequence

from dataclasses_json import DataClassJsonMixin, config

from ecjacobi.alias import Integer
from ecjacobi.ecc.curve_group import CurveGroup, jac_from_aff, mult_jac
from ecjacobi.ecc.point import ECPoint, Identity
from ecjacobi.exceptions import ECJacobiValueError
from ecjacobi.utils import HEX_THRESHOLD, hex_string, int_from_hex, int_from_integer


class CurveSubGroup(CurveGroup):
    "Subgroup of the points of an elliptic curve over Fp generated by G."

    def __init__(
        self, p: Integer, a: Integer, b: Integer, G: Sequence[Integer]
    ) -> None:

        super().__init__(p, a, b)

        # 2. check that xG and yG are integers in the interval [0, p−1]
        # 4. Check that yG^2 = xG^3 + a*xG + b (mod p)
        if len(G) != 2:
            raise ECJacobiValueError("Generator must a be a sequence[int, int]")
        xG, yG = int_from_integer(G[0]), int_from_integer(G[1])
        if not (0 <= xG < self.p and 0 <= yG < self.p):
            raise ECJacobiValueError("Generator coordinates not in 0..p-1")
        # Jacobian coordinates, with Z=1
        self.G = jac_from_aff((xG, yG), self)
        if not self.touches(self.G):
            raise ECJacobiValueError("Generator is not on the curve")

    def __str__(self) -> str:
        result = super().__str__()
        if self.p > HEX_THRESHOLD:
            result += f"\n x_G = {hex_string(self.G.x)}"
            result += f"\n y_G = {hex_string(self.G.y)}"
        else:
            result += f"\n x_G = {self.G.x}"
            result += f"\n y_G = {self.G.y}"
        return result

    def __repr__(self) -> str:
        result = super().__repr__()[:-1]
        if self.p > HEX_THRESHOLD:
            result += f", ('{hex_string(self.G.x)}', '{hex_string(self.G.y)}')"
        else:
            result += f", ({self.G.x}, {self.G.y})"
        result += ")"
        return result


class Curve(CurveSubGroup):
    "Prime order subgroup of the points of an elliptic curve over Fp."

    def __init__(
        self,
        p: Integer,
        a: Integer,
        b: Integer,
        G: Sequence[Integer],
        n: Integer,
        h: int = 1,
        weakness_check: bool = True,
    ) -> None:

        super().__init__(p, a, b, G)
        n = int_from_integer(n)

        # Security level is expressed in bits, where n-bit security
        # means that the attacker would have to perform 2^n operations
        # to break it. Security bits are half the key size for asymmetric
        # elliptic curve cryptography, i.e. half of the number of bits
        # required to express the group order n or, holding Hasse theorem,
        # to express the field prime p
        self.n = n
        self.nlen = n.bit_length()
        self.nsize = (self.nlen + 7) // 8

        # 5. Check that n is prime.
        if n < 2 or n % 2 == 0 or pow(2, n - 1, n) != 1:
            err_msg = "n is not prime: "
            err_msg += f"{hex_string(n)}" if n > HEX_THRESHOLD else f"{n}"
            raise ECJacobiValueError(err_msg)
        delta = int(2 * sqrt(self.p))
        # also check n with Hasse Theorem
        if h < 2 and not (self.p + 1 - delta <= n <= self.p + 1 + delta):
            err_msg = "n not in p+1-delta..p+1+delta: "
            err_msg += f"{hex_string(n)}" if n > HEX_THRESHOLD else f"{n}"
            raise ECJacobiValueError(err_msg)

        # 7. Check that G ≠ INF, nG = INF
        # (G ≠ INF as it has been built from affine coordinates)
        if not isinstance(mult_jac(n, self.G, self), Identity):
            err_msg = "n is not the group order: "
            err_msg += f"{hex_string(n)}" if n > HEX_THRESHOLD else f"{n}"
            raise ECJacobiValueError(err_msg)

        # 6. Check cofactor
        exp_h = int(1 / n + delta / n + self.p / n)
        if h != exp_h:
            raise ECJacobiValueError(f"invalid cofactor: {h}, expected {exp_h}")
        self.h = h

        # 8. Check that n ≠ p
        if n == self.p:
            raise ECJacobiValueError(f"n=p weak curve: {hex_string(n)}")

        if weakness_check:
            # 8. Check that p^i % n ≠ 1 for all 1≤i<100
            for i in range(1, 100):
                if pow(self.p, i, n) == 1:
                    raise UserWarning("weak curve")

    def __str__(self) -> str:
        result = super().__str__()
        if self.n > HEX_THRESHOLD:
            result += f"\n n   = {hex_string(self.n)}"
        else:
            result += f"\n n   = {self.n}"
        result += f"\n h = {self.h}"
        return result

    def __repr__(self) -> str:
        result = super().__repr__()[:-1]
        if self.n > HEX_THRESHOLD:
            result += f", '{hex_string(self.n)}'"
        else:
            result += f", {self.n}"
        result += f", {self.h}"
        result += ")"
        return result


# hex-strings in json, whitespace allowed
_HEX = config(encoder=hex_string, decoder=int_from_hex)


@dataclass(frozen=True)
class CurveParams(DataClassJsonMixin):
    "Domain parameters of a named curve, as stored in the json registry."

    p: int = field(metadata=_HEX)
    a: int = field(metadata=_HEX)
    b: int = field(metadata=_HEX)
    x_G: int = field(metadata=_HEX)
    y_G: int = field(metadata=_HEX)
    n: int = field(metadata=_HEX)
    h: int = 1

    def curve(self, weakness_check: bool = True) -> Curve:
        G = self.x_G, self.y_G
        return Curve(self.p, self.a, self.b, G, self.n, self.h, weakness_check)


_DATA_DIR = path.join(path.dirname(__file__), "_data")


def _load_curves(filename: str) -> Dict[str, Curve]:
    with open(path.join(_DATA_DIR, filename), "r", encoding="ascii") as file_:
        params = json.load(file_)
    return {name: CurveParams.from_dict(d).curve() for name, d in params.items()}


CURVES = _load_curves("curves.json")

secp256k1 = CURVES["secp256k1"]


def mult(m: int, Q: Optional[ECPoint] = None, ec: Curve = secp256k1) -> ECPoint:
    """Scalar multiplication of a curve point in Jacobian coordinates.

    The point defaults to the curve generator G;
    the result is left in Jacobian coordinates.
    """
    if Q is None:
        Q = ec.G
    return mult_jac(m, Q, ec)
