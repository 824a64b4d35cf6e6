#!/usr/bin/env python3

# Copyright (C) 2026 The ecjacobi developers
#
# This file is part of ecjacobi. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecjacobi including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve points in Jacobian coordinates.

A point is either the Identity (the point at infinity)
or a finite JacPoint (X, Y, Z) representing
the affine point (X/Z^2, Y/Z^3).

Both are immutable: curve operations always return new points.
Affine coordinates require a modular inverse each,
so they should be extracted only once,
at the end of a chain of Jacobian operations.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from ecjacobi.alias import Point
from ecjacobi.exceptions import (
    ECJacobiTypeError,
    ECJacobiValueError,
    UnsupportedScalarError,
)
from ecjacobi.utils import hex_from_int

if TYPE_CHECKING:  # pragma: no cover
    from ecjacobi.ecc.curve_group import CurveGroup


def require_scalar(m: int) -> None:
    "Require m to be a non-negative int scalar."

    # bool is an int subclass, but True*Q is not a scalar multiplication
    if not isinstance(m, int) or isinstance(m, bool):
        raise UnsupportedScalarError(f"not an int scalar: {m!r}")
    if m < 0:
        raise UnsupportedScalarError(f"negative m: {hex(m)}")


@dataclass(frozen=True)
class Identity:
    "The point at infinity, i.e. the neutral element of the group law."

    def add(self, other: "ECPoint") -> "ECPoint":
        if not isinstance(other, (Identity, JacPoint)):
            raise ECJacobiTypeError("not a Jacobian point")
        return other

    def mul(self, m: int) -> "Identity":
        require_scalar(m)
        return self

    def __str__(self) -> str:
        return "identity_point"


INFJ = Identity()


@dataclass(frozen=True)
class JacPoint:
    """Finite curve point in Jacobian coordinates.

    Coordinates must be in the canonical range [0, p-1], z must not be zero.
    They are not checked to be on the curve:
    use CurveGroup.touches or CurveGroup.require_on_curve for that.
    """

    x: int
    y: int
    z: int
    ec: "CurveGroup" = field(repr=False, compare=False)

    def __post_init__(self) -> None:
        p = self.ec.p
        if self.z % p == 0:
            raise ECJacobiValueError("zero z-coordinate in a finite point")
        for name, coord in (("x", self.x), ("y", self.y), ("z", self.z)):
            if not 0 <= coord < p:
                raise ECJacobiValueError(f"{name}-coordinate not in 0..p-1")

    def x_aff(self) -> int:
        "Return the affine x-coordinate X/Z^2 (one modular inverse)."
        return self.ec.div(self.x, self.ec.exp(self.z, 2))

    def y_aff(self) -> int:
        "Return the affine y-coordinate Y/Z^3 (one modular inverse)."
        return self.ec.div(self.y, self.ec.exp(self.z, 3))

    def aff(self) -> Point:
        return self.x_aff(), self.y_aff()

    def add(self, other: "ECPoint") -> "ECPoint":
        if not isinstance(other, (Identity, JacPoint)):
            raise ECJacobiTypeError("not a Jacobian point")
        return self.ec.add_jac(self, other)

    def mul(self, m: int) -> "ECPoint":
        return self.ec.mult(m, self)

    def __str__(self) -> str:
        return f"({hex_from_int(self.x_aff())}, {hex_from_int(self.y_aff())})"


ECPoint = Union[Identity, JacPoint]
