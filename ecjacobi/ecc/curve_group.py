#!/usr/bin/env python3

# Copyright (C) 2026 The ecjacobi developers
#
# This file is part of ecjacobi. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecjacobi including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic CurveGroup class and functions.

Note that CurveGroup does not have to be a cyclic subgroup.
For the cyclic subgroup class CurveSubGroup and
the cyclic subgroup class of prime order Curve,
see the ecjacobi.ecc.curve module.

Doubling and addition closely follow
Gueron & Krasnov 2013, figure 2:
no modular inverse is needed in Jacobian coordinates.
"""

from math import ceil

from ecjacobi.alias import HexStr, Integer, Point
from ecjacobi.ecc.field import PrimeField
from ecjacobi.ecc.point import INFJ, ECPoint, Identity, JacPoint, require_scalar
from ecjacobi.exceptions import (
    ECJacobiTypeError,
    ECJacobiValueError,
    PointNotOnCurveError,
)
from ecjacobi.utils import HEX_THRESHOLD, hex_string, int_from_hex, int_from_integer


def jac_from_aff(Q: Point, ec: "CurveGroup") -> JacPoint:
    """Return the Jacobian representation of the affine point.

    The input point is assumed to be on curve.
    """
    return JacPoint(Q[0] % ec.p, Q[1] % ec.p, 1, ec)


class CurveGroup(PrimeField):
    """Finite group of the points of an elliptic curve over Fp.

    The elliptic curve is the set of points (x, y)
    that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
    with x, y, a, and b in Fp (p being a prime),
    together with a point at infinity.
    The constants a, b must satisfy the relationship
    4 a^3 + 27 b^2 ≠ 0.

    The group is defined by the point addition group law.
    """

    def __init__(self, p: Integer, a: Integer, b: Integer) -> None:
        # Parameters are checked according to SEC 1 v.2 3.1.1.2.1

        p = int_from_integer(p)
        a = int_from_integer(a)
        b = int_from_integer(b)

        # 1) check that p is a prime
        # Fermat test will do as _probabilistic_ primality test...
        if p < 2 or p % 2 == 0 or pow(2, p - 1, p) != 1:
            err_msg = "p is not prime: "
            err_msg += f"'{hex_string(p)}'" if p > HEX_THRESHOLD else f"{p}"
            raise ECJacobiValueError(err_msg)

        super().__init__(p)
        # byte-length
        self.p_size = ceil(p.bit_length() / 8)

        # 2. check that a and b are integers in the interval [0, p−1]
        if a < 0:
            raise ECJacobiValueError(f"negative a: {a}")
        if p <= a:
            err_msg = "p <= a: " + (
                f"'{hex_string(p)}' <= '{hex_string(a)}'"
                if p > HEX_THRESHOLD
                else f"{p} <= {a}"
            )
            raise ECJacobiValueError(err_msg)
        if b < 0:
            raise ECJacobiValueError(f"negative b: {b}")
        if p <= b:
            err_msg = "p <= b: " + (
                f"'{hex_string(p)}' <= '{hex_string(b)}'"
                if p > HEX_THRESHOLD
                else f"{p} <= {b}"
            )
            raise ECJacobiValueError(err_msg)

        # 3. Check that 4*a^3 + 27*b^2 ≠ 0 (mod p)
        d = 4 * a * a * a + 27 * b * b
        if d % p == 0:
            raise ECJacobiValueError("zero discriminant")
        self._a = a
        self._b = b

    @property
    def a(self) -> int:
        return self._a

    @property
    def b(self) -> int:
        return self._b

    def __str__(self) -> str:
        result = "Curve"
        if self.p > HEX_THRESHOLD:
            result += f"\n p   = {hex_string(self.p)}"
        else:
            result += f"\n p   = {self.p}"

        if self._a > HEX_THRESHOLD or self._b > HEX_THRESHOLD:
            result += f"\n a   = {hex_string(self._a)}"
            result += f"\n b   = {hex_string(self._b)}"
        else:
            result += f"\n a   = {self._a}"
            result += f"\n b   = {self._b}"

        return result

    def __repr__(self) -> str:
        result = "Curve("
        result += f"'{hex_string(self.p)}'" if self.p > HEX_THRESHOLD else f"{self.p}"
        if self._a > HEX_THRESHOLD or self._b > HEX_THRESHOLD:
            result += f", '{hex_string(self._a)}', '{hex_string(self._b)}'"
        else:
            result += f", {self._a}, {self._b}"

        result += ")"
        return result

    def identity(self) -> Identity:
        return INFJ

    def point(self, x: int, y: int, check_validity: bool = True) -> JacPoint:
        """Return the Jacobian point with affine coordinates (x, y).

        Unless explicitly disabled, the point is checked to be on the curve.
        """
        Q = jac_from_aff((x, y), self)
        if check_validity:
            self.require_on_curve(Q)
        return Q

    def point_from_hex(
        self, x: HexStr, y: HexStr, check_validity: bool = True
    ) -> JacPoint:
        "Return the Jacobian point from hex-string affine coordinates."
        return self.point(int_from_hex(x), int_from_hex(y), check_validity)

    # methods using p: they could become functions

    def negate_jac(self, Q: ECPoint) -> ECPoint:
        """Return the opposite Jacobian point.

        The input point is not checked to be on the curve.
        """
        if isinstance(Q, Identity):
            return Q
        if isinstance(Q, JacPoint):
            return JacPoint(Q.x, (self.p - Q.y) % self.p, Q.z, self)
        raise ECJacobiTypeError("not a Jacobian point")

    def aff_from_jac(self, Q: ECPoint) -> Point:
        # point is assumed to be on curve
        if isinstance(Q, Identity):
            raise ECJacobiValueError("INF has no affine coordinates")
        return self.x_aff_from_jac(Q), self.y_aff_from_jac(Q)

    def x_aff_from_jac(self, Q: ECPoint) -> int:
        # point is assumed to be on curve
        if isinstance(Q, Identity):
            raise ECJacobiValueError("INF has no x-coordinate")
        return self.div(Q.x, self.exp(Q.z, 2))

    def y_aff_from_jac(self, Q: ECPoint) -> int:
        # point is assumed to be on curve
        if isinstance(Q, Identity):
            raise ECJacobiValueError("INF has no y-coordinate")
        return self.div(Q.y, self.exp(Q.z, 3))

    def jac_equality(self, QJ: ECPoint, PJ: ECPoint) -> bool:
        """Return True if Jacobian points are equal in affine coordinates.

        The input points are assumed to be on curve.
        """
        if isinstance(QJ, Identity) or isinstance(PJ, Identity):
            return isinstance(QJ, Identity) and isinstance(PJ, Identity)

        PJ2 = PJ.z * PJ.z
        QJ2 = QJ.z * QJ.z
        if QJ.x * PJ2 % self.p != PJ.x * QJ2 % self.p:
            return False

        PJ3 = PJ2 * PJ.z
        QJ3 = QJ2 * QJ.z
        return QJ.y * PJ3 % self.p == PJ.y * QJ3 % self.p

    # methods using _a, _b, p

    def double_jac(self, Q: ECPoint) -> ECPoint:
        # point is assumed to be on curve

        if isinstance(Q, Identity):
            return Q
        # a point of order two: its tangent is vertical
        if Q.y % self.p == 0:
            return INFJ

        S = 4 * Q.x * Q.y * Q.y % self.p
        Z2 = Q.z * Q.z
        Z4 = Z2 * Z2 % self.p
        M = 3 * Q.x * Q.x + self._a * Z4
        X = (M * M - 2 * S) % self.p
        Y2 = Q.y * Q.y
        Y = (M * (S - X) - 8 * Y2 * Y2) % self.p
        Z = 2 * Q.y * Q.z % self.p
        return JacPoint(X, Y, Z, self)

    def add_jac(self, Q1: ECPoint, Q2: ECPoint) -> ECPoint:
        # points are assumed to be on curve

        if isinstance(Q1, Identity):
            return Q2
        if isinstance(Q2, Identity):
            return Q1

        Q1Z2 = Q1.z * Q1.z
        Q2Z2 = Q2.z * Q2.z
        xs1 = Q1.x * Q2Z2 % self.p
        xs2 = Q2.x * Q1Z2 % self.p
        ys1 = Q1.y * Q2Z2 * Q2.z % self.p
        ys2 = Q2.y * Q1Z2 * Q1.z % self.p

        # xd would be zero in the general formula
        if xs1 == xs2:
            if ys1 == ys2:  # point doubling
                return self.double_jac(Q1)
            # opposite points
            return INFJ

        xd = (xs2 - xs1) % self.p
        yd = (ys2 - ys1) % self.p
        xd2 = xd * xd % self.p
        xd3 = xd2 * xd % self.p
        X = (yd * yd - xd3 - 2 * xs1 * xd2) % self.p
        Y = (yd * (xs1 * xd2 - X) - ys1 * xd3) % self.p
        Z = xd * Q1.z * Q2.z % self.p
        return JacPoint(X, Y, Z, self)

    def mult(self, m: int, Q: ECPoint) -> ECPoint:
        return mult_jac(m, Q, self)

    def tangent(self, Q: ECPoint) -> int:
        """Return the slope of the tangent to the curve at Q.

        It is calculated in affine coordinates,
        i.e. with two modular inverses.
        """
        x, y = self.aff_from_jac(Q)
        return self.div(3 * x * x + self._a, 2 * y)

    def _y2(self, x: int) -> int:
        return ((x * x + self._a) * x + self._b) % self.p

    def touches(self, Q: ECPoint) -> bool:
        """Return True if the point is on the curve.

        The affine reduction of a finite point requires
        two modular inverses: it is not meant for the hot path.
        """
        if isinstance(Q, Identity):
            return True
        if not isinstance(Q, JacPoint):
            raise ECJacobiTypeError("not a Jacobian point")
        x, y = self.aff_from_jac(Q)
        return self._y2(x) == y * y % self.p

    def require_on_curve(self, Q: ECPoint) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.touches(Q):
            raise PointNotOnCurveError("point not on curve")


def mult_jac(m: int, Q: ECPoint, ec: CurveGroup) -> ECPoint:
    """Scalar multiplication of a curve point in Jacobian coordinates.

    This implementation uses
    'double & add' algorithm,
    'right-to-left' binary decomposition of the m coefficient,
    Jacobian coordinates.
    It is not constant-time.

    The input point is assumed to be on curve;
    m can be any non-negative int, it is not reduced mod n.
    """

    require_scalar(m)

    R: ECPoint = INFJ
    while m != 0:
        if m & 1:  # if least significant bit is 1
            R = ec.add_jac(R, Q)  # then add current Q
        m >>= 1  # remove the bit just accounted for
        # the last doubling would be useless
        if m != 0:
            Q = ec.double_jac(Q)
    return R
