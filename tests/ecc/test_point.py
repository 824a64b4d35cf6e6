#!/usr/bin/env python3

# Copyright (C) 2026 The ecjacobi developers
#
# This file is part of ecjacobi. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecjacobi including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecjacobi.ecc.point` module."

import dataclasses

import pytest

from ecjacobi.ecc.curve import secp256k1
from ecjacobi.ecc.curve_group import mult_jac
from ecjacobi.ecc.point import INFJ, Identity, JacPoint
from ecjacobi.exceptions import ECJacobiValueError
from tests.ecc.test_curve import low_card_curves

ec23_31 = low_card_curves["ec23_31"]


def test_str() -> None:
    ec = secp256k1
    assert str(INFJ) == "identity_point"
    assert str(Identity()) == "identity_point"

    G2 = mult_jac(2, ec.G, ec)
    assert G2.z != 1
    assert str(G2) == (
        "(c6047f9441ed7d6d3045406e95c07cd85c778e4b8cef3ca7abac09b95c709ee5, "
        "1ae168fea63dc339a3c58419466ceaeef7f632653266d0e1236431a950cfe52a)"
    )

    # no leading zeros, no 0x
    assert str(ec23_31.G) == "(0, 1)"
    assert str(JacPoint(10, 11, 1, ec23_31)) == "(a, b)"


def test_immutability() -> None:
    G = secp256k1.G
    with pytest.raises(dataclasses.FrozenInstanceError):
        G.x = 1  # type: ignore
    with pytest.raises(dataclasses.FrozenInstanceError):
        INFJ.x = 1  # type: ignore


def test_equality() -> None:
    ec = ec23_31
    P = JacPoint(1, 2, 3, ec)
    assert P == JacPoint(1, 2, 3, ec)
    # same point, but dataclass equality is Jacobian
    assert P != JacPoint(1 * 4 % ec.p, 2 * 8 % ec.p, 3 * 2 % ec.p, ec)
    assert P != INFJ
    assert hash(P) == hash(JacPoint(1, 2, 3, ec))
    assert len({INFJ, Identity(), P, JacPoint(1, 2, 3, ec)}) == 2
    # the curve is not part of the repr
    assert repr(P) == "JacPoint(x=1, y=2, z=3)"


def test_coordinate_range() -> None:
    ec = ec23_31
    with pytest.raises(ECJacobiValueError, match="zero z-coordinate"):
        JacPoint(1, 2, 0, ec)
    with pytest.raises(ECJacobiValueError, match="zero z-coordinate"):
        JacPoint(1, 2, ec.p, ec)

    JacPoint(0, 0, 1, ec)
    JacPoint(ec.p - 1, ec.p - 1, ec.p - 1, ec)
    for x, y, z in (
        (ec.p, 2, 1),
        (-1, 2, 1),
        (1, ec.p, 1),
        (1, -2, 1),
        (1, 2, ec.p + 1),
        (1, 2, -1),
    ):
        with pytest.raises(ECJacobiValueError, match="-coordinate not in 0..p-1"):
            JacPoint(x, y, z, ec)

    # point() reduces mod p, the constructor does not
    G = secp256k1.G
    with pytest.raises(ECJacobiValueError, match="x-coordinate not in 0..p-1"):
        JacPoint(G.x + secp256k1.p, G.y, 1, secp256k1)
    assert secp256k1.point(G.x + secp256k1.p, G.y) == G


def test_affine_extraction() -> None:
    ec = ec23_31
    for q in range(1, ec.n):
        Q = mult_jac(q, ec.G, ec)
        x, y = Q.aff()
        assert 0 <= x < ec.p
        assert 0 <= y < ec.p
        assert Q.x_aff() == ec.div(Q.x, Q.z * Q.z)
        assert Q.y_aff() == ec.div(Q.y, Q.z * Q.z * Q.z)
        assert ec.jac_equality(Q, ec.point(x, y))
