#!/usr/bin/env python3

# Copyright (C) 2026 The ecjacobi developers
#
# This file is part of ecjacobi. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecjacobi including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecjacobi.utils` module."

import pytest

from ecjacobi.exceptions import ECJacobiValueError
from ecjacobi.utils import (
    hex_from_int,
    hex_string,
    int_from_hex,
    int_from_integer,
    int_repr,
)


def test_int_from_hex() -> None:
    assert int_from_hex("deadbeef") == 0xDEADBEEF
    assert int_from_hex("DEADBEEF") == 0xDEADBEEF
    assert int_from_hex("dead beef") == 0xDEADBEEF
    assert int_from_hex(" de ad\tbe\nef ") == 0xDEADBEEF
    assert int_from_hex("0xdeadbeef") == 0xDEADBEEF
    assert int_from_hex("0") == 0
    assert int_from_hex(
        "FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFE FFFFFC2F"
    ) == (2**256 - 2**32 - 977)

    assert int_from_hex("0XDEADBEEF") == 0xDEADBEEF

    # no signs, no underscores
    for hexstr in (
        "",
        "   ",
        "xyz",
        "0x",
        "dead_beef",
        "-ff",
        "+ff",
        "0x-ff",
        "0x0x1",
    ):
        with pytest.raises(ECJacobiValueError, match="invalid hex-string: "):
            int_from_hex(hexstr)


def test_hex_from_int() -> None:
    assert hex_from_int(0) == "0"
    assert hex_from_int(10) == "a"
    assert hex_from_int(0xDEADBEEF) == "deadbeef"
    with pytest.raises(ECJacobiValueError, match="negative integer: "):
        hex_from_int(-1)


def test_int_from_integer() -> None:
    for i in (
        0xDEADBEEF,
        "0xdeadbeef",
        "deadbeef",
        "dead beef",
        " DEADBEEF ",
        b"\xde\xad\xbe\xef",
    ):
        assert int_from_integer(i) == 0xDEADBEEF
    assert int_from_integer(-0xDEADBEEF) == -0xDEADBEEF
    assert int_from_integer("-0xdeadbeef") == -0xDEADBEEF
    with pytest.raises(ECJacobiValueError, match="invalid hex-string: "):
        int_from_integer("--ff")


def test_hex_string() -> None:
    assert hex_string(0) == "00"
    assert hex_string(0xB) == "0B"
    assert hex_string(0xDEADBEEF) == "DEADBEEF"
    assert hex_string(0x1DEADBEEF) == "01 DEADBEEF"
    assert int_from_hex(hex_string(2**256 - 1)) == 2**256 - 1
    with pytest.raises(ECJacobiValueError, match="negative integer: "):
        hex_string(-1)


def test_int_repr() -> None:
    assert int_repr(7) == "7"
    assert int_repr(0xFFFFFFFF) == f"{0xFFFFFFFF}"
    assert int_repr(0x100000000) == "'01 00000000'"
