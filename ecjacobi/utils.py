#!/usr/bin/env python3

# Copyright (C) 2026 The ecjacobi developers
#
# This file is part of ecjacobi. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecjacobi including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted conversion utilities.

Hex-string parsing and formatting of integers
at the boundary of the library.
"""

from string import hexdigits

from ecjacobi.alias import HexStr, Integer
from ecjacobi.exceptions import ECJacobiValueError

HEX_THRESHOLD = 0xFFFFFFFF


def int_from_hex(hexstr: HexStr) -> int:
    """Return an int from a hex-string.

    Any whitespace is removed before parsing,
    e.g. "dead beef" and " deadbeef\\n" are both valid.
    A leading "0x" is tolerated; signs and underscores are not.
    """

    cleaned = "".join(hexstr.split())
    if cleaned[:2] in ("0x", "0X"):
        cleaned = cleaned[2:]
    if not cleaned or any(c not in hexdigits for c in cleaned):
        raise ECJacobiValueError(f"invalid hex-string: '{hexstr}'")
    return int(cleaned, 16)


def hex_from_int(i: int) -> str:
    "Return the lowercase hex-string of a non-negative int, without '0x'."

    if i < 0:
        raise ECJacobiValueError(f"negative integer: {i}")
    return format(i, "x")


def int_from_integer(i: Integer) -> int:
    """Return an int from many possible integer representations.

    Allowed integer representations are:

    * 3735928559
    * -3735928559
    * "0xdeadbeef"
    * "-0xdeadbeef"
    * "deadbeef"
    * "dead beef"
    * b'\\xde\\xad\\xbe\\xef'
    """

    if isinstance(i, int):
        return i

    if isinstance(i, str):
        i = i.strip().lower()
        if i.startswith("-"):
            return -int_from_hex(i[1:])
        return int_from_hex(i)

    # must be bytes
    return int.from_bytes(i, "big", signed=False)


def hex_string(i: Integer) -> str:
    """Return a hex-string from many positive integer representations.

    Negative integers are not allowed.

    The resulting hex-string has an even number of hex-digits and
    includes a space every four bytes (i.e. every eight hex-digits).
    """

    int_ = int_from_integer(i)
    if int_ < 0:
        raise ECJacobiValueError(f"negative integer: {int_}")
    a_str = hex(int_)[2:]
    if len(a_str) % 2 != 0:
        a_str = "0" + a_str

    indx = list(reversed(range(len(a_str), 0, -8)))
    lresult = [(a_str[max(0, i - 8) : i]) for i in indx]
    result = " ".join(lresult)
    return result.upper()


def int_repr(i: int) -> str:
    "Return the hex-string of large ints, the decimal string of small ones."
    return f"'{hex_string(i)}'" if i > HEX_THRESHOLD else f"{i}"
