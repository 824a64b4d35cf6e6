#!/usr/bin/env python3

# Copyright (C) 2026 The ecjacobi developers
#
# This file is part of ecjacobi. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecjacobi including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The three base classes are only meant to discriminate between Exceptions
raised by ecjacobi from those raised by other codebase:
users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError from which they are derived.

The specialized classes name the failures a caller may want
to handle individually.
"""


class ECJacobiValueError(ValueError):
    pass


class ECJacobiTypeError(TypeError):
    pass


class ECJacobiRuntimeError(RuntimeError):
    pass


class InverseNotFoundError(ECJacobiValueError):
    "gcd(a, m) != 1: a has no multiplicative inverse mod m."


class InvalidBitLengthError(ECJacobiValueError):
    "Random bits requested in a number which is not a multiple of 8."


class PointNotOnCurveError(ECJacobiValueError):
    "An explicitly requested membership check failed."


class UnsupportedScalarError(ECJacobiValueError):
    "Negative or non-integer scalar in scalar multiplication."


class EntropySourceError(ECJacobiRuntimeError):
    "The entropy source failed or returned an unexpected number of bytes."
