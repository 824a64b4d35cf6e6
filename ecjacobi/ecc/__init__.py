#!/usr/bin/env python3

# Copyright (C) 2026 The ecjacobi developers
#
# This file is part of ecjacobi. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecjacobi including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve arithmetic in Jacobian coordinates.

Modules, leaves first:

* number_theory: half extended Euclid and modular inverse
* field: prime field multiplication, division, exponentiation
* point: the Identity / JacPoint tagged point variants
* curve_group: membership, doubling, addition, scalar multiplication
* curve: prime order curves and the named-curve registry
"""
