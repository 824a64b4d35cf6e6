#!/usr/bin/env python3

# Copyright (C) 2026 The ecjacobi developers
#
# This file is part of ecjacobi. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecjacobi including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the ecjacobi package."

name = "ecjacobi"
__version__ = "2026.10.19"
__author__ = "The ecjacobi developers"
__author_email__ = "devs@ecjacobi.org"
__copyright__ = "Copyright (C) 2026 The ecjacobi developers"
__license__ = "MIT License"
