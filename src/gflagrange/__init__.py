# This file is part of the gflagrange project
#
# Copyright (c) 2019-2026 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT
"""gflagrange: Lagrange interpolation over prime fields.

A cli app and library for exact polynomial arithmetic in GF(p).
"""

__version__ = "2026.1019-beta"
