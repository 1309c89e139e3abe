#!/usr/bin/env python
# This file is part of the gflagrange project
#
# Copyright (c) 2019-2026 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT
"""
__main__ module for gflagrange.

Enables use as module: $ python -m gflagrange
"""


if __name__ == '__main__':
    from . import cli

    cli.cli()
