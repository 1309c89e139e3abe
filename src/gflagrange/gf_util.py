# This file is part of the gflagrange project
#
# Copyright (c) 2019-2026 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""Integer helpers for prime field arithmetic."""

from typing import NamedTuple

from . import errors

# The extended Euclidean algorithm computes, besides gcd(a, b), the
# coefficients of Bézout's identity
#
#   s * a + t * b == gcd(a, b)
#
# For b == p (prime) and 0 < a < p we have gcd(a, p) == 1, so
#
#   s * a + t * p == 1
#   s * a         == 1  (mod p)
#
# and s is the multiplicative inverse of a. The number of loop
# iterations grows with the bit length of the arguments, so xgcd must
# not recurse.


class XGCDResult(NamedTuple):
    g: int
    s: int  # sometimes called x
    t: int  # sometimes called y


def xgcd(a: int, b: int) -> XGCDResult:
    """Extended euclidien greatest common denominator."""
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1

    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t

    res = XGCDResult(g=old_r, s=old_s, t=old_t)
    assert res.s * a + res.t * b == res.g
    return res


def mod_inverse(val: int, modulus: int) -> int:
    """Multiplicative inverse of val in the integers modulo modulus.

    Raises NoInverse if gcd(val, modulus) != 1, in particular for val == 0.
    """
    val = val % modulus
    if val == 0:
        raise errors.NoInverse(f"0 has no inverse (mod {modulus})")

    res = xgcd(val, modulus)
    if res.g != 1:
        errmsg = f"{val} has no inverse (mod {modulus}), gcd={res.g}"
        raise errors.NoInverse(errmsg)

    return res.s % modulus
