# This file is part of the gflagrange project
#
# Copyright (c) 2019-2026 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""Lagrange interpolation over prime fields.

Helpful introduction: https://www.youtube.com/watch?v=kkMps3X_tEE
(Simple introduction to Shamir's Secret Sharing and Lagrange interpolation)

A helpful introduction to Galois Fields:
https://crypto.stackexchange.com/a/2718

Given n points with distinct x coordinates, there is exactly one
polynomial of degree <= n - 1 which passes through all of them. With

    M(x)   = Π (x - x_j)          for all j
    m_i(x) = M(x) / (x - x_i)     == Π (x - x_j) for j != i

the polynomial is

    f(x) = Σ y_i * m_i(x) / m_i(x_i)

Each term is y_i at x_i and zero at every other x_j.
"""

import logging
from typing import Union
from typing import Iterator
from typing import Sequence

from . import gf
from . import errors
from . import polynom

logger = logging.getLogger("gflagrange.gf_poly")


class Point:

    x: gf.GFP
    y: gf.GFP

    __slots__ = ('x', 'y')

    def __init__(self, x: gf.GFP, y: gf.GFP) -> None:
        self.x = x
        self.y = y

    @staticmethod
    def from_ints(x: int, y: int, modulus: int) -> 'Point':
        return Point(gf.GFP(x, modulus), gf.GFP(y, modulus))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Point):
            return self.x == other.x and self.y == other.y
        else:
            return NotImplemented

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __repr__(self) -> str:
        return f"Point(x={self.x}, y={self.y})"

    def __iter__(self) -> Iterator[gf.GFP]:
        yield self.x
        yield self.y


Points = Sequence[Point]


def prod(vals: Sequence[gf.GFP]) -> gf.GFP:
    """Product of numbers.

    This is sometimes also denoted by Π (upper case PI).
    """
    if len(vals) == 0:
        # If we knew the field, we could return field[1]
        raise ValueError("prod requires at least one value")

    accu = vals[0]
    for val in vals[1:]:
        accu *= val
    return accu


def _validated_modulus(points: Points) -> int:
    if len(points) == 0:
        raise errors.InvalidInput("at least one point required")

    modulus = points[0].x.modulus
    for i, p in enumerate(points):
        if p.x.modulus != modulus or p.y.modulus != modulus:
            errmsg = (
                f"modulus mismatch for point {i}: {p}, expected "
                f"both coordinates with modulus {modulus}"
            )
            raise errors.InvalidInput(errmsg)
    return modulus


def _root_factor(x: gf.GFP) -> polynom.Poly:
    # (x - x_i) as a polynomial: -x_i + 1x¹
    return polynom.Poly([-x, gf.GFP(1, x.modulus)], x.modulus)


def interpolate(points: Points) -> polynom.Poly:
    """Polynomial of minimal degree through all points.

    Raises errors.InvalidInput for an empty list of points or if the
    points are not all from the same field. Duplicate x coordinates are
    not validated, they cause an errors.NoInverse.
    """
    modulus = _validated_modulus(points)
    logger.debug(f"interpolate {len(points)} points (mod {modulus})")

    factors = [_root_factor(p.x) for p in points]

    master = polynom.Poly([gf.GFP(1, modulus)], modulus)
    for factor in factors:
        master = master * factor

    result = polynom.Poly.zero(modulus)
    for p, factor in zip(points, factors):
        # exact division, factor is one of the roots of master
        basis = master // factor
        denum = basis.eval_at(p.x)
        scale = polynom.Poly([p.y / denum], modulus)
        result = result + scale * basis

    logger.debug(f"interpolated polynomial of degree {result.degree}")
    return result


def _interpolation_terms(points: Points, at_x: gf.GFP) -> Iterator[gf.GFP]:
    for i, p in enumerate(points):
        others = points[:i] + points[i + 1 :]
        assert len(others) == len(points) - 1

        if len(others) == 0:
            yield p.y
            continue

        numer = prod([at_x - o.x for o in others])
        denum = prod([p.x  - o.x for o in others])

        yield (p.y * numer) / denum


def interpolate_at(points: Points, at_x: Union[gf.GFP, int]) -> gf.GFP:
    r"""Interpolate y value at x without constructing the polynomial.

    # \delta_i(x) = \prod{ \frac{x - j}{i - j} }
    # \space
    # \text{for} \space j \in C, j \not= i
    """
    modulus = _validated_modulus(points)
    if not isinstance(at_x, gf.GFP):
        at_x = gf.GFP(at_x, modulus)
    if at_x.modulus != modulus:
        raise errors.InvalidInput(f"modulus mismatch for at_x={at_x}")

    terms = iter(_interpolation_terms(tuple(points), at_x=at_x))
    accu  = next(terms)
    for term in terms:
        accu += term
    return accu
