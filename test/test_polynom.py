import random

import pytest

from gflagrange.gf import Field
from gflagrange.gf import GFP
from gflagrange.errors import ModulusMismatch
from gflagrange.polynom import *


def alt_eval(coeffs, p):
    """An alternative implementation of eval for validation.

    https://en.wikipedia.org/wiki/Shamir%27s_Secret_Sharing
    """

    def eval_fn(x):
        return sum(coeff * x ** exp for exp, coeff in enumerate(coeffs)) % p

    return eval_fn


def vals_of(poly):
    """Plain int coefficients of the canonical form of poly."""
    return [coeff.val for coeff in poly.shrink().coeffs]


def test_poly_init():
    poly = Poly.from_ints([2, 5, 9], modulus=7)
    assert poly.modulus == 7
    assert vals_of(poly) == [2, 5, 2]
    assert len(poly) == 3
    assert list(poly) == [GFP(2, 7), GFP(5, 7), GFP(2, 7)]

    with pytest.raises(ModulusMismatch):
        Poly([GFP(1, 7), GFP(1, 11)], modulus=7)


def test_degree():
    assert Poly.from_ints([1, 2, 3], 7).degree == 2
    assert Poly.from_ints([1, 2, 0, 0], 7).degree == 1
    assert Poly.from_ints([5], 7).degree == 0
    assert Poly.from_ints([0, 7, 14], 7).degree == -1
    assert Poly.from_ints([], 7).degree == -1
    assert Poly.zero(7).degree == -1

    assert Poly.zero(7).is_zero()
    assert Poly.from_ints([], 7).is_zero()
    assert not Poly.from_ints([0, 1], 7).is_zero()


def test_coeff_at():
    poly = Poly.from_ints([1, 2], 7)
    assert poly.coeff_at(0) == GFP(1, 7)
    assert poly.coeff_at(1) == GFP(2, 7)
    assert poly.coeff_at(2) == GFP(0, 7)
    assert poly.coeff_at(1000) == GFP(0, 7)
    # reading beyond the end doesn't grow the coefficients
    assert len(poly) == 2

    with pytest.raises(IndexError):
        poly.coeff_at(-1)


def test_leading_coeff():
    assert Poly.from_ints([1, 2, 3, 0], 7).leading_coeff == GFP(3, 7)
    assert Poly.zero(7).leading_coeff == GFP(0, 7)
    assert Poly.from_ints([], 7).leading_coeff == GFP(0, 7)


def test_shrink():
    poly = Poly.from_ints([1, 2, 0, 0], 7)
    assert vals_of(poly) == [1, 2]
    assert len(poly.shrink()) == 2
    assert len(poly.shrink().shrink()) == 2

    zero = Poly.from_ints([0, 0, 0], 7).shrink()
    assert len(zero) == 1
    assert zero.coeffs[0].is_zero()

    empty = Poly.from_ints([], 7).shrink()
    assert len(empty) == 1
    assert empty == Poly.zero(7)


def test_eval():
    # 1 + x + 4x² + 5x³ + x⁴ + 4x⁵
    poly = Poly.from_ints([1, 1, 4, 5, 1, 4], modulus=7)
    assert poly(GFP(1, 7)) == GFP(2, 7)
    assert poly(GFP(6, 7)) == GFP(3, 7)
    assert poly.eval_at(6) == GFP(3, 7)

    assert Poly.zero(7)(3) == GFP(0, 7)

    with pytest.raises(ModulusMismatch):
        poly(GFP(1, 11))


def test_eval_fuzz():
    for p in [7, 11, 257, 2 ** 61 - 1]:
        coeffs = [random.randrange(p) for _ in range(random.randint(1, 9))]
        poly   = Poly.from_ints(coeffs, p)
        e      = alt_eval(coeffs, p)
        for _ in range(10):
            x = random.randrange(p)
            assert poly(x).val == e(x)


def test_add_sub():
    poly1 = Poly.from_ints([1, 1, 4, 5, 1, 4], 7)
    poly2 = Poly.from_ints([1, 9, 1, 9, 8, 1, 0], 7)

    assert vals_of(poly1 + poly2) == [2, 3, 5, 0, 2, 5]
    assert poly1 + poly2 == poly2 + poly1
    assert (poly1 + poly2) - poly2 == poly1
    assert -poly1 + poly2 == poly2 - poly1

    a = Poly.from_ints([2, 2], 3)
    b = Poly.from_ints([1, 2], 3)
    assert (a + b) - b == a

    # leading terms cancel
    c = Poly.from_ints([1, 2, 3], 7)
    d = Poly.from_ints([1, 1, 3], 7)
    assert (c - d).degree == 1
    assert len(c - d) == 2
    assert (c - c).is_zero()
    assert len(c - c) == 1


def test_mul():
    a = Poly.from_ints([2, 2], 7)
    b = Poly.from_ints([1, 2], 7)
    c = Poly.from_ints([2, 2 + 4, 4], 7)
    assert a * b == c
    assert b * a == c

    zero = Poly.zero(7)
    assert (a * zero).is_zero()
    assert len(a * zero) == 1
    assert (Poly.from_ints([], 7) * a) == zero


def test_mul_eval():
    poly1 = Poly.from_ints([1, 1, 4, 5, 1, 4], 7)
    poly2 = Poly.from_ints([1, 9, 1, 9, 8, 1, 0], 7)
    poly4 = poly1 * poly2
    assert poly4.degree == poly1.degree + poly2.degree

    for x in range(7):
        assert poly4(x) == poly1(x) * poly2(x)


def test_divmod():
    poly1 = Poly.from_ints([1, 1, 4, 5, 1, 4], 7)
    poly2 = Poly.from_ints([1, 9, 1, 9, 8, 1, 0], 7)
    poly4 = poly1 * poly2

    quotient, remainder = divmod(poly4, poly1)
    assert quotient == poly2
    assert remainder.is_zero()

    poly5 = poly4 // poly1
    poly6 = poly4 % poly1
    assert poly5 == quotient
    assert poly6 == remainder

    # non exact division
    num = poly4 + Poly.from_ints([3, 1], 7)
    q, r = divmod(num, poly1)
    assert q == poly2
    assert r == Poly.from_ints([3, 1], 7)
    for x in range(7):
        assert num(x) == poly1(x) * q(x) + r(x)


def test_divmod_small_dividend():
    dividend = Poly.from_ints([3, 4], 7)
    divisor  = Poly.from_ints([1, 2, 3], 7)
    q, r = divmod(dividend, divisor)
    assert q == Poly.zero(7)
    assert q.degree == -1
    assert r == dividend

    q, r = divmod(Poly.zero(7), divisor)
    assert q.is_zero()
    assert r.is_zero()


def test_divmod_by_constant():
    dividend = Poly.from_ints([3, 4, 5], 7)
    divisor  = Poly.from_ints([2], 7)
    q, r = divmod(dividend, divisor)
    assert r.is_zero()
    assert q * divisor == dividend


def test_divide_by_zero():
    poly = Poly.from_ints([1, 2], 7)
    with pytest.raises(ZeroDivisionError):
        divmod(poly, Poly.zero(7))
    with pytest.raises(ZeroDivisionError):
        poly // Poly.from_ints([0, 0], 7)


def test_modulus_mismatch():
    a = Poly.from_ints([1, 2], 7)
    b = Poly.from_ints([1, 2], 11)
    for op in [
        lambda: a + b,
        lambda: a - b,
        lambda: a * b,
        lambda: divmod(a, b),
    ]:
        with pytest.raises(ModulusMismatch):
            op()

    assert a != b


def test_equality():
    a = Poly.from_ints([1, 2, 0, 0], 7)
    b = Poly.from_ints([1, 2], 7)
    assert a == b
    assert hash(a) == hash(b)
    assert Poly.from_ints([1, 2, 3], 7) != b
    assert Poly.from_ints([1, 3], 7) != b
    assert Poly.from_ints([0, 0], 7) == Poly.zero(7)


def test_repr_str():
    poly = Poly.from_ints([1, 5, 3], 11)
    assert repr(poly) == "Poly([1, 5, 3], p=11)"
    assert str(poly) == "Poly[0]: 1 (mod 11)\nPoly[1]: 5 (mod 11)\nPoly[2]: 3 (mod 11)"


def test_field_poly():
    field = Field(11)
    assert field.poly(1, 5, 3) == Poly.from_ints([1, 5, 3], 11)


def test_random_poly():
    for degree in range(6):
        poly = Poly.random(degree, 7)
        assert poly.degree == degree
        assert len(poly) == degree + 1

    # a source which returns zero twice before a non-zero value
    vals = iter([4, 0, 0, 0, 3])

    def _randrange(stop):
        return next(vals)

    poly = Poly.random(1, 7, _randrange)
    assert vals_of(poly) == [4, 3]

    with pytest.raises(ValueError):
        Poly.random(-1, 7)


@pytest.mark.parametrize("modulus", [7, 65521, 2 ** 127 - 1])
def test_divmod_roundtrip_fuzz(modulus):
    for _ in range(20):
        a = Poly.random(random.randint(0, 8), modulus)
        b = Poly.random(random.randint(0, 8), modulus)

        q, r = divmod(a * b, b)
        assert q == a
        assert r.is_zero()

        q, r = divmod(a, b)
        assert r.degree < b.degree
        assert q * b + r == a
