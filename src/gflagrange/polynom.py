# This file is part of the gflagrange project
#
# Copyright (c) 2019-2026 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""Dense polynomials over a prime field.

The coefficients of a polynomial are ordered in ascending powers of x,
so Poly.from_ints([2, 5, 3], p) represents 2x° + 5x¹ + 3x².

The zero polynomial has degree -1 (rather than -∞) and its canonical
form is a single zero coefficient. All arithmetic uses the schoolbook
algorithms, i.e. multiplication and division are O(n*m).
"""

from typing import Tuple
from typing import Union
from typing import Iterable
from typing import Iterator
from typing import Optional

from . import gf
from . import errors
from . import gf_random

Coefficients = Tuple[gf.GFP, ...]


class Poly:

    modulus: int
    coeffs : Coefficients

    __slots__ = ('modulus', 'coeffs')

    def __init__(self, coeffs: Iterable[gf.GFP], modulus: int) -> None:
        self.modulus = errors.check_modulus(modulus)
        self.coeffs  = tuple(coeffs)
        for coeff in self.coeffs:
            errors.check_same_modulus(self, coeff)

    @staticmethod
    def from_ints(vals: Iterable[int], modulus: int) -> 'Poly':
        return Poly((gf.GFP(val, modulus) for val in vals), modulus)

    @staticmethod
    def zero(modulus: int) -> 'Poly':
        return Poly([gf.GFP(0, modulus)], modulus)

    @staticmethod
    def random(
        degree   : int,
        modulus  : int,
        randrange: Optional[gf_random.RandRanger] = None,
    ) -> 'Poly':
        """Random polynomial with a degree of exactly `degree`.

        The top coefficient is chosen again until it is non-zero.
        """
        if degree < 0:
            raise ValueError(f"Invalid degree={degree}, must be >= 0")

        field  = gf.Field(modulus)
        coeffs = [field.random(randrange) for _ in range(degree + 1)]
        while coeffs[degree].is_zero():
            coeffs[degree] = field.random(randrange)
        return Poly(coeffs, modulus)

    def _zero_coeff(self) -> gf.GFP:
        return gf.GFP(0, self.modulus)

    @property
    def degree(self) -> int:
        d = len(self.coeffs) - 1
        while d >= 0 and self.coeffs[d].is_zero():
            d -= 1
        return d

    def is_zero(self) -> bool:
        return self.degree == -1

    def coeff_at(self, index: int) -> gf.GFP:
        """Coefficient of x**index.

        The coefficients are conceptually padded with an infinite number
        of zeros, so any index beyond the stored coefficients is valid.
        """
        if 0 <= index < len(self.coeffs):
            return self.coeffs[index]
        elif index < 0:
            raise IndexError(f"Invalid index={index}")
        else:
            return self._zero_coeff()

    @property
    def leading_coeff(self) -> gf.GFP:
        degree = self.degree
        if degree == -1:
            return self._zero_coeff()
        else:
            return self.coeffs[degree]

    def shrink(self) -> 'Poly':
        """Poly without trailing zero coefficients (at least one is kept)."""
        length = max(self.degree + 1, 1)
        if length == len(self.coeffs):
            return self
        elif length == 1 and not self.coeffs:
            return Poly.zero(self.modulus)
        else:
            return Poly(self.coeffs[:length], self.modulus)

    def __add__(self, other: 'Poly') -> 'Poly':
        if not isinstance(other, Poly):
            return NotImplemented
        modulus = errors.check_same_modulus(self, other)
        length  = max(len(self.coeffs), len(other.coeffs))
        coeffs  = [self.coeff_at(i) + other.coeff_at(i) for i in range(length)]
        return Poly(coeffs, modulus).shrink()

    def __sub__(self, other: 'Poly') -> 'Poly':
        if not isinstance(other, Poly):
            return NotImplemented
        modulus = errors.check_same_modulus(self, other)
        length  = max(len(self.coeffs), len(other.coeffs))
        coeffs  = [self.coeff_at(i) - other.coeff_at(i) for i in range(length)]
        return Poly(coeffs, modulus).shrink()

    def __neg__(self) -> 'Poly':
        return Poly([-coeff for coeff in self.coeffs], self.modulus)

    def __mul__(self, other: 'Poly') -> 'Poly':
        if not isinstance(other, Poly):
            return NotImplemented
        modulus = errors.check_same_modulus(self, other)

        # The convolution below relies on degree >= 0
        if self.is_zero() or other.is_zero():
            return Poly.zero(modulus)

        deg_a = self.degree
        deg_b = other.degree

        zero   = self._zero_coeff()
        coeffs = [zero] * (deg_a + deg_b + 1)
        for i in range(deg_a + 1):
            coeff_a = self.coeffs[i]
            if coeff_a.is_zero():
                continue
            for j in range(deg_b + 1):
                coeffs[i + j] = coeffs[i + j] + coeff_a * other.coeffs[j]

        return Poly(coeffs, modulus).shrink()

    def __divmod__(self, divisor: 'Poly') -> Tuple['Poly', 'Poly']:
        """Polynomial long division, returns (quotient, remainder)."""
        if not isinstance(divisor, Poly):
            return NotImplemented
        modulus = errors.check_same_modulus(self, divisor)

        if divisor.is_zero():
            raise ZeroDivisionError("polynomial division by zero")

        n = self.degree
        m = divisor.degree

        if n < m:
            return (Poly.zero(modulus), self)

        lead_inv = divisor.leading_coeff.inverse()

        quotient  = [self._zero_coeff()] * (n - m + 1)
        remainder = list(self.coeffs[: n + 1])

        # Each step eliminates the current top term of the remainder.
        for i in range(n - m, -1, -1):
            q_coeff     = remainder[i + m] * lead_inv
            quotient[i] = q_coeff
            if q_coeff.is_zero():
                continue
            for j in range(m + 1):
                remainder[i + j] = remainder[i + j] - q_coeff * divisor.coeffs[j]

        return (Poly(quotient, modulus).shrink(), Poly(remainder, modulus).shrink())

    def __floordiv__(self, divisor: 'Poly') -> 'Poly':
        quotient, _ = divmod(self, divisor)
        return quotient

    def __mod__(self, divisor: 'Poly') -> 'Poly':
        _, remainder = divmod(self, divisor)
        return remainder

    def eval_at(self, at_x: Union[gf.GFP, int]) -> gf.GFP:
        """Evaluate polynomial at x using Horner's method."""
        if isinstance(at_x, gf.GFP):
            errors.check_same_modulus(self, at_x)
            x = at_x
        else:
            x = gf.GFP(at_x, self.modulus)

        result = self._zero_coeff()
        for i in range(self.degree, -1, -1):
            result = result * x + self.coeffs[i]
        return result

    def __call__(self, x: Union[gf.GFP, int]) -> gf.GFP:
        return self.eval_at(x)

    def __iter__(self) -> Iterator[gf.GFP]:
        return iter(self.coeffs)

    def __len__(self) -> int:
        return len(self.coeffs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Poly):
            return NotImplemented
        if self.modulus != other.modulus:
            return False

        a = self.shrink().coeffs
        b = other.shrink().coeffs
        return len(a) == len(b) and all(ca == cb for ca, cb in zip(a, b))

    def __hash__(self) -> int:
        return hash((self.modulus, tuple(c.val for c in self.shrink().coeffs)))

    def __repr__(self) -> str:
        vals = ", ".join(str(coeff.val) for coeff in self.coeffs)
        return f"Poly([{vals}], p={self.modulus})"

    def __str__(self) -> str:
        return "\n".join(f"Poly[{i}]: {coeff}" for i, coeff in enumerate(self.coeffs))
