# This file is part of the gflagrange project
#
# Copyright (c) 2019-2026 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""Prime field element type and API.

Elements of GF(p) are represented by GFP instances. The modulus is an
arbitrary sized python int. Instances are immutable, every operation
returns a new GFP. Operations between elements of different fields
raise errors.ModulusMismatch, since mixing fields is always a
programming error.

    >>> field = Field(11)
    >>> field[7] + field[5]
    GFP(1, p=11)
    >>> field[3] / field[2]
    GFP(7, p=11)
"""

import functools
from typing import Union
from typing import Optional

from . import errors
from . import gf_util
from . import gf_random

Operand = Union['GFP', int]


@functools.total_ordering
class GFP:

    val    : int
    modulus: int

    __slots__ = ('val', 'modulus')

    def __init__(self, val: int, modulus: int) -> None:
        # NOTE mb: In practice modulus is always prime, and division is
        #   implemented with this assumtion. If it were not prime, then a
        #   multiplicative inverse would not exist in all cases.
        self.modulus = errors.check_modulus(modulus)
        self.val     = val % modulus

    def _new_gf(self, val: int) -> 'GFP':
        # Mod p is done so often as a last operation on val,
        # so we do it here as part of the initialisation.
        return GFP(val, self.modulus)

    def _coerce(self, other: object) -> Optional['GFP']:
        if isinstance(other, GFP):
            errors.check_same_modulus(self, other)
            return other
        elif isinstance(other, int) and not isinstance(other, bool):
            return self._new_gf(other)
        else:
            return None

    def __add__(self, other: Operand) -> 'GFP':
        _other = self._coerce(other)
        if _other is None:
            return NotImplemented
        return self._new_gf(self.val + _other.val)

    def __radd__(self, other: int) -> 'GFP':
        return self + other

    def __sub__(self, other: Operand) -> 'GFP':
        _other = self._coerce(other)
        if _other is None:
            return NotImplemented
        # adding the modulus first keeps the intermediate value positive
        return self._new_gf(self.modulus + self.val - _other.val)

    def __rsub__(self, other: int) -> 'GFP':
        _other = self._coerce(other)
        if _other is None:
            return NotImplemented
        return _other - self

    def __neg__(self) -> 'GFP':
        if self.val == 0:
            return self
        return self._new_gf(self.modulus - self.val)

    def __mul__(self, other: Operand) -> 'GFP':
        _other = self._coerce(other)
        if _other is None:
            return NotImplemented
        return self._new_gf(self.val * _other.val)

    def __rmul__(self, other: int) -> 'GFP':
        return self * other

    def __pow__(self, exp: Operand) -> 'GFP':
        exp_val = exp.val if isinstance(exp, GFP) else exp
        if exp_val < 0:
            return self.inverse() ** -exp_val
        return self._new_gf(pow(self.val, exp_val, self.modulus))

    def inverse(self) -> 'GFP':
        """Multiplicative inverse, raises errors.NoInverse for zero."""
        return self._new_gf(gf_util.mod_inverse(self.val, self.modulus))

    def __truediv__(self, other: Operand) -> 'GFP':
        _other = self._coerce(other)
        if _other is None:
            return NotImplemented
        return self * _other.inverse()

    def __rtruediv__(self, other: int) -> 'GFP':
        _other = self._coerce(other)
        if _other is None:
            return NotImplemented
        return _other / self

    def is_zero(self) -> bool:
        return self.val == 0

    def _check_int_comparable(self, other: int) -> None:
        if not (0 <= other < self.modulus):
            errmsg = f"GF comparison with integer failed: 0 <= {other} < {self.modulus}"
            raise ValueError(errmsg)

    def __hash__(self) -> int:
        # GFP(5, p) == 5, so the hash must match hash(5)
        return hash(self.val)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True

        if isinstance(other, GFP):
            # moduli are compared by value, two independently constructed
            # but equal moduli describe the same field
            return self.modulus == other.modulus and self.val == other.val

        if isinstance(other, int):
            self._check_int_comparable(other)
            return self.val == other

        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if self is other:
            return False

        if isinstance(other, GFP):
            errors.check_same_modulus(self, other)
            return self.val < other.val

        if isinstance(other, int):
            self._check_int_comparable(other)
            return self.val < other

        return NotImplemented

    def __int__(self) -> int:
        return self.val

    def __repr__(self) -> str:
        return f"GFP({self.val}, p={self.modulus})"

    def __str__(self) -> str:
        return f"{self.val} (mod {self.modulus})"


class Field:
    """Factory for elements (and polynomials) of GF(modulus)."""

    modulus: int

    def __init__(self, modulus: int) -> None:
        # aka. order, aka. characteristic (if prime)
        self.modulus = errors.check_modulus(modulus)

    def __getitem__(self, val: int) -> GFP:
        return GFP(val, self.modulus)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Field) and self.modulus == other.modulus

    def __hash__(self) -> int:
        return hash(self.modulus)

    def __repr__(self) -> str:
        return f"Field({self.modulus})"

    def zero(self) -> GFP:
        return GFP(0, self.modulus)

    def one(self) -> GFP:
        return GFP(1, self.modulus)

    def random(self, randrange: Optional[gf_random.RandRanger] = None) -> GFP:
        """Element chosen uniformly from [0, modulus).

        The randomness source defaults to gf_random.randrange.
        """
        _randrange = gf_random.randrange if randrange is None else randrange
        return GFP(_randrange(self.modulus), self.modulus)

    def poly(self, *vals: int) -> 'polynom.Poly':
        from . import polynom

        return polynom.Poly.from_ints(vals, self.modulus)
