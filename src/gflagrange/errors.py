# This file is part of the gflagrange project
#
# Copyright (c) 2019-2026 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""Error types and shared precondition checks.

ModulusMismatch and NoInverse signal programming errors (a value from
the wrong field, a duplicate x coordinate) and are not meant to be
handled. InvalidInput is raised for malformed external input to the
interpolation functions and is expected to be caught by callers.
"""

from typing import Any


class ModulusMismatch(AssertionError):
    pass


class NoInverse(ZeroDivisionError):
    pass


class InvalidInput(ValueError):
    pass


def check_modulus(modulus: int) -> int:
    # NOTE mb: Primality is not checked here. Operations are implemented
    #   with the assumption that modulus is prime (or at least that every
    #   divisor is coprime to it), see primes.is_probable_prime.
    if isinstance(modulus, bool) or not isinstance(modulus, int):
        raise TypeError(f"Invalid modulus={modulus!r}, must be an int")
    if modulus < 2:
        raise ValueError(f"Invalid modulus={modulus}, must be > 1")
    return modulus


def check_same_modulus(first: Any, *rest: Any) -> int:
    """Return the modulus shared by all arguments.

    Arguments can be anything with a .modulus attribute (GFP, Poly).
    """
    modulus = first.modulus
    for other in rest:
        if other.modulus != modulus:
            errmsg = f"modulus mismatch: {modulus} != {other.modulus}"
            raise ModulusMismatch(errmsg)
    return modulus
