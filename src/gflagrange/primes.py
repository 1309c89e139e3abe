# This file is part of the gflagrange project
#
# Copyright (c) 2019-2026 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""Prime moduli for gflagrange.gf.Field.

Arithmetic in this package doesn't check that a modulus is prime, this
module only helps with choosing one and with catching mistakes.
"""

import random
from typing import Set
from typing import Dict
from typing import Iterable

Pow2PrimeN = int
Pow2PrimeK = int

# 2**n - k is the largest prime below 2**n
# https://oeis.org/A014234
POW2_PRIME_PARAMS: Dict[Pow2PrimeN, Pow2PrimeK] = {
    8  : 5,
    16 : 15,
    24 : 3,
    32 : 5,
    40 : 87,
    48 : 59,
    56 : 5,
    64 : 59,
    72 : 93,
    80 : 65,
    88 : 299,
    96 : 17,
    104: 17,
    112: 75,
    120: 119,
    128: 159,
    136: 113,
    144: 83,
    152: 17,
    160: 47,
    168: 257,
    176: 233,
    184: 33,
    192: 237,
    200: 75,
    208: 299,
    216: 377,
    224: 63,
    232: 567,
    240: 467,
    248: 237,
    256: 189,
}


def pow2prime(n: Pow2PrimeN, k: Pow2PrimeK) -> int:
    if n % 8 == 0:
        return 2 ** n - k
    else:
        raise ValueError(f"Invalid n={n} (n % 8 != 0)")


POW2_PRIMES = [pow2prime(n, k) for n, k in sorted(POW2_PRIME_PARAMS.items())]


WELL_KNOWN_MODULI: Dict[str, int] = {
    'm61' : 2 ** 61 - 1,
    'm127': 2 ** 127 - 1,
    # base field of the BLS12-381 curve
    'bls12_381': int(
        "1a0111ea397fe69a4b1ba7b6434bacd764774b84f38512bf"
        "6730d2a0f6b0f6241eabfffeb153ffffb9feffffffffaaab",
        16,
    ),
}


SMALL_PRIMES = [
    2,   3,   5,   7,  11,  13,  17,  19,  23,  29,  31,  37,  41,
    43,  47,  53,  59,  61,  67,  71,  73,  79,  83,  89,  97, 101,
]


def get_pow2prime(num_bits: int) -> int:
    """Largest prime below 2**num_bits."""
    if num_bits % 8 != 0:
        err = f"Invalid num_bits={num_bits}, not a multiple of 8"
        raise ValueError(err)

    if num_bits in POW2_PRIME_PARAMS:
        return pow2prime(num_bits, POW2_PRIME_PARAMS[num_bits])

    err = f"Invalid num_bits={num_bits}, no known 2**n-k primes"
    raise ValueError(err)


# Jim Sinclair
_mr_js_bases = {2, 325, 9375, 28178, 450775, 9780504, 1795265022}


def _miller_test_bases(n: int, accuracy: int = 100) -> Iterable[int]:
    if n < 2 ** 64:
        return _mr_js_bases
    else:
        random_bases: Set[int] = {random.randrange(2, n - 1) for _ in range(accuracy)}
        return _mr_js_bases | set(SMALL_PRIMES[:13]) | random_bases


def _is_composite(n: int, r: int, x: int) -> bool:
    for _ in range(r - 1):
        x = pow(x, 2, n)
        if x == n - 1:
            return False
    return True


def is_probable_prime(n: int) -> bool:
    """Miller-Rabin test, deterministic for n < 2**64."""
    if n < 2:
        return False

    # Early exit for small factors
    for p in SMALL_PRIMES:
        if n == p:
            return True
        if n % p == 0:
            return False

    r = 0
    d = n - 1
    while d % 2 == 0:
        r += 1
        d //= 2

    for a in _miller_test_bases(n):
        a = a % n
        if a in (0, 1, n - 1):
            continue
        x = pow(a, d, n)
        if x not in (1, n - 1) and _is_composite(n, r, x):
            return False

    return True


def parse_modulus(raw: str) -> int:
    """Parse a modulus given as name, decimal or 0x-prefixed hex string."""
    raw = raw.strip()
    if raw.lower() in WELL_KNOWN_MODULI:
        return WELL_KNOWN_MODULI[raw.lower()]

    try:
        return int(raw, 0)
    except ValueError:
        names  = ", ".join(sorted(WELL_KNOWN_MODULI))
        errmsg = f"Invalid modulus '{raw}', expected an integer or one of: {names}"
        raise ValueError(errmsg)
