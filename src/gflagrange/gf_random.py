# This file is part of the gflagrange project
#
# Copyright (c) 2019-2026 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""Sources of randomness for field elements and polynomials.

Everything that consumes randomness takes a RandRanger, a callable
which returns an int uniformly distributed in [0, stop). The
implementations here are interchangeable.
"""

import os
import random
import hashlib
import logging
import warnings
from typing import Callable
from typing import Optional
from typing import Protocol

import argon2

logger = logging.getLogger("gflagrange.gf_random")


DEBUG_RANDOM_ENVVAR = 'GFLAGRANGE_DEBUG_RANDOM'

DEBUG_WARN_MSG = "Warning, using debug random! This should only happen when debugging or testing."


def _is_debug_random() -> bool:
    return os.getenv(DEBUG_RANDOM_ENVVAR) == 'DANGER'


class RandRanger(Protocol):
    def __call__(self, stop: int) -> int:
        ...


class DebugRandom:

    _state: int

    def __init__(self) -> None:
        self._state = 4294967291

    def randrange(self, stop: int) -> int:
        # The state is kept far below typical moduli, so multiple
        # steps are combined for large values of stop.
        val = 0
        for _ in range(stop.bit_length() // 63 + 1):
            self._state = (self._state + 4294967291) % (2 ** 63)
            val         = (val << 63) | self._state
        return val % stop


_debug_rand = DebugRandom()
_rand       = random.SystemRandom()


def reset_debug_random() -> None:
    if _is_debug_random():
        _debug_rand._state = 4294967291


def randrange(stop: int) -> int:
    """Cryptographically strong random int in [0, stop)."""
    if _is_debug_random():
        warnings.warn(DEBUG_WARN_MSG)
        result = _debug_rand.randrange(stop)
    else:
        result = _rand.randrange(stop)
    assert isinstance(result, int)
    return result


class PseudoRandom:
    """General purpose (non cryptographic) source, reproducible from a seed."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rand = random.Random(seed)

    def __call__(self, stop: int) -> int:
        return self._rand.randrange(stop)


def argon2digest(data: bytes, hash_len: int = 1024) -> bytes:
    if len(data) < 8:
        data += b"\x00" * (8 - len(data))

    return argon2.low_level.hash_secret_raw(
        secret=data,
        salt=data,
        hash_len=hash_len,
        parallelism=1,
        memory_cost=512,
        time_cost=2,
        type=argon2.low_level.Type.ID,
    )


def sha256digest(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


HashFn = Callable[[bytes], bytes]


class CryptoRandom:
    """Deterministic random stream derived from seed data.

    The same data (and hashfn) always produce the same sequence, which
    makes it possible to reproduce a random polynomial from a seed.
    """

    def __init__(self, data: bytes, hashfn: HashFn = argon2digest) -> None:
        self.data   = data
        self.state  = b""
        self.hashfn = hashfn

    def randbytes(self, n: int) -> bytes:
        while len(self.state) < max(n, 32):
            self.state += self.hashfn(self.state[-32:] + self.data)
        result     = self.state[:n]
        self.state = self.state[n:]
        return result

    def randrange(self, startstop: int, stop: Optional[int] = None) -> int:
        if stop is None:
            start = 0
            stop  = startstop
        else:
            start = startstop

        mod = stop - start
        if mod <= 0:
            raise ValueError(f"empty range for randrange({start}, {stop})")

        # 64 extra bits keep the modulo bias negligible
        num_bytes = (mod.bit_length() + 7) // 8 + 8
        result    = int.from_bytes(self.randbytes(num_bytes), "big")
        return start + (result % mod)

    def __call__(self, stop: int) -> int:
        return self.randrange(stop)


def init_randrange(seed: Optional[bytes] = None) -> RandRanger:
    if seed is None:
        if _is_debug_random():
            reset_debug_random()

        return randrange
    else:
        logger.debug(f"Using deterministic random source, seed length={len(seed)}")
        return CryptoRandom(seed)
