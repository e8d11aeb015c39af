# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import math

import numpy as np

from .exceptions import IntegerOverflowError

# The int64 minimum is left out so negation and abs() stay inside the range.
INT64_MAX: int = int(np.iinfo(np.int64).max)
INT64_MIN: int = -INT64_MAX

DEFAULT_MAX_DENOMINATOR: int = 10**6


def check_int64(value: int, what: str = "value") -> int:
    """Return *value* unchanged, or raise if it leaves the 64-bit range."""
    if value < INT64_MIN or value > INT64_MAX:
        raise IntegerOverflowError(f"{what} {value} does not fit in 64 bits")
    return value


def checked_add(a: int, b: int) -> int:
    return check_int64(a + b, "sum")


def checked_mul(a: int, b: int) -> int:
    return check_int64(a * b, "product")


def checked_neg(a: int) -> int:
    return check_int64(-a, "negation")


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor of |a| and |b|.

    gcd(0, n) is |n| and gcd(0, 0) is 1, so that 0/1 comes out of
    normalisation well formed.
    """
    g = math.gcd(a, b)
    return g if g else 1


def permutation_sign(perm: list[int]) -> int:
    """Return +1 or -1 depending on permutation parity."""
    visited = [False] * len(perm)
    cycles = 0
    for i in range(len(perm)):
        if not visited[i]:
            cycles += 1
            j = i
            while not visited[j]:
                visited[j] = True
                j = perm[j]
    swaps = len(perm) - cycles  # n - #cycles
    return -1 if swaps & 1 else 1
