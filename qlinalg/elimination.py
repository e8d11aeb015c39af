# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import List

from .exceptions import (
    DimensionMismatchError,
    NotSquareMatrixError,
    SingularMatrixError,
)
from .matrix import Matrix
from .rational import ONE, ZERO, Order
from .vector import Vector

logger = logging.getLogger(__name__)


def select_pivot(U: Matrix, k: int) -> int:
    """
    Row index in ``k..n-1`` holding the largest ``|U[i, k]|``.

    Values are compared exactly, so there is no tolerance involved; on a
    tie the first row found is kept. Negative entries are valid pivots, and
    a zero result means every entry from row k down is zero.
    """
    pivot_row = k
    pivot_abs = U.at(k, k).abs()
    for i in range(k + 1, U.rows_count):
        candidate = U.at(i, k).abs()
        if candidate.order(pivot_abs) is Order.GT:
            pivot_row = i
            pivot_abs = candidate
    return pivot_row


def forward_eliminate(U: Matrix, normalize_pivots: bool = False) -> List[int]:
    """
    In-place row-echelon reduction with partial pivoting.

    Parameters
    ----------
    U : Matrix                   (n, m), m >= n
        Working matrix, overwritten. Pass a clone (or an augmented copy),
        never a matrix the caller still needs.
    normalize_pivots : bool
        If True, each pivot row is divided through by its pivot so that
        the diagonal of the result is all ones.

    Returns
    -------
    perm : list[int]
        Final row order: row i of U comes from original row perm[i].

    Raises
    ------
    SingularMatrixError : a pivot column is zero from the diagonal down.
    """
    n = U.rows_count
    m = U.cols_count
    if m < n:
        raise DimensionMismatchError(f"need at least {n} columns, got {m}")

    perm = list(range(n))  # Identity Permutation

    for k in range(n):
        pivot_row = select_pivot(U, k)
        pivot = U.at(pivot_row, k)

        if pivot.is_zero():
            logger.debug(f"zero pivot in column {k}; matrix is singular")
            raise SingularMatrixError(f"no usable pivot in column {k}")

        if pivot_row != k:
            logger.debug(f"column {k}: swapping rows {k} and {pivot_row}")
            U.swap_rows(k, pivot_row)
            perm[k], perm[pivot_row] = perm[pivot_row], perm[k]

        if normalize_pivots:
            for j in range(k, m):
                U.set(k, j, U.at(k, j).div(pivot))
            pivot = ONE

        # Eliminate entries below the pivot
        for i in range(k + 1, n):
            factor = U.at(i, k).div(pivot)
            if factor.is_zero():
                continue
            for j in range(k, m):
                U.set(i, j, U.at(i, j).sub(U.at(k, j).mul(factor)))

    return perm


def back_substitute(U: Matrix) -> Vector:
    """
    Parameters
    ----------
    U : (n, n+1) Matrix
        Augmented upper-triangular matrix with ones on the diagonal, as
        left by ``forward_eliminate(..., normalize_pivots=True)``.

    Returns
    -------
    x : Vector of length n
    """
    n = U.rows_count
    if U.cols_count != n + 1:
        raise DimensionMismatchError(
            f"expected an augmented {n}x{n + 1} matrix, got {n}x{U.cols_count}"
        )

    x = Vector.zeros(n)
    for i in reversed(range(n)):
        total = ZERO
        for j in range(i + 1, n):
            total = total.add(U.at(i, j).mul(x.at(j)))
        # pivot is 1, so no division here
        x.set(i, U.at(i, n).sub(total))
    return x


def gaussian_solve(A: Matrix, b: Vector) -> Vector:
    """
    Solve ``A x = b`` exactly. ``A`` is left untouched.

    Raises
    ------
    NotSquareMatrixError   : A is not square
    DimensionMismatchError : len(b) != A.rows_count
    SingularMatrixError    : A has no unique solution
    """
    if not A.is_square():
        raise NotSquareMatrixError(
            f"cannot solve with a {A.rows_count}x{A.cols_count} matrix"
        )
    if len(b) != A.rows_count:
        raise DimensionMismatchError(
            f"right-hand side has length {len(b)}, expected {A.rows_count}"
        )

    U = A.augment(b)
    forward_eliminate(U, normalize_pivots=True)
    return back_substitute(U)
