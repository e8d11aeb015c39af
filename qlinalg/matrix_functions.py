# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

from .elimination import forward_eliminate, gaussian_solve
from .exceptions import NotSquareMatrixError, SingularMatrixError
from .matrix import Matrix
from .rational import ONE, ZERO, Rational
from .utils import permutation_sign

logger = logging.getLogger(__name__)


def det(A: Matrix) -> Rational:
    """
    Calculate the determinant of n-by-n matrix A using elimination.

    A singular matrix has determinant exactly 0; that is a value here,
    not an error.
    """
    if not A.is_square():
        raise NotSquareMatrixError(
            "The determinant is undefined for non-square matrices."
        )
    U = A.clone()
    try:
        perm = forward_eliminate(U)
    except SingularMatrixError as e:
        logger.debug(f"{e}; determinant is 0")
        return ZERO

    diag_prod = ONE
    for k in range(U.rows_count):
        diag_prod = diag_prod.mul(U.at(k, k))
    if permutation_sign(perm) < 0:
        return diag_prod.negate()
    return diag_prod


def _minor(A: Matrix, i: int, j: int) -> Matrix:
    n = A.rows_count
    return Matrix.from_rows(
        [[A.at(r, c) for c in range(n) if c != j] for r in range(n) if r != i]
    )


def inv(A: Matrix) -> Matrix:
    """
    Inverse of a square matrix, one exact solve per identity column.

    Raises SingularMatrixError if A is not invertible.
    """
    if not A.is_square():
        raise NotSquareMatrixError("A must be a square matrix")
    n = A.rows_count
    I = Matrix.identity(n)
    # row j of `columns` is column j of the inverse
    columns = [gaussian_solve(A, I.row(j)) for j in range(n)]
    return Matrix.from_rows(columns).transpose()


def adj(A: Matrix) -> Matrix:
    """
    Adjugate (classical adjoint) of a square matrix A.

    Fast path (det != 0): adj(A) = det(A) * A^{-1}
    Slow path (det = 0): cofactor expansion
    """
    if not A.is_square():
        raise NotSquareMatrixError("A must be a square matrix")
    n = A.rows_count

    d = det(A)
    if d.is_zero():
        logger.warning("adj(): falling back to cofactor expansion - O(n!)")
        C = Matrix(n, n)
        for i in range(n):
            for j in range(n):
                cofactor = det(_minor(A, i, j))
                C.set(i, j, cofactor if (i + j) % 2 == 0 else cofactor.negate())
        return C.transpose()

    A_inv = inv(A)
    return Matrix.from_rows([A_inv.row(i).scalar_mul(d) for i in range(n)])


__all__ = ["det", "inv", "adj"]
