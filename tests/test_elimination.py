# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np
import pytest

from qlinalg.elimination import (
    back_substitute,
    forward_eliminate,
    gaussian_solve,
    select_pivot,
)
from qlinalg.exceptions import (
    DimensionMismatchError,
    IntegerOverflowError,
    SingularMatrixError,
)
from qlinalg.matrix import Matrix
from qlinalg.rational import ONE, ZERO, Rational
from qlinalg.utils import INT64_MAX
from qlinalg.vector import Vector

TEST_ITERATIONS = 20
logger = logging.getLogger(__name__)


def random_nonsingular_upper(n, rng, low=-9, high=10):
    """
    Build a matrix U that is upper-triangular with random integer entries
    and only non-zero values on its diagonal
    """
    U = np.triu(rng.integers(low, high, size=(n, n)))
    diag = rng.integers(1, high, size=n) * rng.choice([-1, 1], size=n)
    U[np.diag_indices(n)] = diag
    return Matrix.from_array(U)


def test_select_pivot_uses_magnitude():
    M = Matrix.from_rows([[1, 0], [-3, 0], [3, 0]])
    # |-3| == |3|: first occurrence wins
    assert select_pivot(M, 0) == 1

    M = Matrix.from_rows([[Rational(1, 2), 0], [Rational(1, 3), 0]])
    assert select_pivot(M, 0) == 0

    # all-negative column: largest magnitude, not largest signed value
    M = Matrix.from_rows([[-1, 0], [-5, 0], [-2, 0]])
    assert select_pivot(M, 0) == 1
    assert M.at(select_pivot(M, 0), 0) == Rational(-5)

    # a zero pivot only comes back when the column below is all zero
    M = Matrix.from_rows([[1, 0, 2], [0, 0, 3], [0, 0, 4]])
    assert select_pivot(M, 1) == 1
    assert M.at(select_pivot(M, 1), 1) == ZERO


def test_forward_eliminate_upper_triangular():
    A = Matrix.from_rows([[2, -3, 1], [2, 0, -1], [1, 4, 5]])
    U = A.clone()
    perm = forward_eliminate(U)
    assert sorted(perm) == [0, 1, 2]
    for i in range(3):
        for j in range(i):
            assert U[i, j] == ZERO


def test_forward_eliminate_normalizes_pivots():
    A = Matrix.from_rows([[2, 1, -1], [-3, -1, 2], [-2, 1, 2]])
    U = A.augment(Vector([8, -11, -3]))
    forward_eliminate(U, normalize_pivots=True)
    for i in range(3):
        assert U[i, i] == ONE


def test_forward_eliminate_singular():
    U = Matrix.from_rows([[1, 2], [2, 4]])
    with pytest.raises(SingularMatrixError):
        forward_eliminate(U)


def test_forward_eliminate_needs_enough_columns():
    with pytest.raises(DimensionMismatchError):
        forward_eliminate(Matrix(3, 2))


def test_back_substitute():
    U = Matrix.from_rows([[1, 2, 3, 14], [0, 1, 4, 14], [0, 0, 1, 3]])
    x = back_substitute(U)
    # x3 = 3, x2 = 14 - 12 = 2, x1 = 14 - 4 - 9 = 1
    assert x == Vector([1, 2, 3])

    with pytest.raises(DimensionMismatchError):
        back_substitute(Matrix(3, 3))


def test_gaussian_solve_negative_pivots():
    A = Matrix.from_rows([[-2, 0], [0, -4]])
    assert gaussian_solve(A, Vector([-2, -8])) == Vector([1, 2])


def test_gaussian_solve_needs_row_swap():
    A = Matrix.from_rows([[0, 1], [1, 0]])
    assert gaussian_solve(A, Vector([3, 5])) == Vector([5, 3])


def test_elimination_random_nonsingular_upper_triangular():
    rng = np.random.default_rng(7)
    n = 5

    for i in range(TEST_ITERATIONS):
        logger.debug("==============================")
        A = random_nonsingular_upper(n, rng)
        logger.debug(f"\nRunning Test\nRandom Nonsingular Upper:\n{A}\n")

        # Generate a random integer vector x (the true solution)
        x_true = Vector(int(v) for v in rng.integers(-9, 10, size=n))

        # Calculate b using the equation Ax = b
        b = A.mul_vector(x_true)

        x_calculated = gaussian_solve(A, b)
        logger.debug(f"\n==== Results ====\nOurs:\n{x_calculated}\nExpected:\n{x_true}")
        assert x_calculated == x_true

        # residual is exactly zero, no tolerance needed
        assert A.mul_vector(x_calculated).sub(b) == Vector.zeros(n)


def test_gaussian_solve_matches_numpy():
    rng = np.random.default_rng(11)
    n = 4

    for i in range(TEST_ITERATIONS):
        A_np = rng.integers(-6, 7, size=(n, n))
        if abs(np.linalg.det(A_np)) < 0.5:
            continue
        b_np = rng.integers(-20, 21, size=n)

        x = gaussian_solve(Matrix.from_array(A_np), Vector.from_array(b_np))
        np.testing.assert_allclose(
            x.to_array(),
            np.linalg.solve(A_np, b_np),
            rtol=1e-9,
            atol=1e-12,
        )


def test_overflow_propagates_from_solve():
    A = Matrix.from_rows([[Rational(1, INT64_MAX), 1], [1, Rational(1, INT64_MAX - 1)]])
    with pytest.raises(IntegerOverflowError):
        gaussian_solve(A, Vector([1, 1]))
