# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import math

import numpy as np
import pytest

from qlinalg.exceptions import NotSquareMatrixError, SingularMatrixError
from qlinalg.matrix import Matrix
from qlinalg.matrix_functions import adj, det, inv
from qlinalg.rational import ONE, ZERO, Rational


def test_determinants():
    rng = np.random.default_rng(5)
    for _ in range(20):
        A_np = rng.integers(-9, 10, size=(5, 5))
        our_det = det(Matrix.from_array(A_np))
        numpy_det = np.linalg.det(A_np)
        assert our_det.denominator == 1
        assert math.isclose(our_det.to_float(), numpy_det, abs_tol=1e-6)


def test_det_known_values():
    assert det(Matrix.from_rows([[2, -3, 1], [2, 0, -1], [1, 4, 5]])) == Rational(49)
    # negative pivots and a row swap
    assert det(Matrix.from_rows([[-1, 0], [0, -1]])) == ONE
    assert det(Matrix.from_rows([[0, 1], [1, 0]])) == Rational(-1)
    assert det(Matrix.from_rows([[Rational(1, 2), 0], [0, Rational(2, 3)]])) == Rational(1, 3)
    assert det(Matrix(0, 0)) == ONE


def test_det_singular_is_zero():
    assert det(Matrix.from_rows([[1, 2], [2, 4]])) == ZERO
    assert det(Matrix(3, 3)) == ZERO


def test_det_not_square():
    with pytest.raises(NotSquareMatrixError):
        det(Matrix(3, 2))


def test_inverse():
    A = Matrix.from_rows([[4, 7], [2, 6]])
    A_inv = inv(A)
    expected = Matrix.from_rows(
        [[Rational(3, 5), Rational(-7, 10)], [Rational(-1, 5), Rational(2, 5)]]
    )
    assert A_inv == expected
    assert A @ A_inv == Matrix.identity(2)
    assert A_inv @ A == Matrix.identity(2)


def test_inverse_singular():
    with pytest.raises(SingularMatrixError):
        inv(Matrix.from_rows([[1, 2], [2, 4]]))
    with pytest.raises(NotSquareMatrixError):
        inv(Matrix(2, 3))


def test_adjugate():
    rng = np.random.default_rng(9)
    A_np = rng.integers(-5, 6, size=(4, 4))
    while round(np.linalg.det(A_np)) == 0:
        A_np = rng.integers(-5, 6, size=(4, 4))

    our_adj = adj(Matrix.from_array(A_np))
    numpy_adj = np.linalg.det(A_np) * np.linalg.inv(A_np)
    assert np.allclose(our_adj.to_array(), numpy_adj, atol=1e-8)


def test_adjugate_singular_uses_cofactors():
    A = Matrix.from_rows([[1, 2], [2, 4]])
    # adj([[a, b], [c, d]]) = [[d, -b], [-c, a]]
    assert adj(A) == Matrix.from_rows([[4, -2], [-2, 1]])
    assert A @ adj(A) == Matrix(2, 2)
