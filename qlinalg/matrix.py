# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Dense matrices of exact rationals, stored as a list of row vectors.
"""
from __future__ import annotations

from typing import Any, Iterable, List, Sequence, Tuple, Union

import numpy as np

from .exceptions import DimensionMismatchError, IndexOutOfBoundsError
from .rational import ONE, ZERO, Rational
from .utils import DEFAULT_MAX_DENOMINATOR
from .vector import Vector


class Matrix:
    """
    ``rows_count`` by ``cols_count`` grid of :class:`Rational` values.

    Every row is a :class:`Vector` of length ``cols_count`` that belongs to
    this matrix alone. Rows are only ever replaced through :meth:`set_rows`,
    which checks the shape first.
    """

    __slots__ = ("_rows", "_rows_count", "_cols_count")

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must be non-negative")
        self._rows_count = rows
        self._cols_count = cols
        self._rows: List[Vector] = [Vector.zeros(cols) for _ in range(rows)]

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def from_rows(cls, rows: Sequence[Iterable[Any]]) -> "Matrix":
        """
        Build a matrix from nested sequences (or Vectors) of Rationals/ints.
        All rows must have the same length.
        """
        vectors = [Vector(r) for r in rows]
        cols = len(vectors[0]) if vectors else 0
        M = cls(0, cols)
        M._rows_count = len(vectors)
        M.set_rows(vectors)
        return M

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        I = cls(n, n)
        for i in range(n):
            I._rows[i].set(i, ONE)
        return I

    @classmethod
    def from_array(
        cls, A: np.ndarray, max_denominator: int = DEFAULT_MAX_DENOMINATOR
    ) -> "Matrix":
        """
        Build from a 2-d NumPy array. Integer arrays convert exactly, float
        arrays go through :meth:`Rational.from_float` entry by entry.
        """
        A = np.asarray(A)
        if A.ndim != 2:
            raise DimensionMismatchError(f"expected a 2-d array, got shape {A.shape}")
        return cls.from_rows([Vector.from_array(row, max_denominator) for row in A])

    def to_array(self) -> np.ndarray:
        """Float64 copy, handy for cross-checking against numpy.linalg."""
        out = np.zeros((self._rows_count, self._cols_count), dtype=float)
        for i, row in enumerate(self._rows):
            out[i] = row.to_array()
        return out

    # ------------------------------------------------------------------
    # Shape and access
    @property
    def rows_count(self) -> int:
        return self._rows_count

    @property
    def cols_count(self) -> int:
        return self._cols_count

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows_count, self._cols_count

    def is_square(self) -> bool:
        return self._rows_count == self._cols_count

    def _check_index(self, i: int, j: int) -> None:
        if not (0 <= i < self._rows_count and 0 <= j < self._cols_count):
            raise IndexOutOfBoundsError(
                f"index ({i}, {j}) out of range for {self._rows_count}x{self._cols_count} matrix"
            )

    def at(self, i: int, j: int) -> Rational:
        self._check_index(i, j)
        return self._rows[i].at(j)

    def set(self, i: int, j: int, value: Any) -> None:
        self._check_index(i, j)
        self._rows[i].set(j, value)

    def __getitem__(self, idx: Tuple[int, int]) -> Rational:
        i, j = idx
        return self.at(i, j)

    def __setitem__(self, idx: Tuple[int, int], value: Any) -> None:
        i, j = idx
        self.set(i, j, value)

    def row(self, i: int) -> Vector:
        """Copy of row *i*."""
        if not 0 <= i < self._rows_count:
            raise IndexOutOfBoundsError(f"row {i} out of range for {self._rows_count} rows")
        return self._rows[i].copy()

    def set_rows(self, rows: Sequence[Vector]) -> None:
        """
        Replace every row at once. The new rows must match the current
        shape exactly; they are copied, never aliased.
        """
        if len(rows) != self._rows_count:
            raise DimensionMismatchError(
                f"expected {self._rows_count} rows, got {len(rows)}"
            )
        for k, r in enumerate(rows):
            if len(r) != self._cols_count:
                raise DimensionMismatchError(
                    f"row {k} has length {len(r)}, expected {self._cols_count}"
                )
        self._rows = [Vector(r) for r in rows]

    def swap_rows(self, i: int, j: int) -> None:
        if not (0 <= i < self._rows_count and 0 <= j < self._rows_count):
            raise IndexOutOfBoundsError(f"cannot swap rows {i} and {j}")
        self._rows[i], self._rows[j] = self._rows[j], self._rows[i]

    def clone(self) -> "Matrix":
        M = Matrix(0, self._cols_count)
        M._rows_count = self._rows_count
        M._rows = [r.copy() for r in self._rows]
        return M

    def augment(self, b: Vector) -> "Matrix":
        """Return ``[A | b]`` as a new ``rows x (cols + 1)`` matrix."""
        if len(b) != self._rows_count:
            raise DimensionMismatchError(
                f"right-hand side has length {len(b)}, expected {self._rows_count}"
            )
        M = Matrix(0, self._cols_count + 1)
        M._rows_count = self._rows_count
        M._rows = [Vector([*row, b_i]) for row, b_i in zip(self._rows, b)]
        return M

    # ------------------------------------------------------------------
    # Products
    def mul_vector(self, vec: Vector) -> Vector:
        if self._cols_count != len(vec):
            raise DimensionMismatchError(
                f"cannot multiply {self._rows_count}x{self._cols_count} matrix "
                f"by vector of length {len(vec)}"
            )
        return Vector([row.dot(vec) for row in self._rows])

    def mul_matrix(self, other: "Matrix") -> "Matrix":
        if self._cols_count != other._rows_count:
            raise DimensionMismatchError(
                f"cannot multiply {self._rows_count}x{self._cols_count} "
                f"by {other._rows_count}x{other._cols_count}"
            )
        result = Matrix(self._rows_count, other._cols_count)
        for i in range(self._rows_count):
            for j in range(other._cols_count):
                total = ZERO
                for k in range(self._cols_count):
                    total = total.add(self._rows[i].at(k).mul(other._rows[k].at(j)))
                result._rows[i].set(j, total)
        return result

    def transpose(self) -> "Matrix":
        result = Matrix(self._cols_count, self._rows_count)
        for i, row in enumerate(self._rows):
            for j, value in enumerate(row):
                result._rows[j].set(i, value)
        return result

    def __matmul__(self, other: Any) -> Union["Matrix", Vector]:
        if isinstance(other, Vector):
            return self.mul_vector(other)
        if isinstance(other, Matrix):
            return self.mul_matrix(other)
        return NotImplemented

    # ------------------------------------------------------------------
    # Linear systems
    def determinant(self) -> Rational:
        # matrix_functions imports Matrix, so this import stays local
        from .matrix_functions import det

        return det(self)

    def solve(self, b: Vector) -> Vector:
        from .elimination import gaussian_solve

        return gaussian_solve(self, b)

    # ------------------------------------------------------------------
    # Comparison and rendering
    def equals(self, other: "Matrix") -> bool:
        if self.shape != other.shape:
            return False
        return all(a.equals(b) for a, b in zip(self._rows, other._rows))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}.from_rows({[list(r) for r in self._rows]!r})"

    def __str__(self) -> str:
        lines = ["["]
        lines.extend(f"  {row}," for row in self._rows)
        lines.append("]")
        return "\n".join(lines)
