# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Fixed-length vectors of exact rationals.
"""
from __future__ import annotations

import numbers
from typing import Any, Iterable, Iterator, List

import numpy as np

from .exceptions import DimensionMismatchError, IndexOutOfBoundsError
from .rational import ZERO, Order, Rational
from .utils import DEFAULT_MAX_DENOMINATOR


def as_rational(value: Any) -> Rational:
    """Accept a Rational or an integer; anything else is a TypeError."""
    if isinstance(value, Rational):
        return value
    if isinstance(value, numbers.Integral):
        return Rational.from_int(int(value))
    raise TypeError(
        f"expected Rational or int, got {type(value)!r} "
        "(use Rational.from_float for floating point values)"
    )


class Vector:
    """
    Ordered sequence of :class:`Rational` components with a fixed length.

    The vector owns its component list: constructing from a sequence copies
    it, so later changes to the source never show up here.
    """

    __slots__ = ("_components",)

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._components: List[Rational] = [as_rational(v) for v in values]

    @classmethod
    def zeros(cls, length: int) -> "Vector":
        if length < 0:
            raise ValueError("length must be non-negative")
        return cls([ZERO] * length)

    @classmethod
    def from_array(
        cls, arr: np.ndarray, max_denominator: int = DEFAULT_MAX_DENOMINATOR
    ) -> "Vector":
        """Build from a 1-d array; integer dtypes are exact, floats are rationalised."""
        arr = np.asarray(arr)
        if arr.ndim != 1:
            raise DimensionMismatchError(f"expected a 1-d array, got shape {arr.shape}")
        if np.issubdtype(arr.dtype, np.integer):
            return cls(int(v) for v in arr)
        return cls(Rational.from_float(float(v), max_denominator) for v in arr)

    def to_array(self) -> np.ndarray:
        return np.array([c.to_float() for c in self._components], dtype=float)

    def copy(self) -> "Vector":
        return Vector(self._components)

    # ------------------------------------------------------------------
    # Positional access
    def _check_index(self, i: int) -> int:
        if not isinstance(i, numbers.Integral):
            raise TypeError(f"index must be an integer, got {type(i)!r}")
        if i < 0 or i >= len(self._components):
            raise IndexOutOfBoundsError(
                f"index {i} out of range for vector of length {len(self._components)}"
            )
        return int(i)

    def at(self, i: int) -> Rational:
        return self._components[self._check_index(i)]

    def set(self, i: int, value: Any) -> None:
        idx = self._check_index(i)
        self._components[idx] = as_rational(value)

    def __getitem__(self, i: int) -> Rational:
        return self.at(i)

    def __setitem__(self, i: int, value: Any) -> None:
        self.set(i, value)

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[Rational]:
        return iter(self._components)

    # ------------------------------------------------------------------
    # Arithmetic
    def _check_same_length(self, other: "Vector", op: str) -> None:
        if len(self) != len(other):
            raise DimensionMismatchError(
                f"{op}: length {len(self)} does not match length {len(other)}"
            )

    def add(self, other: "Vector") -> "Vector":
        self._check_same_length(other, "add")
        return Vector([a.add(b) for a, b in zip(self._components, other._components)])

    def sub(self, other: "Vector") -> "Vector":
        self._check_same_length(other, "sub")
        return Vector([a.sub(b) for a, b in zip(self._components, other._components)])

    def scalar_mul(self, scalar: Rational) -> "Vector":
        scalar = as_rational(scalar)
        return Vector([c.mul(scalar) for c in self._components])

    def dot(self, other: "Vector") -> Rational:
        """
        Implements the scalar (dot) product between two vectors.
        """
        self._check_same_length(other, "dot")
        total = ZERO
        for a, b in zip(self._components, other._components):
            total = total.add(a.mul(b))
        return total

    # ------------------------------------------------------------------
    # Comparisons
    def equals(self, other: "Vector") -> bool:
        if len(self) != len(other):
            return False
        return all(a.equals(b) for a, b in zip(self._components, other._components))

    def lex_cmp(self, other: "Vector") -> Order:
        self._check_same_length(other, "lex_cmp")
        for a, b in zip(self._components, other._components):
            order = a.order(b)
            if order is not Order.EQ:
                return order
        return Order.EQ

    def norm_cmp(self, other: "Vector") -> Order:
        self._check_same_length(other, "norm_cmp")
        # squared norms, no square root needed
        return self.dot(self).order(other.dot(other))

    # ------------------------------------------------------------------
    # Operator protocol
    def __add__(self, other: Any) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, scalar: Any) -> "Vector":
        if not isinstance(scalar, (Rational, numbers.Integral)):
            return NotImplemented
        return self.scalar_mul(scalar)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        inner = ", ".join(repr(c) for c in self._components)
        return f"{self.__class__.__name__}([{inner}])"

    def __str__(self) -> str:
        return "[" + ", ".join(str(c) for c in self._components) + "]"
