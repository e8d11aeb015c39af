# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exact rational numbers on fixed-width integers.

A :class:`Rational` stores a numerator and a strictly positive denominator,
both inside the signed 64-bit range, reduced by their gcd. Arithmetic never
promotes to big integers: every intermediate product and sum is checked and
an :class:`~qlinalg.exceptions.IntegerOverflowError` is raised instead of
returning a silently wrapped or rounded value.
"""
from __future__ import annotations

import enum
import logging
import math
import numbers
from typing import Any

from .exceptions import (
    DivisionByZeroError,
    InfiniteNumberError,
    InvalidNumberError,
)
from .utils import (
    DEFAULT_MAX_DENOMINATOR,
    check_int64,
    checked_add,
    checked_mul,
    checked_neg,
    gcd,
)

logger = logging.getLogger(__name__)


class Order(enum.IntEnum):
    """Three-way comparison result."""

    LT = -1
    EQ = 0
    GT = 1


def _ensure_int(value: Any, *, name: str) -> int:
    """Convert *value* to ``int`` when it represents an integer."""
    if isinstance(value, numbers.Integral):
        return int(value)
    raise TypeError(f"{name} must be an integer, got {type(value)!r}")


class Rational:
    """Normalised fraction with overflow-checked arithmetic."""

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int = 0, denominator: int = 1) -> None:
        num = check_int64(_ensure_int(numerator, name="numerator"), "numerator")
        den = check_int64(_ensure_int(denominator, name="denominator"), "denominator")
        if den == 0:
            raise DivisionByZeroError("denominator must be non-zero")
        if den < 0:
            num, den = checked_neg(num), checked_neg(den)

        g = gcd(num, den)
        self._numerator = num // g
        self._denominator = den // g

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def from_int(cls, value: int) -> "Rational":
        return cls(value, 1)

    @classmethod
    def from_float(
        cls, value: float, max_denominator: int = DEFAULT_MAX_DENOMINATOR
    ) -> "Rational":
        """
        Best rational approximation of *value* with a bounded denominator.

        Walks the continued fraction expansion of ``|value|`` and keeps the
        convergent with the smallest absolute error seen so far; the last
        convergent under the bound is not always the best one once the
        expansion is cut short.

        Raises
        ------
        InvalidNumberError   : *value* is NaN
        InfiniteNumberError  : *value* is +/- infinity
        IntegerOverflowError : an integral *value* does not fit in 64 bits
        """
        value = float(value)
        if math.isnan(value):
            raise InvalidNumberError("cannot convert NaN to Rational")
        if math.isinf(value):
            raise InfiniteNumberError("cannot convert infinity to Rational")
        if max_denominator < 1:
            raise ValueError("max_denominator must be >= 1")

        negative = value < 0
        x = -value if negative else value

        if x == 0:
            return cls(0, 1)
        if math.floor(x) == x:
            whole = check_int64(int(x), "integral float")
            return cls(-whole if negative else whole, 1)

        m0, m1 = 0, 1
        n0, n1 = 1, 0
        best_num, best_den = 0, 1
        best_err = x

        current = x
        while True:
            a = int(current)
            m2 = m0 + a * m1
            n2 = n0 + a * n1
            if n2 > max_denominator:
                break

            err = abs(m2 / n2 - x)
            if err < best_err:
                best_err = err
                best_num, best_den = m2, n2

            m0, m1 = m1, m2
            n0, n1 = n1, n2

            frac = current - a
            if frac == 0:
                break
            current = 1 / frac
            # next denominator is out of bound; also stops on inf from subnormals
            if current > max_denominator + 1:
                break

        logger.debug(f"from_float({value}) -> {best_num}/{best_den}, err={best_err}")
        return cls(-best_num if negative else best_num, best_den)

    # ------------------------------------------------------------------
    # Properties
    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def is_zero(self) -> bool:
        return self._numerator == 0

    # ------------------------------------------------------------------
    # Arithmetic
    def add(self, other: "Rational") -> "Rational":
        den = checked_mul(self._denominator, other._denominator)
        lhs = checked_mul(self._numerator, other._denominator)
        rhs = checked_mul(other._numerator, self._denominator)
        return Rational(checked_add(lhs, rhs), den)

    def sub(self, other: "Rational") -> "Rational":
        return self.add(other.negate())

    def mul(self, other: "Rational") -> "Rational":
        num = checked_mul(self._numerator, other._numerator)
        den = checked_mul(self._denominator, other._denominator)
        return Rational(num, den)

    def div(self, other: "Rational") -> "Rational":
        if other._numerator == 0:
            raise DivisionByZeroError("division by zero")
        reciprocal = Rational(other._denominator, other._numerator)
        return self.mul(reciprocal)

    def negate(self) -> "Rational":
        return Rational(checked_neg(self._numerator), self._denominator)

    def abs(self) -> "Rational":
        """
        Absolute value. Never raises: the numerator is confined to
        ``[-INT64_MAX, INT64_MAX]``, so its negation is always in range.
        """
        if self._numerator >= 0:
            return self
        return Rational(-self._numerator, self._denominator)

    # ------------------------------------------------------------------
    # Comparisons
    def equals(self, other: "Rational") -> bool:
        return (
            self._numerator == other._numerator
            and self._denominator == other._denominator
        )

    def order(self, other: "Rational") -> Order:
        lhs = checked_mul(self._numerator, other._denominator)
        rhs = checked_mul(other._numerator, self._denominator)
        if lhs < rhs:
            return Order.LT
        if lhs > rhs:
            return Order.GT
        return Order.EQ

    # ------------------------------------------------------------------
    # Conversions and rendering
    def to_float(self) -> float:
        return self._numerator / self._denominator

    def to_mixed(self) -> str:
        """Render as a mixed number, e.g. ``-2 1/2``, ``3``, ``1/2`` or ``0``."""
        sign = "-" if self._numerator < 0 else ""
        whole, remainder = divmod(abs(self._numerator), self._denominator)
        if whole and remainder:
            return f"{sign}{whole} {remainder}/{self._denominator}"
        if whole:
            return f"{sign}{whole}"
        if remainder:
            return f"{sign}{remainder}/{self._denominator}"
        return "0"

    def __float__(self) -> float:
        return self.to_float()

    def __bool__(self) -> bool:
        return self._numerator != 0

    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        return f"{self._numerator}/{self._denominator}"

    def __format__(self, spec: str) -> str:
        if spec in ("", "r"):
            return str(self)
        if spec == "m":
            return self.to_mixed()
        return format(self.to_float(), spec)

    # ------------------------------------------------------------------
    # Operator protocol
    @staticmethod
    def _coerce(value: Any) -> "Rational | None":
        if isinstance(value, Rational):
            return value
        if isinstance(value, numbers.Integral):
            return Rational.from_int(int(value))
        # floats are deliberately not coerced, use Rational.from_float
        return None

    def __add__(self, other: Any) -> "Rational":
        rhs = self._coerce(other)
        return NotImplemented if rhs is None else self.add(rhs)

    def __radd__(self, other: Any) -> "Rational":
        lhs = self._coerce(other)
        return NotImplemented if lhs is None else lhs.add(self)

    def __sub__(self, other: Any) -> "Rational":
        rhs = self._coerce(other)
        return NotImplemented if rhs is None else self.sub(rhs)

    def __rsub__(self, other: Any) -> "Rational":
        lhs = self._coerce(other)
        return NotImplemented if lhs is None else lhs.sub(self)

    def __mul__(self, other: Any) -> "Rational":
        rhs = self._coerce(other)
        return NotImplemented if rhs is None else self.mul(rhs)

    def __rmul__(self, other: Any) -> "Rational":
        lhs = self._coerce(other)
        return NotImplemented if lhs is None else lhs.mul(self)

    def __truediv__(self, other: Any) -> "Rational":
        rhs = self._coerce(other)
        return NotImplemented if rhs is None else self.div(rhs)

    def __rtruediv__(self, other: Any) -> "Rational":
        lhs = self._coerce(other)
        return NotImplemented if lhs is None else lhs.div(self)

    def __neg__(self) -> "Rational":
        return self.negate()

    def __pos__(self) -> "Rational":
        return self

    def __abs__(self) -> "Rational":
        return self.abs()

    def __eq__(self, other: Any) -> bool:
        rhs = self._coerce(other)
        return NotImplemented if rhs is None else self.equals(rhs)

    def __lt__(self, other: Any) -> bool:
        rhs = self._coerce(other)
        return NotImplemented if rhs is None else self.order(rhs) is Order.LT

    def __le__(self, other: Any) -> bool:
        rhs = self._coerce(other)
        return NotImplemented if rhs is None else self.order(rhs) is not Order.GT

    def __gt__(self, other: Any) -> bool:
        rhs = self._coerce(other)
        return NotImplemented if rhs is None else self.order(rhs) is Order.GT

    def __ge__(self, other: Any) -> bool:
        rhs = self._coerce(other)
        return NotImplemented if rhs is None else self.order(rhs) is not Order.LT

    def __hash__(self) -> int:
        # integral values hash like the int they equal
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))


ZERO = Rational(0, 1)
ONE = Rational(1, 1)

__all__ = ["Order", "Rational", "ZERO", "ONE"]
