# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Error taxonomy for qlinalg.

Every error is terminal for the operation that raised it. Each class also
derives from the closest builtin exception, so ``except ZeroDivisionError``
and friends keep working for callers that do not know about qlinalg.
"""


class QLinalgError(Exception):
    """Base class for every error raised by qlinalg."""


class DivisionByZeroError(QLinalgError, ZeroDivisionError):
    """Zero denominator at construction, or division by the zero rational."""


class IntegerOverflowError(QLinalgError, OverflowError):
    """A 64-bit intermediate cannot represent the exact result."""


class InvalidNumberError(QLinalgError, ValueError):
    """NaN given to a float conversion."""


class InfiniteNumberError(QLinalgError, ValueError):
    """Infinity given to a float conversion."""


class DimensionMismatchError(QLinalgError, ValueError):
    """Operand lengths or shapes are incompatible."""


class IndexOutOfBoundsError(QLinalgError, IndexError):
    """Positional access outside the valid range."""


class NotSquareMatrixError(QLinalgError, ValueError):
    """Operation is only defined for square matrices."""


class SingularMatrixError(QLinalgError, ArithmeticError):
    """Forward elimination found no usable pivot."""
