# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
qlinalg
=======

Exact linear algebra over the rationals, on fixed-width integers.

Every value is a reduced fraction of two signed 64-bit integers. Nothing is
ever rounded: an arithmetic step whose exact result does not fit raises
`IntegerOverflowError` instead.

Public API
~~~~~~~~~~
- Scalars
    - `Rational`, `Order`
- Containers
    - `Vector`, `Matrix`
- Linear systems
    - `gaussian_solve`, `forward_eliminate`, `back_substitute`
- Matrix utilities
    - `det`, `inv`, `adj`
- Errors
    - `QLinalgError` and its subclasses in `qlinalg.exceptions`

Example
-------
>>> import qlinalg as ql
>>> A = ql.Matrix.from_rows([[2, 1, -1], [-3, -1, 2], [-2, 1, 2]])
>>> print(A.solve(ql.Vector([8, -11, -3])))
[2/1, 3/1, -1/1]
>>> print(A.determinant())
-1/1
"""

from importlib.metadata import version as _pkg_version

from .elimination import (
    back_substitute,
    forward_eliminate,
    gaussian_solve,
    select_pivot,
)
from .exceptions import (
    DimensionMismatchError,
    DivisionByZeroError,
    IndexOutOfBoundsError,
    InfiniteNumberError,
    IntegerOverflowError,
    InvalidNumberError,
    NotSquareMatrixError,
    QLinalgError,
    SingularMatrixError,
)
from .matrix import Matrix
from .matrix_functions import adj, det, inv
from .rational import ONE, ZERO, Order, Rational
from .utils import DEFAULT_MAX_DENOMINATOR, INT64_MAX, INT64_MIN
from .vector import Vector

__all__ = [
    "Rational",
    "Order",
    "ZERO",
    "ONE",
    "Vector",
    "Matrix",
    "select_pivot",
    "forward_eliminate",
    "back_substitute",
    "gaussian_solve",
    "det",
    "inv",
    "adj",
    "DEFAULT_MAX_DENOMINATOR",
    "INT64_MAX",
    "INT64_MIN",
    "QLinalgError",
    "DivisionByZeroError",
    "IntegerOverflowError",
    "InvalidNumberError",
    "InfiniteNumberError",
    "DimensionMismatchError",
    "IndexOutOfBoundsError",
    "NotSquareMatrixError",
    "SingularMatrixError",
]

# ---------------------------------------------------------------------
# Version string (helps "pip show qlinalg", Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Optional: lightweight default logging config so users see warnings
# only if they deliberately enable them.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
