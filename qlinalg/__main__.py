#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Small walk-through of the package: ``python -m qlinalg [-v]``.
"""
import argparse
import logging
import math

from . import Matrix, Rational, Vector


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="qlinalg", description=__doc__)
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    a = Rational(1, 2)
    b = Rational(-3, 4)
    print(f"a = {a}")
    print(f"b = {b}")
    print(f"a + b = {a + b}")
    print(f"a - b = {a - b}")
    print(f"a * b = {a * b}")
    print(f"a / b = {a / b}")
    print(f"a < b? {a < b}")
    print(f"7/2 as a mixed number: {Rational(7, 2):m}")
    print(f"pi ~ {Rational.from_float(math.pi, 1000)}")

    A = Matrix.from_rows([[2, 1, -1], [-3, -1, 2], [-2, 1, 2]])
    rhs = Vector([8, -11, -3])
    print(f"A =\n{A}")
    print(f"det(A) = {A.determinant()}")
    print(f"solve(A, {rhs}) = {A.solve(rhs)}")


if __name__ == "__main__":
    main()
