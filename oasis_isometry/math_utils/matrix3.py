################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from __future__ import annotations

import logging
import numbers
import operator
from typing import Any
from typing import Callable
from typing import List
from typing import Sequence
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from .tolerance import DEFAULT_PRINT_PRECISION
from .tolerance import SINGULAR_DET_TOL
from .vector3 import Vector3
from .vector3 import format_scalar


_LOG: logging.Logger = logging.getLogger(__name__)


class SingularMatrixError(Exception):
    """Raised when a matrix is too close to singular to be inverted."""


class Matrix3:
    """3x3 real matrix stored as three row vectors.

    Responsibility:
        Provide the determinant, inverse and true matrix products needed by
        Isometry, alongside row-wise element arithmetic.

    Data contract:
        - Rows are Vector3 instances owned by the matrix. m[i] returns the
          stored row, so writes through it update the matrix. row() and col()
          return copies.
        - Indices outside [0, 2] raise IndexError.

    Operators:
        - "+", "-" and "/" act row by row. "*" between two matrices multiplies
          corresponding elements, it is NOT the matrix product.
        - "*" with a Vector3 is the matrix-vector product R * v.
        - product() and "@" are the true matrix product with a Matrix3 or a
          Vector3.

    Equations:
        For M = [[a, b, c], [d, e, f], [g, h, k]]:

            det(M) = a (e k - f h) - b (d k - f g) + c (d h - e g)

            M^-1 = 1 / det(M) * [[  e k - f h, -(b k - c h),   b f - c e ],
                                 [-(d k - f g),   a k - c g, -(a f - c d)],
                                 [  d h - e g, -(a h - b g),   a e - b d ]]

    Numerical stability notes:
        - inverse() refuses matrices with |det| below a fixed threshold
          (1e-6 by default) rather than testing for exact zero.
    """

    __slots__ = ("_rows",)

    __hash__ = None  # type: ignore[assignment]

    # Defer to our reflected operators when a numpy scalar is on the left
    __array_ufunc__ = None

    _IDENTITY: Tuple[float, ...] = (1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)
    _ONES: Tuple[float, ...] = (1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0)
    _ZERO: Tuple[float, ...] = (0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)

    def __init__(
        self,
        a1: float = 0.0,
        a2: float = 0.0,
        a3: float = 0.0,
        b1: float = 0.0,
        b2: float = 0.0,
        b3: float = 0.0,
        c1: float = 0.0,
        c2: float = 0.0,
        c3: float = 0.0,
    ) -> None:
        self._rows: Tuple[Vector3, Vector3, Vector3] = (
            Vector3(a1, a2, a3),
            Vector3(b1, b2, b3),
            Vector3(c1, c2, c3),
        )

    @classmethod
    def from_rows(
        cls,
        row0: Vector3 | Sequence[float],
        row1: Vector3 | Sequence[float],
        row2: Vector3 | Sequence[float],
    ) -> Matrix3:
        """Build a matrix from three rows, each a Vector3 or 3 values."""
        r0: Vector3 = Vector3.from_sequence(row0)
        r1: Vector3 = Vector3.from_sequence(row1)
        r2: Vector3 = Vector3.from_sequence(row2)
        return cls(r0.x, r0.y, r0.z, r1.x, r1.y, r1.z, r2.x, r2.y, r2.z)

    @classmethod
    def from_array(cls, array: NDArray[np.float64]) -> Matrix3:
        """Build a matrix from a numpy array of shape (3, 3)."""
        mat: NDArray[np.float64] = np.asarray(array, dtype=float)
        if mat.shape != (3, 3):
            raise ValueError("array must be shape (3, 3)")
        return cls(*(float(value) for value in mat.reshape(9)))

    @classmethod
    def identity(cls) -> Matrix3:
        return cls(*cls._IDENTITY)

    @classmethod
    def ones(cls) -> Matrix3:
        return cls(*cls._ONES)

    @classmethod
    def zero(cls) -> Matrix3:
        return cls(*cls._ZERO)

    def copy(self) -> Matrix3:
        return Matrix3.from_rows(self._rows[0], self._rows[1], self._rows[2])

    def row(self, index: int) -> Vector3:
        """Return a copy of a row."""
        return self[index].copy()

    def col(self, index: int) -> Vector3:
        """Return a copy of a column."""
        if index not in (0, 1, 2):
            raise IndexError("Matrix3 has only 3 columns")
        return Vector3(
            self._rows[0][index], self._rows[1][index], self._rows[2][index]
        )

    def det(self) -> float:
        """Return the determinant by cofactor expansion along the first row."""
        r0, r1, r2 = self._rows
        return (
            r0[0] * (r1[1] * r2[2] - r1[2] * r2[1])
            - r0[1] * (r1[0] * r2[2] - r1[2] * r2[0])
            + r0[2] * (r1[0] * r2[1] - r1[1] * r2[0])
        )

    def inverse(self, det_tol: float = SINGULAR_DET_TOL) -> Matrix3:
        """Return the inverse via the adjugate.

        Raises:
            SingularMatrixError: if |det| < det_tol
        """
        det: float = self.det()
        if abs(det) < det_tol:
            _LOG.debug("Rejecting inverse, |det| = %g < %g", abs(det), det_tol)
            raise SingularMatrixError("Matrix is non-invertible")

        a, b, c = self._rows[0]
        d, e, f = self._rows[1]
        g, h, k = self._rows[2]
        adjugate: Matrix3 = Matrix3(
            e * k - f * h,
            -(b * k - c * h),
            b * f - c * e,
            -(d * k - f * g),
            a * k - c * g,
            -(a * f - c * d),
            d * h - e * g,
            -(a * h - b * g),
            a * e - b * d,
        )
        return adjugate / det

    def transpose(self) -> Matrix3:
        return Matrix3.from_rows(self.col(0), self.col(1), self.col(2))

    def product(self, other: Matrix3 | Vector3) -> Matrix3 | Vector3:
        """Return the true matrix product with a matrix or a vector."""
        if isinstance(other, Vector3):
            return Vector3(
                self._rows[0].dot(other),
                self._rows[1].dot(other),
                self._rows[2].dot(other),
            )
        if isinstance(other, Matrix3):
            cols: List[Vector3] = [other.col(j) for j in range(3)]
            r0, r1, r2 = self._rows
            return Matrix3(
                r0.dot(cols[0]),
                r0.dot(cols[1]),
                r0.dot(cols[2]),
                r1.dot(cols[0]),
                r1.dot(cols[1]),
                r1.dot(cols[2]),
                r2.dot(cols[0]),
                r2.dot(cols[1]),
                r2.dot(cols[2]),
            )
        raise TypeError(f"cannot multiply Matrix3 by {type(other).__name__}")

    def to_list(self) -> List[List[float]]:
        return [row.to_list() for row in self._rows]

    def to_array(self) -> NDArray[np.float64]:
        return np.array(self.to_list(), dtype=float)

    def format(self, precision: int = DEFAULT_PRINT_PRECISION) -> str:
        """Render as [[a1, a2, a3], [b1, b2, b3], [c1, c2, c3]]."""
        rows: List[str] = [
            "[" + ", ".join(format_scalar(value, precision) for value in row) + "]"
            for row in self._rows
        ]
        return "[" + ", ".join(rows) + "]"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        rows: List[List[float]] = self.to_list()
        return f"Matrix3.from_rows({rows[0]!r}, {rows[1]!r}, {rows[2]!r})"

    def __len__(self) -> int:
        return 3

    def __getitem__(self, index: int) -> Vector3:
        if index not in (0, 1, 2):
            raise IndexError("Matrix3 has only 3 elements")
        return self._rows[index]

    def __setitem__(self, index: int, row: Vector3 | Sequence[float]) -> None:
        target: Vector3 = self[index]
        source: Vector3 = Vector3.from_sequence(row)
        target.x = source.x
        target.y = source.y
        target.z = source.z

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix3):
            return NotImplemented
        return all(self._rows[i] == other[i] for i in range(3))

    def _apply_rows(
        self,
        other: Matrix3 | float,
        op: Callable[[Vector3, Any], Vector3],
    ) -> Matrix3:
        # Rows are updated through Vector3 in-place operators
        if isinstance(other, Matrix3):
            for i in range(3):
                op(self._rows[i], other[i])
        else:
            for row in self._rows:
                op(row, float(other))
        return self

    def __iadd__(self, other: Matrix3) -> Matrix3:
        if not isinstance(other, Matrix3):
            return NotImplemented
        return self._apply_rows(other, operator.iadd)

    def __isub__(self, other: Matrix3) -> Matrix3:
        if not isinstance(other, Matrix3):
            return NotImplemented
        return self._apply_rows(other, operator.isub)

    def __imul__(self, other: Matrix3 | float) -> Matrix3:
        if not isinstance(other, (Matrix3, numbers.Real)):
            return NotImplemented
        return self._apply_rows(other, operator.imul)

    def __itruediv__(self, other: Matrix3 | float) -> Matrix3:
        if not isinstance(other, (Matrix3, numbers.Real)):
            return NotImplemented
        return self._apply_rows(other, operator.itruediv)

    def __add__(self, other: Matrix3) -> Matrix3:
        if not isinstance(other, Matrix3):
            return NotImplemented
        return self.copy().__iadd__(other)

    def __sub__(self, other: Matrix3) -> Matrix3:
        if not isinstance(other, Matrix3):
            return NotImplemented
        return self.copy().__isub__(other)

    def __mul__(self, other: Matrix3 | Vector3 | float) -> Matrix3 | Vector3:
        if isinstance(other, Vector3):
            return self.product(other)
        if not isinstance(other, (Matrix3, numbers.Real)):
            return NotImplemented
        return self.copy().__imul__(other)

    def __rmul__(self, scalar: float) -> Matrix3:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.copy().__imul__(scalar)

    def __truediv__(self, other: Matrix3 | float) -> Matrix3:
        if not isinstance(other, (Matrix3, numbers.Real)):
            return NotImplemented
        return self.copy().__itruediv__(other)

    def __matmul__(self, other: Matrix3 | Vector3) -> Matrix3 | Vector3:
        if not isinstance(other, (Matrix3, Vector3)):
            return NotImplemented
        return self.product(other)
