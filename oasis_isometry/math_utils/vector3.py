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

import math
import numbers
from typing import Iterator
from typing import List
from typing import Sequence
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from .tolerance import DEFAULT_PRINT_PRECISION
from .tolerance import EQUALITY_EPS


def format_scalar(value: float, precision: int) -> str:
    """Format a scalar the way a default-configured C++ stream would."""
    return f"{value:.{precision}g}"


class Vector3:
    """Three-component real vector.

    Responsibility:
        Hold the (x, y, z) components of a point or direction and provide the
        arithmetic used by Matrix3 and Isometry.

    Data contract:
        - Components are Python floats. Non-finite values are not rejected
          and propagate per IEEE-754. Division by zero gives inf or NaN
          rather than raising.
        - Binary operators return new vectors. In-place operators mutate and
          return self.
        - An operand that is a Vector3 is applied component-wise, a real
          scalar is broadcast to all three components.

    Equality:
        Component-wise absolute comparison with tolerance equal to machine
        epsilon. This is deliberately tight and not relative; callers that
        need a looser check compare components themselves.

    Constants:
        zero(), unit_x(), unit_y() and unit_z() return fresh instances so the
        shared values have no mutation path.
    """

    __slots__ = ("_x", "_y", "_z")

    __hash__ = None  # type: ignore[assignment]

    # Defer to our reflected operators when a numpy scalar is on the left
    __array_ufunc__ = None

    _ZERO: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    _UNIT_X: Tuple[float, float, float] = (1.0, 0.0, 0.0)
    _UNIT_Y: Tuple[float, float, float] = (0.0, 1.0, 0.0)
    _UNIT_Z: Tuple[float, float, float] = (0.0, 0.0, 1.0)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self._x: float = float(x)
        self._y: float = float(y)
        self._z: float = float(z)

    @classmethod
    def from_sequence(cls, values: Vector3 | Sequence[float]) -> Vector3:
        """Build a vector from exactly three values."""
        if len(values) != 3:
            raise ValueError("Vector3 requires exactly 3 values")
        return cls(values[0], values[1], values[2])

    @classmethod
    def from_array(cls, array: NDArray[np.float64]) -> Vector3:
        """Build a vector from a numpy array of shape (3,)."""
        vec: NDArray[np.float64] = np.asarray(array, dtype=float)
        if vec.shape != (3,):
            raise ValueError("array must be shape (3,)")
        return cls(float(vec[0]), float(vec[1]), float(vec[2]))

    @classmethod
    def zero(cls) -> Vector3:
        return cls(*cls._ZERO)

    @classmethod
    def unit_x(cls) -> Vector3:
        return cls(*cls._UNIT_X)

    @classmethod
    def unit_y(cls) -> Vector3:
        return cls(*cls._UNIT_Y)

    @classmethod
    def unit_z(cls) -> Vector3:
        return cls(*cls._UNIT_Z)

    def copy(self) -> Vector3:
        return Vector3(self._x, self._y, self._z)

    @property
    def x(self) -> float:
        return self._x

    @x.setter
    def x(self, value: float) -> None:
        self._x = float(value)

    @property
    def y(self) -> float:
        return self._y

    @y.setter
    def y(self, value: float) -> None:
        self._y = float(value)

    @property
    def z(self) -> float:
        return self._z

    @z.setter
    def z(self, value: float) -> None:
        self._z = float(value)

    def dot(self, other: Vector3) -> float:
        """Return the dot product with another vector."""
        return self._x * other.x + self._y * other.y + self._z * other.z

    def cross(self, other: Vector3) -> Vector3:
        """Return the right-handed cross product self x other."""
        return Vector3(
            self._y * other.z - self._z * other.y,
            self._z * other.x - self._x * other.z,
            self._x * other.y - self._y * other.x,
        )

    def norm(self) -> float:
        """Return the Euclidean norm, 0.0 for the zero vector."""
        return math.sqrt(self.dot(self))

    def to_list(self) -> List[float]:
        return [self._x, self._y, self._z]

    def to_array(self) -> NDArray[np.float64]:
        return np.array([self._x, self._y, self._z], dtype=float)

    def format(self, precision: int = DEFAULT_PRINT_PRECISION) -> str:
        """Render as (x: <x>, y: <y>, z: <z>) with the given significant digits."""
        return (
            f"(x: {format_scalar(self._x, precision)}, "
            f"y: {format_scalar(self._y, precision)}, "
            f"z: {format_scalar(self._z, precision)})"
        )

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Vector3(x={self._x!r}, y={self._y!r}, z={self._z!r})"

    def __len__(self) -> int:
        return 3

    def __iter__(self) -> Iterator[float]:
        yield self._x
        yield self._y
        yield self._z

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self._x
        if index == 1:
            return self._y
        if index == 2:
            return self._z
        raise IndexError("Vector3 has only 3 elements")

    def __setitem__(self, index: int, value: float) -> None:
        if index == 0:
            self._x = float(value)
        elif index == 1:
            self._y = float(value)
        elif index == 2:
            self._z = float(value)
        else:
            raise IndexError("Vector3 has only 3 elements")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return (
            abs(self._x - other.x) <= EQUALITY_EPS
            and abs(self._y - other.y) <= EQUALITY_EPS
            and abs(self._z - other.z) <= EQUALITY_EPS
        )

    def __neg__(self) -> Vector3:
        return Vector3(-self._x, -self._y, -self._z)

    def __iadd__(self, other: Vector3 | float) -> Vector3:
        if isinstance(other, Vector3):
            self._x += other.x
            self._y += other.y
            self._z += other.z
        elif isinstance(other, numbers.Real):
            self._x += float(other)
            self._y += float(other)
            self._z += float(other)
        else:
            return NotImplemented
        return self

    def __isub__(self, other: Vector3 | float) -> Vector3:
        if isinstance(other, Vector3):
            self._x -= other.x
            self._y -= other.y
            self._z -= other.z
        elif isinstance(other, numbers.Real):
            self._x -= float(other)
            self._y -= float(other)
            self._z -= float(other)
        else:
            return NotImplemented
        return self

    def __imul__(self, other: Vector3 | float) -> Vector3:
        if isinstance(other, Vector3):
            self._x *= other.x
            self._y *= other.y
            self._z *= other.z
        elif isinstance(other, numbers.Real):
            self._x *= float(other)
            self._y *= float(other)
            self._z *= float(other)
        else:
            return NotImplemented
        return self

    def __itruediv__(self, other: Vector3 | float) -> Vector3:
        divisor: NDArray[np.float64]
        if isinstance(other, Vector3):
            divisor = other.to_array()
        elif isinstance(other, numbers.Real):
            divisor = np.full(3, float(other), dtype=float)
        else:
            return NotImplemented

        # Division by zero yields inf or NaN
        with np.errstate(divide="ignore", invalid="ignore"):
            quotient: NDArray[np.float64] = self.to_array() / divisor
        self._x = float(quotient[0])
        self._y = float(quotient[1])
        self._z = float(quotient[2])
        return self

    def __add__(self, other: Vector3 | float) -> Vector3:
        result: Vector3 = self.copy()
        return result.__iadd__(other)

    def __sub__(self, other: Vector3 | float) -> Vector3:
        result: Vector3 = self.copy()
        return result.__isub__(other)

    def __mul__(self, other: Vector3 | float) -> Vector3:
        result: Vector3 = self.copy()
        return result.__imul__(other)

    def __rmul__(self, scalar: float) -> Vector3:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.__mul__(scalar)

    def __truediv__(self, other: Vector3 | float) -> Vector3:
        result: Vector3 = self.copy()
        return result.__itruediv__(other)
