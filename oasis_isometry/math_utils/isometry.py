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
from typing import Optional
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from oasis_isometry.config.isometry_params import INVERSE_METHOD_TRANSPOSE
from oasis_isometry.config.isometry_params import IsometryParams

from .matrix3 import Matrix3
from .tolerance import ISOMETRY_PRINT_PRECISION
from .validation import require_axis
from .validation import require_rotation
from .vector3 import Vector3


class Isometry:
    """Rigid transform made of a rotation matrix and a translation vector.

    Responsibility:
        Represent the affine map p -> R * p + t and provide composition,
        inversion and construction from axis-angle or Euler angles.

    Data contract:
        - rotation R is a Matrix3, translation t is a Vector3. Constructor
          inputs are copied. The translation may be given as any 3 values;
          a rotation that is not a Matrix3 raises TypeError.
        - The translation and rotation properties return the stored objects,
          so in-place edits through them update the isometry. Assignment
          copies the new value in.
        - A default-constructed isometry has a ZERO rotation, not identity.
          It maps every point to the translation and cannot be inverted. Use
          identity() for the neutral transform.
        - Orthonormality of R is not enforced. Manually built isometries with
          a non-rotation R invert to the matrix-inverse result, which is not
          the geometric inverse, unless strict params are passed.

    Equations:
        Composition, applying other first and then self:
            (R1, t1) * (R2, t2) = (R1 * R2, R1 * t2 + t1)

        Inverse:
            (R, t)^-1 = (R^-1, -R^-1 * t)

        Rodrigues rotation about unit axis u by angle theta:
            R = cos(theta) I + sin(theta) [u]x + (1 - cos(theta)) u u^T

        Euler angles, roll about X, pitch about Y, yaw about Z:
            R = Rx(roll) * Ry(pitch) * Rz(yaw)
    """

    __slots__ = ("_translation", "_rotation")

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        translation: Optional[Vector3 | Sequence[float]] = None,
        rotation: Optional[Matrix3] = None,
    ) -> None:
        self._translation: Vector3 = (
            Vector3.from_sequence(translation)
            if translation is not None
            else Vector3.zero()
        )
        if rotation is not None and not isinstance(rotation, Matrix3):
            raise TypeError(
                f"rotation must be a Matrix3, not {type(rotation).__name__}"
            )
        self._rotation: Matrix3 = (
            rotation.copy() if rotation is not None else Matrix3.zero()
        )

    @classmethod
    def identity(cls) -> Isometry:
        return cls(Vector3.zero(), Matrix3.identity())

    @classmethod
    def from_translation(cls, translation: Vector3) -> Isometry:
        """Return a pure translation with identity rotation."""
        return cls(translation, Matrix3.identity())

    @classmethod
    def rotate_around(
        cls,
        axis: Vector3,
        radians: float,
        params: Optional[IsometryParams] = None,
    ) -> Isometry:
        """Return a pure rotation of `radians` about `axis`.

        The axis is normalized here. A zero-length axis yields NaN components
        unless strict params are given, in which case IsometryError is raised.
        """
        if params is not None and params.strict:
            require_axis(axis, params.axis_norm_eps)

        # 0 / 0 is allowed to produce NaN
        with np.errstate(divide="ignore", invalid="ignore"):
            unit: NDArray[np.float64] = axis.to_array() / np.float64(axis.norm())
        ux: float = float(unit[0])
        uy: float = float(unit[1])
        uz: float = float(unit[2])

        cos_a: float = math.cos(radians)
        sin_a: float = math.sin(radians)
        one_minus_cos: float = 1.0 - cos_a

        rotation: Matrix3 = Matrix3(
            cos_a + ux * ux * one_minus_cos,
            ux * uy * one_minus_cos - uz * sin_a,
            ux * uz * one_minus_cos + uy * sin_a,
            uy * ux * one_minus_cos + uz * sin_a,
            cos_a + uy * uy * one_minus_cos,
            uy * uz * one_minus_cos - ux * sin_a,
            uz * ux * one_minus_cos - uy * sin_a,
            uz * uy * one_minus_cos + ux * sin_a,
            cos_a + uz * uz * one_minus_cos,
        )
        return cls(Vector3.zero(), rotation)

    @classmethod
    def from_euler_angles(
        cls,
        roll: float,
        pitch: float,
        yaw: float,
        params: Optional[IsometryParams] = None,
    ) -> Isometry:
        """Return Rx(roll) * Ry(pitch) * Rz(yaw), angles in radians.

        Strict params reject a result that is not a proper rotation, which
        happens when an angle is not finite.
        """
        result: Isometry = (
            cls.rotate_around(Vector3.unit_x(), roll, params)
            * cls.rotate_around(Vector3.unit_y(), pitch, params)
            * cls.rotate_around(Vector3.unit_z(), yaw, params)
        )  # type: ignore[assignment]
        if params is not None and params.strict:
            require_rotation(result.rotation, params.orthonormal_tol)
        return result

    @classmethod
    def from_matrix(cls, array: NDArray[np.float64]) -> Isometry:
        """Build an isometry from a 4x4 homogeneous matrix.

        The bottom row is ignored.
        """
        mat: NDArray[np.float64] = np.asarray(array, dtype=float)
        if mat.shape != (4, 4):
            raise ValueError("array must be shape (4, 4)")
        return cls(Vector3.from_array(mat[:3, 3]), Matrix3.from_array(mat[:3, :3]))

    def copy(self) -> Isometry:
        return Isometry(self._translation, self._rotation)

    @property
    def translation(self) -> Vector3:
        return self._translation

    @translation.setter
    def translation(self, value: Vector3) -> None:
        for i in range(3):
            self._translation[i] = value[i]

    @property
    def rotation(self) -> Matrix3:
        return self._rotation

    @rotation.setter
    def rotation(self, value: Matrix3) -> None:
        for i in range(3):
            self._rotation[i] = value[i]

    def transform(self, point: Vector3) -> Vector3:
        """Return R * point + t."""
        rotated: Vector3 = self._rotation.product(point)  # type: ignore[assignment]
        return rotated + self._translation

    def inverse(self, params: Optional[IsometryParams] = None) -> Isometry:
        """Return the inverse transform.

        By default the rotation is inverted with the general matrix inverse,
        which raises SingularMatrixError for a singular R. Params may select
        the transpose instead, and strict params reject a non-orthonormal R
        with IsometryError.
        """
        if params is None:
            params = IsometryParams.defaults()

        if params.strict:
            require_rotation(self._rotation, params.orthonormal_tol)

        inv_rotation: Matrix3
        if params.inverse_method == INVERSE_METHOD_TRANSPOSE:
            inv_rotation = self._rotation.transpose()
        else:
            inv_rotation = self._rotation.inverse(params.singular_det_tol)

        inv_translation: Vector3 = inv_rotation.product(  # type: ignore[assignment]
            self._translation
        )
        return Isometry(-1.0 * inv_translation, inv_rotation)

    def compose(self, other: Isometry) -> Isometry:
        """Return self * other, the transform applying other first."""
        return self * other  # type: ignore[return-value]

    def to_matrix(self) -> NDArray[np.float64]:
        """Return the 4x4 homogeneous matrix [[R, t], [0, 1]]."""
        mat: NDArray[np.float64] = np.eye(4, dtype=float)
        mat[:3, :3] = self._rotation.to_array()
        mat[:3, 3] = self._translation.to_array()
        return mat

    def format(self, precision: int = ISOMETRY_PRINT_PRECISION) -> str:
        """Render as [T: <translation>, R: <rotation>]."""
        return (
            f"[T: {self._translation.format(precision)}, "
            f"R: {self._rotation.format(precision)}]"
        )

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Isometry({self._translation!r}, {self._rotation!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Isometry):
            return NotImplemented
        return (
            self._rotation == other.rotation
            and self._translation == other.translation
        )

    def __mul__(self, other: Isometry | Vector3) -> Isometry | Vector3:
        if isinstance(other, Vector3):
            return self.transform(other)
        if not isinstance(other, Isometry):
            return NotImplemented
        translation: Vector3 = self.transform(other.translation)
        rotation: Matrix3 = self._rotation.product(  # type: ignore[assignment]
            other.rotation
        )
        return Isometry(translation, rotation)

    def __imul__(self, other: Isometry) -> Isometry:
        if not isinstance(other, Isometry):
            return NotImplemented
        composed: Isometry = self * other  # type: ignore[assignment]
        # Stored objects are updated in place so outstanding views stay valid
        self.translation = composed.translation
        self.rotation = composed.rotation
        return self
