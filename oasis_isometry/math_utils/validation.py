################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Validation helpers for rotation axes and rotation matrices."""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from .matrix3 import Matrix3
from .tolerance import AXIS_NORM_EPS
from .tolerance import ORTHONORMAL_TOL
from .vector3 import Vector3


_LOG: logging.Logger = logging.getLogger(__name__)


class IsometryError(Exception):
    """Raised when an isometry input is degenerate."""


def is_orthonormal(rotation: Matrix3, tol: float = ORTHONORMAL_TOL) -> bool:
    """Return True if R is a proper rotation within tolerance.

    Both R * R^T = I and det(R) = 1 must hold to within tol, so reflections
    are rejected.
    """
    mat: NDArray[np.float64] = rotation.to_array()
    if not np.all(np.isfinite(mat)):
        return False
    deviation: float = float(np.max(np.abs(mat @ mat.T - np.eye(3))))
    if deviation > tol:
        return False
    return abs(rotation.det() - 1.0) <= tol


def require_axis(axis: Vector3, eps: float = AXIS_NORM_EPS) -> None:
    """Raise IsometryError unless the axis is finite with norm >= eps."""
    norm: float = axis.norm()
    if not np.isfinite(norm) or norm < eps:
        _LOG.debug("Rejecting rotation axis %s, norm %g", axis, norm)
        raise IsometryError("rotation axis must be finite and non-zero")


def require_rotation(rotation: Matrix3, tol: float = ORTHONORMAL_TOL) -> None:
    """Raise IsometryError unless the matrix is a proper rotation."""
    if not is_orthonormal(rotation, tol):
        _LOG.debug("Rejecting non-orthonormal rotation %s", rotation)
        raise IsometryError("rotation must be orthonormal with det 1")
