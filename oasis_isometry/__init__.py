################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Fixed-dimension 3D linear algebra: vectors, 3x3 matrices and isometries."""

from oasis_isometry.config.isometry_params import IsometryParams
from oasis_isometry.config.isometry_params import IsometryParamsError
from oasis_isometry.math_utils.isometry import Isometry
from oasis_isometry.math_utils.matrix3 import Matrix3
from oasis_isometry.math_utils.matrix3 import SingularMatrixError
from oasis_isometry.math_utils.validation import IsometryError
from oasis_isometry.math_utils.vector3 import Vector3


__all__ = [
    "Isometry",
    "IsometryError",
    "IsometryParams",
    "IsometryParamsError",
    "Matrix3",
    "SingularMatrixError",
    "Vector3",
]
