################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Numeric tolerances shared by the 3D math types."""

from __future__ import annotations

import sys


# Absolute per-component tolerance for vector and matrix equality
EQUALITY_EPS: float = sys.float_info.epsilon

# Determinant magnitude below which a matrix is treated as singular
SINGULAR_DET_TOL: float = 1e-6

# Max deviation of R * R^T from identity for a rotation to be accepted
ORTHONORMAL_TOL: float = 1e-9

# Smallest axis norm accepted when axes are validated
AXIS_NORM_EPS: float = 1e-12

# Significant digits used by str() for vectors and matrices
DEFAULT_PRINT_PRECISION: int = 6

# Significant digits used by str() for isometries
ISOMETRY_PRINT_PRECISION: int = 9
