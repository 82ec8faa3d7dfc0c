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
from dataclasses import dataclass
from typing import Mapping

from oasis_isometry.math_utils.tolerance import AXIS_NORM_EPS
from oasis_isometry.math_utils.tolerance import ORTHONORMAL_TOL
from oasis_isometry.math_utils.tolerance import SINGULAR_DET_TOL


# Inverse rotation computed with the general adjugate inverse
INVERSE_METHOD_GENERAL: str = "general"

# Inverse rotation computed as the transpose, valid for true rotations only
INVERSE_METHOD_TRANSPOSE: str = "transpose"


class IsometryParamsError(Exception):
    """Raised when isometry parameter validation fails."""


@dataclass(frozen=True, slots=True)
class IsometryParams:
    """Configuration parameters for isometry construction and inversion.

    Responsibility:
        Collect the tolerances and policies that Isometry operations accept
        so callers can tighten or relax them in one place.

    Data contract:
        - singular_det_tol: |det| threshold below which a rotation matrix is
          treated as singular by the general inverse.
        - orthonormal_tol: allowed deviation of R * R^T from identity and of
          det(R) from 1 when rotations are validated.
        - axis_norm_eps: smallest axis norm accepted when axes are validated.
        - inverse_method: "general" (adjugate inverse) or "transpose".
        - strict: validate degenerate inputs and raise IsometryError instead
          of propagating NaN or a silently wrong result.

    Determinism and edge cases:
        - defaults() reproduces the unchecked behavior used when no params
          are given.
        - from_dict() rejects unknown keys and non-numeric tolerances.
        - validate() rejects non-positive or non-finite tolerances and
          unknown inverse methods.
    """

    singular_det_tol: float
    orthonormal_tol: float
    axis_norm_eps: float
    inverse_method: str
    strict: bool

    @staticmethod
    def defaults() -> IsometryParams:
        """Return a stable default parameter set."""
        params: IsometryParams = IsometryParams(
            singular_det_tol=SINGULAR_DET_TOL,
            orthonormal_tol=ORTHONORMAL_TOL,
            axis_norm_eps=AXIS_NORM_EPS,
            inverse_method=INVERSE_METHOD_GENERAL,
            strict=False,
        )
        params.validate()
        return params

    @classmethod
    def from_dict(cls, params: Mapping[str, object]) -> IsometryParams:
        """Construct parameters from a mapping, rejecting unknown keys."""
        if not isinstance(params, Mapping):
            raise IsometryParamsError("params must be a mapping")
        unknown_keys: list[str] = sorted(set(params.keys()) - set(cls._field_order()))
        if unknown_keys:
            raise IsometryParamsError(f"unknown parameter: {unknown_keys[0]}")
        defaults: IsometryParams = cls.defaults()
        result: IsometryParams = cls(
            singular_det_tol=cls._as_float(
                "singular_det_tol",
                params.get("singular_det_tol", defaults.singular_det_tol),
            ),
            orthonormal_tol=cls._as_float(
                "orthonormal_tol",
                params.get("orthonormal_tol", defaults.orthonormal_tol),
            ),
            axis_norm_eps=cls._as_float(
                "axis_norm_eps",
                params.get("axis_norm_eps", defaults.axis_norm_eps),
            ),
            inverse_method=cls._as_str(
                "inverse_method",
                params.get("inverse_method", defaults.inverse_method),
            ),
            strict=cls._as_bool("strict", params.get("strict", defaults.strict)),
        )
        result.validate()
        return result

    def validate(self) -> None:
        """Validate parameters and raise IsometryParamsError on failure."""
        self._validate_positive("singular_det_tol", self.singular_det_tol)
        self._validate_positive("orthonormal_tol", self.orthonormal_tol)
        self._validate_positive("axis_norm_eps", self.axis_norm_eps)
        if self.inverse_method not in (
            INVERSE_METHOD_GENERAL,
            INVERSE_METHOD_TRANSPOSE,
        ):
            raise IsometryParamsError(
                "inverse_method must be 'general' or 'transpose'"
            )

    def as_dict(self) -> dict[str, object]:
        """Return a JSON-serializable dict representation."""
        return {
            "singular_det_tol": self.singular_det_tol,
            "orthonormal_tol": self.orthonormal_tol,
            "axis_norm_eps": self.axis_norm_eps,
            "inverse_method": self.inverse_method,
            "strict": self.strict,
        }

    @staticmethod
    def _as_float(name: str, value: object) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise IsometryParamsError(f"{name} must be a float")
        return float(value)

    @staticmethod
    def _as_str(name: str, value: object) -> str:
        if not isinstance(value, str):
            raise IsometryParamsError(f"{name} must be a string")
        return value

    @staticmethod
    def _as_bool(name: str, value: object) -> bool:
        if not isinstance(value, bool):
            raise IsometryParamsError(f"{name} must be a bool")
        return value

    @staticmethod
    def _validate_positive(name: str, value: float) -> None:
        if not math.isfinite(value) or value <= 0.0:
            raise IsometryParamsError(f"{name} must be finite and > 0")

    @staticmethod
    def _field_order() -> list[str]:
        return [
            "singular_det_tol",
            "orthonormal_tol",
            "axis_norm_eps",
            "inverse_method",
            "strict",
        ]
