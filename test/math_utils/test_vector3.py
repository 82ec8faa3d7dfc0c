################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for the Vector3 type."""

from __future__ import annotations

import sys

import numpy as np
import pytest
from numpy.typing import NDArray

from oasis_isometry.math_utils.vector3 import Vector3


EPS: float = sys.float_info.epsilon


def test_default_is_zero() -> None:
    """Checks the default vector is the zero vector."""
    vec: Vector3 = Vector3()
    assert (vec.x, vec.y, vec.z) == (0.0, 0.0, 0.0)
    assert vec == Vector3.zero()


def test_unit_constants() -> None:
    """Checks the unit axis constants."""
    assert Vector3.unit_x().to_list() == [1.0, 0.0, 0.0]
    assert Vector3.unit_y().to_list() == [0.0, 1.0, 0.0]
    assert Vector3.unit_z().to_list() == [0.0, 0.0, 1.0]


def test_constants_cannot_be_mutated() -> None:
    """Checks mutating a returned constant leaves the constant intact."""
    zero: Vector3 = Vector3.zero()
    zero.x = 5.0
    zero += Vector3(1.0, 1.0, 1.0)
    assert Vector3.zero().to_list() == [0.0, 0.0, 0.0]


def test_from_sequence_requires_three_values() -> None:
    """Checks construction from a list of the wrong size fails."""
    assert Vector3.from_sequence([1.0, 2.0, 3.0]).to_list() == [1.0, 2.0, 3.0]
    with pytest.raises(ValueError):
        Vector3.from_sequence([1.0, 2.0])
    with pytest.raises(ValueError):
        Vector3.from_sequence([1.0, 2.0, 3.0, 4.0])


def test_copy_is_independent() -> None:
    """Checks copies do not alias the original."""
    vec: Vector3 = Vector3(1.0, 2.0, 3.0)
    other: Vector3 = vec.copy()
    other.y = 7.0
    assert vec.y == 2.0


def test_vector_arithmetic() -> None:
    """Checks component-wise vector-vector operators."""
    a: Vector3 = Vector3(1.0, 2.0, 3.0)
    b: Vector3 = Vector3(4.0, 5.0, 6.0)
    assert (a + b).to_list() == [5.0, 7.0, 9.0]
    assert (b - a).to_list() == [3.0, 3.0, 3.0]
    assert (a * b).to_list() == [4.0, 10.0, 18.0]
    assert (b / a).to_list() == [4.0, 2.5, 2.0]
    assert a.to_list() == [1.0, 2.0, 3.0]


def test_scalar_arithmetic() -> None:
    """Checks scalar operands are broadcast."""
    a: Vector3 = Vector3(1.0, 2.0, 3.0)
    assert (a + 1.0).to_list() == [2.0, 3.0, 4.0]
    assert (a - 1.0).to_list() == [0.0, 1.0, 2.0]
    assert (a * 2.0).to_list() == [2.0, 4.0, 6.0]
    assert (2 * a).to_list() == [2.0, 4.0, 6.0]
    assert (a / 2.0).to_list() == [0.5, 1.0, 1.5]
    assert (-a).to_list() == [-1.0, -2.0, -3.0]


def test_in_place_operators_mutate_self() -> None:
    """Checks in-place operators update and return the same object."""
    vec: Vector3 = Vector3(1.0, 2.0, 3.0)
    alias: Vector3 = vec
    vec += Vector3(1.0, 1.0, 1.0)
    vec -= 0.5
    vec *= Vector3(2.0, 2.0, 2.0)
    vec /= 3.0
    assert vec is alias
    assert vec.to_list() == [1.0, 5.0 / 3.0, 7.0 / 3.0]


def test_unsupported_operand_raises_type_error() -> None:
    """Checks non-numeric operands are rejected."""
    with pytest.raises(TypeError):
        Vector3() + "abc"  # type: ignore[operator]


def test_dot() -> None:
    """Checks the dot product."""
    assert Vector3(1.0, 2.0, 3.0).dot(Vector3(4.0, 5.0, 6.0)) == 32.0
    assert Vector3.unit_x().dot(Vector3.unit_y()) == 0.0


def test_cross_axes() -> None:
    """Checks the cross product is right-handed."""
    assert Vector3.unit_x().cross(Vector3.unit_y()) == Vector3.unit_z()
    assert Vector3.unit_y().cross(Vector3.unit_z()) == Vector3.unit_x()
    assert Vector3.unit_z().cross(Vector3.unit_x()) == Vector3.unit_y()


def test_cross_matches_numpy() -> None:
    """Checks the cross product against numpy."""
    a: Vector3 = Vector3(1.5, -2.0, 0.25)
    b: Vector3 = Vector3(-0.75, 3.0, 4.0)
    expected: NDArray[np.float64] = np.cross(a.to_array(), b.to_array())
    assert np.allclose(a.cross(b).to_array(), expected)


def test_cross_anticommutative() -> None:
    """Checks a x b == -1 * (b x a)."""
    a: Vector3 = Vector3(0.3, -1.7, 2.9)
    b: Vector3 = Vector3(-4.1, 0.6, 1.3)
    assert a.cross(b) == -1 * b.cross(a)


def test_norm() -> None:
    """Checks the Euclidean norm, including the zero vector."""
    assert Vector3(3.0, 0.0, 4.0).norm() == 5.0
    assert Vector3().norm() == 0.0


def test_indexing() -> None:
    """Checks indexed reads and writes."""
    vec: Vector3 = Vector3(1.0, 2.0, 3.0)
    assert [vec[0], vec[1], vec[2]] == [1.0, 2.0, 3.0]
    vec[1] = 9.0
    assert vec.y == 9.0
    assert list(vec) == [1.0, 9.0, 3.0]
    assert len(vec) == 3


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_index_out_of_range(index: int) -> None:
    """Checks out-of-range indices fail on read and write."""
    vec: Vector3 = Vector3()
    with pytest.raises(IndexError):
        vec[index]
    with pytest.raises(IndexError):
        vec[index] = 1.0


def test_equality_reflexive_and_symmetric() -> None:
    """Checks equality is reflexive and symmetric."""
    a: Vector3 = Vector3(0.1, 0.2, 0.3)
    b: Vector3 = Vector3(0.1, 0.2, 0.3)
    assert a == a
    assert a == b
    assert b == a


def test_equality_tolerance_is_machine_epsilon() -> None:
    """Checks differences up to epsilon compare equal and 2 eps do not."""
    assert Vector3(0.0, 0.0, 0.0) == Vector3(EPS, 0.0, 0.0)
    assert Vector3(1.0, 1.0, 1.0) == Vector3(1.0, 1.0 + EPS, 1.0)
    assert Vector3(0.0, 0.0, 0.0) != Vector3(0.0, 0.0, 2.0 * EPS)
    assert Vector3(1.0, 1.0, 1.0) != Vector3(1.0 + 2.0 * EPS, 1.0, 1.0)


def test_equality_against_other_types() -> None:
    """Checks comparison with a non-vector is False."""
    assert Vector3() != (0.0, 0.0, 0.0)


def test_unhashable() -> None:
    """Checks vectors cannot be hashed."""
    with pytest.raises(TypeError):
        hash(Vector3())


def test_nan_propagates() -> None:
    """Checks NaN components propagate and never compare equal."""
    vec: Vector3 = Vector3(float("nan"), 0.0, 0.0)
    assert np.isnan((vec + Vector3(1.0, 1.0, 1.0)).x)
    assert vec != vec


def test_division_by_zero_scalar() -> None:
    """Checks dividing by zero gives signed infinities and NaN."""
    result: Vector3 = Vector3(1.0, 0.0, -1.0) / 0.0
    assert result.x == float("inf")
    assert np.isnan(result.y)
    assert result.z == float("-inf")


def test_division_by_vector_with_zero_component() -> None:
    """Checks component-wise division by zero does not raise."""
    result: Vector3 = Vector3(1.0, 1.0, 1.0) / Vector3(0.0, 1.0, 1.0)
    assert result.x == float("inf")
    assert result.y == 1.0
    assert result.z == 1.0

    vec: Vector3 = Vector3(2.0, 4.0, 6.0)
    alias: Vector3 = vec
    vec /= Vector3(2.0, 0.0, 3.0)
    assert vec is alias
    assert vec.x == 1.0
    assert vec.y == float("inf")
    assert vec.z == 2.0


def test_str() -> None:
    """Checks the text rendering."""
    assert str(Vector3(1.0, 2.5, -3.0)) == "(x: 1, y: 2.5, z: -3)"
    assert str(Vector3(1.0 / 3.0, 0.0, 0.0)) == "(x: 0.333333, y: 0, z: 0)"
    assert Vector3(1.0 / 3.0, 0.0, 0.0).format(3) == "(x: 0.333, y: 0, z: 0)"


def test_numpy_round_trip() -> None:
    """Checks conversion to and from numpy arrays."""
    vec: Vector3 = Vector3(1.0, -2.0, 3.5)
    assert Vector3.from_array(vec.to_array()) == vec
    with pytest.raises(ValueError):
        Vector3.from_array(np.zeros(4))
