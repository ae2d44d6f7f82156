################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for matrix parameter configuration."""

from __future__ import annotations

import pytest

from oasis_matrix.config.matrix_params import BOUNDS_POLICY_STRICT
from oasis_matrix.config.matrix_params import ZERO_LENGTH_POLICY_RAISE
from oasis_matrix.config.matrix_params import MatrixParams
from oasis_matrix.config.matrix_params import MatrixParamsError
from oasis_matrix.config.matrix_params import resolve_params
from oasis_matrix.matrix_types import Matrix


def test_defaults_validate() -> None:
    """Defaults should validate successfully."""
    params: MatrixParams = MatrixParams.defaults()
    params.validate()
    assert params.bounds_policy == BOUNDS_POLICY_STRICT
    assert params.zero_length_policy == ZERO_LENGTH_POLICY_RAISE


def test_invalid_policies() -> None:
    """Unknown policy names should fail validation."""
    with pytest.raises(MatrixParamsError):
        MatrixParams(bounds_policy="loose").validate()
    with pytest.raises(MatrixParamsError):
        MatrixParams(zero_length_policy="ignore").validate()


def test_invalid_tolerances() -> None:
    """Negative or non-finite tolerances should fail validation."""
    with pytest.raises(MatrixParamsError):
        MatrixParams(atol=-1.0).validate()
    with pytest.raises(MatrixParamsError):
        MatrixParams(rtol=float("nan")).validate()


def test_replace_and_dict() -> None:
    """replace should return a modified copy and dict should list fields."""
    params: MatrixParams = MatrixParams.defaults()
    flat: MatrixParams = params.replace(bounds_policy="flat")
    assert params.bounds_policy == "strict"
    assert flat.as_nested_dict() == {
        "bounds_policy": "flat",
        "zero_length_policy": "raise",
        "atol": 1e-6,
        "rtol": 1e-5,
    }


def test_resolve_params() -> None:
    """None should resolve to defaults and invalid params should raise."""
    assert resolve_params(None) == MatrixParams.defaults()
    with pytest.raises(MatrixParamsError):
        resolve_params(MatrixParams(bounds_policy="loose"))


def test_operations_validate_params() -> None:
    """Operations should reject invalid parameters."""
    vector: Matrix = Matrix.vector2(3.0, 4.0)
    with pytest.raises(MatrixParamsError):
        vector.get(0, 0, params=MatrixParams(bounds_policy="loose"))
    with pytest.raises(MatrixParamsError):
        vector.unit(params=MatrixParams(zero_length_policy="ignore"))
