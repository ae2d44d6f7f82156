################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for matrix input validation helpers."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.typing import NDArray

from oasis_matrix.math_utils.validation import as_flat_elements
from oasis_matrix.math_utils.validation import flatten_rows
from oasis_matrix.math_utils.validation import require_dimension
from oasis_matrix.math_utils.validation import require_index
from oasis_matrix.matrix_errors import DimensionMismatchError
from oasis_matrix.matrix_errors import EmptyDataError
from oasis_matrix.matrix_errors import OutOfBoundsError


def test_as_flat_elements_coerces() -> None:
    """Checks coercion to a read-only float32 array."""
    array: NDArray[np.float32] = as_flat_elements([1, 2, 3], "values")
    assert array.dtype == np.float32
    assert array.shape == (3,)
    assert not array.flags.writeable


def test_as_flat_elements_rejects_bad_input() -> None:
    """Checks empty and nested data are rejected."""
    with pytest.raises(EmptyDataError):
        as_flat_elements([], "values")
    with pytest.raises(DimensionMismatchError):
        as_flat_elements([[1.0, 2.0], [3.0, 4.0]], "values")


def test_require_dimension() -> None:
    """Checks dimensions must be positive ints."""
    assert require_dimension(np.int64(3), "rows") == 3
    with pytest.raises(DimensionMismatchError):
        require_dimension(0, "rows")
    with pytest.raises(TypeError):
        require_dimension(True, "rows")
    with pytest.raises(TypeError):
        require_dimension(2.0, "rows")


def test_require_index() -> None:
    """Checks indices must be non-negative ints."""
    assert require_index(0, "row") == 0
    with pytest.raises(OutOfBoundsError):
        require_index(-1, "row")
    with pytest.raises(TypeError):
        require_index("1", "row")


def test_flatten_rows() -> None:
    """Checks nested rows flatten in row-major order."""
    flat: list[float]
    rows: int
    cols: int
    flat, rows, cols = flatten_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    assert (rows, cols) == (2, 3)
    assert flat == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]


def test_flatten_rows_keeps_ragged_count() -> None:
    """Checks ragged rows are flattened as-is for the constructor to reject."""
    flat: list[float]
    rows: int
    cols: int
    flat, rows, cols = flatten_rows([[1.0, 2.0], [3.0]])
    assert (rows, cols) == (2, 2)
    assert len(flat) == 3
