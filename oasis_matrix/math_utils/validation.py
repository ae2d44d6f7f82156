################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Validation helpers for matrix inputs."""

from __future__ import annotations

from typing import Any
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from oasis_matrix.matrix_errors import DimensionMismatchError
from oasis_matrix.matrix_errors import EmptyDataError
from oasis_matrix.matrix_errors import OutOfBoundsError


# Element type of every matrix
ELEMENT_DTYPE: type = np.float32


def as_flat_elements(values: Any, name: str) -> NDArray[np.float32]:
    """Return a read-only 1-D float32 copy of the element data."""
    array: NDArray[np.float32] = np.array(values, dtype=ELEMENT_DTYPE)
    if array.ndim != 1:
        raise DimensionMismatchError(f"{name} must be a flat sequence")
    if array.size == 0:
        raise EmptyDataError()

    array.flags.writeable = False
    return array


def require_dimension(value: Any, name: str) -> int:
    """Return a validated positive matrix dimension."""
    if not isinstance(value, (int, np.integer)) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")
    if value < 1:
        raise DimensionMismatchError(f"{name} must be positive")
    return int(value)


def require_index(value: Any, name: str) -> int:
    """Return a validated non-negative element index."""
    if not isinstance(value, (int, np.integer)) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")
    if value < 0:
        raise OutOfBoundsError(f"{name} must be non-negative")
    return int(value)


def flatten_rows(rows: Sequence[Sequence[float]]) -> tuple[list[float], int, int]:
    """Flatten nested rows in row-major order.

    The column count is taken from the first row. Ragged rows are not
    rejected here; the flattened count is checked against rows * cols by
    the matrix constructor.
    """
    if len(rows) == 0:
        raise EmptyDataError()

    row_count: int = len(rows)
    col_count: int = len(rows[0])
    if col_count == 0:
        raise EmptyDataError()

    flat: list[float] = [float(value) for row in rows for value in row]
    return flat, row_count, col_count
