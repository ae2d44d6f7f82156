################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Algorithms over raw row-major matrix storage.

Every function here takes flat float32 arrays plus explicit dimensions and
returns new arrays. Shapes are only as strict as the arguments allow: the
element-wise helpers compare flat lengths, since raw storage carries no
row/column split.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from oasis_matrix.math_utils.validation import ELEMENT_DTYPE
from oasis_matrix.matrix_errors import DotProductShapeMismatchError
from oasis_matrix.matrix_errors import OutOfBoundsError
from oasis_matrix.matrix_errors import ShapeMismatchError


_LOG: logging.Logger = logging.getLogger(__name__)


def get(
    data: NDArray[np.float32],
    cols: int,
    row: int,
    col: int,
    rows: int | None = None,
) -> float:
    """Return the element at (row, col) of row-major data.

    Without ``rows`` only the flattened index row * cols + col is checked,
    so a column past the edge is accepted while the index stays in range.
    Passing ``rows`` checks row and column independently.
    """
    if row < 0 or col < 0:
        raise OutOfBoundsError(f"location ({row}, {col}) is out of bounds")
    if rows is not None and (row >= rows or col >= cols):
        raise OutOfBoundsError(
            f"location ({row}, {col}) is out of bounds for {rows}x{cols}"
        )

    index: int = row * cols + col
    if index >= len(data):
        raise OutOfBoundsError(f"location ({row}, {col}) is out of bounds")

    return float(data[index])


def add(lhs: NDArray[np.float32], rhs: NDArray[np.float32]) -> NDArray[np.float32]:
    """Return the element-wise sum of two flat arrays."""
    _require_same_length(lhs, rhs)
    result: NDArray[np.float32] = np.empty(len(lhs), dtype=ELEMENT_DTYPE)
    for i in range(len(lhs)):
        result[i] = lhs[i] + rhs[i]
    return result


def subtract(lhs: NDArray[np.float32], rhs: NDArray[np.float32]) -> NDArray[np.float32]:
    """Return the element-wise difference of two flat arrays."""
    _require_same_length(lhs, rhs)
    result: NDArray[np.float32] = np.empty(len(lhs), dtype=ELEMENT_DTYPE)
    for i in range(len(lhs)):
        result[i] = lhs[i] - rhs[i]
    return result


def scale(data: NDArray[np.float32], scalar: float) -> NDArray[np.float32]:
    """Return every element multiplied by a scalar."""
    factor: np.float32 = ELEMENT_DTYPE(scalar)
    result: NDArray[np.float32] = np.empty(len(data), dtype=ELEMENT_DTYPE)
    for i in range(len(data)):
        result[i] = data[i] * factor
    return result


def transpose(
    data: NDArray[np.float32], rows: int, cols: int
) -> tuple[NDArray[np.float32], int, int]:
    """Return the transposed data and its (rows, cols).

    Output is filled column by column of the input, which is row-major
    order for the transposed shape.
    """
    transposed: list[float] = []
    for col in range(cols):
        for row in range(rows):
            transposed.append(get(data, cols, row, col, rows))

    return np.array(transposed, dtype=ELEMENT_DTYPE), cols, rows


def dot(
    lhs: NDArray[np.float32],
    lhs_shape: tuple[int, int],
    rhs: NDArray[np.float32],
    rhs_shape: tuple[int, int],
    auto_transpose_vectors: bool = False,
) -> tuple[NDArray[np.float32], int, int]:
    """Return the matrix product lhs * rhs and its (rows, cols).

    With ``auto_transpose_vectors`` a pair of column vectors is multiplied
    as row vector times column vector, giving the 1x1 inner product.

    Naive triple loop, O(lhs_rows * rhs_cols * lhs_cols).
    """
    lhs_rows, lhs_cols = lhs_shape
    rhs_rows, rhs_cols = rhs_shape

    if auto_transpose_vectors and lhs_cols == 1 and rhs_cols == 1:
        # Same storage read as a 1xN row
        lhs_rows, lhs_cols = 1, lhs_rows

    # TODO: Replace the triple loop with Strassen for large square operands
    if lhs_cols != rhs_rows:
        raise DotProductShapeMismatchError(
            f"cannot multiply {lhs_rows}x{lhs_cols} by {rhs_rows}x{rhs_cols}"
        )

    _LOG.debug(
        "Multiplying %dx%d by %dx%d", lhs_rows, lhs_cols, rhs_rows, rhs_cols
    )

    result: NDArray[np.float32] = np.empty(lhs_rows * rhs_cols, dtype=ELEMENT_DTYPE)
    for row in range(lhs_rows):
        for col in range(rhs_cols):
            acc: np.float32 = ELEMENT_DTYPE(0.0)
            for k in range(lhs_cols):
                lhs_val: np.float32 = ELEMENT_DTYPE(
                    get(lhs, lhs_cols, row, k, lhs_rows)
                )
                rhs_val: np.float32 = ELEMENT_DTYPE(
                    get(rhs, rhs_cols, k, col, rhs_rows)
                )
                acc += lhs_val * rhs_val
            result[row * rhs_cols + col] = acc

    return result, lhs_rows, rhs_cols


def _require_same_length(lhs: NDArray[np.float32], rhs: NDArray[np.float32]) -> None:
    if len(lhs) != len(rhs):
        raise ShapeMismatchError(
            "lhs and rhs matrices must have the same dimensions "
            f"({len(lhs)} != {len(rhs)} elements)"
        )
