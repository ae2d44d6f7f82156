################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Square transformation matrices for homogeneous coordinates.

A 4x4 translation matrix acts on (x, y, z, 1) points; the scaling matrix
puts the vector components on the diagonal.
"""

from __future__ import annotations

import logging

from oasis_matrix.math_utils.validation import require_dimension
from oasis_matrix.matrix_errors import NotAVectorError
from oasis_matrix.matrix_types.matrix import Matrix


_LOG: logging.Logger = logging.getLogger(__name__)

# Dimension of homogeneous 3D transforms
HOMOGENEOUS_DIM: int = 4


def identity(size: int = HOMOGENEOUS_DIM) -> Matrix:
    """Return the size x size identity matrix."""
    size = require_dimension(size, "size")
    return scaling_matrix(Matrix.vector([1.0] * size))


def scaling_matrix(diagonal: Matrix) -> Matrix:
    """Return a square matrix with the vector components on its diagonal."""
    if not diagonal.is_vector:
        raise NotAVectorError(diagonal.cols)

    size: int = diagonal.rows
    data: list[float] = [0.0] * (size * size)
    for i in range(size):
        data[i * size + i] = diagonal.get(i, 0)

    _LOG.debug("Built %dx%d scaling matrix", size, size)
    return Matrix(data, size, size)  # type: ignore[arg-type]


def translation_matrix(offset: Matrix) -> Matrix:
    """Return the identity with its last column replaced by the offset.

    Every row is overwritten, including the last one, so the bottom-right
    element is offset[-1]. Use 1.0 there for a pure translation.
    """
    if not offset.is_vector:
        raise NotAVectorError(offset.cols)

    size: int = offset.rows
    data: list[list[float]] = identity(size).to_rows()
    for row in range(size):
        data[row][size - 1] = offset.get(row, 0)

    _LOG.debug("Built %dx%d translation matrix", size, size)
    return Matrix.from_rows(data)
