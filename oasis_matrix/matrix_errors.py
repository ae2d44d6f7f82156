################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Error kinds raised by matrix construction and arithmetic."""

from __future__ import annotations


class MatrixError(ValueError):
    """Base class for all matrix failures."""


class EmptyDataError(MatrixError):
    """Raised when a matrix is constructed from empty data."""

    def __init__(self) -> None:
        super().__init__("cannot create a matrix with empty data")


class DimensionMismatchError(MatrixError):
    """Raised when element data does not match the matrix dimensions."""


class OutOfBoundsError(MatrixError):
    """Raised when a location lies outside the matrix."""


class NotAVectorError(MatrixError):
    """Raised when a vector-only operation sees more than one column."""

    def __init__(self, cols: int) -> None:
        super().__init__(f"the matrix is not a vector (cols={cols})")


class ShapeMismatchError(MatrixError):
    """Raised when element-wise operands have different dimensions."""


class DotProductShapeMismatchError(MatrixError):
    """Raised when inner dimensions disagree for a matrix product."""


class CrossProductRequires3DError(MatrixError):
    """Raised when a cross product is requested for non-3D vectors."""


class ZeroLengthVectorError(MatrixError):
    """Raised when normalizing a vector with zero length."""
