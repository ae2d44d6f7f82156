################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Fixed-dimension float32 matrix value type."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from oasis_matrix.config.matrix_params import BOUNDS_POLICY_STRICT
from oasis_matrix.config.matrix_params import ZERO_LENGTH_POLICY_RAISE
from oasis_matrix.config.matrix_params import MatrixParams
from oasis_matrix.config.matrix_params import resolve_params
from oasis_matrix.math_utils import flat_ops
from oasis_matrix.math_utils.validation import ELEMENT_DTYPE
from oasis_matrix.math_utils.validation import as_flat_elements
from oasis_matrix.math_utils.validation import flatten_rows
from oasis_matrix.math_utils.validation import require_dimension
from oasis_matrix.math_utils.validation import require_index
from oasis_matrix.matrix_errors import CrossProductRequires3DError
from oasis_matrix.matrix_errors import DimensionMismatchError
from oasis_matrix.matrix_errors import DotProductShapeMismatchError
from oasis_matrix.matrix_errors import NotAVectorError
from oasis_matrix.matrix_errors import ShapeMismatchError
from oasis_matrix.matrix_errors import ZeroLengthVectorError


_LOG: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Matrix:
    """Immutable rows x cols matrix of float32 values in row-major order.

    A vector is a matrix with a single column.

    Attributes:
        elements: Read-only flat float32 array of length rows * cols
        rows: Number of rows, at least 1
        cols: Number of columns, at least 1
    """

    elements: NDArray[np.float32]
    rows: int
    cols: int

    def __post_init__(self) -> None:
        """Validate dimensions and freeze the element data."""
        elements: NDArray[np.float32] = as_flat_elements(self.elements, "elements")
        rows: int = require_dimension(self.rows, "rows")
        cols: int = require_dimension(self.cols, "cols")
        if elements.size != rows * cols:
            raise DimensionMismatchError(
                "the provided data does not match the matrix dimensions "
                f"({elements.size} elements for {rows}x{cols})"
            )

        object.__setattr__(self, "elements", elements)
        object.__setattr__(self, "rows", rows)
        object.__setattr__(self, "cols", cols)

    @classmethod
    def from_flat(cls, elements: Sequence[float], rows: int, cols: int) -> Matrix:
        """Create a matrix from row-major element data."""
        return cls(elements, rows, cols)  # type: ignore[arg-type]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        """Create a matrix from a sequence of equal-length rows."""
        flat: list[float]
        row_count: int
        col_count: int
        flat, row_count, col_count = flatten_rows(rows)
        return cls.from_flat(flat, row_count, col_count)

    @classmethod
    def vector(cls, elements: Sequence[float]) -> Matrix:
        """Create a column vector."""
        return cls.from_flat(elements, len(elements), 1)

    @classmethod
    def vector2(cls, x: float, y: float) -> Matrix:
        return cls.vector([x, y])

    @classmethod
    def vector3(cls, x: float, y: float, z: float) -> Matrix:
        return cls.vector([x, y, z])

    @classmethod
    def vector4(cls, x: float, y: float, z: float, w: float) -> Matrix:
        return cls.vector([x, y, z, w])

    @property
    def shape(self) -> tuple[int, int]:
        """Return (rows, cols)."""
        return self.rows, self.cols

    @property
    def is_vector(self) -> bool:
        return self.cols == 1

    def raw_data(self) -> NDArray[np.float32]:
        """Return the read-only row-major element array."""
        return self.elements

    def to_rows(self) -> list[list[float]]:
        """Return the elements as nested Python lists."""
        result: list[list[float]] = []
        for row in range(self.rows):
            start: int = row * self.cols
            result.append(
                [float(value) for value in self.elements[start : start + self.cols]]
            )
        return result

    def get(self, row: int, col: int, params: MatrixParams | None = None) -> float:
        """Return the element at (row, col).

        Under the default "strict" bounds policy both indices must lie
        inside the matrix. The "flat" policy only rejects locations whose
        row-major index runs past the last element.
        """
        resolved: MatrixParams = resolve_params(params)
        row = require_index(row, "row")
        col = require_index(col, "col")
        rows: int | None = None
        if resolved.bounds_policy == BOUNDS_POLICY_STRICT:
            rows = self.rows
        return flat_ops.get(self.elements, self.cols, row, col, rows)

    def add(self, other: Matrix) -> Matrix:
        """Return the element-wise sum."""
        self._require_same_shape(other)
        return Matrix(flat_ops.add(self.elements, other.elements), self.rows, self.cols)

    def subtract(self, other: Matrix) -> Matrix:
        """Return the element-wise difference."""
        self._require_same_shape(other)
        return Matrix(
            flat_ops.subtract(self.elements, other.elements), self.rows, self.cols
        )

    def scale(self, scalar: float) -> Matrix:
        """Return the matrix with every element multiplied by scalar."""
        return Matrix(flat_ops.scale(self.elements, scalar), self.rows, self.cols)

    def transpose(self) -> Matrix:
        """Return the transposed matrix."""
        data: NDArray[np.float32]
        rows: int
        cols: int
        data, rows, cols = flat_ops.transpose(self.elements, self.rows, self.cols)
        return Matrix(data, rows, cols)

    def dot(self, other: Matrix) -> Matrix:
        """Return the matrix product self * other."""
        data: NDArray[np.float32]
        rows: int
        cols: int
        data, rows, cols = flat_ops.dot(
            self.elements, self.shape, other.elements, other.shape
        )
        return Matrix(data, rows, cols)

    def length(self) -> float:
        """Return the Euclidean norm of a vector."""
        self._require_vector()
        acc: np.float32 = ELEMENT_DTYPE(0.0)
        for value in self.elements:
            acc += value * value
        return float(np.sqrt(acc))

    def unit(self, params: MatrixParams | None = None) -> Matrix:
        """Return the vector scaled to unit length."""
        resolved: MatrixParams = resolve_params(params)
        length: np.float32 = ELEMENT_DTYPE(self.length())
        if length == 0.0:
            if resolved.zero_length_policy == ZERO_LENGTH_POLICY_RAISE:
                raise ZeroLengthVectorError("cannot normalize a zero-length vector")
            _LOG.warning("Normalizing a zero-length vector, result is not finite")

        with np.errstate(divide="ignore", invalid="ignore"):
            data: NDArray[np.float32] = self.elements / length
        return Matrix.vector(data)

    def vector_dot(self, other: Matrix) -> float:
        """Return the scalar inner product of two vectors."""
        self._require_vector()
        other._require_vector()
        if self.rows != other.rows:
            raise DotProductShapeMismatchError(
                f"vectors of length {self.rows} and {other.rows} have no inner product"
            )
        product: Matrix = self.transpose().dot(other)
        return float(product.elements[0])

    def cross(self, other: Matrix) -> Matrix:
        """Return the cross product of two 3-element vectors."""
        self._require_vector()
        other._require_vector()
        if self.rows != 3 or other.rows != 3:
            raise CrossProductRequires3DError(
                "lhs and rhs must be 3-element vectors for cross product"
            )

        a: NDArray[np.float32] = self.elements
        b: NDArray[np.float32] = other.elements
        return Matrix.vector(
            [
                a[1] * b[2] - a[2] * b[1],
                a[2] * b[0] - a[0] * b[2],
                a[0] * b[1] - a[1] * b[0],
            ]
        )

    def isclose(self, other: Matrix, params: MatrixParams | None = None) -> bool:
        """Return True if shapes match and elements agree within tolerance."""
        resolved: MatrixParams = resolve_params(params)
        if self.shape != other.shape:
            return False
        return bool(
            np.allclose(
                self.elements, other.elements, atol=resolved.atol, rtol=resolved.rtol
            )
        )

    def _require_vector(self) -> None:
        if not self.is_vector:
            raise NotAVectorError(self.cols)

    def _require_same_shape(self, other: Matrix) -> None:
        if self.shape != other.shape:
            raise ShapeMismatchError(
                "lhs and rhs matrices must have the same dimensions "
                f"({self.rows}x{self.cols} != {other.rows}x{other.cols})"
            )

    def __getitem__(self, location: tuple[int, int]) -> float:
        row, col = location
        return self.get(row, col)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self.elements, other.elements)
        )

    def __hash__(self) -> int:
        # Adding +0.0 maps -0.0 to +0.0 so equal matrices hash alike
        normalized: NDArray[np.float32] = self.elements + ELEMENT_DTYPE(0.0)
        return hash((self.rows, self.cols, normalized.tobytes()))

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scalar: Any) -> Matrix:
        if not _is_scalar(scalar):
            return NotImplemented
        return self.scale(scalar)

    def __rmul__(self, scalar: Any) -> Matrix:
        return self.__mul__(scalar)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.dot(other)


def _is_scalar(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float, np.integer, np.floating))
