################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Fixed-dimension float32 matrices, vectors and transform builders."""

from __future__ import annotations

from oasis_matrix.config.matrix_params import MatrixParams
from oasis_matrix.config.matrix_params import MatrixParamsError
from oasis_matrix.matrix_errors import CrossProductRequires3DError
from oasis_matrix.matrix_errors import DimensionMismatchError
from oasis_matrix.matrix_errors import DotProductShapeMismatchError
from oasis_matrix.matrix_errors import EmptyDataError
from oasis_matrix.matrix_errors import MatrixError
from oasis_matrix.matrix_errors import NotAVectorError
from oasis_matrix.matrix_errors import OutOfBoundsError
from oasis_matrix.matrix_errors import ShapeMismatchError
from oasis_matrix.matrix_errors import ZeroLengthVectorError
from oasis_matrix.matrix_types import Matrix
from oasis_matrix.transforms.transform_matrices import identity
from oasis_matrix.transforms.transform_matrices import scaling_matrix
from oasis_matrix.transforms.transform_matrices import translation_matrix


__all__ = [
    "CrossProductRequires3DError",
    "DimensionMismatchError",
    "DotProductShapeMismatchError",
    "EmptyDataError",
    "Matrix",
    "MatrixError",
    "MatrixParams",
    "MatrixParamsError",
    "NotAVectorError",
    "OutOfBoundsError",
    "ShapeMismatchError",
    "ZeroLengthVectorError",
    "identity",
    "scaling_matrix",
    "translation_matrix",
]
