################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Type definitions for fixed-dimension matrices."""

from __future__ import annotations

from oasis_matrix.matrix_types.matrix import Matrix


__all__ = [
    "Matrix",
]
