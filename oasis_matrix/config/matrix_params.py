################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Policy and tolerance configuration for matrix operations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any


# Check row and column independently when reading an element
BOUNDS_POLICY_STRICT: str = "strict"
# Check only the flattened row-major index when reading an element
BOUNDS_POLICY_FLAT: str = "flat"

# Raise when normalizing a zero-length vector
ZERO_LENGTH_POLICY_RAISE: str = "raise"
# Let float division produce NaN/Inf components
ZERO_LENGTH_POLICY_PROPAGATE: str = "propagate"

# Default bounds policy for element access
BOUNDS_POLICY: str = BOUNDS_POLICY_STRICT
# Default zero-length policy for normalization
ZERO_LENGTH_POLICY: str = ZERO_LENGTH_POLICY_RAISE

# Absolute tolerance for approximate comparison of float32 elements
ISCLOSE_ATOL: float = 1e-6
# Relative tolerance for approximate comparison of float32 elements
ISCLOSE_RTOL: float = 1e-5


class MatrixParamsError(Exception):
    """Raised when matrix parameter validation fails."""


def _require_non_negative(value: float, name: str) -> None:
    """Require a finite non-negative value."""
    if not math.isfinite(value):
        raise MatrixParamsError(f"{name} must be finite")
    if value < 0.0:
        raise MatrixParamsError(f"{name} must be non-negative")


def _require_choice(value: str, choices: tuple[str, ...], name: str) -> None:
    """Require a value from a fixed set of policy names."""
    if value not in choices:
        raise MatrixParamsError(f"{name} must be one of {', '.join(choices)}")


@dataclass(frozen=True)
class MatrixParams:
    """Configuration shared by matrix operations.

    Attributes:
        bounds_policy: "strict" to reject any row or column outside the
            matrix, "flat" to reject only flattened indices past the end
        zero_length_policy: "raise" to reject normalizing a zero vector,
            "propagate" to return the NaN/Inf result of float division
        atol: Absolute tolerance used by approximate comparison
        rtol: Relative tolerance used by approximate comparison
    """

    bounds_policy: str = BOUNDS_POLICY
    zero_length_policy: str = ZERO_LENGTH_POLICY
    atol: float = ISCLOSE_ATOL
    rtol: float = ISCLOSE_RTOL

    @classmethod
    def defaults(cls) -> MatrixParams:
        """Return the default parameters."""
        return cls()

    def validate(self) -> None:
        """Validate policy names and tolerances."""
        _require_choice(
            self.bounds_policy,
            (BOUNDS_POLICY_STRICT, BOUNDS_POLICY_FLAT),
            "bounds_policy",
        )
        _require_choice(
            self.zero_length_policy,
            (ZERO_LENGTH_POLICY_RAISE, ZERO_LENGTH_POLICY_PROPAGATE),
            "zero_length_policy",
        )
        _require_non_negative(self.atol, "atol")
        _require_non_negative(self.rtol, "rtol")

    def replace(self, **overrides: Any) -> MatrixParams:
        """Return a modified copy of the parameters."""
        return replace(self, **overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a dict representation for debugging."""
        return {field.name: getattr(self, field.name) for field in fields(self)}


def resolve_params(params: MatrixParams | None) -> MatrixParams:
    """Return validated parameters, falling back to the defaults."""
    resolved: MatrixParams = MatrixParams.defaults() if params is None else params
    resolved.validate()
    return resolved
