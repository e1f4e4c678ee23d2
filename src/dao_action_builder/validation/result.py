"""
Validation outcome type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class ParameterValidationResult:
    """
    Outcome of validating one parameter value.

    A valid result carries ``normalized_value``: a str, bool or int for
    scalars, a list for arrays, or a dict keyed by field name (declaration
    order) for tuples. An invalid result carries ``error`` instead.
    """

    is_valid: bool
    normalized_value: Any = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, value: Any) -> "ParameterValidationResult":
        return cls(is_valid=True, normalized_value=value)

    @classmethod
    def fail(cls, error: str) -> "ParameterValidationResult":
        return cls(is_valid=False, error=error)
