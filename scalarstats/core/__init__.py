"""
Core infrastructure for scalarstats.

Shared abstractions used by the descriptive routines.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing
"""

from scalarstats.core.result import Result
from scalarstats.core.exceptions import (
    ScalarStatsError,
    ValidationError,
    DimensionError,
    EmptyInputError,
    DomainError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "ScalarStatsError",
    "ValidationError",
    "DimensionError",
    "EmptyInputError",
    "DomainError",
]
