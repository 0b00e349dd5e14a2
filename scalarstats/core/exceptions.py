"""
Exception hierarchy for scalarstats.

All exceptions inherit from ScalarStatsError to allow catching any
library-specific error. Everything raised by the descriptive routines is
an input problem, so the concrete classes sit under ValidationError.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class ScalarStatsError(Exception):
    """Base exception for all scalarstats errors."""
    pass


class ValidationError(ScalarStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when an array has a number of dimensions the routine does
    not support (e.g. a 3-D array passed to tiedrank).
    """
    pass


class EmptyInputError(ValidationError):
    """
    Sample has no elements where at least one is required.

    Order statistics, quantiles, modes and moment reductions are
    undefined on an empty sample. Ranking and tabulation are not: they
    return empty results instead of raising.

    Attributes:
        name: Parameter name of the empty input
    """

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message)
        self.name = name


class DomainError(ValidationError):
    """
    Argument lies outside its mathematical domain.

    Raised for quantile probabilities outside [0, 1] (or NaN).

    Attributes:
        value: The offending value
        lower: Inclusive lower bound of the domain
        upper: Inclusive upper bound of the domain
    """

    def __init__(
        self,
        message: str,
        value: float | None = None,
        lower: float | None = None,
        upper: float | None = None
    ):
        super().__init__(message)
        self.value = value
        self.lower = lower
        self.upper = upper
