"""
scalarstats: descriptive statistics for samples of real numbers.

Order statistics, tie-aware ranking, R-compatible quantiles, frequency
tables and modes, dispersion and shape measures, and a printable summary.

Submodules:
    descriptive: All statistical routines
    core: Exceptions, validation, result envelope, timing
"""

__version__ = "0.1.0"
__author__ = "Hai-Shuo"
__email__ = "contact@sgcx.org"

from scalarstats.core.exceptions import (
    ScalarStatsError,
    ValidationError,
    DimensionError,
    EmptyInputError,
    DomainError,
)
from scalarstats.descriptive import (
    sortperm,
    minmax,
    midrange,
    sample_range,
    tiedrank,
    quantile,
    quartile,
    quintile,
    decile,
    percentile,
    iqr,
    median,
    table,
    mode,
    modes,
    variation,
    sem,
    mad,
    skewness,
    kurtosis,
    summarystats,
    describe,
    SampleDesign,
    SummaryStats,
    DescribeSolution,
)

__all__ = [
    "__version__",
    # Exceptions
    "ScalarStatsError",
    "ValidationError",
    "DimensionError",
    "EmptyInputError",
    "DomainError",
    # Routines
    "sortperm",
    "minmax",
    "midrange",
    "sample_range",
    "tiedrank",
    "quantile",
    "quartile",
    "quintile",
    "decile",
    "percentile",
    "iqr",
    "median",
    "table",
    "mode",
    "modes",
    "variation",
    "sem",
    "mad",
    "skewness",
    "kurtosis",
    "summarystats",
    "describe",
    # Types
    "SampleDesign",
    "SummaryStats",
    "DescribeSolution",
]
