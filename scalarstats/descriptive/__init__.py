"""
Descriptive statistics for one-dimensional samples.

Public API:
    tiedrank(x)          - Ranks with ties averaged (R rank, ties='average')
    quantile(x, probs)   - Quantiles (all 9 R types, default 7)
    quartile/quintile/decile/percentile/iqr(x) - fixed quantile requests
    median(x)            - Type-7 median
    table(a)             - Frequency table of hashable values
    mode(a), modes(a)    - Most frequent value(s)
    minmax/midrange/sample_range(x) - Extreme-value reductions
    variation/sem/mad(x) - Dispersion
    skewness/kurtosis(x) - Shape (Joanes & Gill types 1-3)
    summarystats(x)      - Mean + five-number summary record
    describe(x)          - Print and return the summary
"""

from scalarstats.descriptive.design import SampleDesign
from scalarstats.descriptive.solution import SummaryStats, DescribeSolution
from scalarstats.descriptive.solvers import (
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
)

__all__ = [
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
    "SampleDesign",
    "SummaryStats",
    "DescribeSolution",
]
