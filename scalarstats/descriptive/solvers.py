"""
Public entry points for descriptive statistics on scalar samples.

Order statistics:   sortperm, minmax, midrange, sample_range
Ranking:            tiedrank
Quantiles:          quantile, quartile, quintile, decile, percentile, iqr, median
Frequencies:        table, mode, modes
Dispersion/shape:   variation, sem, mad, skewness, kurtosis
Summary:            summarystats, describe
"""

from __future__ import annotations

import sys
from collections.abc import Hashable, Iterable
from typing import Any, Literal, TextIO, TypeVar
import numpy as np
from numpy.typing import ArrayLike, NDArray

from scalarstats.core.compute.timing import Timer
from scalarstats.core.exceptions import DimensionError, ValidationError
from scalarstats.core.result import Result
from scalarstats.core.validation import (
    check_1d,
    check_array,
    check_min_samples,
    check_no_nan,
    check_probabilities,
    float_type,
)
from scalarstats.descriptive import _moments
from scalarstats.descriptive._frequency import (
    all_most_frequent,
    frequency_table,
    most_frequent,
)
from scalarstats.descriptive._order import minmax as _minmax, sortperm as _sortperm
from scalarstats.descriptive._quantile_types import r_quantile
from scalarstats.descriptive._ranks import tied_rank_1d, tied_rank_2d
from scalarstats.descriptive.design import SampleDesign
from scalarstats.descriptive.solution import DescribeSolution, SummaryStats

H = TypeVar('H', bound=Hashable)

QuantileType = Literal[1, 2, 3, 4, 5, 6, 7, 8, 9]
MomentType = Literal[1, 2, 3]

# Fixed quantile requests
DEFAULT_PROBS = (0.0, 0.25, 0.5, 0.75, 1.0)
QUARTILE_PROBS = (0.25, 0.5, 0.75)
QUINTILE_PROBS = (0.2, 0.4, 0.6, 0.8)
DECILE_PROBS = tuple(k / 10 for k in range(1, 10))
PERCENTILE_PROBS = tuple(k / 100 for k in range(1, 100))
IQR_PROBS = (0.25, 0.75)

MAD_CONSTANT = _moments.MAD_CONSTANT


def _ensure_design(data: ArrayLike | SampleDesign, name: str = 'x') -> SampleDesign:
    """Convert raw array to SampleDesign if needed."""
    if isinstance(data, SampleDesign):
        return data
    return SampleDesign.from_array(data, name=name)


def _ordered_array(x: ArrayLike | SampleDesign, name: str) -> NDArray:
    """Numeric array in its own dtype, NaN-free; any number of dimensions."""
    if isinstance(x, SampleDesign):
        return x.data
    arr = check_array(x, name, coerce_float=False)
    check_no_nan(arr, name)
    return arr


# ---------------------------------------------------------------------------
# Order statistics
# ---------------------------------------------------------------------------

def sortperm(x: ArrayLike | SampleDesign) -> NDArray[np.intp]:
    """
    Permutation that sorts a 1D sample ascending.

    ``np.asarray(x)[sortperm(x)]`` is non-decreasing. Empty input gives an
    empty permutation.
    """
    arr = _ordered_array(x, 'x')
    check_1d(arr, 'x')
    return _sortperm(arr)


def minmax(x: ArrayLike | SampleDesign) -> tuple[Any, Any]:
    """
    Minimum and maximum of a sample, in the sample's own dtype.

    Raises
    ------
    EmptyInputError
        If x has no elements.
    """
    return _minmax(_ordered_array(x, 'x'))


def midrange(x: ArrayLike | SampleDesign) -> np.floating:
    """
    Midpoint of the smallest and largest value: min + (max - min) / 2.

    Returned in the sample's floating type (float64 for integer input).
    Integer extremes are combined as Python ints, so narrow dtypes do not
    wrap around.
    """
    arr = _ordered_array(x, 'x')
    xmin, xmax = _minmax(arr)
    R = float_type(arr.dtype)
    if np.issubdtype(arr.dtype, np.integer):
        lo, hi = int(xmin), int(xmax)
        return R(lo + (hi - lo) / 2)
    return R(xmin + (xmax - xmin) / 2)


def sample_range(x: ArrayLike | SampleDesign) -> Any:
    """
    Spread between the largest and smallest value: max - min.

    Floating input keeps its dtype. Integer input gives a Python int,
    which holds the exact spread of any integer dtype (int8 [-100, 100]
    gives 200).
    """
    arr = _ordered_array(x, 'x')
    xmin, xmax = _minmax(arr)
    if np.issubdtype(arr.dtype, np.integer):
        return int(xmax) - int(xmin)
    return xmax - xmin


# ---------------------------------------------------------------------------
# Ranking
# ---------------------------------------------------------------------------

def tiedrank(x: ArrayLike | SampleDesign) -> NDArray[np.float64]:
    """
    Rank a sample, giving tied values the mean of their rank positions.

    Matches R rank(x, ties.method='average').

    Parameters
    ----------
    x : array-like or SampleDesign
        1D or 2D numeric data without NaN. Ties are exact equality in the
        input's own dtype (integers are not converted to float).
        A 2D array is flattened column-major (Fortran order), ranked as
        one sample, and the ranks are returned in the input shape.

    Returns
    -------
    NDArray
        float64 ranks in [1, n], same shape as x. Empty input gives an
        empty array.

    Examples
    --------
    >>> tiedrank([10, 20, 10, 30])
    array([1.5, 3. , 1.5, 4. ])
    """
    arr = _ordered_array(x, 'x')
    if arr.ndim == 1:
        return tied_rank_1d(arr)
    if arr.ndim == 2:
        return tied_rank_2d(arr)
    raise DimensionError(
        f"x: expected 1D or 2D array, got {arr.ndim}D with shape {arr.shape}"
    )


# ---------------------------------------------------------------------------
# Quantiles
# ---------------------------------------------------------------------------

def quantile(
    x: ArrayLike | SampleDesign,
    probs: ArrayLike | None = None,
    *,
    type: QuantileType = 7,
) -> NDArray[np.floating]:
    """
    Sample quantiles. Matches R quantile() with all 9 types.

    Parameters
    ----------
    x : array-like or SampleDesign
        1D numeric data, non-empty, no NaN.
    probs : array-like, optional
        Probabilities in [0, 1], any order, duplicates allowed.
        Default (0, 0.25, 0.5, 0.75, 1.0).
    type : int
        R quantile type 1-9. Default 7 (linear interpolation between
        adjacent order statistics, R's default).

    Returns
    -------
    NDArray
        One value per probability, in request order, in the sample's
        floating type (float64 for integer input).

    Raises
    ------
    EmptyInputError
        If x has no elements (checked first, even for an empty request).
    DomainError
        If a probability is NaN or outside [0, 1].
    ValidationError
        If type is not 1-9.
    """
    if type not in range(1, 10):
        raise ValidationError(f"Quantile type must be 1-9, got {type}")

    design = _ensure_design(x)
    q_probs = check_probabilities(DEFAULT_PROBS if probs is None else probs, 'probs')

    if len(q_probs) == 0:
        return np.empty(0, dtype=design.float_type)

    values = r_quantile(design.sorted(), q_probs, type)
    return values.astype(design.float_type, copy=False)


def quartile(x: ArrayLike | SampleDesign) -> NDArray[np.floating]:
    """Quartiles: quantiles at (0.25, 0.5, 0.75)."""
    return quantile(x, QUARTILE_PROBS)


def quintile(x: ArrayLike | SampleDesign) -> NDArray[np.floating]:
    """Quintiles: quantiles at (0.2, 0.4, 0.6, 0.8)."""
    return quantile(x, QUINTILE_PROBS)


def decile(x: ArrayLike | SampleDesign) -> NDArray[np.floating]:
    """Deciles: quantiles at 0.1, 0.2, ..., 0.9."""
    return quantile(x, DECILE_PROBS)


def percentile(x: ArrayLike | SampleDesign) -> NDArray[np.floating]:
    """Percentiles: quantiles at 0.01, 0.02, ..., 0.99 (99 values)."""
    return quantile(x, PERCENTILE_PROBS)


def iqr(x: ArrayLike | SampleDesign) -> NDArray[np.floating]:
    """
    Lower and upper quartile as a pair: quantiles at (0.25, 0.75).

    The interquartile range itself is ``np.diff(iqr(x))[0]``.
    """
    return quantile(x, IQR_PROBS)


def median(x: ArrayLike | SampleDesign) -> np.floating:
    """Sample median (type-7 quantile at 0.5)."""
    return quantile(x, (0.5,))[0]


# ---------------------------------------------------------------------------
# Frequencies
# ---------------------------------------------------------------------------

def table(a: Iterable[H]) -> dict[H, int]:
    """
    Frequency table: distinct value -> number of occurrences.

    Works for any iterable of hashable values. numpy arrays are flattened
    and their elements converted to Python scalars. Empty input gives an
    empty table.

    Examples
    --------
    >>> table([1, 1, 2, 3, 3, 3])
    Counter({3: 3, 1: 2, 2: 1})
    """
    return frequency_table(a)


def mode(a: Iterable[H]) -> H:
    """
    Most frequent value.

    When several values tie for the highest count, the one that occurs
    first in ``a`` is returned; use modes() to get all of them.

    Raises
    ------
    EmptyInputError
        If a has no elements.
    """
    return most_frequent(a, 'a')


def modes(a: Iterable[H]) -> set[H]:
    """
    All values sharing the highest count.

    Raises
    ------
    EmptyInputError
        If a has no elements.
    """
    return all_most_frequent(a, 'a')


# ---------------------------------------------------------------------------
# Dispersion and shape
# ---------------------------------------------------------------------------

def variation(x: ArrayLike | SampleDesign, m: float | None = None) -> np.floating:
    """
    Coefficient of variation: sd(x) / m, with m the mean unless given.

    sd is Bessel-corrected (n - 1) and taken about m. Requires n >= 2.
    A zero centre returns inf (or NaN) with a RuntimeWarning.
    """
    design = _ensure_design(x)
    check_min_samples(design.data, 2, design.name)
    return _moments.coefficient_of_variation(design.data, m)


def sem(x: ArrayLike | SampleDesign) -> np.floating:
    """Standard error of the mean: sqrt(var(x) / n), var Bessel-corrected. Requires n >= 2."""
    design = _ensure_design(x)
    check_min_samples(design.data, 2, design.name)
    return _moments.standard_error(design.data)


def mad(
    x: ArrayLike | SampleDesign,
    center: float | None = None,
    *,
    constant: float = MAD_CONSTANT,
) -> np.floating:
    """
    Median absolute deviation, scaled to estimate sigma for normal data.

    ``constant * median(|x - center|)``. center defaults to median(x);
    constant defaults to 1.4826. The input is never modified.
    """
    design = _ensure_design(x)
    return _moments.median_abs_deviation(design.data, center, constant)


def skewness(
    x: ArrayLike | SampleDesign,
    m: float | None = None,
    *,
    type: MomentType = 1,
) -> np.floating:
    """
    Sample skewness about m (default: the mean).

    type=1 is g1 = m3 / m2^1.5 (Joanes & Gill 1998); types 2 and 3 match
    R e1071::skewness. Zero variance gives NaN with a RuntimeWarning.
    """
    design = _ensure_design(x)
    return _moments.sample_skewness(design.data, m, type)


def kurtosis(
    x: ArrayLike | SampleDesign,
    m: float | None = None,
    *,
    type: MomentType = 1,
) -> np.floating:
    """
    Sample excess kurtosis about m (default: the mean).

    type=1 is g2 = m4 / m2^2 - 3 (Joanes & Gill 1998); types 2 and 3 match
    R e1071::kurtosis. Zero variance gives NaN with a RuntimeWarning.
    """
    design = _ensure_design(x)
    return _moments.sample_kurtosis(design.data, m, type)


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------

def _summarize(design: SampleDesign, timer: Timer | None = None) -> SummaryStats:
    timer = timer or Timer()
    R = design.float_type

    with timer.section('mean'):
        m = np.mean(design.data)

    with timer.section('quantiles'):
        qs = r_quantile(design.sorted(), np.asarray(DEFAULT_PROBS), 7)

    return SummaryStats(
        mean=R(m),
        min=R(qs[0]),
        q25=R(qs[1]),
        median=R(qs[2]),
        q75=R(qs[3]),
        max=R(qs[4]),
    )


def summarystats(x: ArrayLike | SampleDesign) -> SummaryStats:
    """
    Mean and five-number summary (min, Q1, median, Q3, max).

    Quartiles use R type 7. All fields are converted to the sample's
    floating type (float64 for integer input).
    """
    return _summarize(_ensure_design(x))


def describe(
    x: ArrayLike | SampleDesign,
    *,
    file: TextIO | None = None,
) -> DescribeSolution:
    """
    Print a summary report of a sample and return it.

    Writes seven lines to ``file`` (default sys.stdout)::

        Summary Stats:
        Mean:         3.000000
        Minimum:      1.000000
        1st Quartile: 2.000000
        Median:       3.000000
        3rd Quartile: 4.000000
        Maximum:      5.000000

    Returns
    -------
    DescribeSolution wrapping the SummaryStats with timing and provenance.
    """
    timer = Timer()
    timer.start()

    with timer.section('validate'):
        design = _ensure_design(x)

    warnings_list: list[str] = []
    if design.n == 1:
        warnings_list.append("single observation: all summary values are equal")
    if np.any(np.isinf(design.data)):
        warnings_list.append("sample contains infinite values")

    stats = _summarize(design, timer)
    timer.stop()

    result = Result(
        params=stats,
        info={'n': design.n, 'dtype': str(design.data.dtype), 'quantile_type': 7},
        timing=timer.result(),
        backend_name='cpu_summary',
        warnings=tuple(warnings_list),
    )
    solution = DescribeSolution(_result=result, _design=design)

    out = sys.stdout if file is None else file
    print(solution.summary(), file=out)
    return solution
