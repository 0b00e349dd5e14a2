"""
All 9 R quantile type algorithms.

Implements the Hyndman & Fan (1996) quantile definitions as R's
quantile() function does. Type 7 (R's default, linear interpolation
between adjacent order statistics) is the default everywhere in
scalarstats; the named families (quartile, decile, ...) always use it.

Types 1-3 are discontinuous (step functions).
Types 4-9 are continuous (linear interpolation with varying definitions of
the plotting position p(k)).

Reference:
    Hyndman, R.J. and Fan, Y. (1996) "Sample Quantiles in Statistical
    Packages", The American Statistician, 50(4), 361-365.

R source: src/library/stats/R/quantile.R
"""

from __future__ import annotations

import math
import numpy as np
from numpy.typing import NDArray

from scalarstats.core.exceptions import ValidationError
from scalarstats.core.validation import check_not_empty

# Plotting-position constants (a, b) for the continuous types:
# nppm = a + p * (n + 1 - a - b)
_CONTINUOUS_AB = {
    4: (0.0, 1.0),
    5: (0.5, 0.5),
    6: (0.0, 0.0),
    7: (1.0, 1.0),
    8: (1.0 / 3.0, 1.0 / 3.0),
    9: (3.0 / 8.0, 3.0 / 8.0),
}

# R fuzz factor: 4 * machine epsilon
_FUZZ = 4.0 * np.finfo(np.float64).eps


def _lerp(lo: float, hi: float, h: float) -> float:
    """
    Interpolate between neighbouring order statistics.

    Exact at h == 0, h == 1 and when lo == hi. With an infinite endpoint
    the weighted form (1 - h) * lo + h * hi is used, as R does, so that
    -inf and a finite neighbour give -inf rather than NaN.
    """
    if h == 0.0 or lo == hi:
        return lo
    if h == 1.0:
        return hi
    if math.isinf(lo) or math.isinf(hi):
        return (1.0 - h) * lo + h * hi
    return lo + h * (hi - lo)


def r_quantile(x: NDArray, probs: NDArray, qtype: int = 7) -> NDArray[np.float64]:
    """
    Compute quantiles matching R's quantile().

    Parameters
    ----------
    x : NDArray
        1D sorted array with no NaN values and at least one element.
    probs : NDArray
        1D array of probabilities in [0, 1]. Order is preserved in the
        output; duplicates are allowed.
    qtype : int
        R quantile type 1-9.

    Returns
    -------
    NDArray
        float64 quantile values, one per probability.

    Raises
    ------
    ValidationError
        If qtype is not in 1-9.
    EmptyInputError
        If x is empty.
    """
    if qtype not in range(1, 10):
        raise ValidationError(f"Quantile type must be 1-9, got {qtype}")
    check_not_empty(x, 'x')

    n = len(x)
    probs = np.asarray(probs, dtype=np.float64)
    if n == 1:
        return np.full(len(probs), x[0], dtype=np.float64)

    result = np.empty(len(probs), dtype=np.float64)

    if qtype <= 3:
        # --- Discontinuous types ---
        for i, p in enumerate(probs):
            if qtype == 3:
                nppm = n * p - 0.5
            else:
                nppm = n * p  # types 1 and 2

            j = int(math.floor(nppm + _FUZZ))

            if qtype == 1:
                h = 1.0 if (nppm > j + _FUZZ) else 0.0
            elif qtype == 2:
                h = 0.5 if abs(nppm - j) < _FUZZ else (1.0 if nppm > j else 0.0)
            else:
                # R: (nppm != j) | ((j %% 2L) == 1L)
                # h=1 unless nppm==j AND j is even
                nppm_eq_j = abs(nppm - j) < _FUZZ
                h = 0.0 if (nppm_eq_j and j % 2 == 0) else 1.0

            # R pads x as xs = c(x[1], x, x[n]) and reads xs[j+1], xs[j+2];
            # in 0-indexed terms that is x[clamp(j-1)] and x[clamp(j)]
            lo = max(0, min(j - 1, n - 1))
            hi = max(0, min(j, n - 1))
            result[i] = _lerp(x[lo], x[hi], h)

    else:
        # --- Continuous types 4-9 ---
        a, b = _CONTINUOUS_AB[qtype]

        for i, p in enumerate(probs):
            nppm = a + p * (n + 1.0 - a - b)
            j = int(math.floor(nppm + _FUZZ))
            h = nppm - j

            # Small negative h from floating point -> clamp to 0
            if abs(h) < _FUZZ:
                h = 0.0
            elif abs(h - 1.0) < _FUZZ:
                h = 1.0

            # nppm is 1-indexed: order statistic j lives at x[j-1]
            if j < 1:
                result[i] = x[0]
            elif j >= n:
                result[i] = x[n - 1]
            else:
                result[i] = _lerp(x[j - 1], x[j], h)

    return result
