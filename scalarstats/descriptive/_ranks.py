"""
Tie-aware rank assignment (mean-rank rule).

Every member of a run of exactly equal values receives the average of the
1-based sorted positions the run occupies, so the ranks of a sample of
length n always sum to n(n+1)/2. This is R's rank(ties.method='average')
and scipy.stats.rankdata(method='average').
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from scalarstats.descriptive._order import sortperm


def tied_rank_1d(x: NDArray) -> NDArray[np.float64]:
    """
    Mean ranks of a 1D array.

    Parameters
    ----------
    x : NDArray
        1D array with no NaN values. Any numeric dtype; ties are detected
        with exact equality in that dtype.

    Returns
    -------
    NDArray
        float64 ranks in [1, n], positionally matching ``x``.
    """
    n = len(x)
    ranks = np.empty(n, dtype=np.float64)
    if n == 0:
        return ranks

    place = sortperm(x)
    xs = x[place]

    # Run boundaries in sorted order: a run starts wherever the value changes
    starts = np.flatnonzero(np.concatenate(([True], xs[1:] != xs[:-1])))
    ends = np.append(starts[1:], n) - 1

    for i, j in zip(starts, ends):
        if j > i:
            # 0-based [i, j] covers 1-based positions i+1 .. j+1
            ranks[place[i:j + 1]] = (i + j + 2) / 2.0
        else:
            ranks[place[i]] = i + 1

    return ranks


def tied_rank_2d(X: NDArray) -> NDArray[np.float64]:
    """
    Mean ranks over all elements of a 2D array.

    The matrix is flattened in column-major (Fortran) order, ranked as a
    single sample, and the ranks are reshaped back to ``X.shape`` in the
    same order. Ranks are global across the matrix, not per column.
    """
    flat = np.ravel(X, order='F')
    return tied_rank_1d(flat).reshape(X.shape, order='F')
