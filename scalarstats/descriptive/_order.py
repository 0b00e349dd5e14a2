"""
Order engine: sort permutation and extreme values.

Callers validate input (numeric, no NaN) before reaching these helpers.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from scalarstats.core.validation import check_not_empty


def sortperm(x: NDArray) -> NDArray[np.intp]:
    """
    Permutation that sorts ``x`` ascending.

    ``x[sortperm(x)]`` is non-decreasing. The sort is stable, so tied
    elements keep their input order, but nothing downstream relies on it.
    """
    return np.argsort(x, kind='stable')


def minmax(x: NDArray, name: str = 'x') -> tuple[Any, Any]:
    """
    Smallest and largest element of ``x``.

    Raises EmptyInputError when ``x`` has no elements. Reductions run on
    the caller's array; no sorted copy is made.
    """
    check_not_empty(x, name)
    return x.min(), x.max()
