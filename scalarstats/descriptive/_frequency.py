"""
Frequency tabulation and mode finding.

These work on any iterable of hashable values (numbers, strings, tuples),
not only on numeric arrays.
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Hashable, Iterable
from typing import TypeVar

import numpy as np

from scalarstats.core.exceptions import EmptyInputError

H = TypeVar('H', bound=Hashable)


def _elements(a: Iterable[H]) -> list[H]:
    """Materialize ``a``; numpy arrays are flattened to native Python scalars."""
    if isinstance(a, np.ndarray):
        return np.ravel(a).tolist()
    if hasattr(a, 'values') and hasattr(a, 'dtype'):
        # pandas Series / Index
        return np.ravel(np.asarray(a.values)).tolist()
    return list(a)


def frequency_table(a: Iterable[H]) -> Counter[H]:
    """
    Count occurrences of each distinct value in one pass.

    Keys appear in first-seen order; counts sum to the number of elements.
    Every floating NaN is counted under the single key ``math.nan``.
    """
    counts: Counter[H] = Counter()
    for value in _elements(a):
        if isinstance(value, float) and math.isnan(value):
            value = math.nan
        counts[value] += 1
    return counts


def _max_count_keys(a: Iterable[H], name: str) -> list[H]:
    """Values with maximal count, in first-seen order."""
    tab = frequency_table(a)
    if not tab:
        raise EmptyInputError(f"{name}: cannot be empty", name=name)
    top = max(tab.values())
    return [k for k, v in tab.items() if v == top]


def most_frequent(a: Iterable[H], name: str = 'a') -> H:
    """
    The most frequent value.

    When several values share the maximal count, the one encountered
    first in ``a`` is returned.
    """
    return _max_count_keys(a, name)[0]


def all_most_frequent(a: Iterable[H], name: str = 'a') -> set[H]:
    """All values sharing the maximal count."""
    return set(_max_count_keys(a, name))
