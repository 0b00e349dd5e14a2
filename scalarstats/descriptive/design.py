"""
SampleDesign: data wrapper for one-dimensional descriptive statistics.

Wraps a validated sample and provides the metadata the reductions need
(size, reporting float type). Follows the Design pattern: all validation
happens once, at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from scalarstats.core.validation import (
    check_array,
    check_1d,
    check_no_nan,
    check_not_empty,
    float_type,
)


@dataclass(frozen=True)
class SampleDesign:
    """
    Design for a one-dimensional sample of real numbers.

    Holds a non-empty, NaN-free 1D floating array. Integer and boolean
    input is promoted to float64; floating input keeps its precision.
    Immutable after construction.

    Construction:
        SampleDesign.from_array(data)
    """
    _data: NDArray[np.floating[Any]]
    _n: int
    _name: str

    @classmethod
    def from_array(cls, data: ArrayLike, *, name: str = 'x') -> SampleDesign:
        """
        Build SampleDesign from array-like data.

        Parameters
        ----------
        data : array-like
            1D numeric data: list, tuple, numpy array, or an object with
            a .values attribute (pandas Series).
        name : str
            Parameter name used in error messages.

        Raises
        ------
        ValidationError
            Non-numeric data or NaN values.
        DimensionError
            Data is not one-dimensional.
        EmptyInputError
            Data has no elements.
        """
        if isinstance(data, SampleDesign):
            return data

        arr = check_array(data, name)
        check_1d(arr, name)
        check_not_empty(arr, name)
        check_no_nan(arr, name)

        # Read-only view so the frozen design cannot be mutated through .data
        arr = arr.view()
        arr.flags.writeable = False

        return cls(_data=arr, _n=len(arr), _name=name)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Sample values (read-only view)."""
        return self._data

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def name(self) -> str:
        """Parameter name used in error messages."""
        return self._name

    @property
    def float_type(self) -> type[np.floating[Any]]:
        """Floating-point type results are reported in."""
        return float_type(self._data.dtype)

    def sorted(self) -> NDArray[np.floating[Any]]:
        """Ascending copy of the sample."""
        return np.sort(self._data)

    def __repr__(self) -> str:
        return f"SampleDesign(n={self._n}, dtype={self._data.dtype})"
