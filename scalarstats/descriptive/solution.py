"""
Descriptive statistics solution types.

Contains the SummaryStats record and the user-facing describe() wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, TYPE_CHECKING
import numpy as np

from scalarstats.core.result import Result

if TYPE_CHECKING:
    from scalarstats.descriptive.design import SampleDesign


_SUMMARY_LABELS = (
    ("mean", "Mean:"),
    ("min", "Minimum:"),
    ("q25", "1st Quartile:"),
    ("median", "Median:"),
    ("q75", "3rd Quartile:"),
    ("max", "Maximum:"),
)


@dataclass(frozen=True)
class SummaryStats:
    """
    Mean and five-number summary of a sample.

    All six fields share one numpy floating type: the sample's own
    floating dtype, or float64 for integer input. Quartiles use R type 7.
    """
    mean: np.floating[Any]
    min: np.floating[Any]
    q25: np.floating[Any]
    median: np.floating[Any]
    q75: np.floating[Any]
    max: np.floating[Any]

    def as_tuple(self) -> tuple[np.floating[Any], ...]:
        """(mean, min, q25, median, q75, max)."""
        return tuple(getattr(self, f.name) for f in fields(self))

    def __str__(self) -> str:
        lines = ["Summary Stats:"]
        for attr, label in _SUMMARY_LABELS:
            lines.append(f"{label:<14}{getattr(self, attr):.6f}")
        return "\n".join(lines)


@dataclass
class DescribeSolution:
    """
    User-facing result of describe().

    Wraps Result[SummaryStats] and provides convenient accessors.
    """
    _result: Result[SummaryStats]
    _design: 'SampleDesign'

    @property
    def stats(self) -> SummaryStats:
        """The SummaryStats record."""
        return self._result.params

    @property
    def mean(self) -> np.floating[Any]:
        return self._result.params.mean

    @property
    def min(self) -> np.floating[Any]:
        return self._result.params.min

    @property
    def q25(self) -> np.floating[Any]:
        return self._result.params.q25

    @property
    def median(self) -> np.floating[Any]:
        return self._result.params.median

    @property
    def q75(self) -> np.floating[Any]:
        return self._result.params.q75

    @property
    def max(self) -> np.floating[Any]:
        return self._result.params.max

    # --- Metadata ---

    @property
    def n(self) -> int:
        """Number of observations summarised."""
        return self._design.n

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def provenance(self) -> dict[str, str]:
        return self._result.provenance

    def summary(self) -> str:
        """Fixed-format report: header plus six labeled lines, 6 decimals."""
        return str(self._result.params)

    def __repr__(self) -> str:
        return (
            f"DescribeSolution(n={self._design.n}, "
            f"mean={float(self.mean):.6g}, median={float(self.median):.6g})"
        )
