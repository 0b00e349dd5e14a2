"""
Dispersion and shape reductions: variation, sem, mad, skewness, kurtosis.

All helpers take a validated, non-empty 1D floating array. Degenerate
input (zero variance, zero mean) produces NaN or inf with a RuntimeWarning
rather than an exception, matching numpy's behaviour for 0/0.
"""

from __future__ import annotations

import warnings
import numpy as np
from numpy.typing import NDArray

from scalarstats.core.exceptions import ValidationError
from scalarstats.descriptive._quantile_types import r_quantile

# Consistency constant making the MAD an estimator of sigma for normal data
MAD_CONSTANT = 1.4826


def median_of(x: NDArray) -> np.floating:
    """Type-7 median of ``x``; sorts a copy."""
    value = r_quantile(np.sort(x), np.array([0.5]), 7)[0]
    return x.dtype.type(value)


def stdm(x: NDArray, m: float) -> np.floating:
    """Bessel-corrected standard deviation about a known centre ``m``."""
    n = len(x)
    return np.sqrt(np.sum((x - m) ** 2) / (n - 1))


def coefficient_of_variation(x: NDArray, m: float | None = None) -> np.floating:
    """Standard deviation divided by the mean (or by ``m`` if given)."""
    if m is None:
        m = np.mean(x)
    sd = stdm(x, m)
    if m == 0:
        warnings.warn(
            "variation: centre is zero, coefficient of variation is not finite",
            RuntimeWarning,
            stacklevel=3,
        )
        with np.errstate(divide='ignore', invalid='ignore'):
            return np.divide(sd, x.dtype.type(m))
    return sd / m


def standard_error(x: NDArray) -> np.floating:
    """Standard error of the mean, sqrt(var(x, ddof=1) / n)."""
    return np.sqrt(np.var(x, ddof=1) / len(x))


def median_abs_deviation(
    x: NDArray,
    center: float | None = None,
    constant: float = MAD_CONSTANT,
) -> np.floating:
    """
    Scaled median absolute deviation.

    ``constant * median(|x - center|)``; center defaults to the median of
    ``x``. The deviations are computed into a fresh working array, so the
    caller's data is never modified.
    """
    if center is None:
        center = median_of(x)
    work = np.abs(x - center)
    return x.dtype.type(constant * median_of(work))


def _central_moments(x: NDArray, m: float, orders: tuple[int, ...]) -> list[float]:
    """Empirical central moments sum((x - m)^k) / n for each k in ``orders``."""
    n = len(x)
    z = x - m
    return [float(np.sum(z ** k)) / n for k in orders]


def _check_type(kind: str, type: int) -> None:
    if type not in (1, 2, 3):
        raise ValidationError(f"{kind}: type must be 1, 2 or 3, got {type}")


def _zero_variance(kind: str) -> float:
    warnings.warn(
        f"{kind}: sample has zero variance, result is NaN",
        RuntimeWarning,
        stacklevel=4,
    )
    return np.nan


def sample_skewness(x: NDArray, m: float | None = None, type: int = 1) -> np.floating:
    """
    Sample skewness. Types follow Joanes & Gill (1998) / R e1071.

    Type 1 (default):
        g1 = m3 / m2^1.5
    Type 2 (SAS, SPSS), requires n >= 3:
        G1 = g1 * sqrt(n*(n-1)) / (n-2)
    Type 3 (MINITAB, BMDP):
        b1 = g1 * ((n-1)/n)^1.5

    where m2 = sum((x-m)^2)/n and m3 = sum((x-m)^3)/n.
    """
    _check_type('skewness', type)
    n = len(x)
    if type == 2 and n < 3:
        raise ValidationError(f"skewness: type 2 requires at least 3 samples, got {n}")
    if m is None:
        m = np.mean(x)

    m2, m3 = _central_moments(x, m, (2, 3))
    if m2 == 0:
        return x.dtype.type(_zero_variance('skewness'))

    g1 = m3 / m2 ** 1.5
    if type == 2:
        g1 = g1 * np.sqrt(n * (n - 1)) / (n - 2)
    elif type == 3:
        g1 = g1 * ((n - 1) / n) ** 1.5
    return x.dtype.type(g1)


def sample_kurtosis(x: NDArray, m: float | None = None, type: int = 1) -> np.floating:
    """
    Sample excess kurtosis. Types follow Joanes & Gill (1998) / R e1071.

    Type 1 (default):
        g2 = m4 / m2^2 - 3
    Type 2 (SAS, SPSS), requires n >= 4:
        G2 = ((n+1)*g2 + 6) * (n-1) / ((n-2)*(n-3))
    Type 3 (MINITAB, BMDP):
        b2 = (g2 + 3) * (1 - 1/n)^2 - 3
    """
    _check_type('kurtosis', type)
    n = len(x)
    if type == 2 and n < 4:
        raise ValidationError(f"kurtosis: type 2 requires at least 4 samples, got {n}")
    if m is None:
        m = np.mean(x)

    m2, m4 = _central_moments(x, m, (2, 4))
    if m2 == 0:
        return x.dtype.type(_zero_variance('kurtosis'))

    g2 = m4 / m2 ** 2 - 3.0
    if type == 2:
        g2 = ((n + 1.0) * g2 + 6.0) * (n - 1.0) / ((n - 2.0) * (n - 3.0))
    elif type == 3:
        g2 = (g2 + 3.0) * (1.0 - 1.0 / n) ** 2 - 3.0
    return x.dtype.type(g2)
