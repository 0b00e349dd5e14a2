"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, non-numeric rejection
    - float_type: reporting precision for a dtype
    - check_no_nan: NaN detection (Inf allowed)
    - check_ndim / check_1d: dimensionality checks
    - check_not_empty / check_min_samples: sample counts
    - check_probabilities: quantile request domain
"""

import numpy as np
import pytest

from scalarstats.core.exceptions import (
    DimensionError,
    DomainError,
    EmptyInputError,
    ValidationError,
)
from scalarstats.core.validation import (
    check_1d,
    check_array,
    check_min_samples,
    check_ndim,
    check_no_nan,
    check_not_empty,
    check_probabilities,
    float_type,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_int_kept_without_coercion(self):
        result = check_array(np.array([1, 2, 3], dtype=np.int32), "x", coerce_float=False)
        assert result.dtype == np.int32

    def test_float32_preserved(self):
        result = check_array(np.array([1.0, 2.0], dtype=np.float32), "x")
        assert result.dtype == np.float32

    def test_bool_is_numeric(self):
        result = check_array([True, False, True], "x")
        np.testing.assert_array_equal(result, [1.0, 0.0, 1.0])

    def test_object_with_values_attribute(self):
        class Series:
            values = np.array([4.0, 5.0])

        np.testing.assert_array_equal(check_array(Series(), "x"), [4.0, 5.0])

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array(["a", "b"], "x")

    def test_mixed_types_rejected(self):
        with pytest.raises(ValidationError, match="x"):
            check_array([1, "a", None], "x")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j, 3 + 0j], "x")

    def test_empty_list_ok(self):
        result = check_array([], "x")
        assert result.size == 0


class TestFloatType:
    """Test float_type mapping of dtypes."""

    @pytest.mark.parametrize("dtype, expected", [
        (np.int64, np.float64),
        (np.int8, np.float64),
        (np.float32, np.float32),
        (np.float64, np.float64),
    ])
    def test_mapping(self, dtype, expected):
        assert float_type(np.dtype(dtype)) is expected


# ═══════════════════════════════════════════════════════════════════════
# check_no_nan
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNoNan:
    """Test NaN rejection."""

    def test_clean_passes(self):
        check_no_nan(np.array([1.0, 2.0]), "x")

    def test_inf_passes(self):
        check_no_nan(np.array([-np.inf, 0.0, np.inf]), "x")

    def test_integers_pass(self):
        check_no_nan(np.array([1, 2, 3]), "x")

    def test_nan_rejected_with_count(self):
        with pytest.raises(ValidationError, match="2 NaN"):
            check_no_nan(np.array([np.nan, 1.0, np.nan]), "x")


# ═══════════════════════════════════════════════════════════════════════
# Dimensions and sizes
# ═══════════════════════════════════════════════════════════════════════


class TestDimensions:
    """Test check_ndim and check_1d."""

    def test_1d_passes(self):
        check_1d(np.zeros(3), "x")

    def test_2d_fails_check_1d(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((2, 2)), "x")

    def test_check_ndim_message_has_shape(self):
        with pytest.raises(DimensionError, match=r"\(2, 3\)"):
            check_ndim(np.zeros((2, 3)), 1, "x")


class TestSampleCounts:
    """Test check_not_empty and check_min_samples."""

    def test_not_empty_passes(self):
        check_not_empty(np.array([1.0]), "x")

    def test_empty_raises(self):
        with pytest.raises(EmptyInputError) as exc_info:
            check_not_empty(np.array([]), "x")
        assert exc_info.value.name == "x"

    def test_min_samples_passes(self):
        check_min_samples(np.array([1.0, 2.0]), 2, "x")

    def test_min_samples_too_few(self):
        with pytest.raises(ValidationError, match="at least 3"):
            check_min_samples(np.array([1.0, 2.0]), 3, "x")

    def test_min_samples_empty_is_empty_error(self):
        with pytest.raises(EmptyInputError):
            check_min_samples(np.array([]), 2, "x")


# ═══════════════════════════════════════════════════════════════════════
# check_probabilities
# ═══════════════════════════════════════════════════════════════════════


class TestCheckProbabilities:
    """Test probability validation and DomainError reporting."""

    def test_order_and_duplicates_preserved(self):
        result = check_probabilities([0.9, 0.1, 0.9], "probs")
        np.testing.assert_array_equal(result, [0.9, 0.1, 0.9])

    def test_scalar_promoted(self):
        result = check_probabilities(0.5, "probs")
        assert result.shape == (1,)

    def test_bounds_inclusive(self):
        check_probabilities([0.0, 1.0], "probs")

    def test_empty_request(self):
        assert check_probabilities([], "probs").size == 0

    @pytest.mark.parametrize("bad", [-0.01, 1.01, np.nan])
    def test_outside_domain(self, bad):
        with pytest.raises(DomainError) as exc_info:
            check_probabilities([0.5, bad], "probs")
        assert exc_info.value.lower == 0.0
        assert exc_info.value.upper == 1.0

    def test_reports_offending_value(self):
        with pytest.raises(DomainError, match="1.5"):
            check_probabilities([1.5], "probs")

    def test_2d_rejected(self):
        with pytest.raises(DimensionError):
            check_probabilities([[0.1, 0.2]], "probs")
