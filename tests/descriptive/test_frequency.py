"""
Tests for table(), mode() and modes().
"""

from __future__ import annotations

import math

import numpy as np
import pytest

from scalarstats.descriptive import table, mode, modes
from scalarstats.core.exceptions import EmptyInputError


class TestTable:
    """Test frequency tables."""

    def test_counts(self):
        assert table([1, 1, 2, 3, 3, 3]) == {1: 2, 2: 1, 3: 3}

    def test_counts_sum_to_n(self, tied_sample):
        assert sum(table(tied_sample).values()) == len(tied_sample)

    def test_empty(self):
        assert table([]) == {}

    def test_strings(self):
        assert table(["a", "b", "a"]) == {"a": 2, "b": 1}

    def test_tuples_as_keys(self):
        assert table([(1, 2), (1, 2), (3, 4)]) == {(1, 2): 2, (3, 4): 1}

    def test_numpy_keys_are_native(self):
        result = table(np.array([1.5, 1.5, 2.0]))
        assert result == {1.5: 2, 2.0: 1}
        assert all(type(k) is float for k in result)

    def test_2d_array_flattened(self):
        assert table(np.array([[1, 2], [2, 2]])) == {1: 1, 2: 3}

    def test_generator_input(self):
        assert table(x % 2 for x in range(5)) == {0: 3, 1: 2}

    def test_first_seen_key_order(self):
        assert list(table([3, 1, 3, 2])) == [3, 1, 2]

    def test_is_a_dict(self):
        assert isinstance(table([1]), dict)

    def test_nans_share_one_key(self):
        result = table(np.array([np.nan, 1.0, np.nan]))
        assert len(result) == 2
        assert result[math.nan] == 2
        assert result[1.0] == 1

    def test_nans_from_separate_objects(self):
        result = table([float("nan"), float("nan")])
        assert list(result.values()) == [2]


class TestMode:
    """Test mode() including tie-breaking."""

    def test_single_mode(self):
        assert mode([1, 1, 2, 3, 3, 3]) == 3

    def test_tie_returns_first_seen(self):
        assert mode([2, 1, 1, 2]) == 2
        assert mode([1, 2, 2, 1]) == 1

    def test_all_distinct(self):
        assert mode([5, 4, 3]) == 5

    def test_strings(self):
        assert mode(["x", "y", "y"]) == "y"

    def test_numpy_array(self, tied_sample):
        counts = table(tied_sample)
        assert counts[mode(tied_sample)] == max(counts.values())

    def test_empty_raises(self):
        with pytest.raises(EmptyInputError):
            mode([])

    def test_nan_can_be_the_mode(self):
        assert math.isnan(mode(np.array([np.nan, 2.0, np.nan])))


class TestModes:
    """Test modes()."""

    def test_tied_modes(self):
        assert modes([1, 1, 2, 2]) == {1, 2}

    def test_single_mode(self):
        assert modes([1, 1, 2, 3, 3, 3]) == {3}

    def test_all_distinct(self):
        assert modes([3, 1, 2]) == {1, 2, 3}

    def test_mode_is_member_of_modes(self, tied_sample):
        assert mode(tied_sample) in modes(tied_sample)

    def test_returns_set(self):
        assert isinstance(modes([1]), set)

    def test_empty_raises(self):
        with pytest.raises(EmptyInputError):
            modes([])
