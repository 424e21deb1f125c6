"""
Unit Tests for Tuning Limits

Test Design Techniques Used:
    - Boundary value analysis (range edges)
    - Equivalence partitioning (in range / out of range / frozen)

Run: pytest tests/utils/test_limits.py -v
"""

import logging

import pytest

from one_euro.filters.basic import OneEuroFilter
from one_euro.shared.types import FilterParams
from one_euro.utils.limits import check_params


class TestCheckParams:
    """Tests for check_params()."""

    @pytest.mark.parametrize("beta,min_cutoff", [
        (0.0, 1.0),
        (2.0, 10.0),
        (0.5, 0.1),
    ])
    def test_in_range(self, beta, min_cutoff, caplog):
        with caplog.at_level(logging.WARNING):
            assert check_params(beta, min_cutoff) is True
        assert caplog.text == ""

    @pytest.mark.parametrize("beta,min_cutoff,name", [
        (2.5, 1.0, "beta"),
        (-0.1, 1.0, "beta"),
        (0.5, 12.0, "min_cutoff"),
        (0.5, -1.0, "min_cutoff"),
    ])
    def test_out_of_range_warns(self, beta, min_cutoff, name, caplog):
        with caplog.at_level(logging.WARNING):
            assert check_params(beta, min_cutoff) is False
        assert name in caplog.text

    def test_frozen_output_warns(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert check_params(0.0, 0.0) is False
        assert "frozen" in caplog.text

    def test_zero_min_cutoff_with_beta_warns(self, caplog):
        """Test the output freezes at rest even when beta is positive."""
        with caplog.at_level(logging.WARNING):
            assert check_params(0.5, 0.0) is False
        assert "frozen" in caplog.text

    def test_filter_accepts_out_of_range(self, caplog):
        """Test filters warn but never reject parameters."""
        with caplog.at_level(logging.WARNING):
            filt = OneEuroFilter(beta=5.0, min_cutoff=20.0)
        assert filt.beta == 5.0
        assert filt.min_cutoff == 20.0
        assert "beta=5.0" in caplog.text


class TestFilterParams:
    """Tests for the FilterParams carrier."""

    def test_defaults(self):
        params = FilterParams()
        assert params.beta == 0.0
        assert params.min_cutoff == 1.0
        assert params.in_range()

    def test_out_of_range(self):
        assert not FilterParams(beta=3.0).in_range()
        assert not FilterParams(min_cutoff=11.0).in_range()

    def test_dict_round_trip(self):
        params = FilterParams(beta=0.25, min_cutoff=4.0)
        assert FilterParams.from_dict(params.to_dict()) == params

    def test_from_dict_coerces(self):
        assert FilterParams.from_dict({"beta": "1", "min_cutoff": 2}) == FilterParams(beta=1.0, min_cutoff=2.0)
