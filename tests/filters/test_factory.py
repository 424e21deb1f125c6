"""
Unit Tests for the Filter Factory

Run: pytest tests/filters/test_factory.py -v
"""

import pytest

from one_euro.filters.basic import OneEuroFilter, OneEuroFilterQuaternion
from one_euro.filters.composite import PoseFilter, RayFilter
from one_euro.filters.factory import FILTER_KINDS, create_filter
from one_euro.shared.types import FilterParams


class TestCreateFilter:
    """Tests for create_filter()."""

    @pytest.mark.parametrize("kind", sorted(FILTER_KINDS))
    def test_every_kind_builds(self, kind):
        filt = create_filter(kind)
        assert isinstance(filt, FILTER_KINDS[kind])
        assert filt.beta == 0.0
        assert filt.min_cutoff == 1.0

    def test_known_classes(self):
        assert isinstance(create_filter("scalar"), OneEuroFilter)
        assert isinstance(create_filter("rotation"), OneEuroFilterQuaternion)
        assert isinstance(create_filter("pose"), PoseFilter)
        assert isinstance(create_filter("ray"), RayFilter)

    def test_params_applied(self):
        filt = create_filter("pose", FilterParams(beta=0.4, min_cutoff=2.5))
        assert filt.position_filter.beta == 0.4
        assert filt.rotation_filter.min_cutoff == 2.5

    def test_unknown_kind_raises(self):
        with pytest.raises(ValueError, match="Unknown filter kind"):
            create_filter("matrix")
