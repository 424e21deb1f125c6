"""
Pytest Configuration - Shared Fixtures

This file contains shared fixtures used across all test modules.
"""

import math
import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


@pytest.fixture
def scalar_filter():
    """Scalar filter with beta=0, min_cutoff=1, seeded at 0."""
    from one_euro.filters.basic import OneEuroFilter
    filt = OneEuroFilter(beta=0.0, min_cutoff=1.0)
    filt.reset(0.0)
    return filt


@pytest.fixture
def rotation_filter():
    """Identity-seeded rotation filter with some speed adaptation."""
    from one_euro.filters.basic import OneEuroFilterQuaternion
    return OneEuroFilterQuaternion(beta=0.5, min_cutoff=1.0)


@pytest.fixture
def ten_degrees_z():
    from one_euro.filters.quaternion import quat_from_axis_angle
    return quat_from_axis_angle([0.0, 0.0, 1.0], math.radians(10.0))
