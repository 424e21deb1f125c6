"""
One Euro Filter

Adaptive low-pass filtering for noisy, irregularly sampled tracking
signals: scalars, 2D/3D vectors, rotations, directions, poses and rays.
"""

from one_euro.shared.types import FilterParams, Pose, Ray
from one_euro.filters.base import MIN_TIME_DELTA, DERIVATIVE_CUTOFF, alpha
from one_euro.filters.basic import (
    OneEuroFilter,
    OneEuroFilter2,
    OneEuroFilter3,
    OneEuroFilterQuaternion,
    OneEuroFilterDirection,
)
from one_euro.filters.composite import PoseFilter, RayFilter
from one_euro.filters.factory import create_filter

__version__ = "0.1.0"

__all__ = [
    "FilterParams",
    "Pose",
    "Ray",
    "MIN_TIME_DELTA",
    "DERIVATIVE_CUTOFF",
    "alpha",
    "OneEuroFilter",
    "OneEuroFilter2",
    "OneEuroFilter3",
    "OneEuroFilterQuaternion",
    "OneEuroFilterDirection",
    "PoseFilter",
    "RayFilter",
    "create_filter",
]
