"""
One Euro filters for single-valued signals.

    OneEuroFilter            float
    OneEuroFilter2           2D vector
    OneEuroFilter3           3D vector
    OneEuroFilterQuaternion  unit quaternion [w, x, y, z]
    OneEuroFilterDirection   3D direction, blended along the great circle
"""

from one_euro.filters.base import OneEuroFilterBase
from one_euro.filters.domains import (
    DirectionDomain,
    RotationDomain,
    ScalarDomain,
    VectorDomain,
)


class OneEuroFilter(OneEuroFilterBase):
    """Scalar One Euro filter."""

    domain = ScalarDomain()


class OneEuroFilter2(OneEuroFilterBase):
    """2D vector filter. Cutoff adapts to the speed along both axes."""

    domain = VectorDomain(2)


class OneEuroFilter3(OneEuroFilterBase):
    """3D vector filter. Cutoff adapts to the Euclidean speed."""

    domain = VectorDomain(3)


class OneEuroFilterQuaternion(OneEuroFilterBase):
    """
    Rotation filter.

    Output is slerped towards each sample and always has unit norm. The
    cutoff adapts to the angle of the smoothed rotation rate.
    """

    domain = RotationDomain()


class OneEuroFilterDirection(OneEuroFilterBase):
    """Direction filter, seeded to +Z on reset()."""

    domain = DirectionDomain()
