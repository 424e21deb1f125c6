"""
Composite One Euro filters.

A composite value is split into two fields, each with its own filter and
its own adaptive cutoff:

    PoseFilter   position (OneEuroFilter3) + rotation (OneEuroFilterQuaternion)
    RayFilter    origin (OneEuroFilter3)   + direction (OneEuroFilterDirection)

Both fields share one time gate. The composite measures dt against its
own previous timestamp and, when the sample passes, advances both
sub-filters with that same dt. The two fields therefore always update on
the same calls, even if one sub-filter's clock was moved independently.
"""

import logging
from typing import Optional, Union

from one_euro.filters.base import MIN_TIME_DELTA
from one_euro.filters.basic import (
    OneEuroFilter3,
    OneEuroFilterDirection,
    OneEuroFilterQuaternion,
)
from one_euro.shared.types import FilterParams, Pose, Ray
from one_euro.utils.limits import check_params

logger = logging.getLogger(__name__)


class CompositeFilter:
    """
    Fan-out wrapper around two sub-filters.

    Subclasses set the sub-filter classes and how to split / assemble the
    composite value.
    """

    first_class = None
    second_class = None

    def __init__(self, beta: float = 0.0, min_cutoff: float = 1.0):
        self._first = self.first_class()
        self._second = self.second_class()
        self.set_params(beta, min_cutoff)
        self.prev_time = 0.0
        self.prev_value = self._assemble(self._first.value, self._second.value)

    def _split(self, value):
        raise NotImplementedError

    def _assemble(self, first, second):
        raise NotImplementedError

    @property
    def beta(self) -> float:
        return self._first.beta

    @property
    def min_cutoff(self) -> float:
        return self._first.min_cutoff

    @property
    def params(self) -> FilterParams:
        return self._first.params

    @property
    def value(self):
        return self._assemble(self._first.value, self._second.value)

    @property
    def time(self) -> float:
        return self.prev_time

    @property
    def derivative(self) -> tuple:
        return self._first.derivative, self._second.derivative

    def set_params(self, beta: Union[float, FilterParams], min_cutoff: Optional[float] = None):
        """Apply the same parameters to both sub-filters."""
        if isinstance(beta, FilterParams):
            beta, min_cutoff = beta.beta, beta.min_cutoff
        elif min_cutoff is None:
            raise TypeError("set_params() needs min_cutoff when beta is a number")

        check_params(float(beta), float(min_cutoff))
        for sub in (self._first, self._second):
            sub.set_params(beta, min_cutoff, check=False)

    def reset(self, seed=None):
        if seed is None:
            self._first.reset()
            self._second.reset()
        else:
            first, second = self._split(seed)
            self._first.reset(first)
            self._second.reset(second)
        self.prev_time = 0.0
        self.prev_value = self.value

    def step(self, time: float, value):
        """
        Filter one composite sample. Below MIN_TIME_DELTA (or backwards in
        time) the previous composite value is returned and nothing changes.
        """
        dt = time - self.prev_time
        if dt < MIN_TIME_DELTA:
            if dt < 0.0:
                logger.debug(f"{type(self).__name__}: sample at {time} is older than {self.prev_time}, ignored")
            return self.value
        return self._advance(time, dt, value)

    def delta_step(self, value, delta_time: float):
        """Composite counterpart of OneEuroFilterBase.delta_step()."""
        if delta_time < MIN_TIME_DELTA:
            if delta_time > 0.0:
                self.prev_time += delta_time
            return self.value
        return self._advance(self.prev_time + delta_time, delta_time, value)

    def _advance(self, time: float, dt: float, value):
        first, second = self._split(value)
        result = self._assemble(
            self._first._update(time, dt, self._first.domain.coerce(first)),
            self._second._update(time, dt, self._second.domain.coerce(second)),
        )
        self.prev_time = time
        self.prev_value = result
        return result


class PoseFilter(CompositeFilter):
    """Filters a Pose's position and rotation independently."""

    first_class = OneEuroFilter3
    second_class = OneEuroFilterQuaternion

    @property
    def position_filter(self) -> OneEuroFilter3:
        return self._first

    @property
    def rotation_filter(self) -> OneEuroFilterQuaternion:
        return self._second

    def _split(self, value: Pose):
        return value.position, value.rotation

    def _assemble(self, first, second) -> Pose:
        return Pose(position=first, rotation=second)


class RayFilter(CompositeFilter):
    """Filters a Ray's origin linearly and its direction along the great circle."""

    first_class = OneEuroFilter3
    second_class = OneEuroFilterDirection

    @property
    def origin_filter(self) -> OneEuroFilter3:
        return self._first

    @property
    def direction_filter(self) -> OneEuroFilterDirection:
        return self._second

    def _split(self, value: Ray):
        return value.origin, value.direction

    def _assemble(self, first, second) -> Ray:
        return Ray(origin=first, direction=second)
