"""
One Euro filter state machine.

Every filter keeps (prev_time, prev_value, prev_derivative) and updates it
from raw samples with the same five steps:

    1. raw derivative   = domain.difference(value, prev_value, dt)
    2. smoothed deriv.  = domain.blend_derivative(prev_derivative, raw, alpha(dt, 1.0))
    3. cutoff           = max(0, min_cutoff + beta * domain.magnitude(smoothed))
    4. filtered value   = domain.blend(prev_value, value, alpha(dt, cutoff))
    5. state            = (time, filtered value, smoothed derivative)

Subclasses only pick the value domain.
"""

import logging
import math
from typing import Optional, Union

from one_euro.shared.types import FilterParams
from one_euro.utils.limits import check_params

logger = logging.getLogger(__name__)

# Samples closer together than this are ignored
MIN_TIME_DELTA = 1e-5

# The derivative is always smoothed at this cutoff, independent of tuning
DERIVATIVE_CUTOFF = 1.0


def alpha(dt: float, cutoff: float) -> float:
    """
    Exponential smoothing weight of a one-pole low-pass filter.

    Tends to 1 (track the raw sample) as dt or cutoff grows and to 0
    (hold the previous value) as either shrinks.
    """
    r = 2.0 * math.pi * cutoff * dt
    return r / (r + 1.0)


class OneEuroFilterBase:
    """
    Adaptive low-pass filter over one value domain.

    Not thread safe. Use one instance per signal and call it from one
    producer.
    """

    domain = None

    def __init__(self, beta: float = 0.0, min_cutoff: float = 1.0):
        self._beta = float(beta)
        self._min_cutoff = float(min_cutoff)
        check_params(self._beta, self._min_cutoff)

        self.prev_time = 0.0
        self.prev_value = None
        self.prev_derivative = None
        self.reset()

    # ------------------------------------------------------------------
    # Parameters
    # ------------------------------------------------------------------

    @property
    def beta(self) -> float:
        return self._beta

    @property
    def min_cutoff(self) -> float:
        return self._min_cutoff

    @property
    def params(self) -> FilterParams:
        return FilterParams(beta=self._beta, min_cutoff=self._min_cutoff)

    def set_params(self, beta: Union[float, FilterParams], min_cutoff: Optional[float] = None,
                   check: bool = True):
        """
        Replace the tuning parameters. State is left untouched.

        Args:
            beta: Speed coefficient, or a FilterParams carrying both values
            min_cutoff: Cutoff at zero speed (required unless beta is FilterParams)
            check: Log a warning for values outside the tuning ranges
        """
        if isinstance(beta, FilterParams):
            beta, min_cutoff = beta.beta, beta.min_cutoff
        elif min_cutoff is None:
            raise TypeError("set_params() needs min_cutoff when beta is a number")

        self._beta = float(beta)
        self._min_cutoff = float(min_cutoff)
        if check:
            check_params(self._beta, self._min_cutoff)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def value(self):
        """Last filtered value."""
        return self.domain.copy(self.prev_value)

    @property
    def time(self) -> float:
        return self.prev_time

    @property
    def derivative(self):
        """Last smoothed derivative."""
        return self.domain.copy(self.prev_derivative)

    def reset(self, seed=None):
        """
        Snap the filter to seed (or the domain identity) with zero velocity.

        prev_time goes back to 0, so a following step(0.0, ...) falls
        under MIN_TIME_DELTA and is ignored.
        """
        value = self.domain.zero() if seed is None else self.domain.coerce(seed)
        self._set_previous(0.0, value, self.domain.zero_derivative())
        logger.debug(f"{type(self).__name__} reset to {value}")

    def _set_previous(self, time: float, value, derivative):
        self.prev_time = time
        self.prev_value = value
        self.prev_derivative = derivative

    # ------------------------------------------------------------------
    # Filtering
    # ------------------------------------------------------------------

    def step(self, time: float, value):
        """
        Filter one raw sample taken at an absolute timestamp.

        Samples less than MIN_TIME_DELTA after the previous one, including
        samples with a timestamp earlier than the previous one, leave the
        state alone and return the previous filtered value.
        """
        dt = time - self.prev_time
        if dt < MIN_TIME_DELTA:
            if dt < 0.0:
                logger.debug(f"{type(self).__name__}: sample at {time} is older than {self.prev_time}, ignored")
            return self.value

        return self._update(time, dt, self.domain.coerce(value))

    def delta_step(self, value, delta_time: float):
        """
        Filter one raw sample taken delta_time after the previous one.

        Sub-threshold deltas accumulate into prev_time so that a run of
        tiny deltas eventually produces an update. Negative deltas are
        dropped.
        """
        if delta_time < MIN_TIME_DELTA:
            if delta_time > 0.0:
                self.prev_time += delta_time
            return self.value

        return self._update(self.prev_time + delta_time, delta_time, self.domain.coerce(value))

    def _update(self, time: float, dt: float, value):
        """Run the filter equations for a sample that passed the time gate."""
        domain = self.domain

        raw_derivative = domain.difference(value, self.prev_value, dt)
        derivative = domain.blend_derivative(
            self.prev_derivative, raw_derivative, alpha(dt, DERIVATIVE_CUTOFF)
        )

        # Cutoff <= 0 holds the previous value
        cutoff = max(0.0, self._min_cutoff + self._beta * domain.magnitude(derivative))
        filtered = domain.blend(self.prev_value, value, alpha(dt, cutoff))

        self._set_previous(time, filtered, derivative)
        return domain.copy(filtered)
