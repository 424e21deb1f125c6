"""
Shared type definitions for the One Euro filters.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

import numpy as np


@dataclass
class FilterParams:
    """
    Tunable parameters of a One Euro filter.

    The ranges are tuning hints only. Values outside them are unusual,
    not invalid.

    Units:
        beta: cutoff increase per unit of speed
        min_cutoff: Hz at zero speed
    """

    BETA_RANGE = (0.0, 2.0)
    MIN_CUTOFF_RANGE = (0.0, 10.0)

    beta: float = 0.0         # Higher = less lag on fast motion, more jitter
    min_cutoff: float = 1.0   # Higher = less smoothing at rest

    def in_range(self) -> bool:
        """True when both values sit inside the tuning hints."""
        lo_b, hi_b = self.BETA_RANGE
        lo_c, hi_c = self.MIN_CUTOFF_RANGE
        return lo_b <= self.beta <= hi_b and lo_c <= self.min_cutoff <= hi_c

    def to_dict(self) -> Dict[str, float]:
        return {"beta": self.beta, "min_cutoff": self.min_cutoff}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FilterParams':
        """Build params from a config mapping, using defaults for missing keys."""
        return cls(
            beta=float(data.get("beta", 0.0)),
            min_cutoff=float(data.get("min_cutoff", 1.0)),
        )

    def __str__(self):
        return f"FilterParams(beta={self.beta:.3f}, min_cutoff={self.min_cutoff:.3f})"


@dataclass(eq=False)
class Pose:
    """
    Rigid transform: a 3D position plus a unit quaternion [w, x, y, z].

    Equality is exact, field by field.
    """

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: np.array([1.0, 0.0, 0.0, 0.0]))

    @classmethod
    def identity(cls) -> 'Pose':
        return cls()

    def __eq__(self, other):
        if not isinstance(other, Pose):
            return NotImplemented
        return bool(np.array_equal(self.position, other.position)
                    and np.array_equal(self.rotation, other.rotation))

    def __str__(self):
        p, q = self.position, self.rotation
        return (
            f"Pose("
            f"position=[{p[0]:.3f}, {p[1]:.3f}, {p[2]:.3f}], "
            f"rotation=[{q[0]:.3f}, {q[1]:.3f}, {q[2]:.3f}, {q[3]:.3f}])"
        )


@dataclass(eq=False)
class Ray:
    """
    Ray with a 3D origin and a unit direction.
    """

    origin: np.ndarray = field(default_factory=lambda: np.zeros(3))
    direction: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, 1.0]))

    @classmethod
    def identity(cls) -> 'Ray':
        """Ray at the origin pointing down +Z."""
        return cls()

    def __eq__(self, other):
        if not isinstance(other, Ray):
            return NotImplemented
        return bool(np.array_equal(self.origin, other.origin)
                    and np.array_equal(self.direction, other.direction))

    def __str__(self):
        o, d = self.origin, self.direction
        return (
            f"Ray("
            f"origin=[{o[0]:.3f}, {o[1]:.3f}, {o[2]:.3f}], "
            f"direction=[{d[0]:.3f}, {d[1]:.3f}, {d[2]:.3f}])"
        )
