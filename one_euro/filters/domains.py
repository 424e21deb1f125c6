"""
Value domains for the One Euro filters.

A domain tells the shared state machine how to work with one kind of
value:

    difference(a, b, dt)          rate of change from b to a over dt
    blend(start, end, weight)     interpolate two values
    blend_derivative(d0, d1, w)   interpolate two derivatives
    magnitude(d)                  non-negative size of a derivative

plus the identity value and zero derivative used on reset, and a
coerce() hook that turns caller input into the stored representation.
"""

import numpy as np

from one_euro.filters.quaternion import (
    IDENTITY,
    quat_angle,
    quat_inverse,
    quat_mul,
    quat_nlerp,
    quat_normalize,
    quat_slerp,
    vector_slerp,
)


class ScalarDomain:
    """Plain floats with linear difference and lerp."""

    @staticmethod
    def coerce(value) -> float:
        return float(value)

    @staticmethod
    def copy(value) -> float:
        return value

    @staticmethod
    def zero() -> float:
        return 0.0

    @staticmethod
    def zero_derivative() -> float:
        return 0.0

    @staticmethod
    def difference(a: float, b: float, dt: float) -> float:
        return (a - b) / dt

    @staticmethod
    def blend(start: float, end: float, weight: float) -> float:
        return start + (end - start) * weight

    blend_derivative = blend

    @staticmethod
    def magnitude(d: float) -> float:
        return abs(d)


class VectorDomain:
    """
    Fixed-size vectors with componentwise difference, lerp and the
    Euclidean norm as magnitude.
    """

    def __init__(self, size: int):
        self.size = size

    def coerce(self, value) -> np.ndarray:
        arr = np.array(value, dtype=float).reshape(-1)
        if arr.shape != (self.size,):
            raise ValueError(f"Expected a vector of length {self.size}, got shape {np.shape(value)}")
        return arr

    @staticmethod
    def copy(value: np.ndarray) -> np.ndarray:
        return value.copy()

    def zero(self) -> np.ndarray:
        return np.zeros(self.size)

    def zero_derivative(self) -> np.ndarray:
        return np.zeros(self.size)

    @staticmethod
    def difference(a: np.ndarray, b: np.ndarray, dt: float) -> np.ndarray:
        return (a - b) / dt

    @staticmethod
    def blend(start: np.ndarray, end: np.ndarray, weight: float) -> np.ndarray:
        return start + (end - start) * weight

    blend_derivative = blend

    @staticmethod
    def magnitude(d: np.ndarray) -> float:
        return float(np.linalg.norm(d))


class DirectionDomain(VectorDomain):
    """
    3D directions. Same derivative algebra as a 3-vector, but values are
    blended along the great circle so the output does not shrink towards
    the origin between samples.
    """

    def __init__(self):
        super().__init__(3)

    def zero(self) -> np.ndarray:
        return np.array([0.0, 0.0, 1.0])

    @staticmethod
    def blend(start: np.ndarray, end: np.ndarray, weight: float) -> np.ndarray:
        return vector_slerp(start, end, weight)


class RotationDomain:
    """
    Unit quaternions [w, x, y, z].

    The derivative is itself a small rotation. It is built from the
    relative rotation between samples, with the vector part scaled by
    1/dt and the scalar part re-biased by 1 - 1/dt before renormalising.
    This only approximates angular velocity for small inter-sample
    rotations.
    """

    @staticmethod
    def coerce(value) -> np.ndarray:
        arr = np.array(value, dtype=float).reshape(-1)
        if arr.shape != (4,):
            raise ValueError(f"Expected a quaternion [w, x, y, z], got shape {np.shape(value)}")
        return quat_normalize(arr)

    @staticmethod
    def copy(value: np.ndarray) -> np.ndarray:
        return value.copy()

    @staticmethod
    def zero() -> np.ndarray:
        return IDENTITY.copy()

    @staticmethod
    def zero_derivative() -> np.ndarray:
        return IDENTITY.copy()

    @staticmethod
    def difference(a: np.ndarray, b: np.ndarray, dt: float) -> np.ndarray:
        rate = 1.0 / dt
        delta = quat_mul(a, quat_inverse(b))
        # Shortest arc
        if delta[0] < 0:
            delta = -delta
        delta = delta * rate
        delta[0] += 1.0 - rate
        return quat_normalize(delta)

    @staticmethod
    def blend(start: np.ndarray, end: np.ndarray, weight: float) -> np.ndarray:
        return quat_slerp(start, end, weight)

    @staticmethod
    def blend_derivative(start: np.ndarray, end: np.ndarray, weight: float) -> np.ndarray:
        return quat_nlerp(start, end, weight)

    @staticmethod
    def magnitude(d: np.ndarray) -> float:
        return quat_angle(d)
