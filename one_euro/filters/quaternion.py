"""
Quaternion and direction helpers.

Quaternions are numpy arrays in [w, x, y, z] order. Only the handful of
operations the rotation and direction filters need live here.
"""

import math

import numpy as np

IDENTITY = np.array([1.0, 0.0, 0.0, 0.0])

# Below this angle slerp degrades to a normalised lerp
_SLERP_EPSILON = 1e-6


def quat_normalize(q) -> np.ndarray:
    """Normalize a quaternion. Degenerate input maps to identity."""
    q = np.asarray(q, dtype=float)
    n = np.linalg.norm(q)
    if n > 1e-10:
        return q / n
    return IDENTITY.copy()


def quat_mul(q1, q2) -> np.ndarray:
    """Multiply two quaternions: q1 * q2."""
    w1, x1, y1, z1 = q1
    w2, x2, y2, z2 = q2
    return np.array([
        w1*w2 - x1*x2 - y1*y2 - z1*z2,
        w1*x2 + x1*w2 + y1*z2 - z1*y2,
        w1*y2 - x1*z2 + y1*w2 + z1*x2,
        w1*z2 + x1*y2 - y1*x2 + z1*w2,
    ])


def quat_inverse(q) -> np.ndarray:
    """Inverse of a quaternion (conjugate for unit quaternions)."""
    w, x, y, z = q
    n = w*w + x*x + y*y + z*z
    if n > 1e-10:
        return np.array([w/n, -x/n, -y/n, -z/n])
    return IDENTITY.copy()


def quat_angle(q) -> float:
    """
    Rotation angle (radians) of a unit quaternion.

    The scalar part is clamped to [-1, 1] so rounding noise never
    reaches acos.
    """
    w = max(-1.0, min(1.0, float(q[0])))
    return 2.0 * math.acos(w)


def quat_from_axis_angle(axis, angle: float) -> np.ndarray:
    axis = np.asarray(axis, dtype=float)
    n = np.linalg.norm(axis)
    if n < 1e-10:
        return IDENTITY.copy()
    half = 0.5 * angle
    return np.concatenate(([math.cos(half)], axis / n * math.sin(half)))


def quat_nlerp(q1, q2, t: float) -> np.ndarray:
    """Normalised linear interpolation, without a hemisphere fix."""
    q1 = np.asarray(q1, dtype=float)
    q2 = np.asarray(q2, dtype=float)
    return quat_normalize(q1 + t * (q2 - q1))


def quat_slerp(q1, q2, t: float) -> np.ndarray:
    """
    Spherical linear interpolation along the shortest arc.

    q2 is flipped into q1's hemisphere first, so q and -q blend the same
    way. The result is renormalised.
    """
    q1 = np.asarray(q1, dtype=float)
    q2 = np.asarray(q2, dtype=float)

    dot_q = float(np.dot(q1, q2))
    if dot_q < 0:
        q2 = -q2
        dot_q = -dot_q

    dot_q = min(1.0, dot_q)
    theta = math.acos(dot_q)
    if theta < _SLERP_EPSILON:
        return quat_normalize(q1 + t * (q2 - q1))

    sin_theta = math.sin(theta)
    w1 = math.sin((1.0 - t) * theta) / sin_theta
    w2 = math.sin(t * theta) / sin_theta
    return quat_normalize(w1 * q1 + w2 * q2)


def _any_perpendicular(v: np.ndarray) -> np.ndarray:
    # Cross with the world axis least aligned with v
    axis = np.zeros(3)
    axis[int(np.argmin(np.abs(v)))] = 1.0
    perp = np.cross(v, axis)
    return perp / np.linalg.norm(perp)


def vector_slerp(a, b, t: float) -> np.ndarray:
    """
    Spherical interpolation of two 3D vectors treated as directions.

    The direction turns along the great circle between a and b while the
    length is interpolated linearly. Antipodal inputs turn about an
    arbitrary perpendicular axis.
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    len_a = np.linalg.norm(a)
    len_b = np.linalg.norm(b)
    if len_a < 1e-10 or len_b < 1e-10:
        return a + t * (b - a)

    ua = a / len_a
    ub = b / len_b
    length = len_a + t * (len_b - len_a)

    dot_ab = max(-1.0, min(1.0, float(np.dot(ua, ub))))
    theta = math.acos(dot_ab)
    if theta < _SLERP_EPSILON:
        direction = ua + t * (ub - ua)
        return direction / np.linalg.norm(direction) * length

    if math.pi - theta < _SLERP_EPSILON:
        # No unique great circle; rotate ua about some perpendicular
        perp = _any_perpendicular(ua)
        angle = t * theta
        return (ua * math.cos(angle) + perp * math.sin(angle)) * length

    sin_theta = math.sin(theta)
    w1 = math.sin((1.0 - t) * theta) / sin_theta
    w2 = math.sin(t * theta) / sin_theta
    return (w1 * ua + w2 * ub) * length
