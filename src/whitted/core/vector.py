"""Vector and transform utilities for CPU ray tracing.

Vectors are plain NumPy float64 arrays of length 3, so addition, subtraction,
negation and scalar multiplication are the usual array operators. This module
adds the handful of named operations the tracer needs on top of that, plus a
rigid Transform (3x3 linear part composed with a translation) used to place
cameras in the scene.

Transforms use the row-vector convention:

    v' = v @ linear + translation

Example:
    >>> from src.whitted.core.vector import Transform, rotation_y, vec3
    >>> camera_to_world = Transform(rotation_y(90.0), vec3(3.0, 0.0, 1.0))
    >>> camera_to_world.rotate(vec3(0.0, 0.0, 1.0))  # doctest: +SKIP
    array([1., 0., 0.])
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np
import numpy.typing as npt

logger = logging.getLogger(__name__)

# Type alias for 3D vectors
Vec3 = npt.NDArray[np.float64]
Mat3 = npt.NDArray[np.float64]

# Tolerance used when checking a linear part for orthonormality
ORTHONORMAL_TOLERANCE = 1e-6


def vec3(x: float, y: float, z: float) -> Vec3:
    """Create a 3D vector."""
    return np.array([x, y, z], dtype=np.float64)


def as_vec3(value: Sequence[float] | Vec3) -> Vec3:
    """Coerce a 3-sequence into a float64 vector.

    Args:
        value: Any sequence or array holding exactly three numbers.

    Returns:
        A new float64 array of shape (3,).

    Raises:
        ValueError: If the input does not have exactly three components.
    """
    array = np.array(value, dtype=np.float64)
    if array.shape != (3,):
        raise ValueError(f"Expected a 3-component vector, got shape {array.shape}")
    return array


def dot(a: Vec3, b: Vec3) -> float:
    """Dot product of two vectors."""
    return float(np.dot(a, b))


def length(v: Vec3) -> float:
    """Euclidean length of a vector."""
    return math.sqrt(dot(v, v))


def normalize(v: Vec3) -> Vec3:
    """Normalize a vector to unit length.

    Args:
        v: The input vector.

    Returns:
        A unit vector in the same direction as v.

    Raises:
        ValueError: If v has zero length. Callers that can legitimately see
            degenerate vectors must guard before normalizing.
    """
    norm = length(v)
    if norm == 0.0:
        raise ValueError("Cannot normalize a zero-length vector")
    return v / norm


def project_onto_unit(a: Vec3, b: Vec3) -> Vec3:
    """Project vector a onto the unit vector b: (a . b) * b."""
    return dot(a, b) * b


def reflect_across_normal(v: Vec3, normal: Vec3) -> Vec3:
    """Reflect a vector across a unit-length normal.

    The result is the mirror image of v about the normal axis, i.e. a vector
    pointing away from the surface when v points away from it:

        R = 2 * project_onto_unit(v, normal) - v

    Args:
        v: The vector to reflect (pointing away from the surface).
        normal: The surface normal (must be unit length).

    Returns:
        The reflected vector, with the same length as v.
    """
    return 2.0 * project_onto_unit(v, normal) - v


# =============================================================================
# Rotation helpers (row-vector convention)
# =============================================================================


def rotation_x(degrees: float) -> Mat3:
    """Rotation about the x axis (positive turns +z toward +y)."""
    theta = math.radians(degrees)
    c, s = math.cos(theta), math.sin(theta)
    return np.array(
        [
            [1.0, 0.0, 0.0],
            [0.0, c, -s],
            [0.0, s, c],
        ],
        dtype=np.float64,
    )


def rotation_y(degrees: float) -> Mat3:
    """Rotation about the y axis (positive turns +z toward +x)."""
    theta = math.radians(degrees)
    c, s = math.cos(theta), math.sin(theta)
    return np.array(
        [
            [c, 0.0, -s],
            [0.0, 1.0, 0.0],
            [s, 0.0, c],
        ],
        dtype=np.float64,
    )


def rotation_z(degrees: float) -> Mat3:
    """Rotation about the z axis (positive turns +x toward +y)."""
    theta = math.radians(degrees)
    c, s = math.cos(theta), math.sin(theta)
    return np.array(
        [
            [c, s, 0.0],
            [-s, c, 0.0],
            [0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )


def is_orthonormal(matrix: Mat3, tolerance: float = ORTHONORMAL_TOLERANCE) -> bool:
    """Check whether a 3x3 matrix is orthonormal (M @ M.T == I)."""
    return bool(np.allclose(matrix @ matrix.T, np.eye(3), atol=tolerance))


@dataclass(frozen=True, eq=False)
class Transform:
    """A linear map composed with a translation.

    Attributes:
        linear: The 3x3 linear part. Should be a rotation (orthonormal) for
            physically meaningful results; other matrices are accepted but
            logged as a warning.
        translation: The translation vector applied after the linear part.
    """

    linear: Mat3 = field(default_factory=lambda: np.eye(3, dtype=np.float64))
    translation: Vec3 = field(default_factory=lambda: np.zeros(3, dtype=np.float64))

    def __post_init__(self) -> None:
        linear = np.array(self.linear, dtype=np.float64)
        if linear.shape != (3, 3):
            raise ValueError(f"Transform linear part must be 3x3, got shape {linear.shape}")
        if not is_orthonormal(linear):
            logger.warning("Transform linear part is not orthonormal: %s", linear.tolist())
        object.__setattr__(self, "linear", linear)
        object.__setattr__(self, "translation", as_vec3(self.translation))

    def apply(self, v: Vec3) -> Vec3:
        """Transform a point: v @ linear + translation."""
        return v @ self.linear + self.translation

    def rotate(self, v: Vec3) -> Vec3:
        """Transform a direction (linear part only)."""
        return v @ self.linear
