"""
Engineer-friendly rotation utilities.

Helpers for building rotation quaternions in degrees and for handing them
to/from :class:`scipy.spatial.transform.Rotation`, which uses the
scalar-last [x, y, z, w] layout. quatkit itself is scalar-first.

Examples
--------
>>> from quatkit.utils.orientation import quaternion_from_axis_angle, describe_rotation
>>> q = quaternion_from_axis_angle([0, 0, 1], 90)
>>> describe_rotation(q)
'Angle: 90.0°, Axis: [0.000, 0.000, 1.000]'
"""
from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.spatial.transform import Rotation as R

from quatkit.core.quaternion import Quaternion
from quatkit.errors import InvalidArgument


# =============================================================================
# Identity quaternion (no rotation)
# =============================================================================

IDENTITY: NDArray[np.float64] = np.array([1.0, 0.0, 0.0, 0.0], dtype=np.float64)
"""Identity quaternion [1, 0, 0, 0] (scalar-first) representing no rotation."""


# =============================================================================
# Axis-Angle Rotation
# =============================================================================

def quaternion_from_axis_angle(
    axis: tuple[float, float, float] | list[float] | NDArray,
    angle: float,
    degrees: bool = True
) -> Quaternion:
    """
    Create rotation quaternion from axis-angle representation.

    Parameters
    ----------
    axis : array-like
        Rotation axis [x, y, z]. Will be normalized.
    angle : float
        Rotation angle [degrees or radians]
    degrees : bool
        If True (default), angle is in degrees.

    Returns
    -------
    Quaternion
        Unit quaternion

    Examples
    --------
    >>> # Rotate 45 degrees about Z axis
    >>> q = quaternion_from_axis_angle([0, 0, 1], 45)
    """
    if degrees:
        angle = math.radians(angle)
    return Quaternion.from_axis_angle(angle, axis)


# =============================================================================
# scipy interop
# =============================================================================

def to_scipy_rotation(q: Quaternion) -> R:
    """
    Convert to a scipy ``Rotation``.

    scipy normalizes the input, so any nonzero quaternion is accepted.

    Raises
    ------
    InvalidArgument
        If `q` is the zero quaternion
    """
    if q.determinant() == 0:
        raise InvalidArgument("Zero quaternion does not describe a rotation")
    return R.from_quat(q.as_array(scalar_last=True))


def from_scipy_rotation(rot: R) -> Quaternion:
    """Create a unit quaternion from a single scipy ``Rotation``."""
    quat = np.asarray(rot.as_quat())
    if quat.shape != (4,):
        raise InvalidArgument(f"Expected a single rotation, got quaternion array of shape {quat.shape}")
    return Quaternion.from_array(quat, scalar_last=True)


# =============================================================================
# Inspection
# =============================================================================

def rotation_angle_axis(q: Quaternion) -> tuple[float, NDArray[np.float64]]:
    """
    Return (angle [rad], unit axis) of the rotation encoded by `q`.

    Works on a normalized copy; `q` is left unchanged. The identity rotation
    reports axis [1, 0, 0].

    Raises
    ------
    QuaternionArithmeticError
        If `q` is the zero quaternion
    """
    unit = q.copy()
    unit.normalize_in_place()

    vec = unit.imaginary_part()
    sin_half = float(np.linalg.norm(vec))
    angle = 2.0 * math.atan2(sin_half, unit.real_part())
    if sin_half == 0.0:
        return angle, np.array([1.0, 0.0, 0.0])
    return angle, vec / sin_half


def describe_rotation(q: Quaternion) -> str:
    """
    Get human-readable description of a rotation.

    Examples
    --------
    >>> describe_rotation(Quaternion.identity())
    'Angle: 0.0°, Axis: [1.000, 0.000, 0.000]'
    """
    angle, axis = rotation_angle_axis(q)
    return (
        f"Angle: {math.degrees(angle):.1f}°, "
        f"Axis: [{axis[0]:.3f}, {axis[1]:.3f}, {axis[2]:.3f}]"
    )
