"""
Validation utilities for quaternion and vector arguments.

Hard errors raise :class:`~quatkit.errors.InvalidArgument`. Soft numerical
issues are reported as ``RuntimeWarning`` so results are still returned.
"""
from __future__ import annotations

import math
import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray

from quatkit.errors import InvalidArgument


def validate_vector3(vec: ArrayLike, name: str = "vector") -> NDArray[np.float64]:
    """
    Validate and convert a 3-component vector.

    Parameters
    ----------
    vec : array-like
        Candidate vector [x, y, z]
    name : str
        Parameter name for error messages

    Returns
    -------
    NDArray[np.float64]
        Fresh float64 array of shape (3,)

    Raises
    ------
    InvalidArgument
        If the input does not have exactly 3 numeric elements
    """
    try:
        arr = np.array(vec, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"{name} must be a 3-element array of numbers") from exc
    if arr.shape != (3,):
        raise InvalidArgument(f"{name} must be a 3-element array, got shape {arr.shape}")
    return arr


def validate_quaternion_array(arr: ArrayLike, name: str = "quaternion") -> NDArray[np.float64]:
    """Validate and convert a 4-component array."""
    try:
        out = np.array(arr, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"{name} must be a 4-element array of numbers") from exc
    if out.shape != (4,):
        raise InvalidArgument(f"{name} must be a 4-element array, got shape {out.shape}")
    return out


def validate_nonzero_norm(vec: NDArray[np.float64], name: str = "vector") -> float:
    """
    Return the Euclidean norm of `vec`, rejecting the zero vector.

    Only an exact zero is rejected; tiny but nonzero vectors are accepted.

    Raises
    ------
    InvalidArgument
        If the norm is exactly zero
    """
    norm = math.hypot(float(vec[0]), float(vec[1]), float(vec[2]))
    if norm == 0:
        raise InvalidArgument(f"{name} cannot be the zero vector")
    return norm


def check_rotation_residual(real_part: float, scale: float, tol: float) -> None:
    """
    Warn when the discarded real part of a rotated vector is not ~0.

    Parameters
    ----------
    real_part : float
        Scalar component of ``q * v * q^-1``
    scale : float
        Length of the rotated vector; the tolerance is relative to it
    tol : float
        Relative tolerance
    """
    if abs(real_part) > tol * max(scale, 1.0):
        warnings.warn(
            f"Rotated vector has non-zero real residual {real_part:.3e}. "
            "The rotation quaternion may be ill-conditioned.",
            RuntimeWarning,
            stacklevel=3
        )
