"""Utility functions for quatkit.

``quatkit.utils.orientation`` and ``quatkit.utils.io`` depend on the core
type and are imported as submodules.
"""

from .validation import (
    check_rotation_residual,
    validate_nonzero_norm,
    validate_quaternion_array,
    validate_vector3,
)

__all__ = [
    "validate_vector3",
    "validate_quaternion_array",
    "validate_nonzero_norm",
    "check_rotation_residual",
]
