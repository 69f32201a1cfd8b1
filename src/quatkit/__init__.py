"""
quatkit - Quaternion arithmetic and 3D vector rotation.

Core Components
---------------
Quaternion : Value type a + b·i + c·j + d·k with Hamilton algebra
quaternion_sum, scale_by, multiply, inverse_of : Pure free operations
InvalidArgument : Bad vector shape or zero rotation axis
QuaternionArithmeticError : Normalizing or inverting a zero quaternion

Recording
---------
CSVLogger : Buffered CSV log of quaternion snapshots

Examples
--------
>>> import math
>>> from quatkit import Quaternion
>>> q = Quaternion.from_axis_angle(math.pi / 2, [0, 0, 1])
>>> print(q)
0.707 + 0.000i + 0.000j + 0.707k
"""

__version__ = "0.1.0"

from quatkit.core.quaternion import (
    UNIT_TOLERANCE,
    Quaternion,
    inverse_of,
    multiply,
    quaternion_sum,
    scale_by,
)
from quatkit.errors import InvalidArgument, QuatkitError, QuaternionArithmeticError

# Logging
from quatkit.logger import CSVLogger

__all__ = [
    # Version
    "__version__",
    # Core
    "Quaternion",
    "quaternion_sum",
    "scale_by",
    "multiply",
    "inverse_of",
    "UNIT_TOLERANCE",
    # Errors
    "QuatkitError",
    "InvalidArgument",
    "QuaternionArithmeticError",
    # Logging
    "CSVLogger",
]
