from .quaternion import (
    DISPLAY_FORMAT,
    ROTATION_RESIDUAL_TOLERANCE,
    UNIT_TOLERANCE,
    Quaternion,
    inverse_of,
    multiply,
    quaternion_sum,
    scale_by,
)
