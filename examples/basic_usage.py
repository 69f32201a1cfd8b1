"""
Example: quaternion creation, rotation, multiplication and inversion.

Run from the repository root:

    python examples/basic_usage.py
"""
import math
import sys
from pathlib import Path

# Setup path for local development (not needed if installed via pip)
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from quatkit import Quaternion, inverse_of, multiply
from quatkit.utils.orientation import describe_rotation


def run_example():
    q1 = Quaternion(1, 2, 3, 4)
    q2 = Quaternion(2, -1, 0, 3)

    print(f"Quaternion q1: {q1}")
    print(f"Quaternion q2: {q2}")
    print(f"Is q1 unitary? {q1.is_unit_quaternion()}")

    q1.normalize_in_place()
    print(f"Normalized q1: {q1}")
    print(f"Is q1 unitary now? {q1.is_unit_quaternion()}")

    print(f"q1 * q2 = {multiply(q1, q2)}")
    print(f"Inverse of q1: {inverse_of(q1)}")

    # 90 degrees about Z
    q_rot = Quaternion.from_axis_angle(math.pi / 2, [0, 0, 1])
    print(f"Rotation quaternion (90° around Z): {q_rot}")
    print(f"  {describe_rotation(q_rot)}")

    vector = [1, 0, 0]
    print(f"Rotated vector: {q_rot.rotate(vector)}")

    # Apply Z first, then Y
    q_rot2 = Quaternion.from_axis_angle(math.pi / 2, [0, 1, 0])
    combined = multiply(q_rot2, q_rot)
    print(f"Vector after two rotations: {combined.rotate(vector)}")


if __name__ == "__main__":
    run_example()
