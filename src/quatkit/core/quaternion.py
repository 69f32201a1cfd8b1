"""
Quaternion value type with Hamilton algebra and vector rotation.

A quaternion q = a + b·i + c·j + d·k is stored scalar-first as four float64
components. Unit quaternions encode 3D rotations; ``rotate`` applies
v' = q ⊗ v ⊗ q⁻¹ to a vector.

Conventions
-----------
- Component order is scalar-first: [a, b, c, d] = [w, x, y, z].
- Angles are in radians, positive rotations follow the right-hand rule.
- Pure operations return new instances. Mutation happens only through the
  explicitly named ``*_in_place`` methods and the two setters.

Examples
--------
>>> import math
>>> import numpy as np
>>> q = Quaternion.from_axis_angle(math.pi / 2, [0, 0, 1])
>>> np.allclose(q.rotate([1, 0, 0]), [0, 1, 0])
True
>>> str(multiply(Quaternion(1, 2, 3, 4), Quaternion(2, -1, 0, 3)))
'-8.000 + 12.000i + -4.000j + 14.000k'
"""
from __future__ import annotations

import math
from numbers import Real
from typing import Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from quatkit.errors import QuaternionArithmeticError
from quatkit.utils.validation import (
    check_rotation_residual,
    validate_nonzero_norm,
    validate_quaternion_array,
    validate_vector3,
)

# Constants
UNIT_TOLERANCE = 1e-10  # |norm - 1| below this counts as a unit quaternion
ROTATION_RESIDUAL_TOLERANCE = 1e-9
DISPLAY_FORMAT = "%.3f + %.3fi + %.3fj + %.3fk"


class Quaternion:
    """
    Quaternion a + b·i + c·j + d·k.

    Parameters
    ----------
    a : float
        Real (scalar) part
    b, c, d : float
        Imaginary (vector) part

    Notes
    -----
    Instances are mutable, so they define ``__eq__`` but are not hashable.
    A shared instance must be synchronized externally if mutated from
    several threads.
    """

    __slots__ = ("_a", "_b", "_c", "_d")

    def __init__(self, a: float = 0.0, b: float = 0.0, c: float = 0.0, d: float = 0.0) -> None:
        self._a = float(a)
        self._b = float(b)
        self._c = float(c)
        self._d = float(d)

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_axis_angle(cls, angle: float, axis: ArrayLike) -> Quaternion:
        """
        Create the unit quaternion rotating by `angle` about `axis`.

        Parameters
        ----------
        angle : float
            Rotation angle [rad]
        axis : array-like
            Rotation axis [x, y, z]. Normalized internally.

        Returns
        -------
        Quaternion
            (cos(θ/2), sin(θ/2)·axis/|axis|)

        Raises
        ------
        InvalidArgument
            If `axis` does not have 3 elements or is the zero vector
        """
        axis = validate_vector3(axis, "Rotation axis")
        norm = validate_nonzero_norm(axis, "Rotation axis")

        half_angle = angle / 2.0
        sin_half = math.sin(half_angle)
        return cls(
            math.cos(half_angle),
            sin_half * (axis[0] / norm),
            sin_half * (axis[1] / norm),
            sin_half * (axis[2] / norm),
        )

    @classmethod
    def from_array(cls, values: ArrayLike, scalar_last: bool = False) -> Quaternion:
        """
        Create from a 4-element array.

        With ``scalar_last=True`` the input is read as [x, y, z, w], the
        layout used by scipy's ``Rotation.as_quat``.
        """
        arr = validate_quaternion_array(values)
        if scalar_last:
            return cls(arr[3], arr[0], arr[1], arr[2])
        return cls(arr[0], arr[1], arr[2], arr[3])

    @classmethod
    def identity(cls) -> Quaternion:
        """Identity rotation (1, 0, 0, 0)."""
        return cls(1.0, 0.0, 0.0, 0.0)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def a(self) -> float:
        return self._a

    @property
    def b(self) -> float:
        return self._b

    @property
    def c(self) -> float:
        return self._c

    @property
    def d(self) -> float:
        return self._d

    def real_part(self) -> float:
        """Return the real component a."""
        return self._a

    def imaginary_part(self) -> NDArray[np.float64]:
        """Return a new array [b, c, d]."""
        return np.array([self._b, self._c, self._d], dtype=np.float64)

    def set_real_part(self, value: float) -> None:
        self._a = float(value)

    def set_imaginary_part(self, imaginary: ArrayLike) -> None:
        """
        Overwrite b, c, d.

        Raises
        ------
        InvalidArgument
            If `imaginary` does not have exactly 3 elements
        """
        vec = validate_vector3(imaginary, "Imaginary part")
        self._b, self._c, self._d = float(vec[0]), float(vec[1]), float(vec[2])

    def as_array(self, scalar_last: bool = False) -> NDArray[np.float64]:
        """Return components as a new (4,) array, [a, b, c, d] or [b, c, d, a]."""
        if scalar_last:
            return np.array([self._b, self._c, self._d, self._a], dtype=np.float64)
        return np.array([self._a, self._b, self._c, self._d], dtype=np.float64)

    def copy(self) -> Quaternion:
        return Quaternion(self._a, self._b, self._c, self._d)

    def __iter__(self) -> Iterator[float]:
        return iter((self._a, self._b, self._c, self._d))

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def to_display_string(self) -> str:
        """Render as ``"a + bi + cj + dk"`` with three decimals per component."""
        return DISPLAY_FORMAT % (self._a, self._b, self._c, self._d)

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"Quaternion(a={self._a!r}, b={self._b!r}, c={self._c!r}, d={self._d!r})"

    # ------------------------------------------------------------------
    # Comparison / predicates
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return tuple(self) == tuple(other)

    __hash__ = None  # mutable

    def isclose(self, other: Quaternion, atol: float = 1e-9) -> bool:
        """Component-wise comparison within absolute tolerance `atol`."""
        return all(abs(x - y) <= atol for x, y in zip(self, other))

    def is_unit_quaternion(self) -> bool:
        """True when |norm - 1| < UNIT_TOLERANCE."""
        return abs(self.norm() - 1.0) < UNIT_TOLERANCE

    # ------------------------------------------------------------------
    # In-place algebra
    # ------------------------------------------------------------------

    def add_in_place(self, q: Quaternion) -> None:
        self._a += q._a
        self._b += q._b
        self._c += q._c
        self._d += q._d

    def scale_in_place(self, r: float) -> None:
        r = float(r)
        self._a *= r
        self._b *= r
        self._c *= r
        self._d *= r

    def multiply_in_place(self, q: Quaternion) -> None:
        """Replace self with the Hamilton product self ⊗ q (self on the left)."""
        self._a, self._b, self._c, self._d = _hamilton(self, q)

    def normalize_in_place(self) -> None:
        """
        Scale to unit norm.

        Raises
        ------
        QuaternionArithmeticError
            If the norm is exactly zero
        """
        norm = self.norm()
        if norm == 0:
            raise QuaternionArithmeticError("cannot normalize a zero quaternion")
        self._a /= norm
        self._b /= norm
        self._c /= norm
        self._d /= norm

    # ------------------------------------------------------------------
    # Pure derived operations
    # ------------------------------------------------------------------

    def determinant(self) -> float:
        """Squared norm a² + b² + c² + d²."""
        return self._a * self._a + self._b * self._b + self._c * self._c + self._d * self._d

    def norm(self) -> float:
        return math.sqrt(self.determinant())

    def conjugate(self) -> Quaternion:
        """Return (a, -b, -c, -d)."""
        return Quaternion(self._a, -self._b, -self._c, -self._d)

    def rotate(self, vector: ArrayLike) -> NDArray[np.float64]:
        """
        Rotate a 3D vector: v' = q ⊗ (0, v) ⊗ q⁻¹.

        For a unit quaternion the conjugate is used as the inverse, otherwise
        the general inverse. The real part of the product is discarded; a
        ``RuntimeWarning`` is issued if it is not numerically zero.

        Parameters
        ----------
        vector : array-like
            Vector [x, y, z]

        Returns
        -------
        NDArray[np.float64]
            Rotated vector (3,)

        Raises
        ------
        InvalidArgument
            If `vector` does not have exactly 3 elements
        QuaternionArithmeticError
            If self is the zero quaternion
        """
        vec = validate_vector3(vector, "Vector")
        v = Quaternion(0.0, vec[0], vec[1], vec[2])

        if self.is_unit_quaternion():
            q_inv = self.conjugate()
        else:
            q_inv = Quaternion.inverse_of(self)

        rotated = Quaternion.multiply(self, v)
        rotated.multiply_in_place(q_inv)

        check_rotation_residual(rotated._a, v.norm(), ROTATION_RESIDUAL_TOLERANCE)
        return rotated.imaginary_part()

    # ------------------------------------------------------------------
    # Static pure operations
    # ------------------------------------------------------------------

    @staticmethod
    def quaternion_sum(q1: Quaternion, q2: Quaternion) -> Quaternion:
        return Quaternion(q1._a + q2._a, q1._b + q2._b, q1._c + q2._c, q1._d + q2._d)

    @staticmethod
    def scale_by(r: float, q: Quaternion) -> Quaternion:
        return Quaternion(r * q._a, r * q._b, r * q._c, r * q._d)

    @staticmethod
    def multiply(q1: Quaternion, q2: Quaternion) -> Quaternion:
        """Hamilton product q1 ⊗ q2. Order matters."""
        return Quaternion(*_hamilton(q1, q2))

    @staticmethod
    def inverse_of(q: Quaternion) -> Quaternion:
        """
        Return q⁻¹ = conj(q) / |q|².

        Raises
        ------
        QuaternionArithmeticError
            If q is the zero quaternion
        """
        norm_squared = q.determinant()
        if norm_squared == 0:
            raise QuaternionArithmeticError("cannot invert a quaternion with zero norm")
        return Quaternion.scale_by(1.0 / norm_squared, q.conjugate())

    # ------------------------------------------------------------------
    # Operator aliases (pure)
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion.quaternion_sum(self, other)

    def __neg__(self) -> Quaternion:
        return Quaternion.scale_by(-1.0, self)

    def __sub__(self, other: object) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion.quaternion_sum(self, -other)

    def __mul__(self, other: object) -> Quaternion:
        if isinstance(other, Quaternion):
            return Quaternion.multiply(self, other)
        if isinstance(other, Real):
            return Quaternion.scale_by(float(other), self)
        return NotImplemented

    def __rmul__(self, other: object) -> Quaternion:
        if isinstance(other, Real):
            return Quaternion.scale_by(float(other), self)
        return NotImplemented

    def __abs__(self) -> float:
        return self.norm()


def _hamilton(q1: Quaternion, q2: Quaternion) -> tuple[float, float, float, float]:
    a1, b1, c1, d1 = q1._a, q1._b, q1._c, q1._d
    a2, b2, c2, d2 = q2._a, q2._b, q2._c, q2._d
    return (
        a1 * a2 - b1 * b2 - c1 * c2 - d1 * d2,
        a1 * b2 + b1 * a2 + c1 * d2 - d1 * c2,
        a1 * c2 - b1 * d2 + c1 * a2 + d1 * b2,
        a1 * d2 + b1 * c2 - c1 * b2 + d1 * a2,
    )


# Free-function forms of the static operations
quaternion_sum = Quaternion.quaternion_sum
scale_by = Quaternion.scale_by
multiply = Quaternion.multiply
inverse_of = Quaternion.inverse_of
