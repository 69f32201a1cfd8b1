"""
Verification Test Suite for quatkit.

These tests check algebraic identities and rotation results against
analytical values and against scipy's independent Rotation implementation.

Test Categories:
- Algebra: additive inverse, inversion round trip, non-commutativity
- Normalization: idempotence, unit result
- Rotation: length preservation, composition order, scipy agreement
"""

import numpy as np
import pytest

from quatkit import Quaternion


# -----------------------------------------------------------------------------
# Test Configuration
# -----------------------------------------------------------------------------

N_SAMPLES = 50


# -----------------------------------------------------------------------------
# Common Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def rng():
    """Seeded generator so failures are reproducible."""
    return np.random.default_rng(20240501)


@pytest.fixture
def random_quaternions(rng):
    """Nonzero quaternions with components in [-10, 10]."""
    return [random_quaternion(rng) for _ in range(N_SAMPLES)]


@pytest.fixture
def random_unit_quaternions(rng):
    """Unit quaternions built from random axis-angle pairs."""
    out = []
    for _ in range(N_SAMPLES):
        axis = rng.normal(size=3)
        angle = rng.uniform(-2 * np.pi, 2 * np.pi)
        out.append(Quaternion.from_axis_angle(angle, axis))
    return out


@pytest.fixture
def random_vectors(rng):
    return [rng.uniform(-100.0, 100.0, size=3) for _ in range(N_SAMPLES)]


# -----------------------------------------------------------------------------
# Helper Functions
# -----------------------------------------------------------------------------

def random_quaternion(rng: np.random.Generator, scale: float = 10.0) -> Quaternion:
    """Random quaternion away from zero."""
    while True:
        q = Quaternion.from_array(rng.uniform(-scale, scale, size=4))
        if q.norm() > 1e-3:
            return q
