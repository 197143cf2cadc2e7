"""Tests for the vector, ray and sampling helpers."""

import math
import random

import pytest

from spheretracer.core.ray import Ray
from spheretracer.core.utils import (
    degrees_to_radians,
    random_in_unit_disk,
    random_in_unit_sphere,
    random_unit_vector,
    reflect,
    refract,
)
from spheretracer.core.vector import Color, Vector3


class TestVector3:
    """Arithmetic on the vector/point/color type."""

    def test_add_sub_neg(self):
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        assert a + b == Vector3(5, 7, 9)
        assert b - a == Vector3(3, 3, 3)
        assert -a == Vector3(-1, -2, -3)

    def test_scalar_and_componentwise_multiply(self):
        a = Vector3(1, 2, 3)
        assert a * 2 == Vector3(2, 4, 6)
        assert 2 * a == Vector3(2, 4, 6)
        assert a * Color(0.5, 0.5, 2) == Vector3(0.5, 1.0, 6)

    def test_divide(self):
        assert Vector3(2, 4, 6) / 2 == Vector3(1, 2, 3)

    def test_dot_and_cross(self):
        x = Vector3(1, 0, 0)
        y = Vector3(0, 1, 0)
        assert x.dot(y) == 0
        assert x.cross(y) == Vector3(0, 0, 1)
        assert y.cross(x) == Vector3(0, 0, -1)

    def test_length_and_normalize(self):
        v = Vector3(3, 4, 0)
        assert v.length_squared() == 25
        assert v.length() == 5
        unit = v.normalize()
        assert unit.length() == pytest.approx(1.0)
        assert v.unit() == unit

    def test_normalize_zero_vector_returns_zero(self):
        assert Vector3(0, 0, 0).normalize() == Vector3(0, 0, 0)

    def test_near_zero(self):
        assert Vector3(1e-9, -1e-9, 0).near_zero()
        assert not Vector3(1e-3, 0, 0).near_zero()

    def test_operations_return_new_values(self):
        a = Vector3(1, 1, 1)
        a + Vector3(1, 1, 1)
        a * 3
        assert a == Vector3(1, 1, 1)


class TestRay:
    def test_at(self):
        ray = Ray(Vector3(1, 0, 0), Vector3(0, 2, 0))
        assert ray.at(0) == Vector3(1, 0, 0)
        assert ray.at(1.5) == Vector3(1, 3, 0)


class TestSampling:
    """Rejection samplers and reflection helpers."""

    def test_random_in_unit_sphere(self):
        rng = random.Random(3)
        for _ in range(200):
            assert random_in_unit_sphere(rng).length_squared() < 1.0

    def test_random_unit_vector_has_unit_length(self):
        rng = random.Random(4)
        for _ in range(200):
            assert random_unit_vector(rng).length() == pytest.approx(1.0)

    def test_random_in_unit_disk_is_flat(self):
        rng = random.Random(5)
        for _ in range(200):
            p = random_in_unit_disk(rng)
            assert p.z == 0
            assert p.length_squared() < 1.0

    def test_samplers_accept_numpy_generator(self):
        np = pytest.importorskip("numpy")
        rng = np.random.default_rng(6)
        assert random_unit_vector(rng).length() == pytest.approx(1.0)

    def test_reflect(self):
        v = Vector3(1, -1, 0)
        n = Vector3(0, 1, 0)
        assert reflect(v, n) == Vector3(1, 1, 0)

    def test_refract_with_unit_ratio_is_identity(self):
        uv = Vector3(1, -2, 0.5).normalize()
        n = Vector3(0, 1, 0)
        out = refract(uv, n, 1.0)
        assert out.x == pytest.approx(uv.x)
        assert out.y == pytest.approx(uv.y)
        assert out.z == pytest.approx(uv.z)

    def test_refract_bends_towards_normal_entering_denser_medium(self):
        uv = Vector3(1, -1, 0).normalize()
        n = Vector3(0, 1, 0)
        out = refract(uv, n, 1.0 / 1.5)
        # sin(theta_t) = sin(theta_i) / 1.5
        assert out.x == pytest.approx(math.sqrt(0.5) / 1.5)
        assert out.length() == pytest.approx(1.0)

    def test_degrees_to_radians(self):
        assert degrees_to_radians(180) == pytest.approx(math.pi)
