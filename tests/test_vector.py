"""Unit tests for vector algebra, rays and sampling helpers.

Tests cover:
- Arithmetic, in-place mutation and indexing
- Dot/cross products and normalization
- Reflection and refraction
- Random sampling stays inside its domain
"""

import math

import pytest

from conftest import assert_vec_close
from core.ray import Ray
from core.utils import (clamp, degrees_to_radians, random_in_hemisphere,
                        random_in_unit_disk, random_in_unit_sphere,
                        random_unit_vector, reflect, refract)
from core.vector import Color, Point3, Vector3


class TestVectorArithmetic:
    """Tests for Vector3 operators."""

    def test_binary_operators_return_new_vectors(self):
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        assert a + b == Vector3(5, 7, 9)
        assert b - a == Vector3(3, 3, 3)
        assert a * 2 == Vector3(2, 4, 6)
        assert 2 * a == Vector3(2, 4, 6)
        assert a * b == Vector3(4, 10, 18)
        assert b / 2 == Vector3(2, 2.5, 3)
        assert -a == Vector3(-1, -2, -3)
        assert a == Vector3(1, 2, 3)

    def test_in_place_operators_mutate(self):
        a = Vector3(1, 1, 1)
        alias = a
        a += Vector3(1, 2, 3)
        a *= 2
        a /= 4
        assert alias is a
        assert a == Vector3(1, 1.5, 2)

    def test_indexing_and_iteration(self):
        v = Vector3(7, 8, 9)
        assert (v[0], v[1], v[2]) == (7, 8, 9)
        assert list(v) == [7, 8, 9]
        with pytest.raises(IndexError):
            v[3]

    def test_aliases_are_the_same_type(self):
        assert Point3 is Vector3
        assert Color is Vector3


class TestVectorProducts:
    """Tests for dot, cross and length."""

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
        assert_vec_close(v.normalize(), (0.6, 0.8, 0.0))

    def test_normalize_zero_vector_stays_zero(self):
        assert Vector3(0, 0, 0).normalize() == Vector3(0, 0, 0)

    def test_near_zero(self):
        assert Vector3(1e-9, -1e-9, 0).near_zero()
        assert not Vector3(1e-3, 0, 0).near_zero()


class TestRay:
    """Tests for the Ray evaluator."""

    def test_at(self):
        ray = Ray(Point3(1, 2, 3), Vector3(0, 0, -2), time=0.5)
        assert ray.at(0) == Point3(1, 2, 3)
        assert ray.at(1.5) == Point3(1, 2, 0)
        assert ray.time == 0.5

    def test_default_time_is_zero(self):
        assert Ray(Point3(0, 0, 0), Vector3(1, 0, 0)).time == 0.0


class TestReflectRefract:
    """Tests for reflect and refract."""

    def test_reflect_flips_normal_component(self):
        v = Vector3(1, -1, 0)
        n = Vector3(0, 1, 0)
        assert reflect(v, n) == Vector3(1, 1, 0)

    def test_refract_matched_index_keeps_direction(self):
        uv = Vector3(1, -1, 0).normalize()
        n = Vector3(0, 1, 0)
        assert_vec_close(refract(uv, n, 1.0), uv)

    def test_refract_bends_towards_normal_entering_denser_medium(self):
        uv = Vector3(1, -1, 0).normalize()
        n = Vector3(0, 1, 0)
        out = refract(uv, n, 1.0 / 1.5)
        # sin(theta_t) = sin(45deg) / 1.5
        assert abs(out.x - math.sin(math.pi / 4) / 1.5) < 1e-9
        assert out.y < 0
        assert abs(out.length() - 1.0) < 1e-9


class TestSampling:
    """Random helpers stay inside their domains."""

    def test_unit_sphere(self, rng):
        for _ in range(200):
            assert random_in_unit_sphere(rng).length_squared() < 1.0

    def test_unit_vector(self, rng):
        for _ in range(200):
            assert abs(random_unit_vector(rng).length() - 1.0) < 1e-9

    def test_hemisphere(self, rng):
        normal = Vector3(0, 0, 1)
        for _ in range(200):
            assert random_in_hemisphere(normal, rng).dot(normal) >= 0.0

    def test_unit_disk(self, rng):
        for _ in range(200):
            p = random_in_unit_disk(rng)
            assert p.z == 0
            assert p.length_squared() < 1.0

    def test_random_vector_range(self, rng):
        for _ in range(50):
            v = Vector3.random(rng, 0.5, 1.0)
            assert all(0.5 <= c <= 1.0 for c in v)

    def test_same_seed_same_samples(self):
        import random
        first, second = random.Random(7), random.Random(7)
        a = [random_unit_vector(first) for _ in range(3)]
        b = [random_unit_vector(second) for _ in range(3)]
        assert a == b
        assert a[0] != a[1]


class TestScalarHelpers:
    def test_clamp(self):
        assert clamp(-1, 0, 1) == 0
        assert clamp(2, 0, 1) == 1
        assert clamp(0.5, 0, 1) == 0.5

    def test_degrees_to_radians(self):
        assert abs(degrees_to_radians(180) - math.pi) < 1e-12
