"""Unit tests for the thin-lens camera.

Tests cover:
- Viewport corners and the central ray
- Shutter time sampling
- Lens offsets for a non-zero aperture
"""

import random

from conftest import assert_vec_close
from camera.camera import Camera
from core.vector import Point3, Vector3


def pinhole(**kwargs):
    params = dict(look_from=Point3(0, 0, 0), look_at=Point3(0, 0, -1),
                  vup=Vector3(0, 1, 0), vfov=90.0, aspect_ratio=2.0)
    params.update(kwargs)
    return Camera(**params)


class TestCameraRays:
    """Tests for rays leaving the camera."""

    def test_center_ray_points_at_target(self, rng):
        ray = pinhole().get_ray(0.5, 0.5, rng)
        assert ray.origin == Point3(0, 0, 0)
        assert_vec_close(ray.direction.normalize(), (0, 0, -1))

    def test_viewport_corners(self, rng):
        camera = pinhole()
        # vfov 90 gives a viewport 2 high and 4 wide at distance 1.
        assert_vec_close(camera.get_ray(0, 0, rng).direction, (-2, -1, -1))
        assert_vec_close(camera.get_ray(1, 1, rng).direction, (2, 1, -1))

    def test_basis_is_orthonormal(self):
        camera = pinhole(look_from=Point3(13, 2, 3), look_at=Point3(0, 0, 0), vfov=20.0)
        for a, b in ((camera.u, camera.v), (camera.v, camera.w), (camera.u, camera.w)):
            assert abs(a.dot(b)) < 1e-12
        for axis in (camera.u, camera.v, camera.w):
            assert abs(axis.length() - 1.0) < 1e-12

    def test_focus_distance_scales_viewport(self, rng):
        near = pinhole(focus_dist=1.0).get_ray(1, 1, rng).direction
        far = pinhole(focus_dist=10.0).get_ray(1, 1, rng).direction
        assert_vec_close(far, near * 10)


class TestShutterAndLens:
    """Tests for motion blur time and depth of field."""

    def test_ray_time_within_shutter(self, rng):
        camera = pinhole(time0=0.25, time1=0.75)
        times = [camera.get_ray(0.5, 0.5, rng).time for _ in range(200)]
        assert all(0.25 <= t <= 0.75 for t in times)
        assert len(set(times)) > 1

    def test_instant_shutter(self, rng):
        camera = pinhole(time0=1.0, time1=1.0)
        assert camera.get_ray(0.3, 0.6, rng).time == 1.0

    def test_zero_aperture_keeps_origin_fixed(self, rng):
        camera = pinhole(aperture=0.0)
        for _ in range(20):
            assert camera.get_ray(rng.random(), rng.random(), rng).origin == Point3(0, 0, 0)

    def test_aperture_offsets_stay_on_lens(self, rng):
        camera = pinhole(aperture=0.5, focus_dist=2.0)
        target = None
        for _ in range(50):
            ray = camera.get_ray(0.5, 0.5, rng)
            # The lens lies in the plane facing the target.
            assert abs(ray.origin.z) < 1e-12
            assert ray.origin.length() < 0.25
            # Every ray still passes through the same point on the focus plane.
            point = ray.at(1.0)
            if target is None:
                target = point
            assert_vec_close(point, target, 1e-9)
        assert_vec_close(target, (0, 0, -2), 1e-9)

    def test_same_seed_same_rays(self):
        camera = pinhole(aperture=1.0, time1=1.0)
        a = camera.get_ray(0.2, 0.8, random.Random(5))
        b = camera.get_ray(0.2, 0.8, random.Random(5))
        assert a.origin == b.origin
        assert a.direction == b.direction
        assert a.time == b.time
