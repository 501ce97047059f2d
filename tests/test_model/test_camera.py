"""Tests for OrbitCamera: placement, basis, poles, and projection."""

import math

import numpy as np
import pytest

from orbitframes.model.camera import OrbitCamera, clamp_elevation, project_points


class TestClampElevation:
    @pytest.mark.parametrize("value, expected", [
        (0.0, 0.0), (45.0, 45.0), (90.0, 90.0), (120.0, 90.0), (-200.0, -90.0),
    ])
    def test_clamp(self, value, expected):
        assert clamp_elevation(value) == expected


class TestOrbitCameraValidation:
    @pytest.mark.parametrize("kwargs, match", [
        (dict(azimuth=math.nan), "azimuth"),
        (dict(elevation=math.inf), "elevation"),
        (dict(distance=0.0), "distance"),
        (dict(focal_length=-1.0), "focal_length"),
        (dict(canvas_size=0), "canvas_size"),
    ])
    def test_invalid(self, kwargs, match):
        with pytest.raises(ValueError, match=match):
            OrbitCamera(**kwargs)

    def test_frozen(self):
        cam = OrbitCamera()
        with pytest.raises(AttributeError):
            cam.azimuth = 10.0  # type: ignore[misc]


class TestOrbitCameraPosition:
    def test_front(self):
        np.testing.assert_allclose(OrbitCamera(0, 0).position, [0.0, 0.0, 400.0], atol=1e-9)

    def test_side(self):
        np.testing.assert_allclose(OrbitCamera(90, 0).position, [400.0, 0.0, 0.0], atol=1e-9)

    def test_above(self):
        np.testing.assert_allclose(OrbitCamera(0, 90).position, [0.0, 400.0, 0.0], atol=1e-9)

    def test_distance_is_constant(self):
        for az, el in [(0, 0), (37, 12), (-150, -60), (300, 85)]:
            assert np.linalg.norm(OrbitCamera(az, el).position) == pytest.approx(400.0)

    def test_elevation_is_clamped(self):
        np.testing.assert_allclose(
            OrbitCamera(0, 135).position, OrbitCamera(0, 90).position,
        )

    def test_azimuth_wraps(self):
        np.testing.assert_allclose(
            OrbitCamera(370, 20).position, OrbitCamera(10, 20).position, atol=1e-9,
        )


class TestOrbitCameraBasis:
    def test_front_basis(self):
        """World +x maps to screen-left; +y stays up."""
        np.testing.assert_allclose(
            OrbitCamera(0, 0).basis(),
            [[-1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, -1.0]],
            atol=1e-12,
        )

    @pytest.mark.parametrize("az, el", [
        (0, 0), (45, 30), (-120, -45), (10, 88.9), (10, 89.1), (200, 90), (75, -90),
    ])
    def test_orthonormal(self, az, el):
        basis = OrbitCamera(az, el).basis()
        np.testing.assert_allclose(basis @ basis.T, np.eye(3), atol=1e-9)

    def test_forward_points_at_origin(self):
        cam = OrbitCamera(33, -17)
        expected = -cam.position / np.linalg.norm(cam.position)
        np.testing.assert_allclose(cam.basis()[2], expected)

    def test_north_pole_basis(self):
        np.testing.assert_allclose(
            OrbitCamera(0, 90).basis(),
            [[-1.0, 0.0, 0.0], [0.0, 0.0, -1.0], [0.0, -1.0, 0.0]],
            atol=1e-9,
        )

    def test_pole_branch_is_continuous(self):
        """Views either side of the pole threshold stay close together."""
        pt = np.array([[50.0, 0.0, 30.0]])
        below = OrbitCamera(20, 88.9).project(pt)
        above = OrbitCamera(20, 89.1).project(pt)
        np.testing.assert_allclose(below, above, atol=2.0)


class TestProject:
    def test_origin_at_canvas_centre(self):
        np.testing.assert_allclose(OrbitCamera(123, 45).project(np.zeros((1, 3))), [[200.0, 200.0]])

    def test_mirrored_x(self):
        xy = OrbitCamera(0, 0).project(np.array([[80.0, 0.0, 0.0]]))
        np.testing.assert_allclose(xy, [[120.0, 200.0]], atol=1e-9)

    def test_y_up_is_screen_up(self):
        xy = OrbitCamera(0, 0).project(np.array([[0.0, 80.0, 0.0]]))
        np.testing.assert_allclose(xy, [[200.0, 120.0]], atol=1e-9)

    def test_perspective_shrinks_far_points(self):
        cam = OrbitCamera(0, 0)
        near, far = cam.project(np.array([[0.0, 50.0, 100.0], [0.0, 50.0, -100.0]]))
        assert abs(near[1] - 200.0) > abs(far[1] - 200.0)

    def test_depth_floor_at_camera(self):
        xy = OrbitCamera(0, 0).project(np.array([[10.0, 10.0, 400.0], [10.0, 10.0, 800.0]]))
        assert np.all(np.isfinite(xy))
        # Depth floored at 1 keeps the on-camera point at focal scale.
        np.testing.assert_allclose(xy[0], [200.0 - 4000.0, 200.0 - 4000.0])

    def test_canvas_size(self):
        xy = OrbitCamera(0, 0, canvas_size=100).project(np.zeros((1, 3)))
        np.testing.assert_allclose(xy, [[50.0, 50.0]])

    @pytest.mark.parametrize("el", [90.0, -90.0])
    def test_pole_projection_finite(self, el):
        pts = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, 1.0], [0.0, 1.0, 0.0]])
        for az in (0.0, 45.0, 180.0, -270.0):
            xy = OrbitCamera(az, el).project(pts)
            assert xy.shape == (4, 2)
            assert np.all(np.isfinite(xy))

    def test_deterministic(self):
        pt = np.array([[12.5, -33.0, 71.0]])
        first = OrbitCamera(-215.0, 37.5).project(pt)
        second = OrbitCamera(-215.0, 37.5).project(pt)
        np.testing.assert_array_equal(first, second)

    def test_accepts_single_point(self):
        assert OrbitCamera().project(np.array([1.0, 2.0, 3.0])).shape == (1, 2)

    def test_project_points_wrapper(self):
        pts = np.array([[10.0, 20.0, 30.0], [-40.0, 5.0, 0.0]])
        np.testing.assert_array_equal(
            project_points(pts, 25.0, -10.0), OrbitCamera(25.0, -10.0).project(pts),
        )

    def test_camera_space_depth(self):
        cam = OrbitCamera(0, 0)
        np.testing.assert_allclose(cam.to_camera_space(np.zeros((1, 3))), [[0.0, 0.0, 400.0]], atol=1e-9)
