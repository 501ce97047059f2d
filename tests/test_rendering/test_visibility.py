"""Tests for the signed-area front-facing test."""

import numpy as np
import pytest

from orbitframes.model.camera import OrbitCamera
from orbitframes.rendering.visibility import is_front_facing, signed_area
from orbitframes.shapes.geometry import CUBE_FACES, CUBE_VERTICES


class TestSignedArea:
    def test_positive(self):
        assert signed_area([(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)]) == 1.0

    def test_negative_when_reversed(self):
        assert signed_area([(0.0, 0.0), (0.0, 1.0), (1.0, 0.0)]) == -1.0

    def test_uses_first_three_points(self):
        pts = [(0.0, 0.0), (2.0, 0.0), (0.0, 2.0), (-100.0, -100.0)]
        assert signed_area(pts) == 4.0

    def test_degenerate(self):
        assert signed_area([(0.0, 0.0), (1.0, 1.0), (2.0, 2.0)]) == 0.0
        assert not is_front_facing([(0.0, 0.0), (1.0, 1.0), (2.0, 2.0)])

    def test_accepts_array(self):
        assert is_front_facing(np.array([[0.0, 0.0], [1.0, 0.0], [0.0, 1.0]]))


class TestCubeFaceSigns:
    """At azimuth 0, elevation 0 the camera looks down -z at the z = +s face."""

    @pytest.fixture
    def projected(self):
        return OrbitCamera(0, 0).project(CUBE_VERTICES)

    def test_facing_face_positive(self, projected):
        front = CUBE_FACES[1]  # z = +s
        assert signed_area(projected[list(front)]) > 0

    def test_opposite_face_negative(self, projected):
        back = CUBE_FACES[0]  # z = -s
        assert signed_area(projected[list(back)]) < 0
