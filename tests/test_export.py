"""Tests for SVG, data URI, and file export."""

import base64

from orbitframes.export import save_grid, save_svg, to_data_uri, to_svg
from orbitframes.shapes.filled import filled_cube


class TestExport:
    def test_to_svg(self):
        frame = filled_cube(30, 20)
        assert to_svg(frame) == frame.to_svg()

    def test_data_uri_round_trip(self):
        frame = filled_cube(30, 20)
        uri = to_data_uri(frame)
        prefix = "data:image/svg+xml;base64,"
        assert uri.startswith(prefix)
        assert base64.b64decode(uri[len(prefix):]).decode("utf-8") == frame.to_svg()

    def test_save_svg(self, tmp_path):
        frame = filled_cube(30, 20)
        path = save_svg(frame, tmp_path / "cube.svg")
        assert path.read_text(encoding="utf-8") == frame.to_svg()

    def test_save_grid(self, small_grid, tmp_path):
        out = tmp_path / "nested" / "frames"
        paths = save_grid(small_grid, out, prefix="cube")
        assert len(paths) == 3
        assert paths[2][3] == out / "cube_r02_c03.svg"
        assert paths[2][3].read_text(encoding="utf-8") == small_grid.frame_at(2, 3).to_svg()
        assert len(list(out.glob("*.svg"))) == 12
