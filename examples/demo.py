"""Demo script: render a filled torus turntable and save a few previews."""

import logging
from pathlib import Path

from orbitframes import build_frame_grid, render_mpl, render_shape, save_grid, save_svg

OUTPUT = Path(__file__).resolve().parent / "output"


def main():
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    OUTPUT.mkdir(exist_ok=True)

    frame = render_shape("Torus", 30, 25, filled=True)
    print(f"Torus at (30, 25): {len(frame.primitives)} visible faces")
    save_svg(frame, OUTPUT / "torus.svg")
    render_mpl(frame, OUTPUT / "torus.png", show=False)

    grid = build_frame_grid("Cube", filled=True, cols=24, rows=7, max_workers=4)
    rows, cols = grid.shape
    print(f"Built {rows} x {cols} grid, horizon row at elevation {grid.elevations[rows // 2]:g}")
    save_grid(grid, OUTPUT / "cube_frames", prefix="cube")


if __name__ == "__main__":
    main()
