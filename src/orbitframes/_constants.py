"""Shared constants used across the model, shape, and grid layers."""

CANVAS_SIZE: int = 400
"""Default edge length of the square output canvas, in pixels."""

CAMERA_DISTANCE: float = 400.0
"""Radius of the sphere the camera orbits on, in world units."""

FOCAL_LENGTH: float = 400.0
"""Perspective scale applied before dividing by camera-space depth."""

MIN_DEPTH: float = 1.0
"""Floor on camera-space depth used in the perspective divide."""

POLE_THRESHOLD: float = 89.0
"""Elevation magnitude (degrees) beyond which the pole basis is used."""

DEFAULT_COLS: int = 72
"""Default number of azimuth samples in a frame grid."""

DEFAULT_ROWS: int = 13
"""Default number of elevation samples in a frame grid (odd, so the
middle row sits on the horizon)."""

FACE_PALETTE: tuple[str, ...] = (
    "#ef4444", "#f97316", "#eab308", "#22c55e",
    "#3b82f6", "#8b5cf6", "#ec4899", "#14b8a6",
)
"""Fill colours cycled across the faces of filled shapes."""
