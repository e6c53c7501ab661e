"""Central place for huedial default settings."""

# Max-chroma solver
DEFAULT_BISECTION_STEPS: int = 20  # ~2^-20 resolution along a gamut edge
DEFAULT_DIAL_SAMPLES: int = 360  # One max-chroma color per degree

# Initial hue: the red corner of the Display P3 boundary table, in degrees
DEFAULT_HUE: float = 42.794290425520614

# Composition record layout (compositor-side, grid units)
DEFAULT_GRID_SIZE: tuple[int, int] = (30, 30)
DEFAULT_JC_REGION: tuple[int, int, int, int] = (1, 1, 29, 29)

# Preview rasters
DEFAULT_STRIP_SIZE: tuple[int, int] = (720, 48)
DEFAULT_DIAL_SIZE: int = 512
DEFAULT_DIAL_RING_FRACTION: float = 0.2  # Ring width as fraction of radius
