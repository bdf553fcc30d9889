"""Configuration settings for orthopolyline."""

# Geometry processing tolerances (drawing units)
GEOMETRY_TOLERANCES = {
    "min_step": 1.0,  # Drop points closer than this to their predecessor
    "eps": 2.0,  # Douglas-Peucker perpendicular distance tolerance
    "cluster_tol": 2.0,  # How close values must be to share a level
    "min_edge_length": 2.0,  # Drop rebuilt edges shorter than this
}

# The DXF tool simplifies more aggressively than the library default
DXF_TOOL_DEFAULTS = {
    "min_step": 1.0,
    "eps": 3.0,
    "cluster_tol": 2.0,
    "min_edge_length": 2.0,
}

# Numeric constants
COLLINEAR_TOLERANCE = 1e-9  # Shared X/Y test for axis-aligned collinearity
DUPLICATE_TOLERANCE = 1e-9  # Per-axis test for snapped duplicates
DEGENERATE_LENGTH_SQUARED = 1e-18  # Segments shorter than this are points

# Unbounded unless the caller asks for a limit
DEFAULT_MAX_SIMPLIFY_DEPTH = None

# Orthogonalization strategies
DEFAULT_STRATEGY = "simplify_fit"

# DXF entities that carry a polyline vertex list
SUPPORTED_ENTITY_TYPES = ("LWPOLYLINE", "POLYLINE")
DEFAULT_DXF_VERSION = "R2010"
