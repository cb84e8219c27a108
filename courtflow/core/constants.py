"""Court geometry and animation constraints.

All times are milliseconds, all distances are logical court units.
"""

# =============================================================================
# Court
# =============================================================================

COURT_WIDTH = 800.0
COURT_HEIGHT = 600.0

# Synthesized motion stays this far inside the court edges
COURT_MARGIN = 50.0

# =============================================================================
# Timeline pacing
# =============================================================================

SETUP_FRACTION = 0.1   # Before the first action window
ACTION_FRACTION = 0.8  # Shared evenly by all action windows

# Demo motion (diagrams with no derivable movement)
DEMO_START_FRACTION = 0.2
DEMO_END_FRACTION = 0.8
DEMO_STAGGER_MS = 500.0
DEMO_MOVE_MS = 2000.0
DEMO_JITTER = 60.0  # Full width of the random shift per axis

# =============================================================================
# Constraints
# =============================================================================

MIN_DURATION_MS = 1000
MAX_DURATION_MS = 30000
MAX_KEYFRAMES = 20

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_DURATION_MS = 10000
DEFAULT_FPS = 30
TICK_HZ = 60
KEYFRAME_SNAP_MS = 500
SPEED_PRESETS = (0.25, 0.5, 1.0, 1.5, 2.0)
