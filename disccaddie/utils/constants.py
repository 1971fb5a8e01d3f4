"""
Tuning defaults, coefficient limits, and lookup tables for Disc Caddie.

Numbers here are the calibration of the throw calculator: change them and
every recommendation shown to users changes with them.
"""

# =============================================================================
# Tuning Coefficients
# =============================================================================

# Default coefficient set, used when a user has no stored preference.
# Keys follow the stored preference format.
DEFAULT_COEFFICIENTS = {
    "headK":     0.18,   # stability per unit of headwind
    "crossK":    0.08,   # stability per unit of crosswind
    "armK":      0.12,   # stability per arm-speed step above neutral
    "curveK":    0.30,   # stability per unit of line curvature
    "tPutter":   45,     # meters: at or below -> putter
    "tMid":      75,     # meters: at or below -> midrange
    "tFairway":  105,    # meters: at or below -> fairway driver
    "windStep1": 4,      # headwind that bumps disc type up one step
    "windStep2": 8,      # headwind that bumps disc type up a second step
}

# Allowed range (and slider step) per coefficient
COEF_LIMITS = {
    "headK":     {"min": 0.0, "max": 0.4, "step": 0.01},
    "crossK":    {"min": 0.0, "max": 0.2, "step": 0.005},
    "armK":      {"min": 0.0, "max": 0.3, "step": 0.01},
    "curveK":    {"min": 0.0, "max": 0.6, "step": 0.01},
    "tPutter":   {"min": 20, "max": 80, "step": 5},
    "tMid":      {"min": 50, "max": 120, "step": 5},
    "tFairway":  {"min": 80, "max": 160, "step": 5},
    "windStep1": {"min": 0, "max": 10, "step": 1},
    "windStep2": {"min": 0, "max": 15, "step": 1},
}

# =============================================================================
# Calculator Inputs
# =============================================================================

ARM_SPEED_MIN = 8
ARM_SPEED_MAX = 14
NEUTRAL_ARM_SPEED = 10

WIND_DIRECTION_MIN = 1          # clock position
WIND_DIRECTION_MAX = 12         # 12 = wind straight into the thrower's face
DEGREES_PER_CLOCK_HOUR = 30

# Bounds accepted from shared calculator links
LINK_WIND_SPEED_MIN = 1
LINK_WIND_SPEED_MAX = 15
LINK_DISTANCE_MIN = 30
LINK_DISTANCE_MAX = 150
LINK_STATE_VERSION = "5"

# =============================================================================
# Stability Model
# =============================================================================

STABILITY_SCORE_LIMIT = 1.5     # score is clamped to [-1.5, 1.5]

SHORT_THROW_DISTANCE = 60       # meters: at or below -> slightly understable
LONG_THROW_DISTANCE = 110       # meters: at or above on a straight line
SHORT_THROW_BIAS = -0.1
LONG_STRAIGHT_THROW_BIAS = -0.15

# Arm speeds at or below which the disc type is capped
WEAK_ARM_DRIVER_CAP = 9         # Driver -> Fairway driver
WEAK_ARM_FAIRWAY_CAP = 8        # anything above Midrange -> Midrange

# =============================================================================
# Release Angle
# =============================================================================

RELEASE_HEADWIND_FACTOR = 1.2
RELEASE_TAILWIND_EXTRA = 0.6
RELEASE_CURVE_BASE = 5.0        # degrees added for any curved line
RELEASE_CURVE_SCALE = 15.0      # degrees per unit of curvature
RELEASE_FLAT_LIMIT = 3.0        # |angle| at or below reads as flat
RELEASE_SMALL_LIMIT = 7.0
RELEASE_MODERATE_LIMIT = 12.0

# =============================================================================
# Tips
# =============================================================================

STRONG_WIND_SPEED = 8
STRONG_CROSSWIND = 4
CALM_WIND_SPEED = 4
SHORT_STRAIGHT_DISTANCE = 70

# =============================================================================
# Throwing Power
# =============================================================================

# Typical speed rating per disc type at 100 m
BASE_SPEED_RATINGS = {
    "Putter":         3,
    "Midrange":       5,
    "Fairway driver": 9,
    "Driver":         12,
}

SPEED_RATING_MIN = 1
SPEED_RATING_MAX = 14
HEADWIND_SPEED_FACTOR = 0.5
MAX_HEADWIND_SPEED_BONUS = 2.0

# =============================================================================
# Freehand Line Detection
# =============================================================================

MIN_LINE_POINTS = 3
MIN_CHORD_LENGTH = 10.0         # screen units
STRAIGHT_CURVATURE_LIMIT = 0.05
PRESET_MATCH_TOLERANCE = 0.1

# =============================================================================
# Flight Path
# =============================================================================

FLIGHT_PATH_SAMPLES = 100       # intervals -> 101 points

DISTANCE_PER_SPEED = 10.0       # meters per speed rating
DISTANCE_PER_GLIDE = 0.08
HEIGHT_PER_SPEED = 1.5          # meters per speed rating
HEIGHT_PER_GLIDE = 0.05

ROLLER_MAX_HEIGHT = 2.0
ROLLER_HEIGHT = 0.5
ROLLER_TURN_OFFSET = 2          # turn rating that rolls straight
ROLLER_TURN_FACTOR = 0.15
ROLLER_FADE_FACTOR = 0.05

VERTICAL_PEAK_POSITION = 0.3
VERTICAL_DRIFT_FACTOR = 0.3

TURN_PHASE_END = 0.6
FADE_PHASE_START = 0.5
TURN_FACTOR = 0.08
FADE_FACTOR = 0.12
RELEASE_INFLUENCE_FACTOR = 0.15
HEIGHT_DECAY_EXPONENT = 1.5

# Lateral start offset per release angle (+ = anhyzer side)
RELEASE_ANGLE_OFFSETS = {
    "anhyzer": 1,
    "flat":    0,
    "hyzer":   -1,
}

# =============================================================================
# Disc Stability (flight numbers)
# =============================================================================

# Upper bounds on fade - turn for each category; above the last is very
# overstable. The first two bounds are exclusive, the rest inclusive.
DISC_STABILITY_BOUNDS = (-1.5, -0.5, 0.5, 2.5)
