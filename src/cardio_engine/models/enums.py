"""Enumerations and constants for the cardio engine.

Max-HR formulas and zone percentages follow the common age-predicted
model (Fox et al. 1971 for men, with the +6 bpm offset widely used for
women). Simulation constants describe the guided-workout simulator and are
not physiological claims.
"""

from enum import Enum, IntEnum, auto


class Gender(str, Enum):
    """Biological sex used by the age-predicted max-HR formula."""

    MALE = "M"
    FEMALE = "F"


class FeedbackKind(IntEnum):
    """Where the current heart rate sits relative to the target zone."""

    BELOW_TARGET = auto()
    IN_TARGET = auto()
    ABOVE_TARGET = auto()


class ColorCategory(str, Enum):
    """Display category attached to a feedback state."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"


class ClockState(IntEnum):
    """Session clock states. STOPPED is both initial and terminal."""

    STOPPED = auto()
    RUNNING = auto()
    PAUSED = auto()


class SessionPhase(IntEnum):
    """Lifecycle of a guided workout session."""

    IDLE = auto()
    ACTIVE = auto()
    PAUSED = auto()
    CLOSED = auto()


# ---------------------------------------------------------------------------
# Max heart rate, age-predicted
# ---------------------------------------------------------------------------
MAX_HR_BASE = {
    Gender.MALE: 220,
    Gender.FEMALE: 226,
}
MIN_AGE = 18
MAX_AGE = 100

# (identifier, name, min_pct, max_pct, description, duration, goal, color, text_color, is_target)
ZONE_DEFINITIONS = (
    (
        "warmup", "Warm-up", 0.4, 0.5,
        "Prepares the body for effort.",
        "5-10 min", "Preparation", "#94a3b8", "#1e293b", False,
    ),
    (
        "light", "Light Training", 0.5, 0.6,
        "Improves general health and helps recovery.",
        "10-20 min", "Base endurance", "#22c55e", "#14532d", False,
    ),
    (
        "aerobic", "Aerobic (Target)", 0.6, 0.8,
        "Improves respiratory and cardiovascular capacity.",
        "20-40 min", "Cardiovascular", "#6366f1", "#ffffff", True,
    ),
    (
        "anaerobic", "Anaerobic", 0.8, 0.9,
        "Builds lactic acid tolerance.",
        "5-10 min", "Power", "#ef4444", "#ffffff", False,
    ),
)

# ---------------------------------------------------------------------------
# Biometric simulator
# ---------------------------------------------------------------------------
RESTING_BPM = 70            # Starting value of every session
SIM_FLOOR_BPM = 60          # Simulated HR at effort 0
SMOOTHING_FACTOR = 0.1      # Fraction of the gap to target closed per tick
JITTER_BPM = 2.0            # Uniform noise in [-2, +2]

# ---------------------------------------------------------------------------
# Effort control
# ---------------------------------------------------------------------------
EFFORT_MIN = 0
EFFORT_MAX = 100
DEFAULT_EFFORT = 30
EFFORT_STEP = 10            # UI increment

# ---------------------------------------------------------------------------
# Feedback announcer
# ---------------------------------------------------------------------------
ANNOUNCE_GAP_S = 10.0
IN_TARGET_ANNOUNCE_PROBABILITY = 0.3
DEFAULT_LOCALE = "en-US"

# ---------------------------------------------------------------------------
# Session ticker
# ---------------------------------------------------------------------------
TICK_PERIOD_S = 1.0
