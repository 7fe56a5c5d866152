"""Enumerations and tuned constants for the hypertrophy engine.

All curves are fixed, hand-tuned values; none are fitted from data.
Volume landmark terminology follows Israetel et al., Scientific
Principles of Hypertrophy Training (2021).
"""

from enum import Enum, IntEnum, auto


class Sex(str, Enum):
    """Biological sex. Only used as a recovery-capacity modifier."""

    MALE = "male"
    FEMALE = "female"


class TrainingAge(str, Enum):
    """Experience category used to select baseline volume landmarks."""

    NOVICE = "novice"
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class ExerciseType(str, Enum):
    """Exercise class for intensity prescription."""

    COMPOUND = "compound"
    ISOLATION = "isolation"


class SplitType(str, Enum):
    """Weekly split template families."""

    FULL_BODY = "fullbody"
    UPPER_LOWER = "upper-lower"
    PUSH_PULL_LEGS = "ppl"


class ProgressionAction(IntEnum):
    """Outcome of a session-to-session progression decision."""

    NO_DATA = auto()
    INCREASE_LOAD = auto()
    HOLD = auto()
    REGRESS = auto()
    ADD_REP = auto()
    INCREASE_LOAD_RESET_REPS = auto()


# ---------------------------------------------------------------------------
# Profile metrics
# ---------------------------------------------------------------------------
TAF_GAIN_PER_YEAR = 0.1
TAF_CAP = 3.0

FEMALE_RECOVERY_MODIFIER = 1.15
AGE_MODIFIER_BASE = 1.2
AGE_MODIFIER_REFERENCE_AGE = 18
AGE_MODIFIER_DECLINE_PER_YEAR = 0.005
AGE_MODIFIER_FLOOR = 0.7
SLEEP_REFERENCE_HOURS = 8.0
SLEEP_MODIFIER_CAP = 1.2

# ---------------------------------------------------------------------------
# Volume landmarks (weekly hard sets per muscle group)
# ---------------------------------------------------------------------------
BASE_MEV: dict[str, float] = {
    "chest": 8,
    "back": 10,
    "shoulders": 8,
    "arms": 6,
    "legs": 14,
    "glutes": 10,
    "neck & traps": 6,
}

# Larger muscle groups tolerate proportionally more volume
MUSCLE_SIZE_FACTOR: dict[str, float] = {
    "arms": 0.0,
    "calves": 0.0,
    "chest": 0.2,
    "shoulders": 0.2,
    "back": 0.4,
    "legs": 0.4,
    "glutes": 0.3,
    "neck & traps": 0.1,
}

DEFAULT_BASE_MEV = 8
DEFAULT_MUSCLE_SIZE_FACTOR = 0.2

# Sessions per week for a muscle -> MRV multiplier
FREQUENCY_FACTOR: dict[int, float] = {
    1: 0.8,
    2: 1.0,
    3: 1.2,
}
DEFAULT_FREQUENCY_FACTOR = 1.3  # 4+ sessions per week
DEFAULT_TRAINING_FREQUENCY = 2

TAF_MEV_EXPONENT = 0.3
MRV_RECOVERY_OFFSET = 2.5
MAV_FRACTION_OF_RANGE = 0.7
MV_FRACTION_OF_MEV = 0.6

# Static landmarks by experience category: (mev, mav, mrv)
TRAINING_AGE_LANDMARKS: dict[TrainingAge, tuple[int, int, int]] = {
    TrainingAge.NOVICE: (6, 10, 12),
    TrainingAge.BEGINNER: (8, 12, 15),
    TrainingAge.INTERMEDIATE: (10, 16, 20),
    TrainingAge.ADVANCED: (12, 18, 22),
}
DEFAULT_TRAINING_AGE = TrainingAge.BEGINNER

# ---------------------------------------------------------------------------
# Weekly progression and deload
# ---------------------------------------------------------------------------
NOVICE_TAF_THRESHOLD = 1.5
NOVICE_WEEKLY_PROGRESSION = 0.10
EXPERIENCED_WEEKLY_PROGRESSION = 0.05
DELOAD_TRIGGER_FRACTION = 0.95
DELOAD_VOLUME_FRACTION = 0.6
MESOCYCLE_STARTING_VOLUME_FACTOR = 1.1

# Long-term base MEV growth between mesocycles, keyed by TAF upper bound
LANDMARK_ADAPTATION_RATES: tuple[tuple[float, float], ...] = (
    (1.5, 0.05),
    (2.5, 0.025),
)
LANDMARK_ADAPTATION_DEFAULT_RATE = 0.01

# ---------------------------------------------------------------------------
# Intensity prescription
# ---------------------------------------------------------------------------
BASE_RPE: dict[ExerciseType, float] = {
    ExerciseType.COMPOUND: 8.0,
    ExerciseType.ISOLATION: 8.5,
}
BASE_RIR: dict[ExerciseType, int] = {
    ExerciseType.COMPOUND: 2,
    ExerciseType.ISOLATION: 1,
}
HIGH_VOLUME_RATIO = 0.8
LOW_VOLUME_RATIO = 0.4
RPE_VOLUME_ADJUSTMENT = 0.5
RIR_VOLUME_ADJUSTMENT = 1

DELOAD_RPE_COMPOUND = 7.0
DELOAD_RPE_ISOLATION = 7.5
DELOAD_TARGET_RIR = 4
MAX_RAMP_RIR = 3

# Load feedback loop: bounded to +/-2.5% per cycle
LOAD_STEP_FRACTION = 0.025
RPE_TOLERANCE = 0.5
RIR_TOLERANCE = 1.0

DEFAULT_TARGET_RIR = 3
LOAD_INCREMENT = 5.0
SMALL_LOAD_INCREMENT = 2.5
REP_CEILING = 10
REP_RESET_DROP = 2
REP_FLOOR_AFTER_RESET = 6
STALL_LIMIT = 2

# RIR is inferred from RPE on a 10-point scale when only RPE was logged
RPE_SCALE_MAX = 10.0

# ---------------------------------------------------------------------------
# Daily readiness (three-band policy)
# ---------------------------------------------------------------------------
SORENESS_INVERSION_BASE = 11
PERFORMANCE_INDICATOR_OFFSET = 10
LOW_READINESS_THRESHOLD = 6
HIGH_READINESS_THRESHOLD = 8
LOW_READINESS_SET_MINIMUM = 3  # only drop a set above this many
LOW_READINESS_REP_DROP = 2
LOW_READINESS_REP_FLOOR = 5
HIGH_READINESS_REP_BONUS = 1

# ---------------------------------------------------------------------------
# Fatigue-mask policy: name -> (weight, threshold)
# ---------------------------------------------------------------------------
FATIGUE_MASKS: dict[str, tuple[float, float]] = {
    "sleep": (0.3, 6),
    "stress": (0.25, 7),
    "soreness": (0.2, 6),
    "motivation": (0.15, 5),
    "lifestyle": (0.1, 6),
}
FATIGUE_SCORE_DEFAULT = 7.0
FATIGUE_VALUE_MIN = 0.0
FATIGUE_VALUE_MAX = 10.0

# (minimum score, volume factor, intensity factor, RIR adjustment), highest first
ADJUSTMENT_TIERS: tuple[tuple[float, float, float, int], ...] = (
    (8.0, 1.10, 1.05, -1),
    (6.0, 1.00, 1.00, 0),
    (4.0, 0.85, 0.95, 1),
)
ADJUSTMENT_FLOOR_TIER: tuple[float, float, int] = (0.70, 0.90, 2)
MIN_ADJUSTED_SETS = 1
MIN_ADJUSTED_RIR = 1

# ---------------------------------------------------------------------------
# Split templates: days per week -> (split type, day names)
# ---------------------------------------------------------------------------
SPLIT_DAY_NAMES: dict[int, tuple[SplitType, tuple[str, ...]]] = {
    3: (SplitType.FULL_BODY, ("Full Body A", "Full Body B", "Full Body C")),
    4: (SplitType.UPPER_LOWER, ("Upper A", "Lower A", "Upper B", "Lower B")),
    5: (SplitType.PUSH_PULL_LEGS, ("Push", "Pull", "Legs", "Push", "Pull")),
    6: (SplitType.PUSH_PULL_LEGS, ("Push", "Pull", "Legs", "Push", "Pull", "Legs")),
}
DEFAULT_SPLIT_DAYS = 4

# Day-name prefix -> muscle groups trained that day
DAY_MUSCLE_GROUPS: dict[str, tuple[str, ...]] = {
    "Full Body": ("chest", "back", "legs", "shoulders", "arms"),
    "Upper": ("chest", "back", "shoulders", "arms"),
    "Lower": ("legs", "glutes"),
    "Push": ("chest", "shoulders", "arms"),
    "Pull": ("back", "arms"),
    "Legs": ("legs", "glutes"),
}

DEFAULT_MESOCYCLE_WEEKS = 5
DEFAULT_SPLIT_MESOCYCLE_WEEKS = 4
MIN_SPLIT_MESOCYCLE_WEEKS = 2
