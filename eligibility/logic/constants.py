"""
Scoring Engine Constants

Defines all band tables, points tables, thresholds, and enums used by the
transfer-eligibility engine.
All values are deterministic with no AI/ML components.
"""

from enum import Enum
from typing import Dict, Tuple


# =============================================================================
# ENUMS
# =============================================================================

class AmberStatus(str, Enum):
    """Traffic-light verdict attached to every score."""
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


class VisaType(str, Enum):
    """Visa / endorsement categories scored by the engine."""
    SCHENGEN = "schengen"
    O1 = "o1"
    P1 = "p1"
    UK_GBE = "uk_gbe"
    ESC = "esc"


# Order in which calculators run and recommendations are merged
VISA_ORDER: Tuple[VisaType, ...] = (
    VisaType.SCHENGEN,
    VisaType.O1,
    VisaType.P1,
    VisaType.UK_GBE,
    VisaType.ESC,
)

# =============================================================================
# DEFAULT THRESHOLDS (overridable via ScoringThresholds)
# =============================================================================

MINIMUM_MINUTES_REQUIRED = 800
GREEN_MINUTES_THRESHOLD = 800
YELLOW_MINUTES_THRESHOLD = 600

GREEN_SCORE_THRESHOLD = 60
YELLOW_SCORE_THRESHOLD = 35

GBE_GREEN_POINTS = 15
GBE_YELLOW_POINTS = 10
GBE_MAX_POINTS = 50

MINUTES_PER_CAP = 45
MAX_AGGREGATE_RECOMMENDATIONS = 5

# =============================================================================
# LEAGUE BAND TABLES
# =============================================================================

# Weighted-sum calculators (Schengen, O-1, P-1)
LEAGUE_BAND_MULTIPLIER_MAP: Dict[int, float] = {
    1: 1.0,     # Top-tier league
    2: 0.9,
    3: 0.75,
    4: 0.5,
    5: 0.25,    # Weakest league
}
DEFAULT_LEAGUE_BAND_MULTIPLIER = 0.5

# Band used when the caller cannot resolve one (no invitation letter)
DEFAULT_LEAGUE_BAND = 3

# =============================================================================
# UK GBE POINTS TABLES
# =============================================================================

# (minimum, points) pairs, checked from the highest minimum down
GBE_NATIONAL_TEAM_POINTS: Tuple[Tuple[int, int], ...] = (
    (75, 15),
    (50, 12),
    (30, 10),
    (15, 8),
    (5, 5),
    (1, 3),
)

GBE_CLUB_LEAGUE_POINTS: Dict[int, int] = {
    1: 15,
    2: 12,
    3: 8,
    4: 4,
}
GBE_DEFAULT_CLUB_LEAGUE_POINTS = 2

GBE_CONTINENTAL_POINTS: Tuple[Tuple[int, int], ...] = (
    (20, 10),
    (10, 7),
    (5, 4),
    (1, 2),
)

# Domestic (club) minutes only
GBE_MINUTES_POINTS: Tuple[Tuple[int, int], ...] = (
    (1800, 10),
    (1200, 7),
    (600, 4),
    (300, 2),
)

# Caps / minutes levels named in GBE recommendations
GBE_TARGET_SENIOR_CAPS = 5
GBE_TARGET_DOMESTIC_MINUTES = 600

# =============================================================================
# UK ESC TABLES
# =============================================================================

ESC_BASE_SCORE = 50
ESC_MAX_SCORE = 100

ESC_CAPS_BONUS: Tuple[Tuple[int, int], ...] = (
    (3, 15),
    (1, 10),
)

# The top minutes tier is the minimum-minutes threshold itself
ESC_PARTIAL_MINUTES = 500
ESC_FULL_MINUTES_BONUS = 15
ESC_PARTIAL_MINUTES_BONUS = 10

ESC_VIDEO_BONUS: Tuple[Tuple[int, int], ...] = (
    (10, 10),
    (5, 7),
    (3, 4),
)

ESC_GOAL_CONTRIBUTION_BONUS: Tuple[Tuple[int, int], ...] = (
    (15, 10),
    (10, 7),
    (5, 4),
)

# =============================================================================
# WEIGHTED-SUM CAPS AND TARGETS
# =============================================================================

# Schengen
SCHENGEN_MINUTES_MAX = 40
SCHENGEN_INTERNATIONAL_MAX = 30
SCHENGEN_POINTS_PER_CAP = 3
SCHENGEN_LEAGUE_WEIGHT = 20
SCHENGEN_PERFORMANCE_MAX = 10
SCHENGEN_POINTS_PER_GOAL_CONTRIBUTION = 0.5
SCHENGEN_TARGET_CAPS = 5

# US O-1
O1_RECOGNITION_MAX = 35
O1_RECOGNITION_MARKET_VALUE = 1_000_000
O1_RECOGNITION_VALUE_PER_POINT = 50_000
O1_INTERNATIONAL_MAX = 30
O1_POINTS_PER_SENIOR_CAP = 2
O1_POINTS_PER_CONTINENTAL_GAME = 3
O1_MARKET_MAX = 20
O1_MARKET_VALUE_CEILING = 5_000_000
O1_PERFORMANCE_MAX = 15
O1_POINTS_PER_ANALYZED_VIDEO = 2
O1_MINUTES_BONUS = 5
O1_TARGET_SENIOR_CAPS = 10

# US P-1
P1_MINUTES_MAX = 40
P1_LEAGUE_WEIGHT = 25
P1_VIDEO_MAX = 20
P1_POINTS_PER_VIDEO = 4
P1_AGENT_POINTS = 7.5
P1_CONTRACT_POINTS = 7.5
P1_TARGET_VIDEOS = 5

# UK ESC targets
ESC_TARGET_SENIOR_CAPS = 3
ESC_TARGET_VIDEOS = 5

# =============================================================================
# PERSISTENCE
# =============================================================================

ASSESSMENT_VALIDITY_DAYS = 30
