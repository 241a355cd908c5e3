"""
Configuration constants for the graduation audit system.

This module contains all configuration values and constants used throughout
the audit engines. Centralizing these makes it easy to adjust behavior as
curriculum policies change.
"""

from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Base data directory (relative to this file's location)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"
CATALOG_FILE = "catalog.json"
REQUIREMENTS_FILE = "requirements.json"


# =============================================================================
# REMOTE CATALOG
# =============================================================================

# Seconds before a catalog request gives up
HTTP_TIMEOUT = 10

# Retries on 429 / 5xx responses (backoff 1s, 2s, 4s...)
HTTP_RETRIES = 3


# =============================================================================
# LEARNER DEFAULTS
# =============================================================================

# Native speakers follow foreign language track A, everyone else track B.
DEFAULT_NATIVE_SPEAKER = True

TRACK_LABELS = {
    "none": "",
    "track_a": "Foreign Language A",
    "track_b": "Foreign Language B",
}


# =============================================================================
# GRADUATION RULES
# =============================================================================

# Planned credits allowed in a single academic year
YEARLY_CREDIT_LIMIT = 44

# Courses suggested per under-filled category
RECOMMENDATIONS_PER_CATEGORY = 3

# Category holding the two mutually exclusive language tracks
LANGUAGE_CATEGORY = "language"

# Basic categories need at least one completed or planned course each,
# regardless of how many credits the category itself requires.
# The language category only counts courses from the learner's own track.
BASIC_CATEGORIES = (
    "humanities",
    "social_science",
    "natural_science",
    LANGUAGE_CATEGORY,
    "health_sports",
    "career_design",
    "information_media",
)
