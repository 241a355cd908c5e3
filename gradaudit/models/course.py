"""
Course data models.

Contains the Course and EnrollmentRecord dataclasses plus the enums that
describe a learner's enrollment state and a course's language track.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TrackTag(Enum):
    """
    Language track a category, subcategory or course belongs to.

    NONE:    Applies to every learner
    TRACK_A: Foreign language track for native speakers
    TRACK_B: Foreign language track for non-native speakers

    Tags are resolved once when the requirement tree is loaded, so the
    engines never inspect category labels to decide which track applies.
    """
    NONE = "none"
    TRACK_A = "track_a"
    TRACK_B = "track_b"

    def applies(self, is_native_speaker: bool) -> bool:
        """True if a learner with this native-speaker flag may count it."""
        if self is TrackTag.TRACK_A:
            return is_native_speaker
        if self is TrackTag.TRACK_B:
            return not is_native_speaker
        return True


class EnrollmentStatus(Enum):
    """
    Possible states for a course on a learner's plan.

    COMPLETED: Credits earned
    PLANNED: Scheduled for a future year
    IN_PROGRESS: Currently taking, not counted toward any credit sum
    """
    COMPLETED = "completed"
    PLANNED = "planned"
    IN_PROGRESS = "in_progress"


@dataclass(frozen=True)
class Course:
    """
    A single course from the catalog.

    Attributes:
        code: Unique course identifier (e.g., "HUM101")
        title: Human-readable course title
        credits: Credit value (positive integer)
        category: Subcategory name the course counts toward
        required: True if every learner must complete or plan it
        track: Language track, filled in from the requirement tree
    """
    code: str
    title: str
    credits: int
    category: str
    required: bool = False
    track: TrackTag = TrackTag.NONE


@dataclass(frozen=True)
class EnrollmentRecord:
    """One course on the learner's plan, as supplied by the storage layer."""
    course_code: str
    status: EnrollmentStatus
    year: Optional[int] = None  # Target year for PLANNED courses
