"""
Plan validation and recommendation data models.
"""

from dataclasses import dataclass, field
from typing import Optional

from .audit import CheckResult


@dataclass
class PlanValidation:
    """
    Result of validating a multi-year plan.

    is_valid only reflects the yearly credit limit. A plan can be valid
    while the learner cannot graduate yet, since the plan may span years
    that still need more courses.
    """
    is_valid: bool
    issues: list                    # Yearly overload messages
    recommendations: list           # Generic next steps
    yearly_credits: dict = field(default_factory=dict)  # year -> planned credits
    check: Optional[CheckResult] = None


@dataclass
class CategoryRecommendation:
    """Courses suggested for one under-filled category."""
    category: str
    missing_credits: int
    courses: list  # Course objects not yet on the learner's plan
