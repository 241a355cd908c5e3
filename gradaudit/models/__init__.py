"""
Data models for the graduation audit system.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between different parts of the system.
"""

from .course import Course, EnrollmentRecord, EnrollmentStatus, TrackTag
from .requirements import (
    Catalog,
    CategoryRequirement,
    RequirementTree,
    SubcategoryRequirement,
)
from .audit import (
    CategoryCheckResult,
    CheckResult,
    CreditSummary,
    CreditTotals,
    SubcategoryCredits,
    TotalCreditCheck,
)
from .plan import CategoryRecommendation, PlanValidation

__all__ = [
    # Course models
    "Course",
    "EnrollmentRecord",
    "EnrollmentStatus",
    "TrackTag",
    # Requirement models
    "Catalog",
    "CategoryRequirement",
    "RequirementTree",
    "SubcategoryRequirement",
    # Audit results
    "CategoryCheckResult",
    "CheckResult",
    "CreditSummary",
    "CreditTotals",
    "SubcategoryCredits",
    "TotalCreditCheck",
    # Plan models
    "CategoryRecommendation",
    "PlanValidation",
]
