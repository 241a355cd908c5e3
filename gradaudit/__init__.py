"""
Graduation Audit Package
========================

Checks a learner's enrollments against a university's graduation
requirements.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                           ENGINE LAYER                                   │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌──────────────────┐  ┌───────────────────┐  ┌──────────────────────┐  │
│  │ CreditAggregator │─▶│ CategoryEvaluator │─▶│ RequirementChecker   │  │
│  │ (credit sums)    │  │ (track filtering) │  │ (verdict + warnings) │  │
│  └──────────────────┘  └───────────────────┘  └──────────┬───────────┘  │
│                                                          │              │
│                  ┌───────────────────┐  ┌────────────────▼───────────┐  │
│                  │   PlanValidator   │  │ CourseRecommendationEngine │  │
│                  │ (yearly load cap) │  │ (courses for short areas)  │  │
│                  └───────────────────┘  └────────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│  TerminalDisplay: formats and prints to console                         │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                     GraduationAdvisor                                    │
│          (Orchestrator - connects engines to presentation)              │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

gradaudit/
├── __init__.py          # This file - main exports
├── config.py            # Configuration constants
├── advisor.py           # GraduationAdvisor orchestrator
├── cli.py               # Command-line interface
├── models/              # Data classes and enums
├── data/                # CatalogLoader, EnrollmentParser
├── engines/             # Aggregation, checking, plan and recommendation engines
└── ui/                  # TerminalDisplay

USAGE
-----

    from gradaudit import GraduationAdvisor, EnrollmentRecord, EnrollmentStatus

    advisor = GraduationAdvisor(is_native_speaker=True)
    result = advisor.check([
        EnrollmentRecord("HUM101", EnrollmentStatus.COMPLETED),
        EnrollmentRecord("SCI201", EnrollmentStatus.PLANNED, year=2),
    ])
    result.can_graduate
    result.warnings

Running from command line:

    python -m gradaudit check data/enrollments.json

"""

# Version
__version__ = "1.0.0"

# Main exports
from .advisor import GraduationAdvisor
from .cli import main

# Model exports (for programmatic use)
from .models import (
    Catalog,
    CategoryCheckResult,
    CategoryRecommendation,
    CategoryRequirement,
    CheckResult,
    Course,
    CreditSummary,
    CreditTotals,
    EnrollmentRecord,
    EnrollmentStatus,
    PlanValidation,
    RequirementTree,
    SubcategoryCredits,
    SubcategoryRequirement,
    TotalCreditCheck,
    TrackTag,
)

# Engine exports (for advanced use)
from .engines import (
    CategoryEvaluator,
    CourseRecommendationEngine,
    CreditAggregator,
    PlanValidator,
    RequirementChecker,
)

# Data exports
from .data import CatalogError, CatalogLoader, EnrollmentParser

# UI exports
from .ui import TerminalDisplay

# Configuration exports
from .config import (
    BASIC_CATEGORIES,
    DATA_DIR,
    LANGUAGE_CATEGORY,
    RECOMMENDATIONS_PER_CATEGORY,
    YEARLY_CREDIT_LIMIT,
)

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "GraduationAdvisor",
    "main",
    # Models
    "Catalog",
    "CategoryCheckResult",
    "CategoryRecommendation",
    "CategoryRequirement",
    "CheckResult",
    "Course",
    "CreditSummary",
    "CreditTotals",
    "EnrollmentRecord",
    "EnrollmentStatus",
    "PlanValidation",
    "RequirementTree",
    "SubcategoryCredits",
    "SubcategoryRequirement",
    "TotalCreditCheck",
    "TrackTag",
    # Engines
    "CategoryEvaluator",
    "CourseRecommendationEngine",
    "CreditAggregator",
    "PlanValidator",
    "RequirementChecker",
    # Data
    "CatalogError",
    "CatalogLoader",
    "EnrollmentParser",
    # UI
    "TerminalDisplay",
    # Config
    "BASIC_CATEGORIES",
    "DATA_DIR",
    "LANGUAGE_CATEGORY",
    "RECOMMENDATIONS_PER_CATEGORY",
    "YEARLY_CREDIT_LIMIT",
]
