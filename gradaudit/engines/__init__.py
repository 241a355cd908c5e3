"""
Audit and recommendation engines.

This package contains all the engines that perform the core business
logic of the graduation audit system.
"""

from .aggregator import CreditAggregator
from .category import CategoryEvaluator
from .requirement_check import RequirementChecker
from .plan import PlanValidator
from .recommendation import CourseRecommendationEngine

__all__ = [
    "CreditAggregator",
    "CategoryEvaluator",
    "RequirementChecker",
    "PlanValidator",
    "CourseRecommendationEngine",
]
