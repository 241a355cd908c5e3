"""
Course Recommendation Engine.

This module suggests catalog courses for categories that are still short
of their minimum credits.
"""

from ..config import RECOMMENDATIONS_PER_CATEGORY
from ..models import Catalog, CategoryRecommendation
from .requirement_check import RequirementChecker


class CourseRecommendationEngine:
    """
    Suggests courses for under-filled categories.

    For every category the checker reports as short, up to
    RECOMMENDATIONS_PER_CATEGORY catalog courses are suggested, in catalog
    order. A course is skipped if it is already on the learner's plan with
    any status, or if it belongs to the other language track. There is no
    cap across categories.
    """

    def __init__(self, catalog: Catalog, checker: RequirementChecker,
                 per_category: int = RECOMMENDATIONS_PER_CATEGORY):
        self.catalog = catalog
        self.checker = checker
        self.per_category = per_category

    def recommend_by_category(self, enrollments) -> list:
        """
        Generate recommendations grouped by category.

        Returns:
            List of CategoryRecommendation, one per under-filled category
        """
        enrollments = list(enrollments)
        check = self.checker.check(enrollments)
        enrolled_codes = {r.course_code for r in enrollments}

        recommendations = []
        for category_check in check.category_checks:
            if category_check.is_completed:
                continue
            options = [
                course for course in self.catalog.courses_in_category(category_check.name)
                if course.code not in enrolled_codes
                and course.track.applies(self.checker.is_native_speaker)
            ]
            recommendations.append(CategoryRecommendation(
                category=category_check.name,
                missing_credits=category_check.missing_credits,
                courses=options[:self.per_category],
            ))
        return recommendations

    def recommend(self, enrollments) -> list:
        """Flat list of suggested courses, grouped by category order."""
        courses = []
        for rec in self.recommend_by_category(enrollments):
            courses.extend(rec.courses)
        return courses
