"""
Study Plan Validator.

Checks a multi-year plan against the yearly credit ceiling and attaches
the graduation verdict for context.
"""

from ..config import YEARLY_CREDIT_LIMIT
from ..models import Catalog, EnrollmentStatus, PlanValidation
from .requirement_check import RequirementChecker


def _is_year(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class PlanValidator:
    """
    Validates the yearly credit load of a learner's plan.

    VALIDITY:
    ---------
    A plan is valid when no year carries more than YEARLY_CREDIT_LIMIT
    planned credits. Whether the learner could graduate today does not
    affect validity; it only adds recommendations.
    """

    def __init__(self, catalog: Catalog, checker: RequirementChecker,
                 yearly_limit: int = YEARLY_CREDIT_LIMIT):
        self.catalog = catalog
        self.checker = checker
        self.yearly_limit = yearly_limit

    def yearly_credits(self, enrollments) -> dict:
        """
        Planned credits per target year.

        Only PLANNED records with a known course and a positive integer
        year are counted.

        Returns:
            {year: credits}, ordered by year
        """
        by_year = {}
        for record in enrollments:
            if record.status != EnrollmentStatus.PLANNED or not _is_year(record.year):
                continue
            course = self.catalog.get(record.course_code)
            if course is None:
                continue
            by_year[record.year] = by_year.get(record.year, 0) + course.credits
        return dict(sorted(by_year.items()))

    def validate_plan(self, enrollments) -> PlanValidation:
        enrollments = list(enrollments)
        by_year = self.yearly_credits(enrollments)

        issues = []
        for year, credits in by_year.items():
            if credits > self.yearly_limit:
                over = credits - self.yearly_limit
                issues.append(
                    f"Year {year}: {credits} credits planned, "
                    f"{over} over the {self.yearly_limit}-credit limit"
                )

        check = self.checker.check(enrollments)
        recommendations = []
        if not check.can_graduate:
            recommendations.append("Enroll in more courses to meet graduation requirements")
        if check.missing_required:
            recommendations.append(
                f"Prioritize required courses ({len(check.missing_required)} remaining)"
            )

        return PlanValidation(
            is_valid=not issues,
            issues=issues,
            recommendations=recommendations,
            yearly_credits=by_year,
            check=check,
        )
