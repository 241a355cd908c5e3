"""
Graduation Requirement Checker.

This module combines credit aggregation, per-category evaluation, the
required-course scan and the basic-category rule into a single verdict.
"""

import logging

from ..config import BASIC_CATEGORIES
from ..models import (
    Catalog,
    CategoryCheckResult,
    CheckResult,
    EnrollmentStatus,
    TotalCreditCheck,
)
from .aggregator import CreditAggregator
from .category import CategoryEvaluator

logger = logging.getLogger(__name__)

# Statuses that satisfy a required course or a basic category.
# IN_PROGRESS is deliberately absent.
_COUNTED_STATUSES = (EnrollmentStatus.COMPLETED, EnrollmentStatus.PLANNED)


class RequirementChecker:
    """
    Decides whether a learner meets every graduation requirement.

    CHECK ORDER:
    ------------
    1. Aggregate credits
    2. Total completed credits vs. the required total
    3. Each declared category vs. its minimum
    4. Required courses present as COMPLETED or PLANNED
    5. At least one COMPLETED or PLANNED course in every basic category

    Every step runs even after an earlier failure, so the warnings list
    always describes every gap at once, in the order above. Nothing here
    raises for bad input: unknown courses are skipped and shortfalls are
    reported as warnings.
    """

    def __init__(self, catalog: Catalog, is_native_speaker: bool,
                 basic_categories=BASIC_CATEGORIES):
        self.catalog = catalog
        self.is_native_speaker = is_native_speaker
        self.basic_categories = tuple(basic_categories)
        self.aggregator = CreditAggregator(catalog, is_native_speaker)
        self.evaluator = CategoryEvaluator(catalog, is_native_speaker)

    def check(self, enrollments) -> CheckResult:
        """
        Run every graduation check against the enrollment records.

        Args:
            enrollments: Iterable of EnrollmentRecord

        Returns:
            CheckResult with the verdict, itemized gaps and warnings
        """
        enrollments = list(enrollments)
        tree = self.catalog.tree
        warnings = []
        can_graduate = True

        # STEP 1: Aggregate
        summary = self.aggregator.aggregate(enrollments)

        # STEP 2: Total credits
        current_total = summary.total.completed
        total_check = TotalCreditCheck(
            current=current_total,
            required=tree.total_credits,
            is_completed=current_total >= tree.total_credits,
        )
        if not total_check.is_completed:
            remaining = tree.total_credits - current_total
            warnings.append(
                f"Total credits: {remaining} more credits needed "
                f"({current_total}/{tree.total_credits})"
            )
            can_graduate = False

        # STEP 3: Category minimums
        category_checks = []
        for category in tree.categories:
            result = self._check_category(category, summary)
            category_checks.append(result)
            if not result.is_completed:
                warnings.append(
                    f"{category.name}: {result.missing_credits} more credits needed "
                    f"({result.current_credits}/{result.min_credits})"
                )
                can_graduate = False

        # STEP 4: Required courses
        missing_required = self.find_missing_required(enrollments)
        if missing_required:
            warnings.append(
                f"{len(missing_required)} required course(s) not completed or planned"
            )
            can_graduate = False

        # STEP 5: Basic categories
        for name in self.find_empty_basic_categories(enrollments):
            warnings.append(f"No courses taken in basic category: {name}")
            can_graduate = False

        logger.debug(
            "Check finished: can_graduate=%s, %d warning(s)", can_graduate, len(warnings)
        )

        return CheckResult(
            can_graduate=can_graduate,
            total_credits=total_check,
            category_checks=category_checks,
            missing_required=missing_required,
            warnings=warnings,
            summary=summary,
        )

    def _check_category(self, category, summary) -> CategoryCheckResult:
        current = self.evaluator.category_credits(category.name, summary)
        min_credits = category.min_credits
        required = category.required_credits
        if required is None:
            required = min_credits
        # A whole category on the other language track asks nothing of this learner
        if not category.track.applies(self.is_native_speaker):
            min_credits = required = 0
        return CategoryCheckResult(
            name=category.name,
            current_credits=current,
            required_credits=required,
            min_credits=min_credits,
            is_completed=current >= min_credits,
            missing_credits=max(0, min_credits - current),
        )

    def find_missing_required(self, enrollments) -> list:
        """
        Required courses that appear in neither the COMPLETED nor the PLANNED
        records, in catalog order.

        Required courses on the other language track are not expected of
        this learner and are never reported.
        """
        satisfied = {
            r.course_code for r in enrollments if r.status in _COUNTED_STATUSES
        }
        return [
            course for course in self.catalog.required_courses()
            if course.track.applies(self.is_native_speaker)
            and course.code not in satisfied
        ]

    def find_empty_basic_categories(self, enrollments) -> list:
        """Basic categories with no COMPLETED or PLANNED course, in configured order."""
        tree = self.catalog.tree
        present = set()
        for record in enrollments:
            if record.status not in _COUNTED_STATUSES:
                continue
            course = self.catalog.get(record.course_code)
            if course is None or not course.track.applies(self.is_native_speaker):
                continue
            category = tree.category_of(course.category)
            present.add(category.name if category is not None else course.category)
        return [name for name in self.basic_categories if name not in present]
