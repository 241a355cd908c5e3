"""
Credit Aggregation Engine.

This module folds a learner's enrollment records against the catalog into
per-subcategory and total credit sums.
"""

import logging

from ..models import (
    Catalog,
    CreditSummary,
    CreditTotals,
    EnrollmentStatus,
    SubcategoryCredits,
)

logger = logging.getLogger(__name__)


class CreditAggregator:
    """
    Sums credits per subcategory, split by completion state.

    COUNTING RULES:
    ---------------
    - Records whose course code is not in the catalog are skipped silently.
    - Courses on the other language track are ignored entirely: track A
      courses do not count for non-native learners, track B courses do not
      count for native learners.
    - COMPLETED credits go to `completed`, PLANNED credits to `planned`.
      IN_PROGRESS courses count toward neither.
    - Records are not de-duplicated. Listing the same course twice counts
      its credits twice.

    Grand totals include every counted record, even one whose category is
    not a declared subcategory (it just has no bucket to land in).
    """

    def __init__(self, catalog: Catalog, is_native_speaker: bool):
        self.catalog = catalog
        self.is_native_speaker = is_native_speaker

    def aggregate(self, enrollments) -> CreditSummary:
        """
        Build a fresh CreditSummary for the given enrollment records.

        Args:
            enrollments: Iterable of EnrollmentRecord

        Returns:
            CreditSummary with one entry per declared subcategory
        """
        by_subcategory = {}
        for category in self.catalog.tree.categories:
            for sub in category.subcategories:
                by_subcategory[sub.name] = SubcategoryCredits(
                    required=sub.required_credits,
                    min=sub.min_credits,
                )

        total = CreditTotals()

        for record in enrollments:
            course = self.catalog.get(record.course_code)
            if course is None:
                logger.debug("Skipping unknown course %s", record.course_code)
                continue
            if not course.track.applies(self.is_native_speaker):
                continue

            bucket = by_subcategory.get(course.category)
            if record.status == EnrollmentStatus.COMPLETED:
                total.completed += course.credits
                if bucket is not None:
                    bucket.completed += course.credits
            elif record.status == EnrollmentStatus.PLANNED:
                total.planned += course.credits
                if bucket is not None:
                    bucket.planned += course.credits

        return CreditSummary(total=total, by_subcategory=by_subcategory)
