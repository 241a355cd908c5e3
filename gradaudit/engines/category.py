"""
Category Credit Evaluator.

Turns an aggregated CreditSummary into the effective credit total of one
requirement category.
"""

from ..models import Catalog, CreditSummary


class CategoryEvaluator:
    """
    Computes effective credits for a requirement category.

    A category's credits are the sum of its subcategories' credits, except
    that a language-track subcategory only counts when its track matches
    the learner. This mirrors the filtering done during aggregation, but
    works on the sums rather than on individual records.
    """

    def __init__(self, catalog: Catalog, is_native_speaker: bool):
        self.catalog = catalog
        self.is_native_speaker = is_native_speaker

    def _counted_subcategories(self, category_name: str) -> list:
        category = self.catalog.tree.find_category(category_name)
        if category is None:
            return []
        return [
            sub for sub in category.subcategories
            if sub.track.applies(self.is_native_speaker)
        ]

    def category_credits(self, category_name: str, summary: CreditSummary) -> int:
        """Completed credits for a category (0 for an unknown category)."""
        total = 0
        for sub in self._counted_subcategories(category_name):
            credits = summary.by_subcategory.get(sub.name)
            if credits is not None:
                total += credits.completed
        return total

    def planned_credits(self, category_name: str, summary: CreditSummary) -> int:
        """Planned credits for a category, with the same track filtering."""
        total = 0
        for sub in self._counted_subcategories(category_name):
            credits = summary.by_subcategory.get(sub.name)
            if credits is not None:
                total += credits.planned
        return total
