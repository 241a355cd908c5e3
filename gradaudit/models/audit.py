"""
Audit result data models.

Contains dataclasses for the credit summary and the graduation check
verdict. All of these are rebuilt from scratch on every call.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class SubcategoryCredits:
    """Credits aggregated into one subcategory, plus its thresholds."""
    completed: int = 0
    planned: int = 0
    required: Optional[int] = None
    min: int = 0


@dataclass
class CreditTotals:
    """Grand totals across every counted enrollment."""
    completed: int = 0
    planned: int = 0

    @property
    def all(self) -> int:
        return self.completed + self.planned


@dataclass
class CreditSummary:
    """
    Result of folding a learner's enrollments against the catalog.

    by_subcategory has one entry for every subcategory in the requirement
    tree, even those with no enrollments.
    """
    total: CreditTotals = field(default_factory=CreditTotals)
    by_subcategory: dict = field(default_factory=dict)  # name -> SubcategoryCredits


@dataclass
class TotalCreditCheck:
    current: int
    required: int
    is_completed: bool


@dataclass
class CategoryCheckResult:
    """
    Result of checking a single requirement category.

    Example for humanities with 6 of 8 credits:
        name: "humanities"
        current_credits: 6
        required_credits: 8
        min_credits: 8
        is_completed: False
        missing_credits: 2
    """
    name: str
    current_credits: int
    required_credits: int
    min_credits: int
    is_completed: bool
    missing_credits: int


@dataclass
class CheckResult:
    """
    Graduation verdict.

    can_graduate is False if any check failed: total credits, a category
    minimum, a missing required course, or an empty basic category.
    warnings are ordered the same way the checks run.
    """
    can_graduate: bool
    total_credits: TotalCreditCheck
    category_checks: list       # CategoryCheckResult objects, tree order
    missing_required: list      # Course objects, catalog order
    warnings: list              # Human-readable strings
    summary: Optional[CreditSummary] = None
