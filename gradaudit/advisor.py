"""
Graduation Advisor - Main Orchestrator.

This module contains the GraduationAdvisor class that connects the
engine layer to the presentation layer.
"""

from .config import DEFAULT_NATIVE_SPEAKER
from .data import CatalogLoader, EnrollmentParser
from .engines import (
    CourseRecommendationEngine,
    PlanValidator,
    RequirementChecker,
)
from .ui import TerminalDisplay


class GraduationAdvisor:
    """
    Main interface for the graduation audit system.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Loads the catalog once through a CatalogLoader
    2. Builds every engine with the same catalog and native-speaker flag
    3. Passes engine results to the display

    The native-speaker flag is fixed for the advisor's lifetime. Create a
    second advisor to audit a learner on the other language track.

    check(), validate_plan(), recommend(), summarize() and audit() return data only
    and never print, so they can back a web or API layer directly.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        advisor = GraduationAdvisor(is_native_speaker=True)
        result = advisor.check(enrollments)
        if not result.can_graduate:
            print(result.warnings)
    """

    def __init__(self, loader: CatalogLoader = None,
                 is_native_speaker: bool = DEFAULT_NATIVE_SPEAKER,
                 catalog=None, display=None):
        self.loader = loader or CatalogLoader()
        self.catalog = catalog if catalog is not None else self.loader.catalog
        self.is_native_speaker = is_native_speaker

        self.checker = RequirementChecker(self.catalog, is_native_speaker)
        self.plan_validator = PlanValidator(self.catalog, self.checker)
        self.recommendation_engine = CourseRecommendationEngine(self.catalog, self.checker)

        self.parser = EnrollmentParser()
        self.display = display or TerminalDisplay()

    def summarize(self, enrollments):
        return self.checker.aggregator.aggregate(enrollments)

    def check(self, enrollments):
        return self.checker.check(enrollments)

    def validate_plan(self, enrollments):
        return self.plan_validator.validate_plan(enrollments)

    def recommend(self, enrollments) -> list:
        return self.recommendation_engine.recommend(enrollments)

    def recommend_by_category(self, enrollments) -> list:
        return self.recommendation_engine.recommend_by_category(enrollments)

    def load_enrollments(self, path) -> list:
        return self.parser.load(path)

    def audit(self, enrollments) -> dict:
        """
        Run every report without printing.

        Returns:
            Dict with summary, check, plan and recommendations
        """
        enrollments = list(enrollments)
        check = self.check(enrollments)
        plan = self.validate_plan(enrollments)
        recommendations = []
        if any(not c.is_completed for c in check.category_checks):
            recommendations = self.recommend_by_category(enrollments)
        return {
            "summary": check.summary,
            "check": check,
            "plan": plan,
            "recommendations": recommendations,
        }

    def show_audit(self, enrollments) -> dict:
        """
        Run a complete audit and display results.

        1. Prints the learner's language track
        2. Prints the credit summary and graduation check
        3. Prints the yearly plan validation
        4. Prints course recommendations if a category is short
        """
        result = self.audit(enrollments)

        self.display.print_learner_info(self.is_native_speaker)
        self.display.print_credit_summary(result["summary"])
        self.display.print_check_result(result["check"])
        self.display.print_plan_validation(result["plan"])
        if result["recommendations"]:
            self.display.print_recommendations(result["recommendations"])

        return result

    def run_audit(self, enrollment_path) -> dict:
        """Load an enrollment file, then audit and display it."""
        return self.show_audit(self.load_enrollments(enrollment_path))
