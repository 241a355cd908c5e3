"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the gradaudit package.

To create a different UI (web, JSON API, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..config import TRACK_LABELS
from ..models import (
    CategoryCheckResult,
    CheckResult,
    CreditSummary,
    PlanValidation,
)


class TerminalDisplay:
    """
    Pretty terminal output for audit results.

    Every method takes the dataclasses produced by the engines and only
    formats them; no audit logic lives here.
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"

    BG_GREEN = "\033[42m"
    BG_RED = "\033[41m"

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def status_badge(cls, satisfied: bool) -> str:
        """Return a colored status badge."""
        if satisfied:
            return f"{cls.BG_GREEN}{cls.WHITE} ✓ OK {cls.RESET}"
        return f"{cls.BG_RED}{cls.WHITE} ✗ NOT MET {cls.RESET}"

    @classmethod
    def print_learner_info(cls, is_native_speaker: bool):
        cls.print_header("LEARNER")
        track = TRACK_LABELS["track_a"] if is_native_speaker else TRACK_LABELS["track_b"]
        print(f"  {cls.BOLD}Native speaker:{cls.RESET} {'yes' if is_native_speaker else 'no'}")
        print(f"  {cls.BOLD}Language track:{cls.RESET} {track}")

    @classmethod
    def print_credit_summary(cls, summary: CreditSummary):
        """Print totals and the per-subcategory credit table."""
        cls.print_header("CREDIT SUMMARY")
        total = summary.total
        print(f"\n  {cls.BOLD}Completed:{cls.RESET} {total.completed}"
              f"   {cls.BOLD}Planned:{cls.RESET} {total.planned}"
              f"   {cls.BOLD}All:{cls.RESET} {total.all}")

        print(f"\n  {cls.BOLD}{'SUBCATEGORY':<30} {'DONE':>6} {'PLAN':>6} {'MIN':>6}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 52}{cls.RESET}")
        for name, credits in summary.by_subcategory.items():
            color = cls.GREEN if credits.completed >= credits.min else cls.DIM
            print(f"  {color}{name:<30}{cls.RESET} {credits.completed:>6} "
                  f"{credits.planned:>6} {credits.min:>6}")

    @classmethod
    def _category_row(cls, check: CategoryCheckResult) -> str:
        if check.is_completed:
            status = f"{cls.GREEN}✓ Done{cls.RESET}"
            color = cls.GREEN
        else:
            status = f"{cls.RED}✗ Need {check.missing_credits}{cls.RESET}"
            color = cls.RED
        return (f"  {color}{check.name:<30}{cls.RESET} "
                f"{check.current_credits:>4}/{check.min_credits:<4} {status}")

    @classmethod
    def print_check_result(cls, result: CheckResult):
        """Print the graduation verdict with category rows and warnings."""
        cls.print_header("GRADUATION CHECK")
        print(f"\n  {cls.BOLD}Overall Status:{cls.RESET} {cls.status_badge(result.can_graduate)}")

        total = result.total_credits
        print(f"  {cls.BOLD}Total Credits:{cls.RESET} {total.current}/{total.required}")

        print(f"\n  {cls.BOLD}{'CATEGORY':<30} {'CREDITS':<9} {'STATUS'}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 52}{cls.RESET}")
        for check in result.category_checks:
            print(cls._category_row(check))

        if result.missing_required:
            cls.print_subheader("Missing Required Courses")
            for course in result.missing_required:
                print(f"  {cls.RED}{course.code:<10}{cls.RESET} {course.title} "
                      f"{cls.DIM}({course.credits} cr){cls.RESET}")

        if result.warnings:
            cls.print_subheader("Warnings")
            for warning in result.warnings:
                print(f"  {cls.YELLOW}⚠ {warning}{cls.RESET}")

    @classmethod
    def print_plan_validation(cls, validation: PlanValidation):
        cls.print_header("STUDY PLAN")
        print(f"\n  {cls.BOLD}Plan Status:{cls.RESET} {cls.status_badge(validation.is_valid)}")

        if validation.yearly_credits:
            cls.print_subheader("Planned Credits by Year")
            for year, credits in validation.yearly_credits.items():
                print(f"  Year {year}: {credits}")

        for issue in validation.issues:
            print(f"  {cls.RED}✗ {issue}{cls.RESET}")

        if validation.recommendations:
            cls.print_subheader("Next Steps")
            for rec in validation.recommendations:
                print(f"  → {rec}")

    @classmethod
    def print_recommendations(cls, recommendations: list):
        """Print CategoryRecommendation objects."""
        cls.print_header("RECOMMENDED COURSES")
        if not recommendations:
            print(f"\n  {cls.GREEN}Every category has enough credits.{cls.RESET}")
            return

        for rec in recommendations:
            cls.print_subheader(f"{rec.category} (need {rec.missing_credits} more credits)")
            if not rec.courses:
                print(f"  {cls.DIM}(no courses left in the catalog){cls.RESET}")
            for course in rec.courses:
                marker = f" {cls.YELLOW}[required]{cls.RESET}" if course.required else ""
                print(f"  {course.code:<10} {course.title} "
                      f"{cls.DIM}({course.credits} cr){cls.RESET}{marker}")
