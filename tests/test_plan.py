"""
Tests for PlanValidator: yearly credit ceiling and plan recommendations.
"""
from factories import NATIVE_GRADUATE, completed, in_progress, planned

from gradaudit.config import YEARLY_CREDIT_LIMIT
from gradaudit.engines import PlanValidator
from gradaudit.models import EnrollmentRecord, EnrollmentStatus


class TestYearlyLimit:
    def test_overloaded_year_is_reported(self, plan_validator):
        # 11 x 4 + 2 = 46 credits in year 2
        records = planned(*(["M1"] * 11), year=2) + planned("H1", year=2)
        result = plan_validator.validate_plan(records)
        assert result.is_valid is False
        assert result.issues == ["Year 2: 46 credits planned, 2 over the 44-credit limit"]
        assert result.yearly_credits == {2: 46}

    def test_exactly_at_limit_is_valid(self, plan_validator):
        records = planned(*(["M1"] * 11), year=3)
        result = plan_validator.validate_plan(records)
        assert result.yearly_credits[3] == YEARLY_CREDIT_LIMIT
        assert result.is_valid is True
        assert result.issues == []

    def test_years_reported_in_order(self, plan_validator):
        records = planned(*(["M1"] * 12), year=4) + planned(*(["M2"] * 12), year=1)
        result = plan_validator.validate_plan(records)
        assert [i.split(":")[0] for i in result.issues] == ["Year 1", "Year 4"]
        assert list(result.yearly_credits) == [1, 4]

    def test_only_planned_records_with_year_count(self, plan_validator):
        records = (
            completed("M1", year=1)
            + in_progress("M2", year=1)
            + planned("H1")
            + planned("H2", year=1)
            + [EnrollmentRecord("NOPE", EnrollmentStatus.PLANNED, 1)]
        )
        assert plan_validator.yearly_credits(records) == {1: 2}

    def test_non_integer_years_are_skipped(self, plan_validator):
        records = [
            EnrollmentRecord("M1", EnrollmentStatus.PLANNED, year)
            for year in (2, "2", 0, -1, True, 2.0)
        ]
        assert plan_validator.yearly_credits(records) == {2: 4}
        assert plan_validator.validate_plan(records).issues == []

    def test_custom_limit(self, catalog, native_checker):
        validator = PlanValidator(catalog, native_checker, yearly_limit=4)
        result = validator.validate_plan(planned("M1", "H1", year=1))
        assert result.issues == ["Year 1: 6 credits planned, 2 over the 4-credit limit"]


class TestRecommendations:
    def test_valid_plan_can_still_fail_graduation(self, plan_validator):
        result = plan_validator.validate_plan(planned("H1", year=1))
        assert result.is_valid is True
        assert result.check.can_graduate is False
        assert "Enroll in more courses to meet graduation requirements" in result.recommendations

    def test_missing_required_adds_priority_note(self, plan_validator):
        result = plan_validator.validate_plan(completed("H1"))
        assert "Prioritize required courses (3 remaining)" in result.recommendations

    def test_graduate_gets_no_recommendations(self, plan_validator):
        result = plan_validator.validate_plan(completed(*NATIVE_GRADUATE))
        assert result.recommendations == []
        assert result.is_valid is True
        assert result.check.can_graduate is True

    def test_overloaded_graduate_is_invalid(self, plan_validator):
        records = completed(*NATIVE_GRADUATE) + planned(*(["M2"] * 12), year=2)
        result = plan_validator.validate_plan(records)
        assert result.check.can_graduate is True
        assert result.is_valid is False
