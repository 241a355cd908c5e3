"""
Tests for CourseRecommendationEngine.
"""
from factories import NATIVE_GRADUATE, completed, in_progress, make_catalog, planned

from gradaudit.engines import CourseRecommendationEngine, RequirementChecker
from gradaudit.models import Course


class TestRecommend:
    def test_at_most_three_per_category(self, recommender):
        recs = recommender.recommend_by_category([])
        humanities = next(r for r in recs if r.category == "humanities")
        assert [c.code for c in humanities.courses] == ["H1", "H2", "H3"]
        assert humanities.missing_credits == 4

    def test_only_short_categories(self, recommender):
        recs = recommender.recommend_by_category(completed("H1", "H2"))
        assert "humanities" not in [r.category for r in recs]

    def test_skips_courses_already_on_the_plan(self, recommender):
        records = completed("H1") + planned("H2") + in_progress("H3")
        recs = recommender.recommend_by_category(records)
        humanities = next(r for r in recs if r.category == "humanities")
        assert [c.code for c in humanities.courses] == ["H4", "H5"]

    def test_other_track_is_never_suggested(self, recommender, catalog):
        non_native = CourseRecommendationEngine(
            catalog, RequirementChecker(catalog, is_native_speaker=False)
        )
        native_codes = [c.code for c in recommender.recommend([])]
        non_native_codes = [c.code for c in non_native.recommend([])]
        assert "A1" in native_codes and "B1" not in native_codes
        assert "B1" in non_native_codes and "A1" not in non_native_codes

    def test_flat_list_concatenates_in_category_order(self, recommender):
        flat = recommender.recommend([])
        grouped = recommender.recommend_by_category([])
        assert flat == [c for r in grouped for c in r.courses]
        assert len(flat) > 3

    def test_nothing_to_recommend_for_a_graduate(self, recommender):
        assert recommender.recommend(completed(*NATIVE_GRADUATE)) == []

    def test_category_without_options(self):
        catalog = make_catalog(courses=(Course("H1", "Philosophy", 2, "hum_core"),))
        engine = CourseRecommendationEngine(catalog, RequirementChecker(catalog, True))
        recs = engine.recommend_by_category(completed("H1"))
        humanities = next(r for r in recs if r.category == "humanities")
        assert humanities.courses == []
