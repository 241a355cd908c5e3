"""
Shared pytest fixtures for the gradaudit test suite.
Factory helpers live in tests/factories.py so they can be imported
directly by test modules as well as being used here.
"""
import os
import sys

_tests_dir = os.path.dirname(__file__)
_root_dir = os.path.join(_tests_dir, "..")
for _p in (_tests_dir, _root_dir):
    if _p not in sys.path:
        sys.path.insert(0, _p)

import pytest

from factories import make_catalog

from gradaudit.engines import (
    CourseRecommendationEngine,
    CreditAggregator,
    PlanValidator,
    RequirementChecker,
)


# ─── pytest fixtures ──────────────────────────────────────────────────────────

@pytest.fixture
def catalog():
    return make_catalog()


@pytest.fixture
def native_checker(catalog):
    return RequirementChecker(catalog, is_native_speaker=True)


@pytest.fixture
def non_native_checker(catalog):
    return RequirementChecker(catalog, is_native_speaker=False)


@pytest.fixture
def native_aggregator(catalog):
    return CreditAggregator(catalog, is_native_speaker=True)


@pytest.fixture
def non_native_aggregator(catalog):
    return CreditAggregator(catalog, is_native_speaker=False)


@pytest.fixture
def plan_validator(catalog, native_checker):
    return PlanValidator(catalog, native_checker)


@pytest.fixture
def recommender(catalog, native_checker):
    return CourseRecommendationEngine(catalog, native_checker)


@pytest.fixture
def data_dir(tmp_path):
    """Temporary data directory with a minimal catalog and requirement tree."""
    (tmp_path / "requirements.json").write_text(
        """{
          "total_credits": 4,
          "categories": [
            {"name": "language", "min_credits": 2, "subcategories": [
              {"name": "lang_a", "min_credits": 2, "track": "track_a"},
              {"name": "lang_b", "min_credits": 2, "track": "track_b"}
            ]},
            {"name": "humanities", "min_credits": 2, "track": "none",
             "subcategories": [{"name": "hum_core"}]}
          ]
        }""",
        encoding="utf-8",
    )
    (tmp_path / "catalog.json").write_text(
        """{"courses": [
          {"code": "A1", "title": "English", "credits": 2, "category": "lang_a", "required": true},
          {"code": "B1", "title": "Japanese", "credits": 2, "category": "lang_b"},
          {"code": "H1", "title": "Philosophy", "credits": 2, "category": "hum_core"}
        ]}""",
        encoding="utf-8",
    )
    return tmp_path
