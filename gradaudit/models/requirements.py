"""
Requirement tree and catalog models.

The requirement tree defines the "shape" of graduation requirements: the
total credit target, the categories, and the subcategories credits are
aggregated into. The catalog pairs the tree with the immutable course list.
"""

from dataclasses import dataclass, field, replace
from typing import Optional

from .course import Course, TrackTag


@dataclass(frozen=True)
class SubcategoryRequirement:
    """
    A named credit bucket within a category.

    Subcategory names are unique across the whole tree because credits are
    aggregated by subcategory name, not by parent category.
    """
    name: str
    min_credits: int = 0
    required_credits: Optional[int] = None
    track: TrackTag = TrackTag.NONE


@dataclass(frozen=True)
class CategoryRequirement:
    """
    A top-level requirement grouping (e.g., humanities, language).

    Example for the language category:
        name: "language"
        min_credits: 8
        subcategories: (foreign_language_a [TRACK_A], foreign_language_b [TRACK_B])
    """
    name: str
    min_credits: int = 0
    required_credits: Optional[int] = None
    subcategories: tuple = ()  # Ordered SubcategoryRequirement objects
    track: TrackTag = TrackTag.NONE


@dataclass(frozen=True)
class RequirementTree:
    """
    Total credit target plus the ordered category list.

    Subcategories without a track of their own inherit their category's
    track when the tree is built.
    """
    total_credits: int
    categories: tuple = ()  # Ordered CategoryRequirement objects

    def __post_init__(self):
        categories = []
        for category in self.categories:
            subs = tuple(
                replace(sub, track=category.track) if sub.track is TrackTag.NONE else sub
                for sub in category.subcategories
            )
            categories.append(replace(category, subcategories=subs))
        object.__setattr__(self, "categories", tuple(categories))

    def find_category(self, name: str) -> Optional[CategoryRequirement]:
        for category in self.categories:
            if category.name == name:
                return category
        return None

    def find_subcategory(self, name: str) -> Optional[SubcategoryRequirement]:
        for category in self.categories:
            for sub in category.subcategories:
                if sub.name == name:
                    return sub
        return None

    def category_of(self, label: str) -> Optional[CategoryRequirement]:
        """
        Find the category a course label belongs to.

        A label matches either a category name directly or the name of one
        of its subcategories.
        """
        for category in self.categories:
            if category.name == label:
                return category
            if any(sub.name == label for sub in category.subcategories):
                return category
        return None

    def track_for(self, label: str) -> TrackTag:
        """Language track for a course label (NONE if the label is unknown)."""
        sub = self.find_subcategory(label)
        if sub is not None:
            return sub.track
        category = self.find_category(label)
        if category is not None:
            return category.track
        return TrackTag.NONE

    def subcategory_names(self) -> list:
        return [sub.name for category in self.categories for sub in category.subcategories]


@dataclass(frozen=True)
class Catalog:
    """
    Immutable course catalog bound to its requirement tree.

    Course tracks are resolved from the tree once, here, so every engine
    sharing this catalog sees the same tags. A course that already carries
    an explicit track keeps it.

    Course codes are unique: on a duplicate code the later record replaces
    the earlier one, keeping the earlier position.
    """
    courses: tuple
    tree: RequirementTree
    _by_code: dict = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        by_code = {}
        for course in self.courses:
            if course.track is TrackTag.NONE:
                course = replace(course, track=self.tree.track_for(course.category))
            by_code[course.code] = course
        object.__setattr__(self, "courses", tuple(by_code.values()))
        object.__setattr__(self, "_by_code", by_code)

    def get(self, code: str) -> Optional[Course]:
        return self._by_code.get(code)

    def required_courses(self) -> list:
        return [c for c in self.courses if c.required]

    def courses_in_category(self, category_name: str) -> list:
        """All catalog courses counting toward a category or any of its subcategories."""
        category = self.tree.find_category(category_name)
        if category is None:
            return []
        labels = {category.name} | {sub.name for sub in category.subcategories}
        return [c for c in self.courses if c.category in labels]
