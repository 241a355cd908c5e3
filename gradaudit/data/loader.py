"""
Catalog loading and caching.

This module handles loading the course catalog and requirement tree, either
from a local data directory or from a remote base URL, with caching so each
file is read once per loader.
"""

import json
import logging
from pathlib import Path

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import (
    CATALOG_FILE,
    DATA_DIR,
    HTTP_RETRIES,
    HTTP_TIMEOUT,
    REQUIREMENTS_FILE,
)
from ..models import (
    Catalog,
    CategoryRequirement,
    Course,
    RequirementTree,
    SubcategoryRequirement,
    TrackTag,
)

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when catalog or requirement data is malformed."""


def create_retry_session(retries: int = HTTP_RETRIES) -> requests.Session:
    """Session that retries GETs on rate limiting and server errors."""
    session = requests.Session()
    retry = Retry(
        total=retries,
        backoff_factor=1,
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=["GET"],
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def _parse_track(value, where: str) -> TrackTag:
    if value is None or value == "":
        return TrackTag.NONE
    try:
        return TrackTag(str(value).lower())
    except ValueError:
        raise CatalogError(f"{where}: unknown track {value!r}") from None


def _parse_int(value, where: str, optional: bool = False):
    if value is None and optional:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise CatalogError(f"{where}: expected an integer, got {value!r}")
    return value


def parse_course(data: dict) -> Course:
    """Build a Course from one catalog record."""
    if not isinstance(data, dict):
        raise CatalogError(f"Course record is not an object: {data!r}")
    try:
        code = data["code"]
        category = data["category"]
    except KeyError as exc:
        raise CatalogError(f"Course record missing {exc.args[0]!r}: {data!r}") from None

    credits = _parse_int(data.get("credits"), f"Course {code}")
    if credits <= 0:
        raise CatalogError(f"Course {code}: credits must be positive, got {credits}")

    return Course(
        code=code,
        title=data.get("title", ""),
        credits=credits,
        category=category,
        required=bool(data.get("required", False)),
        track=_parse_track(data.get("track"), f"Course {code}"),
    )


def parse_requirement_tree(data: dict) -> RequirementTree:
    """
    Build a RequirementTree from the requirements document.

    Expected shape:
        {
            "total_credits": 124,
            "categories": [
                {
                    "name": "language",
                    "min_credits": 8,
                    "required_credits": 8,        # optional
                    "track": "none",              # optional
                    "subcategories": [
                        {"name": "foreign_language_a", "min_credits": 8, "track": "track_a"},
                        ...
                    ]
                },
                ...
            ]
        }
    """
    if not isinstance(data, dict):
        raise CatalogError(f"Requirement tree is not an object: {data!r}")
    if "total_credits" not in data:
        raise CatalogError("Requirement tree missing 'total_credits'")
    total = _parse_int(data["total_credits"], "total_credits")

    categories = []
    for cat in data.get("categories", []):
        if not isinstance(cat, dict):
            raise CatalogError(f"Category is not an object: {cat!r}")
        name = cat.get("name")
        if not name:
            raise CatalogError(f"Category without a name: {cat!r}")

        subcategories = []
        for sub in cat.get("subcategories", []):
            if not isinstance(sub, dict):
                raise CatalogError(f"Subcategory of {name} is not an object: {sub!r}")
            sub_name = sub.get("name")
            if not sub_name:
                raise CatalogError(f"Subcategory of {name} without a name: {sub!r}")
            subcategories.append(SubcategoryRequirement(
                name=sub_name,
                min_credits=_parse_int(sub.get("min_credits", 0), sub_name),
                required_credits=_parse_int(sub.get("required_credits"), sub_name, optional=True),
                track=_parse_track(sub.get("track"), sub_name),
            ))

        categories.append(CategoryRequirement(
            name=name,
            min_credits=_parse_int(cat.get("min_credits", 0), name),
            required_credits=_parse_int(cat.get("required_credits"), name, optional=True),
            subcategories=tuple(subcategories),
            track=_parse_track(cat.get("track"), name),
        ))

    return RequirementTree(total_credits=total, categories=tuple(categories))


class CatalogLoader:
    """
    Loads and caches the catalog and requirement files.

    WHY LAZY LOADING: Properties only load files when first accessed, and
    every engine built from one loader shares the same immutable Catalog.

    DATA SOURCES:
    - catalog.json: Course list (code, title, credits, category, required)
    - requirements.json: Requirement tree (total, categories, subcategories)

    The source is either a local directory or an http(s) base URL serving
    the same two files.

    Usage:
        loader = CatalogLoader()
        catalog = loader.catalog
        catalog.get("HUM101")
    """

    def __init__(self, source=DATA_DIR, session=None):
        self.source = source
        self._session = session
        self._raw_catalog = None
        self._raw_requirements = None
        self._tree = None
        self._catalog = None

    @property
    def is_remote(self) -> bool:
        return str(self.source).startswith(("http://", "https://"))

    def _read_json(self, filename: str):
        if self.is_remote:
            if self._session is None:
                self._session = create_retry_session()
            url = f"{str(self.source).rstrip('/')}/{filename}"
            logger.info("Fetching %s", url)
            response = self._session.get(url, timeout=HTTP_TIMEOUT)
            response.raise_for_status()
            return response.json()

        path = Path(self.source) / filename
        if not path.exists():
            raise FileNotFoundError(f"Data file not found: {path}")
        logger.info("Loading %s", path)
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    @property
    def raw_catalog(self) -> list:
        """Course records as stored (a list, or {"courses": [...]})."""
        if self._raw_catalog is None:
            data = self._read_json(CATALOG_FILE)
            self._raw_catalog = data.get("courses", []) if isinstance(data, dict) else data
        return self._raw_catalog

    @property
    def raw_requirements(self) -> dict:
        if self._raw_requirements is None:
            self._raw_requirements = self._read_json(REQUIREMENTS_FILE)
        return self._raw_requirements

    @property
    def requirement_tree(self) -> RequirementTree:
        if self._tree is None:
            self._tree = parse_requirement_tree(self.raw_requirements)
        return self._tree

    @property
    def catalog(self) -> Catalog:
        """The immutable Catalog bound to the requirement tree."""
        if self._catalog is None:
            courses = tuple(parse_course(c) for c in self.raw_catalog)
            self._catalog = Catalog(courses=courses, tree=self.requirement_tree)
            logger.info(
                "Catalog ready: %d courses, %d categories",
                len(courses), len(self._tree.categories),
            )
        return self._catalog
