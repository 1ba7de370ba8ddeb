#!/usr/bin/env python3
"""
Static genre index for the podcast catalog.
Maps category ids to display names and back.
"""

import logging
from types import MappingProxyType
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from explorer.exceptions import InvalidParameter
from explorer.models.catalog import Category

logger = logging.getLogger(__name__)

GENRES: Tuple[Tuple[int, str], ...] = (
    (1, "Personal Growth"),
    (2, "Investigative"),
    (3, "History"),
    (4, "Comedy"),
    (5, "Entertainment"),
    (6, "Business"),
    (7, "Fiction"),
    (8, "News"),
    (9, "Kids and Family"),
    (10, "Science"),
    (11, "Technology"),
    (12, "Health & Fitness"),
    (13, "Arts"),
    (14, "Music"),
    (15, "True Crime"),
)

# Values the filter controls send for "All Genres"
_ALL_CATEGORY_TOKENS = {"", "0", "all", "none"}


def normalize_category_id(value: Any) -> Optional[int]:
    """
    Coerce a category selection to a single numeric representation.

    None, 0, "" and "all" mean "no category filter". Integral floats and
    digit strings become ints so the filter compares numbers with numbers.

    Raises:
        InvalidParameter: value is not a positive integer id
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidParameter("category id", value, "booleans are not ids")

    if isinstance(value, str):
        token = value.strip().lower()
        if token in _ALL_CATEGORY_TOKENS:
            return None
        try:
            value = int(token)
        except ValueError:
            raise InvalidParameter("category id", value, "not numeric")

    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidParameter("category id", value, "not an integer")
        value = int(value)

    if not isinstance(value, int):
        raise InvalidParameter("category id", value, "not numeric")

    if value == 0:
        return None
    if value < 0:
        raise InvalidParameter("category id", value, "must be positive")
    return value


class CategoryIndex:
    """Immutable id <-> name lookup for genres"""

    def __init__(self, entries: Iterable[Tuple[int, str]] = GENRES):
        by_id = {}
        by_name = {}
        for category_id, name in entries:
            by_id[int(category_id)] = name
            by_name[name.casefold()] = int(category_id)
        self._by_id: Mapping[int, str] = MappingProxyType(by_id)
        self._by_name: Mapping[str, int] = MappingProxyType(by_name)

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, category_id: Any) -> bool:
        return category_id in self._by_id

    def name_for(self, category_id: Any) -> Optional[str]:
        """Display name for an id, or None when unmapped"""
        try:
            normalized = normalize_category_id(category_id)
        except InvalidParameter:
            return None
        if normalized is None:
            return None
        return self._by_id.get(normalized)

    def id_for(self, name: str) -> Optional[int]:
        """Reverse lookup, case-insensitive"""
        if not name:
            return None
        return self._by_name.get(name.strip().casefold())

    def categories(self) -> List[Category]:
        """All categories ordered by id, for building filter options"""
        return [Category(id=category_id, name=name) for category_id, name in sorted(self._by_id.items())]

    def labels(self, category_ids: Sequence[Any]) -> str:
        """Comma-separated display names; 'No Genres' for an empty sequence"""
        if not category_ids:
            return "No Genres"
        return ", ".join(self.name_for(category_id) or "Unknown" for category_id in category_ids)


category_index = CategoryIndex()
