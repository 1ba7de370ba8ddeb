#!/usr/bin/env python3
"""
Filter stage: narrows the show list by search text and genre
"""

import logging
from typing import List, Optional, Sequence

from explorer.models.catalog import Show

logger = logging.getLogger(__name__)


class FilteringService:
    """Pure filtering over an in-memory show list"""

    @staticmethod
    def matches_query(show: Show, needle: str) -> bool:
        """needle must already be casefolded"""
        return needle in show.title.casefold() or needle in show.description.casefold()

    @staticmethod
    def matches_category(show: Show, category_id: int) -> bool:
        return category_id in show.category_ids

    @staticmethod
    def filter(shows: Sequence[Show], query: str = "", category_id: Optional[int] = None) -> List[Show]:
        """
        Keep shows whose title or description contains query (case-insensitive)
        and whose genres include category_id. Empty query / None category
        disable the respective predicate. Input order is preserved.
        """
        result = list(shows)

        if query:
            needle = query.casefold()
            result = [show for show in result if FilteringService.matches_query(show, needle)]

        if category_id is not None:
            result = [show for show in result if FilteringService.matches_category(show, category_id)]

        logger.debug(
            f"🔍 Filtered {len(shows)} -> {len(result)} shows "
            f"(query={query!r}, category_id={category_id})"
        )
        return result


filtering_service = FilteringService()
