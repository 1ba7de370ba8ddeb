#!/usr/bin/env python3
"""
Sort stage: orders shows by one of the fixed sort keys.
All orderings are stable; ties keep their input order.
"""

import logging
import unicodedata
from typing import Any, Callable, Dict, List, Sequence, Tuple

from explorer.exceptions import InvalidParameter
from explorer.models.catalog import Show, SortKey

logger = logging.getLogger(__name__)


def _updated_key(show: Show):
    return show.last_updated


def _fold(text: str) -> str:
    # NFKD splits accented letters into base letter + combining mark
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def _title_key(show: Show) -> Tuple[str, str]:
    # base letters decide first, accents only break ties; independent of LC_COLLATE
    folded = show.title.casefold()
    return _fold(folded), unicodedata.normalize("NFC", folded)


# sort key -> (key function, reverse)
_ORDERINGS: Dict[SortKey, Tuple[Callable[[Show], Any], bool]] = {
    SortKey.NEWEST: (_updated_key, True),
    SortKey.OLDEST: (_updated_key, False),
    SortKey.TITLE_ASC: (_title_key, False),
    SortKey.TITLE_DESC: (_title_key, True),
}


class SortingService:

    @staticmethod
    def sort(shows: Sequence[Show], sort_key: SortKey) -> List[Show]:
        """
        Return a new list ordered by sort_key.

        Raises:
            InvalidParameter: sort_key is not a SortKey member
        """
        try:
            key_func, reverse = _ORDERINGS[sort_key]
        except (KeyError, TypeError):
            raise InvalidParameter("sort key", sort_key)

        # sorted() keeps equal elements in input order even with reverse=True
        return sorted(shows, key=key_func, reverse=reverse)


sorting_service = SortingService()
