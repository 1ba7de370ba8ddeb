"""
Display helpers for show cards.
"""

import logging
from datetime import datetime
from typing import Optional, Union

from explorer.models.catalog import Show, ShowCard
from explorer.services.category_index import CategoryIndex, category_index

logger = logging.getLogger(__name__)

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_date(value: Optional[Union[str, datetime]]) -> str:
    """'2023-10-27T10:00:00.000Z' -> 'Oct 27, 2023'"""
    if not value:
        return "Date Unavailable"

    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError as e:
            logger.warning(f"⚠️ Failed to parse date {value!r}: {e}")
            return "Invalid Date"

    return f"{_MONTHS[value.month - 1]} {value.day}, {value.year}"


def season_label(count: int) -> str:
    return f"{count} season" if count == 1 else f"{count} seasons"


def build_card(show: Show, index: CategoryIndex = category_index) -> ShowCard:
    return ShowCard(
        id=show.id,
        title=show.title,
        description=show.description,
        image=show.image,
        seasons=season_label(show.season_count),
        genres=index.labels(show.category_ids),
        last_updated=format_date(show.last_updated),
    )
