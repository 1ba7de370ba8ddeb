"""Shared fixtures for the explorer test suite."""

from datetime import datetime, timedelta, timezone

import pytest

from explorer.models.catalog import Show

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def make_show():
    """Factory for Show records with sensible defaults."""

    def _make(
        show_id="1",
        title="Untitled",
        description="",
        genres=(1,),
        seasons=1,
        updated=None,
        days_ago=0,
    ):
        if updated is None:
            updated = BASE_TIME - timedelta(days=days_ago)
        return Show(
            id=show_id,
            title=title,
            description=description,
            image=f"https://example.com/{show_id}.jpg",
            genres=list(genres),
            seasons=seasons,
            updated=updated,
        )

    return _make


@pytest.fixture
def fourteen_shows(make_show):
    """14 shows whose timestamps strictly decrease in input order."""
    return [
        make_show(show_id=str(i), title=f"Show {i:02d}", days_ago=i)
        for i in range(14)
    ]


@pytest.fixture
def raw_payload():
    """Show list as the podcast API returns it."""
    return [
        {
            "id": "10716",
            "title": "True Crime Stories",
            "description": "Cases from the archive",
            "seasons": 3,
            "image": "https://example.com/crime.jpg",
            "genres": [2, 15],
            "updated": "2023-10-27T10:00:00.000Z",
        },
        {
            "id": 5675,
            "title": "Comedy Hour",
            "description": "Stand-up every week",
            "seasons": 1,
            "image": "https://example.com/comedy.jpg",
            "genres": ["4"],
            "updated": "2022-11-03T07:00:00.000Z",
        },
    ]
