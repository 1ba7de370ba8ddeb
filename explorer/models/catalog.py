#!/usr/bin/env python3
"""
Pydantic models for shows, view parameters and derived views
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from explorer.exceptions import InvalidParameter
from explorer.models.pagination import PaginationMeta


# =============================================================================
# CATALOG RECORDS
# =============================================================================

class Category(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str


class Show(BaseModel):
    """
    One catalog entry as returned by the podcast API.
    Field aliases match the wire names (genres, seasons, updated).
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    title: str
    description: str = ""
    image: Optional[str] = None
    category_ids: Tuple[int, ...] = Field(default_factory=tuple, alias="genres")
    season_count: int = Field(0, ge=0, alias="seasons")
    last_updated: datetime = Field(alias="updated")

    @field_validator("id", mode="before")
    @classmethod
    def _opaque_id(cls, value: Any) -> str:
        return str(value)

    @field_validator("description", mode="before")
    @classmethod
    def _description_or_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("category_ids", mode="before")
    @classmethod
    def _genres_or_empty(cls, value: Any) -> Any:
        # genres: null means "no categories"
        return () if value is None else value

    @field_validator("last_updated")
    @classmethod
    def _aware_timestamp(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class Episode(BaseModel):
    title: str = ""
    description: str = ""
    episode: Optional[int] = None
    file: Optional[str] = None


class Season(BaseModel):
    season: Optional[int] = None
    title: str = ""
    image: Optional[str] = None
    episodes: List[Episode] = []


class ShowDetail(BaseModel):
    """Full show payload from /id/{id}; genres arrive as display names here"""
    id: str
    title: str
    description: str = ""
    image: Optional[str] = None
    genres: List[str] = []
    seasons: List[Season] = []
    updated: Optional[datetime] = None

    @field_validator("id", mode="before")
    @classmethod
    def _opaque_id(cls, value: Any) -> str:
        return str(value)

    @field_validator("genres", "seasons", mode="before")
    @classmethod
    def _list_or_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def episode_count(self) -> int:
        return sum(len(season.episodes) for season in self.seasons)


# =============================================================================
# VIEW PARAMETERS
# =============================================================================

class SortKey(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    TITLE_ASC = "title-asc"
    TITLE_DESC = "title-desc"

    @classmethod
    def parse(cls, value: Any) -> "SortKey":
        """
        Resolve a sort key, accepting the legacy spellings used by older
        frontends (updated_desc, a-z, z-a, title_asc, ...).

        Raises:
            InvalidParameter: value names no known ordering
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidParameter("sort key", value, "expected a string")

        normalized = value.strip().lower()
        try:
            return cls(normalized)
        except ValueError:
            pass

        if normalized in _SORT_ALIASES:
            return _SORT_ALIASES[normalized]
        raise InvalidParameter("sort key", value, f"expected one of {[key.value for key in cls]}")


_SORT_ALIASES: Dict[str, SortKey] = {
    "updated_desc": SortKey.NEWEST,
    "updated-desc": SortKey.NEWEST,
    "recent": SortKey.NEWEST,
    "updated_asc": SortKey.OLDEST,
    "updated-asc": SortKey.OLDEST,
    "a-z": SortKey.TITLE_ASC,
    "az": SortKey.TITLE_ASC,
    "title_asc": SortKey.TITLE_ASC,
    "z-a": SortKey.TITLE_DESC,
    "za": SortKey.TITLE_DESC,
    "title_desc": SortKey.TITLE_DESC,
}


class ViewParameters(BaseModel):
    """User-controlled inputs that determine the derived view"""
    model_config = ConfigDict(frozen=True)

    query: str = ""
    category_id: Optional[int] = None
    sort_key: SortKey = SortKey.NEWEST
    page_index: int = Field(1, ge=1)


# =============================================================================
# DERIVED VIEW AND RENDER STATES
# =============================================================================

class DerivedView(BaseModel):
    model_config = ConfigDict(frozen=True)

    items: Tuple[Show, ...] = ()
    total_matched: int = 0
    total_pages: int = 0


class LoadingState(BaseModel):
    kind: Literal["loading"] = "loading"


class ErrorState(BaseModel):
    kind: Literal["error"] = "error"
    message: str


class EmptyState(BaseModel):
    kind: Literal["empty"] = "empty"


class ReadyState(BaseModel):
    kind: Literal["ready"] = "ready"
    view: DerivedView


ViewState = Annotated[
    Union[LoadingState, ErrorState, EmptyState, ReadyState],
    Field(discriminator="kind"),
]


class ViewSnapshot(BaseModel):
    """Read-only picture handed to the renderer after every recompute"""
    params: ViewParameters
    state: ViewState
    meta: PaginationMeta
    showing: int = 0
    total: int = 0


# =============================================================================
# REQUEST MODELS
# =============================================================================

class QueryRequest(BaseModel):
    query: Optional[str] = ""


class CategoryRequest(BaseModel):
    category_id: Any = None


class SortRequest(BaseModel):
    sort_key: str


class PageRequest(BaseModel):
    page: int


class ShowCard(BaseModel):
    """Display-ready fields for one show preview card"""
    id: str
    title: str
    description: str
    image: Optional[str] = None
    seasons: str
    genres: str
    last_updated: str
