#!/usr/bin/env python3
"""
View-state coordinator.

Single owner of the current ViewParameters. Every parameter change or new
source set re-runs filter -> sort -> paginate and stores a fresh DerivedView.
"""

import logging
from enum import Enum
from typing import Any, Iterable, Optional, Tuple

from explorer.config import DEFAULT_PAGE_SIZE
from explorer.exceptions import InvalidParameter
from explorer.models.catalog import (
    DerivedView,
    EmptyState,
    ErrorState,
    LoadingState,
    ReadyState,
    Show,
    SortKey,
    ViewParameters,
    ViewSnapshot,
)
from explorer.services.category_index import normalize_category_id
from explorer.services.filtering_service import filtering_service
from explorer.services.pagination_service import pagination_service
from explorer.services.sorting_service import sorting_service

logger = logging.getLogger(__name__)

EMPTY_VIEW = DerivedView()


class LoadStatus(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    READY = "ready"


class ViewStateCoordinator:
    """
    Owns parameters, source shows and the derived view for one session.

    Parameter setters validate their input before touching any state, so an
    InvalidParameter leaves the coordinator exactly as it was.
    """

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE):
        if page_size < 1:
            raise InvalidParameter("page size", page_size, "must be positive")
        self.page_size = page_size
        self._params = ViewParameters()
        self._shows: Tuple[Show, ...] = ()
        self._status = LoadStatus.LOADING
        self._error: Optional[str] = None
        self._view = EMPTY_VIEW

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def params(self) -> ViewParameters:
        return self._params

    @property
    def view(self) -> DerivedView:
        return self._view

    @property
    def status(self) -> LoadStatus:
        return self._status

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def shows(self) -> Tuple[Show, ...]:
        return self._shows

    def snapshot(self) -> ViewSnapshot:
        """Parameters, tagged render state and pagination metadata"""
        if self._status is LoadStatus.LOADING:
            state = LoadingState()
        elif self._status is LoadStatus.ERROR:
            state = ErrorState(message=self._error or "Failed to fetch podcast data.")
        elif self._view.total_matched == 0:
            state = EmptyState()
        else:
            state = ReadyState(view=self._view)

        return ViewSnapshot(
            params=self._params,
            state=state,
            meta=pagination_service.create_meta(
                self._params.page_index, self.page_size, self._view.total_matched
            ),
            showing=len(self._view.items),
            total=self._view.total_matched,
        )

    # ------------------------------------------------------------------
    # Parameter operations
    # ------------------------------------------------------------------

    def set_query(self, text: Optional[str]) -> DerivedView:
        query = text or ""
        if not isinstance(query, str):
            raise InvalidParameter("query", text, "expected text")
        return self._update(query=query, page_index=1)

    def set_category(self, category_id: Any) -> DerivedView:
        return self._update(category_id=normalize_category_id(category_id), page_index=1)

    def set_sort_key(self, sort_key: Any) -> DerivedView:
        return self._update(sort_key=SortKey.parse(sort_key), page_index=1)

    def set_page(self, page: Any) -> DerivedView:
        """Move to page if it exists in the current view; otherwise do nothing"""
        if isinstance(page, bool) or not isinstance(page, int):
            logger.debug(f"Ignoring non-integer page {page!r}")
            return self._view
        if not 1 <= page <= self._view.total_pages:
            logger.debug(f"Ignoring page {page} outside 1..{self._view.total_pages}")
            return self._view
        return self._update(page_index=page)

    def reset(self) -> DerivedView:
        logger.info("🔄 Resetting view parameters")
        self._params = ViewParameters()
        return self._recompute()

    # ------------------------------------------------------------------
    # Source lifecycle
    # ------------------------------------------------------------------

    def begin_loading(self) -> None:
        self._status = LoadStatus.LOADING
        self._error = None
        self._recompute()

    def load(self, shows: Iterable[Show]) -> DerivedView:
        """Replace the source set; the current page survives if still valid"""
        self._shows = tuple(shows)
        self._status = LoadStatus.READY
        self._error = None
        logger.info(f"✅ Loaded {len(self._shows)} shows")
        return self._recompute()

    def fail(self, message: str) -> DerivedView:
        """Enter the error state; the view is empty until the next load"""
        logger.error(f"❌ Catalog unavailable: {message}")
        self._shows = ()
        self._status = LoadStatus.ERROR
        self._error = message
        return self._recompute()

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def _update(self, **changes: Any) -> DerivedView:
        self._params = self._params.model_copy(update=changes)
        return self._recompute()

    def _recompute(self) -> DerivedView:
        if self._status is not LoadStatus.READY:
            self._params = self._params.model_copy(update={"page_index": 1})
            self._view = EMPTY_VIEW
            return self._view

        params = self._params
        matched = filtering_service.filter(self._shows, params.query, params.category_id)
        ordered = sorting_service.sort(matched, params.sort_key)

        total_pages = pagination_service.count_pages(len(ordered), self.page_size)
        page_index = pagination_service.clamp_page(params.page_index, total_pages)
        if page_index != params.page_index:
            logger.debug(f"Clamped page {params.page_index} -> {page_index}")
            self._params = params.model_copy(update={"page_index": page_index})

        items, _ = pagination_service.paginate(ordered, page_index, self.page_size)
        self._view = DerivedView(
            items=tuple(items),
            total_matched=len(ordered),
            total_pages=total_pages,
        )
        return self._view
