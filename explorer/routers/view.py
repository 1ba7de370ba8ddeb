#!/usr/bin/env python3
"""
View router: the renderer's window onto the view-state coordinator.
Every mutating endpoint returns the fresh snapshot.
"""

import logging
from typing import List

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException

from explorer.config import Settings
from explorer.dependencies.session import get_app_settings, get_coordinator, get_record_source
from explorer.exceptions import InvalidParameter
from explorer.models.catalog import (
    CategoryRequest,
    PageRequest,
    QueryRequest,
    ShowCard,
    SortRequest,
    ViewSnapshot,
)
from explorer.services.formatting_service import build_card
from explorer.services.record_source import RecordSource, populate
from explorer.services.view_state import ViewStateCoordinator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/view")


def _invalid(e: InvalidParameter) -> HTTPException:
    logger.warning(f"⚠️ Rejected parameter: {e}")
    return HTTPException(
        status_code=422,
        detail={
            'error': 'Invalid parameter',
            'parameter': e.name,
            'message': str(e),
        }
    )


@router.get("", response_model=ViewSnapshot)
async def get_view(coordinator: ViewStateCoordinator = Depends(get_coordinator)):
    """Current parameters, render state and pagination metadata"""
    return coordinator.snapshot()


@router.get("/cards", response_model=List[ShowCard])
async def get_cards(coordinator: ViewStateCoordinator = Depends(get_coordinator)):
    """Display-ready cards for the current page"""
    return [build_card(show) for show in coordinator.view.items]


@router.post("/query", response_model=ViewSnapshot)
async def set_query(
    request: QueryRequest,
    coordinator: ViewStateCoordinator = Depends(get_coordinator),
    settings: Settings = Depends(get_app_settings)
):
    if settings.debug:
        logger.debug(f"🔍 Search term: {request.query!r}")
    try:
        coordinator.set_query(request.query)
    except InvalidParameter as e:
        raise _invalid(e)
    return coordinator.snapshot()


@router.post("/category", response_model=ViewSnapshot)
async def set_category(
    request: CategoryRequest,
    coordinator: ViewStateCoordinator = Depends(get_coordinator)
):
    try:
        coordinator.set_category(request.category_id)
    except InvalidParameter as e:
        raise _invalid(e)
    return coordinator.snapshot()


@router.post("/sort", response_model=ViewSnapshot)
async def set_sort_key(
    request: SortRequest,
    coordinator: ViewStateCoordinator = Depends(get_coordinator)
):
    try:
        coordinator.set_sort_key(request.sort_key)
    except InvalidParameter as e:
        raise _invalid(e)
    return coordinator.snapshot()


@router.post("/page", response_model=ViewSnapshot)
async def set_page(
    request: PageRequest,
    coordinator: ViewStateCoordinator = Depends(get_coordinator)
):
    """Out-of-range pages leave the view unchanged"""
    coordinator.set_page(request.page)
    return coordinator.snapshot()


@router.post("/reset", response_model=ViewSnapshot)
async def reset_view(coordinator: ViewStateCoordinator = Depends(get_coordinator)):
    coordinator.reset()
    return coordinator.snapshot()


@router.post("/reload", response_model=ViewSnapshot)
async def reload_catalog(
    background_tasks: BackgroundTasks,
    coordinator: ViewStateCoordinator = Depends(get_coordinator),
    source: RecordSource = Depends(get_record_source)
):
    """Re-fetch the catalog; the snapshot reports loading until it completes"""
    logger.info("🔄 Catalog reload requested")
    coordinator.begin_loading()
    background_tasks.add_task(populate, coordinator, source)
    return coordinator.snapshot()
