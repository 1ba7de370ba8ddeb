#!/usr/bin/env python3
"""
Catalog router: genre list and show details
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from explorer.dependencies.session import get_category_index, get_record_source
from explorer.exceptions import FetchFailure
from explorer.models.catalog import Category, ShowDetail
from explorer.services.category_index import CategoryIndex
from explorer.services.record_source import RecordSource

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/categories", response_model=List[Category])
async def get_categories(index: CategoryIndex = Depends(get_category_index)):
    """Genre options for the filter control"""
    return index.categories()


@router.get("/shows/{show_id}", response_model=ShowDetail)
async def get_show(show_id: str, source: RecordSource = Depends(get_record_source)):
    """
    Full show record with seasons and episodes.
    Fetched on demand with the same retry policy as the catalog.
    """
    try:
        logger.info(f"📄 Show details requested - ID: {show_id}")
        detail = await source.fetch_show(show_id)
        logger.info(f"✅ Show {show_id}: {len(detail.seasons)} seasons, {detail.episode_count} episodes")
        return detail

    except FetchFailure as e:
        raise HTTPException(
            status_code=502,
            detail={
                'error': 'Failed to load show details',
                'message': e.message,
                'attempts': e.attempts,
            }
        )
