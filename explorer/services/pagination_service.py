"""
Pagination service - slices ordered shows into fixed-size pages.
"""

from typing import List, Sequence, Tuple, TypeVar
from math import ceil
import logging

from explorer.exceptions import InvalidParameter
from explorer.models.pagination import PaginationMeta

logger = logging.getLogger(__name__)

T = TypeVar('T')


class PaginationService:
    """
    Centralized pagination logic for the derived view.

    Conventions:
    - Pages are 1-indexed
    - An empty list has 0 pages, not "page 1 of nothing"
    """

    @staticmethod
    def calculate_offset(page: int, page_size: int) -> int:
        """Offset of the first item on page"""
        return (page - 1) * page_size

    @staticmethod
    def count_pages(total_items: int, page_size: int) -> int:
        """ceil(total_items / page_size); 0 for no items"""
        if page_size < 1:
            raise InvalidParameter("page size", page_size, "must be positive")
        return ceil(total_items / page_size) if total_items > 0 else 0

    @staticmethod
    def clamp_page(page: int, total_pages: int) -> int:
        """Pull page into [1, max(1, total_pages)]"""
        return min(max(1, page), max(1, total_pages))

    @staticmethod
    def paginate(items: Sequence[T], page: int, page_size: int) -> Tuple[List[T], int]:
        """
        Return (slice, total_pages) for page.

        A page outside [1, total_pages] gives an empty slice; callers clamp
        the page index beforehand.
        """
        total_pages = PaginationService.count_pages(len(items), page_size)
        if page < 1 or page > total_pages:
            return [], total_pages

        offset = PaginationService.calculate_offset(page, page_size)
        return list(items[offset:offset + page_size]), total_pages

    @staticmethod
    def create_meta(
        current_page: int,
        page_size: int,
        total_items: int
    ) -> PaginationMeta:
        """Create pagination metadata"""
        total_pages = PaginationService.count_pages(total_items, page_size)

        return PaginationMeta(
            current_page=current_page,
            page_size=page_size,
            total_items=total_items,
            total_pages=total_pages,
            has_next=current_page < total_pages,
            has_prev=current_page > 1,
            next_page=current_page + 1 if current_page < total_pages else None,
            prev_page=current_page - 1 if current_page > 1 else None,
        )


# Singleton
pagination_service = PaginationService()
