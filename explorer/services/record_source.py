#!/usr/bin/env python3
"""
Record source for the podcast API.
Fetches the show list (and single show details) with bounded
exponential-backoff retry over aiohttp.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, List, Optional

import aiohttp
from pydantic import ValidationError

from explorer.config import DEFAULT_API_URL, DEFAULT_BASE_DELAY, DEFAULT_MAX_ATTEMPTS, DEFAULT_TIMEOUT, Settings
from explorer.exceptions import FetchFailure
from explorer.models.catalog import Show, ShowDetail
from explorer.services.view_state import ViewStateCoordinator

logger = logging.getLogger(__name__)


class RecordSource:
    """Async client for the remote show collection"""

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        base_delay: float = DEFAULT_BASE_DELAY,
        timeout: float = DEFAULT_TIMEOUT,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.base_url = base_url.rstrip("/")
        self.max_attempts = max_attempts
        self.base_delay = base_delay
        self.timeout = timeout
        self._sleep = sleep

    @classmethod
    def from_settings(cls, settings: Settings) -> "RecordSource":
        return cls(
            base_url=settings.api_url,
            max_attempts=settings.fetch_max_attempts,
            base_delay=settings.fetch_base_delay,
            timeout=settings.fetch_timeout,
        )

    def backoff_delay(self, attempt: int) -> float:
        """Seconds to wait after the failed attempt (0-based)"""
        return self.base_delay * (2 ** attempt)

    async def _get_json(self, session: aiohttp.ClientSession, url: str) -> Any:
        """Single request; raises on transport errors and non-2xx status"""
        async with session.get(url, headers={"Accept": "application/json"}) as response:
            if response.status != 200:
                raise aiohttp.ClientResponseError(
                    response.request_info,
                    response.history,
                    status=response.status,
                    message=f"HTTP error! status: {response.status} for {url}",
                )
            return await response.json(content_type=None)

    async def _request_with_retry(self, url: str) -> Any:
        last_error: Optional[BaseException] = None

        async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout)) as session:
            for attempt in range(self.max_attempts):
                try:
                    data = await self._get_json(session, url)
                    if attempt:
                        logger.info(f"✅ {url} succeeded on attempt {attempt + 1}")
                    return data
                except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
                    last_error = e

                if attempt < self.max_attempts - 1:
                    wait_time = self.backoff_delay(attempt)
                    logger.warning(
                        f"⚠️ Attempt {attempt + 1}/{self.max_attempts} failed for {url}: "
                        f"{last_error}. Retrying in {wait_time:g}s..."
                    )
                    await self._sleep(wait_time)
                else:
                    logger.warning(f"⚠️ Attempt {attempt + 1}/{self.max_attempts} failed for {url}: {last_error}")

        logger.error(f"❌ All retry attempts failed for {url}")
        raise FetchFailure(
            f"Could not connect to the podcast API ({last_error})",
            url=url,
            attempts=self.max_attempts,
        )

    async def fetch_all(self) -> List[Show]:
        """
        Fetch every show preview.

        Malformed entries are skipped with a warning; a payload that is not a
        list is treated as a failed fetch.

        Raises:
            FetchFailure: retries exhausted or unusable payload
        """
        url = self.base_url
        payload = await self._request_with_retry(url)

        if not isinstance(payload, list):
            raise FetchFailure(
                f"Unexpected payload from podcast API: expected a list, got {type(payload).__name__}",
                url=url,
                attempts=self.max_attempts,
            )

        shows: List[Show] = []
        skipped = 0
        for entry in payload:
            try:
                shows.append(Show.model_validate(entry))
            except ValidationError as e:
                skipped += 1
                logger.warning(f"⚠️ Skipping malformed show entry: {e.error_count()} error(s)")

        logger.info(f"📚 Fetched {len(shows)} shows ({skipped} skipped) from {url}")
        return shows

    async def fetch_show(self, show_id: str) -> ShowDetail:
        """
        Fetch the full record (seasons and episodes) for one show.

        Raises:
            ValueError: show_id is empty
            FetchFailure: retries exhausted or unusable payload
        """
        if not show_id:
            raise ValueError("Show ID is required.")

        url = f"{self.base_url}/id/{show_id}"
        payload = await self._request_with_retry(url)

        try:
            return ShowDetail.model_validate(payload)
        except ValidationError as e:
            logger.error(f"❌ Malformed detail payload for show {show_id}: {e}")
            raise FetchFailure(f"Failed to load details for show ID {show_id}.", url=url, attempts=self.max_attempts)


async def populate(coordinator: ViewStateCoordinator, source: RecordSource) -> bool:
    """
    Run the catalog fetch and hand the outcome to the coordinator.

    A FetchFailure becomes the coordinator's error state, never an exception.
    Returns True when shows were loaded.
    """
    coordinator.begin_loading()
    try:
        shows = await source.fetch_all()
    except FetchFailure as e:
        coordinator.fail(e.message)
        return False

    coordinator.load(shows)
    return True



def schedule_populate(coordinator: ViewStateCoordinator, source: RecordSource) -> "asyncio.Task[bool]":
    """
    Start populate() as a task on the running loop.

    An unexpected exception inside the task is logged and moves the
    coordinator to the error state instead of leaving it loading.
    """
    task = asyncio.create_task(populate(coordinator, source))

    def _on_done(done: "asyncio.Task[bool]") -> None:
        if done.cancelled():
            return
        error = done.exception()
        if error is not None:
            logger.error(f"❌ Catalog load crashed: {error!r}", exc_info=error)
            coordinator.fail("Failed to fetch podcast data.")

    task.add_done_callback(_on_done)
    return task
