"""Owner of the published documentation index.

The index is replaced wholesale on each successful load. A failed
refresh leaves the previous index in place; a failed first load is
fatal to the caller.
"""

import asyncio
import logging
from datetime import UTC, datetime

import httpx

from ..config import Settings
from ..engine.core import DocumentationIndex, build_index
from ..engine.errors import DocumentationNotLoaded, FetchExhausted
from ..engine.handlers import HandlerContext
from .fetcher import fetch_documentation

logger = logging.getLogger(__name__)


class DocumentationStore:
    """Holds the current documentation index and reloads it on demand."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings
        self._transport = transport
        self._index: DocumentationIndex | None = None
        self._loaded_at: datetime | None = None
        self._lock = asyncio.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._index is not None

    @property
    def loaded_at(self) -> datetime | None:
        return self._loaded_at

    @property
    def index(self) -> DocumentationIndex:
        if self._index is None:
            raise DocumentationNotLoaded()
        return self._index

    def context(self) -> HandlerContext:
        """Handler context bound to the currently published index."""
        return HandlerContext(
            index=self.index,
            resource_scheme=self.settings.resource_scheme,
            search_limit=self.settings.search_result_limit,
        )

    def _publish(self, index: DocumentationIndex) -> None:
        self._index = index
        self._loaded_at = datetime.now(UTC)

    def load_text(self, raw_text: str, source_url: str = "") -> DocumentationIndex:
        """Build and publish an index from already-fetched text."""
        index = build_index(raw_text, source_url=source_url)
        self._publish(index)
        return index

    async def load(self) -> bool:
        """Fetch and publish the documentation.

        Returns:
            True if a new index was published, False if the fetch failed
            and the previous index was kept

        Raises:
            FetchExhausted: If the fetch failed and nothing was loaded before
        """
        async with self._lock:
            try:
                index = await fetch_documentation(
                    self.settings.docs_url,
                    timeout=self.settings.fetch_timeout_seconds,
                    max_attempts=self.settings.fetch_max_attempts,
                    retry_delay=self.settings.fetch_retry_delay_seconds,
                    transport=self._transport,
                )
            except FetchExhausted as e:
                if self._index is None:
                    raise
                logger.warning(f"Documentation refresh failed, keeping previous index: {e}")
                return False

            self._publish(index)
            return True

    async def refresh_forever(self, interval: float) -> None:
        """Reload the documentation every ``interval`` seconds until cancelled.

        A failed reload is logged and the loop keeps going with the index
        that is already published.
        """
        while True:
            await asyncio.sleep(interval)
            try:
                await self.load()
            except Exception as e:
                logger.error(f"Documentation refresh crashed, will retry: {e}", exc_info=True)
