"""Documentation fetcher using httpx with bounded retries."""

import asyncio
import logging

import httpx

from ..engine.core import DocumentationIndex, build_index
from ..engine.errors import DocsServerError, EmptyDocument, FetchExhausted

logger = logging.getLogger(__name__)

# Defaults matching the published settings
MAX_ATTEMPTS = 3
RETRY_DELAY_SECONDS = 2.0
TIMEOUT_SECONDS = 10.0


async def _fetch_once(url: str, timeout: float, transport: httpx.AsyncBaseTransport | None) -> str:
    async with httpx.AsyncClient(timeout=timeout, transport=transport, follow_redirects=True) as client:
        response = await client.get(url)
        response.raise_for_status()
        if not response.text:
            raise EmptyDocument()
        return response.text


async def fetch_documentation(
    url: str,
    *,
    timeout: float = TIMEOUT_SECONDS,
    max_attempts: int = MAX_ATTEMPTS,
    retry_delay: float = RETRY_DELAY_SECONDS,
    transport: httpx.AsyncBaseTransport | None = None,
) -> DocumentationIndex:
    """Fetch the documentation text and segment it.

    An attempt fails on a transport error, a non-2xx status, an empty
    body or a segmentation error. Failed attempts are retried after a
    fixed delay.

    Args:
        url: Documentation URL
        timeout: Per-attempt timeout in seconds
        max_attempts: Total number of attempts
        retry_delay: Seconds to wait between attempts
        transport: Optional httpx transport (tests use httpx.MockTransport)

    Returns:
        The segmented documentation index

    Raises:
        FetchExhausted: If every attempt failed
    """
    last_error: Exception | None = None

    for attempt in range(1, max_attempts + 1):
        try:
            text = await _fetch_once(url, timeout, transport)
            index = build_index(text, source_url=url)
            logger.info(
                f"Loaded {len(index)} documentation sections ({index.total_chars} chars) from {url}"
            )
            return index
        except httpx.TimeoutException as e:
            last_error = e
            logger.warning(f"Documentation fetch attempt {attempt} timed out after {timeout}s")
        except httpx.HTTPStatusError as e:
            last_error = e
            logger.warning(
                f"Documentation fetch attempt {attempt} failed: HTTP error! status: {e.response.status_code}"
            )
        except (httpx.RequestError, DocsServerError) as e:
            last_error = e
            logger.warning(f"Documentation fetch attempt {attempt} failed: {e}")

        if attempt < max_attempts:
            logger.info(f"Retrying documentation fetch in {retry_delay}s...")
            await asyncio.sleep(retry_delay)

    logger.error(f"Failed to fetch documentation after {max_attempts} attempts: {last_error}")
    raise FetchExhausted(max_attempts, last_error)
