"""Documentation fetching over HTTP.

Thin async wrapper around httpx that turns a documentation URL into page
text. Transient failures are retried with backoff; anything that still fails
is reported in-band through ``FetchResult.error`` so tool callers always get a
structured answer.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import httpx

from .config import FetchConfig, get_fetch_config
from .domains import get_domain
from .observability.metrics import record_fetch
from .resilience import RetryConfig, with_async_retry

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Unable to fetch documentation content."
URL_REQUIRED_MESSAGE = "Please provide a specific URL for general documentation queries."
NO_SOURCE = "none"


class DocumentationFetchError(Exception):
    """Raised when a documentation page cannot be retrieved."""

    def __init__(self, url: str, message: str, status_code: Optional[int] = None):
        self.url = url
        self.status_code = status_code
        super().__init__(message)

    @property
    def transient(self) -> bool:
        """Whether the server signalled a condition worth retrying."""
        return self.status_code is not None and (self.status_code >= 500 or self.status_code == 429)


def _is_transient(error: BaseException) -> bool:
    if isinstance(error, DocumentationFetchError):
        return error.transient
    return isinstance(error, httpx.TransportError) and not isinstance(error, httpx.UnsupportedProtocol)


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class FetchResult:
    """Fetched documentation plus provenance.

    Attributes:
        content: Page text, or a human-readable fallback message
        source: URL the content came from ("none" when nothing was fetched)
        timestamp: ISO-8601 UTC time of the fetch
        error: Failure description when the fetch did not succeed
    """

    content: str
    source: str
    timestamp: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the resource payload shape: content plus metadata."""
        result: Dict[str, Any] = {
            "content": self.content,
            "metadata": {"source": self.source, "timestamp": self.timestamp},
        }
        if self.error is not None:
            result["error"] = self.error
        return result


class DocumentationFetcher:
    """Fetch documentation pages with timeout and retry.

    Example:
        >>> fetcher = DocumentationFetcher()
        >>> result = await fetcher.fetch("https://docs.python.org/3/")
        >>> print(result.source, len(result.content))
    """

    def __init__(
        self,
        config: Optional[FetchConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            config: Fetch settings (default: from environment)
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        """
        self.config = config or get_fetch_config()
        self._transport = transport
        retry_config = RetryConfig(
            max_retries=self.config.max_retries,
            base_delay=self.config.retry_base_delay,
            max_delay=self.config.retry_max_delay,
        )
        self._get_with_retry = with_async_retry(
            retry_config,
            retryable_exceptions=(DocumentationFetchError, httpx.TransportError),
            should_retry=_is_transient,
        )(self._get)

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.config.timeout,
            follow_redirects=self.config.follow_redirects,
            headers={"User-Agent": self.config.user_agent},
            transport=self._transport,
        )

    async def _get(self, url: str) -> str:
        async with self._client() as client:
            response = await client.get(url)
            if not response.is_success:
                raise DocumentationFetchError(
                    url,
                    f"Failed to fetch documentation: {response.status_code} {response.reason_phrase}",
                    status_code=response.status_code,
                )
            return response.text

    async def fetch(self, url: str, domain: str = "general") -> FetchResult:
        """Fetch a documentation page.

        Never raises for network or HTTP failures; those produce a result
        with fallback content and ``error`` set.

        Args:
            url: Page to fetch
            domain: Domain the page belongs to (metrics label only)

        Returns:
            FetchResult with page text and source URL
        """
        start_time = time.time()
        try:
            content = await self._get_with_retry(url)
        except (DocumentationFetchError, httpx.HTTPError, httpx.InvalidURL) as e:
            record_fetch(domain, success=False, duration=time.time() - start_time)
            logger.error(f"Error fetching documentation from {url}: {e}")
            return FetchResult(
                content=FETCH_FAILED_MESSAGE,
                source=url,
                timestamp=_utc_timestamp(),
                error=str(e) or type(e).__name__,
            )

        duration = time.time() - start_time
        record_fetch(domain, success=True, duration=duration)
        logger.info(f"Fetched {len(content)} chars from {url} in {duration * 1000:.0f}ms")
        return FetchResult(content=content, source=url, timestamp=_utc_timestamp())

    async def read_domain(self, domain: str, url: Optional[str] = None) -> FetchResult:
        """Read documentation for a domain, defaulting to its base URL.

        The general domain has no base URL, so without an explicit ``url`` it
        returns a prompt asking for one instead of fetching anything.

        Raises:
            ValueError: If the domain is not in the registry
        """
        profile = get_domain(domain)
        if profile is None:
            raise ValueError(f"Unknown domain: {domain}")

        target_url = url or profile.base_url
        if not target_url:
            return FetchResult(content=URL_REQUIRED_MESSAGE, source=NO_SOURCE, timestamp=_utc_timestamp())

        return await self.fetch(target_url, domain=domain)
