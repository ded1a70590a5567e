import asyncio
import itertools
import logging
from decimal import Decimal

import httpx
from httpcore._async.connection import exponential_backoff
from pydantic import ValidationError

from ..errors import SearchError
from ..types import SearchQuery, SearchResultItem, SearchResultSet

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}


class TavilySearchClient:
    """Tavily search API client with retry on rate limiting and server errors."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.tavily.com/search",
        *,
        timeout: float = 60.0,
        max_retries: int = 3,
        backoff_factor: float = 1.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            api_key: Tavily API key, sent as a bearer token
            base_url: Search endpoint URL
            timeout: Per-request timeout in seconds
            max_retries: Retries after the first attempt for retryable statuses
            backoff_factor: Base delay for exponential backoff between retries
            transport: Optional httpx transport (used by tests)
        """
        if not api_key:
            raise ValueError("Tavily API key is required")
        self.base_url = base_url
        self.timeout = timeout
        self.max_retries = max_retries
        self.backoff_factor = backoff_factor
        self.transport = transport
        self.headers = {
            "Accept": "application/json",
            "Authorization": f"Bearer {api_key}",
        }

    async def search(self, query: SearchQuery) -> SearchResultSet:
        """
        Perform a web search.

        Args:
            query: The search parameters

        Returns:
            Normalized results in the order returned by the API

        Raises:
            SearchError: On transport, status or deserialization failures
        """
        body = query.to_request_body()
        logger.info("Search request: %s", body)

        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self.transport
        ) as client:
            for attempt, delay in enumerate(
                itertools.islice(
                    exponential_backoff(factor=self.backoff_factor),
                    self.max_retries + 1,
                )
            ):
                await asyncio.sleep(delay)  # 0, 1, 2, 4, ... seconds

                try:
                    response = await client.post(
                        self.base_url, headers=self.headers, json=body
                    )
                    response.raise_for_status()
                    data = response.json(parse_float=Decimal)
                except httpx.TimeoutException as e:
                    raise SearchError(
                        f"Search request timed out for '{query.query_text}'"
                    ) from e
                except httpx.HTTPStatusError as e:
                    status = e.response.status_code
                    if status in RETRYABLE_STATUS_CODES and attempt < self.max_retries:
                        logger.warning(
                            "Search API returned %s, retrying (attempt %s/%s)",
                            status,
                            attempt + 1,
                            self.max_retries + 1,
                        )
                        continue
                    raise SearchError(
                        f"Search API returned status {status}: {e.response.text}"
                    ) from e
                except (httpx.HTTPError, ValueError) as e:
                    raise SearchError(f"Search request failed: {e}") from e

                return self._to_result_set(query, data)

        raise SearchError("Maximum retries exceeded for search request")

    @staticmethod
    def _to_result_set(query: SearchQuery, data: object) -> SearchResultSet:
        if not isinstance(data, dict):
            raise SearchError(f"Unexpected search response: {data!r}")
        try:
            items = tuple(
                SearchResultItem.model_validate(result)
                for result in data.get("results") or []
            )
        except ValidationError as e:
            raise SearchError(f"Malformed search result: {e}") from e

        logger.info(
            "Search for '%s' returned %s results", query.query_text, len(items)
        )
        return SearchResultSet(query=query, results=items)
