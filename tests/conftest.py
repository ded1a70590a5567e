"""
Shared fixtures for the newsletter orchestrator tests.
"""

from decimal import Decimal
from unittest.mock import AsyncMock, Mock

import pytest

from newsletter_orchestrator.completion import CompletionClient
from newsletter_orchestrator.types import (
    SearchQuery,
    SearchResultItem,
    SearchResultSet,
)


def build_result_set(query_text: str, count: int) -> SearchResultSet:
    """Build a result set with `count` distinct items."""
    return SearchResultSet(
        query=SearchQuery(query_text=query_text),
        results=tuple(
            SearchResultItem(
                title=f"{query_text} article {i}",
                url=f"https://example.com/{i}",
                content=f"Content about {query_text} number {i}",
                score=Decimal("0.9") - Decimal(i) / 100,
            )
            for i in range(1, count + 1)
        ),
    )


@pytest.fixture
def result_set() -> SearchResultSet:
    return build_result_set("AI agent trends", 3)


@pytest.fixture
def make_result_set():
    """Factory building result sets with a given number of items."""
    return build_result_set


@pytest.fixture
def empty_result_set() -> SearchResultSet:
    return SearchResultSet(query=SearchQuery(query_text="nothing"), results=())


@pytest.fixture
def mock_completion_client():
    """Completion client whose complete() is an AsyncMock."""
    client = Mock(spec=CompletionClient)
    client.complete = AsyncMock(return_value="")
    return client
