"""
Search result serialization for prompts.

Each result item is serialized on its own so a single bad item is dropped
instead of failing the whole prompt.
"""

import logging
from collections.abc import Callable, Iterable

from ..errors import NewsletterError
from ..types import SearchResultItem

logger = logging.getLogger(__name__)

RESULTS_SEPARATOR = "\n\n"

ItemSerializer = Callable[[SearchResultItem], str]


def serialize_result_item(item: SearchResultItem) -> str:
    """Serialize a single result item to JSON."""
    return item.model_dump_json()


def safe_serialize(
    item: SearchResultItem, serializer: ItemSerializer = serialize_result_item
) -> str | None:
    """Serialize an item, returning None and logging if it fails."""
    try:
        return serializer(item)
    except Exception:
        logger.warning("Failed to serialize result item: %s", item.url, exc_info=True)
        return None


def serialize_results(
    items: Iterable[SearchResultItem],
    serializer: ItemSerializer = serialize_result_item,
) -> str:
    """
    Serialize result items and join the survivors with a blank line.

    Raises:
        NewsletterError: If no item could be serialized
    """
    serialized = [
        text
        for text in (safe_serialize(item, serializer) for item in items)
        if text is not None
    ]
    if not serialized:
        raise NewsletterError("No search results could be serialized")
    return RESULTS_SEPARATOR.join(serialized)
