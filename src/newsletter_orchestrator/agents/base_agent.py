"""
Base agent functionality and common utilities.
"""

from ..completion import CompletionClient
from ..errors import InvalidInput
from ..types import SearchResultSet
from .serialization import ItemSerializer, serialize_result_item, serialize_results


class BaseAgent:
    """Base class for all newsletter agents providing common functionality."""

    def __init__(
        self,
        completion_client: CompletionClient,
        system_prompt: str,
        serializer: ItemSerializer = serialize_result_item,
    ):
        """
        Initialize base agent.

        Args:
            completion_client: Client used for the stage's completion call
            system_prompt: System prompt defining agent behavior
            serializer: Per-item serializer for search results
        """
        self.completion_client = completion_client
        self.system_prompt = system_prompt
        self.serializer = serializer

    @staticmethod
    def validate_input(results: SearchResultSet | None) -> None:
        """Reject missing or empty result sets before any model call."""
        if results is None:
            raise InvalidInput("Search results cannot be None")
        if results.is_empty:
            raise InvalidInput(
                f"Search for '{results.query.query_text}' must contain results"
            )

    def serialize_results(self, results: SearchResultSet) -> str:
        return serialize_results(results.results, self.serializer)

    def build_system_prompt(self) -> str:
        return self.system_prompt

    async def complete(self, user_prompt: str, tools: list | None = None) -> str:
        return await self.completion_client.complete(
            self.build_system_prompt(), user_prompt, tools
        )
