"""
Planning agent implementation.

Turns the seed search results into a newsletter title and section topics.
"""

import logging

from ..completion import CompletionClient
from ..errors import PlanningFailed
from ..parsing import OutputParser, TopicPlanParser
from ..types import SearchResultSet, TopicPlan
from .base_agent import BaseAgent
from .serialization import ItemSerializer, serialize_result_item

logger = logging.getLogger(__name__)

PLANNING_AGENT_SYSTEM_PROMPT = """You are the planning editor of a weekly technology newsletter.

You will receive a set of recent web search results, one JSON object per result.

## YOUR TASK
1. Read every result and identify the developments readers will care about this week
2. Choose a short, specific title for this edition
3. Pick 3-5 distinct section topics, each narrow enough to research with a single web search
4. Order the topics from most to least important

## TOPIC RULES
- Each topic is a short search-friendly phrase (2-6 words)
- Topics must be grounded in the supplied results, not general knowledge
- Avoid topics that overlap heavily with each other

## OUTPUT FORMAT
{format_instructions}"""


class PlanningAgent(BaseAgent):
    """Produces the TopicPlan for a newsletter run."""

    def __init__(
        self,
        completion_client: CompletionClient,
        serializer: ItemSerializer = serialize_result_item,
    ):
        """
        Initialize the planning agent.

        Args:
            completion_client: Client used for the planning completion call
            serializer: Per-item serializer for search results
        """
        self.parser: OutputParser[TopicPlan] = TopicPlanParser()
        super().__init__(
            completion_client,
            PLANNING_AGENT_SYSTEM_PROMPT.replace(
                "{format_instructions}", self.parser.format_instructions()
            ),
            serializer,
        )

    async def plan(self, results: SearchResultSet) -> TopicPlan:
        """
        Plan the newsletter from seed search results.

        Args:
            results: Seed search results (must be non-empty)

        Returns:
            The newsletter title and ordered section topics

        Raises:
            InvalidInput: If results are empty (no model call is made)
            PlanningFailed: If serialization, completion or parsing fails
        """
        self.validate_input(results)

        try:
            serialized_results = self.serialize_results(results)
            raw = await self.complete(serialized_results)
            topic_plan = self.parser.parse(raw)
        except Exception as e:
            logger.error("Planning failed: %s", e)
            raise PlanningFailed(f"Topic planning failed: {e}", e) from e

        logger.info(
            "Planned '%s' with %s topics: %s",
            topic_plan.title,
            len(topic_plan.topics),
            topic_plan.topics,
        )
        return topic_plan
