"""
Editor agent implementation.

Merges drafted sections into the final newsletter. The agent is given the
delivery tools and decides on its own whether to send the result.
"""

import logging
from collections.abc import Callable, Sequence
from datetime import date

from ..completion import CompletionClient
from ..errors import EditFailed
from ..parsing import OutputParser, PlainTextParser
from ..types import FinalNewsletter, SectionDraft, join_sections
from .base_agent import BaseAgent

logger = logging.getLogger(__name__)

EDITOR_AGENT_SYSTEM_PROMPT = """You are the chief editor of a weekly technology newsletter. Today's date is {date}.

## YOUR TASK
1. Merge the drafted sections into one coherent newsletter under the given title
2. Write a short introduction and a one-paragraph closing
3. Remove repetition between sections and keep each section's sources
4. Drop or flag anything that is clearly stale relative to today's date
5. Format the newsletter as clean HTML suitable for an email body

## DELIVERY
When the newsletter is final, send it ONCE using the send_email tool with the
newsletter title as the subject and the full HTML newsletter as the content.

Return ONLY the final newsletter."""

EDITOR_AGENT_PROMPT_TEMPLATE = """Newsletter title: {title}

---DRAFTED SECTIONS---
{sections}
---END SECTIONS---"""


class EditorAgent(BaseAgent):
    """Edits drafted sections into the final newsletter and triggers delivery."""

    def __init__(
        self,
        completion_client: CompletionClient,
        tools: list | None = None,
        today: Callable[[], date] = date.today,
    ):
        """
        Initialize the editor agent.

        Args:
            completion_client: Client used for the editing completion call
            tools: Delivery tools offered to the model during editing
            today: Date provider used to date the system prompt
        """
        super().__init__(completion_client, EDITOR_AGENT_SYSTEM_PROMPT)
        self.tools = tools or []
        self.today = today
        self.parser: OutputParser[str] = PlainTextParser()

    def build_system_prompt(self) -> str:
        """Fill in today's date at call time."""
        return self.system_prompt.format(date=self.today().isoformat())

    async def edit(
        self, sections: Sequence[SectionDraft], title: str
    ) -> FinalNewsletter:
        """
        Produce the final newsletter.

        Args:
            sections: Drafted sections in newsletter order
            title: Newsletter title from the topic plan

        Returns:
            The final newsletter copy

        Raises:
            EditFailed: If the completion call fails
        """
        try:
            user_prompt = EDITOR_AGENT_PROMPT_TEMPLATE.format(
                title=title, sections=join_sections(list(sections))
            )
            raw = await self.complete(user_prompt, self.tools)
        except Exception as e:
            logger.error("Editing failed for '%s': %s", title, e)
            raise EditFailed(f"Editing failed for '{title}': {e}", e) from e

        return FinalNewsletter(title=title, body=self.parser.parse(raw))
