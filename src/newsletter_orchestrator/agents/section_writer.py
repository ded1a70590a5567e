"""
Section writer agent implementation.

Drafts one newsletter section from targeted search results for a topic.
"""

import logging
import time

from ..completion import CompletionClient
from ..errors import SectionWriteFailed
from ..parsing import OutputParser, PlainTextParser
from ..types import SearchResultSet, SectionDraft
from .base_agent import BaseAgent
from .serialization import ItemSerializer, serialize_result_item

logger = logging.getLogger(__name__)

SECTION_WRITER_SYSTEM_PROMPT = """You are a newsletter writer producing ONE concise section of a weekly technology newsletter.

## STRUCTURE
**Heading:** A clear, specific heading for the section
**Lead:** One or two sentences stating why this matters now
**Body:** 2-3 short paragraphs covering the key facts, numbers and who is involved
**Sources:** A short list of the URLs you drew on

## WRITING STYLE
- Informative and direct; write for busy technical readers
- Use only facts present in the supplied research
- Prefer concrete details over general statements
- No marketing language, no filler

Return ONLY the section text."""

SECTION_WRITER_PROMPT_TEMPLATE = """Write the newsletter section for the topic: "{topic}"

---RESEARCH---
{research}
---END RESEARCH---"""


class SectionWriterAgent(BaseAgent):
    """Writes a single newsletter section for a planned topic."""

    def __init__(
        self,
        completion_client: CompletionClient,
        serializer: ItemSerializer = serialize_result_item,
    ):
        """
        Initialize the section writer.

        Args:
            completion_client: Client used for the drafting completion call
            serializer: Per-item serializer for search results
        """
        super().__init__(completion_client, SECTION_WRITER_SYSTEM_PROMPT, serializer)
        self.parser: OutputParser[str] = PlainTextParser()

    async def write(self, results: SearchResultSet, topic: str) -> SectionDraft:
        """
        Draft the section for a topic.

        Args:
            results: Search results for the topic (must be non-empty)
            topic: The planned topic this section covers

        Returns:
            The drafted section

        Raises:
            InvalidInput: If results are empty (no model call is made)
            SectionWriteFailed: If serialization or completion fails
        """
        self.validate_input(results)

        write_start = time.time()
        try:
            research = self.serialize_results(results)
            user_prompt = SECTION_WRITER_PROMPT_TEMPLATE.format(
                topic=topic, research=research
            )
            raw = await self.complete(user_prompt)
        except Exception as e:
            raise SectionWriteFailed(topic, e) from e

        body = self.parser.parse(raw)
        logger.info(
            "Drafted section '%s' (%s chars) in %.2f seconds",
            topic,
            len(body),
            time.time() - write_start,
        )
        return SectionDraft(topic=topic, body=body)
