"""
Completion Client

Thin async wrapper around a strands Agent: one system prompt, one user
prompt, optional tools, raw text out.
"""

import asyncio
import logging
import time
import uuid

from strands import Agent
from strands.models.model import Model
from strands.types.content import ContentBlock

from .errors import CompletionError

logger = logging.getLogger(__name__)


def extract_content_text(c: ContentBlock) -> str:
    """Extract text content from a content block, skipping reasoning content."""
    return c.get("text", "")


class CompletionClient:
    """Issues system+user prompt pairs to a language model."""

    def __init__(self, model: Model, timeout: float = 300.0):
        """
        Args:
            model: Model instance shared by all calls
            timeout: Per-call timeout in seconds
        """
        self.model = model
        self.timeout = timeout

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        tools: list | None = None,
    ) -> str:
        """
        Run a single completion.

        A fresh Agent is built for every call so concurrent calls never share
        conversation history.

        Raises:
            CompletionError: If the model call fails or exceeds the timeout
        """
        call_id = str(uuid.uuid4())[:8]
        call_start = time.time()
        logger.debug(
            "[%s] Completion started (%s tools)", call_id, len(tools or [])
        )

        agent = Agent(
            model=self.model,
            system_prompt=system_prompt,
            tools=tools or [],
            callback_handler=None,
        )

        try:
            response = await asyncio.wait_for(
                agent.invoke_async(user_prompt), timeout=self.timeout
            )
        except asyncio.TimeoutError as e:
            raise CompletionError(
                f"Completion timed out after {self.timeout:.0f} seconds"
            ) from e
        except Exception as e:
            raise CompletionError(f"Completion failed: {e}") from e

        text = "".join(map(extract_content_text, response.message["content"]))
        logger.debug(
            "[%s] Completion finished in %.2f seconds",
            call_id,
            time.time() - call_start,
        )
        return text
