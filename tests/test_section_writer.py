"""
Unit tests for SectionWriterAgent.
"""

import pytest

from newsletter_orchestrator.agents import SectionWriterAgent
from newsletter_orchestrator.errors import (
    CompletionError,
    InvalidInput,
    SectionWriteFailed,
)
from newsletter_orchestrator.types import SectionDraft


class TestSectionWriterAgent:
    """Test cases for SectionWriterAgent."""

    @pytest.fixture
    def agent(self, mock_completion_client):
        return SectionWriterAgent(mock_completion_client)

    @pytest.mark.asyncio
    async def test_write_success(self, agent, mock_completion_client, result_set):
        mock_completion_client.complete.return_value = (
            "<think>outline first</think>\n## Agentic workflows\nBody text."
        )

        draft = await agent.write(result_set, "Agentic workflows")

        assert draft == SectionDraft(
            topic="Agentic workflows", body="\n## Agentic workflows\nBody text."
        )

    @pytest.mark.asyncio
    async def test_prompt_contains_topic_and_research(
        self, agent, mock_completion_client, result_set
    ):
        mock_completion_client.complete.return_value = "Body"

        await agent.write(result_set, "Vector databases")

        system_prompt, user_prompt, _ = mock_completion_client.complete.call_args.args
        assert "newsletter writer" in system_prompt
        assert 'topic: "Vector databases"' in user_prompt
        for item in result_set.results:
            assert item.url in user_prompt

    @pytest.mark.asyncio
    async def test_topic_with_braces_is_inserted_verbatim(
        self, agent, mock_completion_client, result_set
    ):
        mock_completion_client.complete.return_value = "Body"

        await agent.write(result_set, "C++ {templates}")

        user_prompt = mock_completion_client.complete.call_args.args[1]
        assert "C++ {templates}" in user_prompt

    @pytest.mark.asyncio
    async def test_empty_results_fail_fast(
        self, agent, mock_completion_client, empty_result_set
    ):
        with pytest.raises(InvalidInput):
            await agent.write(empty_result_set, "Fine-tuning")

        assert mock_completion_client.complete.await_count == 0

    @pytest.mark.asyncio
    async def test_total_serialization_failure_tagged_with_topic(
        self, mock_completion_client, make_result_set
    ):
        def serializer(item):
            raise TypeError("bad item")

        agent = SectionWriterAgent(mock_completion_client, serializer=serializer)

        with pytest.raises(SectionWriteFailed) as exc_info:
            await agent.write(make_result_set("x", 5), "Fine-tuning")

        assert exc_info.value.topic == "Fine-tuning"
        assert mock_completion_client.complete.await_count == 0

    @pytest.mark.asyncio
    async def test_completion_error_tagged_with_topic(
        self, agent, mock_completion_client, result_set
    ):
        error = CompletionError("timeout")
        mock_completion_client.complete.side_effect = error

        with pytest.raises(SectionWriteFailed) as exc_info:
            await agent.write(result_set, "Vector databases")

        assert exc_info.value.topic == "Vector databases"
        assert exc_info.value.cause is error
        assert "Vector databases" in str(exc_info.value)
