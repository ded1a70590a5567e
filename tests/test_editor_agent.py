"""
Unit tests for EditorAgent and the delivery tool it is given.
"""

from datetime import date
from unittest.mock import Mock

import pytest

from newsletter_orchestrator.agents import EditorAgent
from newsletter_orchestrator.delivery import EmailService, create_delivery_tools
from newsletter_orchestrator.errors import CompletionError, EditFailed
from newsletter_orchestrator.types import SECTION_SEPARATOR, SectionDraft

SECTIONS = [
    SectionDraft(topic="B", body="Second topic first"),
    SectionDraft(topic="A", body="First topic second"),
    SectionDraft(topic="A", body="First topic second"),
]


class TestEditorAgent:
    """Test cases for EditorAgent."""

    @pytest.fixture
    def tools(self):
        return [Mock(name="send_email")]

    @pytest.fixture
    def agent(self, mock_completion_client, tools):
        return EditorAgent(
            mock_completion_client, tools=tools, today=lambda: date(2026, 10, 18)
        )

    @pytest.mark.asyncio
    async def test_edit_returns_final_newsletter(self, agent, mock_completion_client):
        mock_completion_client.complete.return_value = (
            "<think>check dates</think><h1>Weekly AI Digest</h1>"
        )

        newsletter = await agent.edit(SECTIONS, "Weekly AI Digest")

        assert newsletter.title == "Weekly AI Digest"
        assert newsletter.body == "<h1>Weekly AI Digest</h1>"

    @pytest.mark.asyncio
    async def test_prompts_keep_section_order_and_date(
        self, agent, mock_completion_client, tools
    ):
        mock_completion_client.complete.return_value = "final"

        await agent.edit(SECTIONS, "Weekly AI Digest")

        system_prompt, user_prompt, passed_tools = (
            mock_completion_client.complete.call_args.args
        )
        assert "2026-10-18" in system_prompt
        assert "send_email" in system_prompt
        assert "Weekly AI Digest" in user_prompt
        assert SECTION_SEPARATOR.join(s.body for s in SECTIONS) in user_prompt
        assert passed_tools is tools

    @pytest.mark.asyncio
    async def test_system_prompt_dated_on_each_call(self, mock_completion_client):
        days = iter([date(2026, 10, 18), date(2026, 10, 25)])
        agent = EditorAgent(mock_completion_client, today=lambda: next(days))
        mock_completion_client.complete.return_value = "final"

        await agent.edit(SECTIONS, "Week one")
        await agent.edit(SECTIONS, "Week two")

        first, second = mock_completion_client.complete.call_args_list
        assert "2026-10-18" in first.args[0]
        assert "2026-10-25" in second.args[0]
        assert "{date}" not in second.args[0]

    @pytest.mark.asyncio
    async def test_completion_error_wrapped(self, agent, mock_completion_client):
        error = CompletionError("model down")
        mock_completion_client.complete.side_effect = error

        with pytest.raises(EditFailed) as exc_info:
            await agent.edit(SECTIONS, "Weekly AI Digest")

        assert exc_info.value.cause is error


class TestDeliveryTools:
    """Test cases for the send_email tool."""

    def test_tool_reports_success(self):
        email_service = Mock(spec=EmailService)
        email_service.deliver.return_value = True
        (send_email,) = create_delivery_tools(email_service)

        result = send_email(subject="Digest", content="<p>Hi</p>")

        email_service.deliver.assert_called_once_with("Digest", "<p>Hi</p>")
        assert result == "Email sent successfully"

    def test_tool_reports_delivery_failure(self):
        email_service = Mock(spec=EmailService)
        email_service.deliver.return_value = False
        (send_email,) = create_delivery_tools(email_service)

        assert send_email(subject="Digest", content="x") == "Email could not be sent"

    def test_tool_never_raises(self):
        email_service = Mock(spec=EmailService)
        email_service.deliver.side_effect = RuntimeError("boom")
        (send_email,) = create_delivery_tools(email_service)

        result = send_email(subject="Digest", content="x")

        assert "Email could not be sent" in result
