"""
Unit tests for model output parsing.

Covers scaffold removal, TopicPlan parsing and the plain text path.
"""

import pytest

from newsletter_orchestrator.errors import ParseError
from newsletter_orchestrator.parsing import (
    PlainTextParser,
    TopicPlanParser,
    strip_scaffold,
)


class TestStripScaffold:
    """Test cases for strip_scaffold."""

    def test_removes_single_block(self):
        assert strip_scaffold("<think>hmm</think>Answer") == "Answer"

    def test_removes_multiline_block(self):
        text = "<think>\nline one\nline two\n</think>\nAnswer"
        assert strip_scaffold(text) == "\nAnswer"

    def test_non_greedy_keeps_text_between_blocks(self):
        text = "<think>a</think>keep<think>b</think>also"
        assert strip_scaffold(text) == "keepalso"

    def test_text_without_scaffold_unchanged(self):
        assert strip_scaffold("Plain answer") == "Plain answer"

    def test_nested_halves_are_removed(self):
        text = "<thi<think>x</think>nk>inner</think>Answer"
        assert strip_scaffold(text) == "Answer"

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "no scaffold here",
            "<think>one</think>body",
            "<think>a</think>x<think>b\nc</think>y",
            "  <think>lead</think>  padded  ",
            "<thi<think>x</think>nk>inner</think>tail",
            "unclosed <think> marker",
        ],
    )
    def test_parse_is_idempotent(self, text):
        parser = PlainTextParser()
        once = parser.parse(strip_scaffold(text))
        twice = parser.parse(strip_scaffold(once))
        assert twice == once


class TestTopicPlanParser:
    """Test cases for TopicPlanParser."""

    def setup_method(self):
        self.parser = TopicPlanParser()

    def test_parses_plain_json(self):
        plan = self.parser.parse(
            '{"title": "Weekly AI Digest", "topics": ["Agents", "RAG"]}'
        )
        assert plan.title == "Weekly AI Digest"
        assert plan.topics == ["Agents", "RAG"]

    def test_parses_after_think_block(self):
        raw = (
            "<think>\nLet me pick topics.\n</think>\n"
            '{"title": "Digest", "topics": ["A"]}'
        )
        plan = self.parser.parse(raw)
        assert plan.title == "Digest"
        assert plan.topics == ["A"]

    def test_parses_fenced_json(self):
        raw = '```json\n{"title": "Digest", "topics": ["A", "B"]}\n```'
        assert self.parser.parse(raw).topics == ["A", "B"]

    def test_keeps_duplicate_topics(self):
        plan = self.parser.parse('{"title": "T", "topics": ["A", "A", "B"]}')
        assert plan.topics == ["A", "A", "B"]

    def test_malformed_json_raises_parse_error_with_raw_text(self):
        raw = '{"title": "Digest", "topics": ['
        with pytest.raises(ParseError) as exc_info:
            self.parser.parse(raw)
        assert exc_info.value.raw_text == raw

    def test_missing_field_raises_parse_error(self):
        with pytest.raises(ParseError):
            self.parser.parse('{"title": "Digest"}')

    def test_empty_topics_raises_parse_error(self):
        with pytest.raises(ParseError):
            self.parser.parse('{"title": "Digest", "topics": []}')

    def test_empty_title_raises_parse_error(self):
        with pytest.raises(ParseError):
            self.parser.parse('{"title": "", "topics": ["A"]}')

    def test_blank_title_raises_parse_error(self):
        with pytest.raises(ParseError):
            self.parser.parse('{"title": "   ", "topics": ["Agents"]}')

    @pytest.mark.parametrize("topics", ['[""]', '["", "Agents"]', '["Agents", "  "]'])
    def test_blank_topic_raises_parse_error(self, topics):
        with pytest.raises(ParseError):
            self.parser.parse(f'{{"title": "Digest", "topics": {topics}}}')

    def test_title_and_topics_are_trimmed(self):
        plan = self.parser.parse('{"title": " Digest ", "topics": [" Agents "]}')
        assert plan.title == "Digest"
        assert plan.topics == ["Agents"]

    def test_format_instructions_describe_shape(self):
        instructions = self.parser.format_instructions()
        assert '"title"' in instructions
        assert '"topics"' in instructions
        assert "Output ONLY the JSON object" in instructions
        assert "<think>" in instructions


class TestPlainTextParser:
    """Test cases for PlainTextParser."""

    def test_strips_scaffold_only(self):
        parser = PlainTextParser()
        assert parser.parse("<think>plan</think>\n\nSection text\n") == (
            "\n\nSection text\n"
        )

    def test_never_fails_on_arbitrary_text(self):
        parser = PlainTextParser()
        assert parser.parse("{not json") == "{not json"

    def test_format_instructions_empty(self):
        assert PlainTextParser().format_instructions() == ""
