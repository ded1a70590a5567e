"""
Structured output parsing for model responses.

Removes <think> reasoning blocks from raw model text and converts the
remainder into either a validated pydantic model or a plain string.
"""

import re
from typing import Generic, Protocol, TypeVar

from pydantic import BaseModel, ValidationError

from ..errors import ParseError
from ..types import TopicPlan

T = TypeVar("T")
ModelT = TypeVar("ModelT", bound=BaseModel)

SCAFFOLD_PATTERN = re.compile(r"<think>.*?</think>", re.DOTALL)
CODE_FENCE_PATTERN = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


def strip_scaffold(text: str) -> str:
    """Remove every <think>...</think> block from model output."""
    # Repeat until stable: removing one block can join the halves of another.
    while True:
        stripped = SCAFFOLD_PATTERN.sub("", text)
        if stripped == text:
            return stripped
        text = stripped


class OutputParser(Protocol[T]):
    """Converts raw model text into a typed result."""

    def parse(self, raw: str) -> T: ...

    def format_instructions(self) -> str: ...


class ModelOutputParser(Generic[ModelT]):
    """Parses a single JSON object into the given pydantic model."""

    def __init__(self, model_cls: type[ModelT]):
        self.model_cls = model_cls

    def parse(self, raw: str) -> ModelT:
        text = strip_scaffold(raw).strip()
        fenced = CODE_FENCE_PATTERN.match(text)
        if fenced:
            text = fenced.group(1)

        try:
            return self.model_cls.model_validate_json(text)
        except ValidationError as e:
            raise ParseError(
                f"Output does not match {self.model_cls.__name__}: "
                f"{e.error_count()} validation error(s)",
                raw,
            ) from e

    def format_instructions(self) -> str:
        fields = ", ".join(f'"{name}"' for name in self.model_cls.model_fields)
        return (
            f"Respond with a VALID JSON OBJECT containing the fields {fields}. "
            "Output ONLY the JSON object."
        )


class TopicPlanParser(ModelOutputParser[TopicPlan]):
    """Parser for the planning stage output."""

    def __init__(self):
        super().__init__(TopicPlan)

    def format_instructions(self) -> str:
        return """Respond with a VALID JSON OBJECT containing:
    - "title": a string (the newsletter title)
    - "topics": an array of strings (one entry per newsletter section)

Example format:
    {"title": "Weekly Tech Digest", "topics": ["AI", "Blockchain", "Cybersecurity"]}

CRITICAL RULES:
    1. Output ONLY the JSON object (no additional text, explanations, or markdown)
    2. If reasoning is needed, wrap it in <think> tags BEFORE the JSON
    3. Ensure JSON is valid (proper quotes, commas, brackets)"""


class PlainTextParser:
    """Returns model output unchanged apart from scaffold removal."""

    def parse(self, raw: str) -> str:
        return strip_scaffold(raw)

    def format_instructions(self) -> str:
        return ""
