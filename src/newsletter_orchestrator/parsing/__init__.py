"""
Model output parsing.

Scaffold removal and structured parsing of language model responses.
"""

from .output_parser import (
    ModelOutputParser,
    OutputParser,
    PlainTextParser,
    TopicPlanParser,
    strip_scaffold,
)

__all__ = [
    "ModelOutputParser",
    "OutputParser",
    "PlainTextParser",
    "TopicPlanParser",
    "strip_scaffold",
]
