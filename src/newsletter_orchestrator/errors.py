"""
Exception hierarchy for the newsletter pipeline.

Adapter errors (search, completion) and parse errors are wrapped by the stage
that hit them; the orchestrator wraps every stage failure in PipelineFailed.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import PipelineStage


class NewsletterError(Exception):
    """Base class for all newsletter pipeline errors."""


class InvalidInput(NewsletterError):
    """A precondition was violated before any external call was made."""


class SearchError(NewsletterError):
    """The search API could not be reached or returned an unusable response."""


class CompletionError(NewsletterError):
    """The language model call failed or timed out."""


class ParseError(NewsletterError):
    """Model output did not match the expected shape."""

    def __init__(self, message: str, raw_text: str):
        super().__init__(f"{message}. Raw output: {raw_text!r}")
        self.raw_text = raw_text


class StageError(NewsletterError):
    """Base class for stage-level failures that wrap an underlying cause."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class PlanningFailed(StageError):
    """Topic planning failed; no partial plan is usable."""


class SectionWriteFailed(StageError):
    """Drafting a single section failed."""

    def __init__(self, topic: str, cause: BaseException | None = None):
        super().__init__(f"Section write failed for topic '{topic}': {cause}", cause)
        self.topic = topic


class EditFailed(StageError):
    """The editor stage failed; the newsletter was never finalized."""


class PipelineFailed(NewsletterError):
    """Terminal failure of a pipeline run, tagged with the stage that failed."""

    def __init__(
        self,
        stage: "PipelineStage",
        cause: BaseException,
        topic: str | None = None,
    ):
        location = f"{stage.value}" + (f" (topic '{topic}')" if topic else "")
        super().__init__(f"Newsletter run failed during {location}: {cause}")
        self.stage = stage
        self.cause = cause
        self.topic = topic
