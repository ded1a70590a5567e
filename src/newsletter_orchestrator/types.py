"""
Common type definitions for the newsletter orchestrator.

Search and plan types are pydantic models so they can be validated from JSON;
drafting types are plain frozen dataclasses passed between stages.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

TimeRange = Literal["day", "week", "month", "year"]
TopicCategory = Literal["general", "news", "finance"]
RawContentMode = Literal["none", "text", "markdown"]
NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

SECTION_SEPARATOR = "\n\n\n"


class PipelineStage(str, Enum):
    """States of a single newsletter run."""

    IDLE = "idle"
    SEARCHING = "searching"
    PLANNING = "planning"
    DRAFTING = "drafting"
    EDITING = "editing"
    DONE = "done"
    FAILED = "failed"


class SearchQuery(BaseModel):
    """Parameters for one web search call."""

    model_config = ConfigDict(frozen=True)

    query_text: str = Field(min_length=1)
    time_range: TimeRange | None = None
    topic_category: TopicCategory | None = None
    max_results: int = Field(default=5, gt=0)
    raw_content_mode: RawContentMode | None = None
    include_domains: frozenset[str] | None = None

    def to_request_body(self) -> dict[str, Any]:
        """Render the Tavily request body, omitting options that were not set."""
        body: dict[str, Any] = {
            "query": self.query_text,
            "max_results": self.max_results,
        }
        if self.time_range is not None:
            body["time_range"] = self.time_range
        if self.topic_category is not None:
            body["topic"] = self.topic_category
        if self.raw_content_mode is not None:
            body["include_raw_content"] = (
                False if self.raw_content_mode == "none" else self.raw_content_mode
            )
        if self.include_domains:
            body["include_domains"] = sorted(self.include_domains)
        return body


class SearchResultItem(BaseModel):
    """Individual search result from the search API."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    url: str = ""
    content: str = ""
    raw_content: str | None = None
    score: Decimal = Decimal(0)


class SearchResultSet(BaseModel):
    """Search results in the order the search API returned them."""

    model_config = ConfigDict(frozen=True)

    query: SearchQuery
    results: tuple[SearchResultItem, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.results


class TopicPlan(BaseModel):
    """Newsletter title and the ordered section topics to draft."""

    title: NonBlankStr
    topics: list[NonBlankStr] = Field(min_length=1)


@dataclass(frozen=True)
class SectionDraft:
    """Drafted prose for one planned topic."""

    topic: str
    body: str


@dataclass(frozen=True)
class NewsletterDraft:
    """All drafted sections, in the planned topic order."""

    title: str
    sections: tuple[SectionDraft, ...]


@dataclass(frozen=True)
class FinalNewsletter:
    """Edited newsletter copy produced by the editor stage."""

    title: str
    body: str


def join_sections(sections: "tuple[SectionDraft, ...] | list[SectionDraft]") -> str:
    """Join section bodies in the given order."""
    return SECTION_SEPARATOR.join(section.body for section in sections)
