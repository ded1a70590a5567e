"""
Newsletter Orchestration Logic

Runs one newsletter end to end: seed search, topic planning, concurrent
per-topic research and drafting, then editing and delivery.
"""

import asyncio
import time
import uuid

from .agents import EditorAgent, PlanningAgent, SectionWriterAgent
from .errors import InvalidInput, PipelineFailed
from .logger import setup_logging
from .search import TavilySearchClient
from .types import (
    FinalNewsletter,
    NewsletterDraft,
    PipelineStage,
    SearchQuery,
    SectionDraft,
    TopicPlan,
)


class NewsletterOrchestrator:
    """
    Sequences the newsletter stages and fans drafting out across topics.

    Stages run strictly in order. Drafting units run concurrently up to
    max_concurrent_sections and are joined before editing starts; any failed
    unit fails the whole run.
    """

    def __init__(
        self,
        search_client: TavilySearchClient,
        planning_agent: PlanningAgent,
        section_writer: SectionWriterAgent,
        editor_agent: EditorAgent,
        *,
        seed_query: str = "AI agents trends",
        topic_max_results: int = 3,
        max_concurrent_sections: int | None = None,
    ):
        if max_concurrent_sections is not None and max_concurrent_sections < 1:
            raise ValueError("max_concurrent_sections must be at least 1")

        self.search_client = search_client
        self.planning_agent = planning_agent
        self.section_writer = section_writer
        self.editor_agent = editor_agent
        self.seed_query = seed_query
        self.topic_max_results = topic_max_results
        self.max_concurrent_sections = max_concurrent_sections

        self.newsletter_logger = setup_logging()
        self.state = PipelineStage.IDLE

    def create_seed_search(self) -> SearchQuery:
        return SearchQuery(query_text=self.seed_query, time_range="week")

    def create_topic_search(self, topic: str) -> SearchQuery:
        return SearchQuery(
            query_text=topic,
            time_range="month",
            raw_content_mode="text",
            max_results=self.topic_max_results,
        )

    def _enter(self, stage: PipelineStage, run_id: str) -> None:
        self.state = stage
        self.newsletter_logger.info(f"➡️ [{run_id}] Stage: {stage.value}")

    async def run_once(self) -> FinalNewsletter:
        """
        Produce and deliver one newsletter.

        Returns:
            The final newsletter

        Raises:
            PipelineFailed: Tagged with the stage (and topic, when drafting)
                that failed. Cancellation propagates unchanged.
        """
        run_id = str(uuid.uuid4())
        run_start = time.time()
        self.newsletter_logger.info(
            f"🚀 [{run_id}] Starting newsletter run for seed query: {self.seed_query}"
        )

        try:
            self._enter(PipelineStage.SEARCHING, run_id)
            seed_results = await self.search_client.search(self.create_seed_search())
            if seed_results.is_empty:
                raise InvalidInput(
                    f"Seed search for '{self.seed_query}' returned no results"
                )

            self._enter(PipelineStage.PLANNING, run_id)
            topic_plan = await self.planning_agent.plan(seed_results)
            self.newsletter_logger.info(
                f"📋 [{run_id}] Planned topics: {topic_plan.topics}"
            )

            self._enter(PipelineStage.DRAFTING, run_id)
            draft = await self.draft_sections(topic_plan, run_id)

            self._enter(PipelineStage.EDITING, run_id)
            newsletter = await self.editor_agent.edit(draft.sections, draft.title)

        except PipelineFailed as e:
            self._fail(run_id, run_start, e)
            raise
        except asyncio.CancelledError:
            self.newsletter_logger.warning(
                f"🛑 [{run_id}] Newsletter run cancelled during {self.state.value}"
            )
            self.state = PipelineStage.FAILED
            raise
        except Exception as e:
            failure = PipelineFailed(self.state, e)
            self._fail(run_id, run_start, failure)
            raise failure from e

        self.state = PipelineStage.DONE
        self.newsletter_logger.info(
            f"🎯 [{run_id}] Newsletter '{newsletter.title}' finished in "
            f"{time.time() - run_start:.2f} seconds total"
        )
        self.newsletter_logger.info(newsletter.body)
        return newsletter

    def _fail(self, run_id: str, run_start: float, failure: PipelineFailed) -> None:
        self.state = PipelineStage.FAILED
        self.newsletter_logger.error(
            f"❌ [{run_id}] {failure} (after {time.time() - run_start:.2f} seconds)"
        )

    async def draft_sections(self, topic_plan: TopicPlan, run_id: str) -> NewsletterDraft:
        """
        Research and write every planned topic concurrently.

        Results are joined by topic index, so the draft keeps the planned
        order regardless of completion order.

        Raises:
            PipelineFailed: For the lowest-index failed topic, after all units
                have finished
        """
        topics = topic_plan.topics
        semaphore = asyncio.Semaphore(self.max_concurrent_sections or len(topics))
        drafting_start = time.time()
        self.newsletter_logger.info(
            f"⚡ [{run_id}] Dispatching {len(topics)} drafting units"
        )

        async def draft_unit(topic: str, index: int) -> SectionDraft:
            unit_id = f"{run_id}-{index}"
            async with semaphore:
                unit_start = time.time()
                results = await self.search_client.search(
                    self.create_topic_search(topic)
                )
                section = await self.section_writer.write(results, topic)
            self.newsletter_logger.info(
                f"  ✅ [{unit_id}] Drafted '{topic}' in "
                f"{time.time() - unit_start:.2f} seconds"
            )
            return section

        outcomes = await asyncio.gather(
            *(draft_unit(topic, i) for i, topic in enumerate(topics)),
            return_exceptions=True,
        )

        failures = [
            (topic, outcome)
            for topic, outcome in zip(topics, outcomes)
            if isinstance(outcome, BaseException)
        ]
        for topic, error in failures:
            self.newsletter_logger.error(
                f"  ❌ [{run_id}] Drafting failed for '{topic}': {error}"
            )
        if failures:
            topic, error = failures[0]
            raise PipelineFailed(PipelineStage.DRAFTING, error, topic=topic) from error

        self.newsletter_logger.info(
            f"🎯 [{run_id}] Drafted {len(outcomes)} sections in "
            f"{time.time() - drafting_start:.2f} seconds"
        )
        return NewsletterDraft(
            title=topic_plan.title,
            sections=tuple(outcomes),  # type: ignore[arg-type]
        )
