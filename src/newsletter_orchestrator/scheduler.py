import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from .errors import PipelineFailed
from .orchestrator import NewsletterOrchestrator
from .settings import Settings

logger = logging.getLogger(__name__)


async def run_newsletter_job(orchestrator: NewsletterOrchestrator) -> None:
    """Scheduled job: one run, failures logged so the schedule keeps going."""
    try:
        await orchestrator.run_once()
    except PipelineFailed as e:
        logger.error("Scheduled newsletter run failed: %s", e)


def register_jobs(
    scheduler: AsyncIOScheduler,
    settings: Settings,
    orchestrator: NewsletterOrchestrator,
) -> None:
    """Register the weekly newsletter job."""
    scheduler.add_job(
        run_newsletter_job,
        "cron",
        args=[orchestrator],
        day_of_week=settings.schedule_day_of_week,
        hour=settings.schedule_hour,
        minute=settings.schedule_minute,
        id="weekly_newsletter",
        replace_existing=True,
        max_instances=1,
    )

    logger.info(
        "Jobs registered: weekly newsletter on %s at %02d:%02d",
        settings.schedule_day_of_week,
        settings.schedule_hour,
        settings.schedule_minute,
    )


def start_scheduler(
    settings: Settings, orchestrator: NewsletterOrchestrator
) -> AsyncIOScheduler:
    """Create and start the scheduler on the running event loop."""
    scheduler = AsyncIOScheduler()
    register_jobs(scheduler, settings, orchestrator)
    scheduler.start()
    logger.info("Scheduler started")
    return scheduler
