"""
Newsletter Orchestrator - Command Line Entry Point

Runs a single newsletter immediately, or keeps running and produces one on
the configured weekly schedule.
"""

import argparse
import asyncio
import sys

from newsletter_orchestrator import create_orchestrator, setup_logging
from newsletter_orchestrator.errors import PipelineFailed
from newsletter_orchestrator.scheduler import start_scheduler
from newsletter_orchestrator.settings import get_settings


async def run(args: argparse.Namespace) -> int:
    settings = get_settings()
    if args.seed_query:
        settings = settings.model_copy(update={"seed_query": args.seed_query})

    orchestrator = create_orchestrator(settings)

    print("📰 Newsletter Orchestrator")
    print("=" * 50)
    print(f"🔎 Seed Query: {settings.seed_query}")
    print("=" * 50)

    try:
        newsletter = await orchestrator.run_once()
    except PipelineFailed as e:
        print(f"❌ Newsletter run failed during {e.stage.value}: {e.cause}")
        return 1

    print(f"\n✨ Newsletter Complete: {newsletter.title}")
    print("=" * 60)
    print(newsletter.body)
    print("=" * 60)
    return 0


async def schedule(args: argparse.Namespace) -> int:
    settings = get_settings()
    scheduler = start_scheduler(settings, create_orchestrator(settings))
    print(
        f"⏰ Weekly newsletter scheduled for {settings.schedule_day_of_week} "
        f"at {settings.schedule_hour:02d}:{settings.schedule_minute:02d}"
    )
    try:
        await asyncio.Event().wait()
    finally:
        scheduler.shutdown(wait=False)
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Automated Newsletter Orchestration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python cli/main.py run
  python cli/main.py run --seed-query "Open source LLM releases"
  python cli/main.py schedule
        """,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Produce one newsletter now")
    run_parser.add_argument(
        "--seed-query", help="Override the configured seed search query"
    )
    run_parser.set_defaults(handler=run)

    schedule_parser = subparsers.add_parser(
        "schedule", help="Produce a newsletter on the weekly schedule"
    )
    schedule_parser.set_defaults(handler=schedule)

    args = parser.parse_args()
    setup_logging(get_settings().log_dir)

    try:
        return asyncio.run(args.handler(args))
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
