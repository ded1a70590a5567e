"""
Newsletter Orchestrator - Main Entry Point

Produces one newsletter with the configured settings and exits with a
non-zero status if the run fails.
"""

import asyncio
import sys

from newsletter_orchestrator import create_orchestrator
from newsletter_orchestrator.errors import PipelineFailed


async def main() -> int:
    orchestrator = create_orchestrator()

    try:
        newsletter = await orchestrator.run_once()
    except PipelineFailed as e:
        print(f"❌ Newsletter run failed during {e.stage.value}: {e.cause}")
        return 1

    print(f"✨ Newsletter sent: {newsletter.title}")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
