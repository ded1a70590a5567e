"""
Newsletter Orchestrator Package

Automated newsletter production built on the Strands Agents framework.
Plans topics from a seed search, drafts sections concurrently, then edits
and delivers the result.
"""

from newsletter_orchestrator.factory import create_orchestrator
from newsletter_orchestrator.logger import setup_logging
from newsletter_orchestrator.orchestrator import NewsletterOrchestrator

__version__ = "1.0.0"
__all__ = ["NewsletterOrchestrator", "create_orchestrator", "setup_logging"]
