"""
Wiring of adapters and agents from application settings.
"""

from .agents import EditorAgent, PlanningAgent, SectionWriterAgent
from .completion import CompletionClient
from .delivery import EmailService, create_delivery_tools
from .logger import setup_logging
from .models import create_model
from .orchestrator import NewsletterOrchestrator
from .search import TavilySearchClient
from .settings import Settings, get_settings


def create_orchestrator(settings: Settings | None = None) -> NewsletterOrchestrator:
    """Convenience function to build a fully wired orchestrator."""
    settings = settings or get_settings()
    setup_logging(settings.log_dir)

    search_client = TavilySearchClient(
        settings.tavily_api_key,
        settings.tavily_base_url,
        timeout=settings.search_timeout_seconds,
        max_retries=settings.search_max_retries,
    )
    completion_client = CompletionClient(
        create_model(settings), timeout=settings.completion_timeout_seconds
    )
    email_service = EmailService(
        settings.smtp_host,
        settings.smtp_port,
        settings.email_sender,
        settings.email_recipients_list,
        username=settings.smtp_username,
        password=settings.smtp_password,
        use_ssl=settings.smtp_use_ssl,
    )

    return NewsletterOrchestrator(
        search_client,
        PlanningAgent(completion_client),
        SectionWriterAgent(completion_client),
        EditorAgent(completion_client, tools=create_delivery_tools(email_service)),
        seed_query=settings.seed_query,
        topic_max_results=settings.topic_max_results,
        max_concurrent_sections=settings.max_concurrent_sections,
    )
