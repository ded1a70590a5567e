"""
Search Package

Provides the web search client used by the planning and drafting stages.
"""

from .tavily import TavilySearchClient

__all__ = ["TavilySearchClient"]
