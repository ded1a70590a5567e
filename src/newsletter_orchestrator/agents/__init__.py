"""
Agents package for newsletter production.

This package contains the planning, section writing and editing agents.
"""

from .editor_agent import EditorAgent
from .planning_agent import PlanningAgent
from .section_writer import SectionWriterAgent

__all__ = [
    "EditorAgent",
    "PlanningAgent",
    "SectionWriterAgent",
]
