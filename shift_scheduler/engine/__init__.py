"""Scheduling engine: backtracking search and the run entry point."""

from .orchestrator import generate_schedule
from .search import AssignmentSearch, SearchFrame

__all__ = [
    "AssignmentSearch",
    "SearchFrame",
    "generate_schedule",
]
