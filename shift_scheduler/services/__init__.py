"""Services for scheduling logic."""

from .constraints import SearchState, can_assign_employee, effective_max_hours, rejection_reason
from .feasibility import FeasibilityMatrix, build_feasibility
from .results import build_schedule_document
from .scoring import order_candidates
from .shifts import expand_templates

__all__ = [
    "SearchState",
    "can_assign_employee",
    "effective_max_hours",
    "rejection_reason",
    "FeasibilityMatrix",
    "build_feasibility",
    "build_schedule_document",
    "order_candidates",
    "expand_templates",
]
