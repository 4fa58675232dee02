"""Orchestrator - runs one complete scheduling pass for a week."""

from __future__ import annotations

import logging
import time
from typing import Optional, Sequence

from shift_scheduler.config import Settings
from shift_scheduler.domain.models import (
    EmployeeProfile,
    FailureKind,
    ScheduleResult,
    ShiftTemplate,
)
from shift_scheduler.services.feasibility import build_feasibility
from shift_scheduler.services.results import build_schedule_document
from shift_scheduler.services.shifts import expand_templates

from .search import AssignmentSearch


logger = logging.getLogger(__name__)


def _validate_inputs(
    employees: Sequence[EmployeeProfile],
    shift_templates: Sequence[ShiftTemplate],
) -> None:
    seen_employees = set()
    for emp in employees:
        emp.validate()
        if emp.employee_id in seen_employees:
            raise ValueError(f"Duplicate employee id {emp.employee_id}")
        seen_employees.add(emp.employee_id)

    seen_templates = set()
    for template in shift_templates:
        template.validate()
        if template.template_id in seen_templates:
            raise ValueError(f"Duplicate shift template id {template.template_id}")
        seen_templates.add(template.template_id)


def generate_schedule(
    employees: Sequence[EmployeeProfile],
    shift_templates: Sequence[ShiftTemplate],
    settings: Optional[Settings] = None,
) -> ScheduleResult:
    """
    Generate a weekly schedule.

    Args:
        employees: Employee profiles
        shift_templates: Daily shift templates, expanded over the whole week
        settings: Constraint parameters (defaults when None)

    Returns:
        ScheduleResult; failures are UNFILLABLE_SHIFTS or NO_SOLUTION

    Raises:
        ValueError: If an employee or template record is malformed
    """
    settings = settings or Settings()
    _validate_inputs(employees, shift_templates)
    started = time.perf_counter()

    shifts = expand_templates(shift_templates)
    logger.info(
        "Scheduling %d shifts from %d templates for %d employees",
        len(shifts), len(shift_templates), len(employees),
    )

    feasibility = build_feasibility(employees, shifts)
    if feasibility.has_unfillable:
        unfillable = feasibility.unfillable
        logger.warning(
            "%d shift(s) have no eligible employees: %s",
            len(unfillable),
            ", ".join(f"{s.day_name} {s.name}" for s in unfillable),
        )
        return ScheduleResult.failed(
            FailureKind.UNFILLABLE_SHIFTS,
            f"Cannot fill {len(unfillable)} shift(s) - no eligible employees available",
            unfillable=tuple(unfillable),
        )

    search = AssignmentSearch(employees, shifts, feasibility, settings)
    assignments = search.solve()
    elapsed_ms = int(round((time.perf_counter() - started) * 1000))
    logger.info(
        "Search finished: steps=%d backtracks=%d elapsed=%dms",
        search.steps, search.backtracks, elapsed_ms,
    )

    if assignments is None:
        message = "Could not find a valid schedule that satisfies all constraints"
        if search.cut_off:
            message += f" (stopped after {search.steps} steps)"
        logger.warning(message)
        return ScheduleResult.failed(FailureKind.NO_SOLUTION, message)

    document = build_schedule_document(
        employees, shifts, assignments, settings, solve_time_ms=elapsed_ms
    )
    logger.info(
        "Generated %d assignments (%.1f hours, %d employees)",
        document.stats.total_shifts,
        document.stats.total_hours,
        document.stats.employees_scheduled,
    )
    return ScheduleResult.ok(document)
