"""Conversion of a completed assignment map into a schedule document."""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from shift_scheduler.config import Settings
from shift_scheduler.domain.models import (
    ConcreteShift,
    EmployeeProfile,
    EmployeeSummary,
    ScheduleDocument,
    ScheduleEntry,
    ScheduleStats,
)
from shift_scheduler.services.constraints import effective_max_hours, unpaid_break_hours


def format_hour(hour: float) -> str:
    """6 -> '06:00', 13.5 -> '13:30'."""
    total_minutes = int(round(hour * 60))
    return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"


def format_window(start: float, end: float) -> str:
    return f"{format_hour(start)}-{format_hour(end)}"


def build_schedule_document(
    employees: Sequence[EmployeeProfile],
    shifts: Sequence[ConcreteShift],
    assignments: Dict[int, int],
    settings: Settings,
    solve_time_ms: int = 0,
    generated_at: Optional[str] = None,
) -> ScheduleDocument:
    """
    Build the schedule document for a complete assignment.

    Args:
        employees: All input employees (each gets a summary row)
        shifts: Concrete shifts in expansion order
        assignments: {shift_id: employee_id}
        settings: Used for the paid/gross break split and effective caps
        solve_time_ms: Wall-clock time of the run
        generated_at: ISO timestamp; defaults to now (UTC)

    Returns:
        Immutable ScheduleDocument
    """
    employee_by_id = {e.employee_id: e for e in employees}
    entries: List[ScheduleEntry] = []
    gross: Dict[int, float] = defaultdict(float)
    paid: Dict[int, float] = defaultdict(float)
    counts: Dict[int, int] = defaultdict(int)

    for shift in shifts:
        emp_id = assignments.get(shift.shift_id)
        if emp_id is None:
            continue
        emp = employee_by_id[emp_id]
        break_hours = unpaid_break_hours(shift, settings)
        entries.append(
            ScheduleEntry(
                employee_id=emp.employee_id,
                employee_name=emp.name,
                role=shift.role,
                day=shift.day,
                day_name=shift.day_name,
                shift_id=shift.shift_id,
                shift_name=shift.name,
                start=shift.start,
                end=shift.end,
                window=format_window(shift.start, shift.end),
                hours=shift.hours,
                break_hours=break_hours,
                paid_hours=shift.hours - break_hours,
            )
        )
        gross[emp_id] += shift.hours
        paid[emp_id] += shift.hours - break_hours
        counts[emp_id] += 1

    summaries = tuple(
        EmployeeSummary(
            employee_id=emp.employee_id,
            name=emp.name,
            role=emp.role,
            scheduled_hours=gross.get(emp.employee_id, 0.0),
            paid_hours=paid.get(emp.employee_id, 0.0),
            shift_count=counts.get(emp.employee_id, 0),
            target_hours=emp.target_hours,
            max_hours=emp.max_hours,
            effective_max_hours=effective_max_hours(emp, settings),
        )
        for emp in employees
    )
    stats = ScheduleStats(
        total_shifts=len(entries),
        total_hours=sum(e.hours for e in entries),
        total_paid_hours=sum(e.paid_hours for e in entries),
        employees_scheduled=len({e.employee_id for e in entries}),
    )
    if generated_at is None:
        generated_at = datetime.now(timezone.utc).isoformat()
    return ScheduleDocument(
        entries=tuple(entries),
        stats=stats,
        employees=summaries,
        generated_at=generated_at,
        solve_time_ms=solve_time_ms,
    )
