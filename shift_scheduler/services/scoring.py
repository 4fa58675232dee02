"""Candidate ordering toward employees' preferred weekly hours."""

from __future__ import annotations

from typing import Dict, List, Sequence

from shift_scheduler.domain.models import EmployeeProfile


def calculate_hours_gap(employee: EmployeeProfile, current_hours: float) -> float:
    """
    Distance below target hours (negative once the target is passed).

    Args:
        employee: Employee to score
        current_hours: Hours already assigned this week

    Returns:
        target_hours - current_hours
    """
    return employee.target_hours - current_hours


def order_candidates(
    candidate_ids: Sequence[int],
    employee_by_id: Dict[int, EmployeeProfile],
    current_hours: Dict[int, float],
) -> List[int]:
    """
    Order candidates furthest-below-target first.

    The sort is stable, so ties keep candidate-list order and runs stay
    deterministic.
    """
    return sorted(
        candidate_ids,
        key=lambda emp_id: -calculate_hours_gap(
            employee_by_id[emp_id], current_hours.get(emp_id, 0.0)
        ),
    )
