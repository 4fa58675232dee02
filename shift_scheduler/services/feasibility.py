"""Structural eligibility of employees for shifts (role and availability)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from shift_scheduler.domain.models import ConcreteShift, EmployeeProfile


@dataclass
class FeasibilityMatrix:
    """Candidate lists in both directions plus the shifts nobody can take."""

    candidates: Dict[int, List[int]] = field(default_factory=dict)  # shift_id -> emp_ids
    employee_shifts: Dict[int, List[int]] = field(default_factory=dict)  # emp_id -> shift_ids
    unfillable: List[ConcreteShift] = field(default_factory=list)

    def is_feasible(self, employee_id: int, shift_id: int) -> bool:
        return employee_id in self.candidates.get(shift_id, ())

    @property
    def has_unfillable(self) -> bool:
        return bool(self.unfillable)


def is_eligible(employee: EmployeeProfile, shift: ConcreteShift) -> bool:
    """Role match, then an availability window containing [start, end)."""
    if employee.role != shift.role:
        return False
    window = employee.window_for(shift.day)
    if window is None:
        return False
    start, end = window
    return start <= shift.start and shift.end <= end


def build_feasibility(
    employees: Sequence[EmployeeProfile],
    shifts: Sequence[ConcreteShift],
) -> FeasibilityMatrix:
    """
    Decide eligibility for every employee x shift pair.

    Candidate lists keep employee input order, which is the tie-break order
    used later by the search.

    Args:
        employees: Employee profiles
        shifts: Concrete shifts of the week

    Returns:
        FeasibilityMatrix with candidates, inverse map and unfillable shifts
    """
    matrix = FeasibilityMatrix()
    for shift in shifts:
        matrix.candidates[shift.shift_id] = []

    for emp in employees:
        matrix.employee_shifts[emp.employee_id] = []
        for shift in shifts:
            if not is_eligible(emp, shift):
                continue
            matrix.candidates[shift.shift_id].append(emp.employee_id)
            matrix.employee_shifts[emp.employee_id].append(shift.shift_id)

    matrix.unfillable = [s for s in shifts if not matrix.candidates[s.shift_id]]
    return matrix
