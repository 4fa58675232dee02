"""Constraint checking against the search's partial assignment.

Every check is a pure function of (employee, shift, state, settings) and
returns True when assigning the employee would break the rule. Rejecting a
candidate is routine; nothing here raises or mutates.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Callable, Dict, List, Optional, Set, Tuple

from shift_scheduler.config import Settings
from shift_scheduler.domain.models import DAYS, ConcreteShift, EmployeeProfile

# Tolerance for comparing summed float hours.
_EPS = 1e-6


class SearchState:
    """
    Running totals for a partial assignment.

    Tracks per-employee gross hours, worked days and the shift held on each
    day. ``apply`` and ``undo`` are exact inverses.
    """

    def __init__(self) -> None:
        self.hours: Dict[int, float] = defaultdict(float)
        self.days: Dict[int, Set[int]] = defaultdict(set)
        self.day_shift: Dict[int, Dict[int, ConcreteShift]] = defaultdict(dict)

    def apply(self, employee_id: int, shift: ConcreteShift) -> None:
        self.hours[employee_id] += shift.hours
        self.days[employee_id].add(shift.day)
        self.day_shift[employee_id][shift.day] = shift

    def undo(self, employee_id: int, shift: ConcreteShift) -> None:
        if self.day_shift[employee_id].get(shift.day) != shift:
            raise ValueError(f"Employee {employee_id} does not hold {shift!r}")
        self.hours[employee_id] -= shift.hours
        self.days[employee_id].discard(shift.day)
        del self.day_shift[employee_id][shift.day]

    def hours_for(self, employee_id: int) -> float:
        return self.hours.get(employee_id, 0.0)

    def days_for(self, employee_id: int) -> Set[int]:
        return self.days.get(employee_id, set())

    def shift_on(self, employee_id: int, day: int) -> Optional[ConcreteShift]:
        return self.day_shift.get(employee_id, {}).get(day)


def effective_max_hours(employee: EmployeeProfile, settings: Settings) -> float:
    """Weekly ceiling, lowered to the restricted-status cap when it applies."""
    if employee.hours_restricted and not employee.restriction_exempt:
        return min(employee.max_hours, settings.restricted_weekly_cap)
    return employee.max_hours


def works_same_day(
    employee: EmployeeProfile, shift: ConcreteShift, state: SearchState, settings: Settings
) -> bool:
    return shift.day in state.days_for(employee.employee_id)


def exceeds_weekly_cap(
    employee: EmployeeProfile, shift: ConcreteShift, state: SearchState, settings: Settings
) -> bool:
    post_assignment_hours = state.hours_for(employee.employee_id) + shift.hours
    return post_assignment_hours > effective_max_hours(employee, settings) + _EPS


def rest_between(earlier: ConcreteShift, later: ConcreteShift) -> float:
    """Hours off between shifts on consecutive days (no overnight shifts)."""
    return (24 - earlier.end) + later.start


def violates_min_rest(
    employee: EmployeeProfile, shift: ConcreteShift, state: SearchState, settings: Settings
) -> bool:
    # Both neighbours: the search does not fill days in calendar order.
    emp_id = employee.employee_id
    previous = state.shift_on(emp_id, shift.day - 1) if shift.day > 0 else None
    if previous is not None and rest_between(previous, shift) < settings.min_rest_hours - _EPS:
        return True
    following = state.shift_on(emp_id, shift.day + 1) if shift.day < len(DAYS) - 1 else None
    if following is not None and rest_between(shift, following) < settings.min_rest_hours - _EPS:
        return True
    return False


def longest_streak(days: Set[int]) -> int:
    """Longest run of consecutive worked days, scanning Monday to Sunday."""
    best = run = 0
    for day in range(len(DAYS)):
        run = run + 1 if day in days else 0
        best = max(best, run)
    return best


def exceeds_consecutive_days(
    employee: EmployeeProfile, shift: ConcreteShift, state: SearchState, settings: Settings
) -> bool:
    worked = state.days_for(employee.employee_id) | {shift.day}
    return longest_streak(worked) > settings.max_consecutive_days


def below_min_length(
    employee: EmployeeProfile, shift: ConcreteShift, state: SearchState, settings: Settings
) -> bool:
    return shift.hours < settings.min_shift_hours


Check = Callable[[EmployeeProfile, ConcreteShift, SearchState, Settings], bool]

# Evaluated in this order; the first failure names the rejection.
CHECKS: List[Tuple[str, Check]] = [
    ("min_shift_length", below_min_length),
    ("one_shift_per_day", works_same_day),
    ("weekly_hours_cap", exceeds_weekly_cap),
    ("min_rest", violates_min_rest),
    ("max_consecutive_days", exceeds_consecutive_days),
]


def rejection_reason(
    employee: EmployeeProfile,
    shift: ConcreteShift,
    state: SearchState,
    settings: Settings,
) -> Optional[str]:
    """
    Find the first rule the assignment would break.

    Args:
        employee: Candidate employee
        shift: Shift being filled
        state: Current partial assignment
        settings: Constraint parameters

    Returns:
        Name of the violated rule, or None if the assignment is allowed
    """
    for name, check in CHECKS:
        if check(employee, shift, state, settings):
            return name
    return None


def can_assign_employee(
    employee: EmployeeProfile,
    shift: ConcreteShift,
    state: SearchState,
    settings: Settings,
) -> bool:
    return rejection_reason(employee, shift, state, settings) is None


def unpaid_break_hours(shift: ConcreteShift, settings: Settings) -> float:
    """Mandated unpaid break for long shifts. Affects reported hours only."""
    if settings.break_hours > 0 and shift.hours >= settings.break_trigger_hours:
        return settings.break_hours
    return 0.0


def paid_hours(shift: ConcreteShift, settings: Settings) -> float:
    return shift.hours - unpaid_break_hours(shift, settings)
