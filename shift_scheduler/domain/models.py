"""Value models for weekly shift scheduling.

These are plain dataclasses owned by the caller and handed to the engine for
the duration of one run. Nothing here is persisted by the engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple


DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

Window = Tuple[float, float]


def _check_window(window: Window, label: str) -> None:
    start, end = window
    if not (0 <= start < end <= 24):
        raise ValueError(f"{label}: window {start}-{end} must satisfy 0 <= start < end <= 24")


@dataclass
class EmployeeProfile:
    """Employee with role, weekly hour limits and per-day availability."""

    employee_id: int
    name: str
    role: str
    max_hours: float
    target_hours: float
    # day index (0=Monday) -> (start, end) or None when unavailable
    availability: Dict[int, Optional[Window]] = field(default_factory=dict)
    hours_restricted: bool = False  # e.g. study-permit weekly limit
    restriction_exempt: bool = False  # e.g. scheduled academic break

    def window_for(self, day: int) -> Optional[Window]:
        return self.availability.get(day)

    def validate(self) -> None:
        """
        Check record preconditions.

        Raises:
            ValueError: If the profile is malformed
        """
        label = f"Employee {self.employee_id} ({self.name})"
        if not self.role:
            raise ValueError(f"{label}: role is required")
        if self.max_hours < 0 or self.target_hours < 0:
            raise ValueError(f"{label}: hours must be non-negative")
        if self.target_hours > self.max_hours:
            raise ValueError(
                f"{label}: target hours {self.target_hours} exceed max hours {self.max_hours}"
            )
        for day, window in self.availability.items():
            if day not in range(len(DAYS)):
                raise ValueError(f"{label}: unknown day index {day!r}")
            if window is not None:
                _check_window(window, f"{label} on {DAYS[day]}")

    def __repr__(self) -> str:
        return f"<EmployeeProfile(id={self.employee_id}, name='{self.name}', role='{self.role}')>"


@dataclass
class ShiftTemplate:
    """Recurring daily shift pattern, instantiated once per day of the week."""

    template_id: int
    name: str
    role: str
    start: float
    end: float
    days: Optional[Tuple[int, ...]] = None  # None = every day of the week

    def runs_on(self, day: int) -> bool:
        return self.days is None or day in self.days

    def validate(self) -> None:
        label = f"Shift template {self.template_id} ({self.name})"
        if not self.role:
            raise ValueError(f"{label}: role is required")
        _check_window((self.start, self.end), label)
        for day in self.days or ():
            if day not in range(len(DAYS)):
                raise ValueError(f"{label}: unknown day index {day!r}")


@dataclass(frozen=True)
class ConcreteShift:
    """One template instance on a specific day of the week."""

    shift_id: int
    day: int
    template_id: int
    name: str
    role: str
    start: float
    end: float

    @property
    def hours(self) -> float:
        return self.end - self.start

    @property
    def day_name(self) -> str:
        return DAYS[self.day]

    def __repr__(self) -> str:
        return (
            f"<ConcreteShift(id={self.shift_id}, day={self.day_name}, "
            f"name='{self.name}', {self.start}-{self.end})>"
        )


@dataclass(frozen=True)
class ScheduleEntry:
    employee_id: int
    employee_name: str
    role: str
    day: int
    day_name: str
    shift_id: int
    shift_name: str
    start: float
    end: float
    window: str  # "HH:MM-HH:MM"
    hours: float
    break_hours: float
    paid_hours: float


@dataclass(frozen=True)
class EmployeeSummary:
    employee_id: int
    name: str
    role: str
    scheduled_hours: float
    paid_hours: float
    shift_count: int
    target_hours: float
    max_hours: float
    effective_max_hours: float


@dataclass(frozen=True)
class ScheduleStats:
    total_shifts: int
    total_hours: float
    total_paid_hours: float
    employees_scheduled: int


@dataclass(frozen=True)
class ScheduleDocument:
    """Finalized weekly schedule. Never mutated after creation."""

    entries: Tuple[ScheduleEntry, ...]
    stats: ScheduleStats
    employees: Tuple[EmployeeSummary, ...]
    generated_at: str
    solve_time_ms: int = 0

    def entries_for(self, employee_id: int) -> Tuple[ScheduleEntry, ...]:
        return tuple(e for e in self.entries if e.employee_id == employee_id)


class FailureKind(str, Enum):
    UNFILLABLE_SHIFTS = "UNFILLABLE_SHIFTS"
    NO_SOLUTION = "NO_SOLUTION"


@dataclass(frozen=True)
class ScheduleResult:
    """Tagged outcome of one scheduling run."""

    success: bool
    document: Optional[ScheduleDocument] = None
    error: Optional[FailureKind] = None
    unfillable: Tuple[ConcreteShift, ...] = ()
    message: str = ""

    @classmethod
    def ok(cls, document: ScheduleDocument) -> "ScheduleResult":
        return cls(success=True, document=document)

    @classmethod
    def failed(
        cls,
        error: FailureKind,
        message: str,
        unfillable: Tuple[ConcreteShift, ...] = (),
    ) -> "ScheduleResult":
        return cls(success=False, error=error, unfillable=tuple(unfillable), message=message)
