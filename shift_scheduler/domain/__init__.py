"""Domain value models."""

from .models import (
    DAYS,
    ConcreteShift,
    EmployeeProfile,
    EmployeeSummary,
    FailureKind,
    ScheduleDocument,
    ScheduleEntry,
    ScheduleResult,
    ScheduleStats,
    ShiftTemplate,
)

__all__ = [
    "DAYS",
    "ConcreteShift",
    "EmployeeProfile",
    "EmployeeSummary",
    "FailureKind",
    "ScheduleDocument",
    "ScheduleEntry",
    "ScheduleResult",
    "ScheduleStats",
    "ShiftTemplate",
]
