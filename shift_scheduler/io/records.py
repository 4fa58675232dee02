"""Conversion between stored JSON-style records and engine models.

Records use the storage layer's camelCase shape, e.g.::

    {"id": 1, "name": "Sarah Chen", "role": "ATL", "maxHours": 44,
     "targetHours": 40, "availability": {"Monday": [6, 22], "Sunday": null}}

snake_case keys are accepted as well.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional

from shift_scheduler.domain.models import (
    DAYS,
    EmployeeProfile,
    ScheduleDocument,
    ScheduleResult,
    ShiftTemplate,
    Window,
)


def _get(record: Mapping[str, Any], *keys: str, default: Any = None, required: bool = True) -> Any:
    for key in keys:
        if key in record:
            return record[key]
    if required:
        raise ValueError(f"Record {dict(record)!r} is missing required field '{keys[0]}'")
    return default


def _number(value: Any, field: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"Field '{field}' must be numeric, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Field '{field}' must be numeric, got {value!r}") from e


def _flag(value: Any, field: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"Field '{field}' must be true or false, got {value!r}")
    return value


def _day_index(key: Any) -> int:
    if isinstance(key, int) and not isinstance(key, bool):
        day = key
    elif isinstance(key, str) and key.strip().isdigit():
        day = int(key)
    elif isinstance(key, str) and key.strip().capitalize() in DAYS:
        return DAYS.index(key.strip().capitalize())
    else:
        raise ValueError(f"Unknown day {key!r}")
    if day not in range(len(DAYS)):
        raise ValueError(f"Unknown day {key!r}")
    return day


def _parse_availability(raw: Optional[Mapping[Any, Any]]) -> Dict[int, Optional[Window]]:
    availability: Dict[int, Optional[Window]] = {}
    for key, window in (raw or {}).items():
        day = _day_index(key)
        if window is None:
            availability[day] = None
            continue
        if len(window) != 2:
            raise ValueError(f"Availability for {DAYS[day]} must be [start, end], got {window!r}")
        availability[day] = (_number(window[0], "availability"), _number(window[1], "availability"))
    return availability


def employee_from_record(record: Mapping[str, Any]) -> EmployeeProfile:
    """
    Build a validated employee profile from a stored record.

    Raises:
        ValueError: If a required field is missing or out of range
    """
    emp = EmployeeProfile(
        employee_id=int(_get(record, "id", "employee_id")),
        name=str(_get(record, "name", default="", required=False)),
        role=str(_get(record, "role")),
        max_hours=_number(_get(record, "maxHours", "max_hours"), "maxHours"),
        target_hours=_number(_get(record, "targetHours", "target_hours"), "targetHours"),
        availability=_parse_availability(_get(record, "availability", default={}, required=False)),
        hours_restricted=_flag(
            _get(record, "hoursRestricted", "hours_restricted", required=False), "hoursRestricted"
        ),
        restriction_exempt=_flag(
            _get(record, "restrictionExempt", "restriction_exempt", required=False), "restrictionExempt"
        ),
    )
    emp.validate()
    return emp


def template_from_record(record: Mapping[str, Any]) -> ShiftTemplate:
    days = _get(record, "days", default=None, required=False)
    template = ShiftTemplate(
        template_id=int(_get(record, "id", "template_id")),
        name=str(_get(record, "name", default="", required=False)),
        role=str(_get(record, "role")),
        start=_number(_get(record, "start"), "start"),
        end=_number(_get(record, "end"), "end"),
        days=None if days is None else tuple(_day_index(d) for d in days),
    )
    template.validate()
    return template


def employees_from_records(records: Iterable[Mapping[str, Any]]) -> List[EmployeeProfile]:
    return [employee_from_record(r) for r in records]


def templates_from_records(records: Iterable[Mapping[str, Any]]) -> List[ShiftTemplate]:
    return [template_from_record(r) for r in records]


def _hours(value: float) -> float | int:
    return int(value) if float(value).is_integer() else value


def document_to_record(document: ScheduleDocument) -> Dict[str, Any]:
    """JSON-friendly form of a successful run, in the storage layer's shape."""
    return {
        "success": True,
        "generated": document.generated_at,
        "solveTime": document.solve_time_ms,
        "stats": {
            "totalShifts": document.stats.total_shifts,
            "totalHours": _hours(document.stats.total_hours),
            "totalPaidHours": _hours(document.stats.total_paid_hours),
            "employeesScheduled": document.stats.employees_scheduled,
        },
        "schedule": [
            {
                "employee": e.employee_name,
                "employeeId": e.employee_id,
                "role": e.role,
                "day": e.day_name,
                "shiftName": e.shift_name,
                "start": _hours(e.start),
                "end": _hours(e.end),
                "shift": e.window,
                "hours": _hours(e.hours),
                "breakHours": _hours(e.break_hours),
                "paidHours": _hours(e.paid_hours),
            }
            for e in document.entries
        ],
        "employees": [
            {
                "id": s.employee_id,
                "name": s.name,
                "role": s.role,
                "scheduledHours": _hours(s.scheduled_hours),
                "paidHours": _hours(s.paid_hours),
                "shiftCount": s.shift_count,
                "targetHours": _hours(s.target_hours),
                "maxHours": _hours(s.max_hours),
                "effectiveMaxHours": _hours(s.effective_max_hours),
            }
            for s in document.employees
        ],
    }


def result_to_record(result: ScheduleResult) -> Dict[str, Any]:
    if result.success and result.document is not None:
        return document_to_record(result.document)
    record: Dict[str, Any] = {
        "success": False,
        "error": result.error.value if result.error else None,
        "message": result.message,
    }
    if result.unfillable:
        record["unfillable"] = [
            {
                "id": s.shift_id,
                "templateId": s.template_id,
                "name": s.name,
                "day": s.day_name,
                "start": _hours(s.start),
                "end": _hours(s.end),
                "hours": _hours(s.hours),
                "role": s.role,
            }
            for s in result.unfillable
        ]
    return record
