from __future__ import annotations

from dataclasses import asdict, fields
from typing import Sequence

import pandas as pd

from .config import Settings
from .domain.models import DAYS, EmployeeProfile, EmployeeSummary, ScheduleDocument, ScheduleEntry
from .services.constraints import _EPS, effective_max_hours, longest_streak


def schedule_to_frame(document: ScheduleDocument) -> pd.DataFrame:
    columns = [f.name for f in fields(ScheduleEntry)]
    return pd.DataFrame([asdict(e) for e in document.entries], columns=columns)


def summary_to_frame(document: ScheduleDocument) -> pd.DataFrame:
    columns = [f.name for f in fields(EmployeeSummary)]
    df = pd.DataFrame([asdict(s) for s in document.employees], columns=columns)
    return df.set_index("employee_id")


def validate_schedule(
    document: ScheduleDocument,
    employees: Sequence[EmployeeProfile],
    settings: Settings | None = None,
) -> None:
    settings = settings or Settings()
    emp_lookup = {e.employee_id: e for e in employees}
    df = schedule_to_frame(document)

    # Referential integrity
    unknown = set(int(x) for x in df["employee_id"]) - set(emp_lookup)
    if unknown:
        raise ValueError(f"Schedule references unknown employee ids: {sorted(unknown)}")
    if df["shift_id"].duplicated().any():
        raise ValueError("A shift is assigned to more than one employee")

    # Role and availability per entry
    for row in df.itertuples(index=False):
        emp = emp_lookup[int(row.employee_id)]
        if emp.role != row.role:
            raise ValueError(
                f"Employee {emp.employee_id} ({emp.role}) assigned to {row.role} shift {row.shift_name}"
            )
        window = emp.window_for(int(row.day))
        if window is None or not (window[0] <= row.start and row.end <= window[1]):
            raise ValueError(
                f"Employee {emp.employee_id} is not available for {row.day_name} {row.window}"
            )
        if row.hours < settings.min_shift_hours - _EPS:
            raise ValueError(
                f"Shift {row.shift_name} on {row.day_name} is shorter than "
                f"{settings.min_shift_hours}h: {row.hours}h"
            )

    # One shift per employee per day
    per_day = df.groupby(["employee_id", "day"]).size()
    doubled = per_day[per_day > 1]
    if not doubled.empty:
        emp_id, day = doubled.index[0]
        raise ValueError(f"Employee {emp_id} has {doubled.iloc[0]} shifts on {DAYS[day]}")

    # Weekly hours caps
    weekly = df.groupby("employee_id")["hours"].sum()
    for emp_id, total_hours in weekly.items():
        emp = emp_lookup[int(emp_id)]
        cap = effective_max_hours(emp, settings)
        if total_hours > cap + _EPS:
            raise ValueError(
                f"Employee {emp_id} ({emp.name}) exceeds weekly cap: {total_hours:.1f}h > {cap}h"
            )

    # Rest between adjacent days, and consecutive-day streaks
    for emp_id, group in df.sort_values(["employee_id", "day"]).groupby("employee_id"):
        rows = list(group.itertuples(index=False))
        for earlier, later in zip(rows, rows[1:]):
            if later.day - earlier.day != 1:
                continue
            rest = (24 - earlier.end) + later.start
            if rest < settings.min_rest_hours - _EPS:
                raise ValueError(
                    f"Employee {emp_id} gets {rest}h rest between {earlier.day_name} and "
                    f"{later.day_name} (< {settings.min_rest_hours}h)"
                )
        streak = longest_streak(set(int(d) for d in group["day"]))
        if streak > settings.max_consecutive_days:
            raise ValueError(
                f"Employee {emp_id} works {streak} consecutive days "
                f"(> {settings.max_consecutive_days})"
            )

    # Summary rows agree with the entries
    summary = summary_to_frame(document)
    if set(summary.index) != set(emp_lookup):
        raise ValueError("Employee summary does not cover every input employee")
    scheduled = weekly.reindex(summary.index, fill_value=0.0).astype(float)
    if ((summary["scheduled_hours"].astype(float) - scheduled).abs() > _EPS).any():
        raise ValueError("Employee summary hours do not match schedule entries")
    if document.stats.total_shifts != len(df):
        raise ValueError("Schedule stats shift count does not match entries")
    if abs(document.stats.total_hours - float(df["hours"].sum())) > _EPS:
        raise ValueError("Schedule stats total hours do not match entries")


def summarize_schedule(document: ScheduleDocument) -> str:
    if not document.entries:
        return "No assignments."
    df = schedule_to_frame(document)

    coverage = df.groupby(["day", "role"]).size().unstack(fill_value=0)
    coverage.index = [DAYS[d] for d in coverage.index]

    hours = summary_to_frame(document)[
        ["name", "role", "scheduled_hours", "paid_hours", "target_hours", "effective_max_hours"]
    ].sort_values("scheduled_hours", ascending=False)

    lines = ["Coverage per day per role:"]
    lines.append(coverage.to_string())
    lines.append("")
    lines.append("Hours per employee (week):")
    lines.append(hours.to_string())
    lines.append("")
    lines.append(
        f"Total: {document.stats.total_shifts} shifts, {document.stats.total_hours:g}h gross, "
        f"{document.stats.total_paid_hours:g}h paid, "
        f"{document.stats.employees_scheduled} employees"
    )
    return "\n".join(lines)
