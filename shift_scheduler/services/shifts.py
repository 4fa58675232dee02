"""Expansion of shift templates into the concrete shifts of one week."""

from __future__ import annotations

from typing import List, Sequence

from shift_scheduler.domain.models import DAYS, ConcreteShift, ShiftTemplate


def expand_templates(
    templates: Sequence[ShiftTemplate],
    days: Sequence[str] = DAYS,
) -> List[ConcreteShift]:
    """
    Build one concrete shift per (day, template), day by day.

    Templates restricted to certain days are skipped on the other days.

    Args:
        templates: Ordered shift templates
        days: Day ordering of the scheduling week (Monday first)

    Returns:
        Concrete shifts with fresh sequential ids starting at 0
    """
    shifts: List[ConcreteShift] = []
    for day in range(len(days)):
        for template in templates:
            if not template.runs_on(day):
                continue
            shifts.append(
                ConcreteShift(
                    shift_id=len(shifts),
                    day=day,
                    template_id=template.template_id,
                    name=template.name,
                    role=template.role,
                    start=template.start,
                    end=template.end,
                )
            )
    return shifts
