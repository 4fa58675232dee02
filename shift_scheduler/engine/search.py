"""Backtracking assignment search over the week's shifts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from shift_scheduler.config import Settings
from shift_scheduler.domain.models import ConcreteShift, EmployeeProfile
from shift_scheduler.services.constraints import SearchState, rejection_reason
from shift_scheduler.services.feasibility import FeasibilityMatrix
from shift_scheduler.services.scoring import order_candidates


logger = logging.getLogger(__name__)


@dataclass
class SearchFrame:
    """One level of the depth-first search: a shift and its remaining candidates."""

    position: int  # index into the shift queue
    candidates: List[int]
    cursor: int = 0
    applied: Optional[int] = None  # employee currently holding the shift

    @property
    def exhausted(self) -> bool:
        return self.cursor >= len(self.candidates)


class AssignmentSearch:
    """
    Chronological backtracking with an explicit frame stack.

    Shifts are visited scarcest first (fewest candidates). Within a shift,
    candidates furthest below their target hours are tried first. Each
    frame's commitment is applied to ``state`` and undone before the frame
    tries its next candidate or is popped.
    """

    def __init__(
        self,
        employees: Sequence[EmployeeProfile],
        shifts: Sequence[ConcreteShift],
        feasibility: FeasibilityMatrix,
        settings: Settings,
    ):
        self.settings = settings
        self.feasibility = feasibility
        self.employee_by_id: Dict[int, EmployeeProfile] = {e.employee_id: e for e in employees}
        self.shift_by_id: Dict[int, ConcreteShift] = {s.shift_id: s for s in shifts}
        # Shift ids, scarcest first; sorted() keeps expansion order on ties.
        self.queue: List[int] = sorted(
            self.shift_by_id, key=lambda shift_id: len(feasibility.candidates[shift_id])
        )
        self.state = SearchState()
        self.steps = 0
        self.backtracks = 0
        self.cut_off = False

    def shift_at(self, frame: SearchFrame) -> ConcreteShift:
        return self.shift_by_id[self.queue[frame.position]]

    def _open_frame(self, position: int) -> SearchFrame:
        ordered = order_candidates(
            self.feasibility.candidates[self.queue[position]],
            self.employee_by_id,
            self.state.hours,
        )
        return SearchFrame(position=position, candidates=ordered)

    def _release(self, frame: SearchFrame) -> None:
        if frame.applied is not None:
            self.state.undo(frame.applied, self.shift_at(frame))
            frame.applied = None

    def _advance(self, frame: SearchFrame) -> bool:
        """Commit the frame's next allowed candidate. False when none is left."""
        shift = self.shift_at(frame)
        limit = self.settings.max_search_steps
        while not frame.exhausted:
            if limit is not None and self.steps >= limit:
                self.cut_off = True
                return False
            emp_id = frame.candidates[frame.cursor]
            frame.cursor += 1
            self.steps += 1
            reason = rejection_reason(self.employee_by_id[emp_id], shift, self.state, self.settings)
            if reason is not None:
                continue
            self.state.apply(emp_id, shift)
            frame.applied = emp_id
            return True
        return False

    def solve(self) -> Optional[Dict[int, int]]:
        """
        Run the search to completion.

        Returns:
            Assignment map {shift_id: employee_id}, or None when no complete
            assignment exists (or the step limit was reached)
        """
        if not self.queue:
            return {}

        stack: List[SearchFrame] = [self._open_frame(0)]
        while stack:
            frame = stack[-1]
            self._release(frame)
            if not self._advance(frame):
                if self.cut_off:
                    logger.warning(
                        "Search stopped after %d steps (max_search_steps)", self.steps
                    )
                    return None
                stack.pop()
                if stack:
                    self.backtracks += 1
                    logger.debug(
                        "Backtrack from %r (depth %d)", self.shift_at(frame), len(stack)
                    )
                continue
            if len(stack) == len(self.queue):
                return {self.queue[f.position]: f.applied for f in stack}
            stack.append(self._open_frame(len(stack)))
        return None
