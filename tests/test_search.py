from shift_scheduler.config import Settings
from shift_scheduler.domain.models import EmployeeProfile, ShiftTemplate
from shift_scheduler.engine.search import AssignmentSearch
from shift_scheduler.services.feasibility import build_feasibility
from shift_scheduler.services.shifts import expand_templates


def _employee(emp_id, target_hours, max_hours, days):
    return EmployeeProfile(
        employee_id=emp_id,
        name=f"E{emp_id}",
        role="X",
        max_hours=max_hours,
        target_hours=target_hours,
        availability={d: (6, 22) for d in days},
    )


def _search(employees, templates, settings):
    shifts = expand_templates(templates)
    feasibility = build_feasibility(employees, shifts)
    return shifts, AssignmentSearch(employees, shifts, feasibility, settings)


def test_scarcest_shift_first():
    """Test that shifts with fewer candidates are searched first."""
    employees = [
        _employee(1, 40, 40, days=[0, 1]),
        _employee(2, 0, 40, days=[0]),
    ]
    templates = [ShiftTemplate(1, "Day", "X", 6, 14, days=(0, 1))]
    shifts, search = _search(employees, templates, Settings())

    # Monday has two candidates, Tuesday only one
    assert [search.shift_by_id[shift_id].day for shift_id in search.queue] == [1, 0]


def test_empty_queue_succeeds_immediately():
    """Test that an empty shift list succeeds without search steps."""
    shifts, search = _search([_employee(1, 0, 40, days=[0])], [], Settings())

    assert search.solve() == {}
    assert search.steps == 0


def test_backtracks_out_of_dead_end():
    """Test backtracking when an early choice leaves a shift unfillable."""
    # A is preferred for Monday, but taking it leaves Wednesday unfillable:
    # A is capped at one shift and B may not work two days in a row.
    employees = [
        _employee(1, 8, 8, days=[0, 1, 2]),
        _employee(2, 0, 40, days=[0, 1, 2]),
    ]
    templates = [ShiftTemplate(1, "Day", "X", 6, 14, days=(0, 1, 2))]
    shifts, search = _search(employees, templates, Settings(max_consecutive_days=1))

    assignments = search.solve()

    by_day = {s.day: assignments[s.shift_id] for s in shifts}
    assert by_day == {0: 2, 1: 1, 2: 2}
    assert search.backtracks >= 1


def test_state_matches_final_assignment():
    """Test that the search state matches the returned assignment."""
    employees = [
        _employee(1, 8, 8, days=[0, 1, 2]),
        _employee(2, 0, 40, days=[0, 1, 2]),
    ]
    templates = [ShiftTemplate(1, "Day", "X", 6, 14, days=(0, 1, 2))]
    shifts, search = _search(employees, templates, Settings(max_consecutive_days=1))

    search.solve()

    # undo left nothing behind from abandoned branches
    assert search.state.hours_for(1) == 8
    assert search.state.hours_for(2) == 16
    assert search.state.days_for(2) == {0, 2}


def test_exhausted_search_returns_none():
    """Test that an exhausted search returns None."""
    employees = [_employee(1, 8, 40, days=[0])]
    templates = [
        ShiftTemplate(1, "Open", "X", 6, 14, days=(0,)),
        ShiftTemplate(2, "Close", "X", 14, 22, days=(0,)),
    ]
    shifts, search = _search(employees, templates, Settings())

    assert search.solve() is None
    assert not search.cut_off


def test_step_limit_cuts_search_off():
    """Test that the step limit stops the search."""
    employees = [
        _employee(1, 8, 8, days=[0, 1]),
        _employee(2, 0, 40, days=[0, 1]),
    ]
    templates = [ShiftTemplate(1, "Day", "X", 6, 14, days=(0, 1))]
    shifts, search = _search(employees, templates, Settings(max_search_steps=1))

    assert search.solve() is None
    assert search.cut_off
    assert search.steps == 1


def test_same_inputs_same_assignment(store_employees, store_templates):
    """Test that the search is deterministic."""
    first = _search(store_employees, store_templates, Settings())[1].solve()
    second = _search(store_employees, store_templates, Settings())[1].solve()

    assert first is not None
    assert first == second
