"""Pytest configuration and shared fixtures."""

import pytest

from shift_scheduler.io.records import employees_from_records, templates_from_records


def pytest_configure(config):
    """Configure pytest."""
    # Add custom markers
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (deselect with '-m \"not integration\"')"
    )
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


ALL_WEEK = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def _week(window, off=()):
    return {day: (None if day in off else list(window)) for day in ALL_WEEK}


@pytest.fixture
def store_shift_records():
    """Default store templates: two ATL, two full-time and two part-time shifts a day."""
    return [
        {"id": 1, "name": "Opener-ATL", "start": 6, "end": 14, "role": "ATL"},
        {"id": 2, "name": "Morning-FT", "start": 6, "end": 14, "role": "FullTime"},
        {"id": 3, "name": "Day-FT", "start": 10, "end": 18, "role": "FullTime"},
        {"id": 4, "name": "Afternoon-PT", "start": 13, "end": 18, "role": "PartTime"},
        {"id": 5, "name": "Closer-ATL", "start": 14, "end": 21, "role": "ATL"},
        {"id": 6, "name": "Closer-PT", "start": 17, "end": 21, "role": "PartTime"},
    ]


@pytest.fixture
def store_employee_records():
    """Default store roster of twelve employees."""
    return [
        {"id": 1, "name": "Sarah Chen", "role": "ATL", "maxHours": 44, "targetHours": 40,
         "availability": _week((6, 22))},
        {"id": 2, "name": "Marcus Johnson", "role": "ATL", "maxHours": 44, "targetHours": 40,
         "availability": _week((6, 22))},
        {"id": 3, "name": "Rachel Green", "role": "ATL", "maxHours": 40, "targetHours": 35,
         "availability": _week((6, 22))},
        {"id": 4, "name": "Emily Rodriguez", "role": "FullTime", "maxHours": 40, "targetHours": 38,
         "availability": _week((6, 18), off=("Saturday", "Sunday"))},
        {"id": 5, "name": "David Kim", "role": "FullTime", "maxHours": 40, "targetHours": 38,
         "availability": _week((6, 21))},
        {"id": 6, "name": "Lisa Park", "role": "FullTime", "maxHours": 40, "targetHours": 36,
         "availability": _week((6, 18), off=("Monday", "Tuesday"))},
        {"id": 7, "name": "Michael Torres", "role": "FullTime", "maxHours": 40, "targetHours": 38,
         "availability": _week((6, 18), off=("Wednesday", "Thursday"))},
        {"id": 8, "name": "Uzair Aftab", "role": "PartTime", "maxHours": 24, "targetHours": 20,
         "availability": {"Monday": None, "Tuesday": None, "Wednesday": [10, 21],
                          "Thursday": [10, 21], "Friday": [10, 21], "Saturday": [8, 21],
                          "Sunday": [8, 21]}},
        {"id": 9, "name": "Aisha Patel", "role": "PartTime", "maxHours": 24, "targetHours": 22,
         "availability": {"Monday": [11, 21], "Tuesday": [11, 21], "Wednesday": [11, 21],
                          "Thursday": [11, 21], "Friday": [11, 21], "Saturday": [8, 21],
                          "Sunday": None}},
        {"id": 10, "name": "James Wilson", "role": "PartTime", "maxHours": 20, "targetHours": 16,
         "availability": {"Monday": None, "Tuesday": None, "Wednesday": None, "Thursday": None,
                          "Friday": [8, 18], "Saturday": [8, 18], "Sunday": [8, 18]}},
        {"id": 11, "name": "Priya Sharma", "role": "PartTime", "maxHours": 20, "targetHours": 18,
         "availability": {"Monday": None, "Tuesday": None, "Wednesday": None,
                          "Thursday": [12, 21], "Friday": [12, 21], "Saturday": [10, 21],
                          "Sunday": [10, 21]}},
        {"id": 12, "name": "Kevin Martinez", "role": "PartTime", "maxHours": 24, "targetHours": 20,
         "availability": {"Monday": [8, 21], "Tuesday": [8, 21], "Wednesday": [8, 21],
                          "Thursday": None, "Friday": None, "Saturday": None, "Sunday": None}},
    ]


@pytest.fixture
def store_employees(store_employee_records):
    return employees_from_records(store_employee_records)


@pytest.fixture
def store_templates(store_shift_records):
    return templates_from_records(store_shift_records)
