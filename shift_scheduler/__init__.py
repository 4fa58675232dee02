"""Weekly shift scheduling engine.

Modules:
- config: constraint settings with defaults (JSON or YAML files)
- domain: employee, shift template and schedule value models
- services: shift expansion, feasibility, constraint checks, candidate
  ordering, schedule document building
- engine: backtracking assignment search and the ``generate_schedule`` entry point
- io: conversion of stored records to and from the models
- validator: post-generation validation and text summaries
"""

from .config import Settings, load_config
from .domain.models import FailureKind, ScheduleDocument, ScheduleResult
from .engine.orchestrator import generate_schedule

__all__ = [
    "FailureKind",
    "ScheduleDocument",
    "ScheduleResult",
    "Settings",
    "generate_schedule",
    "load_config",
]
