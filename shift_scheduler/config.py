"""Scheduling settings: constraint parameters with documented defaults.

Settings can be built from a mapping (snake_case or camelCase keys) or loaded
from a JSON / YAML file. Missing values always fall back to the default.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Labor-policy parameters consumed by the constraint checks."""

    min_rest_hours: float = 8.0
    max_consecutive_days: int = 6
    min_shift_hours: float = 3.0
    break_trigger_hours: float = 5.0  # shifts at or above this length include a break
    break_hours: float = 0.5  # unpaid; 0 disables the break policy
    restricted_weekly_cap: float = 24.0
    max_search_steps: Optional[int] = None  # None = search until exhausted

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Setting {f.name} must be numeric, got {value!r}")
            if value < 0:
                raise ValueError(f"Setting {f.name} must be non-negative, got {value}")
        if not 1 <= self.max_consecutive_days <= 7:
            raise ValueError(
                f"Setting max_consecutive_days must be between 1 and 7, got {self.max_consecutive_days}"
            )

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "Settings":
        """
        Build settings from a mapping, ignoring unknown keys.

        Args:
            data: Raw settings; keys may be snake_case or camelCase

        Returns:
            Settings with defaults for every absent or null value

        Raises:
            ValueError: If a value is not a valid number
        """
        known = {f.name: f for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, raw in (data or {}).items():
            name = _snake_case(str(key))
            if name not in known:
                logger.warning("Ignoring unknown setting %r", key)
                continue
            if raw is None:
                continue
            values[name] = _coerce(name, raw, int if name in _INT_FIELDS else float)
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


_INT_FIELDS = {"max_consecutive_days", "max_search_steps"}


def _snake_case(key: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()


def _coerce(name: str, raw: Any, kind: type) -> Any:
    if isinstance(raw, bool):
        raise ValueError(f"Setting {name} must be numeric, got {raw!r}")
    try:
        value = float(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Setting {name} must be numeric, got {raw!r}") from e
    if kind is int:
        if not value.is_integer():
            raise ValueError(f"Setting {name} must be a whole number, got {raw!r}")
        return int(value)
    return value


def load_config(path: str | Path) -> Settings:
    """
    Load settings from a JSON or YAML file.

    The file may hold the settings directly or under a top-level ``settings``
    key. An empty file yields the defaults.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data = json.loads(text) if text.strip() else None
    elif path.suffix.lower() in (".yaml", ".yml"):
        data = yaml.safe_load(text)
    else:
        raise ValueError(f"Unsupported config format: {path.suffix or path.name}")

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ValueError(f"Config {path} must contain a mapping")
    if "settings" in data:
        data = data["settings"] or {}
        if not isinstance(data, Mapping):
            raise ValueError(f"Config {path}: 'settings' must be a mapping")

    settings = Settings.from_mapping(data)
    logger.info("Loaded settings from %s", path)
    return settings
