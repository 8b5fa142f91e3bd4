"""Simulation settings and their persistent storage."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

SETTINGS_KEY = "widgetlab.boids.settings"

_INT_FIELDS = ("boids", "tick_interval_ms")


@dataclass
class Settings:
    """Tunable parameters of the flocking simulation."""

    boids: int = 300
    tick_interval_ms: int = 50
    visible_range: float = 80.0
    min_distance: float = 15.0
    max_speed: float = 20.0
    cohesion_factor: float = 0.05
    separation_factor: float = 0.6
    alignment_factor: float = 0.15
    turn_speed_ratio: float = 0.25
    border_margin: float = 0.1
    color_adapt_factor: float = 0.05

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Settings":
        """Build settings from a mapping; every field is required, extra keys are ignored."""
        if not isinstance(data, Mapping):
            raise ValueError("settings must be a mapping")
        values = {}
        for field in fields(cls):
            if field.name not in data:
                raise ValueError(f"missing field {field.name!r}")
            value = data[field.name]
            if isinstance(value, bool):
                raise ValueError(f"field {field.name!r} must be a number")
            if field.name in _INT_FIELDS:
                if not isinstance(value, int) or value < 0:
                    raise ValueError(f"field {field.name!r} must be a non-negative integer")
            else:
                if not isinstance(value, (int, float)):
                    raise ValueError(f"field {field.name!r} must be a number")
                value = float(value)
            values[field.name] = value
        return cls(**values)


class SettingsStore:
    """Key-value storage for settings, kept in memory or in a JSON file."""

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self.path = Path(path) if path is not None else None
        self._memory: Dict[str, str] = {}

    def _read_area(self) -> Dict[str, str]:
        if self.path is None:
            return dict(self._memory)
        if not self.path.exists():
            return {}
        area = json.loads(self.path.read_text(encoding="utf-8"))
        return area if isinstance(area, dict) else {}

    def _write_area(self, area: Dict[str, str]) -> None:
        if self.path is None:
            self._memory = dict(area)
        else:
            self.path.write_text(json.dumps(area), encoding="utf-8")

    def _read_area_or_empty(self) -> Dict[str, str]:
        try:
            return self._read_area()
        except ValueError:
            return {}

    def load(self) -> Settings:
        """Return the stored settings, or the defaults if none can be read."""
        try:
            raw = self._read_area().get(SETTINGS_KEY)
            if not isinstance(raw, str):
                return Settings()
            return Settings.from_dict(json.loads(raw))
        except (OSError, ValueError):
            return Settings()

    def store(self, settings: Settings) -> None:
        """Save ``settings``; does nothing if the storage is unavailable."""
        try:
            area = self._read_area_or_empty()
            area[SETTINGS_KEY] = json.dumps(settings.to_dict())
            self._write_area(area)
        except OSError:
            pass

    def remove(self) -> None:
        """Forget stored settings; does nothing if the storage is unavailable."""
        try:
            area = self._read_area_or_empty()
            if area.pop(SETTINGS_KEY, None) is not None:
                self._write_area(area)
        except OSError:
            pass