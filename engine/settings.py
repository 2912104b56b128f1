"""
settings.py — Persisted User Settings
======================================
The three values that survive between runs: step delay, teaching mode and
the last algorithm used.  They are read once when a session is built and
passed in explicitly; the SessionDriver hands back *deltas* (plain dicts
of changed fields) which the frontend applies and saves.

    settings = Settings.load()
    driver   = SessionDriver.from_settings("quick", values, settings)
    delta    = driver.handle(Intent.SPEED_UP)     # {"speed": 250}
    settings = settings.apply(delta)
    settings.save()

Storage is a small pretty-printed JSON file.  The path defaults to
`settings.json` in the working directory and can be overridden with the
SORTVIZ_SETTINGS environment variable.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

from algorithms.control import DEFAULT_DELAY

logger = logging.getLogger(__name__)

SETTINGS_ENV  = "SORTVIZ_SETTINGS"
SETTINGS_FILE = "settings.json"


def default_path() -> Path:
    return Path(os.environ.get(SETTINGS_ENV, SETTINGS_FILE))


@dataclass(frozen=True)
class Settings:
    speed:          int           = DEFAULT_DELAY   # milliseconds between steps
    teaching_mode:  bool          = True
    last_algorithm: Optional[str] = None            # registry key, e.g. "quick"

    # ------------------------------------------------------------------
    # Deltas
    # ------------------------------------------------------------------
    def apply(self, delta: Optional[Dict[str, Any]]) -> "Settings":
        """Return a copy with the known keys of `delta` applied."""
        if not delta:
            return self
        known = {f.name for f in fields(self)}
        changes = {k: v for k, v in delta.items() if k in known}
        return replace(self, **changes)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    @classmethod
    def load(cls, path: Union[str, Path, None] = None) -> "Settings":
        """Read settings; a missing or unreadable file yields the defaults."""
        path = Path(path) if path is not None else default_path()
        if not path.exists():
            return cls()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
            return cls()
        if not isinstance(data, dict):
            logger.warning("Ignoring settings file %s: expected an object", path)
            return cls()
        return cls.from_dict(data)

    def save(self, path: Union[str, Path, None] = None) -> bool:
        """Write settings.  Returns False (and logs) if the file cannot be written."""
        path = Path(path) if path is not None else default_path()
        try:
            path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not save settings to %s: %s", path, exc)
            return False
        logger.debug("Saved settings to %s", path)
        return True

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        defaults = cls()
        speed = data.get("speed", defaults.speed)
        last  = data.get("last_algorithm", defaults.last_algorithm)
        return cls(
            speed=int(speed) if isinstance(speed, (int, float)) else defaults.speed,
            teaching_mode=bool(data.get("teaching_mode", defaults.teaching_mode)),
            last_algorithm=last if isinstance(last, str) else None,
        )
