from __future__ import annotations
import json, os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Mapping, Optional
from heatlog.core.heat import DEFAULT_HEATING_UP, DEFAULT_ON_FIRE, DEFAULT_BLAZING_AFTER
from heatlog.core.logging import logger, LEVELS

SETTINGS_FILENAME = ".heatlog.json"

ENV_HEATING_UP = "HEATLOG_HEATING_UP"
ENV_ON_FIRE = "HEATLOG_ON_FIRE"
ENV_BLAZING = "HEATLOG_BLAZING"
ENV_COLOR_DISABLED = "HEATLOG_COLOR_DISABLED"
ENV_LOG_LEVEL = "HEATLOG_LOG_LEVEL"

def color_disabled(environ: Optional[Mapping[str, str]] = None) -> bool:
    env = os.environ if environ is None else environ
    return env.get(ENV_COLOR_DISABLED) == '1'

@dataclass
class HeatSettings:
    heating_up_rate: int = DEFAULT_HEATING_UP   # lines/sec before it warms up
    on_fire_rate: int = DEFAULT_ON_FIRE         # lines/sec before it catches fire
    blazing_after: int = DEFAULT_BLAZING_AFTER  # seconds on fire before blazing
    terminal: bool = True                       # False keeps output free of escapes
    log_level: str = "WARN"                     # DEBUG / INFO / WARN / ERROR

    def normalize(self):
        # Negative or zero thresholds are legal (always hot); only wrong types reset.
        for name, default in (("heating_up_rate", DEFAULT_HEATING_UP),
                              ("on_fire_rate", DEFAULT_ON_FIRE),
                              ("blazing_after", DEFAULT_BLAZING_AFTER)):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                try:
                    value = int(value)
                except (TypeError, ValueError, OverflowError):
                    value = default
                setattr(self, name, value)
        if not isinstance(self.terminal, bool):
            self.terminal = True
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LEVELS:
            self.log_level = "WARN"
        else:
            self.log_level = self.log_level.upper()
        return self

    def apply_env(self, environ: Optional[Mapping[str, str]] = None) -> "HeatSettings":
        env = os.environ if environ is None else environ
        for key, name in ((ENV_HEATING_UP, "heating_up_rate"),
                          (ENV_ON_FIRE, "on_fire_rate"),
                          (ENV_BLAZING, "blazing_after")):
            raw = env.get(key)
            if raw is None:
                continue
            try:
                setattr(self, name, int(raw.strip()))
            except ValueError:
                logger.warn("SettingsEnvIgnored", key=key, value=raw)
        if color_disabled(env):
            self.terminal = False
        if env.get(ENV_LOG_LEVEL):
            self.log_level = env[ENV_LOG_LEVEL].upper()
        return self.normalize()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "HeatSettings":
        return cls().apply_env(environ)

    @classmethod
    def load(cls, path: Optional[Path] = None,
             environ: Optional[Mapping[str, str]] = None) -> "HeatSettings":
        path = Path(path) if path is not None else Path.cwd() / SETTINGS_FILENAME
        data = cls()
        if path.exists():
            try:
                raw = json.loads(path.read_text(encoding="utf-8"))
                if not isinstance(raw, dict):
                    raise ValueError("settings root must be an object")
                # Backfill missing fields (migration safe)
                field_names = {f.name for f in fields(cls)}
                data = cls(**{k: v for k, v in raw.items() if k in field_names})
                logger.debug("SettingsLoaded", path=str(path))
            except (OSError, ValueError, TypeError) as e:
                logger.warn("SettingsParseFailedUsingDefaults", path=str(path), error=str(e))
                data = cls()
        data.normalize()
        return data.apply_env(environ)

    def configure_diagnostics(self) -> "HeatSettings":
        """Apply log_level to the package-wide diagnostic logger."""
        logger.set_level(self.log_level)
        return self
