from __future__ import annotations

import logging
import os
from dataclasses import dataclass

LUT_SAMPLES_ENV = "SANDTIME_LUT_SAMPLES"
TARGET_FPS_ENV = "SANDTIME_TARGET_FPS"
LOG_LEVEL_ENV = "SANDTIME_LOG_LEVEL"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class SandConfig:
    lut_samples: int = 256
    fps_window_s: float = 0.5
    fps_history: int = 120
    target_fps: int = 60
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.lut_samples < 2:
            raise ValueError("lut_samples must be >= 2")
        if self.fps_window_s <= 0:
            raise ValueError("fps_window_s must be > 0")
        if self.fps_history <= 0:
            raise ValueError("fps_history must be > 0")
        if self.target_fps < 0:
            raise ValueError("target_fps must be >= 0")
        if self.log_level.upper() not in _LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LEVELS)}")

    @property
    def log_level_no(self) -> int:
        return int(getattr(logging, self.log_level.upper()))

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "SandConfig":
        """Build a config from ``SANDTIME_*`` variables; bad values keep defaults."""

        env = os.environ if environ is None else environ
        defaults = cls()

        lut_samples = _as_int(env.get(LUT_SAMPLES_ENV), defaults.lut_samples)
        if lut_samples < 2:
            lut_samples = defaults.lut_samples

        target_fps = _as_int(env.get(TARGET_FPS_ENV), defaults.target_fps)
        if target_fps < 0:
            target_fps = defaults.target_fps

        log_level = (env.get(LOG_LEVEL_ENV) or defaults.log_level).strip().upper()
        if log_level not in _LEVELS:
            log_level = defaults.log_level

        return cls(lut_samples=lut_samples, target_fps=target_fps, log_level=log_level)


def _as_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default
