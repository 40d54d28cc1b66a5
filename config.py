"""Runtime settings read from the environment (and an optional .env file)"""
from dataclasses import dataclass
import logging
import os
from pathlib import Path

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    home: Path
    log_level: int
    tick_interval_ms: int
    window_opacity: float

    @property
    def storage_path(self) -> Path:
        return self.home / "local_storage.json"

    @property
    def log_dir(self) -> Path:
        return self.home / "logs"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, str(default)).strip()
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}")
    if value <= 0:
        raise RuntimeError(f"{name} must be positive, got {value}")
    return value


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name, str(default)).strip()
    try:
        value = float(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be a number, got {raw!r}")
    if not 0.0 < value <= 1.0:
        raise RuntimeError(f"{name} must be in (0, 1], got {value}")
    return value


def load_settings(use_dotenv: bool = True) -> Settings:
    if use_dotenv:
        load_dotenv()

    home_raw = os.getenv("TIMETRACK_HOME", "").strip()
    home = Path(home_raw).expanduser() if home_raw else Path.home() / ".timetrack"

    level_name = os.getenv("TIMETRACK_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise RuntimeError(f"TIMETRACK_LOG_LEVEL invalid: {level_name!r}")

    return Settings(
        home=home,
        log_level=level,
        tick_interval_ms=_int_env("TIMETRACK_TICK_MS", 1000),
        window_opacity=_float_env("TIMETRACK_OPACITY", 0.95),
    )
