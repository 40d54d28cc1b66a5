"""Logging configuration for the widget"""
import logging
import sys
from pathlib import Path

APP_LOGGERS = ("__main__", "main", "models", "storage", "components", "config")


class _ConsoleNoiseFilter(logging.Filter):
    """Our loggers pass through; third-party and py.warnings only at ERROR+"""

    def filter(self, record: logging.LogRecord) -> bool:
        root_name = record.name.split(".", 1)[0]
        if root_name in APP_LOGGERS:
            return True
        return record.levelno >= logging.ERROR


def setup_logging(log_dir: Path, console_level: int = logging.INFO, file_level: int = logging.DEBUG) -> Path:
    """Install console + file handlers on the root logger. Call once at startup."""
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "timetrack.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # avoid duplicate handlers on re-init
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    logging.captureWarnings(True)
    return log_file
