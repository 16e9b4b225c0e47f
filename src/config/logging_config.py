# src/config/logging_config.py

"""Per-run logging for PriceTrack.

Every launch of the dashboard or a CLI command writes its own
``logs/run_YYYYmmdd_HHMMSS.log`` through the ``price_track`` logger.
Only the newest ``Settings.LOG_KEEP_RUNS`` run logs are kept, and the
stderr threshold comes from ``PRICE_TRACK_LOG_LEVEL`` so the TUI stays
clean unless asked otherwise.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

ROOT_LOGGER = "price_track"

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | "
    "%(module)s:%(funcName)s:%(lineno)d | %(message)s"
)
_CONSOLE_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _console_level() -> int:
    level = logging.getLevelName(Settings.CONSOLE_LOG_LEVEL)
    return level if isinstance(level, int) else logging.WARNING


def prune_run_logs(logs_dir: Path, keep: int) -> int:
    """Delete all but the newest *keep* run logs; return how many went."""
    runs = sorted(logs_dir.glob("run_*.log"))
    stale = runs[:-keep] if keep > 0 else runs
    for path in stale:
        path.unlink(missing_ok=True)
    return len(stale)


def setup_logging() -> Path:
    """Attach the per-run file and stderr handlers to ``price_track``.

    Returns:
        The path of this run's log file.
    """
    logs_dir: Path = Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = logs_dir / f"run_{datetime.now():%Y%m%d_%H%M%S}.log"

    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(logging.DEBUG)

    # Repeated calls (tests, CLI then TUI) keep the first run's handlers
    if root_logger.handlers:
        return log_file

    removed = prune_run_logs(logs_dir, Settings.LOG_KEEP_RUNS - 1)

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT)
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(_console_level())
    console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    root_logger.info(
        "Logging to %s (%d old run logs pruned)", log_file, removed,
    )
    return log_file
