"""JSONL run log for fscheck invocations."""

import json
import os
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any

from fscheck.core.evaluator import Severity, Verdict

LOG_NAME = "fscheck"


def get_log_path(base_path: Path | None = None) -> Path:
    """
    Get today's log file path.

    Args:
        base_path: Base directory for logs (default: ~/var/log/fscheck)

    Returns:
        Path to the log file: {base}/{date}/fscheck.jsonl
    """
    if base_path is None:
        home = Path(os.environ.get("HOME", "/tmp"))
        base_path = home / "var" / "log" / LOG_NAME

    today = date.today().isoformat()
    return base_path / today / f"{LOG_NAME}.jsonl"


class CheckLogger:
    """
    JSONL logger for check runs.

    Writes one structured entry per line, appending to the day's file.
    """

    def __init__(self, log_path: Path | None = None):
        self.log_path = log_path or get_log_path()
        self._file = None

    def _ensure_file(self) -> None:
        if self._file is None:
            self.log_path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(self.log_path, "a")

    def _log(self, level: str, message: str, **extra: Any) -> None:
        """Write a log entry."""
        self._ensure_file()
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "message": message,
            **extra,
        }
        self._file.write(json.dumps(entry, ensure_ascii=False) + "\n")
        self._file.flush()

    def info(self, message: str, **extra: Any) -> None:
        """Log info message."""
        self._log("info", message, **extra)

    def error(self, message: str, **extra: Any) -> None:
        """Log error message."""
        self._log("error", message, **extra)

    def record(self, verdict: Verdict, **extra: Any) -> None:
        """Log the outcome of a check; UNKNOWN outcomes are logged as errors."""
        fields = {
            "status": verdict.severity.name,
            "path": verdict.path,
            "metric": verdict.metric,
            "value": verdict.value,
            **extra,
        }
        if verdict.severity is Severity.UNKNOWN:
            self.error(verdict.message, **fields)
        else:
            self.info(verdict.message, **fields)

    def close(self) -> None:
        """Close the log file."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "CheckLogger":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
