from __future__ import annotations

import json
import os
import tempfile
from datetime import datetime
from pathlib import Path

from filelock import FileLock
from loguru import logger


class StateFileError(ValueError):
    """Raised when the state file exists but cannot be read."""


class JsonStateStore:
    """Keeps the audit watermark between runs in a small JSON file."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def _lock(self) -> FileLock:
        return FileLock(str(self.path) + ".lock")

    def load_last_check(self) -> datetime | None:
        """Return the stored watermark, None if nothing has been stored yet."""
        if not self.path.exists():
            return None

        with self._lock():
            content = self.path.read_text(encoding="utf-8")

        try:
            data = json.loads(content)
            raw = data.get("last_check")
            return datetime.fromisoformat(raw) if raw else None
        except (json.JSONDecodeError, ValueError, TypeError, AttributeError) as e:
            raise StateFileError(f"Cannot read state file {self.path}: {e}") from e

    def save_last_check(self, last_check: datetime) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self._lock():
            self._atomic_write(json.dumps({"last_check": last_check.isoformat()}, indent=2))
        logger.info("Saved audit watermark {}", last_check.isoformat())

    def _atomic_write(self, content: str) -> None:
        """Atomic write: write to temp file, then rename."""
        fd, temp_path_str = tempfile.mkstemp(
            dir=str(self.path.parent),
            prefix=".tmp_",
            suffix=".json",
        )
        temp_path = Path(temp_path_str)

        try:
            with os.fdopen(fd, mode="w", encoding="utf-8") as f:
                f.write(content)
            temp_path.replace(self.path)
            logger.debug("Atomic write completed: {}", self.path)
        except Exception:
            if temp_path.exists():
                temp_path.unlink()
            raise
