from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from ..models.rejection_record import RejectionRecord

"""Rejection log buffering.

Dropped input lines are buffered in memory and written once per run as JSON
Lines to `<dir>/rejections-YYYYMMDD-HHMMSS.log` (UTC). The file name is fixed
on first access so repeated flushes append to the same file.
"""

__all__ = [
    "RejectionRecord",
    "RejectionLogBuffer",
]

TIMESTAMP_FMT = "%Y%m%d-%H%M%S"


class RejectionLogBuffer:
    """In-memory buffer for rejection records. Flush writes JSON Lines.

    Not thread safe; a run is a single sequential pass.
    """
    def __init__(self, directory: Path) -> None:
        self._directory = directory
        self._records: list[RejectionRecord] = []
        self._file_path: Path | None = None

    @property
    def file_path(self) -> Path:
        if self._file_path is None:
            self._directory.mkdir(parents=True, exist_ok=True)
            stamp = datetime.now(UTC).strftime(TIMESTAMP_FMT)
            self._file_path = self._directory / f"rejections-{stamp}.log"
        return self._file_path

    def append(self, record: RejectionRecord) -> None:
        self._records.append(record)

    def __len__(self) -> int:
        return len(self._records)

    def flush(self) -> Path | None:
        """Append buffered records to the log file.

        Returns:
            The log path, or None when nothing was buffered (no file is created)
        """
        if not self._records:
            return None
        fp = self.file_path
        with fp.open("a", encoding="utf-8") as f:
            for r in self._records:
                f.write(r.to_json_line() + "\n")
        self._records.clear()
        return fp
