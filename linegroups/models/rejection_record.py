from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

"""RejectionRecord model for the rejection log.

One record per input line the ingestor dropped. Dropped lines are expected
noise, not errors; the log only exists so an operator can see what was
filtered. The JSON Lines output has a fixed key set.
"""

__all__ = [
    "RejectionRecord",
    "MALFORMED_ROW",
    "DUPLICATE_ROW",
    "BLANK_LINE",
]

MALFORMED_ROW = "MALFORMED_ROW"
DUPLICATE_ROW = "DUPLICATE_ROW"
BLANK_LINE = "BLANK_LINE"


@dataclass(frozen=True)
class RejectionRecord:
    """Structured rejection record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        file: Input file name
        line: Line number in the input file (1-based)
        reason: MALFORMED_ROW, DUPLICATE_ROW or BLANK_LINE
        raw: The line as read, terminator removed
    """
    timestamp: str
    file: str
    line: int
    reason: str
    raw: str

    @staticmethod
    def create(file: str, line: int, reason: str, raw: str) -> RejectionRecord:
        """Create a new RejectionRecord stamped with the current UTC time."""
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return RejectionRecord(timestamp=ts, file=file, line=line, reason=reason, raw=raw)

    def to_json_line(self) -> str:
        return json.dumps(asdict(self), ensure_ascii=False)
