from __future__ import annotations

from dataclasses import dataclass, field

"""Corpus model: the accepted rows of one input file.

A Row is a tuple of tokens (quote markers already stripped). Its identity is
its index in `Corpus.rows`, assigned in acceptance order. `Corpus.lines` keeps
the accepted lines exactly as read, index for index; the report prints those.
"""

__all__ = [
    "Row",
    "Corpus",
    "IngestStats",
]

Row = tuple[str, ...]


@dataclass(frozen=True)
class IngestStats:
    """Line accounting for a single ingestion.

    total_lines == accepted + malformed + duplicates + blank
    """
    total_lines: int = 0
    accepted: int = 0
    malformed: int = 0  # at least one invalid field
    duplicates: int = 0  # exact repeat of an accepted line (dedup policy only)
    blank: int = 0  # nothing left once the line terminator is removed


@dataclass(frozen=True)
class Corpus:
    """All accepted rows plus the widest row's field count."""
    rows: tuple[Row, ...] = ()
    lines: tuple[str, ...] = ()  # raw accepted lines, parallel to rows
    max_columns: int = 0
    stats: IngestStats = field(default_factory=IngestStats)

    def __len__(self) -> int:
        return len(self.rows)
