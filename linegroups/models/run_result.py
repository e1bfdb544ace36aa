from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .corpus import IngestStats

"""Report and run result models.

GroupReport is the ordered, numbered view of the final partition that the
report writer renders. RunResult aggregates one CLI run for the SUMMARY line.
"""


@dataclass(frozen=True)
class ReportGroup:
    """One numbered group in report order."""
    number: int  # 1-based, sequential across multi-row groups and singletons
    members: tuple[int, ...]  # row indices, ascending

    @property
    def size(self) -> int:
        return len(self.members)


@dataclass(frozen=True)
class GroupReport:
    """All groups in report order: multi-row groups first, then singletons."""
    groups: tuple[ReportGroup, ...]
    multi_group_count: int
    singleton_count: int

    @property
    def total_groups(self) -> int:
        return len(self.groups)


@dataclass(frozen=True)
class RunResult:
    """Aggregated outcome of one grouping run."""
    stats: IngestStats
    report: GroupReport
    output_path: Path
    start_time: datetime  # UTC
    end_time: datetime  # UTC
    elapsed_seconds: float
    memory_delta_bytes: int  # process RSS after minus before
