from __future__ import annotations

import re
from datetime import datetime, timezone
from pathlib import Path

from linegroups.models.corpus import IngestStats
from linegroups.models.run_result import GroupReport, ReportGroup, RunResult
from linegroups.services.summary import render_summary_line

SUMMARY_PATTERN = re.compile(
    r"^SUMMARY\s+lines=([0-9]+)\s+accepted=([0-9]+)\s+malformed=([0-9]+)\s+"
    r"duplicates=([0-9]+)\s+groups=([0-9]+)\s+multi_groups=([0-9]+)\s+"
    r"singletons=([0-9]+)\s+elapsed_sec=([0-9]+\.?[0-9]*)$"
)


def _result(elapsed: float, stats: IngestStats | None = None, report: GroupReport | None = None) -> RunResult:
    t = datetime(2024, 1, 1, 10, 0, 0, tzinfo=timezone.utc)
    return RunResult(
        stats=stats or IngestStats(),
        report=report or GroupReport(groups=(), multi_group_count=0, singleton_count=0),
        output_path=Path("result.txt"),
        start_time=t,
        end_time=t,
        elapsed_seconds=elapsed,
        memory_delta_bytes=0,
    )


def test_render_summary_line_fields():
    report = GroupReport(
        groups=(ReportGroup(1, (0, 1, 2)), ReportGroup(2, (3,)), ReportGroup(3, (4,))),
        multi_group_count=1,
        singleton_count=2,
    )
    stats = IngestStats(total_lines=9, accepted=5, malformed=2, duplicates=1, blank=1)

    line = render_summary_line(_result(2.0, stats, report))

    m = SUMMARY_PATTERN.match(line)
    assert m, f"SUMMARY line should match regex: {line}"
    assert m.groups() == ("9", "5", "2", "1", "3", "1", "2", "2")


def test_render_summary_line_zero():
    line = render_summary_line(_result(0.0))
    assert line == "SUMMARY lines=0 accepted=0 malformed=0 duplicates=0 groups=0 multi_groups=0 singletons=0 elapsed_sec=0"


def test_render_summary_line_decimal():
    assert render_summary_line(_result(0.84)).endswith("elapsed_sec=0.84")


def test_render_summary_line_small_elapsed_without_scientific_notation():
    line = render_summary_line(_result(0.00005))
    assert SUMMARY_PATTERN.match(line)
    assert "e-" not in line
    assert line.endswith("elapsed_sec=0.00005")
