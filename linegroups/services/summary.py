from __future__ import annotations

from ..models.run_result import RunResult

"""SUMMARY line rendering.

Format:
SUMMARY lines={n} accepted={n} malformed={n} duplicates={n} groups={n}
multi_groups={n} singletons={n} elapsed_sec={num}
"""


def _format_number(value: float) -> str:
    """Integral values without '.0'; tiny values without scientific notation."""
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return str(value)


def render_summary_line(result: RunResult) -> str:
    """Render the SUMMARY line for a finished run.

    Examples:
        >>> from datetime import datetime, timezone
        >>> from pathlib import Path
        >>> from linegroups.models.corpus import IngestStats
        >>> from linegroups.models.run_result import GroupReport
        >>> t = datetime(2024, 1, 1, tzinfo=timezone.utc)
        >>> result = RunResult(
        ...     stats=IngestStats(total_lines=3, accepted=2, malformed=1),
        ...     report=GroupReport(groups=(), multi_group_count=0, singleton_count=0),
        ...     output_path=Path("result.txt"), start_time=t, end_time=t,
        ...     elapsed_seconds=0.5, memory_delta_bytes=0,
        ... )
        >>> render_summary_line(result)
        'SUMMARY lines=3 accepted=2 malformed=1 duplicates=0 groups=0 multi_groups=0 singletons=0 elapsed_sec=0.5'
    """
    stats = result.stats
    report = result.report
    return (
        f"SUMMARY lines={stats.total_lines} "
        f"accepted={stats.accepted} "
        f"malformed={stats.malformed} "
        f"duplicates={stats.duplicates} "
        f"groups={report.total_groups} "
        f"multi_groups={report.multi_group_count} "
        f"singletons={report.singleton_count} "
        f"elapsed_sec={_format_number(result.elapsed_seconds)}"
    )
