from __future__ import annotations

from pathlib import Path

from ..models.corpus import Corpus
from ..models.grouping import GroupAssignment, Partition
from ..models.run_result import GroupReport, ReportGroup

"""Report building and rendering.

Report layout (one line each, blank lines shown as <blank>):

    There are 2 groups with 2 elements and more.
    <blank>
    Group #1 (consists of 3 elements)
    "1";"2";"3"
    ...
    <blank>
    Group #3 (consists of 1 element)
    "7";"8"
    <blank>
    All 3 groups created.
    Groups with 2 elements and more: 2
    Groups with 1 element: 1
    <blank>
    Total time: 12 millis
    Total memory: 1.5 MB

The diagnostics block is optional and informational only.
"""

__all__ = [
    "build_report",
    "render_report",
    "write_report",
    "format_size",
]

LINE_SEP = "\n"


def build_report(corpus: Corpus, assignment: GroupAssignment, partition: Partition) -> GroupReport:
    """Number every group: multi-row groups by size, then singletons.

    Multi-row groups sort by descending size; equal sizes keep the order of
    their smallest row index. Singletons are the rows no condition matched,
    in row order.
    """
    merged = sorted(
        (tuple(sorted(members)) for members in partition.member_sets()),
        key=lambda members: (-len(members), members[0]),
    )
    singles = [(i,) for i in range(len(corpus)) if not assignment.is_grouped(i)]

    groups = tuple(
        ReportGroup(number=n, members=members)
        for n, members in enumerate([*merged, *singles], start=1)
    )
    return GroupReport(groups=groups, multi_group_count=len(merged), singleton_count=len(singles))


def format_size(v: int) -> str:
    """Human readable byte count in binary units: 512 B, 1.5 KB, 2.0 MB."""
    if v < 0:
        return "-" + format_size(-v)
    if v < 1024:
        return f"{v} B"
    z = (v.bit_length() - 1) // 10
    return f"{v / (1 << (z * 10)):.1f} {' KMGTPE'[z]}B"


def _group_header(group: ReportGroup) -> str:
    noun = "element" if group.size == 1 else "elements"
    return f"Group #{group.number} (consists of {group.size} {noun})"


def render_report(
    report: GroupReport,
    corpus: Corpus,
    elapsed_ms: int | None = None,
    memory_bytes: int | None = None,
) -> str:
    """Render the report text. Member rows are printed exactly as read.

    Diagnostics appear only when both are given.
    """
    lines = [f"There are {report.multi_group_count} groups with 2 elements and more.", ""]

    for group in report.groups:
        lines.append(_group_header(group))
        lines.extend(corpus.lines[i] for i in group.members)
        lines.append("")

    lines.append(f"All {report.total_groups} groups created.")
    lines.append(f"Groups with 2 elements and more: {report.multi_group_count}")
    lines.append(f"Groups with 1 element: {report.singleton_count}")

    if elapsed_ms is not None and memory_bytes is not None:
        lines.append("")
        lines.append(f"Total time: {elapsed_ms} millis")
        lines.append(f"Total memory: {format_size(memory_bytes)}")

    return LINE_SEP.join(lines) + LINE_SEP


def write_report(path: Path, text: str) -> Path:
    """Write the report, creating parent directories. OSError propagates."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
