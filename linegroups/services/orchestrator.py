from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

import psutil

from ..ingest.reader import ingest_lines, read_lines
from ..logging.rejection_log import RejectionLogBuffer, RejectionRecord
from ..models.config_models import GroupingConfig
from ..models.corpus import Corpus
from ..models.grouping import ConditionMap, GroupAssignment, Partition
from ..models.run_result import GroupReport, RunResult
from .assignment import assign_groups
from .conditions import derive_conditions
from .consolidation import consolidate
from .duplicates import find_duplicate_tokens
from .progress import StageProgress
from .report import build_report, render_report, write_report

logger = logging.getLogger(__name__)

"""Run orchestration for the line grouping tool.

Coordinates one run: read the input, push it through the six pipeline stages
(ingest -> duplicates -> conditions -> assign -> consolidate -> report), write
the report and return the aggregated RunResult. The run is all or nothing:
an unreadable input aborts before any output exists, a failed write aborts
after the computation.
"""

STAGES = ("ingest", "duplicates", "conditions", "assign", "consolidate", "report")


class ProcessingError(Exception):
    """Base exception for fatal run errors."""
    pass


class InputSourceError(ProcessingError):
    """Input file missing or unreadable."""


class ReportWriteError(ProcessingError):
    """Report could not be written; the computed result is lost."""


@dataclass(frozen=True)
class GroupingOutcome:
    """Every intermediate product of one grouping, in pipeline order."""
    corpus: Corpus
    duplicates: frozenset[str]
    conditions: ConditionMap
    assignment: GroupAssignment
    partition: Partition
    report: GroupReport


def load_input(path: Path) -> list[str]:
    """Read all input lines.

    Raises:
        InputSourceError: Missing or unreadable input
    """
    if not path.exists():
        raise InputSourceError(f"input file not found: {path}")
    if not path.is_file():
        raise InputSourceError(f"input path is not a file: {path}")
    try:
        return read_lines(path)
    except OSError as e:
        raise InputSourceError(f"error reading input {path}: {e}") from e


def group_corpus(corpus: Corpus, progress: StageProgress | None = None) -> GroupingOutcome:
    """Run the grouping stages over an already ingested corpus."""

    def _stage(name: str) -> None:
        if progress is not None:
            progress.start_stage(name)

    def _done(**postfix: int) -> None:
        if progress is not None:
            progress.finish_stage(**postfix)

    _stage("duplicates")
    duplicates = find_duplicate_tokens(corpus)
    _done(tokens=len(duplicates))

    _stage("conditions")
    conditions = derive_conditions(corpus, duplicates)
    _done(conditions=len(conditions))

    _stage("assign")
    assignment = assign_groups(corpus, conditions)
    _done(groups=len(assignment.groups))

    _stage("consolidate")
    partition = consolidate(assignment)
    _done(groups=len(partition))

    _stage("report")
    report = build_report(corpus, assignment, partition)
    _done()

    logger.debug(
        "grouping: rows=%d duplicate_tokens=%d conditions=%d groups=%d",
        len(corpus), len(duplicates), sum(1 for _ in conditions.pairs()), report.total_groups,
    )
    return GroupingOutcome(
        corpus=corpus,
        duplicates=duplicates,
        conditions=conditions,
        assignment=assignment,
        partition=partition,
        report=report,
    )


def group_lines(lines: list[str], config: GroupingConfig | None = None) -> GroupingOutcome:
    """Ingest raw lines and group them in one call (no I/O)."""
    cfg = config or GroupingConfig()
    corpus = ingest_lines(lines, cfg.validation_policy, cfg.delimiter, cfg.quote_char)
    return group_corpus(corpus)


def _rss_bytes() -> int:
    return psutil.Process().memory_info().rss


def run(config: GroupingConfig, input_path: Path) -> RunResult:
    """Group the rows of `input_path` and write the report.

    Raises:
        InputSourceError: Before any processing; no report is written
        ReportWriteError: After processing; the result is discarded
    """
    start_time = datetime.now(UTC)
    started = time.perf_counter()
    rss_before = _rss_bytes()

    lines = load_input(input_path)

    rejections: RejectionLogBuffer | None = None
    on_reject = None
    if config.rejection_log_dir:
        rejections = RejectionLogBuffer(Path(config.rejection_log_dir))
        source = input_path.name

        def on_reject(line_number: int, reason: str, raw: str) -> None:
            rejections.append(RejectionRecord.create(source, line_number, reason, raw))

    with StageProgress(len(STAGES)) as progress:
        progress.start_stage("ingest")
        corpus = ingest_lines(
            lines,
            config.validation_policy,
            config.delimiter,
            config.quote_char,
            on_reject=on_reject,
        )
        progress.finish_stage(rows=len(corpus))
        outcome = group_corpus(corpus, progress)

    elapsed = time.perf_counter() - started
    memory_delta = _rss_bytes() - rss_before

    text = render_report(
        outcome.report,
        corpus,
        elapsed_ms=int(elapsed * 1000) if config.include_diagnostics else None,
        memory_bytes=memory_delta if config.include_diagnostics else None,
    )
    output_path = Path(config.output_path)
    try:
        write_report(output_path, text)
    except OSError as e:
        raise ReportWriteError(f"error writing report {output_path}: {e}") from e

    if rejections is not None:
        try:
            log_path = rejections.flush()
        except OSError as e:
            logger.warning("rejection log not written: %s", e)
        else:
            if log_path is not None:
                logger.info("rejections logged to %s", log_path)

    end_time = datetime.now(UTC)
    return RunResult(
        stats=corpus.stats,
        report=outcome.report,
        output_path=output_path,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=round(elapsed, 6),
        memory_delta_bytes=memory_delta,
    )
