from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from pathlib import Path

from ..models.config_models import DEFAULT_DELIMITER, DEFAULT_QUOTE_CHAR, ValidationPolicy
from ..models.corpus import Corpus, IngestStats, Row
from ..models.rejection_record import BLANK_LINE, DUPLICATE_ROW, MALFORMED_ROW

"""Row ingestion: raw lines -> validated, deduplicated Corpus.

A line is a sequence of fields joined by the delimiter. A field is valid when
it is empty, or when it is wrapped in exactly one pair of quote characters
around a numeric payload:

    "123";"";;"45"      -> ("123", "", "", "45")

Validation is a plain predicate; nothing in here raises for bad input. Lines
failing it are dropped and reported through the optional `on_reject` hook.
"""

logger = logging.getLogger(__name__)

__all__ = [
    "read_lines",
    "is_field_valid",
    "is_row_valid",
    "parse_row",
    "ingest_lines",
]

_STRICT_PAYLOAD = re.compile(r"[0-9]*")
_TOLERANT_PAYLOAD = re.compile(r"[0-9]*\.?[0-9]*")

RejectHook = Callable[[int, str, str], None]


def read_lines(path: Path) -> list[str]:
    """Read the whole input file, returning lines without terminators.

    Undecodable bytes become U+FFFD, so such a line simply fails validation.
    OSError propagates; the orchestrator turns it into a fatal InputSourceError.
    """
    with path.open("r", encoding="utf-8", errors="replace", newline=None) as f:
        return [line.rstrip("\r\n") for line in f]


def is_field_valid(field: str, quote_char: str = DEFAULT_QUOTE_CHAR, allow_dot: bool = False) -> bool:
    if field == "":
        return True
    # A lone quote has no room for both markers
    if len(field) < 2 or field[0] != quote_char or field[-1] != quote_char:
        return False
    payload = field[1:-1]
    pattern = _TOLERANT_PAYLOAD if allow_dot else _STRICT_PAYLOAD
    return pattern.fullmatch(payload) is not None


def is_row_valid(
    line: str,
    delimiter: str = DEFAULT_DELIMITER,
    quote_char: str = DEFAULT_QUOTE_CHAR,
    allow_dot: bool = False,
) -> bool:
    """True when every field of `line` is valid."""
    return all(is_field_valid(f, quote_char, allow_dot) for f in line.split(delimiter))


def parse_row(line: str, delimiter: str = DEFAULT_DELIMITER) -> Row:
    """Split a valid line into tokens, stripping the quote markers."""
    return tuple(f[1:-1] if f else "" for f in line.split(delimiter))


def ingest_lines(
    lines: Iterable[str],
    policy: ValidationPolicy = ValidationPolicy.TOLERANT,
    delimiter: str = DEFAULT_DELIMITER,
    quote_char: str = DEFAULT_QUOTE_CHAR,
    on_reject: RejectHook | None = None,
) -> Corpus:
    """Build the Corpus from raw lines.

    Args:
        lines: Raw lines without terminators
        policy: Payload alphabet and deduplication behaviour
        delimiter: Field separator
        quote_char: Marker around non-empty fields
        on_reject: Called as (line_number, reason, raw) for every dropped
            line; line numbers are 1-based

    Returns:
        Corpus of accepted rows in input order
    """
    rows: list[Row] = []
    accepted_lines: list[str] = []
    seen_lines: set[str] = set()
    max_columns = 0
    total = malformed = duplicates = blank = 0

    for line_number, line in enumerate(lines, start=1):
        total += 1
        if line == "":
            blank += 1
            if on_reject is not None:
                on_reject(line_number, BLANK_LINE, line)
            continue
        if not is_row_valid(line, delimiter, quote_char, policy.allows_dot):
            malformed += 1
            if on_reject is not None:
                on_reject(line_number, MALFORMED_ROW, line)
            continue
        if policy.deduplicates:
            # exact text: "1";;"3" and "1";"";"3" are two rows
            if line in seen_lines:
                duplicates += 1
                if on_reject is not None:
                    on_reject(line_number, DUPLICATE_ROW, line)
                continue
            seen_lines.add(line)

        row = parse_row(line, delimiter)
        max_columns = max(max_columns, len(row))
        rows.append(row)
        accepted_lines.append(line)

    stats = IngestStats(
        total_lines=total,
        accepted=len(rows),
        malformed=malformed,
        duplicates=duplicates,
        blank=blank,
    )
    logger.debug(
        "ingest: lines=%d accepted=%d malformed=%d duplicates=%d blank=%d max_columns=%d",
        total, len(rows), malformed, duplicates, blank, max_columns,
    )
    return Corpus(rows=tuple(rows), lines=tuple(accepted_lines), max_columns=max_columns, stats=stats)
