from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from linegroups.config.loader import ConfigError, load_config
from linegroups.logging.init import log_summary, set_debug, setup_logging
from linegroups.models.config_models import ValidationPolicy
from linegroups.services.orchestrator import (
    InputSourceError,
    ProcessingError,
    ReportWriteError,
    load_input,
    run,
)
from linegroups.services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Load .env (override mode) so LINEGROUPS_* variables reach the config loader
- Load config (YAML + env + flags)
- Group the input file and write the report
- Print the SUMMARY line

Exit codes: 0 success, 1 fatal before output (config / input), 2 report
could not be written.
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_WRITE_FAILURE = 2

INSPECT_SAMPLE_ROWS = 3


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env via python-dotenv; failures only warn."""
    try:
        if path.exists():
            load_dotenv(dotenv_path=path, override=override)
    except OSError as e:  # pragma: no cover
        print(f"WARNING: failed to load .env via python-dotenv: {e}")


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Group delimited digit rows sharing a token at a recurring column")
    p.add_argument("input", type=Path, help="Input file, one row of ';'-separated quoted digits per line")
    p.add_argument("-o", "--output", help="Report path (default: result.txt)")
    p.add_argument("-c", "--config", type=Path, help="Config file (default: config/grouping.yml if present)")
    p.add_argument(
        "--policy",
        choices=[v.value for v in ValidationPolicy],
        help="Row validation policy",
    )
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print a column profile and first rows then exit")
    return p.parse_args(argv)


def _inspect_data(cfg, input_path: Path) -> int:
    from linegroups.ingest.inspect import profile_corpus
    from linegroups.ingest.reader import ingest_lines

    try:
        lines = load_input(input_path)
    except InputSourceError as e:
        print(f"inspect: {e}")
        return EXIT_FATAL
    corpus = ingest_lines(lines, cfg.validation_policy, cfg.delimiter, cfg.quote_char)
    stats = corpus.stats
    print(f"FILE: {input_path.name} lines={stats.total_lines} accepted={stats.accepted} max_columns={corpus.max_columns}")
    for line in corpus.lines[:INSPECT_SAMPLE_ROWS]:
        print(f"  {line}")
    if corpus.max_columns:
        print(profile_corpus(corpus).to_string(index=False))
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # [] from tests must not fall back to pytest's own argv
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)

    if args.debug:
        set_debug(logger)
        logger.debug("debug mode enabled")

    _load_env_file(Path(".env"), override=True)
    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    policy = ValidationPolicy(args.policy) if args.policy else None
    cfg = cfg.with_overrides(output_path=args.output, validation_policy=policy)

    if args.inspect_data:
        return _inspect_data(cfg, args.input)

    logger.info(f"Grouping rows from: {args.input} policy={cfg.validation_policy.value}")

    try:
        result = run(cfg, args.input)
    except InputSourceError as e:
        logger.error(f"input: {e}")
        return EXIT_FATAL
    except ReportWriteError as e:
        logger.error(f"output: {e}")
        return EXIT_WRITE_FAILURE
    except ProcessingError as e:  # pragma: no cover
        logger.error(f"processing: {e}")
        return EXIT_FATAL

    logger.info(f"report written to {result.output_path}")

    summary_line = render_summary_line(result)
    # log_summary adds the "SUMMARY " prefix itself
    log_summary(summary_line[len("SUMMARY "):])
    return EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
