from __future__ import annotations

import re
from pathlib import Path

from linegroups.cli import main as cli_main

"""SUMMARY line format contract.

The last line a successful run prints is machine readable:
SUMMARY lines= accepted= malformed= duplicates= groups= multi_groups= singletons= elapsed_sec=
"""

SUMMARY_PATTERN = re.compile(
    r"^SUMMARY\s+lines=([0-9]+)\s+accepted=([0-9]+)\s+malformed=([0-9]+)\s+"
    r"duplicates=([0-9]+)\s+groups=([0-9]+)\s+multi_groups=([0-9]+)\s+"
    r"singletons=([0-9]+)\s+elapsed_sec=([0-9]+\.?[0-9]*)$"
)


def test_summary_pattern_example_line():
    line = (
        "SUMMARY lines=9 accepted=6 malformed=1 duplicates=1 groups=4 "
        "multi_groups=1 singletons=3 elapsed_sec=0.012"
    )
    assert SUMMARY_PATTERN.match(line), "SUMMARY line should match contract regex"


def test_summary_is_last_line_of_successful_run(write_input: Path, capsys):
    code = cli_main([str(write_input)])

    out_lines = capsys.readouterr().out.strip().splitlines()
    assert code == 0
    m = SUMMARY_PATTERN.match(out_lines[-1])
    assert m, out_lines[-1]
    lines, accepted, malformed, duplicates, groups, multi, singles = map(int, m.groups()[:7])
    assert (lines, accepted, malformed, duplicates) == (9, 6, 1, 1)
    assert (groups, multi, singles) == (4, 1, 3)
    # blank line accounts for the gap
    assert lines == accepted + malformed + duplicates + 1
    assert groups == multi + singles


def test_no_summary_on_fatal_error(temp_workdir: Path, capsys):
    code = cli_main([str(temp_workdir / "absent.txt")])
    assert code == 1
    assert "SUMMARY" not in capsys.readouterr().out
