# Shared pytest fixtures
from __future__ import annotations
import tempfile
from pathlib import Path
import pytest

from linegroups.logging.init import reset_logging

SCENARIO_LINES = [
    '"1";"2";"3"',
    '"1";"5";"3"',
    '"9";"2";"3"',
]


@pytest.fixture(autouse=True)
def _clean_state(monkeypatch):
    # The stdout handler binds sys.stdout when created; capsys swaps it per test
    reset_logging()
    for name in ("LINEGROUPS_OUTPUT", "LINEGROUPS_POLICY"):
        monkeypatch.delenv(name, raising=False)
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def scenario_lines() -> list[str]:
    return list(SCENARIO_LINES)


@pytest.fixture()
def sample_input_text() -> str:
    # tolerant: 9 lines, 6 accepted, 1 malformed, 1 duplicate, 1 blank
    #   -> group {0,1,2} via "123"@1 and "100"@2, singletons rows 3,4,5
    return "\n".join([
        '"111";"123";"222"',
        '"200";"123";"100"',
        '"300";"";"100"',
        '"8383"',
        'not;"a";"row"',
        '"111";"123";"222"',
        '"7.5";"9"',
        '',
        '"100200300";"";"500"',
    ]) + "\n"


@pytest.fixture()
def write_input(temp_workdir: Path, sample_input_text: str) -> Path:
    path = temp_workdir / "data" / "input.txt"
    path.write_text(sample_input_text, encoding="utf-8")
    return path


@pytest.fixture()
def sample_config_yaml() -> str:
    return """output_path: ./out/result.txt
delimiter: ";"
quote_char: '"'
validation_policy: tolerant
include_diagnostics: true
rejection_log_dir: ./logs
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "grouping.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg
