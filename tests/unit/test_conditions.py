from __future__ import annotations

from linegroups.ingest.reader import ingest_lines
from linegroups.services.conditions import derive_conditions
from linegroups.services.duplicates import find_duplicate_tokens


def _conditions(lines: list[str]):
    corpus = ingest_lines(lines)
    return derive_conditions(corpus, find_duplicate_tokens(corpus))


def test_scenario_conditions(scenario_lines):
    cmap = _conditions(scenario_lines)
    assert cmap.conditions == {
        "1": frozenset({0}),
        "3": frozenset({2}),
        "2": frozenset({1}),
    }


def test_condition_order_follows_first_confirmation(scenario_lines):
    # "1"@0 and "3"@2 confirm on the second row, "2"@1 only on the third
    assert list(_conditions(scenario_lines).conditions) == ["1", "3", "2"]


def test_token_at_different_positions_is_not_a_condition():
    cmap = _conditions(['"1";"2"', '"2";"1"'])
    assert len(cmap) == 0


def test_dropped_repeat_line_does_not_confirm_conditions():
    cmap = _conditions(['"5";"5"', '"5";"5"', '"5";"0"'])
    # tolerant dedup drops the second line; "5"@0 still recurs in row 2
    assert cmap.conditions == {"5": frozenset({0})}


def test_token_qualifies_at_some_positions_only():
    cmap = _conditions(['"4";"9"', '"4";"8"', '"7";"4"'])
    assert cmap.conditions == {"4": frozenset({0})}
    assert cmap.matches("4", 0)
    assert not cmap.matches("4", 1)
    assert not cmap.matches("9", 1)


def test_pairs_and_index():
    cmap = _conditions(['"1";"2"', '"1";"2"', '"3";"2"'])
    # tolerant drops the repeated line: rows ("1","2"), ("3","2")
    assert list(cmap.pairs()) == [("2", 1)]
    assert cmap.index() == {"2": 0}
