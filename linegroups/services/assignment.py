from __future__ import annotations

from ..models.corpus import Corpus
from ..models.grouping import ConditionMap, GroupAssignment

"""Group id assignment: third pass over the corpus.

Each condition token gets a dense index k in ConditionMap order and each
(token, position) condition the id

    k * (max_columns + 1) + position

Positions are always below max_columns + 1, so the mapping is injective: two
different conditions never share an id and the same condition gets the same
id in every row.
"""


def group_id(condition_index: int, position: int, max_columns: int) -> int:
    if not 0 <= position <= max_columns:
        raise ValueError(f"position {position} outside 0..{max_columns}")
    return condition_index * (max_columns + 1) + position


def assign_groups(corpus: Corpus, conditions: ConditionMap) -> GroupAssignment:
    index = conditions.index()
    max_columns = corpus.max_columns

    row_group_ids: dict[int, list[int]] = {}
    for row_index, row in enumerate(corpus.rows):
        for position, token in enumerate(row):
            if conditions.matches(token, position):
                gid = group_id(index[token], position, max_columns)
                row_group_ids.setdefault(row_index, []).append(gid)

    groups: dict[int, set[int]] = {}
    for row_index, ids in row_group_ids.items():
        for gid in ids:
            groups.setdefault(gid, set()).add(row_index)

    return GroupAssignment(
        row_group_ids={r: tuple(ids) for r, ids in row_group_ids.items()},
        groups={gid: frozenset(members) for gid, members in groups.items()},
        max_columns=max_columns,
    )
