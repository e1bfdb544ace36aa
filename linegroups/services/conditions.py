from __future__ import annotations

from ..models.corpus import Corpus
from ..models.grouping import ConditionMap

"""Condition derivation: second pass over the corpus.

A condition is a (token, position) pair seen in at least two rows. A token
recurring at *different* positions is not evidence that rows belong together,
so positions are tracked per token and a condition is confirmed only when a
later row hits a position already recorded for that token.
"""


def derive_conditions(corpus: Corpus, duplicates: frozenset[str]) -> ConditionMap:
    seen_positions: dict[str, set[int]] = {}
    conditions: dict[str, set[int]] = {}
    for row in corpus.rows:
        for position, token in enumerate(row):
            if token not in duplicates:
                continue
            seen = seen_positions.setdefault(token, set())
            if position in seen:
                conditions.setdefault(token, set()).add(position)
            else:
                seen.add(position)
    return ConditionMap(conditions={token: frozenset(p) for token, p in conditions.items()})
