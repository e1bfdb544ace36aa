from __future__ import annotations

from collections import Counter

from ..models.corpus import Corpus

"""Duplicate-token detection: first pass over the corpus."""


def find_duplicate_tokens(corpus: Corpus) -> frozenset[str]:
    """Non-empty tokens occurring at least twice anywhere in the corpus.

    Every occurrence counts, regardless of row or column, so a token repeated
    within a single row qualifies too.
    """
    frequency: Counter[str] = Counter()
    duplicates: set[str] = set()
    for row in corpus.rows:
        for token in row:
            if not token:
                continue
            frequency[token] += 1
            if frequency[token] > 1:
                duplicates.add(token)
    return frozenset(duplicates)
