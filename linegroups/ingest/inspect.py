from __future__ import annotations

import pandas as pd

from ..models.corpus import Corpus

"""Column profile of an ingested corpus (backs `--inspect-data`).

For every column position: how many rows fill it, how many distinct tokens it
holds, and how many of those tokens recur in two or more rows. The last
figure is the number of merge conditions the position will contribute.
"""

PROFILE_COLUMNS = ["position", "filled", "distinct", "repeated"]


def corpus_frame(corpus: Corpus) -> pd.DataFrame:
    """Rows as a DataFrame; short rows are padded with NaN, empty tokens kept as ''."""
    return pd.DataFrame(list(corpus.rows), columns=range(corpus.max_columns), dtype="object")


def profile_corpus(corpus: Corpus) -> pd.DataFrame:
    df = corpus_frame(corpus)
    records = []
    for position in range(corpus.max_columns):
        col = df[position]
        tokens = col[col.notna() & (col != "")]
        counts = tokens.value_counts()
        records.append(
            {
                "position": position,
                "filled": int(len(tokens)),
                "distinct": int(counts.size),
                "repeated": int((counts > 1).sum()),
            }
        )
    return pd.DataFrame.from_records(records, columns=PROFILE_COLUMNS)
