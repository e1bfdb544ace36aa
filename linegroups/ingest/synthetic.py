from __future__ import annotations

import numpy as np

from ..models.config_models import DEFAULT_DELIMITER, DEFAULT_QUOTE_CHAR

"""Synthetic input generation for performance runs and tests.

Tokens are drawn from a small numeric vocabulary so that (token, position)
repeats, and therefore merges, actually occur. A share of fields is left
empty and a share of lines is corrupted with a non-digit payload.
"""


def generate_lines(
    rows: int,
    cols: int,
    *,
    vocabulary: int = 10_000,
    empty_ratio: float = 0.1,
    malformed_ratio: float = 0.01,
    seed: int = 42,
    delimiter: str = DEFAULT_DELIMITER,
    quote_char: str = DEFAULT_QUOTE_CHAR,
) -> list[str]:
    """Generate `rows` input lines of up to `cols` fields.

    Args:
        rows: Number of lines
        cols: Maximum fields per line (each line has 1..cols fields)
        vocabulary: Number of distinct token values to draw from
        empty_ratio: Probability of a field being empty
        malformed_ratio: Probability of a line carrying an invalid field
        seed: Random seed for reproducible data
    """
    rng = np.random.default_rng(seed)
    widths = rng.integers(1, cols + 1, size=rows)
    tokens = rng.integers(0, vocabulary, size=(rows, cols))
    empties = rng.random(size=(rows, cols)) < empty_ratio
    broken = rng.random(size=rows) < malformed_ratio

    lines: list[str] = []
    for r in range(rows):
        fields = []
        for c in range(int(widths[r])):
            if empties[r, c]:
                fields.append("")
            else:
                fields.append(f"{quote_char}{int(tokens[r, c])}{quote_char}")
        if broken[r]:
            fields[0] = f"{quote_char}x{int(tokens[r, 0])}{quote_char}"
        lines.append(delimiter.join(fields))
    return lines
