from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

"""Intermediate grouping structures passed between pipeline stages.

duplicates -> ConditionMap -> GroupAssignment -> Partition
"""

__all__ = [
    "ConditionMap",
    "GroupAssignment",
    "Partition",
]


@dataclass(frozen=True)
class ConditionMap:
    """Token -> column positions at which it recurs in two or more rows.

    Keys keep the order in which each token's first condition was confirmed;
    that order defines the dense condition index used for group ids.
    """
    conditions: dict[str, frozenset[int]]

    def __len__(self) -> int:
        return len(self.conditions)

    def matches(self, token: str, position: int) -> bool:
        positions = self.conditions.get(token)
        return positions is not None and position in positions

    def pairs(self) -> Iterator[tuple[str, int]]:
        """Yield every (token, position) condition, positions ascending."""
        for token, positions in self.conditions.items():
            for position in sorted(positions):
                yield token, position

    def index(self) -> dict[str, int]:
        """Dense 0-based index per condition token, in key order."""
        return {token: k for k, token in enumerate(self.conditions)}


@dataclass(frozen=True)
class GroupAssignment:
    """Group ids per row and the initial (unmerged) members per group id."""
    row_group_ids: dict[int, tuple[int, ...]]  # only rows matching a condition
    groups: dict[int, frozenset[int]]  # group id -> row indices
    max_columns: int

    def is_grouped(self, row_index: int) -> bool:
        return row_index in self.row_group_ids


@dataclass(frozen=True)
class Partition:
    """Disjoint multi-row groups keyed by their surviving root group id."""
    groups: dict[int, frozenset[int]]

    def __len__(self) -> int:
        return len(self.groups)

    def member_sets(self) -> set[frozenset[int]]:
        """Partition as plain sets, independent of which root ids survived."""
        return set(self.groups.values())
