from __future__ import annotations

import logging

from ..models.grouping import GroupAssignment, Partition

"""Group consolidation with union-find.

A row satisfying several conditions ties their groups together, and ties are
transitive: row X linking groups A and B plus row Y linking B and C puts A, B
and C in one group. Every row's consecutive group id pairs are unioned; the
surviving roots hold the merged member sets.
"""

logger = logging.getLogger(__name__)


class GroupUnionFind:
    """Disjoint sets of group ids, each root owning its rows.

    A merge folds the second root into the first: the first root keeps the
    union of both member sets, the second root's entry is dropped and it
    points to the first from then on.
    """

    def __init__(self, groups: dict[int, frozenset[int]]) -> None:
        self._members: dict[int, set[int]] = {gid: set(rows) for gid, rows in groups.items()}
        self._parent: dict[int, int] = {}

    def find(self, gid: int) -> int:
        """Return the root for `gid`, compressing the path behind it."""
        root = gid
        while root in self._parent:
            root = self._parent[root]
        while gid != root:
            next_gid = self._parent[gid]
            self._parent[gid] = root
            gid = next_gid
        return root

    def union(self, first: int, second: int) -> int:
        """Merge the groups holding `first` and `second`; return the root."""
        root_first = self.find(first)
        root_second = self.find(second)
        if root_first == root_second:
            return root_first
        self._members[root_first] |= self._members.pop(root_second)
        self._parent[root_second] = root_first
        return root_first

    def groups(self) -> dict[int, frozenset[int]]:
        return {root: frozenset(rows) for root, rows in self._members.items()}


def consolidate(assignment: GroupAssignment) -> Partition:
    uf = GroupUnionFind(assignment.groups)
    merges = 0
    for ids in assignment.row_group_ids.values():
        for first, second in zip(ids, ids[1:]):
            if uf.find(first) != uf.find(second):
                uf.union(first, second)
                merges += 1
    partition = Partition(groups=uf.groups())
    logger.debug("consolidate: initial=%d merges=%d final=%d", len(assignment.groups), merges, len(partition))
    return partition
