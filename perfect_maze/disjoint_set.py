"""
Disjoint-set (union-find) over integer identifiers ``0 .. n-1``.

Uses union by rank and path compression. ``find`` is iterative (one pass
to locate the root, a second pass to point every visited node at it), so
its call depth does not grow with the size of the lattice.
"""

from __future__ import annotations


class DisjointSet:
    """Union-find structure with path compression and union by rank."""

    def __init__(self, size: int):
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self.parent = list(range(size))
        self.rank = [0] * size
        self.num_sets = size

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, item: int) -> int:
        """Return the root identifier of the set containing ``item``."""
        parent = self.parent

        root = item
        while parent[root] != root:
            root = parent[root]

        while parent[item] != root:
            parent[item], item = root, parent[item]

        return root

    def union(self, a: int, b: int) -> bool:
        """
        Merge the sets containing ``a`` and ``b``.

        Returns:
            True if two distinct sets were merged, False if already joined
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        if self.rank[root_a] < self.rank[root_b]:
            self.parent[root_a] = root_b
        elif self.rank[root_a] > self.rank[root_b]:
            self.parent[root_b] = root_a
        else:
            self.parent[root_b] = root_a
            self.rank[root_a] += 1

        self.num_sets -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        """True if ``a`` and ``b`` are in the same set."""
        return self.find(a) == self.find(b)
