"""
Disjoint-set forest over cell indices, used by Kruskal's algorithm to reject
edges that would close a cycle.
"""

from __future__ import annotations


class UnionFind:
    """
    Union-find with path compression and union by size.

    Both operations are iterative, so very deep parent chains cannot exhaust
    the interpreter stack.
    """

    def __init__(self, size: int):
        self.parent: list[int] = list(range(size))
        self._set_size: list[int] = [1] * size

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, x: int) -> int:
        """Return the root of ``x``, pointing every node on the way at it."""
        root = x
        while self.parent[root] != root:
            root = self.parent[root]

        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]

        return root

    def union(self, x: int, y: int) -> bool:
        """
        Merge the sets containing ``x`` and ``y``.

        Returns:
            True if two distinct sets were merged, False if already joined
        """
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False

        if self._set_size[root_x] > self._set_size[root_y]:
            root_x, root_y = root_y, root_x

        self.parent[root_x] = root_y
        self._set_size[root_y] += self._set_size[root_x]
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)
