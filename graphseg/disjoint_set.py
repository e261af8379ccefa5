"""Union-find structure tracking component size and internal difference."""

from __future__ import annotations


class DisjointSet:
    """Disjoint sets over the integers ``0 .. n-1``.

    Besides membership, every component keeps its size and its internal
    difference: the largest edge weight used to build it.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"number of elements must be non-negative, got {n}")
        self._parent = list(range(n))
        self._rank = [0] * n
        self._size = [1] * n
        self._internal = [0.0] * n

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range for {len(self._parent)} elements")

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        self._check(x)
        parent = self._parent
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, x: int, y: int, weight: float) -> int:
        """Join the sets of ``x`` and ``y`` through an edge of ``weight``.

        Returns the representative of the joined set.
        """
        px, py = self.find(x), self.find(y)
        if px == py:
            return px
        if self._rank[px] < self._rank[py]:
            px, py = py, px
        self._parent[py] = px
        self._size[px] += self._size[py]
        self._internal[px] = max(self._internal[px], self._internal[py], weight)
        if self._rank[px] == self._rank[py]:
            self._rank[px] += 1
        return px

    def component_size(self, x: int) -> int:
        """Number of elements in the set holding ``x``."""
        return self._size[self.find(x)]

    def internal_difference(self, x: int) -> float:
        """Largest edge weight joined into the set holding ``x``."""
        return self._internal[self.find(x)]