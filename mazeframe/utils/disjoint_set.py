"""
Disjoint-set forest used by Kruskal's and Eller's algorithms.
"""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class DisjointSet(Generic[T]):
    """
    Union-find with union by rank and path compression.

    Elements are added lazily on first use.
    """

    def __init__(self, elements=()):
        self._parent: dict[T, T] = {}
        self._rank: dict[T, int] = {}
        for element in elements:
            self.add(element)

    def add(self, element: T) -> None:
        if element not in self._parent:
            self._parent[element] = element
            self._rank[element] = 0

    def find(self, element: T) -> T:
        """Representative of the set containing ``element``."""
        self.add(element)
        root = element
        while self._parent[root] != root:
            root = self._parent[root]
        # Path compression
        while self._parent[element] != root:
            self._parent[element], element = root, self._parent[element]
        return root

    def union(self, a: T, b: T) -> bool:
        """
        Merge the sets containing ``a`` and ``b``.

        Returns:
            True if two distinct sets were merged, False if already joined
        """
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self._rank[root_a] < self._rank[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        if self._rank[root_a] == self._rank[root_b]:
            self._rank[root_a] += 1
        return True

    def connected(self, a: T, b: T) -> bool:
        return self.find(a) == self.find(b)

    def __len__(self) -> int:
        return len(self._parent)

    def __contains__(self, element: object) -> bool:
        return element in self._parent

    @property
    def set_count(self) -> int:
        """Number of distinct sets."""
        return sum(1 for element, parent in self._parent.items() if element == parent)
