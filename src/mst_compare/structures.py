"""Basic data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class OperationCounter:
    """Running count of the elementary steps an algorithm performed."""

    count: int = 0

    def increment(self, amount: int = 1) -> None:
        self.count += amount

    def reset(self) -> None:
        self.count = 0

    def __int__(self) -> int:
        return self.count


@dataclass
class DisjointSet:
    """Union-find structure with path compression and union by size."""

    size: int
    parent: List[int] = field(init=False, repr=False)
    _sizes: List[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError("size must be non-negative")
        self.parent = list(range(self.size))
        self._sizes = [1] * self.size

    def find(self, index: int, counter: OperationCounter | None = None) -> int:
        if counter is not None:
            counter.increment()
        parent = self.parent
        root = index
        while parent[root] != root:
            root = parent[root]
        while parent[index] != root:
            parent[index], index = root, parent[index]
        return root

    def union(self, left: int, right: int, counter: OperationCounter | None = None) -> bool:
        """Merge the sets holding `left` and `right`; False means they were already joined."""

        if counter is not None:
            counter.increment()
        root_left = self.find(left)
        root_right = self.find(right)
        if root_left == root_right:
            return False
        sizes = self._sizes
        if sizes[root_left] < sizes[root_right]:
            self.parent[root_left] = root_right
            sizes[root_right] += sizes[root_left]
        else:
            self.parent[root_right] = root_left
            sizes[root_left] += sizes[root_right]
        return True

    def component_size(self, index: int) -> int:
        return self._sizes[self.find(index)]

    @property
    def components(self) -> int:
        return sum(1 for index, parent in enumerate(self.parent) if index == parent)
