"""Active front of the Poisson-disk sampler."""

from typing import Iterator, List

import numpy as np

from ..utils.errors import InvariantViolation


class ActiveSet:
    """Indices of accepted points still used as probe generators.

    Stored as a flat list; removal swaps the last entry into the freed slot,
    so the order of entries is not the insertion order.
    """

    def __init__(self):
        self._items: List[int] = []
        self._members = set()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __contains__(self, k) -> bool:
        return k in self._members

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def push(self, k: int):
        if k in self._members:
            raise InvariantViolation(f"Point {k} is already active")
        self._items.append(k)
        self._members.add(k)

    def pick(self, rng: np.random.Generator) -> int:
        """Uniformly random slot (not point index); see get()."""
        return int(rng.integers(len(self._items)))

    def get(self, slot: int) -> int:
        return self._items[slot]

    def remove(self, slot: int) -> int:
        """Drop the entry at slot in O(1) and return its point index."""
        k = self._items[slot]
        last = self._items.pop()
        if slot < len(self._items):
            self._items[slot] = last
        self._members.discard(k)
        return k
