# gridroute/frontier.py
from __future__ import annotations
from collections import deque
from typing import Deque, Generic, List, Tuple, TypeVar
import heapq

T = TypeVar("T")

class PriorityFrontier(Generic[T]):
    """
    Min-priority queue. Items with equal priority leave in the order
    they were pushed (a running counter breaks ties inside the heap).
    """
    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, T]] = []
        self._counter = 0

    def push(self, item: T, priority: float) -> None:
        heapq.heappush(self._heap, (priority, self._counter, item))
        self._counter += 1

    def pop(self) -> T:
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        return heapq.heappop(self._heap)[2]

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)


class FifoFrontier(Generic[T]):
    """Arrival-order queue for breadth-first search; `priority` is accepted and ignored."""
    def __init__(self) -> None:
        self._q: Deque[T] = deque()

    def push(self, item: T, priority: float = 0) -> None:
        self._q.append(item)

    def pop(self) -> T:
        if not self._q:
            raise IndexError("pop from an empty frontier")
        return self._q.popleft()

    def is_empty(self) -> bool:
        return not self._q

    def __len__(self) -> int:
        return len(self._q)
