"""
priority_queue.py

Min-priority queue used while building code trees.
"""


import heapq
import itertools
from typing import Any, List, Tuple


class PriorityQueue:
    """
    A min-priority queue over heapq.

    Items with equal priority come out in the order they were inserted.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, Any]] = []
        self._sequence = itertools.count()

    def insert(self, item: Any, priority: float) -> None:
        heapq.heappush(self._heap, (priority, next(self._sequence), item))

    def extract_min(self) -> Any:
        """
        Remove and return the item with the lowest priority.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._heap:
            raise IndexError("extract_min from an empty priority queue")
        return heapq.heappop(self._heap)[2]

    def peek_min_priority(self) -> float:
        if not self._heap:
            raise IndexError("peek_min_priority on an empty priority queue")
        return self._heap[0][0]

    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return self.size()
