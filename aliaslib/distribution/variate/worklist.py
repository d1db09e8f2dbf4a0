"""Worklists of the alias table construction

The small worklist holds the slots whose scaled probability is below 1 and yields the smallest first, the large
worklist holds the others and yields the largest first. Pairing the largest donor with the smallest receiver keeps
the cutoffs of the table high, that is a smaller probability to perform an alias lookup when sampling.

The key of an entry is the probability of the slot at push time: a slot is always popped before its probability
is updated and pushed back afterwards.
"""

import heapq


class SmallWorklist:
    """Min-heap of slot indices"""

    __slots__ = ("_heap",)

    def __init__(self):
        self._heap = []

    def push(self, index: int, probability: float) -> None:
        heapq.heappush(self._heap, (probability, index))

    def pop(self) -> int:
        return heapq.heappop(self._heap)[1]

    def empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)


class LargeWorklist:
    """Max-heap of slot indices"""

    __slots__ = ("_heap",)

    def __init__(self):
        self._heap = []

    def push(self, index: int, probability: float) -> None:
        heapq.heappush(self._heap, (-probability, index))

    def pop(self) -> int:
        return heapq.heappop(self._heap)[1]

    def empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)
