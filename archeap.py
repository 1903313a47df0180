import heapq
import itertools

from graph import Arc
from mst_errors import EmptyQueueError


class ArcHeap:
    '''Min-priority queue of arcs keyed by weight.

    Arcs of equal weight come out in the order they went in. Arcs moved over
    by ``merge`` keep their relative order and queue behind equal-weight arcs
    that were already here.
    '''

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, Arc]] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def __repr__(self):
        return f'ArcHeap({[arc for _, _, arc in sorted(self._heap)]})'

    def insert(self, arc: Arc) -> None:
        heapq.heappush(self._heap, (arc.weight, next(self._counter), arc))

    def delete_min(self) -> Arc:
        if not self._heap:
            raise EmptyQueueError('arc queue is empty')
        return heapq.heappop(self._heap)[2]

    def peek(self) -> Arc:
        if not self._heap:
            raise EmptyQueueError('arc queue is empty')
        return self._heap[0][2]

    def is_empty(self) -> bool:
        return not self._heap

    def merge(self, other: 'ArcHeap') -> None:
        if other is self:
            return

        # (weight, seq) pairs are unique so sorting never compares arcs
        for _, _, arc in sorted(other._heap):
            self.insert(arc)
        other._heap.clear()
