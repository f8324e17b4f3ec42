"""Min-priority queue of arcs keyed on weight."""
from __future__ import annotations

import heapq
import itertools
from typing import Iterator, List, Tuple

from .arc import Arc

# Shared across queues so entries stay unique after a merge.
_sequence = itertools.count()


class ArcPriorityQueue:
    """按权重排序的弧最小堆。

    基于 ``heapq`` 实现，堆中元素为 ``(weight, seq, arc)``，
    序号保证同权重的弧之间无需比较 ``Arc`` 本身。
    同权重时的出队顺序没有保证。
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, Arc]] = []

    def insert(self, arc: Arc) -> None:
        """插入一条弧。时间复杂度: O(log n)"""
        heapq.heappush(self._heap, (arc.weight, next(_sequence), arc))

    def delete_min(self) -> Arc:
        """删除并返回权重最小的弧。

        异常:
            IndexError: 队列为空
        """
        if not self._heap:
            raise IndexError("delete_min from empty queue")
        return heapq.heappop(self._heap)[2]

    def merge(self, other: ArcPriorityQueue) -> None:
        """把 ``other`` 中的全部弧并入本队列并清空 ``other``。

        不做任何有效性过滤，失效的弧留到出队时再丢弃。

        时间复杂度: O(n + m)
        """
        if other is self:
            return
        self._heap.extend(other._heap)
        heapq.heapify(self._heap)
        other._heap = []

    def __iter__(self) -> Iterator[Arc]:
        return (entry[2] for entry in self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
