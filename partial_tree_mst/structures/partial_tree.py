"""A connected component under construction."""
from __future__ import annotations

from .graph import Vertex
from .heap import ArcPriorityQueue


class PartialTree:
    """部分树：一个正在构建中的连通分量。

    部分树由代表顶点（根）和一个独占的候选弧优先队列组成。
    队列中的弧在插入时都是向外的边，但其他树合并后可能变成分量内部的边，
    这些失效的弧只在出队时才被丢弃。

    属性:
        root: 分量的代表顶点
        arcs: 候选弧优先队列
        size: 分量中的顶点数
    """

    def __init__(self, vertex: Vertex) -> None:
        # 单顶点树：顶点重新成为自己的根，清除之前运行留下的并查集状态
        vertex.parent = vertex
        self.root = vertex
        self.arcs = ArcPriorityQueue()
        self.size = 1

    def merge(self, other: PartialTree) -> None:
        """把 ``other`` 合并进当前部分树。

        ``other`` 的根挂到当前根之下，所有原先以它为根的顶点
        随即以当前根为根；两个队列整体合并。
        """
        other.root.parent = self.root
        self.arcs.merge(other.arcs)
        self.size += other.size

    def __str__(self) -> str:
        return f"Vertices: {self.size} Root vertex: {self.root} Arcs: {len(self.arcs)}"

    def __repr__(self) -> str:
        return f"PartialTree(root={self.root!r}, size={self.size})"
