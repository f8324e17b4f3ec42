"""Minimum Spanning Tree algorithm using Kruskal's method."""
from __future__ import annotations

from typing import Dict, List, Tuple

from .base import Algorithm
from .structures.arc import Arc
from .structures.graph import Graph, Vertex


class KruskalMST(Algorithm):
    """基于 Kruskal 算法的最小生成树实现。

    按权重排序全部边后依次加入不成环的边。并查集独立维护，
    不会改动顶点自身的 ``parent``，因此可以在部分树算法运行前后
    用作参考结果。如果图不连通，则抛出 ``ValueError``。
    """

    def execute(self, graph: Graph) -> Tuple[List[Arc], float]:
        """计算图的最小生成树。

        参数:
            graph: 带权无向图

        返回:
            Tuple[List[Arc], float]:
                - 生成树的弧列表
                - 生成树的总权重

        异常:
            ValueError: 如果图不是连通的。
        """
        arcs = [
            Arc(vertex, neighbor.vertex, neighbor.weight)
            for vertex in graph.vertices
            for neighbor in vertex.neighbors
        ]
        # 按权重排序
        arcs.sort(key=lambda a: a.weight)

        parent: Dict[Vertex, Vertex] = {v: v for v in graph.vertices}
        rank: Dict[Vertex, int] = {v: 0 for v in graph.vertices}

        def find(x: Vertex) -> Vertex:
            while parent[x] is not x:
                parent[x] = parent[parent[x]]
                x = parent[x]
            return x

        def union(x: Vertex, y: Vertex) -> bool:
            rx, ry = find(x), find(y)
            if rx is ry:
                return False
            if rank[rx] < rank[ry]:
                parent[rx] = ry
            elif rank[rx] > rank[ry]:
                parent[ry] = rx
            else:
                parent[ry] = rx
                rank[rx] += 1
            return True

        mst_arcs: List[Arc] = []
        total_weight = 0.0
        for arc in arcs:
            if union(arc.v1, arc.v2):
                mst_arcs.append(arc)
                total_weight += arc.weight

        if len(graph) and len(mst_arcs) != len(graph) - 1:
            raise ValueError("Graph is not connected")

        return mst_arcs, total_weight
