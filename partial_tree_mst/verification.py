"""Checks on a computed set of arcs."""
from typing import Dict, Iterable, List

from .structures.arc import Arc
from .structures.graph import Graph, Vertex


def total_weight(arcs: Iterable[Arc]) -> float:
    """返回弧的总权重。"""
    return sum(arc.weight for arc in arcs)


def is_spanning_tree(graph: Graph, arcs: List[Arc]) -> bool:
    """判断 ``arcs`` 是否构成 ``graph`` 的一棵生成树。

    条件: 弧数为 V-1，所有端点都属于该图，且加入弧时不会形成环
    （V-1 条无环的边必然连通全部 V 个顶点）。

    使用独立的并查集，不改动顶点的 ``parent``。
    """
    if len(arcs) != max(len(graph) - 1, 0):
        return False
    members = set(graph.vertices)
    parent: Dict[Vertex, Vertex] = {v: v for v in graph.vertices}

    def find(x: Vertex) -> Vertex:
        while parent[x] is not x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    for arc in arcs:
        if arc.v1 not in members or arc.v2 not in members:
            return False
        r1, r2 = find(arc.v1), find(arc.v2)
        if r1 is r2:
            return False
        parent[r2] = r1
    return True
