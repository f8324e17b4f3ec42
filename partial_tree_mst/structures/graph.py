"""带权无向图及其顶点的并查集根查询。"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple


@dataclass
class Neighbor:
    """邻接表中的一项：相邻顶点及边的权重。"""
    vertex: Vertex
    weight: float


class Vertex:
    """图中的顶点。

    每个顶点保存自己的邻接表，并通过 ``parent`` 引用参与并查集。
    ``parent`` 指向自身的顶点就是所在连通分量的代表（根）。

    属性:
        name: 顶点名称
        neighbors: 邻接表，元素为 :class:`Neighbor`
        parent: 并查集中的父顶点
    """

    __slots__ = ("name", "neighbors", "parent")

    def __init__(self, name: Any) -> None:
        self.name = name
        self.neighbors: List[Neighbor] = []
        self.parent: Vertex = self

    @property
    def root(self) -> Vertex:
        """返回所在连通分量的代表顶点。

        沿 ``parent`` 向上查找，并顺带做路径压缩。
        两个顶点属于同一分量当且仅当它们的 ``root`` 是同一个对象。

        时间复杂度: 均摊近似 O(1)
        """
        root = self
        while root.parent is not root:
            root = root.parent
        node = self
        while node.parent is not root:
            node.parent, node = root, node.parent
        return root

    def __repr__(self) -> str:
        return f"Vertex({self.name!r})"

    def __str__(self) -> str:
        return str(self.name)


class Graph:
    """使用邻接表实现的带权无向图。

    顶点按加入顺序保存；每条无向边在两个端点的邻接表中各记录一次。

    属性:
        vertices: 按加入顺序排列的顶点列表
    """

    def __init__(self) -> None:
        """初始化空图。"""
        self.vertices: List[Vertex] = []
        self._index: Dict[Any, Vertex] = {}

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[Any, Any, float]],
        vertices: Optional[Iterable[Any]] = None,
    ) -> Graph:
        """根据 ``(u, v, weight)`` 边列表构建图。

        参数:
            edges: 边列表
            vertices: 可选的顶点名称序列，用于包含孤立顶点或固定顶点顺序
        """
        graph = cls()
        for name in vertices or ():
            graph.add_vertex(name)
        for u, v, weight in edges:
            graph.add_edge(u, v, weight)
        return graph

    @classmethod
    def from_adjacency(cls, adjacency: Mapping[Any, List[Tuple[Any, float]]]) -> Graph:
        """根据 ``{节点: [(邻居, 权重), ...]}`` 形式的邻接表构建图。

        邻接表中的每一项都原样加入对应顶点，因此对称的输入
        （两个端点都列出这条边）会得到与 :meth:`add_edge` 相同的结构。
        """
        graph = cls()
        for name in adjacency:
            graph.add_vertex(name)
        for name, neighbors in adjacency.items():
            vertex = graph.vertex(name)
            for other, weight in neighbors:
                vertex.neighbors.append(Neighbor(graph.add_vertex(other), weight))
        return graph

    def add_vertex(self, name: Any) -> Vertex:
        """加入名为 ``name`` 的顶点；已存在时直接返回原顶点。"""
        vertex = self._index.get(name)
        if vertex is None:
            vertex = Vertex(name)
            self._index[name] = vertex
            self.vertices.append(vertex)
        return vertex

    def add_edge(self, u: Any, v: Any, weight: float) -> None:
        """在顶点 u 和 v 之间添加一条权重为 ``weight`` 的无向边。

        不存在的顶点会被自动创建。
        """
        a = self.add_vertex(u)
        b = self.add_vertex(v)
        a.neighbors.append(Neighbor(b, weight))
        b.neighbors.append(Neighbor(a, weight))

    def vertex(self, name: Any) -> Vertex:
        """按名称查找顶点，不存在时抛出 ``KeyError``。"""
        return self._index[name]

    def reset(self) -> None:
        """让每个顶点重新成为自己的根，以便在同一张图上再次求解。"""
        for vertex in self.vertices:
            vertex.parent = vertex

    def __contains__(self, name: Any) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)
