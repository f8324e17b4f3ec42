"""Minimum spanning tree by merging partial trees held in a circular list."""
from __future__ import annotations

import math
import time
from typing import Any, Dict, List, Optional, Tuple

import structlog

from .base import Algorithm
from .config import MSTConfig
from .exceptions import QueueExhaustedError
from .kruskal import KruskalMST
from .logging_config import get_logger
from .partial_tree_list import PartialTreeList
from .structures.arc import Arc
from .structures.graph import Graph
from .structures.partial_tree import PartialTree
from .verification import is_spanning_tree, total_weight

logger = get_logger(__name__)


def initialize(graph: Graph) -> PartialTreeList:
    """为图中每个顶点建立单顶点部分树，返回初始部分树表。

    每个顶点的每条邻接边都作为一条弧插入该顶点的队列，
    因此一条无向边会分别出现在两个端点的队列中。

    参数:
        graph: 要求最小生成树的图

    返回:
        PartialTreeList: 按顶点顺序排列的初始部分树表
    """
    ptlist = PartialTreeList()
    for vertex in graph.vertices:
        tree = PartialTree(vertex)
        for neighbor in vertex.neighbors:
            tree.arcs.insert(Arc(vertex, neighbor.vertex, neighbor.weight))
        ptlist.append(tree)
    return ptlist


def execute(ptlist: PartialTreeList, report: bool = True) -> List[Arc]:
    """从初始部分树表出发执行算法，返回最小生成树的全部弧。

    每一轮取出队首部分树，丢弃其队列中两端已属于同一分量的弧，
    接受第一条跨分量的弧，取出另一端所在的部分树并与之合并，
    再把合并结果追加回表尾，直到表中只剩一棵树。

    参数:
        ptlist: ``initialize`` 返回的部分树表，执行后不应再使用
        report: 是否为每条被接受的弧输出一行诊断日志

    返回:
        List[Arc]: 最小生成树的弧，顺序即发现顺序，没有其他含义

    异常:
        QueueExhaustedError: 某棵树的队列在找到跨分量弧之前耗尽（图不连通）
        NoMatchingTreeError: 找不到另一端所在的部分树
    """
    arcs: List[Arc] = []
    while len(ptlist) > 1:
        ptx = ptlist.remove()
        while True:
            if not ptx.arcs:
                raise QueueExhaustedError(
                    f"partial tree rooted at {ptx.root} has no arc leaving its component"
                )
            alpha = ptx.arcs.delete_min()
            v1, v2 = alpha.v1, alpha.v2
            if v1.root is not v2.root:
                break
            logger.debug("discarded internal arc", arc=alpha)
        if report:
            logger.info(f"{alpha} is a component of the minimum spanning tree.", arc=alpha)
        pty = ptlist.remove_tree_containing(v2)
        ptx.merge(pty)
        ptlist.append(ptx)
        arcs.append(alpha)
    return arcs


class PartialTreeMST(Algorithm):
    """基于部分树合并的最小生成树算法。

    Borůvka 与 Kruskal 的混合：每个顶点起初是一棵部分树，
    部分树保存在环形链表中，反复通过跨越边界的最小权重边合并，
    直到只剩一棵树。

    如果图不连通，则抛出 ``QueueExhaustedError`` 或 ``NoMatchingTreeError``。
    """

    def __init__(self, config: Optional[MSTConfig] = None) -> None:
        self.config = config or MSTConfig()
        self._execution_count = 0
        self._total_execution_time = 0.0

    def execute(self, graph: Graph) -> Tuple[List[Arc], float]:
        """计算图的最小生成树。

        参数:
            graph: 连通的带权无向图；执行会修改顶点的并查集状态

        返回:
            Tuple[List[Arc], float]:
                - 生成树的弧列表
                - 生成树的总权重

        异常:
            MSTError: 图不连通
            ValueError: 开启校验且结果不是最小生成树
        """
        with structlog.contextvars.bound_contextvars(algorithm=self.__class__.__name__):
            return self._execute_core(graph)

    def _execute_core(self, graph: Graph) -> Tuple[List[Arc], float]:
        start_time = time.perf_counter()
        logger.info("computing minimum spanning tree", vertices=len(graph))
        try:
            arcs = execute(initialize(graph), report=self.config.report_arcs)
            weight = total_weight(arcs)
            if self.config.verify:
                self._validate_output(graph, arcs, weight)
        except Exception as e:
            logger.error(f"minimum spanning tree failed: {e}")
            raise

        execution_time = time.perf_counter() - start_time
        self._execution_count += 1
        self._total_execution_time += execution_time
        logger.info(
            "minimum spanning tree complete",
            arcs=len(arcs),
            total_weight=weight,
            elapsed=f"{execution_time:.4f}s",
        )
        return arcs, weight

    def _validate_output(self, graph: Graph, arcs: List[Arc], weight: float) -> None:
        """校验结果是生成树且权重与 Kruskal 结果一致。"""
        if not is_spanning_tree(graph, arcs):
            raise ValueError("Result is not a spanning tree of the graph")
        _, expected = KruskalMST().execute(graph)
        if not math.isclose(weight, expected):
            raise ValueError(
                f"Result weight {weight} differs from reference weight {expected}"
            )

    def get_performance_stats(self) -> Dict[str, Any]:
        """获取性能统计信息"""
        if self._execution_count == 0:
            return {"execution_count": 0}

        return {
            "execution_count": self._execution_count,
            "total_execution_time": self._total_execution_time,
            "average_execution_time": self._total_execution_time / self._execution_count,
            "algorithm_name": self.__class__.__name__,
        }
