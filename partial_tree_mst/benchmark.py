"""
最小生成树性能基准测试

在随机连通图上测量部分树算法与 Kruskal 参考实现的执行时间，
并给出按图规模分组的统计摘要。
"""

import json
import statistics
import time
from dataclasses import asdict, dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import numpy as np

from .config import BenchmarkSettings, MSTConfig
from .kruskal import KruskalMST
from .logging_config import get_logger
from .mst import PartialTreeMST
from .structures.graph import Graph

logger = get_logger(__name__)


class BenchmarkStatus(Enum):
    """基准测试状态"""
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class PerformanceMetrics:
    """性能指标"""
    algorithm_name: str
    input_size: int
    edge_count: int
    execution_time: float
    total_weight: float
    timestamp: Optional[str] = None

    def __post_init__(self):
        if self.timestamp is None:
            self.timestamp = datetime.now().isoformat()


@dataclass
class BenchmarkResult:
    """基准测试结果"""
    algorithm_name: str
    settings: BenchmarkSettings
    metrics: List[PerformanceMetrics]
    status: BenchmarkStatus
    start_time: str
    end_time: Optional[str] = None
    error_message: Optional[str] = None

    def get_summary_statistics(self) -> Dict[str, Any]:
        """获取按顶点数分组的汇总统计信息"""
        size_groups: Dict[int, List[float]] = {}
        for metric in self.metrics:
            size_groups.setdefault(metric.input_size, []).append(metric.execution_time)

        summary = {}
        for size, times in size_groups.items():
            summary[f"size_{size}"] = {
                "input_size": size,
                "sample_count": len(times),
                "execution_time": {
                    "mean": statistics.mean(times),
                    "median": statistics.median(times),
                    "std": statistics.stdev(times) if len(times) > 1 else 0,
                    "min": min(times),
                    "max": max(times),
                },
            }
        return summary


class GraphGenerator:
    """随机连通图生成器"""

    @staticmethod
    def random_connected_graph(
        size: int,
        density: float = 0.1,
        max_weight: int = 100,
        seed: Optional[int] = None,
    ) -> Graph:
        """生成有 ``size`` 个顶点的随机连通带权图。

        先用随机排列连出一棵随机生成树保证连通，
        再按 ``density`` 追加约 ``density * size * (size - 1) / 2`` 条随机边
        （可能包含重边，权重也可能重复）。

        参数:
            size: 顶点数
            density: 额外边占完全图边数的比例
            max_weight: 权重取值为 ``[1, max_weight]`` 的整数
            seed: 随机种子
        """
        rng = np.random.default_rng(seed)
        graph = Graph()
        for i in range(size):
            graph.add_vertex(i)
        if size < 2:
            return graph

        order = rng.permutation(size)
        for i in range(1, size):
            parent = order[rng.integers(0, i)]
            graph.add_edge(int(order[i]), int(parent), int(rng.integers(1, max_weight + 1)))

        extra = int(density * size * (size - 1) / 2)
        if extra:
            us = rng.integers(0, size, extra)
            vs = rng.integers(0, size, extra)
            weights = rng.integers(1, max_weight + 1, extra)
            for u, v, w in zip(us, vs, weights):
                if u != v:
                    graph.add_edge(int(u), int(v), int(w))
        return graph


class PerformanceBenchmark:
    """
    最小生成树基准测试系统

    对给定的求解函数 ``func(graph) -> (arcs, total_weight)``
    在不同规模的随机图上反复计时。
    """

    def __init__(self, results_dir: Optional[str] = None):
        """
        初始化基准测试系统

        Args:
            results_dir: 结果存储目录，为 None 时不保存
        """
        self.results_dir = Path(results_dir) if results_dir else None
        if self.results_dir is not None:
            self.results_dir.mkdir(parents=True, exist_ok=True)
        self.generator = GraphGenerator()

    def run_benchmark(
        self, algorithm_name: str, func: Callable[[Graph], Any], settings: BenchmarkSettings
    ) -> BenchmarkResult:
        """
        运行基准测试

        每次迭代都重新生成图（同一种子下图相同），
        因此求解函数修改顶点状态不会影响下一次测量。

        Args:
            algorithm_name: 算法名称
            func: 求解函数
            settings: 测试配置

        Returns:
            测试结果
        """
        result = BenchmarkResult(
            algorithm_name=algorithm_name,
            settings=settings,
            metrics=[],
            status=BenchmarkStatus.RUNNING,
            start_time=datetime.now().isoformat(),
        )
        logger.info(f"开始基准测试: {algorithm_name}")

        try:
            for size in settings.sizes:
                logger.info(f"测试图规模: {size}", algorithm=algorithm_name)
                for iteration in range(settings.iterations):
                    seed = None if settings.seed is None else settings.seed + iteration
                    graph = self.generator.random_connected_graph(
                        size, settings.density, settings.max_weight, seed
                    )
                    result.metrics.append(
                        self._measure_performance(func, graph, algorithm_name)
                    )
            result.status = BenchmarkStatus.COMPLETED
            logger.info(f"基准测试完成: {algorithm_name}")
        except Exception as e:
            result.status = BenchmarkStatus.FAILED
            result.error_message = str(e)
            logger.error(f"基准测试失败: {algorithm_name} - {e}")
        finally:
            result.end_time = datetime.now().isoformat()
            if self.results_dir is not None:
                self._save_result(result)

        return result

    def run_comparative_benchmark(self, settings: BenchmarkSettings) -> Dict[str, BenchmarkResult]:
        """
        在同一组随机图上比较部分树算法与 Kruskal

        Args:
            settings: 测试配置

        Returns:
            测试结果字典
        """
        partial_tree = PartialTreeMST(MSTConfig(report_arcs=False))
        algorithms = {
            "partial_tree": partial_tree.execute,
            "kruskal": KruskalMST().execute,
        }
        return {
            name: self.run_benchmark(name, func, settings)
            for name, func in algorithms.items()
        }

    def _measure_performance(
        self, func: Callable[[Graph], Any], graph: Graph, algorithm_name: str
    ) -> PerformanceMetrics:
        """测量一次执行"""
        edge_count = sum(len(v.neighbors) for v in graph.vertices) // 2
        start_time = time.perf_counter()
        _, weight = func(graph)
        execution_time = time.perf_counter() - start_time
        return PerformanceMetrics(
            algorithm_name=algorithm_name,
            input_size=len(graph),
            edge_count=edge_count,
            execution_time=execution_time,
            total_weight=weight,
        )

    def _save_result(self, result: BenchmarkResult) -> None:
        """保存测试结果"""
        benchmark_id = f"{result.algorithm_name}_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}"
        result_file = self.results_dir / f"{benchmark_id}.json"

        result_dict = asdict(result)
        result_dict["status"] = result.status.value
        result_dict["summary"] = result.get_summary_statistics()

        with open(result_file, "w", encoding="utf-8") as f:
            json.dump(result_dict, f, indent=2, ensure_ascii=False)
