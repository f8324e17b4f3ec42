import json

from partial_tree_mst.benchmark import (
    BenchmarkStatus,
    GraphGenerator,
    PerformanceBenchmark,
)
from partial_tree_mst.config import BenchmarkSettings
from partial_tree_mst.verification import is_spanning_tree
from partial_tree_mst.kruskal import KruskalMST


def test_generated_graph_is_connected() -> None:
    graph = GraphGenerator.random_connected_graph(25, density=0.0, seed=1)
    assert len(graph) == 25
    arcs, _ = KruskalMST().execute(graph)
    assert is_spanning_tree(graph, arcs)


def test_generated_graph_is_reproducible() -> None:
    first = GraphGenerator.random_connected_graph(20, density=0.3, seed=5)
    second = GraphGenerator.random_connected_graph(20, density=0.3, seed=5)

    def edges(graph):
        return [(v.name, n.vertex.name, n.weight) for v in graph for n in v.neighbors]

    assert edges(first) == edges(second)


def test_tiny_graphs() -> None:
    assert len(GraphGenerator.random_connected_graph(0)) == 0
    assert len(GraphGenerator.random_connected_graph(1)) == 1


def test_comparative_benchmark_agrees(tmp_path) -> None:
    settings = BenchmarkSettings(sizes=[5, 20], iterations=2, seed=3)
    runner = PerformanceBenchmark(str(tmp_path))
    results = runner.run_comparative_benchmark(settings)

    assert set(results) == {"partial_tree", "kruskal"}
    for result in results.values():
        assert result.status == BenchmarkStatus.COMPLETED
        assert len(result.metrics) == 4
        summary = result.get_summary_statistics()
        assert set(summary) == {"size_5", "size_20"}
        assert summary["size_20"]["sample_count"] == 2

    weights = {
        name: [m.total_weight for m in result.metrics]
        for name, result in results.items()
    }
    assert weights["partial_tree"] == weights["kruskal"]

    saved = list(tmp_path.glob("*.json"))
    assert len(saved) == 2
    data = json.loads(saved[0].read_text(encoding="utf-8"))
    assert data["status"] == "completed"


def test_failure_is_recorded() -> None:
    def broken(graph):
        raise RuntimeError("boom")

    result = PerformanceBenchmark().run_benchmark(
        "broken", broken, BenchmarkSettings(sizes=[3], iterations=1)
    )
    assert result.status == BenchmarkStatus.FAILED
    assert result.error_message == "boom"
    assert result.end_time is not None


def test_status_values() -> None:
    assert [s.value for s in BenchmarkStatus] == ["running", "completed", "failed"]
