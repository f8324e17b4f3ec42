import pytest

from partial_tree_mst.structures import Arc, ArcPriorityQueue, Graph, PartialTree, Vertex


def test_graph_add_edge_is_undirected() -> None:
    graph = Graph()
    graph.add_edge("A", "B", 3)
    a, b = graph.vertex("A"), graph.vertex("B")
    assert [(n.vertex, n.weight) for n in a.neighbors] == [(b, 3)]
    assert [(n.vertex, n.weight) for n in b.neighbors] == [(a, 3)]
    assert len(graph) == 2
    assert "A" in graph and "Z" not in graph
    with pytest.raises(KeyError):
        graph.vertex("Z")


def test_graph_from_edges_keeps_vertex_order() -> None:
    graph = Graph.from_edges([("B", "C", 1)], vertices=["A", "B", "C"])
    assert [v.name for v in graph] == ["A", "B", "C"]
    assert graph.vertex("A").neighbors == []


def test_vertex_root_follows_parents_with_compression() -> None:
    a, b, c = Vertex("A"), Vertex("B"), Vertex("C")
    assert a.root is a
    c.parent = b
    b.parent = a
    assert c.root is a
    assert c.parent is a


def test_graph_reset() -> None:
    graph = Graph.from_edges([("A", "B", 1)])
    a, b = graph.vertices
    b.parent = a
    graph.reset()
    assert a.root is a and b.root is b


def test_arc_str_and_endpoints() -> None:
    arc = Arc(Vertex("A"), Vertex("B"), 7)
    assert str(arc) == "{A B 7}"
    assert arc.endpoints == frozenset({"A", "B"})


def test_queue_delete_min_order() -> None:
    a, b = Vertex("A"), Vertex("B")
    queue = ArcPriorityQueue()
    for weight in [5, 1, 4, 2, 8]:
        queue.insert(Arc(a, b, weight))
    assert [queue.delete_min().weight for _ in range(5)] == [1, 2, 4, 5, 8]
    assert not queue
    with pytest.raises(IndexError):
        queue.delete_min()


def test_queue_ties_do_not_compare_arcs() -> None:
    a, b = Vertex("A"), Vertex("B")
    queue = ArcPriorityQueue()
    queue.insert(Arc(a, b, 1))
    queue.insert(Arc(b, a, 1))
    assert {queue.delete_min().v1, queue.delete_min().v1} == {a, b}


def test_queue_merge_is_wholesale() -> None:
    a, b = Vertex("A"), Vertex("B")
    left, right = ArcPriorityQueue(), ArcPriorityQueue()
    left.insert(Arc(a, b, 3))
    right.insert(Arc(b, a, 1))
    right.insert(Arc(b, a, 2))
    left.merge(right)
    assert len(left) == 3 and len(right) == 0
    assert [left.delete_min().weight for _ in range(3)] == [1, 2, 3]


def test_partial_tree_merge() -> None:
    a, b, c = Vertex("A"), Vertex("B"), Vertex("C")
    c.parent = b
    ptx, pty = PartialTree(a), PartialTree(b)
    pty.size = 2
    ptx.arcs.insert(Arc(a, b, 4))
    pty.arcs.insert(Arc(b, a, 4))

    ptx.merge(pty)

    assert b.root is a and c.root is a
    assert ptx.size == 3
    # stale arcs are kept until dequeued
    assert len(ptx.arcs) == 2
