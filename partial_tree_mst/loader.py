"""Read graphs from the plain-text graph file format.

The file is a sequence of whitespace separated tokens::

    4
    A
    B
    C
    D
    A B 1
    B C 2
    ...

The first token is the vertex count ``n``, followed by ``n`` vertex names and
then any number of ``name name weight`` edge triples.
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Tuple, Union

from .structures.graph import Graph


def _parse_weight(token: str, line: int) -> Union[int, float]:
    try:
        return int(token)
    except ValueError:
        pass
    try:
        return float(token)
    except ValueError:
        raise ValueError(f"line {line}: invalid weight {token!r}") from None


def _tokenize(text: str) -> List[Tuple[str, int]]:
    return [
        (token, number)
        for number, row in enumerate(text.splitlines(), start=1)
        for token in row.split()
    ]


def parse_graph(text: str) -> Graph:
    """解析图文件内容并返回 :class:`Graph`。

    异常:
        ValueError: 顶点数缺失或非法、顶点名重复、边引用了未声明的顶点、
            权重非法或边的三元组不完整
    """
    tokens = _tokenize(text)
    if not tokens:
        raise ValueError("empty graph file")

    count_token, count_line = tokens[0]
    try:
        count = int(count_token)
    except ValueError:
        raise ValueError(f"line {count_line}: invalid vertex count {count_token!r}") from None
    if count < 0 or len(tokens) < 1 + count:
        raise ValueError(f"line {count_line}: expected {count} vertex names")

    graph = Graph()
    for name, line in tokens[1:1 + count]:
        if name in graph:
            raise ValueError(f"line {line}: duplicate vertex {name!r}")
        graph.add_vertex(name)

    edges = tokens[1 + count:]
    if len(edges) % 3:
        raise ValueError(f"line {edges[-1][1]}: incomplete edge definition")
    for i in range(0, len(edges), 3):
        (u, line), (v, _), (weight, _) = edges[i:i + 3]
        for name in (u, v):
            if name not in graph:
                raise ValueError(f"line {line}: unknown vertex {name!r}")
        graph.add_edge(u, v, _parse_weight(weight, line))
    return graph


def load_graph(path: Union[str, Path]) -> Graph:
    """从文件读取图。"""
    with open(path, "r", encoding="utf-8") as f:
        return parse_graph(f.read())
