"""Weighted edge candidates."""
from __future__ import annotations

from dataclasses import dataclass

from .graph import Vertex


@dataclass(frozen=True)
class Arc:
    """两个顶点之间的一条带权边候选。

    属性:
        v1: 第一个端点
        v2: 第二个端点
        weight: 边的权重
    """
    v1: Vertex
    v2: Vertex
    weight: float

    @property
    def endpoints(self) -> frozenset:
        """两个端点名称组成的无序集合。"""
        return frozenset((self.v1.name, self.v2.name))

    def __str__(self) -> str:
        return f"{{{self.v1} {self.v2} {self.weight}}}"
