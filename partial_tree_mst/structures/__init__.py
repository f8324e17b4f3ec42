from .arc import Arc
from .graph import Graph, Neighbor, Vertex
from .heap import ArcPriorityQueue
from .partial_tree import PartialTree

__all__ = ["Arc", "ArcPriorityQueue", "Graph", "Neighbor", "PartialTree", "Vertex"]
