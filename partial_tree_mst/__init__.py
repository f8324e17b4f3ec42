"""Minimum spanning trees by merging partial trees kept in a circular list."""

from .exceptions import (
    EmptyCollectionError,
    MSTError,
    NoMatchingTreeError,
    QueueExhaustedError,
)
from .kruskal import KruskalMST
from .loader import load_graph, parse_graph
from .mst import PartialTreeMST, execute, initialize
from .partial_tree_list import PartialTreeList
from .structures import Arc, ArcPriorityQueue, Graph, PartialTree, Vertex

__all__ = [
    "Arc",
    "ArcPriorityQueue",
    "EmptyCollectionError",
    "Graph",
    "KruskalMST",
    "MSTError",
    "NoMatchingTreeError",
    "PartialTree",
    "PartialTreeList",
    "PartialTreeMST",
    "QueueExhaustedError",
    "Vertex",
    "execute",
    "initialize",
    "load_graph",
    "parse_graph",
]
