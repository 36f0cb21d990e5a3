"""Graph module providing adjacency-list graphs over integer vertex IDs.

This module contains:
- UndirectedGraph: symmetric adjacency lists, one entry per side of an edge
- DirectedGraph: separate sorted in- and out-lists per vertex
- bfs_distance / bounded_dfs: traversal algorithms used by both graphs
"""

from ._algorithms import bfs_distance, bounded_dfs, dfs_line
from ._directed import DirectedGraph, DirectedVertex
from ._undirected import UndirectedGraph, UndirectedVertex

Graph = UndirectedGraph | DirectedGraph

__all__ = [
    "DirectedGraph",
    "DirectedVertex",
    "Graph",
    "UndirectedGraph",
    "UndirectedVertex",
    "bfs_distance",
    "bounded_dfs",
    "dfs_line",
]
