"""In-memory graphs and tries over plain identifiers."""

__all__ = [
    "DEFAULT_ALPHABET",
    "DirectedGraph",
    "DirectedVertex",
    "EdgeListError",
    "Graph",
    "InvalidCharacterError",
    "Trie",
    "TrieNode",
    "UndirectedGraph",
    "UndirectedVertex",
    "bfs_distance",
    "bounded_dfs",
    "load_graph",
    "load_trie",
    "read_edge_list",
    "read_word_list",
]

from ._graph import DirectedGraph, DirectedVertex, Graph, UndirectedGraph, UndirectedVertex, bfs_distance, bounded_dfs
from ._io import EdgeListError, load_graph, load_trie, read_edge_list, read_word_list
from ._trie import DEFAULT_ALPHABET, InvalidCharacterError, Trie, TrieNode
