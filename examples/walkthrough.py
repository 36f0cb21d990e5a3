"""Walkthrough of the dasel library API.

Loads ``graph.txt`` both as an undirected and as a directed graph, prints a bounded
depth-first view, measures a few distances, removes a vertex, and finally builds a
trie from ``words.txt``.

Run from the repository root:
    python examples/walkthrough.py
"""

import time
from pathlib import Path

import dasel

HERE = Path(__file__).parent

# -----------------------------------------------------------------------------
# Graphs
# -----------------------------------------------------------------------------

start = time.perf_counter()
graph = dasel.load_graph(HERE / "graph.txt")
elapsed_us = (time.perf_counter() - start) * 1e6

print(f"Built undirected graph in {elapsed_us:.0f} us")
print(f"Vertices: {graph.num_vertices}  Edges: {graph.num_edges}  Max ID: {graph.max_id}")
graph.print_graph(1, 2)

print(f"distance(1, 4) = {graph.distance(1, 4)}")
print(f"distance(4, 4) = {graph.distance(4, 4)}")

snapshot = graph.copy()
graph.remove_vertex(1)
print(f"After removing 1: {graph.num_vertices} vertices, {graph.num_edges} edges")
print(f"Snapshot still has {snapshot.num_edges} edges")

directed = dasel.load_graph(HERE / "graph.txt", directed=True)
print(f"Directed: {directed.num_vertices} vertices, {directed.num_edges} edges")
directed.print_graph(4, 2)

# -----------------------------------------------------------------------------
# Trie
# -----------------------------------------------------------------------------

trie = dasel.load_trie(HERE / "words.txt")
print(f"Dictionary size: {trie.dictionary_size}")

for word in ("super", "SUPRA", "sup", "friend"):
    print(f"  {word!r}: word={trie.is_word(word)} prefix={trie.is_prefix(word)}")

trie.remove_word("Supercalifragilisticexpialidocious")
print(f"After removal, 'superca' is a prefix: {trie.is_prefix('superca')}")
