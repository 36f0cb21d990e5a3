"""Query functions behind the CLI commands.

Everything here works on in-memory graphs and tries. Reading files and drawing
output happen in main and graph_render.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel

from dasel._graph import DirectedGraph

if TYPE_CHECKING:
    from dasel._graph import Graph
    from dasel._trie import Trie


class GraphSummary(BaseModel):
    """Size figures of a loaded graph."""

    kind: Literal["directed", "undirected"]
    vertices: int
    edges: int
    max_id: int


@dataclass(slots=True)
class TreeNode:
    """A vertex in a depth-first listing, for rendering."""

    vertex_id: int
    children: list[TreeNode]


@dataclass(frozen=True, slots=True)
class WordCheck:
    """Result of looking up one word in a trie."""

    word: str
    found: bool


def summarize(graph: Graph) -> GraphSummary:
    """Collect vertex count, edge count and max ID of a graph."""
    return GraphSummary(
        kind="directed" if isinstance(graph, DirectedGraph) else "undirected",
        vertices=graph.num_vertices,
        edges=graph.num_edges,
        max_id=graph.max_id,
    )


def get_dfs_tree(graph: Graph, root: int, depth: int) -> TreeNode:
    """Arrange the depth-first walk of ``graph`` as a tree.

    Args:
        graph: Graph to walk. ``root`` is created in it when absent.
        root: Vertex to start from.
        depth: Deepest level to include; must not be negative.

    Returns:
        The root TreeNode. A vertex reached twice appears twice, without children the
        second time.

    """
    top = TreeNode(vertex_id=root, children=[])
    # path[level] is the most recent node yielded at that level
    path: list[TreeNode] = []
    for level, vertex_id in graph.walk(root, depth):
        if level == 0:
            path = [top]
            continue
        node = TreeNode(vertex_id=vertex_id, children=[])
        del path[level:]
        path[-1].children.append(node)
        path.append(node)
    return top


def check_words(trie: Trie, words: list[str], *, prefix: bool = False) -> list[WordCheck]:
    """Look up each word as a whole word, or as a prefix when ``prefix`` is set.

    Raises:
        InvalidCharacterError: If a word contains a character outside the alphabet.

    """
    lookup = trie.is_prefix if prefix else trie.is_word
    return [WordCheck(word=word, found=lookup(word)) for word in words]
