"""Directed graph over integer vertex IDs."""

from __future__ import annotations

import logging
import sys
from bisect import bisect_left, insort
from typing import TYPE_CHECKING, TextIO

from ._algorithms import bfs_distance, bounded_dfs, dfs_line

if TYPE_CHECKING:
    from collections.abc import ItemsView, Iterator

logger = logging.getLogger(__name__)


def _contains(ids: list[int], vertex_id: int) -> bool:
    i = bisect_left(ids, vertex_id)
    return i < len(ids) and ids[i] == vertex_id


def _discard(ids: list[int], vertex_id: int) -> None:
    i = bisect_left(ids, vertex_id)
    if i < len(ids) and ids[i] == vertex_id:
        del ids[i]


class DirectedVertex:
    """A vertex of a directed graph.

    Keeps two sorted lists: the IDs this vertex points to (out-edges) and the IDs
    pointing to it (in-edges). ``b`` is in the out-list of ``a`` exactly when ``a``
    is in the in-list of ``b``.

    Attributes:
        id: The vertex ID.
        visited: Free marker for caller-driven traversals, reset by
            ``DirectedGraph.clear_visited``.

    """

    __slots__ = ("_in", "_out", "id", "visited")

    def __init__(self, vertex_id: int) -> None:
        self.id = vertex_id
        self.visited = False
        self._out: list[int] = []
        self._in: list[int] = []

    def __repr__(self) -> str:
        return f"DirectedVertex(id={self.id}, out={self._out}, in={self._in})"

    @property
    def out_edges(self) -> tuple[int, ...]:
        """IDs this vertex points to, in ascending order."""
        return tuple(self._out)

    @property
    def in_edges(self) -> tuple[int, ...]:
        """IDs pointing to this vertex, in ascending order."""
        return tuple(self._in)

    @property
    def out_degree(self) -> int:
        return len(self._out)

    @property
    def in_degree(self) -> int:
        return len(self._in)

    @property
    def degree(self) -> int:
        """``in_degree + out_degree``. A self-loop contributes to both."""
        return self.in_degree + self.out_degree

    def is_out_edge(self, vertex_id: int) -> bool:
        """Check whether this vertex points to ``vertex_id``."""
        return _contains(self._out, vertex_id)

    def is_in_edge(self, vertex_id: int) -> bool:
        """Check whether ``vertex_id`` points to this vertex."""
        return _contains(self._in, vertex_id)

    def _copy(self) -> DirectedVertex:
        twin = DirectedVertex(self.id)
        twin.visited = self.visited
        twin._out = self._out.copy()
        twin._in = self._in.copy()
        return twin


class DirectedGraph:
    """Directed graph backed by an ID -> vertex mapping.

    An edge ``a -> b`` is recorded in the out-list of ``a`` and in the in-list of
    ``b``. Traversals follow out-edges. Like ``UndirectedGraph``, edge operations
    never create vertices while ``get_vertex`` does, and the graph must not be
    mutated while it is being iterated.
    """

    def __init__(self) -> None:
        self._vertices: dict[int, DirectedVertex] = {}
        self._num_edges = 0
        self._max_id = 0

    def __repr__(self) -> str:
        return f"DirectedGraph(vertices={len(self._vertices)}, edges={self._num_edges})"

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._vertices

    def __iter__(self) -> Iterator[tuple[int, DirectedVertex]]:
        return iter(self._vertices.items())

    def __copy__(self) -> DirectedGraph:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, object]) -> DirectedGraph:
        return self.copy()

    @property
    def num_vertices(self) -> int:
        return len(self._vertices)

    @property
    def num_edges(self) -> int:
        """Number of ordered pairs connected. See ``remove_edge`` for its caveat."""
        return self._num_edges

    @property
    def max_id(self) -> int:
        """Largest vertex ID ever inserted. Never decreases."""
        return self._max_id

    # --- Vertices ------------------------------------------------------------

    def add_vertex(self, vertex_id: int) -> DirectedVertex:
        """Add a vertex with no edges unless it already exists, and return it."""
        vertex = self._vertices.get(vertex_id)
        if vertex is None:
            vertex = DirectedVertex(vertex_id)
            self._vertices[vertex_id] = vertex
            self._max_id = max(self._max_id, vertex_id)
        return vertex

    def get_vertex(self, vertex_id: int) -> DirectedVertex:
        """Return the vertex with the given ID, creating it when absent."""
        return self.add_vertex(vertex_id)

    def find_vertex(self, vertex_id: int) -> DirectedVertex | None:
        """Return the vertex with the given ID, or None. Never inserts."""
        return self._vertices.get(vertex_id)

    def is_vertex(self, vertex_id: int) -> bool:
        return vertex_id in self._vertices

    def remove_vertex(self, vertex_id: int) -> None:
        """Remove a vertex with all its in- and out-edges. No-op if absent.

        A self-loop is dropped from the edge counter once, during the out-edge walk.
        """
        vertex = self._vertices.get(vertex_id)
        if vertex is None:
            return

        for target_id in vertex._out:
            if target_id != vertex_id:
                _discard(self._vertices[target_id]._in, vertex_id)
            self._num_edges -= 1

        for source_id in vertex._in:
            if source_id != vertex_id:
                _discard(self._vertices[source_id]._out, vertex_id)
                self._num_edges -= 1

        logger.debug(
            "Removed vertex %d with %d out-edges and %d in-edges",
            vertex_id,
            vertex.out_degree,
            vertex.in_degree,
        )
        del self._vertices[vertex_id]

    def items(self) -> ItemsView[int, DirectedVertex]:
        """Live view of ``(id, vertex)`` pairs."""
        return self._vertices.items()

    def clear_visited(self) -> None:
        """Reset the ``visited`` marker of every vertex."""
        for vertex in self._vertices.values():
            vertex.visited = False

    # --- Edges ---------------------------------------------------------------

    def add_edge(self, from_id: int, to_id: int) -> None:
        """Add the edge ``from_id -> to_id`` between two existing vertices.

        No-op if either vertex is missing or the edge exists. Only the out-list of
        ``from_id`` is consulted; the in-list of ``to_id`` always agrees with it.
        """
        from_vertex = self._vertices.get(from_id)
        to_vertex = self._vertices.get(to_id)
        if from_vertex is None or to_vertex is None:
            return

        if from_vertex.is_out_edge(to_id):
            return

        insort(from_vertex._out, to_id)
        insort(to_vertex._in, from_id)
        self._num_edges += 1

    def remove_edge(self, from_id: int, to_id: int) -> None:
        """Remove the edge ``from_id -> to_id``. No-op if either vertex is missing.

        The edge counter is decremented even if the edge did not exist.
        """
        from_vertex = self._vertices.get(from_id)
        to_vertex = self._vertices.get(to_id)
        if from_vertex is None or to_vertex is None:
            return

        _discard(from_vertex._out, to_id)
        _discard(to_vertex._in, from_id)
        self._num_edges -= 1

    def is_edge(self, from_id: int, to_id: int) -> bool:
        """Check whether the edge ``from_id -> to_id`` exists."""
        if to_id not in self._vertices:
            return False
        from_vertex = self._vertices.get(from_id)
        return from_vertex is not None and from_vertex.is_out_edge(to_id)

    # --- Search --------------------------------------------------------------

    def _successors(self, vertex_id: int) -> list[int]:
        return self._vertices[vertex_id]._out

    def walk(self, root: int, depth: int) -> Iterator[tuple[int, int]]:
        """Depth-first ``(level, vertex_id)`` pairs along out-edges, down to ``depth``."""
        self.get_vertex(root)
        return bounded_dfs(root, depth, self._successors)

    def graph_lines(self, root: int, depth: int) -> Iterator[str]:
        return (dfs_line(level, vertex_id) for level, vertex_id in self.walk(root, depth))

    def print_graph(self, root: int, depth: int, file: TextIO | None = None) -> None:
        """Print the vertices reachable from ``root`` depth-first, down to ``depth`` levels.

        Same format as ``UndirectedGraph.print_graph``, following out-edges only.
        """
        out = file if file is not None else sys.stdout
        for line in self.graph_lines(root, depth):
            print(line, file=out)

    def distance(self, from_id: int, to_id: int) -> int:
        """Length of a shortest directed path, or ``-1`` if there is none.

        ``from_id`` is created as an isolated vertex when absent.
        """
        self.get_vertex(from_id)
        return bfs_distance(from_id, to_id, self._successors)

    def copy(self) -> DirectedGraph:
        """Return a deep copy of the graph."""
        clone = DirectedGraph()
        clone._vertices = {vertex_id: vertex._copy() for vertex_id, vertex in self._vertices.items()}
        clone._num_edges = self._num_edges
        clone._max_id = self._max_id
        return clone
