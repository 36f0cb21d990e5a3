"""Undirected graph over integer vertex IDs."""

from __future__ import annotations

import logging
import sys
from bisect import bisect_left, insort
from typing import TYPE_CHECKING, TextIO

from ._algorithms import bfs_distance, bounded_dfs, dfs_line

if TYPE_CHECKING:
    from collections.abc import ItemsView, Iterator

logger = logging.getLogger(__name__)


class UndirectedVertex:
    """A vertex of an undirected graph.

    The vertex holds nothing but its ID and the sorted list of adjacent vertex IDs.
    Callers keep their own mapping from IDs to any payload.

    Attributes:
        id: The vertex ID.
        visited: Free marker for caller-driven traversals. Reset it with
            ``UndirectedGraph.clear_visited``; the graph's own traversals never use it.

    """

    __slots__ = ("_adjacent", "id", "visited")

    def __init__(self, vertex_id: int) -> None:
        self.id = vertex_id
        self.visited = False
        self._adjacent: list[int] = []

    def __repr__(self) -> str:
        return f"UndirectedVertex(id={self.id}, adjacent={self._adjacent})"

    @property
    def adjacent(self) -> tuple[int, ...]:
        """IDs of the adjacent vertices, in ascending order."""
        return tuple(self._adjacent)

    @property
    def degree(self) -> int:
        """Number of adjacent vertices. A self-loop counts once."""
        return len(self._adjacent)

    @property
    def in_degree(self) -> int:
        """Same as ``degree`` for an undirected vertex."""
        return self.degree

    @property
    def out_degree(self) -> int:
        """Same as ``degree`` for an undirected vertex."""
        return self.degree

    def is_adjacent(self, vertex_id: int) -> bool:
        """Check whether ``vertex_id`` is in the adjacency list (binary search)."""
        i = bisect_left(self._adjacent, vertex_id)
        return i < len(self._adjacent) and self._adjacent[i] == vertex_id

    def _add_adjacent(self, vertex_id: int) -> None:
        if not self.is_adjacent(vertex_id):
            insort(self._adjacent, vertex_id)

    def _remove_adjacent(self, vertex_id: int) -> None:
        i = bisect_left(self._adjacent, vertex_id)
        if i < len(self._adjacent) and self._adjacent[i] == vertex_id:
            del self._adjacent[i]

    def _copy(self) -> UndirectedVertex:
        twin = UndirectedVertex(self.id)
        twin.visited = self.visited
        twin._adjacent = self._adjacent.copy()
        return twin


class UndirectedGraph:
    """Undirected graph backed by an ID -> vertex mapping.

    Every vertex keeps a sorted adjacency list, and an edge ``a - b`` is stored on
    both ends. Edge operations never create vertices; vertex lookups through
    ``get_vertex`` do.

    Iterating the graph yields ``(id, vertex)`` pairs in unspecified order. The graph
    must not be mutated while an iteration is in progress.

    Example:
        >>> g = UndirectedGraph()
        >>> for v in (1, 2, 3):
        ...     _ = g.add_vertex(v)
        >>> g.add_edge(1, 2)
        >>> g.add_edge(2, 3)
        >>> g.distance(1, 3)
        2

    """

    def __init__(self) -> None:
        self._vertices: dict[int, UndirectedVertex] = {}
        self._num_edges = 0
        self._max_id = 0

    def __repr__(self) -> str:
        return f"UndirectedGraph(vertices={len(self._vertices)}, edges={self._num_edges})"

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._vertices

    def __iter__(self) -> Iterator[tuple[int, UndirectedVertex]]:
        return iter(self._vertices.items())

    def __copy__(self) -> UndirectedGraph:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, object]) -> UndirectedGraph:
        return self.copy()

    # --- Counts --------------------------------------------------------------

    @property
    def num_vertices(self) -> int:
        """Number of vertices in the graph."""
        return len(self._vertices)

    @property
    def num_edges(self) -> int:
        """Edge counter. Loops count once; see ``remove_edge`` for its caveat."""
        return self._num_edges

    @property
    def max_id(self) -> int:
        """Largest vertex ID ever inserted. Never decreases, even after removals."""
        return self._max_id

    # --- Vertices ------------------------------------------------------------

    def add_vertex(self, vertex_id: int) -> UndirectedVertex:
        """Add a vertex with no edges unless it already exists.

        Args:
            vertex_id: ID of the vertex.

        Returns:
            The new vertex, or the existing one untouched.

        """
        vertex = self._vertices.get(vertex_id)
        if vertex is None:
            vertex = UndirectedVertex(vertex_id)
            self._vertices[vertex_id] = vertex
            self._max_id = max(self._max_id, vertex_id)
        return vertex

    def get_vertex(self, vertex_id: int) -> UndirectedVertex:
        """Return the vertex with the given ID, creating it when absent.

        Use ``find_vertex`` or ``is_vertex`` to look up without inserting.
        """
        return self.add_vertex(vertex_id)

    def find_vertex(self, vertex_id: int) -> UndirectedVertex | None:
        """Return the vertex with the given ID, or None. Never inserts."""
        return self._vertices.get(vertex_id)

    def is_vertex(self, vertex_id: int) -> bool:
        """Check whether a vertex with the given ID exists."""
        return vertex_id in self._vertices

    def remove_vertex(self, vertex_id: int) -> None:
        """Remove a vertex and every edge touching it. No-op if absent."""
        vertex = self._vertices.get(vertex_id)
        if vertex is None:
            return

        for adjacent_id in vertex._adjacent:
            if adjacent_id != vertex_id:
                self._vertices[adjacent_id]._remove_adjacent(vertex_id)
            self._num_edges -= 1

        logger.debug("Removed vertex %d with %d incident edges", vertex_id, vertex.degree)
        del self._vertices[vertex_id]

    def items(self) -> ItemsView[int, UndirectedVertex]:
        """Live view of ``(id, vertex)`` pairs. Each iteration restarts from the first pair."""
        return self._vertices.items()

    def clear_visited(self) -> None:
        """Reset the ``visited`` marker of every vertex."""
        for vertex in self._vertices.values():
            vertex.visited = False

    # --- Edges ---------------------------------------------------------------

    def add_edge(self, from_id: int, to_id: int) -> None:
        """Connect two existing vertices. No-op if either is missing or the edge exists."""
        from_vertex = self._vertices.get(from_id)
        to_vertex = self._vertices.get(to_id)
        if from_vertex is None or to_vertex is None:
            return

        if from_vertex.is_adjacent(to_id) and to_vertex.is_adjacent(from_id):
            return

        from_vertex._add_adjacent(to_id)
        to_vertex._add_adjacent(from_id)
        self._num_edges += 1

    def remove_edge(self, from_id: int, to_id: int) -> None:
        """Disconnect two existing vertices. No-op if either is missing.

        The edge counter is decremented even when the two vertices were not
        connected, so removing a non-edge leaves ``num_edges`` too low and repeated
        calls can make it negative.
        """
        from_vertex = self._vertices.get(from_id)
        to_vertex = self._vertices.get(to_id)
        if from_vertex is None or to_vertex is None:
            return

        from_vertex._remove_adjacent(to_id)
        to_vertex._remove_adjacent(from_id)
        self._num_edges -= 1

    def is_edge(self, from_id: int, to_id: int) -> bool:
        """Check whether the two vertices exist and are connected."""
        from_vertex = self._vertices.get(from_id)
        to_vertex = self._vertices.get(to_id)
        if from_vertex is None or to_vertex is None:
            return False
        return from_vertex.is_adjacent(to_id) or to_vertex.is_adjacent(from_id)

    # --- Search --------------------------------------------------------------

    def _neighbors(self, vertex_id: int) -> list[int]:
        return self._vertices[vertex_id]._adjacent

    def walk(self, root: int, depth: int) -> Iterator[tuple[int, int]]:
        """Depth-first ``(level, vertex_id)`` pairs from ``root``, down to ``depth``.

        ``root`` is created as an isolated vertex when absent.
        """
        self.get_vertex(root)
        return bounded_dfs(root, depth, self._neighbors)

    def graph_lines(self, root: int, depth: int) -> Iterator[str]:
        """Lines of ``print_graph`` without printing them."""
        return (dfs_line(level, vertex_id) for level, vertex_id in self.walk(root, depth))

    def print_graph(self, root: int, depth: int, file: TextIO | None = None) -> None:
        """Print the connections of ``root`` depth-first, down to ``depth`` levels.

        Each vertex is printed as ``"  " * level + "|- " + id``. A vertex reached a
        second time is printed again but not expanded.

        Args:
            root: Vertex to start from. Created as an isolated vertex if absent.
            depth: Deepest level to print; the root is level 0.
            file: Stream to write to. Defaults to ``sys.stdout``.

        """
        out = file if file is not None else sys.stdout
        for line in self.graph_lines(root, depth):
            print(line, file=out)

    def distance(self, from_id: int, to_id: int) -> int:
        """Number of edges on a shortest path between two vertices.

        Args:
            from_id: Start vertex. Created as an isolated vertex if absent.
            to_id: Target vertex.

        Returns:
            The hop count, ``0`` for ``from_id == to_id``, or ``-1`` if ``to_id`` is
            unreachable.

        """
        self.get_vertex(from_id)
        return bfs_distance(from_id, to_id, self._neighbors)

    # --- Copy ----------------------------------------------------------------

    def copy(self) -> UndirectedGraph:
        """Return a deep copy. The copy shares no vertex with this graph."""
        clone = UndirectedGraph()
        clone._vertices = {vertex_id: vertex._copy() for vertex_id, vertex in self._vertices.items()}
        clone._num_edges = self._num_edges
        clone._max_id = self._max_id
        return clone
