import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Annotated

from pydantic import Field, TypeAdapter, ValidationError

from ._graph import DirectedGraph, Graph, UndirectedGraph
from ._trie import DEFAULT_ALPHABET, Trie

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"

MAX_VERTEX_ID = 2**64 - 1

VertexId = Annotated[int, Field(ge=0, le=MAX_VERTEX_ID)]
"""Vertex IDs are unsigned 64-bit integers."""

_vertex_id_adapter: TypeAdapter[int] = TypeAdapter(VertexId)


class EdgeListError(ValueError):
    """Raised when a line of an edge-list file cannot be parsed."""

    def __init__(self, path: Path, line_number: int, reason: str) -> None:
        self.path = path
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"{path}:{line_number}: {reason}")


def _skip(line: str) -> bool:
    return not line or line.startswith(COMMENT_PREFIX)


def parse_vertex_id(token: str) -> int:
    """Parse a vertex ID from its text form.

    Raises:
        ValidationError: If the token is not an integer in the unsigned 64-bit range.

    """
    return _vertex_id_adapter.validate_python(token)


# =============================================================================
# Edge lists
# =============================================================================


def read_edge_list(path: Path) -> Iterator[tuple[int, int]]:
    """Yield ``(from_id, to_id)`` pairs from a whitespace-separated edge-list file.

    Blank lines and lines starting with ``#`` are skipped. Columns after the second
    are ignored.

    Args:
        path: Text file with one edge per line, e.g. ``"1 2"``.

    Yields:
        One pair of vertex IDs per edge line.

    Raises:
        EdgeListError: If a line is not UTF-8, has fewer than two columns or an invalid vertex ID.

    """
    with path.open("rb") as f:
        for line_number, raw_line in enumerate(f, start=1):
            try:
                line = raw_line.decode("utf-8").strip()
            except UnicodeDecodeError as e:
                raise EdgeListError(path, line_number, "line is not valid UTF-8") from e
            if _skip(line):
                continue

            tokens = line.split()
            if len(tokens) < 2:  # noqa: PLR2004
                raise EdgeListError(path, line_number, f"expected two vertex IDs, got {line!r}")

            try:
                from_id = parse_vertex_id(tokens[0])
                to_id = parse_vertex_id(tokens[1])
            except ValidationError as e:
                raise EdgeListError(path, line_number, f"invalid vertex ID in {line!r}") from e

            yield from_id, to_id


def load_graph(path: Path, *, directed: bool = False) -> Graph:
    """Build a graph from an edge-list file.

    Both ends of every edge are added as vertices before the edge itself.

    Args:
        path: Edge-list file, see ``read_edge_list``.
        directed: Build a ``DirectedGraph`` instead of an ``UndirectedGraph``.

    Returns:
        The populated graph.

    """
    graph: Graph = DirectedGraph() if directed else UndirectedGraph()
    pairs = 0
    for from_id, to_id in read_edge_list(path):
        graph.add_vertex(from_id)
        graph.add_vertex(to_id)
        graph.add_edge(from_id, to_id)
        pairs += 1

    logger.debug(
        f"Loaded {pairs} edge lines from {path}: {graph.num_vertices} vertices, {graph.num_edges} edges",
    )
    return graph


# =============================================================================
# Word lists
# =============================================================================


def read_word_list(path: Path) -> Iterator[str]:
    """Yield the words of a file, one per line.

    Surrounding whitespace is stripped; blank lines and ``#`` comments are skipped.
    """
    with path.open(encoding="utf-8") as f:
        for raw_line in f:
            word = raw_line.strip()
            if not _skip(word):
                yield word


def load_trie(path: Path, alphabet: str = DEFAULT_ALPHABET) -> Trie:
    """Build a trie from a word-list file.

    Raises:
        InvalidCharacterError: If a word contains a character outside ``alphabet``.

    """
    trie = Trie(alphabet)
    for word in read_word_list(path):
        trie.insert_word(word)

    logger.debug(f"Loaded {trie.dictionary_size} words from {path}")
    return trie
