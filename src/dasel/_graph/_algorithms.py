"""Traversal algorithms shared by the graph classes."""

from collections import deque
from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import TypeVar

T = TypeVar("T", bound=Hashable)


def bfs_distance(start: T, goal: T, neighbors: Callable[[T], Iterable[T]]) -> int:
    """Count the hops on a shortest path from ``start`` to ``goal``.

    Breadth-first search with a visited set local to the call, so every node is
    enqueued at most once.

    Args:
        start: Node the search starts from.
        goal: Node to reach.
        neighbors: Function returning the nodes reachable in one hop.

    Returns:
        Number of hops, ``0`` when ``start == goal``, or ``-1`` if ``goal`` is
        unreachable.

    Example:
        >>> chain = {1: [2], 2: [1, 3], 3: [2]}
        >>> bfs_distance(1, 3, chain.__getitem__)
        2

    """
    if start == goal:
        return 0

    visited: set[T] = {start}
    queue: deque[tuple[T, int]] = deque([(start, 0)])

    while queue:
        node, hops = queue.popleft()
        for successor in neighbors(node):
            if successor in visited:
                continue
            if successor == goal:
                return hops + 1
            visited.add(successor)
            queue.append((successor, hops + 1))

    return -1


def bounded_dfs(root: T, depth: int, neighbors: Callable[[T], Iterable[T]]) -> Iterator[tuple[int, T]]:
    """Walk depth-first from ``root``, yielding ``(level, node)`` pairs.

    Levels run from ``0`` (the root) to ``depth`` inclusive. A node is marked visited
    the first time it is yielded, before its neighbors are walked. Reaching an
    already-visited node yields it again at its new position, but its neighbors are
    not walked a second time, so cycles terminate.

    Args:
        root: Node the walk starts from.
        depth: Deepest level to yield. Nothing is yielded when negative.
        neighbors: Function returning the nodes reachable in one hop, in walk order.

    Yields:
        ``(level, node)`` in depth-first pre-order.

    """
    if depth < 0:
        return

    visited: set[T] = {root}
    yield 0, root
    if depth == 0:
        return

    # Iterative walk with one iterator per open level.
    stack: list[tuple[int, Iterator[T]]] = [(1, iter(neighbors(root)))]
    while stack:
        level, children = stack[-1]
        try:
            child = next(children)
        except StopIteration:
            stack.pop()
            continue

        yield level, child
        if child in visited:
            continue
        visited.add(child)
        if level < depth:
            stack.append((level + 1, iter(neighbors(child))))


def dfs_line(level: int, node: object) -> str:
    """Format one line of a depth-first listing: ``"  " * level + "|- " + node``."""
    return f"{'  ' * level}|- {node}"
