"""Tests for the generic traversal algorithms."""

from dasel._graph import bfs_distance, bounded_dfs, dfs_line


def _neighbors(adjacency: dict[str, list[str]]):  # noqa: ANN202
    return lambda node: adjacency.get(node, [])


class TestBfsDistance:
    def test_same_node(self) -> None:
        assert bfs_distance("a", "a", _neighbors({})) == 0

    def test_linear_chain(self) -> None:
        adjacency = {"a": ["b"], "b": ["c"], "c": ["d"]}
        assert bfs_distance("a", "d", _neighbors(adjacency)) == 3

    def test_shortest_of_two_paths(self) -> None:
        adjacency = {"a": ["b", "e"], "b": ["c"], "c": ["d"], "e": ["d"]}
        assert bfs_distance("a", "d", _neighbors(adjacency)) == 2

    def test_unreachable(self) -> None:
        adjacency = {"a": ["b"], "b": ["a"], "c": []}
        assert bfs_distance("a", "c", _neighbors(adjacency)) == -1

    def test_each_node_expanded_once(self) -> None:
        adjacency = {"a": ["b", "c"], "b": ["c", "a"], "c": ["a", "b"]}
        expanded: list[str] = []

        def neighbors(node: str) -> list[str]:
            expanded.append(node)
            return adjacency[node]

        assert bfs_distance("a", "missing", neighbors) == -1
        assert sorted(expanded) == ["a", "b", "c"]

    def test_works_with_integers(self) -> None:
        assert bfs_distance(1, 3, {1: [2], 2: [3], 3: []}.__getitem__) == 2


class TestBoundedDfs:
    def test_negative_depth_yields_nothing(self) -> None:
        assert list(bounded_dfs("a", -1, _neighbors({"a": ["b"]}))) == []

    def test_depth_zero_yields_root(self) -> None:
        assert list(bounded_dfs("a", 0, _neighbors({"a": ["b"]}))) == [(0, "a")]

    def test_preorder(self) -> None:
        adjacency = {"a": ["b", "d"], "b": ["c"], "d": []}
        assert list(bounded_dfs("a", 5, _neighbors(adjacency))) == [
            (0, "a"),
            (1, "b"),
            (2, "c"),
            (1, "d"),
        ]

    def test_visited_node_listed_but_not_expanded(self) -> None:
        adjacency = {"a": ["b", "c"], "b": ["c"], "c": ["x"]}
        assert list(bounded_dfs("a", 5, _neighbors(adjacency))) == [
            (0, "a"),
            (1, "b"),
            (2, "c"),
            (3, "x"),
            (1, "c"),
        ]

    def test_node_at_depth_limit_is_marked_visited(self) -> None:
        # "c" is first reached at the depth limit, so it is not expanded later either
        adjacency = {"a": ["b", "c"], "b": ["c"], "c": ["x"]}
        assert list(bounded_dfs("a", 2, _neighbors(adjacency))) == [
            (0, "a"),
            (1, "b"),
            (2, "c"),
            (1, "c"),
        ]

    def test_self_loop_terminates(self) -> None:
        assert list(bounded_dfs("a", 100, _neighbors({"a": ["a"]}))) == [(0, "a"), (1, "a")]


def test_dfs_line() -> None:
    assert dfs_line(0, 7) == "|- 7"
    assert dfs_line(2, 7) == "    |- 7"
