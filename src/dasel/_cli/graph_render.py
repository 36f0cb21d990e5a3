"""Rich rendering utilities for the graph and word commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

if TYPE_CHECKING:
    from collections.abc import Iterable

    from rich.console import Console

    from .graph_query import GraphSummary, TreeNode, WordCheck


def render_summary_table(summary: GraphSummary, console: Console, *, title: str | None = None) -> None:
    """Render graph size figures as a Rich table.

    Args:
        summary: GraphSummary to render.
        console: Rich Console to output to.
        title: Optional table title.

    """
    table = Table(show_header=True, header_style="bold cyan", title=title)
    table.add_column("Kind", style="bold")
    table.add_column("Vertices", justify="right")
    table.add_column("Edges", justify="right")
    table.add_column("Max ID", justify="right")

    table.add_row(summary.kind, str(summary.vertices), str(summary.edges), str(summary.max_id))
    console.print(table)


def render_lines(lines: Iterable[str], console: Console) -> None:
    """Print depth-first listing lines verbatim, without markup or highlighting."""
    for line in lines:
        console.print(line, markup=False, highlight=False, soft_wrap=True)


def render_tree(tree_node: TreeNode, console: Console) -> None:
    """Render a depth-first listing using Rich Tree.

    Args:
        tree_node: TreeNode root to render.
        console: Rich Console to output to.

    """
    rich_tree = Tree(f"[bold]{tree_node.vertex_id}[/bold]")
    _add_tree_children(rich_tree, tree_node.children)
    console.print(rich_tree)


def _add_tree_children(parent: Tree, children: list[TreeNode]) -> None:
    for child in children:
        child_tree = parent.add(str(child.vertex_id))
        _add_tree_children(child_tree, child.children)


def render_word_table(results: list[WordCheck], console: Console, *, prefix: bool = False) -> None:
    """Render word lookups as a Rich table.

    Args:
        results: Lookups to render.
        console: Rich Console to output to.
        prefix: Whether the lookups were prefix checks (changes the column title).

    """
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Word", style="bold")
    table.add_column("Prefix" if prefix else "Word in dictionary")

    for result in results:
        mark = "[green]yes[/green]" if result.found else "[red]no[/red]"
        table.add_row(escape(result.word), mark)

    console.print(table)
