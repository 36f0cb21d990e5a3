import logging
import time
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from dasel._graph import Graph
from dasel._io import MAX_VERTEX_ID, EdgeListError, load_graph, load_trie
from dasel._trie import InvalidCharacterError, Trie

from .config import ConfigError, DaselConfig, get_config
from .graph_query import check_words, get_dfs_tree, summarize
from .graph_render import render_lines, render_summary_table, render_tree, render_word_table

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

EdgeListArgument = Annotated[
    Path,
    typer.Argument(help="Edge-list file: one 'FROM TO' pair per line, '#' starts a comment"),
]
DirectedOption = Annotated[
    bool | None,
    typer.Option("--directed/--undirected", help="Graph kind (default from [tool.dasel], else undirected)"),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Dasel graph and trie CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[red]Error: {escape(message)}[/red]")
    return typer.Exit(code=1)


def _config() -> DaselConfig:
    try:
        return get_config()
    except ConfigError as e:
        raise _fail(str(e)) from e


def _load(path: Path, *, directed: bool) -> Graph:
    """Load an edge list, turning reader errors into a CLI error exit."""
    start = time.perf_counter()
    try:
        graph = load_graph(path, directed=directed)
    except (EdgeListError, OSError) as e:
        raise _fail(str(e)) from e
    logger.debug(f"Graph built in {(time.perf_counter() - start) * 1e6:.0f} microseconds")
    return graph


@app.command()
def stats(
    path: EdgeListArgument,
    *,
    directed: DirectedOption = None,
    json: Annotated[
        bool,
        typer.Option("--json", help="Print the summary as JSON"),
    ] = False,
) -> None:
    """Show the number of vertices and edges of a graph."""
    config = _config()
    graph = _load(path, directed=config.directed if directed is None else directed)
    summary = summarize(graph)

    if json:
        out_console.print_json(summary.model_dump_json())
        return

    render_summary_table(summary, out_console, title=str(path))


@app.command("print")
def print_graph(
    path: EdgeListArgument,
    *,
    root: Annotated[
        int | None,
        typer.Option(
            "--root",
            min=0,
            max=MAX_VERTEX_ID,
            help="Vertex to start from (default from [tool.dasel], else 1)",
        ),
    ] = None,
    depth: Annotated[
        int | None,
        typer.Option("--depth", min=0, help="Levels to print below the root (default from [tool.dasel], else 2)"),
    ] = None,
    directed: DirectedOption = None,
    tree: Annotated[
        bool,
        typer.Option("--tree", help="Render as a tree instead of indented lines"),
    ] = False,
) -> None:
    """Print the vertices around a root, depth-first."""
    config = _config()
    graph = _load(path, directed=config.directed if directed is None else directed)
    root_id = config.root if root is None else root
    max_depth = config.depth if depth is None else depth

    if not graph.is_vertex(root_id):
        logger.warning(f"Vertex {root_id} is not in the graph; it is added without edges")

    if tree:
        render_tree(get_dfs_tree(graph, root_id, max_depth), out_console)
    else:
        render_lines(graph.graph_lines(root_id, max_depth), out_console)


@app.command()
def distance(
    path: EdgeListArgument,
    from_id: Annotated[int, typer.Argument(metavar="FROM", min=0, max=MAX_VERTEX_ID, help="Start vertex")],
    to_id: Annotated[int, typer.Argument(metavar="TO", min=0, max=MAX_VERTEX_ID, help="Target vertex")],
    *,
    directed: DirectedOption = None,
) -> None:
    """Print the number of edges on a shortest path, or -1 if unreachable."""
    config = _config()
    graph = _load(path, directed=config.directed if directed is None else directed)

    hops = graph.distance(from_id, to_id)
    out_console.print(str(hops), highlight=False)
    if hops < 0:
        err_console.print(f"[yellow]Vertex {to_id} is not reachable from {from_id}[/yellow]")
        raise typer.Exit(code=1)


@app.command()
def remove(
    path: EdgeListArgument,
    vertex_ids: Annotated[
        list[int],
        typer.Argument(metavar="ID...", min=0, max=MAX_VERTEX_ID, help="Vertices to remove"),
    ],
    *,
    directed: DirectedOption = None,
) -> None:
    """Remove vertices with their edges and show the graph size before and after."""
    config = _config()
    graph = _load(path, directed=config.directed if directed is None else directed)

    render_summary_table(summarize(graph), out_console, title="Before")
    for vertex_id in vertex_ids:
        if not graph.is_vertex(vertex_id):
            logger.warning(f"Vertex {vertex_id} is not in the graph")
        graph.remove_vertex(vertex_id)
    render_summary_table(summarize(graph), out_console, title="After")


@app.command()
def words(
    path: Annotated[
        Path,
        typer.Argument(help="Word-list file: one word per line, '#' starts a comment"),
    ],
    candidates: Annotated[
        list[str] | None,
        typer.Argument(metavar="WORD...", help="Words to look up"),
    ] = None,
    *,
    prefix: Annotated[
        bool,
        typer.Option("--prefix", help="Check prefixes instead of whole words"),
    ] = False,
) -> None:
    """Load a dictionary into a trie and look words up in it."""
    try:
        trie: Trie = load_trie(path)
    except (InvalidCharacterError, UnicodeDecodeError, OSError) as e:
        raise _fail(str(e)) from e

    out_console.print(f"[cyan]Dictionary size:[/cyan] {trie.dictionary_size}")
    if not candidates:
        return

    try:
        results = check_words(trie, candidates, prefix=prefix)
    except InvalidCharacterError as e:
        raise _fail(str(e)) from e

    render_word_table(results, out_console, prefix=prefix)
    if not all(result.found for result in results):
        raise typer.Exit(code=1)


def main() -> None:
    app()
