"""Command line interface: one-shot commands plus an interactive shell."""

from __future__ import annotations

import shlex
import sys
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, List, Optional, Tuple

import click

from . import __version__
from .config import LOG_LEVELS, OUTPUT_FORMATS, SessionConfig
from .graphs import (
    Graph,
    PathResult,
    are_isomorphic,
    astar,
    bfs,
    dfs,
    dijkstra,
    euclidean_heuristic,
    eulerian_circuit,
    greedy_best_first,
    hamiltonian_cycle,
    kruskal_mst,
    manhattan_heuristic,
    zero_heuristic,
)
from .graphs.heuristic import Heuristic
from .io import (
    eulerian_to_dict,
    format_adjacency_list,
    format_adjacency_matrix,
    format_eulerian,
    format_graph_overview,
    format_hamiltonian,
    format_isomorphism,
    format_mst,
    format_path_result,
    graph_overview_to_dict,
    hamiltonian_to_dict,
    isomorphism_to_dict,
    load_graph,
    mst_to_dict,
    path_result_to_dict,
    to_json,
)
from .io.graph_io import Coords
from .logging import configure_logging, get_logger

logger = get_logger(__name__)

PATH_ALGORITHMS = ("bfs", "dfs", "dijkstra", "best-first", "astar")
HEURISTICS = ("zero", "euclidean", "manhattan")

# Errors that are user mistakes rather than bugs
_USER_ERRORS = (ValueError, KeyError, FileNotFoundError)


def make_heuristic(name: str, coords: Coords) -> Heuristic:
    """Resolve a heuristic name to a callable over the loaded coordinates."""
    if name == "zero":
        return zero_heuristic
    if name == "euclidean":
        return euclidean_heuristic(coords)
    if name == "manhattan":
        return manhattan_heuristic(coords)
    raise ValueError(f"Unknown heuristic {name!r}. Choose from {', '.join(HEURISTICS)}.")


def run_path_search(
    graph: Graph,
    algorithm: str,
    start: str,
    goal: str,
    coords: Optional[Coords] = None,
    heuristic: str = "euclidean",
) -> PathResult:
    """Run one of PATH_ALGORITHMS between two vertices."""
    if algorithm == "bfs":
        return bfs(graph, start, goal)
    if algorithm == "dfs":
        return dfs(graph, start, goal)
    if algorithm == "dijkstra":
        return dijkstra(graph, start, goal)

    h = make_heuristic(heuristic, coords or {})
    if algorithm == "best-first":
        return greedy_best_first(graph, start, goal, h)
    if algorithm == "astar":
        return astar(graph, start, goal, h)
    raise ValueError(
        f"Unknown algorithm {algorithm!r}. Choose from {', '.join(PATH_ALGORITHMS)}."
    )


def _render(config: SessionConfig, text: str, data: Dict[str, Any]) -> str:
    return to_json(data) if config.output_format == "json" else text


def _config_for(ctx: click.Context, as_json: bool) -> SessionConfig:
    config: SessionConfig = ctx.obj
    return config.with_format("json") if as_json else config


def _load_or_fail(path: str, directed: Optional[bool]) -> Tuple[Graph, Coords]:
    try:
        return load_graph(path, directed=directed)
    except _USER_ERRORS as e:
        raise click.ClickException(str(e)) from e


_directed_option = click.option(
    "--directed/--undirected",
    default=None,
    help="Override directedness (CSV input defaults to undirected).",
)
_json_option = click.option("--json", "as_json", is_flag=True, help="Emit JSON output.")


@click.group()
@click.version_option(__version__, prog_name="graphconduit")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging.")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default from GRAPHCONDUIT_LOG_LEVEL or WARNING).",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, log_level: Optional[str]) -> None:
    """Graph algorithms: paths, spanning forests, circuits, cycles and isomorphism."""
    try:
        config = SessionConfig.from_env()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    level = "DEBUG" if verbose else (log_level or config.log_level).upper()
    config = replace(config, log_level=level)
    configure_logging(level)
    ctx.obj = config


@cli.command()
@click.argument("graph_file", type=click.Path(dir_okay=False))
@_directed_option
@click.option("--list", "show_list", is_flag=True, help="Print the adjacency list.")
@click.option("--matrix", "show_matrix", is_flag=True, help="Print the adjacency matrix.")
@_json_option
@click.pass_context
def info(
    ctx: click.Context,
    graph_file: str,
    directed: Optional[bool],
    show_list: bool,
    show_matrix: bool,
    as_json: bool,
) -> None:
    """Show a graph overview."""
    config = _config_for(ctx, as_json)
    graph, _ = _load_or_fail(graph_file, directed)

    sections = [format_graph_overview(graph)]
    if show_list:
        sections.append(format_adjacency_list(graph))
    if show_matrix:
        sections.append(format_adjacency_matrix(graph))
    click.echo(_render(config, "\n\n".join(sections), graph_overview_to_dict(graph)))


@cli.command()
@click.argument("graph_file", type=click.Path(dir_okay=False))
@click.argument("start")
@click.argument("goal")
@click.option(
    "--algorithm",
    "-a",
    type=click.Choice(PATH_ALGORITHMS),
    default="bfs",
    show_default=True,
    help="Search algorithm.",
)
@click.option(
    "--heuristic",
    type=click.Choice(HEURISTICS),
    default="euclidean",
    show_default=True,
    help="Heuristic for best-first and astar (uses vertex coordinates).",
)
@click.option("--weighted", is_flag=True, help="Report the weighted path cost too.")
@_directed_option
@_json_option
@click.pass_context
def path(
    ctx: click.Context,
    graph_file: str,
    start: str,
    goal: str,
    algorithm: str,
    heuristic: str,
    weighted: bool,
    directed: Optional[bool],
    as_json: bool,
) -> None:
    """Find a path from START to GOAL."""
    config = _config_for(ctx, as_json)
    graph, coords = _load_or_fail(graph_file, directed)
    try:
        result = run_path_search(graph, algorithm, start, goal, coords, heuristic)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    include_weighted = weighted or config.include_weighted
    click.echo(
        _render(
            config,
            format_path_result(algorithm, result, graph, include_weighted),
            path_result_to_dict(algorithm, result, graph, include_weighted),
        )
    )


@cli.command()
@click.argument("graph_file", type=click.Path(dir_okay=False))
@_directed_option
@_json_option
@click.pass_context
def mst(ctx: click.Context, graph_file: str, directed: Optional[bool], as_json: bool) -> None:
    """Minimum spanning forest (Kruskal)."""
    config = _config_for(ctx, as_json)
    graph, _ = _load_or_fail(graph_file, directed)
    result = kruskal_mst(graph)
    click.echo(_render(config, format_mst(result), mst_to_dict(result)))


@cli.command()
@click.argument("graph_file", type=click.Path(dir_okay=False))
@_directed_option
@_json_option
@click.pass_context
def euler(ctx: click.Context, graph_file: str, directed: Optional[bool], as_json: bool) -> None:
    """Eulerian circuit (Hierholzer)."""
    config = _config_for(ctx, as_json)
    graph, _ = _load_or_fail(graph_file, directed)
    result = eulerian_circuit(graph)
    click.echo(_render(config, format_eulerian(result), eulerian_to_dict(result)))


@cli.command()
@click.argument("graph_file", type=click.Path(dir_okay=False))
@_directed_option
@_json_option
@click.pass_context
def hamilton(
    ctx: click.Context, graph_file: str, directed: Optional[bool], as_json: bool
) -> None:
    """Hamiltonian cycle (backtracking)."""
    config = _config_for(ctx, as_json)
    graph, _ = _load_or_fail(graph_file, directed)
    cycle = hamiltonian_cycle(graph)
    click.echo(_render(config, format_hamiltonian(cycle), hamiltonian_to_dict(cycle)))


@cli.command()
@click.argument("first_file", type=click.Path(dir_okay=False))
@click.argument("second_file", type=click.Path(dir_okay=False))
@click.option(
    "--max-vertices",
    type=click.IntRange(min=1),
    default=None,
    help="Refuse graphs larger than this (default from config).",
)
@_directed_option
@_json_option
@click.pass_context
def iso(
    ctx: click.Context,
    first_file: str,
    second_file: str,
    max_vertices: Optional[int],
    directed: Optional[bool],
    as_json: bool,
) -> None:
    """Test two graphs for isomorphism."""
    config = _config_for(ctx, as_json)
    g1, _ = _load_or_fail(first_file, directed)
    g2, _ = _load_or_fail(second_file, directed)
    limit = max_vertices or config.isomorphism_max_vertices
    try:
        result = are_isomorphic(g1, g2, max_vertices=limit)
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    click.echo(_render(config, format_isomorphism(result), isomorphism_to_dict(result)))


# ---------------------------------------------------------------------------
# Interactive shell
# ---------------------------------------------------------------------------

SHELL_HELP = """Commands:
  load PATH [directed|undirected]   load a .json or .csv graph
  info                              graph overview and adjacency list
  bfs|dfs|dijkstra START GOAL       path search
  best-first|astar START GOAL [H]   heuristic search (H: zero, euclidean, manhattan)
  mst | euler | hamilton            run an algorithm on the loaded graph
  iso PATH                          compare the loaded graph with another file
  format text|json                  switch output format
  weighted on|off                   include weighted cost in path reports
  help | quit"""


@dataclass(frozen=True)
class ShellState:
    """Everything one shell prompt hands to the next."""

    config: SessionConfig
    graph: Optional[Graph] = None
    coords: Dict[str, Tuple[float, float]] = field(default_factory=dict)
    running: bool = True


def _require_graph(state: ShellState) -> Graph:
    if state.graph is None:
        raise ValueError("No graph loaded. Use: load PATH")
    return state.graph


def _shell_load(state: ShellState, args: List[str]) -> Tuple[ShellState, str]:
    if not args:
        raise ValueError("Usage: load PATH [directed|undirected]")
    directed = None
    if len(args) > 1:
        if args[1] not in ("directed", "undirected"):
            raise ValueError("Second argument must be 'directed' or 'undirected'.")
        directed = args[1] == "directed"
    graph, coords = load_graph(args[0], directed=directed)
    new_state = replace(state, config=state.config.with_graph(args[0]), graph=graph, coords=coords)
    return new_state, format_graph_overview(graph)


def _shell_path(state: ShellState, algorithm: str, args: List[str]) -> Tuple[ShellState, str]:
    graph = _require_graph(state)
    if len(args) < 2:
        raise ValueError(f"Usage: {algorithm} START GOAL")
    heuristic = args[2] if len(args) > 2 else "euclidean"
    result = run_path_search(graph, algorithm, args[0], args[1], state.coords, heuristic)
    include = state.config.include_weighted
    return state, _render(
        state.config,
        format_path_result(algorithm, result, graph, include),
        path_result_to_dict(algorithm, result, graph, include),
    )


def _shell_format(state: ShellState, args: List[str]) -> Tuple[ShellState, str]:
    if len(args) != 1 or args[0] not in OUTPUT_FORMATS:
        raise ValueError(f"Usage: format {'|'.join(OUTPUT_FORMATS)}")
    return replace(state, config=state.config.with_format(args[0])), f"Output format: {args[0]}"


def _shell_weighted(state: ShellState, args: List[str]) -> Tuple[ShellState, str]:
    if len(args) != 1 or args[0] not in ("on", "off"):
        raise ValueError("Usage: weighted on|off")
    config = replace(state.config, include_weighted=args[0] == "on")
    return replace(state, config=config), f"Weighted cost: {args[0]}"


def _shell_iso(state: ShellState, args: List[str]) -> Tuple[ShellState, str]:
    graph = _require_graph(state)
    if len(args) != 1:
        raise ValueError("Usage: iso PATH")
    other, _ = load_graph(args[0])
    result = are_isomorphic(graph, other, max_vertices=state.config.isomorphism_max_vertices)
    return state, _render(state.config, format_isomorphism(result), isomorphism_to_dict(result))


def _shell_simple(
    state: ShellState, run: Callable[[Graph], Tuple[str, Dict[str, Any]]]
) -> Tuple[ShellState, str]:
    text, data = run(_require_graph(state))
    return state, _render(state.config, text, data)


def _mst_report(graph: Graph) -> Tuple[str, Dict[str, Any]]:
    result = kruskal_mst(graph)
    return format_mst(result), mst_to_dict(result)


def _euler_report(graph: Graph) -> Tuple[str, Dict[str, Any]]:
    result = eulerian_circuit(graph)
    return format_eulerian(result), eulerian_to_dict(result)


def _hamilton_report(graph: Graph) -> Tuple[str, Dict[str, Any]]:
    cycle = hamiltonian_cycle(graph)
    return format_hamiltonian(cycle), hamiltonian_to_dict(cycle)


def _info_report(graph: Graph) -> Tuple[str, Dict[str, Any]]:
    text = format_graph_overview(graph) + "\n\n" + format_adjacency_list(graph)
    return text, graph_overview_to_dict(graph)


def execute_shell_command(line: str, state: ShellState) -> Tuple[ShellState, str]:
    """
    Run one shell command and return the next state plus the text to print.

    User errors (bad arguments, missing files, unknown vertices) are
    reported in the output and leave the state unchanged.
    """
    try:
        tokens = shlex.split(line)
    except ValueError as e:
        return state, f"Error: {e}"
    if not tokens:
        return state, ""

    command, args = tokens[0].lower(), tokens[1:]
    try:
        if command in ("quit", "exit"):
            return replace(state, running=False), "Bye."
        if command == "help":
            return state, SHELL_HELP
        if command == "load":
            return _shell_load(state, args)
        if command in PATH_ALGORITHMS:
            return _shell_path(state, command, args)
        if command == "format":
            return _shell_format(state, args)
        if command == "weighted":
            return _shell_weighted(state, args)
        if command == "iso":
            return _shell_iso(state, args)
        if command == "info":
            return _shell_simple(state, _info_report)
        if command == "mst":
            return _shell_simple(state, _mst_report)
        if command == "euler":
            return _shell_simple(state, _euler_report)
        if command == "hamilton":
            return _shell_simple(state, _hamilton_report)
    except _USER_ERRORS as e:
        logger.debug(f"Shell command {command!r} failed: {e}")
        return state, f"Error: {e}"

    return state, f"Unknown command {command!r}. Type 'help' for a list."


@cli.command()
@click.argument("graph_file", required=False, type=click.Path(dir_okay=False))
@click.pass_context
def shell(ctx: click.Context, graph_file: Optional[str]) -> None:
    """Interactive prompt; the loaded graph carries over between commands."""
    state = ShellState(config=ctx.obj)
    if graph_file:
        state, output = execute_shell_command(f"load {shlex.quote(graph_file)}", state)
        click.echo(output)

    click.echo("Type 'help' for commands, 'quit' to leave.")
    while state.running:
        click.echo("graph> ", nl=False)
        line = sys.stdin.readline()
        if not line:
            # End of input
            click.echo()
            break
        state, output = execute_shell_command(line, state)
        if output:
            click.echo(output)


def main() -> None:
    """Console script entry point."""
    cli(prog_name="graphconduit")


if __name__ == "__main__":
    main()
