"""Command line entry point for the shortest-path runners."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from collections import Counter
from collections.abc import Callable, Sequence

from .metis import MetisFormatError, PartitionError, read_metis_graph, read_partition_file
from .partitioned import build_partitions, partitioned_bellman_ford
from .report import distance_stats, format_sample, format_stats
from .serial import NegativeCycleError, SourceNotFoundError, load_graph
from .striped import StripedGraph

SAMPLE_SIZE = 20


def _rate(count: int, seconds: float) -> str:
    return f"{count / seconds:g}" if seconds > 0 else "inf"


def _lenient(lookup: Callable[[int], int]) -> Callable[[int], int]:
    def node_id(index: int) -> int:
        try:
            return lookup(index)
        except IndexError:
            return -1

    return node_id


def _print_results(
    distances: Sequence[float],
    node_id: Callable[[int], int],
    source: int,
    vertex_count: int,
) -> None:
    print(f"\nSample of shortest distances from node {source}:")
    for line in format_sample(distances, _lenient(node_id), SAMPLE_SIZE):
        print(line)
    print()
    print(format_stats(distance_stats(distances), vertex_count))


def _run_serial(args: argparse.Namespace) -> int:
    start = time.perf_counter()
    graph = load_graph(args.graph_file)
    load_time = time.perf_counter() - start

    n = graph.vertex_count()
    print("Graph loaded successfully.")
    print(f"Number of vertices: {n}")
    print(f"Number of undirected edges: {graph.edge_count() // 2}")
    print(f"Graph loading time: {load_time:g} seconds")
    print(f"Running Bellman-Ford from source node {args.source}...")

    start = time.perf_counter()
    distances = graph.bellman_ford(args.source)
    bf_time = time.perf_counter() - start

    print("\nPerformance Metrics:")
    print("-------------------")
    print(f"Total nodes processed: {n}")
    print(f"Bellman-Ford execution time: {bf_time:g} seconds")
    print(f"Nodes processed per second: {_rate(n, bf_time)}")

    _print_results(distances, graph.node_id, args.source, n)
    return 0


def _run_partitioned(args: argparse.Namespace) -> int:
    print(f"Graph file: {args.graph_file}")
    print(f"Partition file: {args.partition_file}")
    print(f"Source node: {args.source}")
    print(f"Number of processes: {args.procs}")

    start = time.perf_counter()
    assignments = read_partition_file(args.partition_file, args.procs)
    counts = Counter(assignments)
    print("Node distribution across partitions:")
    for part in range(args.procs):
        print(f"  Partition {part}: {counts.get(part, 0)} nodes")

    graph = read_metis_graph(args.graph_file)
    print(
        f"Reading METIS graph with {graph.num_vertices} vertices "
        f"and {graph.num_edges} edges"
    )
    partitions = build_partitions(assignments, graph, args.procs)
    load_time = time.perf_counter() - start

    total_local = sum(len(p.edges) for p in partitions)
    total_ghost = sum(len(p.ghost_edges) for p in partitions)
    print("\nGraph loaded successfully across all processes.")
    print(f"Total local edges across all processes: {total_local}")
    print(f"Total ghost edges across all processes: {total_ghost}")
    print(f"Average local edges per process: {total_local / args.procs:g}")
    print(f"Average ghost edges per process: {total_ghost / args.procs:g}")
    print(f"Graph loading time: {load_time:g} seconds")
    print(f"Running parallel Bellman-Ford from source node {args.source}...")

    start = time.perf_counter()
    run = partitioned_bellman_ford(partitions, args.source)
    bf_time = time.perf_counter() - start

    n = partitions[0].vertex_count()
    print(
        f"Source node {args.source} (index {run.source_index}) "
        f"is owned by process {run.source_owner}"
    )
    print(f"Maximum iterations needed: {run.max_iterations}")
    if run.iterations < run.max_iterations:
        print(
            f"Early convergence at iteration {run.iterations} of {run.max_iterations}"
        )

    _print_results(run.distances, partitions[0].nodes.node_id, args.source, n)

    print("\nPerformance Metrics:")
    print("-------------------")
    print(f"Total nodes processed: {n}")
    print(f"Parallel Bellman-Ford execution time: {bf_time:g} seconds")
    print(f"Nodes processed per second: {_rate(n, bf_time)}")
    print(f"Number of processes: {args.procs}")
    return 0


def _run_striped(args: argparse.Namespace) -> int:
    graph = StripedGraph(args.procs)
    print(f"Loading graph from file: {args.graph_file}")
    start = time.perf_counter()
    graph.load_file(args.graph_file)
    load_time = time.perf_counter() - start

    n = graph.vertex_count()
    edges = graph.edge_count()
    print("Graph loading completed.")
    print(f"Number of vertices: {n}")
    print(f"Number of directed edges: {edges}")
    print(f"Number of undirected edges: {edges // 2}")
    print(f"Running Parallel Bellman-Ford from source node {args.source}...")

    start = time.perf_counter()
    distances = graph.bellman_ford(args.source, args.max_iterations)
    bf_time = time.perf_counter() - start

    if not distances:
        print("Error in Bellman-Ford algorithm.", file=sys.stderr)
        return 1

    print("\nPerformance Metrics:")
    print("-------------------")
    print(f"Total nodes processed: {n}")
    print(f"Total edges processed: {edges}")
    print(f"Number of processes: {args.procs}")
    print(f"Graph loading time: {load_time:g} seconds")
    print(f"Bellman-Ford execution time: {bf_time:g} seconds")
    print(f"Nodes processed per second: {_rate(n, bf_time)}")
    print(f"Edges processed per second: {_rate(edges, bf_time)}")

    _print_results(distances, graph.node_id, args.source, n)
    return 0


def _positive(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ssspgraph",
        description="Single-source shortest paths with Bellman-Ford.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log progress messages"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    serial = commands.add_parser("serial", help="run on an edge-list file")
    serial.add_argument("graph_file")
    serial.add_argument("source", nargs="?", type=int, default=1)
    serial.set_defaults(handler=_run_serial)

    partitioned = commands.add_parser(
        "partitioned", help="run on a METIS graph with a partition file"
    )
    partitioned.add_argument("graph_file")
    partitioned.add_argument("partition_file")
    partitioned.add_argument("source", nargs="?", type=int, default=1)
    partitioned.add_argument("-n", "--procs", type=_positive, default=1)
    partitioned.set_defaults(handler=_run_partitioned)

    striped = commands.add_parser(
        "striped", help="run on an edge-list file dealt out over ranks"
    )
    striped.add_argument("graph_file")
    striped.add_argument("source", nargs="?", type=int, default=1)
    striped.add_argument("-n", "--procs", type=_positive, default=1)
    striped.add_argument("--max-iterations", type=_positive, default=100)
    striped.set_defaults(handler=_run_striped)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the chosen algorithm and return the exit status."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(message)s",
    )
    try:
        return args.handler(args)
    except OSError as exc:
        name = exc.filename if exc.filename is not None else exc
        print(f"Error: Unable to open file {name}", file=sys.stderr)
    except (
        SourceNotFoundError,
        NegativeCycleError,
        PartitionError,
        MetisFormatError,
    ) as exc:
        print(f"Error: {exc}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())