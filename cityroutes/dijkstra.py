"""Shortest routes between cities and cycle detection for a route file.

A route file holds entries ``origin;destination;distance`` separated by a
single character, usually a newline.
"""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass

from cityroutes.errors import DataStructureError
from cityroutes.graph import Graph

RULE = "------------------------------------------------------------------"
BANNER = "^^^^^^^^^^^^^^^^ DIJKSTRA’S ALGORITHM ^^^^^^^^^^^^^^^^"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_TABLE_HEADER = f"{'Vertex':<25}{'Distance':<25}{'Previous' + chr(10):<25}\n"


@dataclass(frozen=True)
class SummaryRow:
    """One line of the shortest-distance summary table."""

    vertex: str
    distance: int
    previous: str


def parse_routes(text: str) -> list[tuple[str, str, int]]:
    """Parse ``origin;destination;distance`` entries from ``text``.

    Reading stops at the first entry that is incomplete.
    """
    routes: list[tuple[str, str, int]] = []
    pos = 0
    while True:
        first = text.find(";", pos)
        if first < 0:
            break
        second = text.find(";", first + 1)
        if second < 0:
            break
        match = _LEADING_INT.match(text, second + 1)
        if match is None:
            break
        routes.append((text[pos:first], text[first + 1 : second], int(match.group(1))))
        # One separator character follows each distance.
        pos = match.end() + 1
    return routes


def build_graph(routes: Iterable[tuple[str, str, int]]) -> tuple[Graph[str], list[str]]:
    """Build a graph from routes; return it with its vertices in order of appearance."""
    graph: Graph[str] = Graph(50)
    vertices: list[str] = []
    for origin, destination, distance in routes:
        for city in (origin, destination):
            if not is_valid_vertex(vertices, city):
                graph.add_vertex(city)
                vertices.append(city)
        graph.add_edge(origin, destination, distance)
    return graph, vertices


def build_graph_from_file(path: str | os.PathLike[str]) -> tuple[Graph[str], list[str]]:
    """Read a route file and build its graph."""
    with open(path, encoding="utf-8", newline="") as handle:
        text = handle.read()
    return build_graph(parse_routes(text))


def is_valid_vertex(vertices: Sequence[str], vertex: str) -> bool:
    return vertex in vertices


def format_vertex_listing(vertices: Sequence[str]) -> str:
    """Return the banner and the sorted city names, three to a line."""
    parts = [
        BANNER,
        "\n",
        f"A Weighted Graph Has Been Built For These {len(vertices)} Cities:\n\n",
    ]
    for count, name in enumerate(sorted(vertices), start=1):
        parts.append(f"{name:<15}")
        if count % 3 == 0:
            parts.append("\n")
    parts.append("\n")
    return "".join(parts)


def prompt_start_vertex(
    vertices: Sequence[str],
    read: Callable[[], str],
    write: Callable[[str], object],
) -> str:
    """Show the cities and ask until a known starting city is given.

    ``read`` returns the next whitespace-free token of input.
    """
    write(format_vertex_listing(vertices))
    write("\nPlease input your starting vertex: ")
    start = read()
    while not is_valid_vertex(vertices, start):
        write(f"{start}is an invalid vertex. Please enter a valid vertex: ")
        start = read()
    write(RULE + "\n")
    return start


def dijkstra(graph: Graph[str], start: str, vertices: Sequence[str]) -> list[SummaryRow]:
    """Return summary rows in the order vertices are settled from ``start``.

    Vertices that cannot be reached from ``start`` are left out.
    """
    if start not in vertices:
        raise ValueError(f"start vertex not found: {start!r}")
    index = {name: i for i, name in reversed(list(enumerate(vertices)))}
    visited = [False] * len(vertices)
    distance: list[int | None] = [None] * len(vertices)
    previous = [""] * len(vertices)

    current = index[start]
    visited[current] = True
    distance[current] = 0
    previous[current] = "N/A"
    rows = [SummaryRow(start, 0, "N/A")]

    while not all(visited):
        current_name = vertices[current]
        base = distance[current]
        assert base is not None
        for neighbour in graph.get_to_vertices(current_name):
            n = index[neighbour]
            candidate = base + graph.weight_is(current_name, neighbour)
            if not visited[n] and (distance[n] is None or distance[n] > candidate):
                distance[n] = candidate
                previous[n] = current_name

        pending = [
            (dist, i)
            for i, dist in enumerate(distance)
            if not visited[i] and dist is not None
        ]
        if not pending:
            break
        # Ties go to the vertex added first.
        current = min(pending)[1]
        rows.append(SummaryRow(vertices[current], distance[current], previous[current]))
        visited[current] = True
    return rows


def format_summary_row(row: SummaryRow) -> str:
    return f"{row.vertex:<25}{row.distance:<25}{row.previous:<25}"


def has_cycle(graph: Graph[str], vertices: Sequence[str]) -> bool:
    """Return True if the directed graph contains a cycle."""
    visited: set[str] = set()
    on_path: set[str] = set()

    def visit(vertex: str) -> bool:
        visited.add(vertex)
        on_path.add(vertex)
        for neighbour in graph.get_to_vertices(vertex):
            if neighbour not in visited:
                if visit(neighbour):
                    return True
            elif neighbour in on_path:
                return True
        on_path.discard(vertex)
        return False

    return any(vertex not in visited and visit(vertex) for vertex in reversed(vertices))


def _stdin_tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "cityroutes"
        print(f"Usage: {prog} <route-file>", file=sys.stderr)
        return 1

    try:
        graph, vertices = build_graph_from_file(args[0])
    except OSError:
        print("Error: Unable to open input file.", file=sys.stderr)
        return 1
    except DataStructureError:
        print("Error: Too many cities in input file.", file=sys.stderr)
        return 1

    tokens = _stdin_tokens()

    def read() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError("no more input") from None

    out = sys.stdout
    try:
        start = prompt_start_vertex(vertices, read, out.write)
    except EOFError:
        out.write("\n")
        return 1

    out.write(_TABLE_HEADER)
    for row in dijkstra(graph, start, vertices):
        out.write(format_summary_row(row) + "\n")
    out.write("\n" + RULE + "\n")

    if has_cycle(graph, vertices):
        out.write("The graph contains a cycle.\n")
    else:
        out.write("The graph does not contain a cycle.\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())