"""Single-source shortest paths over an adjacency matrix read from text."""

from __future__ import annotations

import re
import sys

INF = 2**31 - 1

_INT = re.compile(r"[+-]?\d+")


class GraphInputError(ValueError):
    """Raised when the graph description is malformed."""


class _Scanner:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def read_int(self) -> int | None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1
        match = _INT.match(self.text, self.pos)
        if match is None:
            return None
        self.pos = match.end()
        return int(match.group())

    def read_char(self) -> str | None:
        if self.pos >= len(self.text):
            return None
        char = self.text[self.pos]
        self.pos += 1
        return char


def parse_input(text: str) -> tuple[list[list[int]], int]:
    """Parse vertex count, weight matrix rows and source vertex."""
    scanner = _Scanner(text)
    size = scanner.read_int()
    if size is None:
        raise GraphInputError("Error while reading the number of vertices")
    if size <= 0:
        raise GraphInputError("Error: number of vertices should be a positive integer")

    graph: list[list[int]] = []
    for i in range(size):
        row: list[int] = []
        for j in range(size):
            weight = scanner.read_int()
            if weight is None:
                raise GraphInputError(
                    f"Error while reading the weight of the edge between {i} and {j}"
                )
            if weight < 0:
                raise GraphInputError("Error: input should be a non-negative integer")
            if i == j and weight != 0:
                raise GraphInputError("Error: the diagonal of the matrix should be 0")
            row.append(weight)
        graph.append(row)
        trailing = scanner.read_char()
        if trailing is not None and trailing != "\n":
            raise GraphInputError(f"Error: too many inputs in the row {i}")

    src = scanner.read_int()
    if src is None:
        raise GraphInputError("Error while reading source vertex")
    _check_source(src, size)
    return graph, src


def _check_source(src: int, size: int) -> None:
    if not 0 <= src < size:
        raise GraphInputError(
            "Error: source vertex should be a non-negative integer and less than "
            "the number of vertices"
        )


def dijkstra(graph: list[list[int]], src: int) -> list[int]:
    """Return distances from ``src``; unreachable vertices get INF. Zero weight means no edge."""
    size = len(graph)
    _check_source(src, size)
    dist = [INF] * size
    dist[src] = 0
    done = [False] * size

    for _ in range(size - 1):
        u = min((v for v in range(size) if not done[v]), key=dist.__getitem__)
        done[u] = True
        if dist[u] == INF:
            continue
        for v, weight in enumerate(graph[u]):
            if not done[v] and weight and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist


def format_solution(dist: list[int]) -> str:
    """Render the distance table."""
    lines = ["Vertex \t\t Distance from Source\n"]
    lines.extend(f"{vertex} \t\t\t\t {d}\n" for vertex, d in enumerate(dist))
    return "".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Read a graph from standard input and print shortest distances."""
    try:
        graph, src = parse_input(sys.stdin.read())
    except GraphInputError as error:
        print(error)
        return 1
    sys.stdout.write(format_solution(dijkstra(graph, src)))
    return 0


if __name__ == "__main__":
    sys.exit(main())