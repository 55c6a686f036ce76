"""Undirected graphs with numbered vertices, and breadth- and depth-first traversal."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterator
from pathlib import Path

__all__ = ["Graph", "parse_graph", "main"]


class Graph:
    """Undirected graph on vertices ``1 .. vertex_count`` stored as adjacency lists."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self.vertex_count = vertex_count
        self._adjacency: dict[int, list[int]] = {
            vertex: [] for vertex in range(1, vertex_count + 1)
        }

    def _check(self, node: int) -> None:
        if node not in self._adjacency:
            raise ValueError(f"vertex {node} is not in 1..{self.vertex_count}")

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append(v)
        self._adjacency[v].append(u)

    def neighbours(self, node: int) -> list[int]:
        """Neighbours of ``node`` in the order their edges were added."""
        self._check(node)
        return list(self._adjacency[node])

    def adjacency_matrix(self) -> list[list[int]]:
        """0/1 matrix whose row and column ``v - 1`` belong to vertex ``v``."""
        matrix = [[0] * self.vertex_count for _ in range(self.vertex_count)]
        for u, targets in self._adjacency.items():
            for v in targets:
                matrix[u - 1][v - 1] = 1
        return matrix

    def bfs(self) -> list[int]:
        """Breadth-first order over every component, lowest unvisited vertex first."""
        seen: set[int] = set()
        order: list[int] = []
        for start in self._adjacency:
            if start in seen:
                continue
            seen.add(start)
            queue = deque([start])
            while queue:
                node = queue.popleft()
                order.append(node)
                for nxt in self._adjacency[node]:
                    if nxt not in seen:
                        seen.add(nxt)
                        queue.append(nxt)
        return order

    def dfs(self) -> list[int]:
        """Depth-first preorder over every component, lowest unvisited vertex first."""
        seen: set[int] = set()
        order: list[int] = []
        for start in self._adjacency:
            if start in seen:
                continue
            seen.add(start)
            order.append(start)
            stack: list[Iterator[int]] = [iter(self._adjacency[start])]
            while stack:
                for nxt in stack[-1]:
                    if nxt not in seen:
                        seen.add(nxt)
                        order.append(nxt)
                        stack.append(iter(self._adjacency[nxt]))
                        break
                else:
                    stack.pop()
        return order


def parse_graph(text: str) -> Graph:
    """Read ``vertices edges`` followed by one ``u v`` pair per edge."""
    tokens = iter(text.split())
    try:
        vertex_count = int(next(tokens))
        edge_count = int(next(tokens))
        graph = Graph(vertex_count)
        for _ in range(edge_count):
            graph.add_edge(int(next(tokens)), int(next(tokens)))
    except StopIteration:
        raise ValueError("graph description ended early") from None
    return graph


def main(argv: list[str] | None = None) -> int:
    """Print the traversal order of a graph read from a file or standard input."""
    parser = argparse.ArgumentParser(
        prog="dpkit-graph", description="Traverse an undirected graph."
    )
    parser.add_argument("path", nargs="?", help="graph file; standard input when omitted")
    parser.add_argument("--order", choices=("bfs", "dfs"), default="bfs")
    args = parser.parse_args(argv)

    text = Path(args.path).read_text() if args.path else sys.stdin.read()
    try:
        graph = parse_graph(text)
    except ValueError as exc:
        parser.error(str(exc))
    order = graph.bfs() if args.order == "bfs" else graph.dfs()
    print(" ".join(map(str, order)))
    return 0