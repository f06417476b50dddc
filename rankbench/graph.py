"""Graph containers, traversals and random adjacency generation."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass
class Graph:
    """An undirected graph stored as adjacency lists over nodes 0..node_count-1."""

    node_count: int = 0
    edge_count: int = 0
    edges: list[list[int]] = field(default_factory=list)

    def _check_node(self, node: int) -> None:
        if not 0 <= node < self.node_count:
            raise IndexError(f"node {node} is not in the graph")

    def add_node(self, neighbors: Iterable[int]) -> None:
        """Append a new node connected to each of ``neighbors``."""
        neighbors = list(neighbors)
        for neighbor in neighbors:
            self._check_node(neighbor)
        for neighbor in neighbors:
            self.edges[neighbor].append(self.node_count)
        self.edges.append(neighbors)
        self.edge_count += len(neighbors)
        self.node_count += 1

    def add_edges(self, to_add: Iterable[tuple[int, int]]) -> None:
        """Add undirected edges given as ``(a, b)`` pairs."""
        pairs = list(to_add)
        for a, b in pairs:
            self._check_node(a)
            self._check_node(b)
        for a, b in pairs:
            self.edges[a].append(b)
            self.edges[b].append(a)
        self.edge_count += len(pairs)


class Digraph(Graph):
    """A directed graph: edges run from the first node of a pair to the second."""

    def add_edges(self, to_add: Iterable[tuple[int, int]]) -> None:
        """Add directed edges given as ``(source, target)`` pairs."""
        pairs = list(to_add)
        for a, b in pairs:
            self._check_node(a)
            self._check_node(b)
        for a, b in pairs:
            self.edges[a].append(b)
        self.edge_count += len(pairs)


@dataclass
class PageRankGraph:
    """A graph held as a row-normalised transition matrix."""

    node_count: int = 0
    edge_count: int = 0
    adj_mat: list[list[float]] = field(default_factory=list)
    neighbors: list[int] = field(default_factory=list)

    @classmethod
    def from_adjacency(
        cls, nodes: int, adj_list: Sequence[Sequence[int]]
    ) -> PageRankGraph:
        """Build from adjacency lists; entry (i, j) is 1/outdegree(i) for each link i->j."""
        if len(adj_list) < nodes:
            raise ValueError("adjacency list has fewer rows than nodes")
        adj_mat = [[0.0] * nodes for _ in range(nodes)]
        degrees = []
        for row, targets in zip(adj_mat, adj_list[:nodes]):
            for target in targets:
                if not 0 <= target < nodes:
                    raise IndexError(f"node {target} is not in the graph")
                row[target] = 1.0 / len(targets)
            degrees.append(len(targets))
        return cls(
            node_count=nodes,
            edge_count=sum(degrees),
            adj_mat=adj_mat,
            neighbors=degrees,
        )

    @classmethod
    def from_graph(cls, graph: Graph) -> PageRankGraph:
        """Build from a :class:`Graph`, keeping its node and edge counts."""
        built = cls.from_adjacency(graph.node_count, graph.edges)
        built.edge_count = graph.edge_count
        return built


def _check_start(graph: Graph, start: int) -> None:
    if not 0 <= start < graph.node_count:
        raise IndexError(f"node {start} is not in the graph")


def bfs(graph: Graph, start: int) -> list[int]:
    """Return nodes reachable from ``start`` in breadth-first order."""
    _check_start(graph, start)
    visited = [False] * graph.node_count
    visited[start] = True
    queue = deque([start])
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbor in graph.edges[node]:
            if not visited[neighbor]:
                visited[neighbor] = True
                queue.append(neighbor)
    return order


def dfs(graph: Graph, start: int) -> list[int]:
    """Return nodes reachable from ``start`` in depth-first (preorder) order."""
    _check_start(graph, start)
    visited = [False] * graph.node_count
    visited[start] = True
    order = [start]
    stack = [iter(graph.edges[start])]
    while stack:
        for neighbor in stack[-1]:
            if not visited[neighbor]:
                visited[neighbor] = True
                order.append(neighbor)
                stack.append(iter(graph.edges[neighbor]))
                break
        else:
            stack.pop()
    return order


def randomly_populate(
    adj_list: list[list[int]], rng: random.Random | None = None
) -> None:
    """Fill each row of ``adj_list`` in place with random increasing link targets."""
    n = len(adj_list)
    step = n // 3
    if step == 0:
        raise ValueError("at least 3 nodes are needed to populate randomly")
    rng = rng if rng is not None else random.Random()
    for i, row in enumerate(adj_list):
        target = 0
        while target < n:
            target += rng.randrange(step) + 2
            if target == i and not row:
                target = (i - 1) % n
            if target == i or target >= n:
                break
            row.append(target)


def format_matrix(matrix: Iterable[Iterable[float]]) -> str:
    """Render a matrix one row per line, each value followed by a space."""
    return "".join(
        "".join(f"{value:g} " for value in row) + "\n" for row in matrix
    )