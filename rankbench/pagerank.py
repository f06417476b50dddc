"""Dense vector helpers and power-iteration PageRank."""

from __future__ import annotations

from collections.abc import Sequence

from rankbench.graph import PageRankGraph


def norm_l1(values: Sequence[float]) -> float:
    """Return the sum of absolute values."""
    return sum(abs(x) for x in values)


def _check_sizes(a: Sequence[float], b: Sequence[float]) -> None:
    if len(a) != len(b):
        raise ValueError("vector sizes must match")


def vector_sub(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Element-wise ``a - b``."""
    _check_sizes(a, b)
    return [x - y for x, y in zip(a, b)]


def vector_add(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Element-wise ``a + b``."""
    _check_sizes(a, b)
    return [x + y for x, y in zip(a, b)]


def scale_vector(c: float, values: Sequence[float]) -> list[float]:
    """Multiply every element by ``c``."""
    return [c * x for x in values]


def vector_matmul(
    matrix: Sequence[Sequence[float]], values: Sequence[float]
) -> list[float]:
    """Return the row vector ``values`` multiplied by ``matrix`` (values^T · matrix)."""
    n = len(matrix)
    if len(values) != n:
        raise ValueError("vector length must match matrix size")
    return [sum(x * row[i] for x, row in zip(values, matrix)) for i in range(n)]


def page_rank_matrix(
    adj: Sequence[Sequence[float]], damp: float = 0.85, eps: float = 1e-6
) -> list[float]:
    """Run damped power iteration on a transition matrix until the L1 step is below ``eps``."""
    n = len(adj)
    if n == 0 or len(adj[0]) != n:
        raise ValueError("adjacency matrix must be non-empty and square")
    current = [1.0 / n] * n
    random_jump = scale_vector(1.0 - damp, [1.0 / n] * n)
    while True:
        nxt = vector_add(scale_vector(damp, vector_matmul(adj, current)), random_jump)
        if norm_l1(vector_sub(nxt, current)) < eps:
            return current
        current = nxt


def page_rank(graph: PageRankGraph, damp: float, epsilon: float) -> list[float]:
    """Return PageRank scores for ``graph``."""
    return page_rank_matrix(graph.adj_mat, damp, epsilon)