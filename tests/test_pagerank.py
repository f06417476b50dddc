import random

import pytest

from rankbench.graph import PageRankGraph, randomly_populate
from rankbench.pagerank import (
    norm_l1,
    page_rank,
    page_rank_matrix,
    scale_vector,
    vector_add,
    vector_matmul,
    vector_sub,
)


def test_norm_l1():
    assert norm_l1([1.0, -2.0, 3.0]) == pytest.approx(6.0)
    assert norm_l1([]) == 0


def test_add_sub_round_trip():
    a = [1.5, -2.0, 4.0]
    b = [0.5, 3.0, -1.0]
    assert vector_sub(vector_add(a, b), b) == pytest.approx(a)


@pytest.mark.parametrize("op", [vector_add, vector_sub])
def test_size_mismatch_raises(op):
    with pytest.raises(ValueError):
        op([1.0, 2.0], [1.0])


def test_scale_vector_inverse():
    v = [2.0, -4.0, 8.0]
    assert scale_vector(0.25, scale_vector(4.0, v)) == pytest.approx(v)


def test_matmul_identity():
    ident = [[1.0 if i == j else 0.0 for j in range(3)] for i in range(3)]
    v = [0.2, 0.3, 0.5]
    assert vector_matmul(ident, v) == pytest.approx(v)


def test_matmul_is_row_vector_product():
    m = [[0.0, 1.0], [0.0, 0.0]]
    assert vector_matmul(m, [1.0, 0.0]) == pytest.approx([0.0, 1.0])


def test_matmul_size_mismatch():
    with pytest.raises(ValueError):
        vector_matmul([[1.0]], [1.0, 2.0])


def test_page_rank_rejects_empty_and_non_square():
    with pytest.raises(ValueError):
        page_rank_matrix([])
    with pytest.raises(ValueError):
        page_rank_matrix([[1.0, 0.0]])


def test_cycle_is_uniform():
    n = 4
    prg = PageRankGraph.from_adjacency(n, [[(i + 1) % n] for i in range(n)])
    ranks = page_rank(prg, 0.85, 1e-8)
    assert ranks == pytest.approx([1 / n] * n)


def test_ranks_sum_to_one_without_dangling_nodes():
    adj = [[1, 2], [2], [0], [0, 2]]
    prg = PageRankGraph.from_adjacency(4, adj)
    ranks = page_rank(prg, 0.85, 1e-9)
    assert sum(ranks) == pytest.approx(1.0, abs=1e-6)
    assert ranks[2] > ranks[3]


def test_result_is_near_fixed_point():
    rng = random.Random(11)
    adj = [[] for _ in range(12)]
    randomly_populate(adj, rng)
    prg = PageRankGraph.from_adjacency(12, adj)
    damp, eps = 0.85, 1e-7
    ranks = page_rank(prg, damp, eps)
    step = vector_add(
        scale_vector(damp, vector_matmul(prg.adj_mat, ranks)),
        [(1 - damp) / 12] * 12,
    )
    assert norm_l1(vector_sub(step, ranks)) < eps


def test_page_rank_matches_matrix_form():
    prg = PageRankGraph.from_adjacency(3, [[1], [2], [0, 1]])
    assert page_rank(prg, 0.5, 1e-6) == page_rank_matrix(prg.adj_mat, 0.5, 1e-6)