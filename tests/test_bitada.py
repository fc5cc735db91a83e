import io
import sys

import pytest

from olympiad.bitada import count_embeddings, main, root_tree

STAR = [(1, 2), (1, 3), (1, 4)]
PATH5 = [(1, 2), (2, 3), (3, 4), (4, 5)]
BIG = 10**9 + 7


def test_root_tree_skips_degree_three_node():
    root, children = root_tree(4, STAR)
    assert root == 2
    assert children == {1: [3, 4], 2: [1], 3: [], 4: []}


def test_root_tree_of_single_node():
    assert root_tree(1, []) == (1, {1: []})


def test_root_tree_rejects_wrong_edge_count():
    with pytest.raises(ValueError):
        root_tree(3, [(1, 2)])


def test_root_tree_rejects_disconnected_edges():
    with pytest.raises(ValueError):
        root_tree(4, [(1, 2), (2, 1), (3, 4)])


@pytest.mark.parametrize("m,edges,k", [(1, [], 5), (5, PATH5, 3), (4, STAR, 10)])
def test_single_node_pattern_counts_host_nodes(m, edges, k):
    assert count_embeddings(1, [], m, edges, k) == m % k


@pytest.mark.parametrize("m,edges", [(2, [(1, 2)]), (5, PATH5), (4, STAR)])
def test_single_edge_pattern_counts_ordered_edges(m, edges):
    assert count_embeddings(2, [(1, 2)], m, edges, BIG) == 2 * (m - 1)


def test_path_into_star():
    assert count_embeddings(3, [(1, 2), (2, 3)], 4, STAR, BIG) == 6


def test_pattern_larger_than_host_has_no_embedding():
    assert count_embeddings(5, PATH5, 3, [(1, 2), (2, 3)], BIG) == 0


@pytest.mark.parametrize("k", [2, 3, 7])
def test_modulus_is_consistent(k):
    host = [(1, 2), (1, 3), (2, 4), (2, 5), (3, 6), (3, 7)]
    pattern = [(1, 2), (2, 3), (2, 4)]
    full = count_embeddings(4, pattern, 7, host, BIG)
    assert count_embeddings(4, pattern, 7, host, k) == full % k


def test_zero_modulus_rejected():
    with pytest.raises(ValueError):
        count_embeddings(1, [], 1, [], 0)


def test_host_degree_above_three_rejected():
    with pytest.raises(ValueError):
        count_embeddings(1, [], 5, [(1, 2), (1, 3), (1, 4), (1, 5)], 7)


def test_unknown_node_rejected():
    with pytest.raises(ValueError):
        count_embeddings(2, [(1, 9)], 2, [(1, 2)], 7)


def test_main_prints_count(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("2 2 5\n1 2\n1 2\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == str(count_embeddings(2, [(1, 2)], 2, [(1, 2)], 5))