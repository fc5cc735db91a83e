"""Counting embeddings of a small tree into a larger tree of degree at most three."""

from __future__ import annotations

import argparse
import itertools
import math
import sys
from collections import deque
from collections.abc import Iterable, Sequence

_MAX_DEGREE = 3

Table = dict[tuple[int, "int | None"], int]


def _adjacency(count: int, edges: Iterable[tuple[int, int]], name: str) -> dict[int, list[int]]:
    if count < 1:
        raise ValueError(f"{name} tree must have at least one node")
    edge_list = [tuple(edge) for edge in edges]
    if len(edge_list) != count - 1:
        raise ValueError(f"{name} tree with {count} nodes needs {count - 1} edges")
    adjacency: dict[int, list[int]] = {node: [] for node in range(1, count + 1)}
    for x, y in edge_list:
        if x not in adjacency or y not in adjacency:
            raise ValueError(f"{name} edge ({x}, {y}) refers to an unknown node")
        adjacency[x].append(y)
        adjacency[y].append(x)
    return adjacency


def _check_degrees(adjacency: dict[int, list[int]], name: str) -> None:
    for node, neighbours in adjacency.items():
        if len(neighbours) > _MAX_DEGREE:
            raise ValueError(f"node {node} of the {name} tree has degree above {_MAX_DEGREE}")


def root_tree(n: int, edges: Iterable[tuple[int, int]]) -> tuple[int, dict[int, list[int]]]:
    """Root a tree with nodes ``1..n`` at its first node of degree below three.

    Returns the root and, for every node, its children in the order in which
    the edges list them.
    """
    adjacency = _adjacency(n, edges, "pattern")
    root = next((node for node, nbrs in adjacency.items() if len(nbrs) < _MAX_DEGREE), None)
    if root is None:
        raise ValueError("tree has no node of degree below three")

    children: dict[int, list[int]] = {node: [] for node in adjacency}
    seen = {root}
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for neighbour in adjacency[node]:
            if neighbour not in seen:
                seen.add(neighbour)
                children[node].append(neighbour)
                queue.append(neighbour)
    if len(seen) != n:
        raise ValueError("pattern edges do not form a connected tree")
    return root, children


def _preorder(root: int, children: dict[int, list[int]]) -> list[int]:
    order = [root]
    for node in order:
        order.extend(children[node])
    return order


def _ways(
    kids: Sequence[int],
    options: Sequence[int],
    host_node: int,
    tables: dict[int, Table | None],
    k: int,
) -> int:
    if not kids:
        return 1
    if len(kids) > len(options):
        return 0

    def value(kid: int, target: int) -> int:
        table = tables[kid]
        return 1 if table is None else table[(target, host_node)]

    total = sum(
        math.prod(value(kid, target) for kid, target in zip(kids, chosen)) % k
        for chosen in itertools.permutations(options, len(kids))
    )
    return total % k


def count_embeddings(
    n: int,
    pattern_edges: Iterable[tuple[int, int]],
    m: int,
    host_edges: Iterable[tuple[int, int]],
    k: int,
) -> int:
    """Count injective, edge-preserving placements of the pattern tree in the host tree, modulo ``k``."""
    if k < 1:
        raise ValueError("modulus must be positive")
    pattern_edges = list(pattern_edges)
    _check_degrees(_adjacency(n, pattern_edges, "pattern"), "pattern")
    root, children = root_tree(n, pattern_edges)
    host = _adjacency(m, host_edges, "host")
    _check_degrees(host, "host")

    # tables[u][(v, p)]: ways to place the subtree of u with u on v, its parent on p.
    tables: dict[int, Table | None] = {}
    for u in reversed(_preorder(root, children)):
        kids = children[u]
        if not kids:
            tables[u] = None
            continue
        table: Table = {}
        for v, neighbours in host.items():
            for parent in (None, *neighbours):
                options = [w for w in neighbours if w != parent]
                table[(v, parent)] = _ways(kids, options, v, tables, k)
        for kid in kids:
            del tables[kid]
        tables[u] = table

    root_table = tables[root]
    if root_table is None:
        return m % k
    return sum(root_table[(v, None)] for v in host) % k


def main(argv: list[str] | None = None) -> int:
    """Read both trees and the modulus from standard input and print the count."""
    parser = argparse.ArgumentParser(description="Read two trees from stdin and count embeddings.")
    parser.parse_args(argv)
    tokens = iter(int(token) for token in sys.stdin.read().split())
    n, m, k = next(tokens), next(tokens), next(tokens)
    pattern = [(next(tokens), next(tokens)) for _ in range(n - 1)]
    host = [(next(tokens), next(tokens)) for _ in range(m - 1)]
    print(count_embeddings(n, pattern, m, host, k))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())