"""Graph algorithms on numbered vertices: bipartiteness and Prim's MST."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable

__all__ = ["is_bipartite", "prim_mst"]


def _check_vertex(vertex: int, vertices: int) -> None:
    if not 0 <= vertex < vertices:
        raise ValueError(f"vertex {vertex} is outside 0..{vertices - 1}")


def _check_count(vertices: int) -> None:
    if vertices < 0:
        raise ValueError("number of vertices must be non-negative")


def is_bipartite(vertices: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Return True when the undirected graph can be two-coloured."""
    _check_count(vertices)
    neighbours: list[set[int]] = [set() for _ in range(vertices)]
    for a, b in edges:
        _check_vertex(a, vertices)
        _check_vertex(b, vertices)
        neighbours[a].add(b)
        neighbours[b].add(a)

    colour: list[int | None] = [None] * vertices
    for start in range(vertices):
        if colour[start] is not None:
            continue
        colour[start] = 1
        queue = deque([start])
        while queue:
            u = queue.popleft()
            for v in neighbours[u]:
                if colour[v] is None:
                    colour[v] = 1 - colour[u]
                    queue.append(v)
                elif colour[v] == colour[u]:
                    return False
    return True


def prim_mst(
    vertices: int, edges: Iterable[tuple[int, int, int]], source: int
) -> list[tuple[int | None, int]]:
    """Build a minimum spanning tree with Prim's algorithm.

    ``edges`` holds ``(a, b, weight)`` triples of an undirected graph.
    Returns ``(parent, vertex)`` for every vertex other than ``source``,
    in vertex order; ``parent`` is None for a vertex that cannot be reached.
    """
    _check_count(vertices)
    _check_vertex(source, vertices)
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertices)]
    for a, b, weight in edges:
        _check_vertex(a, vertices)
        _check_vertex(b, vertices)
        adjacency[a].append((b, weight))
        adjacency[b].append((a, weight))

    key: list[float] = [math.inf] * vertices
    parent: list[int | None] = [None] * vertices
    in_tree = [False] * vertices
    key[source] = 0
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        _, u = heapq.heappop(heap)
        if in_tree[u]:
            continue
        in_tree[u] = True
        for v, weight in adjacency[u]:
            if not in_tree[v] and key[v] > weight:
                key[v] = weight
                parent[v] = u
                heapq.heappush(heap, (weight, v))
    return [(parent[v], v) for v in range(vertices) if v != source]