"""Graph algorithms: connected components and minimum spanning trees."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise ValueError(f"vertex {vertex} is out of range")


def connected_components(
    vertex_count: int, edges: Iterable[Sequence[int]]
) -> list[list[int]]:
    """Return the connected components, each in depth-first visiting order.

    Each edge is ``(u, v)`` or ``(u, v, weight)``; the weight is ignored.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v, *_ in edges:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        adjacency[u].append(v)
        adjacency[v].append(u)

    visited = [False] * vertex_count
    components: list[list[int]] = []
    for start in range(vertex_count):
        if visited[start]:
            continue
        visited[start] = True
        component = [start]
        stack = [iter(adjacency[start])]
        while stack:
            for neighbour in stack[-1]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    component.append(neighbour)
                    stack.append(iter(adjacency[neighbour]))
                    break
            else:
                stack.pop()
        components.append(component)
    return components


class DisjointSet:
    """Union-find with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = [-1] * size
        self._rank = [1] * size

    def find(self, item: int) -> int:
        """Return the representative of the set holding ``item``."""
        root = item
        while self._parent[root] != -1:
            root = self._parent[root]
        while self._parent[item] != -1:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, x: int, y: int) -> bool:
        """Join the sets of ``x`` and ``y``; return whether they were apart."""
        s1, s2 = self.find(x), self.find(y)
        if s1 == s2:
            return False
        if self._rank[s1] < self._rank[s2]:
            self._parent[s1] = s2
            self._rank[s2] += self._rank[s2]
        else:
            self._parent[s2] = s1
            self._rank[s1] += self._rank[s1]
        return True


class Graph:
    """An undirected weighted graph kept as an edge list."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self.vertex_count = vertex_count
        self._edges: list[tuple[int, int, int]] = []

    def add_edge(self, x: int, y: int, weight: int) -> None:
        """Add an edge between ``x`` and ``y``."""
        _check_vertex(x, self.vertex_count)
        _check_vertex(y, self.vertex_count)
        self._edges.append((weight, x, y))

    def kruskal_mst(self) -> int:
        """Return the total weight of a minimum spanning forest."""
        sets = DisjointSet(self.vertex_count)
        total = 0
        for weight, x, y in sorted(self._edges):
            if sets.union(x, y):
                total += weight
        return total


def prim_mst(matrix: Sequence[Sequence[int]]) -> list[tuple[int, int, int]]:
    """Return the spanning-tree edges ``(parent, vertex, weight)`` found by Prim.

    ``matrix`` is a symmetric adjacency matrix in which 0 means no edge.
    The tree grows from vertex 0; one edge is returned for every other vertex.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if size == 0:
        return []
    value = [math.inf] * size
    value[0] = 0
    parent = [-1] * size
    in_tree = [False] * size
    for _ in range(size - 1):
        candidates = [v for v in range(size) if not in_tree[v] and value[v] < math.inf]
        if not candidates:
            raise ValueError("graph is not connected")
        u = min(candidates, key=value.__getitem__)
        in_tree[u] = True
        for j, weight in enumerate(matrix[u]):
            if weight != 0 and not in_tree[j] and weight < value[j]:
                value[j] = weight
                parent[j] = u
    if any(parent[v] == -1 for v in range(1, size)):
        raise ValueError("graph is not connected")
    return [(parent[v], v, matrix[parent[v]][v]) for v in range(1, size)]