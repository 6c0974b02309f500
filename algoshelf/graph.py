"""Graph construction, traversal, cycle detection and grid searches."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from typing import Any

Adjacency = Sequence[Sequence[int]]

_FOUR_WAY = ((-1, 0), (0, 1), (1, 0), (0, -1))
_EIGHT_WAY = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


def _check_vertex(vertex: int, n: int) -> None:
    if not 0 <= vertex < n:
        raise IndexError(f"vertex {vertex} out of range for {n} vertices")


def adjacency_list(
    n: int, edges: Iterable[tuple[int, int]], directed: bool = False
) -> list[list[int]]:
    """Build an adjacency list for vertices ``0..n-1``.

    Each undirected edge is stored in both directions.
    """
    if n < 0:
        raise ValueError("number of vertices must not be negative")
    adj: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        _check_vertex(u, n)
        _check_vertex(v, n)
        adj[u].append(v)
        if not directed:
            adj[v].append(u)
    return adj


def adjacency_matrix(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Build a symmetric 0/1 adjacency matrix for an undirected graph."""
    if n < 0:
        raise ValueError("number of vertices must not be negative")
    matrix = [[0] * n for _ in range(n)]
    for u, v in edges:
        _check_vertex(u, n)
        _check_vertex(v, n)
        matrix[u][v] = 1
        matrix[v][u] = 1
    return matrix


def bfs_of_graph(adj: Adjacency) -> list[int]:
    """Breadth-first order of the vertices reachable from vertex 0."""
    if not adj:
        return []
    visited = {0}
    queue = deque([0])
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adj[node]:
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def dfs_of_graph(adj: Adjacency) -> list[int]:
    """Depth-first (preorder) order of the vertices reachable from vertex 0."""
    if not adj:
        return []
    visited = {0}
    order = [0]
    stack = [iter(adj[0])]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(iter(adj[neighbour]))
                break
        else:
            stack.pop()
    return order


def is_cyclic_directed(adj: Adjacency) -> bool:
    """Whether a directed graph contains a cycle."""
    visited: set[int] = set()
    for start in range(len(adj)):
        if start in visited:
            continue
        visited.add(start)
        on_path = {start}
        stack = [(start, iter(adj[start]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour not in visited:
                    visited.add(neighbour)
                    on_path.add(neighbour)
                    stack.append((neighbour, iter(adj[neighbour])))
                    break
                if neighbour in on_path:
                    return True
            else:
                on_path.discard(node)
                stack.pop()
    return False


def has_cycle_undirected_bfs(adj: Adjacency) -> bool:
    """Whether an undirected graph contains a cycle, searched breadth first."""
    visited: set[int] = set()
    for start in range(len(adj)):
        if start in visited:
            continue
        visited.add(start)
        queue: deque[tuple[int, int]] = deque([(start, -1)])
        while queue:
            node, parent = queue.popleft()
            for neighbour in adj[node]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append((neighbour, node))
                elif neighbour != parent:
                    return True
    return False


def has_cycle_undirected_dfs(adj: Adjacency) -> bool:
    """Whether an undirected graph contains a cycle, searched depth first."""
    visited: set[int] = set()
    for start in range(len(adj)):
        if start in visited:
            continue
        visited.add(start)
        stack = [(start, -1, iter(adj[start]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour not in visited:
                    visited.add(neighbour)
                    stack.append((neighbour, node, iter(adj[neighbour])))
                    break
                if neighbour != parent:
                    return True
            else:
                stack.pop()
    return False


def flood_fill(
    image: Sequence[Sequence[Any]], sr: int, sc: int, color: Any
) -> list[list[Any]]:
    """Return a copy of ``image`` with the 4-connected region at (sr, sc) recoloured."""
    rows = len(image)
    if not (0 <= sr < rows and 0 <= sc < len(image[sr])):
        raise IndexError(f"start cell ({sr}, {sc}) is outside the image")
    result = [list(row) for row in image]
    initial = image[sr][sc]
    result[sr][sc] = color
    stack = [(sr, sc)]
    while stack:
        row, col = stack.pop()
        for dr, dc in _FOUR_WAY:
            nrow, ncol = row + dr, col + dc
            if (
                0 <= nrow < rows
                and 0 <= ncol < len(image[nrow])
                and image[nrow][ncol] == initial
                and result[nrow][ncol] != color
            ):
                result[nrow][ncol] = color
                stack.append((nrow, ncol))
    return result


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count groups of ``'1'`` cells connected horizontally, vertically or diagonally."""
    rows = len(grid)
    visited: set[tuple[int, int]] = set()
    count = 0
    for row, line in enumerate(grid):
        for col, cell in enumerate(line):
            if cell != "1" or (row, col) in visited:
                continue
            count += 1
            visited.add((row, col))
            queue = deque([(row, col)])
            while queue:
                r, c = queue.popleft()
                for dr, dc in _EIGHT_WAY:
                    nr, nc = r + dr, c + dc
                    if (
                        0 <= nr < rows
                        and 0 <= nc < len(grid[nr])
                        and grid[nr][nc] == "1"
                        and (nr, nc) not in visited
                    ):
                        visited.add((nr, nc))
                        queue.append((nr, nc))
    return count


def _topological_order(adj: Sequence[Sequence[tuple[int, int]]]) -> list[int]:
    visited: set[int] = set()
    finished: list[int] = []
    for start in range(len(adj)):
        if start in visited:
            continue
        visited.add(start)
        stack = [(start, iter(adj[start]))]
        while stack:
            node, neighbours = stack[-1]
            for target, _ in neighbours:
                if target not in visited:
                    visited.add(target)
                    stack.append((target, iter(adj[target])))
                    break
            else:
                finished.append(node)
                stack.pop()
    finished.reverse()
    return finished


def shortest_path_dag(
    n: int, edges: Iterable[tuple[int, int, int]]
) -> list[int | None]:
    """Shortest distances from vertex 0 in a weighted directed acyclic graph.

    Vertices that cannot be reached are given ``None``.
    """
    if n < 0:
        raise ValueError("number of vertices must not be negative")
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, weight in edges:
        _check_vertex(u, n)
        _check_vertex(v, n)
        adj[u].append((v, weight))

    dist: list[int | None] = [None] * n
    if n:
        dist[0] = 0
    for node in _topological_order(adj):
        base = dist[node]
        if base is None:
            continue
        for target, weight in adj[node]:
            candidate = base + weight
            current = dist[target]
            if current is None or candidate < current:
                dist[target] = candidate
    return dist