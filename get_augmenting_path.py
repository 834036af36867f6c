from collections import deque
from typing import Callable, Dict, List, Optional

from vertex import Vertex


def _trivial(source: Optional[Vertex], sink: Optional[Vertex]) -> bool:
    return source is None or sink is None or source is sink


def find_path_dfs(
    source: Optional[Vertex],
    sink: Optional[Vertex],
) -> Optional[List[Vertex]]:
    """
    Depth-first search over residual arcs with positive capacity.
    Returns the first source-sink path in neighbour order, or None.

    Each vertex is visited at most once per search. The explicit stack keeps
    one iterator per vertex on the current path, so dead ends are popped
    without recursion.
    """
    if _trivial(source, sink):
        return None

    path = [source]
    visited = {source}
    stack = [iter(list(source.residual.items()))]

    while stack:
        advanced = False
        for v, res in stack[-1]:
            if v in visited or res.get_capacity() <= 0:
                continue
            visited.add(v)
            path.append(v)
            if v is sink:
                return path
            stack.append(iter(list(v.residual.items())))
            advanced = True
            break

        if not advanced:
            # dead end: backtrack
            stack.pop()
            path.pop()

    return None


def find_path_bfs(
    source: Optional[Vertex],
    sink: Optional[Vertex],
) -> Optional[List[Vertex]]:
    """
    Shortest augmenting path (Edmonds-Karp). Same contract as find_path_dfs.
    """
    if _trivial(source, sink):
        return None

    prev: Dict[Vertex, Optional[Vertex]] = {source: None}
    queue = deque([source])

    while queue and sink not in prev:
        u = queue.popleft()
        for v, res in u.residual.items():
            if res.get_capacity() > 0 and v not in prev:
                prev[v] = u
                queue.append(v)
                if v is sink:
                    break

    # Sink t not reachable
    if sink not in prev:
        return None

    # reconstruct the path
    path = []
    v = sink
    while v is not None:
        path.append(v)
        v = prev[v]
    path.reverse()

    return path


SEARCH_STRATEGIES: Dict[str, Callable[[Optional[Vertex], Optional[Vertex]], Optional[List[Vertex]]]] = {
    "dfs": find_path_dfs,
    "bfs": find_path_bfs,
}
