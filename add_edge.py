from edge import Edge
from vertex import Vertex

def add_residual_edges(u: Vertex, v: Vertex, edge: Edge) -> None:
    """
    Add the forward (c - f) & backward (f) residual arcs of the real arc u -> v.
    Contributions landing on an existing residual arc are summed.
    """
    _add_residual_capacity(u, v, edge.get_capacity() - edge.get_flow())
    _add_residual_capacity(v, u, edge.get_flow())


def _add_residual_capacity(u: Vertex, v: Vertex, capacity: int) -> None:
    res = u.get_res_edge(v)
    if res is None:
        u.add_res_edge(v, capacity)
    else:
        res.set_c(res.get_capacity() + capacity)


def residual_capacity(u: Vertex, v: Vertex) -> int:
    """
    Residual capacity of u -> v computed straight from the real arcs:
    room left on u -> v plus the flow on v -> u that can be cancelled.
    """
    cap = 0
    forward = u.get_edge(v)
    if forward is not None:
        cap += forward.remaining_capacity()
    backward = v.get_edge(u)
    if backward is not None:
        cap += backward.get_flow()
    return cap
