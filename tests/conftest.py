import pytest

from flow_graph import FlowGraph


def build_graph(n, edges, s=0, t=None, strategy="dfs"):
    """
    FlowGraph with vertices 0..n-1 and arcs (u, v, capacity).
    Returns the graph and its vertices by index.
    """
    G = FlowGraph(strategy=strategy)
    vertices = [G.add_vertex(str(i)) for i in range(n)]
    for u, v, cap in edges:
        vertices[u].add_edge(vertices[v], cap)
    G.set_source(vertices[s])
    G.set_sink(vertices[n - 1 if t is None else t])
    return G, vertices


# S=0 S1=1 S2=2 A=3 B=4 C=5 D=6 E=7 T=8
CLASSIC_EDGES = [
    (0, 1, 100),
    (0, 2, 100),
    (1, 4, 7),
    (1, 3, 5),
    (2, 3, 7),
    (4, 6, 10),
    (4, 5, 5),
    (3, 5, 19),
    (5, 7, 27),
    (6, 8, 12),
    (7, 8, 15),
]


@pytest.fixture(params=["dfs", "bfs"])
def strategy(request):
    return request.param


@pytest.fixture
def classic(strategy):
    return build_graph(9, CLASSIC_EDGES, strategy=strategy)
