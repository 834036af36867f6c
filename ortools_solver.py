import numpy as np
from ortools.graph.python import max_flow

from flow_graph import FlowGraph


def ortools_max_flow(graph: FlowGraph) -> int:
    """
    Max flow value of `graph` computed by OR-Tools, for cross-checking.
    The graph itself is not modified.
    """
    s, t = graph.get_source(), graph.get_sink()
    if s is None or t is None or s is t:
        return 0

    edges = graph.edges()
    # dense node ids for the solver
    index = {}
    for u, v, _ in edges:
        index.setdefault(u, len(index))
        index.setdefault(v, len(index))
    if s not in index or t not in index:
        return 0

    # Instantiate a SimpleMaxFlow solver.
    smf = max_flow.SimpleMaxFlow()

    # Define three parallel arrays: from-node, to-node, capacities.
    start_nodes = np.array([index[u] for u, _, _ in edges])
    end_nodes = np.array([index[v] for _, v, _ in edges])
    capacities = np.array([e.get_capacity() for _, _, e in edges])

    smf.add_arcs_with_capacity(start_nodes, end_nodes, capacities)

    status = smf.solve(index[s], index[t])
    if status != smf.OPTIMAL:
        raise RuntimeError(f"There was an issue with the max flow input. Status: {status}")

    return int(smf.optimal_flow())
