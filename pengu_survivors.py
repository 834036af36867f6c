from typing import List, Sequence, Tuple

import numpy as np

from flow_graph import FlowGraph
from vertex import Vertex


def _friendship_pairs(friendships) -> np.ndarray:
    pairs = np.asarray(friendships)
    if pairs.size == 0:
        return pairs.astype(int).reshape(0, 2)
    if pairs.dtype.kind not in ("i", "u"):
        raise ValueError(f"friendship indices must be integers, got dtype {pairs.dtype}")
    if pairs.ndim != 2 or pairs.shape[1] != 2:
        raise ValueError(
            f"friendships must be (workaholic, procrastinator) index pairs, got shape {pairs.shape}"
        )
    return pairs


def _lookup(vertices: List[Vertex], index: int, group: str) -> Vertex:
    # negative indices are caller errors too, no wrap-around
    if not 0 <= index < len(vertices):
        raise IndexError(f"{group} index {index} out of range for {len(vertices)} {group}s")
    return vertices[index]


def build_matching(
    workaholics: Sequence,
    procrastinators: Sequence,
    friendships,
    strategy: str = "dfs",
    verbose: bool = False,
) -> Tuple[FlowGraph, List[Vertex], List[Vertex]]:
    matching = FlowGraph(strategy=strategy, verbose=verbose)
    s = matching.add_vertex()
    t = matching.add_vertex()
    matching.set_source(s)
    matching.set_sink(t)

    workaholic_vertices = []
    for w in workaholics:
        workaholic = matching.add_vertex(f"workaholic{w}")
        s.add_single(workaholic)
        workaholic_vertices.append(workaholic)

    procrastinator_vertices = []
    for p in procrastinators:
        procrastinator = matching.add_vertex(f"procrastinator{p}")
        procrastinator.add_single(t)
        procrastinator_vertices.append(procrastinator)

    for w_idx, p_idx in _friendship_pairs(friendships):
        work = _lookup(workaholic_vertices, int(w_idx), "workaholic")
        pro = _lookup(procrastinator_vertices, int(p_idx), "procrastinator")
        work.add_single(pro)

    return matching, workaholic_vertices, procrastinator_vertices


def generate_model(
    workaholics: Sequence,
    procrastinators: Sequence,
    friendships,
) -> FlowGraph:
    """
    Model for matching workaholics to procrastinators as a unit-capacity
    flow network: source -> workaholic -> procrastinator -> sink.

    Args:
        workaholics: names/ids of the workaholic penguins
        procrastinators: names/ids of the procrastinating penguins
        friendships: (workaholic index, procrastinator index) pairs, indices
            into the two lists above

    Raises:
        IndexError: a friendship index is out of range
        ValueError: friendships is not a list of pairs
    """
    matching, _, _ = build_matching(workaholics, procrastinators, friendships)
    return matching


def max_matching(
    workaholics: Sequence,
    procrastinators: Sequence,
    friendships,
    strategy: str = "dfs",
) -> List[Tuple]:
    """
    Maximum matching as (workaholic id, procrastinator id) pairs.
    """
    matching, workaholic_vertices, procrastinator_vertices = build_matching(
        workaholics, procrastinators, friendships, strategy
    )
    matching.compute_max_flow()
    return matched_pairs(
        workaholics, procrastinators, workaholic_vertices, procrastinator_vertices
    )


def matched_pairs(
    workaholics: Sequence,
    procrastinators: Sequence,
    workaholic_vertices: List[Vertex],
    procrastinator_vertices: List[Vertex],
) -> List[Tuple]:
    """
    Read the (workaholic id, procrastinator id) pairs carrying flow.
    """
    pairs = []
    for w, work in zip(workaholics, workaholic_vertices):
        for p, pro in zip(procrastinators, procrastinator_vertices):
            edge = work.get_edge(pro)
            if edge is not None and edge.get_flow() > 0:
                pairs.append((w, p))
    return pairs
