from typing import Dict, List, Optional, Set, Tuple

import networkx as nx
import pandas as pd

from add_edge import add_residual_edges, residual_capacity
from edge import Edge
from get_augmenting_path import SEARCH_STRATEGIES
from vertex import Vertex

DEFAULT_STRATEGY = "dfs"


class FlowGraph:
    """
    Flow network with a designated source and sink, solved by Ford-Fulkerson.

    Attributes:
        vertices (Set[Vertex]): every vertex created through add_vertex
        strategy (str): augmenting path search, "dfs" (first path found) or
            "bfs" (shortest path, Edmonds-Karp)
        verbose (bool): print every augmentation round
        rounds (int): augmentations performed by the last compute_max_flow
    """

    def __init__(self, strategy: str = DEFAULT_STRATEGY, verbose: bool = False) -> None:
        if strategy not in SEARCH_STRATEGIES:
            raise ValueError(
                f"unknown search strategy {strategy!r}, "
                f"expected one of {sorted(SEARCH_STRATEGIES)}"
            )
        self.vertices: Set[Vertex] = set()
        self.s: Optional[Vertex] = None
        self.t: Optional[Vertex] = None
        self.strategy = strategy
        self.verbose = verbose
        self.rounds = 0

    # ------------------------------------------------------------------ build

    def add_vertex(self, name: str = "") -> Vertex:
        """
        Adds a new Vertex to the graph and returns it.
        """
        v = Vertex(name)
        self.vertices.add(v)
        return v

    def get_vertices(self) -> Set[Vertex]:
        return self.vertices

    def get_source(self) -> Optional[Vertex]:
        return self.s

    def set_source(self, source: Optional[Vertex]) -> None:
        # caller makes sure `source` belongs to this graph
        self.s = source

    def get_sink(self) -> Optional[Vertex]:
        return self.t

    def set_sink(self, target: Optional[Vertex]) -> None:
        self.t = target

    def edges(self) -> List[Tuple[Vertex, Vertex, Edge]]:
        """
        All real arcs as (u, v, edge), ordered by vertex id.
        """
        result = []
        for u in sorted(self.vertices, key=lambda x: x.id):
            for v in sorted(u.neighbours, key=lambda x: x.id):
                result.append((u, v, u.neighbours[v]))
        return result

    # ------------------------------------------------------------------ max flow

    def compute_max_flow(self) -> None:
        """
        Augment along residual paths until none is left.
        Real arc flows are updated in place.
        """
        self.rounds = 0
        self.generate_residual_graph()
        while True:
            aug_path = self.find_path_in_residual()
            if aug_path is None:
                break
            aug_flow = self.calc_augmenting_flow(aug_path)
            self.update_network(aug_path, aug_flow)
            self.rounds += 1
            if self.verbose:
                print(
                    f"round {self.rounds}: +{aug_flow} along "
                    + " -> ".join(v.label for v in aug_path)
                )
            self.generate_residual_graph()

    def compute_max_flow_value(self) -> int:
        """
        Computes the max flow and returns its value (flow leaving the source).
        """
        self.compute_max_flow()
        if self.s is None:
            return 0
        return sum(e.get_flow() for e in self.s.neighbours.values())

    # ------------------------------------------------------------------ residual

    def clear_residual_graph(self) -> None:
        for v in self.vertices:
            v.residual.clear()

    def generate_residual_graph(self) -> None:
        """
        Rebuild every residual arc from the current real flows.
        """
        self.clear_residual_graph()
        for v in self.vertices:
            for neighbour, edge in v.neighbours.items():
                add_residual_edges(v, neighbour, edge)

    def find_path_in_residual(self) -> Optional[List[Vertex]]:
        """
        Returns an s-t path in the residual graph with positive capacities,
        None if no such path exists (or source/sink are unset or equal).
        """
        return SEARCH_STRATEGIES[self.strategy](self.s, self.t)

    def calc_augmenting_flow(self, path: List[Vertex]) -> int:
        """
        Bottleneck residual capacity along `path`; 0 for paths shorter than
        two vertices.
        """
        if len(path) < 2:
            return 0
        return min(
            first.require_res_edge(second).get_capacity()
            for first, second in zip(path, path[1:])
        )

    def update_network(self, path: List[Vertex], f: int) -> None:
        """
        Push `f` units along `path`. Each step fills the real arc v1 -> v2
        first and cancels flow on v2 -> v1 with the remainder, then patches
        the residual arcs of that pair.
        """
        for v1, v2 in zip(path, path[1:]):
            forward = v1.get_edge(v2)
            backward = v2.get_edge(v1)
            if forward is None and backward is None:
                raise KeyError(f"no such edge: {v1.label} -> {v2.label}")

            remaining = f
            if forward is not None:
                pushed = min(remaining, forward.remaining_capacity())
                forward.augment(pushed)
                remaining -= pushed
            if remaining:
                if backward is None:
                    raise ValueError(
                        f"cannot push {f} units over {v1.label} -> {v2.label}"
                    )
                backward.augment(-remaining)

            self._patch_residual(v1, v2)
            self._patch_residual(v2, v1)

    def _patch_residual(self, u: Vertex, v: Vertex) -> None:
        cap = residual_capacity(u, v)
        res = u.get_res_edge(v)
        if res is None:
            u.add_res_edge(v, cap)
        else:
            res.set_c(cap)

    # ------------------------------------------------------------------ analysis

    def min_cut(self) -> Tuple[Set[Vertex], List[Tuple[Vertex, Vertex]], int]:
        """
        Minimum s-t cut of the current flow. Meaningful after compute_max_flow.

        Returns:
            source_side: vertices reachable from the source in the residual graph
            cut_edges: real arcs leaving source_side
            capacity: total capacity of cut_edges
        """
        self.generate_residual_graph()
        source_side: Set[Vertex] = set()
        if self.s is not None:
            source_side.add(self.s)
            stack = [self.s]
            while stack:
                u = stack.pop()
                for v, res in u.residual.items():
                    if res.get_capacity() > 0 and v not in source_side:
                        source_side.add(v)
                        stack.append(v)

        cut_edges = [
            (u, v) for u, v, _ in self.edges()
            if u in source_side and v not in source_side
        ]
        capacity = sum(u.neighbours[v].get_capacity() for u, v in cut_edges)
        return source_side, cut_edges, capacity

    def is_valid_flow(self) -> bool:
        """
        Capacity bounds on every arc and conservation at every inner vertex.
        """
        balance: Dict[Vertex, int] = {v: 0 for v in self.vertices}
        for u, v, edge in self.edges():
            if not 0 <= edge.get_flow() <= edge.get_capacity():
                return False
            balance[u] = balance.get(u, 0) - edge.get_flow()
            balance[v] = balance.get(v, 0) + edge.get_flow()
        return all(
            b == 0 for v, b in balance.items() if v is not self.s and v is not self.t
        )

    def get_result_df(self) -> pd.DataFrame:
        """
        One row per real arc with columns: from, to, capacity, flow.
        """
        rows = [
            [u.label, v.label, e.get_capacity(), e.get_flow()]
            for u, v, e in self.edges()
        ]
        if not rows:
            raise RuntimeError("Flow graph has no edges")
        return pd.DataFrame(rows, columns=["from", "to", "capacity", "flow"])

    def to_networkx(self) -> nx.DiGraph:
        """
        Export as a DiGraph keyed by vertex label with capacity & flow on arcs.
        """
        G = nx.DiGraph()
        for v in self.vertices:
            G.add_node(v.label, id=v.id)
        for u, v, e in self.edges():
            G.add_edge(u.label, v.label, capacity=e.get_capacity(), flow=e.get_flow())
        return G

    def __str__(self) -> str:
        return "\n".join(str(v) for v in sorted(self.vertices, key=lambda x: x.id))
