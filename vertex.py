import itertools
from typing import Dict, Optional, Set

from edge import Edge


class Vertex:
    """
    Node of a flow network.

    `neighbours` holds the real network arcs, `residual` the arcs of the
    current residual graph. Both are keyed by the successor vertex itself,
    so vertices compare and hash by identity.
    """

    # shared by every graph in the process
    _ids = itertools.count()

    def __init__(self, name: str = "") -> None:
        self.id = next(Vertex._ids)
        self.label = f"{self.id} - {name}"
        self.neighbours: Dict["Vertex", Edge] = {}
        self.residual: Dict["Vertex", Edge] = {}

    # ------------------------------------------------------------------ build

    def add_single(self, to: "Vertex") -> Edge:
        return self.add_edge(to, 1)

    def add_edge(self, to: "Vertex", capacity: int) -> Edge:
        """
        Add (or replace) the real arc self -> to.
        """
        self.neighbours[to] = Edge(capacity)
        return self.neighbours[to]

    def add_res_edge(self, to: "Vertex", capacity: int) -> Edge:
        self.residual[to] = Edge(capacity)
        return self.residual[to]

    # ------------------------------------------------------------------ lookup

    def has_successor(self, v: "Vertex") -> bool:
        return v in self.neighbours

    def get_successors(self) -> Set["Vertex"]:
        return set(self.neighbours)

    def get_res_successors(self) -> Set["Vertex"]:
        return set(self.residual)

    def get_edge(self, to: "Vertex") -> Optional[Edge]:
        return self.neighbours.get(to)

    def get_res_edge(self, to: "Vertex") -> Optional[Edge]:
        return self.residual.get(to)

    def require_edge(self, to: "Vertex") -> Edge:
        edge = self.neighbours.get(to)
        if edge is None:
            raise KeyError(f"no such edge: {self.label} -> {to.label}")
        return edge

    def require_res_edge(self, to: "Vertex") -> Edge:
        edge = self.residual.get(to)
        if edge is None:
            raise KeyError(f"no such residual edge: {self.label} -> {to.label}")
        return edge

    # ------------------------------------------------------------------ dunder

    def __str__(self) -> str:
        arcs = ", ".join(
            f"{v.label} - {e}" for v, e in self.neighbours.items()
        )
        return "{ " + self.label + " : " + arcs + " }"

    def __repr__(self) -> str:
        return f"Vertex({self.label!r})"
