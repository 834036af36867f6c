class Edge:
    """
    One directed arc of a flow network, or one arc of its residual graph.
    Residual arcs only use `capacity`; their `flow` stays 0.
    """

    __slots__ = (
        "c",   # capacity
        "f",   # flow
    )

    def __init__(self, c: int = 0) -> None:
        if c < 0:
            raise ValueError(f"capacity must be non-negative, got {c}")
        self.c = c
        self.f = 0

    # ------------------------------------------------------------------ accessors

    def set_c(self, c: int) -> None:
        self.c = c

    def set_f(self, f: int) -> None:
        self.f = f

    def get_capacity(self) -> int:
        return self.c

    def get_flow(self) -> int:
        return self.f

    # ------------------------------------------------------------------ helpers

    def remaining_capacity(self) -> int:
        return self.c - self.f

    def augment(self, delta: int) -> None:
        """
        Push `delta` more units through this arc (negative cancels flow).
        """
        new_flow = self.f + delta
        if new_flow < 0 or new_flow > self.c:
            raise ValueError(
                f"flow {new_flow} out of bounds for capacity {self.c}"
            )
        self.f = new_flow

    # ------------------------------------------------------------------ dunder

    def __str__(self) -> str:
        return f"c = {self.c} f = {self.f}"

    def __repr__(self) -> str:
        return f"Edge(cap={self.c}, flow={self.f})"
