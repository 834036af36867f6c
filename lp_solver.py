from typing import Any, Dict, Optional

import pulp as pl
from pulp import LpMaximize, LpProblem, LpStatus, LpVariable, lpSum

from flow_graph import FlowGraph


class MaxFlowLP:
    """
    Solves the max flow of a FlowGraph as a linear program.

    Attributes:
        graph (FlowGraph): network with capacities, source and sink set
        problem (LpProblem): The linear programming problem
        flow_vars (Dict[tuple, LpVariable]): Flow variables for each edge
    """

    def __init__(self, graph: FlowGraph) -> None:
        self.graph = graph
        self.problem = LpProblem("Max_Flow", LpMaximize)
        self.flow_vars: Dict[tuple, LpVariable] = {}
        self._solution: Optional[Dict[str, Any]] = None

    def build_model(self) -> None:
        if self.flow_vars:
            return
        self._add_flow_vars()
        self._add_objective()
        self._add_flow_conservation_constraints()

    def _add_flow_vars(self) -> None:
        """
        One variable per real arc, bounded by its capacity: 0 <= f <= c.
        """
        for u, v, edge in self.graph.edges():
            var = LpVariable(f"f_{u.id}_{v.id}", lowBound=0, upBound=edge.get_capacity())
            self.flow_vars[(u, v)] = var

    def _add_objective(self) -> None:
        """
        Objective: net flow leaving the source.
        """
        s = self.graph.get_source()
        self.problem += (
            lpSum(var for (u, _), var in self.flow_vars.items() if u is s)
            - lpSum(var for (_, v), var in self.flow_vars.items() if v is s)
        )

    def _add_flow_conservation_constraints(self) -> None:
        s, t = self.graph.get_source(), self.graph.get_sink()
        for node in self.graph.get_vertices():
            if node is s or node is t:
                continue
            inflow = lpSum(var for (u, v), var in self.flow_vars.items() if v is node)
            outflow = lpSum(var for (u, v), var in self.flow_vars.items() if u is node)
            self.problem += (inflow - outflow == 0)

    def solve(self) -> Dict[str, Any]:
        """
        Solve the optimization problem.

        Returns:
            Dict containing:
                - status: Solution status
                - objective_value: Optimal max flow value
                - flows: Dictionary of edge flows keyed by (from label, to label)
        Raises:
            RuntimeError: If model hasn't been built
        """
        if not self.flow_vars:
            raise RuntimeError("Model must be built before solving")

        status = self.problem.solve(pl.PULP_CBC_CMD(msg=False))

        if status != 1:
            print(f"Solver status: {LpStatus[status]}")
            self._solution = {
                'status': LpStatus[status],
                'objective_value': None,
                'flows': None
            }
            return self._solution

        self._solution = {
            'status': 'Optimal',
            'objective_value': self.problem.objective.value(),
            'flows': {
                (u.label, v.label): var.value()
                for (u, v), var in self.flow_vars.items()
            }
        }
        return self._solution
