"""Graphs of cooperating agents and their composite scores."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from uuid import UUID

from .agent import AgentFile


@dataclass
class AgentNode:
    """An agent in a multi-agent graph, labelled with its role."""

    id: str
    role: str
    agent: AgentFile


@dataclass
class GraphEdge:
    """A directed edge: output of ``source`` feeds the input of ``target``."""

    source: str
    target: str
    output_field: str | None = None
    input_key: str | None = None


@dataclass
class AgentGraph:
    """A directed acyclic graph of agents."""

    id: UUID
    name: str
    description: str | None = None
    nodes: list[AgentNode] = field(default_factory=list)
    edges: list[GraphEdge] = field(default_factory=list)

    def topological_order(self) -> list[AgentNode]:
        """Return the nodes in topological order; raise ValueError on a cycle."""
        in_degree: dict[str, int] = {}
        adjacency: dict[str, list[str]] = {}

        for node in self.nodes:
            in_degree.setdefault(node.id, 0)
            adjacency.setdefault(node.id, [])

        for edge in self.edges:
            in_degree[edge.target] = in_degree.get(edge.target, 0) + 1
            adjacency.setdefault(edge.source, []).append(edge.target)

        queue = deque(node_id for node_id, degree in in_degree.items() if degree == 0)
        node_by_id = {node.id: node for node in self.nodes}

        ordered: list[AgentNode] = []
        while queue:
            node_id = queue.popleft()
            node = node_by_id.get(node_id)
            if node is not None:
                ordered.append(node)
            for neighbour in adjacency.get(node_id, ()):
                in_degree[neighbour] -= 1
                if in_degree[neighbour] == 0:
                    queue.append(neighbour)

        if len(ordered) != len(self.nodes):
            raise ValueError("AgentGraph contains a cycle")
        return ordered


@dataclass
class MultiAgentScorecard:
    """Composite scoring result of a multi-agent graph run."""

    graph_id: UUID
    node_scores: dict[str, float] = field(default_factory=dict)
    composite_score: float = 0.0
    pass_rate: float = 0.0