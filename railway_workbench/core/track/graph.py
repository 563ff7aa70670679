# ==============================================================================
# Railway Workbench - Model Railway Tools for Blender
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
#
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
# You should have received a copy of the GNU General Public License along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# Primary Author: Michael Yoder
# Company: Desert Springs Civil Engineering PLLC
# ==============================================================================

"""
Track Graph
===========

Nodes are track joints with a world position. Edges connect two nodes with
either a straight or a circular arc. The graph is authored elsewhere and is
read-only to the placement engine.

Example:
    >>> graph = TrackGraph.from_dict({
    ...     "nodes": [
    ...         {"id": "A", "position": [0, 0, 0]},
    ...         {"id": "B", "position": [0, 0, 1]},
    ...     ],
    ...     "edges": [
    ...         {"id": "E1", "from": "A", "to": "B", "curve": {"type": "straight"}},
    ...     ],
    ... })
    >>> graph.edge_count
    1
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from ..exceptions import InvalidEdgeError
from ..logging_config import get_logger
from ..vector import Vector3

logger = get_logger(__name__)


class CurveType(Enum):
    """Geometry type of a track edge."""
    STRAIGHT = "straight"
    ARC = "arc"


@dataclass(frozen=True)
class CurveDefinition:
    """
    Geometry of a track edge between its two nodes.

    Attributes:
        curve_type: STRAIGHT or ARC
        radius: Arc radius in metres (ARC only)
        sweep_angle_deg: Angle swept by the arc in degrees (ARC only)
        direction: +1 turns left, -1 turns right (ARC only)
    """
    curve_type: CurveType = CurveType.STRAIGHT
    radius: float = 0.0
    sweep_angle_deg: float = 0.0
    direction: int = 1

    @classmethod
    def straight(cls) -> 'CurveDefinition':
        return cls(CurveType.STRAIGHT)

    @classmethod
    def arc(cls, radius: float, sweep_angle_deg: float, direction: int = 1) -> 'CurveDefinition':
        """
        Create an arc definition.

        Args:
            radius: Arc radius (m)
            sweep_angle_deg: Swept angle (degrees)
            direction: +1 (left) or -1 (right)
        """
        return cls(CurveType.ARC, float(radius), float(sweep_angle_deg), 1 if direction >= 0 else -1)

    @property
    def is_arc(self) -> bool:
        """True for a usable arc. Zero radius or sweep degrades to straight."""
        return (
            self.curve_type == CurveType.ARC
            and self.radius > 0
            and self.sweep_angle_deg != 0
        )

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> 'CurveDefinition':
        """Deserialize from {"type": "arc", "radius": ..., "sweep_angle_deg": ..., "direction": ...}."""
        if not data or data.get('type', 'straight') == 'straight':
            return cls.straight()
        return cls.arc(
            radius=data.get('radius', 0.0),
            sweep_angle_deg=data.get('sweep_angle_deg', 0.0),
            direction=data.get('direction', 1),
        )


@dataclass(frozen=True)
class GraphNode:
    """A track joint."""
    id: str
    position: Vector3


@dataclass(frozen=True)
class GraphEdge:
    """A track piece joining two nodes."""
    id: str
    from_node_id: str
    to_node_id: str
    curve: CurveDefinition = field(default_factory=CurveDefinition.straight)


class TrackGraph:
    """
    Read-only track network.

    Args:
        nodes: Graph nodes
        edges: Graph edges; every endpoint must name an existing node

    Raises:
        InvalidEdgeError: If an edge references a missing node or an edge
            id is used twice
    """

    def __init__(self, nodes: Iterable[GraphNode] = (), edges: Iterable[GraphEdge] = ()):
        self._nodes: Dict[str, GraphNode] = {node.id: node for node in nodes}
        self._edges: Dict[str, GraphEdge] = {}

        for edge in edges:
            if edge.id in self._edges:
                raise InvalidEdgeError(edge.id, "duplicate edge id")
            for node_id in (edge.from_node_id, edge.to_node_id):
                if node_id not in self._nodes:
                    raise InvalidEdgeError(edge.id, f"references missing node '{node_id}'")
            self._edges[edge.id] = edge

        logger.debug(
            "Track graph built: %d nodes, %d edges",
            len(self._nodes), len(self._edges)
        )

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def get_node(self, node_id: str) -> Optional[GraphNode]:
        return self._nodes.get(node_id)

    def get_edge(self, edge_id: str) -> Optional[GraphEdge]:
        return self._edges.get(edge_id)

    def get_all_edges(self) -> List[GraphEdge]:
        """All edges in insertion order."""
        return list(self._edges.values())

    def get_edge_endpoints(self, edge: GraphEdge) -> Tuple[Vector3, Vector3]:
        """
        World positions of an edge's start and end nodes.

        Returns:
            (start, end) positions
        """
        return (
            self._nodes[edge.from_node_id].position,
            self._nodes[edge.to_node_id].position,
        )

    @classmethod
    def from_dict(cls, data: dict) -> 'TrackGraph':
        """
        Build a graph from plain data.

        Args:
            data: {"nodes": [{"id", "position"}], "edges": [{"id", "from", "to", "curve"}]}

        Raises:
            InvalidEdgeError: As for the constructor
        """
        nodes = [
            GraphNode(id=n['id'], position=Vector3(n['position']))
            for n in data.get('nodes', [])
        ]
        edges = [
            GraphEdge(
                id=e['id'],
                from_node_id=e['from'],
                to_node_id=e['to'],
                curve=CurveDefinition.from_dict(e.get('curve')),
            )
            for e in data.get('edges', [])
        ]
        return cls(nodes, edges)


__all__ = [
    "CurveType",
    "CurveDefinition",
    "GraphNode",
    "GraphEdge",
    "TrackGraph",
]
