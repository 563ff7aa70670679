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
Orientation Resolver
====================

Turns a track tangent into a model yaw, and decides where on the track a
query point lands.

Yaw convention:
    Yaw is a rotation about the vertical axis, measured from +Z toward +X,
    so a tangent along +Z has track angle 0 and one along +X has track
    angle pi/2. A model's authored forward axis adds a fixed offset:

        POS_Z   0        NEG_Z   pi
        POS_X  -pi/2     NEG_X   pi/2
        POS_Y   0        NEG_Y   pi   (Y treated as Z)

    Results are normalized into (-pi, pi].

Segment sources:
    GRAPH_BASED  - nearest point on the track graph (primary)
    MESH_BASED   - centerline between two rail meshes, or a track piece's
                   own heading when its rails cannot be found
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Dict, Optional, Union

from ..constants import (
    FORWARD_AXIS_ASPECT_RATIO,
    FORWARD_AXIS_OFFSETS,
    MAX_SNAP_DISTANCE_M,
)
from ..logging_config import get_logger
from ..track.graph import TrackGraph
from ..track.locator import NearestEdgeLocator, TrackSegmentInfo
from ..vector import EPSILON, Vector3

if TYPE_CHECKING:
    from .bounds import ModelBounds

logger = get_logger(__name__)


class ForwardAxis(Enum):
    """Local axis a model's nose points along."""
    POS_X = "POS_X"
    NEG_X = "NEG_X"
    POS_Y = "POS_Y"
    NEG_Y = "NEG_Y"
    POS_Z = "POS_Z"
    NEG_Z = "NEG_Z"


class OrientationStrategy(Enum):
    """Where track segment data comes from."""
    GRAPH_BASED = "graph_based"
    MESH_BASED = "mesh_based"


def normalize_angle(angle: float) -> float:
    """Wrap an angle into (-pi, pi]."""
    wrapped = math.fmod(angle + math.pi, 2 * math.pi)
    if wrapped <= 0:
        wrapped += 2 * math.pi
    return wrapped - math.pi


def track_angle(tangent: Vector3) -> float:
    """Yaw of a horizontal tangent, measured from +Z toward +X."""
    return math.atan2(tangent.x, tangent.z)


def forward_axis_offset(forward_axis: Union[ForwardAxis, str],
                        offsets: Optional[Dict[str, float]] = None) -> float:
    """
    Yaw offset for a forward axis.

    Args:
        forward_axis: ForwardAxis or its name
        offsets: Offset table override (defaults to the OO table)
    """
    name = forward_axis.value if isinstance(forward_axis, ForwardAxis) else str(forward_axis)
    table = FORWARD_AXIS_OFFSETS if offsets is None else offsets
    return table.get(name, 0.0)


def resolve_yaw(tangent: Vector3, forward_axis: Union[ForwardAxis, str],
                offsets: Optional[Dict[str, float]] = None) -> float:
    """
    Yaw that aligns a model's forward axis with a track tangent.

    Args:
        tangent: Unit horizontal track direction
        forward_axis: Model's authored forward axis
        offsets: Offset table override

    Returns:
        Yaw in radians, in (-pi, pi]

    Example:
        >>> resolve_yaw(Vector3(0, 0, 1), ForwardAxis.NEG_Z)
        3.141592653589793
    """
    return normalize_angle(track_angle(tangent) + forward_axis_offset(forward_axis, offsets))


def is_valid_distance(distance: float, max_snap_distance: float = MAX_SNAP_DISTANCE_M) -> bool:
    """Check whether a placement is close enough to snap."""
    return distance <= max_snap_distance


def detect_forward_axis(bounds: "ModelBounds") -> ForwardAxis:
    """
    Guess a model's forward axis from its proportions.

    Rolling stock is much longer than it is wide. A model clearly longer
    along X is taken to face -X; anything else falls back to -Z.
    """
    if bounds.is_degenerate:
        return ForwardAxis.NEG_Z
    if bounds.width > bounds.depth * FORWARD_AXIS_ASPECT_RATIO:
        return ForwardAxis.NEG_X
    return ForwardAxis.NEG_Z


# =============================================================================
# Segment Sources
# =============================================================================

@dataclass(frozen=True)
class RailPair:
    """
    World centers of the two rail meshes of a track piece.

    Attributes:
        left: Center of the left rail
        right: Center of the right rail
    """
    left: Vector3
    right: Vector3

    @property
    def centerline(self) -> Vector3:
        """Midpoint between the rails, at the higher rail's height."""
        return Vector3(
            (self.left.x + self.right.x) / 2.0,
            max(self.left.y, self.right.y),
            (self.left.z + self.right.z) / 2.0,
        )

    @property
    def right_vector(self) -> Vector3:
        """Unit horizontal vector from the left rail to the right rail."""
        return (self.right - self.left).horizontal().normalized()


class GraphSegmentSource:
    """Segments from the nearest point on a track graph."""

    strategy = OrientationStrategy.GRAPH_BASED

    def __init__(self, locator: NearestEdgeLocator):
        self.locator = locator

    def find_segment(self, point: Vector3) -> Optional[TrackSegmentInfo]:
        return self.locator.find_nearest(point)


class MeshSegmentSource:
    """
    Segments derived from a track piece's meshes.

    Args:
        rails: Rail centers of the piece, if they could be identified
        fallback_heading: Yaw of the piece itself, used without rails
        fallback_position: Origin of the piece, used without rails
    """

    strategy = OrientationStrategy.MESH_BASED

    def __init__(self, rails: Optional[RailPair] = None,
                 fallback_heading: Optional[float] = None,
                 fallback_position: Optional[Vector3] = None):
        self.rails = rails
        self.fallback_heading = fallback_heading
        self.fallback_position = fallback_position

    def find_segment(self, point: Vector3) -> Optional[TrackSegmentInfo]:
        if self.rails is not None:
            right = self.rails.right_vector
            if right.length > EPSILON:
                centerline = self.rails.centerline
                forward = Vector3(-right.z, 0.0, right.x)
                return TrackSegmentInfo(
                    position=centerline,
                    forward=forward,
                    right=right,
                    edge_id=None,
                    t=None,
                    distance=point.horizontal_distance_to(centerline),
                )
            logger.warning("Rail meshes coincide; using track heading")

        if self.fallback_heading is None:
            return None

        forward = Vector3(math.sin(self.fallback_heading), 0.0, math.cos(self.fallback_heading))
        position = self.fallback_position if self.fallback_position is not None else point
        return TrackSegmentInfo.from_forward(position=position, forward=forward, distance=0.0)


def select_strategy(graph: Optional[TrackGraph]) -> OrientationStrategy:
    """Use the graph when it has track, otherwise fall back to meshes."""
    if graph is not None and graph.edge_count > 0:
        return OrientationStrategy.GRAPH_BASED
    return OrientationStrategy.MESH_BASED


__all__ = [
    "ForwardAxis",
    "OrientationStrategy",
    "normalize_angle",
    "track_angle",
    "forward_axis_offset",
    "resolve_yaw",
    "is_valid_distance",
    "detect_forward_axis",
    "RailPair",
    "GraphSegmentSource",
    "MeshSegmentSource",
    "select_strategy",
]
