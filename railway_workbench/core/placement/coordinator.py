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
Placement Coordinator
=====================

Runs one interactive placement session: the user drags a model over the
layout, sees a snapped preview, then commits or cancels.

States:
    IDLE --start_placement--> PLACING
    PLACING --commit (valid preview)--> COMMITTED
    PLACING --cancel--> CANCELLED
    COMMITTED / CANCELLED --reset or start_placement--> IDLE / PLACING

Each preview combines the track segment under the query point (graph or
rail meshes, whichever is available) with the model's bounds, giving one
immutable PlacementResult.

Example:
    >>> coordinator = PlacementCoordinator(graph)
    >>> coordinator.start_placement(bounds, scale=0.12)
    True
    >>> preview = coordinator.update(Vector3(0.01, 0.0, 0.5))
    >>> result = coordinator.commit()
    >>> result.committed
    True
"""

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

from ..config import PlacementConfig
from ..logging_config import get_logger
from ..track.graph import TrackGraph
from ..track.locator import NearestEdgeLocator, TrackSegmentInfo
from ..vector import Vector3
from .bounds import ModelBounds
from .orientation import (
    ForwardAxis,
    GraphSegmentSource,
    MeshSegmentSource,
    OrientationStrategy,
    RailPair,
    is_valid_distance,
    resolve_yaw,
    select_strategy,
)
from .vertical import align_to_surface

logger = get_logger(__name__)


class PlacementState(Enum):
    """Lifecycle of a placement session."""
    IDLE = "idle"
    PLACING = "placing"
    COMMITTED = "committed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class PlacementResult:
    """
    Where and how a model sits on the track.

    Attributes:
        position: Model origin in layout space
        yaw: Rotation about the vertical axis (radians)
        is_valid: True when the query point was within snap distance
        edge_id: Edge the model sits on (None for mesh-based placement)
        t: Parameter along that edge (None for mesh-based placement)
        segment: Track segment the result was built from
        strategy: Segment source used
        committed: False for previews
    """
    position: Vector3
    yaw: float
    is_valid: bool
    edge_id: Optional[str]
    t: Optional[float]
    segment: TrackSegmentInfo
    strategy: OrientationStrategy
    committed: bool = False

    @property
    def yaw_degrees(self) -> float:
        return math.degrees(self.yaw)


class PlacementCoordinator:
    """
    State machine for placing one model at a time.

    Args:
        graph: Track network; None (or a graph without edges) places
            against rail meshes instead
        config: Placement configuration
    """

    def __init__(self, graph: Optional[TrackGraph] = None,
                 config: Optional[PlacementConfig] = None):
        self.config = config or PlacementConfig()
        self.graph = graph
        self.strategy = select_strategy(graph)

        self._locator = None
        if graph is not None:
            self._locator = NearestEdgeLocator(
                graph,
                samples_per_edge=self.config.samples_per_edge,
                refine_iterations=self.config.refine_iterations,
            )
        if graph is not None and self.strategy == OrientationStrategy.MESH_BASED:
            logger.warning("Track graph has no edges; placing against rail meshes")

        self._state = PlacementState.IDLE
        self._bounds: Optional[ModelBounds] = None
        self._scale = 1.0
        self._forward_axis: Union[ForwardAxis, str] = self.config.default_forward_axis
        self._preview: Optional[PlacementResult] = None

    @property
    def state(self) -> PlacementState:
        return self._state

    @property
    def preview(self) -> Optional[PlacementResult]:
        """Latest uncommitted result of this session."""
        return self._preview

    @property
    def is_placing(self) -> bool:
        return self._state == PlacementState.PLACING

    def start_placement(self, bounds: Optional[ModelBounds] = None, scale: float = 1.0,
                        forward_axis: Union[ForwardAxis, str, None] = None) -> bool:
        """
        Begin a placement session.

        Args:
            bounds: Unscaled bounds of the model being placed
            scale: Uniform scale the model is shown at
            forward_axis: Model's forward axis (defaults to configuration)

        Returns:
            True if a session started, False if one is already running

        Raises:
            ValueError: If scale is not positive
        """
        if self._state == PlacementState.PLACING:
            logger.info("Placement already in progress; ignoring start")
            return False
        if scale <= 0:
            raise ValueError(f"Scale must be positive, got {scale}")

        if self._state != PlacementState.IDLE:
            self.reset()

        self._bounds = bounds
        self._scale = scale
        self._forward_axis = forward_axis or self.config.default_forward_axis
        self._preview = None
        self._state = PlacementState.PLACING

        if bounds is None or bounds.is_degenerate:
            logger.warning("No model bounds; model origin will sit on rail top")
        logger.info("Placement started (%s)", self.strategy.value)
        return True

    def try_compute_placement(self, query_point: Vector3, rails: Optional[RailPair] = None,
                              heading: Optional[float] = None) -> Optional[PlacementResult]:
        """
        Compute a placement without changing session state.

        Args:
            query_point: Point under the cursor (Y ignored)
            rails: Rail centers of the track piece under the cursor
                (mesh-based placement only)
            heading: Yaw of that track piece, used when rails are missing

        Returns:
            Uncommitted PlacementResult, or None if no track was found
        """
        segment = self._segment_source(rails, heading).find_segment(query_point)
        if segment is None:
            logger.debug("No track segment near (%.3f, %.3f)", query_point.x, query_point.z)
            return None

        yaw = resolve_yaw(segment.forward, self._forward_axis, self.config.forward_axis_offsets)
        position = Vector3(segment.position.x, self._origin_y(), segment.position.z)

        result = PlacementResult(
            position=position,
            yaw=yaw,
            is_valid=is_valid_distance(segment.distance, self.config.max_snap_distance),
            edge_id=segment.edge_id,
            t=segment.t,
            segment=segment,
            strategy=self.strategy,
        )
        logger.debug(
            "Preview: %s t=%s yaw=%.1f deg distance=%.4f valid=%s",
            result.edge_id, result.t, result.yaw_degrees, segment.distance, result.is_valid
        )
        return result

    def update(self, query_point: Vector3, rails: Optional[RailPair] = None,
               heading: Optional[float] = None) -> Optional[PlacementResult]:
        """
        Refresh the session preview for a new cursor position.

        Returns:
            The new preview, or None when not placing or no track was found
        """
        if self._state != PlacementState.PLACING:
            logger.debug("Update ignored in state %s", self._state.value)
            return None

        self._preview = self.try_compute_placement(query_point, rails, heading)
        return self._preview

    def commit(self) -> Optional[PlacementResult]:
        """
        Accept the current preview.

        Returns:
            The committed result, or None (state unchanged) when there is
            no valid preview
        """
        if self._state != PlacementState.PLACING:
            logger.info("Commit ignored in state %s", self._state.value)
            return None
        if self._preview is None or not self._preview.is_valid:
            logger.info("Commit rejected: model is not over track")
            return None

        result = replace(self._preview, committed=True)
        self._state = PlacementState.COMMITTED
        logger.info(
            "Placement committed on %s at (%.4f, %.4f, %.4f)",
            result.edge_id or "rail meshes",
            result.position.x, result.position.y, result.position.z
        )
        return result

    def cancel(self) -> None:
        """Abandon the session."""
        if self._state != PlacementState.PLACING:
            logger.debug("Cancel ignored in state %s", self._state.value)
            return None
        self._preview = None
        self._state = PlacementState.CANCELLED
        logger.info("Placement cancelled")
        return None

    def reset(self) -> None:
        """Return to IDLE and forget the session."""
        self._state = PlacementState.IDLE
        self._bounds = None
        self._scale = 1.0
        self._forward_axis = self.config.default_forward_axis
        self._preview = None

    def _segment_source(self, rails: Optional[RailPair], heading: Optional[float]):
        if self.strategy == OrientationStrategy.GRAPH_BASED:
            return GraphSegmentSource(self._locator)
        return MeshSegmentSource(rails=rails, fallback_heading=heading)

    def _origin_y(self) -> float:
        if self._bounds is None or self._bounds.is_degenerate:
            return self.config.rail_top_y + self.config.height_offset
        return align_to_surface(
            self._bounds, self._scale, self.config.rail_top_y, self.config.height_offset
        )


__all__ = [
    "PlacementState",
    "PlacementResult",
    "PlacementCoordinator",
]
