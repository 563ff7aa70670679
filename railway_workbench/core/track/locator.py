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
Nearest-Edge Locator
====================

Finds the point on a track graph closest to a query point, measured in the
horizontal plane only. Every edge is sampled at a fixed number of
parametric steps; the cost is O(edges x samples), which is fine for
layout-sized graphs.

An optional bracketing pass narrows t around the best sample. It only ever
accepts a closer point, so refined results are never worse than sampled
ones.

Example:
    >>> locator = NearestEdgeLocator(graph)
    >>> info = locator.find_nearest(Vector3(0.0, 0.0, 0.5))
    >>> info.edge_id, round(info.t, 2)
    ('E1', 0.5)
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import numpy as np

from ..constants import ON_TRACK_TOLERANCE_M, SAMPLES_PER_EDGE
from ..logging_config import get_logger
from ..vector import Vector3
from .curve_geometry import CurveSample, sample_edge
from .graph import GraphEdge, TrackGraph

logger = get_logger(__name__)

# Refinement bracket half-width (in t) around the best sample
REFINE_BRACKET = 0.1


@dataclass(frozen=True)
class TrackSegmentInfo:
    """
    Where a query point lands on the track.

    Attributes:
        position: Closest centerline point
        forward: Unit horizontal tangent at that point
        right: Unit horizontal vector, up x forward
        edge_id: Edge the point lies on (None when derived from rail meshes)
        t: Parameter along the edge (None when derived from rail meshes)
        distance: Horizontal distance from the query to position
    """
    position: Vector3
    forward: Vector3
    right: Vector3
    edge_id: Optional[str]
    t: Optional[float]
    distance: float

    @classmethod
    def from_forward(cls, position: Vector3, forward: Vector3, distance: float,
                     edge_id: Optional[str] = None, t: Optional[float] = None) -> 'TrackSegmentInfo':
        """Build segment info, deriving the right vector from forward."""
        return cls(
            position=position,
            forward=forward,
            right=Vector3.up().cross(forward).normalized(),
            edge_id=edge_id,
            t=t,
            distance=distance,
        )


class NearestEdgeLocator:
    """
    Nearest point search over a track graph.

    Args:
        graph: Track network to search
        samples_per_edge: Subdivisions per edge (samples_per_edge + 1 points)
        refine_iterations: Bracketing passes after sampling (0 disables)
    """

    def __init__(self, graph: TrackGraph, samples_per_edge: int = SAMPLES_PER_EDGE,
                 refine_iterations: int = 0):
        if samples_per_edge < 1:
            raise ValueError(f"samples_per_edge must be at least 1, got {samples_per_edge}")
        self.graph = graph
        self.samples_per_edge = samples_per_edge
        self.refine_iterations = refine_iterations
        self._t_values = np.linspace(0.0, 1.0, samples_per_edge + 1)

    def _sample(self, edge: GraphEdge, t: float) -> CurveSample:
        start, end = self.graph.get_edge_endpoints(edge)
        return sample_edge(edge, start, end, t)

    def closest_point_on_edge(self, edge: GraphEdge, point: Vector3) -> Tuple[float, CurveSample, float]:
        """
        Closest sampled point on one edge.

        Ties keep the lowest t.

        Args:
            edge: Edge to search
            point: Query point (Y ignored)

        Returns:
            (t, sample, horizontal distance)
        """
        samples = [self._sample(edge, float(t)) for t in self._t_values]
        distances = np.array([s.position.horizontal_distance_to(point) for s in samples])
        idx = int(np.argmin(distances))
        t, sample, distance = float(self._t_values[idx]), samples[idx], float(distances[idx])

        if self.refine_iterations > 0:
            t, sample, distance = self.refine(edge, point, t, sample, distance)

        return t, sample, distance

    def refine(self, edge: GraphEdge, point: Vector3, t: float,
               sample: CurveSample, distance: float) -> Tuple[float, CurveSample, float]:
        """
        Narrow t around a starting estimate.

        Each pass probes halfway toward both bracket ends and moves to the
        closer probe if it improves on the current best; otherwise the
        bracket shrinks around the best t.

        Returns:
            (t, sample, distance) no further from point than the input
        """
        low = max(0.0, t - REFINE_BRACKET)
        high = min(1.0, t + REFINE_BRACKET)

        for _ in range(self.refine_iterations):
            t_low = (low + t) / 2.0
            t_high = (t + high) / 2.0
            s_low = self._sample(edge, t_low)
            s_high = self._sample(edge, t_high)
            d_low = s_low.position.horizontal_distance_to(point)
            d_high = s_high.position.horizontal_distance_to(point)

            if d_low < distance and d_low <= d_high:
                high = t
                t, sample, distance = t_low, s_low, d_low
            elif d_high < distance:
                low = t
                t, sample, distance = t_high, s_high, d_high
            else:
                low, high = t_low, t_high

        return t, sample, distance

    def find_nearest(self, point: Vector3, max_distance: Optional[float] = None,
                     exclude_edges: Iterable[str] = ()) -> Optional[TrackSegmentInfo]:
        """
        Find the closest point on any edge.

        Args:
            point: Query point (Y ignored)
            max_distance: Reject matches further than this (None accepts any)
            exclude_edges: Edge ids to skip

        Returns:
            TrackSegmentInfo, or None if the graph has no edges or nothing
            lies within max_distance
        """
        edges = self.graph.get_all_edges()
        if not edges:
            logger.warning("Nearest edge search on an empty track graph")
            return None

        excluded = set(exclude_edges)
        best = None

        for edge in edges:
            if edge.id in excluded:
                continue
            t, sample, distance = self.closest_point_on_edge(edge, point)
            if best is None or distance < best[2]:
                best = (edge, t, distance, sample)

        if best is None:
            return None

        edge, t, distance, sample = best
        if max_distance is not None and distance > max_distance:
            logger.debug("Nearest edge %s is %.4f m away (limit %.4f)", edge.id, distance, max_distance)
            return None

        logger.debug("Nearest edge: %s at t=%.3f (%.4f m)", edge.id, t, distance)
        return TrackSegmentInfo.from_forward(
            position=sample.position,
            forward=sample.tangent,
            distance=distance,
            edge_id=edge.id,
            t=t,
        )

    def find_edges_in_radius(self, point: Vector3, radius: float) -> List[TrackSegmentInfo]:
        """
        Closest point on every edge within a radius.

        Returns:
            One TrackSegmentInfo per edge, nearest first
        """
        results = []
        for edge in self.graph.get_all_edges():
            t, sample, distance = self.closest_point_on_edge(edge, point)
            if distance <= radius:
                results.append(TrackSegmentInfo.from_forward(
                    position=sample.position,
                    forward=sample.tangent,
                    distance=distance,
                    edge_id=edge.id,
                    t=t,
                ))
        results.sort(key=lambda info: info.distance)
        return results

    def is_on_track(self, point: Vector3, tolerance: float = ON_TRACK_TOLERANCE_M) -> bool:
        """Check whether a point lies within tolerance of any edge."""
        return self.find_nearest(point, max_distance=tolerance) is not None

    def pose_on_edge(self, edge_id: str, t: float) -> Optional[CurveSample]:
        """
        Position and tangent at a parameter on a named edge.

        Args:
            edge_id: Edge id
            t: Parameter, clamped to [0, 1]

        Returns:
            CurveSample, or None if the edge does not exist
        """
        edge = self.graph.get_edge(edge_id)
        if edge is None:
            return None
        return self._sample(edge, min(max(t, 0.0), 1.0))


__all__ = [
    "TrackSegmentInfo",
    "NearestEdgeLocator",
    "REFINE_BRACKET",
]
