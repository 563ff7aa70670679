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
Track Package
=============

Track network data and geometry queries.

This package provides:
- Track graph of nodes joined by straight and arc edges
- Position and tangent sampling along an edge
- Nearest point search over the whole graph

Example:
    >>> from railway_workbench.core.track import TrackGraph, NearestEdgeLocator
    >>> graph = TrackGraph.from_dict(layout_data)
    >>> locator = NearestEdgeLocator(graph)
    >>> info = locator.find_nearest(Vector3(0.1, 0.0, 0.4))
"""

# Graph data
from .graph import (
    CurveType,
    CurveDefinition,
    GraphNode,
    GraphEdge,
    TrackGraph,
)

# Curve sampling
from .curve_geometry import (
    CurveSample,
    sample_straight,
    arc_center,
    sample_arc,
    sample_edge,
    edge_length,
)

# Nearest edge search
from .locator import TrackSegmentInfo, NearestEdgeLocator

__all__ = [
    # Graph
    "CurveType",
    "CurveDefinition",
    "GraphNode",
    "GraphEdge",
    "TrackGraph",
    # Curve geometry
    "CurveSample",
    "sample_straight",
    "arc_center",
    "sample_arc",
    "sample_edge",
    "edge_length",
    # Locator
    "TrackSegmentInfo",
    "NearestEdgeLocator",
]
