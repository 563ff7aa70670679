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
Placement Package
=================

Anchoring rolling stock models onto the track.

This package provides:
- Yaw from track direction and a model's forward axis
- Unscaled model bounds from child meshes
- Rail-top height alignment
- OO gauge auto-scaling
- Interactive placement sessions

Example:
    >>> from railway_workbench.core.placement import PlacementCoordinator
    >>> coordinator = PlacementCoordinator(graph)
    >>> coordinator.start_placement(bounds, scale=0.12)
    >>> coordinator.update(cursor_point)
    >>> result = coordinator.commit()
"""

# Orientation
from .orientation import (
    ForwardAxis,
    OrientationStrategy,
    RailPair,
    GraphSegmentSource,
    MeshSegmentSource,
    normalize_angle,
    track_angle,
    resolve_yaw,
    is_valid_distance,
    detect_forward_axis,
    select_strategy,
)

# Bounds and height
from .bounds import ModelBounds, calculate_model_bounds
from .vertical import (
    PositionOptions,
    PositionResult,
    align_to_surface,
    position_on_track,
    is_at_rail_height,
)

# Scaling
from .scale_classifier import (
    RollingStockType,
    ScaleClassifierResult,
    ScaleClassifier,
)
from .positioning import place_on_track, auto_scale_and_position

# Session
from .coordinator import PlacementState, PlacementResult, PlacementCoordinator

__all__ = [
    # Orientation
    "ForwardAxis",
    "OrientationStrategy",
    "RailPair",
    "GraphSegmentSource",
    "MeshSegmentSource",
    "normalize_angle",
    "track_angle",
    "resolve_yaw",
    "is_valid_distance",
    "detect_forward_axis",
    "select_strategy",
    # Bounds and height
    "ModelBounds",
    "calculate_model_bounds",
    "PositionOptions",
    "PositionResult",
    "align_to_surface",
    "position_on_track",
    "is_at_rail_height",
    # Scaling
    "RollingStockType",
    "ScaleClassifierResult",
    "ScaleClassifier",
    "place_on_track",
    "auto_scale_and_position",
    # Session
    "PlacementState",
    "PlacementResult",
    "PlacementCoordinator",
]
