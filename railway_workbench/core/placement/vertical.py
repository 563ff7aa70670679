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
Vertical Aligner
================

Computes the origin height that rests a model's lowest point on a surface.

    origin_y + bounds.min.y * scale = surface_y
    origin_y = surface_y - bounds.min.y * scale

Example (wheels 20 mm below origin, scaled to 0.12, rail top 0.958):
    >>> bounds = ModelBounds(Vector3(-0.1, -0.02, -1.0), Vector3(0.1, 0.3, 1.0))
    >>> round(align_to_surface(bounds, 0.12, 0.958), 4)
    0.9604
"""

from dataclasses import dataclass
from typing import Optional

from ..constants import RAIL_TOP_Y
from ..logging_config import get_logger
from ..vector import Vector3
from .bounds import ModelBounds

logger = get_logger(__name__)

# Height tolerance when checking a placed model (2 mm)
RAIL_HEIGHT_TOLERANCE_M = 0.002


def align_to_surface(bounds: ModelBounds, scale: float, target_surface_y: float,
                     additional_offset: float = 0.0) -> float:
    """
    Origin height that puts the model's underside on a surface.

    Args:
        bounds: Unscaled model bounds
        scale: Uniform scale the model will be shown at
        target_surface_y: Height of the surface (usually rail top)
        additional_offset: Extra height added on top

    Returns:
        Y for the model origin

    Raises:
        ValueError: If bounds are degenerate or scale is not positive
    """
    if bounds.is_degenerate:
        raise ValueError("Cannot align degenerate bounds")
    if scale <= 0:
        raise ValueError(f"Scale must be positive, got {scale}")

    scaled_min_y = bounds.min.y * scale
    return target_surface_y - scaled_min_y + additional_offset


@dataclass
class PositionOptions:
    """
    Options for positioning a model on track.

    Attributes:
        custom_y: Surface height to use instead of rail top
        additional_offset: Fine-tuning height added on top
        auto_scale: Apply auto-scaling before positioning
        type_hint: Rolling stock type name for auto-scaling
    """
    custom_y: Optional[float] = None
    additional_offset: float = 0.0
    auto_scale: bool = True
    type_hint: Optional[str] = None


@dataclass(frozen=True)
class PositionResult:
    """Where a model's origin ends up, and the height used."""
    position: Vector3
    y_offset: float


def position_on_track(bounds: ModelBounds, scale: float, track_position: Vector3,
                      options: Optional[PositionOptions] = None) -> PositionResult:
    """
    Rest a model on the track at a given centerline point.

    X and Z come from the track position; Y is recalculated.

    Args:
        bounds: Unscaled model bounds
        scale: Uniform model scale
        track_position: Point on the track centerline
        options: Positioning options

    Returns:
        PositionResult for the model origin

    Raises:
        ValueError: As for align_to_surface
    """
    options = options or PositionOptions()
    surface_y = RAIL_TOP_Y if options.custom_y is None else options.custom_y

    y = align_to_surface(bounds, scale, surface_y, options.additional_offset)
    logger.debug(
        "Positioning on track: surface %.4f, scaled min %.4f, origin y %.4f",
        surface_y, bounds.min.y * scale, y
    )
    return PositionResult(
        position=Vector3(track_position.x, y, track_position.z),
        y_offset=y,
    )


def is_at_rail_height(bounds: ModelBounds, scale: float, origin_y: float,
                      rail_top_y: float = RAIL_TOP_Y,
                      tolerance: float = RAIL_HEIGHT_TOLERANCE_M) -> bool:
    """
    Check whether a placed model's underside is on the rail top.

    Degenerate bounds are never considered on track.
    """
    if bounds.is_degenerate:
        return False
    bottom_y = origin_y + bounds.min.y * scale
    return abs(bottom_y - rail_top_y) <= tolerance


__all__ = [
    "align_to_surface",
    "PositionOptions",
    "PositionResult",
    "position_on_track",
    "is_at_rail_height",
    "RAIL_HEIGHT_TOLERANCE_M",
]
