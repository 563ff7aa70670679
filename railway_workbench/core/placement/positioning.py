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
Model Positioning Operations
============================

Scene-level operations that measure a model, scale it and rest it on the
track. These functions take the scene tool as a type so they run against
Blender or a test double alike.

Usage:
    import railway_workbench.tool as tool
    from railway_workbench.core.placement import positioning

    scale_result, position_result = positioning.auto_scale_and_position(
        tool.SceneModel, obj, track_point, PositionOptions(type_hint="coach")
    )
"""

from typing import TYPE_CHECKING, Any, Optional, Tuple

from ..config import PlacementConfig
from ..logging_config import get_logger
from ..vector import Vector3
from .bounds import ModelBounds, calculate_model_bounds
from .scale_classifier import RollingStockType, ScaleClassifier, ScaleClassifierResult
from .vertical import PositionOptions, PositionResult, position_on_track

if TYPE_CHECKING:
    import railway_workbench.tool as tool

logger = get_logger(__name__)


def _rail_options(options: Optional[PositionOptions], config: PlacementConfig) -> PositionOptions:
    """Fill in the configured rail height when no custom surface is set."""
    options = options or PositionOptions()
    if options.custom_y is not None:
        return options
    return PositionOptions(
        custom_y=config.rail_top_y,
        additional_offset=options.additional_offset + config.height_offset,
        auto_scale=options.auto_scale,
        type_hint=options.type_hint,
    )


def place_on_track(
    scene: "type[tool.SceneModel]",
    obj: Any,
    track_position: Vector3,
    options: Optional[PositionOptions] = None,
    config: Optional[PlacementConfig] = None,
) -> Optional[PositionResult]:
    """
    Rest a model on the track at its current scale.

    Args:
        scene: Scene tool
        obj: The model object
        track_position: Point on the track centerline
        options: Positioning options
        config: Placement configuration

    Returns:
        PositionResult, or None if the model has no usable bounds (the
        model is left where it was)
    """
    config = config or PlacementConfig()
    bounds = calculate_model_bounds(scene, obj)
    if bounds.is_degenerate:
        logger.warning("Cannot position model without mesh bounds")
        return None

    result = position_on_track(bounds, scene.get_scale(obj), track_position,
                               _rail_options(options, config))
    scene.set_position(obj, result.position.to_tuple())
    return result


def auto_scale_and_position(
    scene: "type[tool.SceneModel]",
    obj: Any,
    track_position: Vector3,
    options: Optional[PositionOptions] = None,
    config: Optional[PlacementConfig] = None,
) -> Tuple[ScaleClassifierResult, Optional[PositionResult]]:
    """
    Scale a model to OO gauge and rest it on the track.

    Args:
        scene: Scene tool
        obj: The model object
        track_position: Point on the track centerline
        options: Positioning options (auto_scale=False keeps the current scale)
        config: Placement configuration

    Returns:
        (scale result, position result). The position result is None when
        the model has no usable bounds.
    """
    config = config or PlacementConfig()
    options = options or PositionOptions()

    bounds = calculate_model_bounds(scene, obj)
    scale_result = _choose_scale(scene, obj, bounds, options, config)

    if scale_result.scale_factor != scene.get_scale(obj):
        scene.set_scale(obj, scale_result.scale_factor)
        logger.info("Applied auto-scale: %.4f", scale_result.scale_factor)

    if bounds.is_degenerate:
        logger.warning("Cannot position model without mesh bounds")
        return scale_result, None

    position_result = position_on_track(bounds, scale_result.scale_factor, track_position,
                                        _rail_options(options, config))
    scene.set_position(obj, position_result.position.to_tuple())
    return scale_result, position_result


def _choose_scale(scene, obj, bounds: ModelBounds, options: PositionOptions,
                  config: PlacementConfig) -> ScaleClassifierResult:
    if options.auto_scale:
        return ScaleClassifier(config).classify(bounds, options.type_hint)

    return ScaleClassifierResult(
        scale_factor=scene.get_scale(obj),
        detected_type=RollingStockType.UNKNOWN,
        confidence=0.0,
        original_length=0.0 if bounds.is_degenerate else bounds.max_horizontal,
        reason="auto-scale disabled",
    )


__all__ = ["place_on_track", "auto_scale_and_position"]
