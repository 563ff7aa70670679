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
Model Bounds Calculator
=======================

Unscaled, axis-aligned bounds of a model assembled from its child meshes.

Bounds are measured with the model's scale temporarily set to 1 so the
result describes the model as authored; callers apply whatever scale they
intend. A model without usable mesh data yields ModelBounds.degenerate(),
which is distinct from a genuine zero-size box.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

from ..logging_config import get_logger
from ..vector import Vector3

if TYPE_CHECKING:
    import railway_workbench.tool as tool

logger = get_logger(__name__)


@dataclass(frozen=True)
class ModelBounds:
    """
    Axis-aligned bounding box in model-local space.

    Attributes:
        min: Minimum corner
        max: Maximum corner
        is_degenerate: True when no mesh produced valid bounds
    """
    min: Vector3
    max: Vector3
    is_degenerate: bool = False

    @classmethod
    def degenerate(cls) -> 'ModelBounds':
        """Sentinel for a model with no valid mesh data."""
        return cls(Vector3.zero(), Vector3.zero(), is_degenerate=True)

    @property
    def width(self) -> float:
        """Extent along X."""
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        """Extent along Y."""
        return self.max.y - self.min.y

    @property
    def depth(self) -> float:
        """Extent along Z."""
        return self.max.z - self.min.z

    @property
    def center(self) -> Vector3:
        return self.min.lerp(self.max, 0.5)

    @property
    def bottom_center(self) -> Vector3:
        """Center of the underside (where the wheels meet the rail)."""
        center = self.center
        return Vector3(center.x, self.min.y, center.z)

    @property
    def max_horizontal(self) -> float:
        """Longer of the two horizontal extents."""
        return max(self.width, self.depth)

    @property
    def min_horizontal(self) -> float:
        """Shorter of the two horizontal extents."""
        return min(self.width, self.depth)

    def scaled(self, scale: float) -> 'ModelBounds':
        """Bounds after a uniform scale about the model origin."""
        if self.is_degenerate:
            return self
        return ModelBounds(self.min * scale, self.max * scale)


def calculate_model_bounds(scene: "type[tool.SceneModel]", obj: Any) -> ModelBounds:
    """
    Combine the local bounding boxes of every mesh under a model.

    The model's scale is set to 1 while measuring and restored afterward,
    whatever happens.

    Args:
        scene: Scene tool providing scale and mesh bounds
        obj: The model object

    Returns:
        Unscaled ModelBounds, or ModelBounds.degenerate() if no mesh has
        finite bounding data
    """
    original_scale = scene.get_scale(obj)
    try:
        scene.set_scale(obj, 1.0)

        boxes = [box for box in (scene.get_mesh_bounds(obj) or []) if box is not None]
        if not boxes:
            logger.warning("Model has no mesh bounds")
            return ModelBounds.degenerate()

        corners = np.asarray(boxes, dtype=float).reshape(len(boxes), 2, 3)
        finite = np.isfinite(corners).all(axis=(1, 2))
        if not finite.any():
            logger.warning("Model mesh bounds are all non-finite")
            return ModelBounds.degenerate()
        if not finite.all():
            logger.debug("Dropped %d non-finite mesh bounds", int((~finite).sum()))

        corners = corners[finite].reshape(-1, 3)
        bounds = ModelBounds(
            min=Vector3(corners.min(axis=0).tolist()),
            max=Vector3(corners.max(axis=0).tolist()),
        )
        logger.debug(
            "Model bounds: %.4f x %.4f x %.4f",
            bounds.width, bounds.height, bounds.depth
        )
        return bounds
    finally:
        scene.set_scale(obj, original_scale)


__all__ = ["ModelBounds", "calculate_model_bounds"]
