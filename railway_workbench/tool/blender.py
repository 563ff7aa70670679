# ============================================================================
# Railway Workbench - Model Railway Tools for Blender
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
# Licensed under the GNU General Public License v3
# ============================================================================
"""
Blender tool implementation - scene access for track placement.

This tool implements the core SceneModel interface on top of bpy, and
converts between Blender's Z-up world and the placement engine's Y-up
layout space:

    layout (x, y, z)  <->  Blender (x, -z, y)

A layout yaw (from +Z toward +X) is the same angle as a Blender rotation
about Z, because layout +Z maps onto Blender -Y.

Usage:
    from railway_workbench.tool import SceneModel

    scale = SceneModel.get_scale(obj)
    SceneModel.set_position(obj, (0.0, 0.958, 0.25))
    SceneModel.set_yaw(obj, math.pi / 2)
    rails = SceneModel.get_rail_pair(track_piece)
"""
from typing import List, Optional, Tuple

import bpy
from mathutils import Matrix, Vector

import railway_workbench.core.tool
from railway_workbench.core.logging_config import get_logger
from railway_workbench.core.placement.orientation import RailPair
from railway_workbench.core.vector import Vector3

logger = get_logger(__name__)

# Child mesh name fragments identifying each rail of a track piece
LEFT_RAIL_NAMES = ('rail_left', 'leftrail')
RIGHT_RAIL_NAMES = ('rail_right', 'rightrail')


def to_layout(co) -> Tuple[float, float, float]:
    """Convert a Blender (x, y, z) to layout space."""
    return (co[0], co[2], -co[1])


def to_blender(co) -> Tuple[float, float, float]:
    """Convert a layout (x, y, z) to Blender space."""
    return (co[0], -co[2], co[1])


class SceneModel(railway_workbench.core.tool.SceneModel):
    """
    Blender scene access for placement.

    Models are objects whose mesh descendants make up the rolling stock.
    Track pieces are objects with child meshes named after their rails.
    """

    @classmethod
    def get_scale(cls, obj: bpy.types.Object) -> float:
        """Get the uniform scale of a model (X component)."""
        return obj.scale.x

    @classmethod
    def set_scale(cls, obj: bpy.types.Object, scale: float) -> None:
        """Set the uniform scale of a model."""
        obj.scale = (scale, scale, scale)

    @classmethod
    def get_mesh_bounds(cls, obj: bpy.types.Object) -> List[Optional[tuple]]:
        """
        Get each mesh's bounding box in the model's frame.

        Boxes include the model's own scale but not its rotation or
        location, and are converted to layout space.

        Args:
            obj: The model object

        Returns:
            List of (min_corner, max_corner) tuples, None for meshes
            without bounding data
        """
        bpy.context.view_layer.update()

        model_frame = Matrix.Diagonal(obj.scale).to_4x4() @ obj.matrix_world.inverted()
        boxes = []
        for mesh_obj in cls._mesh_objects(obj):
            if not mesh_obj.bound_box:
                boxes.append(None)
                continue

            to_model = model_frame @ mesh_obj.matrix_world
            corners = [to_layout(to_model @ Vector(corner)) for corner in mesh_obj.bound_box]
            boxes.append((
                tuple(min(c[i] for c in corners) for i in range(3)),
                tuple(max(c[i] for c in corners) for i in range(3)),
            ))
        return boxes

    @classmethod
    def set_position(cls, obj: bpy.types.Object, position: tuple) -> None:
        """Move a model's origin to a layout-space position."""
        obj.location = to_blender(position)

    @classmethod
    def set_yaw(cls, obj: bpy.types.Object, yaw: float) -> None:
        """Rotate a model about the vertical axis, clearing pitch and roll."""
        obj.rotation_mode = 'XYZ'
        obj.rotation_euler = (0.0, 0.0, yaw)

    @classmethod
    def get_rail_pair(cls, track_obj: bpy.types.Object) -> Optional[RailPair]:
        """
        Find the left and right rail meshes of a track piece.

        Args:
            track_obj: The track piece (or any of its child meshes)

        Returns:
            RailPair of world rail centers, or None if either rail is missing
        """
        parent = track_obj.parent or track_obj
        left = right = None
        for child in parent.children_recursive:
            name = child.name.lower()
            if any(n in name for n in LEFT_RAIL_NAMES):
                left = child
            elif any(n in name for n in RIGHT_RAIL_NAMES):
                right = child

        if left is None or right is None:
            logger.debug("No rail pair under '%s'", parent.name)
            return None

        return RailPair(
            left=Vector3(cls._world_center(left)),
            right=Vector3(cls._world_center(right)),
        )

    @classmethod
    def get_heading(cls, track_obj: bpy.types.Object) -> float:
        """Yaw of a track piece from its world rotation."""
        return track_obj.matrix_world.to_euler('XYZ').z

    # =========================================================================
    # Helper Methods
    # =========================================================================

    @classmethod
    def _mesh_objects(cls, obj: bpy.types.Object) -> List[bpy.types.Object]:
        """The model itself (if a mesh) and all its mesh descendants."""
        meshes = [obj] if obj.type == 'MESH' else []
        meshes.extend(child for child in obj.children_recursive if child.type == 'MESH')
        return meshes

    @classmethod
    def _world_center(cls, obj: bpy.types.Object) -> Tuple[float, float, float]:
        """Bounding box center of an object in layout space."""
        local = sum((Vector(corner) for corner in obj.bound_box), Vector()) / 8.0
        return to_layout(obj.matrix_world @ local)


__all__ = ["SceneModel", "to_layout", "to_blender"]
