# ============================================================================
# Railway Workbench - Model Railway Tools for Blender
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
# Licensed under the GNU General Public License v3
# ============================================================================
"""
Interface definitions for Railway Workbench tools.

This module defines abstract interfaces that separate placement logic from
Blender-specific implementations:

    Layer 1: Core (this module) - Pure Python interfaces and placement logic
    Layer 2: Tool (railway_workbench.tool) - Blender-specific implementations
    Layer 3: Operators and UI (provided by the host add-on)

All positions crossing this interface are in layout space (Y up). Tool
implementations convert to and from their own scene convention.

Usage:
    from typing import TYPE_CHECKING

    if TYPE_CHECKING:
        import railway_workbench.tool as tool

    def my_function(scene: type[tool.SceneModel], obj):
        scale = scene.get_scale(obj)
        scene.set_position(obj, (0.0, 0.958, 0.0))
"""
from typing import TYPE_CHECKING, Any, List, Optional, Tuple
import abc

if TYPE_CHECKING:
    from railway_workbench.core.placement.orientation import RailPair


Corner = Tuple[float, float, float]


def interface(cls):
    """
    Decorator that converts all public methods to @classmethod @abstractmethod.

    This enables the dependency injection pattern where tool classes are passed
    as types (not instances) to core functions, and all methods are called as
    class methods.

    Example:
        @interface
        class SceneModel:
            def get_scale(cls, obj): pass  # Becomes @classmethod @abstractmethod

        # In tool implementation:
        class SceneModel(core.tool.SceneModel):
            @classmethod
            def get_scale(cls, obj):
                return obj.scale.x

        # In core function:
        def do_something(scene: type[tool.SceneModel], obj):
            scale = scene.get_scale(obj)  # Called on the class, not an instance
    """
    for name, method in list(cls.__dict__.items()):
        if callable(method) and not name.startswith('_'):
            setattr(cls, name, classmethod(abc.abstractmethod(method)))
    cls.__original_qualname__ = cls.__qualname__
    return cls


# =============================================================================
# Core Interfaces
# =============================================================================

@interface
class SceneModel:
    """
    Interface for the scene objects a placement acts on.

    A model is any scene object with child meshes (a locomotive, a coach).
    A track piece is a scene object whose rail meshes can be inspected.
    Scale is uniform.
    """

    def get_scale(cls, obj: Any) -> float:
        """
        Get the uniform scale of a model.

        Args:
            obj: The model object

        Returns:
            Current uniform scale factor
        """
        pass

    def set_scale(cls, obj: Any, scale: float) -> None:
        """
        Set the uniform scale of a model.

        Args:
            obj: The model object
            scale: New uniform scale factor
        """
        pass

    def get_mesh_bounds(cls, obj: Any) -> List[Optional[Tuple[Corner, Corner]]]:
        """
        Get the local bounding box of every mesh under a model.

        Boxes are expressed in the model's local frame at its current scale.
        Entries may be None for meshes without bounding data.

        Args:
            obj: The model object

        Returns:
            List of (min_corner, max_corner) tuples, one per mesh
        """
        pass

    def set_position(cls, obj: Any, position: Corner) -> None:
        """
        Move a model's origin to a layout-space position.

        Args:
            obj: The model object
            position: (x, y, z) with Y up
        """
        pass

    def set_yaw(cls, obj: Any, yaw: float) -> None:
        """
        Rotate a model about the vertical axis.

        Any existing pitch or roll is cleared.

        Args:
            obj: The model object
            yaw: Rotation in radians, measured from +Z toward +X
        """
        pass

    def get_rail_pair(cls, track_obj: Any) -> Optional["RailPair"]:
        """
        Get the world centers of the two rail meshes of a track piece.

        Args:
            track_obj: The track piece object

        Returns:
            RailPair, or None if the piece has no identifiable rails
        """
        pass

    def get_heading(cls, track_obj: Any) -> float:
        """
        Get the yaw of a track piece from its own rotation.

        Args:
            track_obj: The track piece object

        Returns:
            Yaw in radians, measured from +Z toward +X
        """
        pass


__all__ = ["interface", "SceneModel"]
