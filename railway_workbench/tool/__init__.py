# ============================================================================
# Railway Workbench - Model Railway Tools for Blender
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
# Licensed under the GNU General Public License v3
# ============================================================================
"""
Tool layer - Blender-specific implementations of core interfaces.

This module provides the bridge between pure placement logic (core) and
Blender-specific functionality. Tools implement the interfaces defined
in core.tool and handle all Blender API interactions.

Usage:
    import railway_workbench.tool as tool

    # Measure and scale a model
    scale = tool.SceneModel.get_scale(obj)

    # In core functions, tools are passed as parameters:
    from railway_workbench.core.placement import auto_scale_and_position

    auto_scale_and_position(tool.SceneModel, obj, track_point)
"""

from .blender import SceneModel

__all__ = [
    "SceneModel",
]


def register():
    """Register tool layer (no-op for now)."""
    pass


def unregister():
    """Unregister tool layer (no-op for now)."""
    pass
