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
Railway Workbench Core Module

Core functionality and data structures for Railway Workbench.
This module contains:
- Interface definitions (tool.py) for the three-layer architecture
- Track graph and curve geometry
- Placement: orientation, bounds, height alignment, scaling, sessions

Architecture:
    Layer 1: Core (this module) - Pure Python interfaces and placement logic
    Layer 2: Tool (railway_workbench.tool) - Blender-specific implementations
    Layer 3: Operators and UI - provided by the host add-on

Nothing in this package imports bpy.
"""

# Import logging configuration first (no dependencies)
from .logging_config import get_logger, setup_logging

# Import interface definitions (no external dependencies)
from .tool import interface, SceneModel

from .exceptions import TrackPlacementError, TrackGraphError, InvalidEdgeError
from .vector import Vector3
from .config import PlacementConfig, ScalePolicy
from . import constants
from . import track
from . import placement

logger = get_logger(__name__)


def register():
    """Register core module"""
    logger.info("Core module loaded")


def unregister():
    """Unregister core module"""
    pass


__all__ = [
    "get_logger",
    "setup_logging",
    "interface",
    "SceneModel",
    "TrackPlacementError",
    "TrackGraphError",
    "InvalidEdgeError",
    "Vector3",
    "PlacementConfig",
    "ScalePolicy",
    "constants",
    "track",
    "placement",
]
