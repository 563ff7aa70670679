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
Pytest Configuration and Fixtures
==================================

Shared fixtures for the Railway Workbench test suite.
"""

import math
from typing import List, Optional, Tuple

import pytest

from railway_workbench.core.tool import SceneModel
from railway_workbench.core.track import (
    CurveDefinition,
    GraphEdge,
    GraphNode,
    TrackGraph,
)
from railway_workbench.core.vector import Vector3


# =============================================================================
# Skip Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no external deps)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "blender: Requires Blender environment")
    config.addinivalue_line("markers", "slow: Slow running tests")


# =============================================================================
# Conditional Imports
# =============================================================================

# Check if bpy (Blender) is available
try:
    import bpy
    HAS_BLENDER = True
except ImportError:
    HAS_BLENDER = False
    bpy = None


# =============================================================================
# Skip Decorators
# =============================================================================

requires_blender = pytest.mark.skipif(
    not HAS_BLENDER,
    reason="Blender environment not available"
)


# =============================================================================
# Scene Test Doubles
# =============================================================================

class FakeModel:
    """Stand-in for a scene model.

    Mesh boxes are stored unscaled and reported at the model's current
    scale, like a real scene does.
    """

    def __init__(self, boxes: List[Optional[Tuple[tuple, tuple]]], scale: float = 1.0):
        self.boxes = boxes
        self.scale = scale
        self.scale_history = []
        self.position = None
        self.yaw = None
        self.fail_on_read = False


class FakeSceneModel(SceneModel):
    """SceneModel implementation over FakeModel objects."""

    @classmethod
    def get_scale(cls, obj):
        return obj.scale

    @classmethod
    def set_scale(cls, obj, scale):
        obj.scale = scale
        obj.scale_history.append(scale)

    @classmethod
    def get_mesh_bounds(cls, obj):
        if obj.fail_on_read:
            raise RuntimeError("mesh data unavailable")
        result = []
        for box in obj.boxes:
            if box is None:
                result.append(None)
                continue
            lo, hi = box
            result.append((
                tuple(v * obj.scale for v in lo),
                tuple(v * obj.scale for v in hi),
            ))
        return result

    @classmethod
    def set_position(cls, obj, position):
        obj.position = position

    @classmethod
    def set_yaw(cls, obj, yaw):
        obj.yaw = yaw

    @classmethod
    def get_rail_pair(cls, track_obj):
        return None

    @classmethod
    def get_heading(cls, track_obj):
        return 0.0


@pytest.fixture
def scene():
    """FakeSceneModel type, passed where core expects a tool type."""
    return FakeSceneModel


@pytest.fixture
def make_model():
    """Factory for FakeModel instances."""
    return FakeModel


# =============================================================================
# Track Fixtures
# =============================================================================

@pytest.fixture
def straight_graph() -> TrackGraph:
    """One 1 m straight along +Z from the origin."""
    return TrackGraph(
        nodes=[
            GraphNode("A", Vector3(0.0, 0.0, 0.0)),
            GraphNode("B", Vector3(0.0, 0.0, 1.0)),
        ],
        edges=[GraphEdge("E1", "A", "B", CurveDefinition.straight())],
    )


@pytest.fixture
def arc_graph() -> TrackGraph:
    """A 45 degree left-hand arc of radius 0.371 m (OO second radius)."""
    radius = 0.371
    sweep = math.radians(45.0)
    # Center at (-r, 0, 0), start heading +Z
    end = Vector3(radius * math.cos(sweep) - radius, 0.0, radius * math.sin(sweep))
    return TrackGraph(
        nodes=[
            GraphNode("A", Vector3(0.0, 0.0, 0.0)),
            GraphNode("B", end),
        ],
        edges=[GraphEdge("C1", "A", "B", CurveDefinition.arc(radius, 45.0, 1))],
    )


@pytest.fixture
def empty_graph() -> TrackGraph:
    return TrackGraph()
