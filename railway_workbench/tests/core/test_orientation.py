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
Tests for Orientation Resolver
==============================

Tests for yaw resolution, snap distance and segment sources.
"""

import math

import pytest

from railway_workbench.core.placement import (
    ForwardAxis,
    GraphSegmentSource,
    MeshSegmentSource,
    ModelBounds,
    OrientationStrategy,
    RailPair,
    detect_forward_axis,
    is_valid_distance,
    normalize_angle,
    resolve_yaw,
    select_strategy,
    track_angle,
)
from railway_workbench.core.track import NearestEdgeLocator
from railway_workbench.core.vector import Vector3


class TestAngles:
    """Tests for angle helpers."""

    @pytest.mark.unit
    def test_track_angle_plus_z_is_zero(self):
        assert track_angle(Vector3(0.0, 0.0, 1.0)) == 0.0

    @pytest.mark.unit
    def test_track_angle_plus_x_is_quarter_turn(self):
        assert track_angle(Vector3(1.0, 0.0, 0.0)) == pytest.approx(math.pi / 2)

    @pytest.mark.unit
    @pytest.mark.parametrize("angle,expected", [
        (0.0, 0.0),
        (math.pi, math.pi),
        (-math.pi, math.pi),
        (3 * math.pi / 2, -math.pi / 2),
        (-3 * math.pi / 2, math.pi / 2),
    ])
    def test_normalize_angle(self, angle, expected):
        assert normalize_angle(angle) == pytest.approx(expected)


class TestResolveYaw:
    """Tests for resolve_yaw."""

    @pytest.mark.unit
    def test_pos_z_model_on_plus_z_track(self):
        assert resolve_yaw(Vector3(0.0, 0.0, 1.0), ForwardAxis.POS_Z) == pytest.approx(0.0)

    @pytest.mark.unit
    def test_neg_z_model_on_plus_z_track(self):
        assert resolve_yaw(Vector3(0.0, 0.0, 1.0), ForwardAxis.NEG_Z) == pytest.approx(math.pi)

    @pytest.mark.unit
    def test_neg_x_model_on_plus_x_track(self):
        """pi/2 track angle plus pi/2 offset wraps to pi."""
        assert resolve_yaw(Vector3(1.0, 0.0, 0.0), ForwardAxis.NEG_X) == pytest.approx(math.pi)

    @pytest.mark.unit
    def test_pos_x_model_on_plus_x_track(self):
        assert resolve_yaw(Vector3(1.0, 0.0, 0.0), ForwardAxis.POS_X) == pytest.approx(0.0)

    @pytest.mark.unit
    def test_y_axes_treated_as_z(self):
        tangent = Vector3(0.6, 0.0, 0.8)
        assert resolve_yaw(tangent, ForwardAxis.POS_Y) == resolve_yaw(tangent, ForwardAxis.POS_Z)
        assert resolve_yaw(tangent, ForwardAxis.NEG_Y) == resolve_yaw(tangent, ForwardAxis.NEG_Z)

    @pytest.mark.unit
    def test_accepts_axis_name(self):
        assert resolve_yaw(Vector3(0.0, 0.0, 1.0), "NEG_Z") == pytest.approx(math.pi)

    @pytest.mark.unit
    def test_offset_override(self):
        yaw = resolve_yaw(Vector3(0.0, 0.0, 1.0), ForwardAxis.NEG_Z, {"NEG_Z": 0.25})
        assert yaw == pytest.approx(0.25)

    @pytest.mark.unit
    def test_result_in_range(self):
        for i in range(16):
            angle = i * math.pi / 8
            tangent = Vector3(math.sin(angle), 0.0, math.cos(angle))
            for axis in ForwardAxis:
                yaw = resolve_yaw(tangent, axis)
                assert -math.pi < yaw <= math.pi + 1e-12


class TestSnapDistance:
    """Tests for is_valid_distance."""

    @pytest.mark.unit
    def test_default_threshold(self):
        assert is_valid_distance(0.0)
        assert is_valid_distance(0.05)
        assert not is_valid_distance(0.0501)

    @pytest.mark.unit
    def test_custom_threshold(self):
        assert is_valid_distance(0.09, 0.1)


class TestDetectForwardAxis:
    """Tests for detect_forward_axis."""

    @pytest.mark.unit
    def test_long_in_x(self):
        bounds = ModelBounds(Vector3(-1.0, 0.0, -0.2), Vector3(1.0, 0.5, 0.2))
        assert detect_forward_axis(bounds) == ForwardAxis.NEG_X

    @pytest.mark.unit
    def test_long_in_z(self):
        bounds = ModelBounds(Vector3(-0.2, 0.0, -1.0), Vector3(0.2, 0.5, 1.0))
        assert detect_forward_axis(bounds) == ForwardAxis.NEG_Z

    @pytest.mark.unit
    def test_square_defaults_to_neg_z(self):
        bounds = ModelBounds(Vector3(-1.0, 0.0, -1.0), Vector3(1.0, 0.5, 1.0))
        assert detect_forward_axis(bounds) == ForwardAxis.NEG_Z

    @pytest.mark.unit
    def test_degenerate_defaults_to_neg_z(self):
        assert detect_forward_axis(ModelBounds.degenerate()) == ForwardAxis.NEG_Z


class TestSegmentSources:
    """Tests for graph and mesh segment sources."""

    @pytest.mark.unit
    def test_select_strategy(self, straight_graph, empty_graph):
        assert select_strategy(straight_graph) == OrientationStrategy.GRAPH_BASED
        assert select_strategy(empty_graph) == OrientationStrategy.MESH_BASED
        assert select_strategy(None) == OrientationStrategy.MESH_BASED

    @pytest.mark.unit
    def test_graph_source(self, straight_graph):
        source = GraphSegmentSource(NearestEdgeLocator(straight_graph))
        segment = source.find_segment(Vector3(0.01, 0.0, 0.5))
        assert source.strategy == OrientationStrategy.GRAPH_BASED
        assert segment.edge_id == "E1"

    @pytest.mark.unit
    def test_rail_pair_centerline(self):
        rails = RailPair(left=Vector3(-0.008, 0.955, 0.3), right=Vector3(0.008, 0.956, 0.3))
        assert rails.centerline == Vector3(0.0, 0.956, 0.3)
        assert rails.right_vector == Vector3(1.0, 0.0, 0.0)

    @pytest.mark.unit
    def test_mesh_source_from_rails(self):
        rails = RailPair(left=Vector3(-0.008, 0.955, 0.3), right=Vector3(0.008, 0.955, 0.3))
        segment = MeshSegmentSource(rails=rails).find_segment(Vector3(0.02, 0.0, 0.3))

        assert segment.edge_id is None
        assert segment.t is None
        assert segment.forward == Vector3(0.0, 0.0, 1.0)
        assert segment.right == Vector3(1.0, 0.0, 0.0)
        assert segment.distance == pytest.approx(0.02)

    @pytest.mark.unit
    def test_mesh_source_heading_fallback(self):
        source = MeshSegmentSource(fallback_heading=math.pi / 2)
        segment = source.find_segment(Vector3(0.4, 0.0, 0.1))
        assert segment.forward == Vector3(1.0, 0.0, 0.0)
        assert segment.distance == 0.0
        assert segment.position == Vector3(0.4, 0.0, 0.1)

    @pytest.mark.unit
    def test_mesh_source_coincident_rails_use_heading(self):
        point = Vector3(0.0, 0.955, 0.0)
        source = MeshSegmentSource(rails=RailPair(point, point), fallback_heading=0.0)
        assert source.find_segment(Vector3(0.0, 0.0, 0.0)).forward == Vector3(0.0, 0.0, 1.0)

    @pytest.mark.unit
    def test_mesh_source_without_data(self):
        assert MeshSegmentSource().find_segment(Vector3(0.0, 0.0, 0.0)) is None
