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
Tests for Curve Geometry
========================

Tests for straight and arc sampling along track edges.
"""

import math

import pytest

from railway_workbench.core.track import (
    CurveDefinition,
    GraphEdge,
    arc_center,
    edge_length,
    sample_arc,
    sample_edge,
    sample_straight,
)
from railway_workbench.core.vector import Vector3

OO_SECOND_RADIUS = 0.371


def _assert_unit_horizontal(tangent):
    assert abs(tangent.length - 1.0) < 1e-9
    assert tangent.y == 0.0


class TestSampleStraight:
    """Tests for straight edge sampling."""

    @pytest.mark.unit
    @pytest.mark.parametrize("t", [0.0, 0.3, 0.5, 1.0])
    def test_position_is_lerp(self, t):
        start = Vector3(0.2, 0.0, -0.1)
        end = Vector3(1.2, 0.4, 0.9)
        sample = sample_straight(start, end, t)
        assert sample.position == start.lerp(end, t)

    @pytest.mark.unit
    def test_tangent_is_constant_and_horizontal(self):
        start = Vector3(0.0, 0.0, 0.0)
        end = Vector3(3.0, 1.0, 4.0)
        for t in (0.0, 0.5, 1.0):
            tangent = sample_straight(start, end, t).tangent
            _assert_unit_horizontal(tangent)
            assert tangent == Vector3(0.6, 0.0, 0.8)

    @pytest.mark.unit
    def test_degenerate_edge_falls_back_to_plus_z(self):
        point = Vector3(1.0, 0.0, 1.0)
        sample = sample_straight(point, point, 0.5)
        assert sample.tangent == Vector3(0.0, 0.0, 1.0)
        assert sample.position == point

    @pytest.mark.unit
    def test_vertical_edge_falls_back_to_plus_z(self):
        sample = sample_straight(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0), 0.5)
        assert sample.tangent == Vector3(0.0, 0.0, 1.0)


class TestSampleArc:
    """Tests for arc edge sampling."""

    @pytest.mark.unit
    def test_arc_meets_both_nodes(self, arc_graph):
        """Samples at t=0 and t=1 land on the declared nodes."""
        edge = arc_graph.get_edge("C1")
        start, end = arc_graph.get_edge_endpoints(edge)

        first = sample_edge(edge, start, end, 0.0)
        last = sample_edge(edge, start, end, 1.0)

        assert first.position.distance_to(start) < 1e-9
        assert last.position.distance_to(end) < 0.001

    @pytest.mark.unit
    def test_samples_lie_on_radius(self, arc_graph):
        edge = arc_graph.get_edge("C1")
        start, end = arc_graph.get_edge_endpoints(edge)
        center = arc_center(start, end, OO_SECOND_RADIUS, 45.0, 1)

        for i in range(11):
            sample = sample_edge(edge, start, end, i / 10)
            assert abs(sample.position.horizontal_distance_to(center) - OO_SECOND_RADIUS) < 1e-9
            _assert_unit_horizontal(sample.tangent)

    @pytest.mark.unit
    def test_center_on_left_for_positive_direction(self, arc_graph):
        edge = arc_graph.get_edge("C1")
        start, end = arc_graph.get_edge_endpoints(edge)
        center = arc_center(start, end, OO_SECOND_RADIUS, 45.0, 1)
        assert center.horizontal_distance_to(Vector3(-OO_SECOND_RADIUS, 0.0, 0.0)) < 1e-9

    @pytest.mark.unit
    def test_center_of_coincident_endpoints(self):
        start = Vector3(0.2, 0.0, 0.3)
        end = Vector3(0.2, 0.01, 0.3)
        center = arc_center(start, end, OO_SECOND_RADIUS, 45.0, 1)
        assert center == Vector3(0.2, 0.005, 0.3)

    @pytest.mark.unit
    def test_tangent_perpendicular_to_radius(self, arc_graph):
        edge = arc_graph.get_edge("C1")
        start, end = arc_graph.get_edge_endpoints(edge)
        center = arc_center(start, end, OO_SECOND_RADIUS, 45.0, 1)

        sample = sample_edge(edge, start, end, 0.4)
        radial = (sample.position - center).horizontal()
        assert abs(radial.dot(sample.tangent)) < 1e-9

    @pytest.mark.unit
    def test_start_tangent_follows_travel(self, arc_graph):
        edge = arc_graph.get_edge("C1")
        start, end = arc_graph.get_edge_endpoints(edge)
        assert sample_edge(edge, start, end, 0.0).tangent == Vector3(0.0, 0.0, 1.0)

    @pytest.mark.unit
    def test_right_hand_arc(self):
        """Mirror of the left-hand fixture: center at (+r, 0)."""
        r = OO_SECOND_RADIUS
        sweep = math.radians(45.0)
        start = Vector3(0.0, 0.0, 0.0)
        end = Vector3(r - r * math.cos(sweep), 0.0, r * math.sin(sweep))

        first = sample_arc(start, end, r, 45.0, -1, 0.0)
        last = sample_arc(start, end, r, 45.0, -1, 1.0)

        assert first.tangent == Vector3(0.0, 0.0, 1.0)
        assert last.position.distance_to(end) < 0.001

    @pytest.mark.unit
    def test_height_interpolates_linearly(self):
        r = OO_SECOND_RADIUS
        start = Vector3(0.0, 0.0, 0.0)
        end = Vector3(r * math.cos(math.radians(30)) - r, 0.02, r * math.sin(math.radians(30)))
        sample = sample_arc(start, end, r, 30.0, 1, 0.5)
        assert abs(sample.position.y - 0.01) < 1e-12

    @pytest.mark.unit
    def test_coincident_nodes_fall_back_to_straight(self):
        point = Vector3(0.5, 0.0, 0.5)
        sample = sample_arc(point, point, OO_SECOND_RADIUS, 45.0, 1, 0.5)
        assert sample.position == point
        assert sample.tangent == Vector3(0.0, 0.0, 1.0)

    @pytest.mark.unit
    def test_degenerate_arc_definition_samples_straight(self):
        edge = GraphEdge("E", "A", "B", CurveDefinition.arc(0.0, 45.0))
        start = Vector3(0.0, 0.0, 0.0)
        end = Vector3(1.0, 0.0, 0.0)
        assert sample_edge(edge, start, end, 0.5).position == Vector3(0.5, 0.0, 0.0)


class TestEdgeLength:
    """Tests for edge_length."""

    @pytest.mark.unit
    def test_straight_length(self, straight_graph):
        edge = straight_graph.get_edge("E1")
        assert edge_length(edge, *straight_graph.get_edge_endpoints(edge)) == 1.0

    @pytest.mark.unit
    def test_arc_length(self, arc_graph):
        edge = arc_graph.get_edge("C1")
        length = edge_length(edge, *arc_graph.get_edge_endpoints(edge))
        assert length == pytest.approx(OO_SECOND_RADIUS * math.pi / 4)
