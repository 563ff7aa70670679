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
Tests for Model Positioning Operations
======================================

Tests for scene-level scale and position against a fake scene tool.
"""

import pytest

from railway_workbench.core.config import PlacementConfig
from railway_workbench.core.constants import RAIL_TOP_Y
from railway_workbench.core.placement import (
    PositionOptions,
    RollingStockType,
    auto_scale_and_position,
    place_on_track,
)
from railway_workbench.core.vector import Vector3

# A 480 mm long model with wheels 20 mm below its origin
LOCO_BOXES = [((-0.05, -0.02, -0.24), (0.05, 0.12, 0.24))]


class TestPlaceOnTrack:
    """Tests for place_on_track."""

    @pytest.mark.unit
    def test_rests_on_rail_top(self, scene, make_model):
        model = make_model(LOCO_BOXES, scale=0.5)
        result = place_on_track(scene, model, Vector3(0.2, 0.0, 0.3))

        assert model.position == pytest.approx((0.2, RAIL_TOP_Y + 0.01, 0.3))
        assert result.position.y == pytest.approx(RAIL_TOP_Y + 0.01)
        assert model.scale == 0.5

    @pytest.mark.unit
    def test_config_height_offset(self, scene, make_model):
        model = make_model(LOCO_BOXES)
        config = PlacementConfig(height_offset=0.001)
        result = place_on_track(scene, model, Vector3.zero(), config=config)
        assert result.position.y == pytest.approx(RAIL_TOP_Y + 0.021)

    @pytest.mark.unit
    def test_degenerate_model_left_alone(self, scene, make_model):
        model = make_model([])
        assert place_on_track(scene, model, Vector3.zero()) is None
        assert model.position is None


class TestAutoScaleAndPosition:
    """Tests for auto_scale_and_position."""

    @pytest.mark.unit
    def test_scales_then_positions(self, scene, make_model):
        model = make_model(LOCO_BOXES, scale=3.0)
        scale_result, position_result = auto_scale_and_position(
            scene, model, Vector3(0.0, 0.0, 1.0), PositionOptions(type_hint="locomotive")
        )

        assert scale_result.scale_factor == pytest.approx(0.5)
        assert model.scale == pytest.approx(0.5)
        assert position_result.position.y == pytest.approx(RAIL_TOP_Y + 0.01)
        assert model.position == pytest.approx((0.0, RAIL_TOP_Y + 0.01, 1.0))

    @pytest.mark.unit
    def test_auto_scale_disabled_keeps_scale(self, scene, make_model):
        model = make_model(LOCO_BOXES, scale=0.25)
        scale_result, position_result = auto_scale_and_position(
            scene, model, Vector3.zero(), PositionOptions(auto_scale=False)
        )
        assert scale_result.scale_factor == 0.25
        assert scale_result.detected_type == RollingStockType.UNKNOWN
        assert model.scale == 0.25
        assert position_result.position.y == pytest.approx(RAIL_TOP_Y + 0.005)

    @pytest.mark.unit
    def test_custom_surface(self, scene, make_model):
        model = make_model(LOCO_BOXES)
        _, position_result = auto_scale_and_position(
            scene, model, Vector3.zero(),
            PositionOptions(custom_y=1.0, type_hint="locomotive"),
        )
        assert position_result.position.y == pytest.approx(1.01)

    @pytest.mark.unit
    def test_degenerate_model_resets_scale(self, scene, make_model):
        model = make_model([None], scale=2.0)
        scale_result, position_result = auto_scale_and_position(scene, model, Vector3.zero())
        assert scale_result.scale_factor == 1.0
        assert scale_result.confidence == 0.0
        assert position_result is None
        assert model.position is None
        assert model.scale == 1.0
        assert model.scale_history[-1] == 1.0
