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
Placement Configuration
=======================

A single dataclass carrying every tunable of the placement engine. Defaults
come from the OO gauge constants; any value can be overridden per layout.

Example:
    >>> config = PlacementConfig()
    >>> config.max_snap_distance
    0.05
    >>> finer = config.with_overrides(samples_per_edge=50)
"""

from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Dict, Tuple

from .constants import (
    DEFAULT_FORWARD_AXIS,
    FORWARD_AXIS_OFFSETS,
    MAX_SNAP_DISTANCE_M,
    RAIL_TOP_Y,
    ROLLING_STOCK_LENGTH_RANGES,
    SAMPLES_PER_EDGE,
    TARGET_BODY_WIDTH_M,
)


class ScalePolicy(Enum):
    """How an un-hinted model's scale factor is chosen.

    LENGTH_BANDED: Guess the stock type from its raw length, then scale to
        that type's canonical OO length.
    ABSOLUTE_SIZE: Compare the raw size against OO expectations in
        millimetres and scale to a typical body width when out of range.
    """
    LENGTH_BANDED = "length_banded"
    ABSOLUTE_SIZE = "absolute_size"


@dataclass
class PlacementConfig:
    """
    Tunables for track placement.

    Attributes:
        max_snap_distance: Furthest horizontal distance (m) at which a
            placement still snaps to track
        samples_per_edge: Parametric subdivisions per edge in nearest search
        refine_iterations: Bracketing passes around the best sample
            (0 disables refinement)
        rail_top_y: Height of the rail-top surface (m)
        height_offset: Extra height added on top of rail top (m)
        length_ranges: (min, max) target length per stock type (m); types
            left out keep their default range
        forward_axis_offsets: Yaw offset per forward axis name (radians)
        default_forward_axis: Forward axis name used when none is given
        scale_policy: Policy used when no type hint is given
        target_body_width: Body width (m) used by the absolute-size policy
    """
    max_snap_distance: float = MAX_SNAP_DISTANCE_M
    samples_per_edge: int = SAMPLES_PER_EDGE
    refine_iterations: int = 0
    rail_top_y: float = RAIL_TOP_Y
    height_offset: float = 0.0
    length_ranges: Dict[str, Tuple[float, float]] = field(
        default_factory=lambda: dict(ROLLING_STOCK_LENGTH_RANGES)
    )
    forward_axis_offsets: Dict[str, float] = field(
        default_factory=lambda: dict(FORWARD_AXIS_OFFSETS)
    )
    default_forward_axis: str = DEFAULT_FORWARD_AXIS
    scale_policy: ScalePolicy = ScalePolicy.LENGTH_BANDED
    target_body_width: float = TARGET_BODY_WIDTH_M

    def __post_init__(self):
        """Validate configuration values."""
        if self.max_snap_distance <= 0:
            raise ValueError(
                f"max_snap_distance must be positive, got {self.max_snap_distance}"
            )
        if self.samples_per_edge < 1:
            raise ValueError(
                f"samples_per_edge must be at least 1, got {self.samples_per_edge}"
            )
        if self.refine_iterations < 0:
            raise ValueError(
                f"refine_iterations cannot be negative, got {self.refine_iterations}"
            )
        if self.target_body_width <= 0:
            raise ValueError(
                f"target_body_width must be positive, got {self.target_body_width}"
            )

        if isinstance(self.scale_policy, str):
            self.scale_policy = ScalePolicy(self.scale_policy)

        ranges = dict(ROLLING_STOCK_LENGTH_RANGES)
        ranges.update({k: tuple(v) for k, v in self.length_ranges.items()})
        self.length_ranges = ranges

        for stock_type, (low, high) in self.length_ranges.items():
            if low <= 0 or high < low:
                raise ValueError(
                    f"Invalid length range for '{stock_type}': ({low}, {high})"
                )

        if self.default_forward_axis not in self.forward_axis_offsets:
            raise ValueError(
                f"No yaw offset for default forward axis '{self.default_forward_axis}'"
            )

    def target_length(self, stock_type: str) -> float:
        """
        Canonical OO length of a stock type (midpoint of its range).

        Args:
            stock_type: Key into length_ranges (e.g., "coach")

        Returns:
            Target length in metres
        """
        low, high = self.length_ranges[stock_type]
        return (low + high) / 2.0

    def with_overrides(self, **overrides) -> 'PlacementConfig':
        """
        Copy this configuration with some values replaced.

        Raises:
            ValueError: If the result fails validation
        """
        return replace(self, **overrides)

    def to_dict(self) -> dict:
        """Serialize to a plain dictionary."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data['scale_policy'] = self.scale_policy.value
        data['length_ranges'] = {
            k: list(v) for k, v in self.length_ranges.items()
        }
        data['forward_axis_offsets'] = dict(self.forward_axis_offsets)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'PlacementConfig':
        """
        Build a configuration from a dictionary, ignoring unknown keys.

        Partial dictionaries merge onto the defaults, so a layout file only
        needs to name the values it changes.

        Args:
            data: Dictionary from to_dict() or a layout settings file
        """
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in data.items() if k in known}

        if 'forward_axis_offsets' in kwargs:
            offsets = dict(FORWARD_AXIS_OFFSETS)
            offsets.update(kwargs['forward_axis_offsets'])
            kwargs['forward_axis_offsets'] = offsets

        return cls(**kwargs)


__all__ = ["ScalePolicy", "PlacementConfig"]
