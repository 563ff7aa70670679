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
Model Railway Design Constants
==============================

OO gauge (1:76.2, 16.5 mm track) reference values used by the placement
engine. All lengths are in metres of layout space.

Track height stack (from world origin):
    Baseboard top       0.950
    Ballast             +0.003
    Sleepers            +0.002
    Rail                +0.003
    -------------------------
    Rail top            0.958
"""

import math

# Track height stack
BASEBOARD_TOP_Y = 0.950
RAIL_TOP_OFFSET_M = 0.008
RAIL_TOP_Y = BASEBOARD_TOP_Y + RAIL_TOP_OFFSET_M

# Placement defaults
MAX_SNAP_DISTANCE_M = 0.05
SAMPLES_PER_EDGE = 20
ON_TRACK_TOLERANCE_M = 0.02

# Canonical OO rolling stock lengths (min, max) in metres
ROLLING_STOCK_LENGTH_RANGES = {
    "locomotive": (0.200, 0.280),
    "coach": (0.250, 0.305),
    "wagon": (0.100, 0.150),
}

# Typical OO locomotive body width (~2.7 m real)
TARGET_BODY_WIDTH_M = 0.035

# Length bands for type detection when no hint is given
COACH_MIN_LENGTH_M = 0.5
LOCOMOTIVE_MIN_LENGTH_M = 0.3

# Absolute-size bands (max horizontal dimension, millimetres)
OVERSIZE_MIN_MM = 500.0
OO_RANGE_MIN_MM = 20.0
OO_RANGE_MAX_MM = 100.0

# Yaw offsets applied on top of the track angle, keyed by forward axis name
FORWARD_AXIS_OFFSETS = {
    "POS_Z": 0.0,
    "NEG_Z": math.pi,
    "POS_X": -math.pi / 2,
    "NEG_X": math.pi / 2,
    "POS_Y": 0.0,        # Y-forward (unusual), treated as Z
    "NEG_Y": math.pi,    # Blender default export
}

DEFAULT_FORWARD_AXIS = "NEG_Z"

# Longest horizontal axis must exceed the other by this ratio to count
FORWARD_AXIS_ASPECT_RATIO = 1.5

__all__ = [
    "BASEBOARD_TOP_Y",
    "RAIL_TOP_OFFSET_M",
    "RAIL_TOP_Y",
    "MAX_SNAP_DISTANCE_M",
    "SAMPLES_PER_EDGE",
    "ON_TRACK_TOLERANCE_M",
    "ROLLING_STOCK_LENGTH_RANGES",
    "TARGET_BODY_WIDTH_M",
    "COACH_MIN_LENGTH_M",
    "LOCOMOTIVE_MIN_LENGTH_M",
    "OVERSIZE_MIN_MM",
    "OO_RANGE_MIN_MM",
    "OO_RANGE_MAX_MM",
    "FORWARD_AXIS_OFFSETS",
    "DEFAULT_FORWARD_AXIS",
    "FORWARD_AXIS_ASPECT_RATIO",
]
