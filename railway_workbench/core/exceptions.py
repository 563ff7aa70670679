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
Placement Exceptions
====================

Only structural problems with the track graph are fatal. Geometry and
search functions never raise; they return None or sentinel values.
"""


class TrackPlacementError(Exception):
    """Base class for placement engine errors."""


class TrackGraphError(TrackPlacementError, ValueError):
    """Track graph data is structurally invalid."""


class InvalidEdgeError(TrackGraphError):
    """An edge references a node that does not exist (or duplicates an id)."""

    def __init__(self, edge_id: str, message: str):
        self.edge_id = edge_id
        super().__init__(f"Edge '{edge_id}': {message}")


__all__ = [
    "TrackPlacementError",
    "TrackGraphError",
    "InvalidEdgeError",
]
