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
Curve Geometry for Track Edges
==============================

Samples position and direction along a straight or circular arc edge at a
normalized parameter t in [0, 1].

Angles are measured in the horizontal plane as atan2(z, x). An arc with
direction +1 sweeps toward increasing angle (counter-clockwise seen from
above in that angle space); direction -1 sweeps the other way.

Arc construction:
    The center sits on the perpendicular bisector of the chord, offset
    toward the turning side so that the circle of the given radius passes
    through both nodes. Sweeps larger than 180 degrees put the center on
    the far side of the chord.

Height along an arc is interpolated linearly in t, which is exact for the
level track the engine targets.
"""

import math
from dataclasses import dataclass

from ..vector import EPSILON, Vector3
from .graph import GraphEdge

# Tangent used when an edge has no horizontal extent
DEFAULT_TANGENT = (0.0, 0.0, 1.0)


@dataclass(frozen=True)
class CurveSample:
    """
    A point on a track edge.

    Attributes:
        position: World position on the centerline
        tangent: Unit horizontal direction of travel (from -> to)
    """
    position: Vector3
    tangent: Vector3


def _horizontal_direction(start: Vector3, end: Vector3) -> Vector3:
    delta = (end - start).horizontal()
    if delta.length < EPSILON:
        return Vector3(DEFAULT_TANGENT)
    return delta.normalized()


def sample_straight(start: Vector3, end: Vector3, t: float) -> CurveSample:
    """
    Sample a straight edge.

    Args:
        start: Start node position
        end: End node position
        t: Parameter in [0, 1]

    Returns:
        CurveSample with the interpolated position and a constant tangent
    """
    return CurveSample(
        position=start.lerp(end, t),
        tangent=_horizontal_direction(start, end),
    )


def arc_center(start: Vector3, end: Vector3, radius: float,
               sweep_angle_deg: float, direction: int) -> Vector3:
    """
    Center of the arc joining start and end.

    The half-chord is clamped to the radius, so an arc whose chord is
    longer than its diameter gets its center on the chord midpoint.

    Returns:
        Center position (y is the chord midpoint height); the midpoint
        itself when start and end coincide horizontally
    """
    dx = end.x - start.x
    dz = end.z - start.z
    chord = math.hypot(dx, dz)
    if chord < EPSILON:
        return start.lerp(end, 0.5)

    half = chord / 2.0
    h = math.sqrt(max(radius * radius - half * half, 0.0))
    if abs(sweep_angle_deg) > 180.0:
        h = -h

    # Chord rotated +90 degrees in atan2(z, x) space
    perp_x = -dz / chord
    perp_z = dx / chord

    mid = start.lerp(end, 0.5)
    return Vector3(
        mid.x + perp_x * direction * h,
        mid.y,
        mid.z + perp_z * direction * h,
    )


def sample_arc(start: Vector3, end: Vector3, radius: float,
               sweep_angle_deg: float, direction: int, t: float) -> CurveSample:
    """
    Sample a circular arc edge.

    Args:
        start: Start node position
        end: End node position
        radius: Arc radius (m)
        sweep_angle_deg: Swept angle (degrees)
        direction: +1 (left) or -1 (right)
        t: Parameter in [0, 1]

    Returns:
        CurveSample on the circle through both nodes. Falls back to the
        straight sample when start and end coincide horizontally.
    """
    if math.hypot(end.x - start.x, end.z - start.z) < EPSILON:
        return sample_straight(start, end, t)

    center = arc_center(start, end, radius, sweep_angle_deg, direction)
    start_angle = math.atan2(start.z - center.z, start.x - center.x)
    sweep = math.radians(abs(sweep_angle_deg))
    angle = start_angle + direction * sweep * t

    position = Vector3(
        center.x + radius * math.cos(angle),
        start.y + (end.y - start.y) * t,
        center.z + radius * math.sin(angle),
    )
    tangent = Vector3(
        -math.sin(angle) * direction,
        0.0,
        math.cos(angle) * direction,
    )
    return CurveSample(position=position, tangent=tangent)


def sample_edge(edge: GraphEdge, start: Vector3, end: Vector3, t: float) -> CurveSample:
    """
    Sample an edge according to its curve type.

    Args:
        edge: The graph edge
        start: Position of edge.from_node_id
        end: Position of edge.to_node_id
        t: Parameter in [0, 1]
    """
    curve = edge.curve
    if curve.is_arc:
        return sample_arc(start, end, curve.radius, curve.sweep_angle_deg, curve.direction, t)
    return sample_straight(start, end, t)


def edge_length(edge: GraphEdge, start: Vector3, end: Vector3) -> float:
    """
    Track length of an edge.

    Returns:
        Chord length for straights, radius times sweep for arcs
    """
    curve = edge.curve
    if curve.is_arc:
        return curve.radius * math.radians(abs(curve.sweep_angle_deg))
    return start.distance_to(end)


__all__ = [
    "CurveSample",
    "sample_straight",
    "arc_center",
    "sample_arc",
    "sample_edge",
    "edge_length",
]
