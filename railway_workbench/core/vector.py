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
3D Vector Utilities for Track Geometry
=======================================

Provides a lightweight 3D vector class for track placement calculations.
This avoids dependency on mathutils for pure Python operations.

Coordinate convention (layout space):
    X, Z - horizontal plane of the baseboard
    Y    - up
"""

import math

# Tolerance for vector equality and degenerate-direction checks
EPSILON = 1e-9


class Vector3:
    """Lightweight 3D vector for track geometry calculations.

    Used for node positions, curve samples, tangents and bounding box
    corners. Instances are treated as values; operations return new vectors.

    Attributes:
        x: X coordinate
        y: Y coordinate (up)
        z: Z coordinate

    Example:
        >>> start = Vector3(0.0, 0.0, 0.0)
        >>> end = Vector3(0.0, 0.0, 1.0)
        >>> start.lerp(end, 0.5)
        Vector3(0.000, 0.000, 0.500)
    """

    __slots__ = ("x", "y", "z")

    def __init__(self, x=0.0, y=0.0, z=0.0):
        """Initialize vector from coordinates or tuple/list.

        Args:
            x: X coordinate, or tuple/list of (x, y, z)
            y: Y coordinate (ignored if x is tuple/list)
            z: Z coordinate (ignored if x is tuple/list)
        """
        if isinstance(x, (list, tuple)):
            self.x = float(x[0])
            self.y = float(x[1])
            self.z = float(x[2])
        else:
            self.x = float(x)
            self.y = float(y)
            self.z = float(z)

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def up(cls) -> "Vector3":
        return cls(0.0, 1.0, 0.0)

    def __sub__(self, other):
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __add__(self, other):
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __mul__(self, scalar):
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self):
        return Vector3(-self.x, -self.y, -self.z)

    def __eq__(self, other):
        """Check equality with tolerance."""
        if not isinstance(other, Vector3):
            return NotImplemented
        return (
            abs(self.x - other.x) < EPSILON
            and abs(self.y - other.y) < EPSILON
            and abs(self.z - other.z) < EPSILON
        )

    __hash__ = None

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self):
        return f"Vector3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"

    @property
    def length(self) -> float:
        """Vector magnitude (length)."""
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    @property
    def length_squared(self) -> float:
        """Squared length (avoids sqrt for comparisons)."""
        return self.x**2 + self.y**2 + self.z**2

    def normalized(self) -> "Vector3":
        """Return unit vector in same direction.

        Returns:
            Unit vector, or zero vector if length is zero.
        """
        length = self.length
        if length > 0:
            return Vector3(self.x / length, self.y / length, self.z / length)
        return Vector3(0.0, 0.0, 0.0)

    def horizontal(self) -> "Vector3":
        """Project onto the horizontal (XZ) plane."""
        return Vector3(self.x, 0.0, self.z)

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def lerp(self, other: "Vector3", t: float) -> "Vector3":
        """Linear interpolation toward another vector.

        Args:
            other: Target vector (returned at t=1)
            t: Interpolation parameter

        Returns:
            Interpolated vector
        """
        return Vector3(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t,
            self.z + (other.z - self.z) * t,
        )

    def distance_to(self, other: "Vector3") -> float:
        return (other - self).length

    def horizontal_distance_to(self, other: "Vector3") -> float:
        """Distance to another point measured in the XZ plane (Y ignored)."""
        return math.hypot(other.x - self.x, other.z - self.z)

    def to_tuple(self) -> tuple:
        """Convert to (x, y, z) tuple."""
        return (self.x, self.y, self.z)


__all__ = ["Vector3", "EPSILON"]
