#
# PROJECT: painter3d
# MODULE: painter3d/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import math

TWO_PI = 2 * math.pi


def deg2rad(deg: float) -> float:
    return deg * TWO_PI / 360


def rad2deg(rad: float) -> float:
    return rad * 360 / TWO_PI


class Point3D:
    """Mutable 3-component point. All operations modify the point in place."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __repr__(self):
        return f"{type(self).__name__}({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other):
        if isinstance(other, Point3D):
            return Point3D(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Point3D):
            return Point3D(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def copy(self) -> 'Point3D':
        return Point3D(self.x, self.y, self.z)

    def move_to(self, x: float, y: float, z: float):
        """Move point to an absolute position."""
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def move(self, dx: float, dy: float, dz: float):
        """Translate point by a delta."""
        self.x += dx
        self.y += dy
        self.z += dz

    def scale(self, k: float):
        """Multiply all three components by k."""
        self.x *= k
        self.y *= k
        self.z *= k

    def turn(self, ax: float = 0.0, ay: float = 0.0, az: float = 0.0):
        """
        Turn point around the origin by angles in degrees.

        Applied in a fixed order: around the x axis, then y, then z.  Each
        step works on the output of the previous one, so the result depends
        on the order and callers must decompose angles accordingly.
        """
        if ax:
            r = deg2rad(ax)
            c, s = math.cos(r), math.sin(r)
            self.y, self.z = self.y * c - self.z * s, self.y * s + self.z * c

        if ay:
            r = deg2rad(ay)
            c, s = math.cos(r), math.sin(r)
            self.z, self.x = self.z * c - self.x * s, self.z * s + self.x * c

        if az:
            r = deg2rad(az)
            c, s = math.cos(r), math.sin(r)
            self.x, self.y = self.x * c - self.y * s, self.x * s + self.y * c

    def length(self) -> float:
        """Horizontal length: distance from the y axis (y is not counted)."""
        return math.sqrt(self.x * self.x + self.z * self.z)


def centroid(points) -> Point3D:
    """Unweighted mean of an iterable of Point3D. Empty input gives the origin."""
    sx = sy = sz = 0.0
    n = 0
    for p in points:
        sx += p.x
        sy += p.y
        sz += p.z
        n += 1
    if n == 0:
        return Point3D()
    return Point3D(sx / n, sy / n, sz / n)


class Vector2D:
    """
    2D vector from (x1, y1) to (x2, y2) in projected screen space.

    Uses a screen-down sign convention for the y delta (dy = y1 - y2), so
    angles grow clockwise on a +y-up surface.  Accepts another Vector2D, two
    point-likes with .x/.y, or four scalars.
    """
    __slots__ = ('x1', 'y1', 'x2', 'y2')

    def __init__(self, a, b=None, c=None, d=None):
        if isinstance(a, Vector2D):
            self.x1, self.y1, self.x2, self.y2 = a.x1, a.y1, a.x2, a.y2
        elif hasattr(a, 'x') and hasattr(a, 'y'):
            self.x1, self.y1 = float(a.x), float(a.y)
            self.x2, self.y2 = float(b.x), float(b.y)
        else:
            self.x1, self.y1, self.x2, self.y2 = float(a), float(b), float(c), float(d)

    def __repr__(self):
        return (f"Vector2D(({self.x1:.2f}, {self.y1:.2f}) -> "
                f"({self.x2:.2f}, {self.y2:.2f}))")

    def dx(self) -> float:
        return self.x2 - self.x1

    def dy(self) -> float:
        return self.y1 - self.y2

    def angle(self) -> float:
        """Direction in radians, normalized to [0, 2*pi)."""
        a = math.atan2(self.dy(), self.dx())
        if a < 0:
            a += TWO_PI
        return a

    def length(self) -> float:
        return math.hypot(self.dx(), self.dy())

    def _set_end(self, ang: float, length: float):
        self.x2 = self.x1 + length * math.cos(ang)
        self.y2 = self.y1 - length * math.sin(ang)

    def set_angle(self, ang: float):
        """Point the vector in direction ang, keeping its length."""
        self._set_end(ang, self.length())

    def rotate(self, ang: float):
        """Rotate the end point around the start point by ang radians."""
        self._set_end(self.angle() + ang, self.length())

    def set_length(self, length: float):
        """Move the end point along the current direction to the given length."""
        self._set_end(self.angle(), length)

    def distance(self, pnt):
        """
        Perpendicular vector from this segment to pnt.

        Returns None when the foot of the perpendicular falls outside the
        segment.
        """
        v = Vector2D(self.x1, self.y1, pnt.x, pnt.y)
        ang = self.angle() - v.angle()
        if ang < 0:
            ang += TWO_PI
        along = v.length() * math.cos(ang)
        if along < 0 or along > self.length():
            return None
        foot = Vector2D(self)
        foot.set_length(along)
        return Vector2D(foot.x2, foot.y2, pnt.x, pnt.y)
