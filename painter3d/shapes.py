#
# PROJECT: painter3d
# MODULE: painter3d/shapes.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import logging
import math

from .color import rgba, with_opacity
from .plane import Plane
from .scene_object import SceneObject

logger = logging.getLogger(__name__)

CUBE_VERTICES = [
    (-1, -1, -1), (+1, -1, -1), (+1, +1, -1), (-1, +1, -1),
    (-1, -1, +1), (+1, -1, +1), (+1, +1, +1), (-1, +1, +1),
]

# Wound so that each face passes the facing test exactly when it
# points at the camera.
CUBE_FACES = [
    (0, 1, 2, 3),  # front (z = -1)
    (4, 7, 6, 5),  # back
    (3, 2, 6, 7),  # y = +1
    (0, 4, 5, 1),  # y = -1
    (0, 3, 7, 4),  # left
    (1, 5, 6, 2),  # right
]


def build_mesh(obj: SceneObject, vertices, faces, **style) -> SceneObject:
    """Add vertices as points of obj and faces (index lists) as planes."""
    pnts = [obj.add_point(*v) for v in vertices]
    for face in faces:
        obj.add_plane(Plane([pnts[i] for i in face], **style))
    return obj


class Cube(SceneObject):
    """Cube with half-edge `size`, centered on its origin."""

    def __init__(self, size: float = 1.0, fill_style=None, line_style=None,
                 line_width=None, x=0.0, y=0.0, z=0.0):
        super().__init__(x, y, z)
        build_mesh(self, CUBE_VERTICES, CUBE_FACES, fill_style=fill_style,
                   line_style=line_style, line_width=line_width)
        self.scale(size)


class Dot(SceneObject):
    """Round dot drawn at the object's own origin, shrinking with distance."""

    DEFAULT_STYLE = rgba(170, 170, 170)

    def __init__(self, size: float = 2.0, fill_style=None, x=0.0, y=0.0, z=0.0):
        super().__init__(x, y, z)
        self.size = size
        self.fill_style = fill_style
        self.add_plane(Plane([self], facing=False, draw_func=self.draw_dot))

    def draw_dot(self, plane, surface, opacity):
        p = self.projected
        style = self.fill_style or with_opacity(self.DEFAULT_STYLE, opacity)
        radius = self.size / (p.depth * 1.5)
        surface.begin_path()
        surface.arc(p.x, p.y, radius, 0, 2 * math.pi)
        surface.fill(style)
        surface.stroke(style)


class Curve(SceneObject):
    """Quadratic curve from a1 to a3, bending towards a2."""

    DEFAULT_STYLE = rgba(210, 210, 210)
    # Pull the control point outwards so the curve passes closer to a2.
    CONTROL_SCALE = 1.3

    def __init__(self, a1, a2, a3, line_style=None):
        super().__init__()
        self.line_style = line_style
        self.start = self.add_point(*a1)
        self.control = self.add_point(*a2)
        self.control.scale(self.CONTROL_SCALE)
        self.end = self.add_point(*a3)
        self.add_plane(Plane([self.start, self.control, self.end],
                             facing=False, draw_func=self.draw_curve))

    def draw_curve(self, plane, surface, opacity):
        p1, p2, p3 = (p.projected for p in plane.points)
        style = self.line_style or with_opacity(self.DEFAULT_STYLE, opacity)
        surface.begin_path()
        surface.move_to(p1.x, p1.y)
        surface.quadratic_curve_to(p2.x, p2.y, p3.x, p3.y)
        surface.stroke(style)


def read_obj(filename):
    """Parse vertex and face lists from a Wavefront OBJ file."""
    vertices, faces = [], []
    with open(filename, 'r') as f:
        for line in f:
            if line.startswith('v '):
                vertices.append([float(x) for x in line.split()[1:4]])
            elif line.startswith('f '):
                # Handle v/vt/vn format by splitting by '/'
                face = [int(x.split('/')[0]) - 1 for x in line.split()[1:]]
                faces.append(face)
    return vertices, faces


def load_obj(filename, size: float = 1.0, **style) -> SceneObject:
    """
    Build an object from an OBJ file, scaled by size.

    Falls back to the demo cube geometry when the file cannot be read or
    holds no faces.
    """
    try:
        vertices, faces = read_obj(filename)
    except (OSError, ValueError) as e:
        logger.warning("Could not load '%s': %s", filename, e)
        vertices, faces = [], []

    faces = [f for f in faces if f and all(0 <= i < len(vertices) for i in f)]
    if not vertices or not faces:
        logger.warning("No usable geometry in '%s', using demo cube", filename)
        vertices, faces = CUBE_VERTICES, CUBE_FACES

    obj = build_mesh(SceneObject(), vertices, faces, **style)
    obj.scale(size)
    logger.info("Loaded %s: %d points, %d planes", filename, len(obj.entries), len(obj.planes))
    return obj
