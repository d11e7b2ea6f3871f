#
# PROJECT: painter3d
# MODULE: painter3d/plane.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import math
from typing import Callable, Iterable, List, Optional

from .color import RGBA, rgba, with_opacity
from .math_utils import Point3D, Vector2D, centroid
from .node import SceneNode

DEFAULT_FILL = rgba(255, 255, 255)
DEFAULT_LINE = rgba(170, 170, 170)
DEFAULT_LINE_WIDTH = 3.0

# Strategy signature: draw(plane, surface, opacity)
DrawFunc = Callable[['Plane', object, float], None]


def perspective_width(width: float, depth: float) -> float:
    """Thin a width for far geometry: width / max(1, depth * 1.5)."""
    return width / max(1.0, depth * 1.5)


class Plane:
    """
    Polygon made of references to scene nodes.

    Points are listed clockwise as seen from the camera for a plane that
    should face it.  The plane never owns its points: they belong to
    whichever SceneObject created them, and moving them moves the plane.

    Drawing goes through draw_func when one is injected, otherwise through
    the default fill + outline.  Either way every point must already carry
    a projection when draw() is called.
    """

    def __init__(self, points: Optional[Iterable[SceneNode]] = None,
                 fill_style: Optional[RGBA] = None,
                 line_style: Optional[RGBA] = None,
                 line_width: Optional[float] = None,
                 fill: bool = True, facing: bool = True,
                 draw_func: Optional[DrawFunc] = None):
        self.points: List[SceneNode] = []
        if points is not None:
            self.points = list(points)
            if not self.points:
                raise ValueError("Plane needs at least one point")
        self.fill = fill
        self.fill_style = fill_style
        self.line_style = line_style
        self.line_width = line_width
        self.facing = facing
        self.draw_func = draw_func

    def __repr__(self):
        return f"Plane({len(self.points)} points, facing={self.facing})"

    def __len__(self):
        return len(self.points)

    def add_point(self, pnt: SceneNode) -> SceneNode:
        self.points.append(pnt)
        return pnt

    # ── Visibility ──────────────────────────────────────────────────────

    def facing_test(self, camera: SceneNode) -> bool:
        """
        True if the plane should be drawn from the camera's point of view.

        Planes with facing disabled or fewer than three points always pass.
        Otherwise the first three points are re-projected and the turn from
        p0->p1 to p1->p2 decides: a clockwise turn on screen faces the camera.
        """
        if not self.facing or len(self.points) < 3:
            return True

        p0, p1, p2 = self.points[:3]
        p0.project(camera, force=True)
        p1.project(camera, force=True)
        p2.project(camera, force=True)

        a1 = Vector2D(p0.projected, p1.projected).angle()
        a2 = Vector2D(p1.projected, p2.projected).angle()
        d = a2 - a1
        return -math.pi < d < 0 or d > math.pi

    def center(self) -> Point3D:
        """Absolute centroid of the plane's points."""
        if len(self.points) == 1:
            return self.points[0].absolute_position()
        return centroid(p.absolute_position() for p in self.points)

    # ── Drawing ─────────────────────────────────────────────────────────

    def draw(self, surface, opacity: float = 1.0):
        if self.draw_func is not None:
            self.draw_func(self, surface, opacity)
        else:
            self.draw_default(surface, opacity)

    def draw_default(self, surface, opacity: float = 1.0):
        """Filled polygon with outlined edges, thinner with distance."""
        pts = [p.projected for p in self.points]

        if self.fill:
            style = self.fill_style or with_opacity(DEFAULT_FILL, opacity)
            surface.begin_path()
            last = pts[-1]
            surface.move_to(last.x, last.y)
            for pt in pts:
                surface.line_to(pt.x, pt.y)
            surface.fill(style)

        width = perspective_width(self.line_width or DEFAULT_LINE_WIDTH, pts[0].depth)
        style = self.line_style or with_opacity(DEFAULT_LINE, opacity)
        prev = pts[-1]
        for pt in pts:
            surface.line(prev.x, prev.y, pt.x, pt.y, style, width)
            prev = pt

    # ── Transforms (applied to the referenced points) ──────────────────

    def move(self, dx: float, dy: float, dz: float):
        for p in self.points:
            p.move(dx, dy, dz)

    def scale(self, k: float):
        for p in self.points:
            p.scale(k)

    def rotate(self, ax: float = 0.0, ay: float = 0.0, az: float = 0.0):
        for p in self.points:
            p.turn(ax, ay, az)
