#
# PROJECT: painter3d
# MODULE: painter3d/node.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from typing import NamedTuple, Optional

from .math_utils import Point3D

# Distance at which one world unit maps to one surface unit.
FOCAL_LENGTH = 600.0


class Projection(NamedTuple):
    """Projected surface point. depth is the perspective divisor (> 0 = in front)."""
    x: float
    y: float
    depth: float


class SceneNode(Point3D):
    """
    Point positioned relative to an optional parent node.

    The parent link is a plain reference and does not own anything; the
    owning SceneObject keeps the node in its entry list.  `projected` is a
    per-frame cache filled by project() and emptied by clear_projection().
    """
    __slots__ = ('parent', 'projected')

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0,
                 parent: Optional['SceneNode'] = None):
        super().__init__(x, y, z)
        self.parent = parent
        self.projected: Optional[Projection] = None

    def absolute_position(self) -> Point3D:
        """Local position plus every ancestor's position, resolved on each call."""
        pos = Point3D(self.x, self.y, self.z)
        if self.parent is not None:
            pos.move(*self.parent.absolute_position())
        return pos

    def project(self, camera: 'SceneNode', force: bool = False) -> bool:
        """
        Project this node onto the surface as seen from camera.

        Uses the cached projection unless it is empty or force is set.
        Returns True when the node lies in front of the camera.
        """
        if self.projected is None or force:
            cam = camera.absolute_position()
            rel = self.absolute_position() - cam

            div = rel.z / FOCAL_LENGTH
            if div != 0:
                x, y = rel.x / div, rel.y / div
            else:
                x, y = rel.x, rel.y

            # Fixed vertical compensation for the camera height
            self.projected = Projection(x, y + cam.y, div)

        return self.projected.depth > 0

    def clear_projection(self):
        self.projected = None

    def rotate(self, ax: float = 0.0, ay: float = 0.0, az: float = 0.0):
        """Plain nodes have nothing to rotate around themselves."""
