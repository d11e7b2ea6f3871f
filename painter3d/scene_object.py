#
# PROJECT: painter3d
# MODULE: painter3d/scene_object.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from typing import Iterator, List, Optional, Union

from .math_utils import Point3D, centroid
from .node import SceneNode
from .plane import Plane


class SceneObject(SceneNode):
    """
    Composite scene node: owns points, nested child objects and planes.

    Entries (plain points and child objects alike) are positioned relative
    to this object's origin, so moving the object moves all of them.
    rotate() turns every entry around the origin and lets child objects
    rotate their own entries too, which carries a rotation down the whole
    hierarchy.

    Optional constant motion is applied by timer(), once per frame:
      speed     - translation per tick
      turn_rate - turn around the parent origin per tick (degrees)
      rotation  - rotation around own origin per tick (degrees)
    """

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0,
                 parent: Optional[SceneNode] = None):
        super().__init__(x, y, z, parent)
        self.entries: List[Union[SceneNode, 'SceneObject']] = []
        self.planes: List[Plane] = []
        self.speed: Optional[Point3D] = None
        self.turn_rate: Optional[Point3D] = None
        self.rotation: Optional[Point3D] = None

    def __repr__(self):
        return (f"{type(self).__name__}(at={self.x:.1f},{self.y:.1f},{self.z:.1f}, "
                f"entries={len(self.entries)}, planes={len(self.planes)})")

    # ── Construction ────────────────────────────────────────────────────

    def add_point(self, x: float, y: float, z: float) -> SceneNode:
        """Create a point owned by this object and return it for plane building."""
        pnt = SceneNode(x, y, z, parent=self)
        self.entries.append(pnt)
        return pnt

    def add_child(self, obj: 'SceneObject') -> 'SceneObject':
        """Nest obj under this object; it then moves and rotates like a point."""
        if obj is self:
            raise ValueError("An object cannot be its own child")
        node = self.parent
        while node is not None:
            if node is obj:
                raise ValueError("Cannot nest an object inside its own descendant")
            node = node.parent
        if isinstance(obj.parent, SceneObject):
            obj.parent.remove_child(obj)
        obj.parent = self
        self.entries.append(obj)
        return obj

    def remove_child(self, obj: 'SceneObject'):
        self.entries = [e for e in self.entries if e is not obj]
        if obj.parent is self:
            obj.parent = None

    def add_plane(self, plane: Plane) -> Plane:
        if not plane.points:
            raise ValueError("Cannot add a plane without points")
        self.planes.append(plane)
        return plane

    # ── Traversal ───────────────────────────────────────────────────────

    def children(self) -> Iterator['SceneObject']:
        for e in self.entries:
            if isinstance(e, SceneObject):
                yield e

    def walk(self) -> Iterator['SceneObject']:
        """This object followed by every nested child object, depth first."""
        yield self
        for child in self.children():
            yield from child.walk()

    def nodes(self) -> Iterator[SceneNode]:
        """Every owned entry, descending into child objects."""
        for e in self.entries:
            yield e
            if isinstance(e, SceneObject):
                yield from e.nodes()

    def clear_projections(self):
        self.clear_projection()
        for n in self.nodes():
            n.clear_projection()

    def center(self) -> Point3D:
        """Absolute centroid of the owned entries (own position when empty)."""
        if not self.entries:
            return self.absolute_position()
        return centroid(e.absolute_position() for e in self.entries)

    # ── Transforms ──────────────────────────────────────────────────────

    def scale(self, k: float):
        """Scale entry offsets. Child objects keep their own internal size."""
        for e in self.entries:
            Point3D.scale(e, k)

    def rotate(self, ax: float = 0.0, ay: float = 0.0, az: float = 0.0):
        for e in self.entries:
            e.turn(ax, ay, az)
            e.rotate(ax, ay, az)

    def set_speed(self, x: float, y: float, z: float):
        self.speed = Point3D(x, y, z)

    def set_turn(self, ax: float, ay: float, az: float):
        self.turn_rate = Point3D(ax, ay, az)

    def set_rotation(self, ax: float, ay: float, az: float):
        self.rotation = Point3D(ax, ay, az)

    def stop(self):
        """Remove all constant motion."""
        self.speed = self.turn_rate = self.rotation = None

    def timer(self):
        """Advance one fixed step: speed, then turn, then rotation."""
        if self.speed is not None:
            self.move(*self.speed)
        if self.turn_rate is not None:
            self.turn(*self.turn_rate)
        if self.rotation is not None:
            self.rotate(*self.rotation)
