#
# PROJECT: painter3d
# MODULE: painter3d/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from .node import SceneNode

DEFAULT_POSITION = (0.0, 0.0, -600.0)


class Camera(SceneNode):
    """
    Viewpoint of the scene.

    A root scene node, looking along +z from (0, 0, -600) by default.  It is
    moved with the regular point API between frames; pan() and zoom() are
    shortcuts for interactive drivers.
    """
    __slots__ = ()

    def __init__(self, x: float = DEFAULT_POSITION[0], y: float = DEFAULT_POSITION[1],
                 z: float = DEFAULT_POSITION[2]):
        super().__init__(x, y, z, parent=None)

    def pan(self, dx: float, dy: float):
        """Shift the camera sideways / vertically."""
        self.move(dx, dy, 0.0)

    def zoom(self, delta: float):
        """Move the camera along the view axis. Positive = closer to the scene."""
        self.move(0.0, 0.0, delta)

    def reset(self):
        self.move_to(*DEFAULT_POSITION)
