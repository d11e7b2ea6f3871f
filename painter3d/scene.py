#
# PROJECT: painter3d
# MODULE: painter3d/scene.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from typing import Iterator, Optional

from .camera import Camera
from .scene_object import SceneObject


class Scene:
    """
    Registry of renderable objects plus the camera.

    Objects are registered explicitly with add().  Child objects nested
    inside a registered object are reached through walk() and need no
    registration of their own.
    """

    def __init__(self, camera: Optional[Camera] = None):
        self.objects = []  # list of top-level SceneObject
        self.camera = camera if camera is not None else Camera()

    def __len__(self):
        return len(self.objects)

    def add(self, obj: SceneObject) -> SceneObject:
        """Register an object. Registering the same object twice is a no-op."""
        if not any(o is obj for o in self.objects):
            self.objects.append(obj)
        return obj

    def remove(self, obj: SceneObject):
        self.objects = [o for o in self.objects if o is not obj]

    def clear(self):
        """Remove all objects from the scene."""
        self.objects.clear()

    def walk(self) -> Iterator[SceneObject]:
        """Every registered object and its nested children, each exactly once."""
        seen = set()
        for obj in self.objects:
            for o in obj.walk():
                if id(o) not in seen:
                    seen.add(id(o))
                    yield o

    def tick(self):
        """Run one timer step on every object."""
        for obj in list(self.walk()):
            obj.timer()
