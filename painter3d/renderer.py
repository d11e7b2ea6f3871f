#
# PROJECT: painter3d
# MODULE: painter3d/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import logging
from typing import List, Optional

from .config import RenderConfig
from .plane import Plane
from .scene import Scene

logger = logging.getLogger(__name__)


class Renderer:
    """
    Painter's-algorithm renderer.

    draw(scene, surface) paints one frame.  The candidate plane buffer only
    lives for the duration of a call; nothing carries over between frames.
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config if config is not None else RenderConfig()
        self.surface = None
        self.planes: List[Plane] = []

    def attach(self, surface) -> bool:
        """
        Bind a drawing surface and fix its +y-up, origin-centered transform.

        Returns False, keeping no reference, if the surface is missing or
        has no drawable area.  Retrying is left to the caller.
        """
        if surface is None:
            logger.warning("No drawing surface to attach")
            return False
        width = getattr(surface, 'width', 0)
        height = getattr(surface, 'height', 0)
        if width <= 0 or height <= 0:
            logger.warning("Surface has no drawable area (%sx%s)", width, height)
            return False
        surface.set_transform(width, height)
        self.surface = surface
        logger.debug("Attached %s surface %sx%s", type(surface).__name__, width, height)
        return True

    def draw(self, scene: Scene, surface=None) -> List[Plane]:
        """
        Render one frame and return the planes drawn, back to front.

        Pipeline:
          1. Clear every cached projection
          2. Gather planes, dropping those facing away from the camera
          3. Key each plane by its world-space center z
          4. Sort farthest first
          5. Project every point, dropping planes with a point behind the camera
          6. Clear the surface
          7. Draw survivors in order
          8. Reset the candidate buffer
        """
        surface = surface if surface is not None else self.surface
        camera = scene.camera
        objects = list(scene.walk())

        # ── 1. Invalidate ───────────────────────────────────────────────
        for obj in objects:
            obj.clear_projections()

        try:
            # ── 2. Gather + facing cull ─────────────────────────────────
            use_facing = self.config.use_facing
            gathered = 0
            for obj in objects:
                for plane in obj.planes:
                    gathered += 1
                    if not use_facing or plane.facing_test(camera):
                        self.planes.append(plane)

            # ── 3-4. Depth key + back-to-front sort ─────────────────────
            # World-space key: only depth-correct for the default camera pose.
            keyed = [(plane.center().z, plane) for plane in self.planes]
            keyed.sort(key=lambda entry: entry[0], reverse=True)

            # ── 5. Force-project & final cull ───────────────────────────
            visible = []
            for _z, plane in keyed:
                if all(p.project(camera, force=True) for p in plane.points):
                    visible.append(plane)

            logger.debug("Frame: %d planes, %d facing, %d drawn",
                         gathered, len(self.planes), len(visible))

            # ── 6-7. Clear and paint ────────────────────────────────────
            if surface is not None:
                surface.clear()
                opacity = self.config.opacity
                for plane in visible:
                    plane.draw(surface, opacity)
        finally:
            # ── 8. Reset ────────────────────────────────────────────────
            self.planes = []
        return visible
