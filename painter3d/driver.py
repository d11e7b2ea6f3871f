#
# PROJECT: painter3d
# MODULE: painter3d/driver.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import logging
import time
from typing import Callable, Optional

from .renderer import Renderer
from .scene import Scene

logger = logging.getLogger(__name__)

Hook = Callable[[], Optional[bool]]


class FrameDriver:
    """
    Fixed-step animation loop.

    One frame = pre hook -> timer() on every object -> renderer.draw() ->
    post hook, all synchronous.  run() paces frames so that consecutive
    frames start at least `interval` seconds apart.  A hook returning
    False stops the loop after the current frame.
    """

    def __init__(self, scene: Scene, renderer: Renderer, surface=None,
                 pre: Optional[Hook] = None, post: Optional[Hook] = None,
                 interval: Optional[float] = None,
                 clock=time.monotonic, sleep=time.sleep):
        self.scene = scene
        self.renderer = renderer
        self.surface = surface
        self.pre = pre
        self.post = post
        self.interval = renderer.config.frame_interval if interval is None else interval
        self.clock = clock
        self.sleep = sleep
        self.running = False
        self.paused = False
        self.frame_count = 0

    def stop(self):
        self.running = False

    def frame(self):
        """Run one complete frame."""
        if self.pre is not None and self.pre() is False:
            self.running = False

        if not self.paused:
            self.scene.tick()

        drawn = self.renderer.draw(self.scene, self.surface)
        self.frame_count += 1

        if self.post is not None and self.post() is False:
            self.running = False
        return drawn

    def run(self, frames: Optional[int] = None):
        """Run frames until stopped, or until `frames` have been run."""
        self.running = True
        logger.info("Frame loop started (interval %.3fs)", self.interval)
        remaining = frames
        while self.running and (remaining is None or remaining > 0):
            start = self.clock()
            self.frame()
            if remaining is not None:
                remaining -= 1
            if not self.running or remaining == 0:
                break
            wait = self.interval - (self.clock() - start)
            if wait > 0:
                self.sleep(wait)
        self.running = False
        logger.info("Frame loop stopped after %d frames", self.frame_count)
