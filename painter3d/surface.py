#
# PROJECT: painter3d
# MODULE: painter3d/surface.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from abc import ABC, abstractmethod


class Surface(ABC):
    """
    2D drawing capability consumed by the renderer and by plane draw strategies.

    Coordinates are in surface units with +y up and the origin at the
    surface center; set_transform() establishes that convention once.
    Path calls build one current path that fill()/stroke() consume.
    """

    width = 0
    height = 0

    @abstractmethod
    def set_transform(self, width: int, height: int):
        """Fix the +y-up, origin-centered transform for a width x height surface."""

    @abstractmethod
    def clear(self):
        """Erase the whole surface."""

    @abstractmethod
    def begin_path(self):
        ...

    @abstractmethod
    def move_to(self, x: float, y: float):
        ...

    @abstractmethod
    def line_to(self, x: float, y: float):
        ...

    @abstractmethod
    def quadratic_curve_to(self, cx: float, cy: float, x: float, y: float):
        ...

    @abstractmethod
    def arc(self, x: float, y: float, radius: float, start: float, end: float):
        ...

    @abstractmethod
    def fill(self, style):
        """Fill the current path."""

    @abstractmethod
    def stroke(self, style, width: float = 1.0):
        """Stroke the current path."""

    def line(self, x1: float, y1: float, x2: float, y2: float, style, width: float = 1.0):
        """Stroke a single segment."""
        self.begin_path()
        self.move_to(x1, y1)
        self.line_to(x2, y2)
        self.stroke(style, width)


class RecordingSurface(Surface):
    """
    Headless surface that records every drawing call.

    `calls` is a list of (op, args) tuples; `frames` counts clear() calls.
    """

    def __init__(self, width: int = 640, height: int = 480):
        self.calls = []
        self.frames = 0
        self.width = width
        self.height = height

    def _record(self, op, *args):
        self.calls.append((op, args))

    def set_transform(self, width, height):
        self.width, self.height = width, height
        self._record('set_transform', width, height)

    def clear(self):
        self.frames += 1
        self.calls.clear()
        self._record('clear')

    def begin_path(self):
        self._record('begin_path')

    def move_to(self, x, y):
        self._record('move_to', x, y)

    def line_to(self, x, y):
        self._record('line_to', x, y)

    def quadratic_curve_to(self, cx, cy, x, y):
        self._record('quadratic_curve_to', cx, cy, x, y)

    def arc(self, x, y, radius, start, end):
        self._record('arc', x, y, radius, start, end)

    def fill(self, style):
        self._record('fill', style)

    def stroke(self, style, width=1.0):
        self._record('stroke', style, width)

    def line(self, x1, y1, x2, y2, style, width=1.0):
        self._record('line', x1, y1, x2, y2, style, width)

    def ops(self):
        """Names of the recorded calls, in order."""
        return [op for op, _ in self.calls]
