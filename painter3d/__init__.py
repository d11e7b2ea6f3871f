#
# PROJECT: painter3d
# MODULE: painter3d/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from .math_utils import Point3D, Vector2D, centroid, deg2rad, rad2deg
from .node import SceneNode, Projection, FOCAL_LENGTH
from .camera import Camera
from .plane import Plane
from .scene_object import SceneObject
from .scene import Scene
from .config import RenderConfig
from .color import RGBA, rgba, with_opacity, parse_hex_color
from .surface import Surface, RecordingSurface
from .canvas import Canvas, TerminalSurface
from .renderer import Renderer
from .driver import FrameDriver
from .shapes import Cube, Dot, Curve, load_obj
from .logging_config import setup_logging
