#
# PROJECT: painter3d
# MODULE: painter3d/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import curses
import logging
import random
import time

from .canvas import TerminalSurface
from .color import Palette, parse_hex_color, rgba
from .config import RenderConfig
from .driver import FrameDriver
from .renderer import Renderer
from .scene import Scene
from .scene_object import SceneObject
from .shapes import Cube, Curve, Dot, load_obj

logger = logging.getLogger(__name__)

MAIN_LINE = rgba(208, 221, 20)


def build_demo_scene(model=None, model_size=60.0, line_style=None,
                     line_width=None) -> Scene:
    """Spinning cube (or OBJ model) with an orbiting moon, a ring of dots and a curve."""
    scene = Scene()
    style = dict(line_style=line_style or MAIN_LINE, line_width=line_width)

    if model:
        main = load_obj(model, size=model_size, **style)
    else:
        main = Cube(60, **style)
    main.set_rotation(0.7, 1.1, 0.0)
    scene.add(main)

    moon = Cube(15, line_style=rgba(0, 200, 255), line_width=line_width)
    moon.move_to(140, 0, 0)
    moon.set_rotation(0.0, 0.0, 3.0)
    main.add_child(moon)

    ring = SceneObject()
    for i in range(12):
        dot = ring.add_child(Dot(4, rgba(255, 120, 0), x=200, y=-40))
        dot.turn(0, i * 30, 0)
    ring.set_rotation(0, 1.5, 0)
    scene.add(ring)

    scene.add(Curve((-200, -120, 0), (0, 40, 0), (200, -120, 0)))
    return scene


class DemoApp:
    """
    Interactive curses demo: input handling, camera control, rendering, HUD.
    """

    def __init__(self, stdscr, args):
        self.stdscr = stdscr

        # ── Curses setup ────────────────────────────────────────────────
        curses.curs_set(0)
        stdscr.nodelay(True)

        # ── RenderConfig from terminal detection + CLI overrides ────────
        config = RenderConfig.detect_terminal()
        if args.mono:
            config.use_color = False
        if args.ascii:
            config.use_braille = False
        if args.no_facing:
            config.use_facing = False
        config.set_opacity(args.opacity)
        config.frame_interval = args.interval
        config.pixel_scale = args.scale
        config.line_width = args.line_width
        self.config = config

        self.palette = Palette(config.use_color)
        self.palette.start()
        self.mono_palette = Palette(False)

        line_style = parse_hex_color(args.line_color)
        if args.line_color and line_style is None:
            logger.warning("Ignoring malformed --line-color %r", args.line_color)
        self.scene = build_demo_scene(args.model, line_style=line_style,
                                      line_width=config.line_width)
        self.renderer = Renderer(config)
        self.surface = None
        self.show_fills = args.show_fills

        self.driver = FrameDriver(self.scene, self.renderer,
                                  pre=self.before_frame, post=self.after_frame)

        # ── Frame counter ───────────────────────────────────────────────
        self.frame_start = time.time()
        self.frames = 0
        self.fps = 0
        self.last_fps_time = time.time()

    def acquire_surface(self) -> bool:
        """Size a fresh surface to the terminal. False if the window is too small."""
        surface = TerminalSurface.from_screen(self.stdscr, self.config.pixel_scale,
                                              self.show_fills)
        if not self.renderer.attach(surface):
            self.surface = None
            return False
        self.surface = surface
        self.driver.surface = surface
        return True

    # ────────────────────────────────────────────────────────────────────
    # Input
    # ────────────────────────────────────────────────────────────────────
    def handle_input(self):
        try:
            key = self.stdscr.getch()
        except curses.error:
            key = -1

        if key == -1:
            return True

        camera = self.scene.camera
        if key == ord('q'):
            return False
        elif key == curses.KEY_UP:
            camera.pan(0, 10)
        elif key == curses.KEY_DOWN:
            camera.pan(0, -10)
        elif key == curses.KEY_RIGHT:
            camera.pan(10, 0)
        elif key == curses.KEY_LEFT:
            camera.pan(-10, 0)
        elif key in (ord('='), ord('+')):
            camera.zoom(25)
        elif key == ord('-'):
            camera.zoom(-25)
        elif key == ord('0'):
            camera.reset()
        elif key == ord('p'):
            self.driver.paused = not self.driver.paused
        elif key == ord(' '):
            cube = Cube(random.uniform(10, 30),
                        line_style=rgba(random.randint(80, 255), random.randint(80, 255), 255))
            cube.move_to(random.uniform(-250, 250), random.uniform(-150, 150),
                         random.uniform(-100, 300))
            cube.set_rotation(random.uniform(-3, 3), random.uniform(-3, 3), 0)
            self.scene.add(cube)
        elif key == ord('c'):
            self.config.use_color = not self.config.use_color
        elif key == ord('b'):
            self.config.use_braille = not self.config.use_braille
        elif key == ord('f'):
            self.config.use_facing = not self.config.use_facing
        elif key == curses.KEY_RESIZE:
            self.surface = None
        return True

    # ────────────────────────────────────────────────────────────────────
    # Frame hooks
    # ────────────────────────────────────────────────────────────────────
    def before_frame(self):
        self.frame_start = time.time()
        if not self.handle_input():
            return False
        if self.surface is None and not self.acquire_surface():
            logger.debug("Terminal too small, skipping frame")
        return None

    def after_frame(self):
        if self.surface is None:
            return None
        palette = self.palette if self.config.use_color else self.mono_palette
        self.surface.blit(self.stdscr, palette, self.config.use_braille)
        self.draw_hud()
        self.stdscr.refresh()
        return None

    def draw_hud(self):
        th, tw = self.stdscr.getmaxyx()

        self.frames += 1
        now = time.time()
        if now - self.last_fps_time >= 1.0:
            self.fps = self.frames
            self.frames = 0
            self.last_fps_time = now

        ms = (now - self.frame_start) * 1000
        cam = self.scene.camera
        modestr = (f"{'COL' if self.config.use_color else 'MON'} "
                   f"{'BRA' if self.config.use_braille else 'ASC'} "
                   f"{'FACE' if self.config.use_facing else 'ALL'}"
                   f"{' PAUSED' if self.driver.paused else ''}")
        hdr = (f" OBJ:{len(list(self.scene.walk()))}"
               f" | CAM:{cam.x:.0f},{cam.y:.0f},{cam.z:.0f}"
               f" | FPS:{self.fps}"
               f" | {ms:.1f}ms"
               f" | [{modestr}] ")
        try:
            self.stdscr.addstr(0, 0, hdr.center(tw - 1, '='),
                               curses.color_pair(0) | curses.A_BOLD)
        except curses.error:
            pass

    def run(self):
        self.driver.run()


def main(stdscr, args):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, args)
    app.run()
