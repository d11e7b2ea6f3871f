"""Tests for the terminal surface and rasterizer."""

import math

import pytest

from painter3d import Cube, Renderer, RenderConfig, Scene, TerminalSurface, rgba
from painter3d.canvas import Canvas, render_cell_ascii, render_cell_braille
from painter3d.rasterizer import arc_points, draw_line_dda, fill_polygon, quadratic_points

WHITE = rgba(255, 255, 255)
RED = rgba(255, 0, 0)


def lit_pixels(canvas):
    return {(x, y) for y in range(canvas.h) for x in range(canvas.w) if canvas.is_lit(x, y)}


class TestCanvas:

    def test_set_pixel_and_bounds(self):
        c = Canvas(8, 8)
        c.set_pixel(3, 5, True, RED)
        c.set_pixel(-1, 0, True, RED)
        c.set_pixel(8, 0, True, RED)
        assert lit_pixels(c) == {(3, 5)}
        assert c.c_grid[1][1] == RED

    def test_unlit_paint_erases(self):
        c = Canvas(4, 4)
        c.set_pixel(1, 1, True, RED)
        c.set_pixel(1, 1, False, WHITE)
        assert lit_pixels(c) == set()

    def test_cell_rendering(self):
        assert render_cell_braille(0) == ' '
        assert render_cell_braille(0xFF) == chr(0x28FF)
        assert render_cell_ascii(0) == ' '
        assert render_cell_ascii(0b1) == '.'
        assert render_cell_ascii(0xFF) == '%'


class TestRasterizer:

    def test_horizontal_line(self):
        c = Canvas(10, 4)
        draw_line_dda(c, (1, 2), (6, 2), RED)
        assert lit_pixels(c) == {(x, 2) for x in range(1, 7)}

    def test_single_point_line(self):
        c = Canvas(4, 4)
        draw_line_dda(c, (2, 2), (2, 2), RED)
        assert lit_pixels(c) == {(2, 2)}

    def test_fill_square(self):
        c = Canvas(10, 10)
        fill_polygon(c, [[(2, 2), (6, 2), (6, 6), (2, 6)]], RED)
        assert lit_pixels(c) == {(x, y) for x in range(2, 6) for y in range(2, 6)}

    def test_fill_ignores_degenerate_subpaths(self):
        c = Canvas(10, 10)
        fill_polygon(c, [[(1, 1), (5, 5)]], RED)
        assert lit_pixels(c) == set()

    def test_quadratic_endpoints(self):
        pts = quadratic_points((0, 0), (5, 10), (10, 0), segments=4)
        assert len(pts) == 4
        assert pts[-1] == pytest.approx((10, 0))
        assert pts[1] == pytest.approx((5, 5))

    def test_arc_is_closed_circle(self):
        pts = arc_points(10, 10, 4, 0, 2 * math.pi)
        assert pts[0] == pytest.approx(pts[-1])
        for x, y in pts:
            assert math.hypot(x - 10, y - 10) == pytest.approx(4)


class TestTerminalSurface:

    def test_origin_centered_y_up(self):
        s = TerminalSurface(20, 20, pixel_scale=1.0)
        assert s.to_pixel(0, 0) == (10, 10)
        assert s.to_pixel(5, 5) == (15, 5)

    def test_line_in_surface_units(self):
        s = TerminalSurface(20, 20, pixel_scale=1.0)
        s.line(-5, 0, 5, 0, RED)
        assert lit_pixels(s.canvas) == {(x, 10) for x in range(5, 16)}

    def test_fill_occludes_earlier_lines(self):
        s = TerminalSurface(40, 40, pixel_scale=1.0)
        s.line(-10, 0, 10, 0, RED)
        s.begin_path()
        s.move_to(-4, -4)
        for x, y in [(4, -4), (4, 4), (-4, 4)]:
            s.line_to(x, y)
        s.fill(WHITE)
        lit = lit_pixels(s.canvas)
        assert (20, 20) not in lit
        assert (11, 20) in lit and (29, 20) in lit

    def test_show_fills_lights_pixels(self):
        s = TerminalSurface(40, 40, pixel_scale=1.0, show_fills=True)
        s.begin_path()
        s.arc(0, 0, 5, 0, 2 * math.pi)
        s.fill(WHITE)
        assert s.canvas.is_lit(20, 20)

    def test_quadratic_stroke(self):
        s = TerminalSurface(40, 40, pixel_scale=1.0)
        s.begin_path()
        s.move_to(-10, 0)
        s.quadratic_curve_to(0, 10, 10, 0)
        s.stroke(RED)
        lit = lit_pixels(s.canvas)
        assert (10, 20) in lit and (30, 20) in lit
        assert (20, 15) in lit  # curve apex at y = 5

    def test_clear(self):
        s = TerminalSurface(20, 20)
        s.line(-5, 0, 5, 0, RED)
        s.clear()
        assert lit_pixels(s.canvas) == set()

    def test_text_output_of_rendered_cube(self):
        scene = Scene()
        scene.add(Cube(60))
        surface = TerminalSurface(80, 80, pixel_scale=0.5)
        renderer = Renderer(RenderConfig())
        assert renderer.attach(surface)
        renderer.draw(scene)
        text = surface.text(use_braille=False)
        assert text.strip()
        assert len(text.splitlines()) <= 21

    def test_from_screen_dimensions(self):
        class FakeScreen:
            def getmaxyx(self):
                return (24, 81)

        s = TerminalSurface.from_screen(FakeScreen())
        assert (s.width, s.height) == (160, 88)

    def test_blit_writes_cells(self, monkeypatch):
        import painter3d.canvas as canvas_mod
        monkeypatch.setattr(canvas_mod.curses, "color_pair", lambda n: n)

        class FakeScreen:
            def __init__(self):
                self.written = []

            def getmaxyx(self):
                return (10, 10)

            def erase(self):
                self.written.clear()

            def addstr(self, y, x, text, attr=0):
                self.written.append((y, x, text, attr))

        class FakePalette:
            def pair_for(self, style):
                return 7

        s = TerminalSurface(8, 8, pixel_scale=1.0)
        s.canvas.set_pixel(0, 0, True, RED)
        screen = FakeScreen()
        s.blit(screen, FakePalette())
        assert screen.written == [(1, 0, chr(0x2801), 7)]
