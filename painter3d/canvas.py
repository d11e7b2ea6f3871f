#
# PROJECT: painter3d
# MODULE: painter3d/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import curses

from .rasterizer import arc_points, draw_line_dda, fill_polygon, quadratic_points
from .surface import Surface


class Canvas:
    __slots__ = ['w', 'h', 'grid', 'c_grid']

    # Braille dot mapping for 2x4 grid
    #  1 4
    #  2 5
    #  3 6
    #  7 8
    # 0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80
    BRAILLE_REMAP = [0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80]

    def __init__(self, w, h):
        self.w, self.h = w, h
        self.reset()

    def reset(self):
        # Grid stores 8-bit masks for 2x4 cells
        self.grid = [[0] * (self.w // 2 + 1) for _ in range(self.h // 4 + 1)]
        # Color grid stores the style of the last lit pixel per cell
        self.c_grid = [[None] * (self.w // 2 + 1) for _ in range(self.h // 4 + 1)]

    def set_pixel(self, x, y, lit, style):
        """Paint one pixel. Unlit paint erases whatever was drawn before."""
        if x < 0 or x >= self.w or y < 0 or y >= self.h: return

        cx, cy = x >> 1, y >> 2
        # (y & 3) gives row 0-3 in block, (x & 1) gives col 0-1 in block
        bit = 1 << ((y & 3) + (x & 1) * 4)
        if lit:
            self.grid[cy][cx] |= bit
            self.c_grid[cy][cx] = style
        else:
            self.grid[cy][cx] &= ~bit

    def is_lit(self, x, y) -> bool:
        if x < 0 or x >= self.w or y < 0 or y >= self.h:
            return False
        return bool(self.grid[y >> 2][x >> 1] & (1 << ((y & 3) + (x & 1) * 4)))


def render_cell_ascii(mask: int) -> str:
    """
    Renders a 2x4 cell mask as an ASCII character based on pixel density.
    Used when Braille is unavailable.
    """
    if not mask:
        return ' '

    density = bin(mask).count('1')
    chars = " .:-=+*#%@"
    return chars[density] if density < len(chars) else '@'


def render_cell_braille(mask: int) -> str:
    """Renders a 2x4 cell mask as a Unicode Braille character."""
    if not mask:
        return ' '
    b = sum(Canvas.BRAILLE_REMAP[i] for i in range(8) if mask & (1 << i))
    return chr(0x2800 + b)


class TerminalSurface(Surface):
    """
    Surface backed by a Canvas of 2x4 sub-character pixels.

    Surface units are scaled by pixel_scale and mapped with +y up and the
    origin at the canvas center.  Lines light pixels.  Fills erase what
    lies underneath, so nearer planes hide farther edges; with show_fills
    they light their pixels as well.  Stroke width is not rendered:
    every line is one pixel wide.
    """

    def __init__(self, width: int, height: int, pixel_scale: float = 0.5,
                 show_fills: bool = False):
        self.canvas = Canvas(max(0, width), max(0, height))
        self.pixel_scale = pixel_scale
        self.show_fills = show_fills
        self.width = self.canvas.w
        self.height = self.canvas.h
        self._cx = self.width * 0.5
        self._cy = self.height * 0.5
        self._path = []

    @classmethod
    def from_screen(cls, stdscr, pixel_scale: float = 0.5, show_fills: bool = False):
        """Size a surface to the curses screen, leaving the top row for a HUD."""
        th, tw = stdscr.getmaxyx()
        return cls((tw - 1) * 2, (th - 2) * 4, pixel_scale, show_fills)

    def to_pixel(self, x, y):
        return (self._cx + x * self.pixel_scale, self._cy - y * self.pixel_scale)

    # ── Surface API ─────────────────────────────────────────────────────

    def set_transform(self, width, height):
        self._cx = width * 0.5
        self._cy = height * 0.5

    def clear(self):
        self.canvas.reset()
        self._path = []

    def begin_path(self):
        self._path = []

    def move_to(self, x, y):
        self._path.append([self.to_pixel(x, y)])

    def line_to(self, x, y):
        if not self._path:
            self.move_to(x, y)
            return
        self._path[-1].append(self.to_pixel(x, y))

    def quadratic_curve_to(self, cx, cy, x, y):
        if not self._path:
            self.move_to(cx, cy)
        sub = self._path[-1]
        sub.extend(quadratic_points(sub[-1], self.to_pixel(cx, cy), self.to_pixel(x, y)))

    def arc(self, x, y, radius, start, end):
        px, py = self.to_pixel(x, y)
        pts = arc_points(px, py, radius * self.pixel_scale, start, end)
        if self._path:
            self._path[-1].extend(pts)
        else:
            self._path.append(pts)

    def fill(self, style):
        fill_polygon(self.canvas, self._path, style, lit=self.show_fills)

    def stroke(self, style, width=1.0):
        for sub in self._path:
            for a, b in zip(sub, sub[1:]):
                draw_line_dda(self.canvas, a, b, style)

    def line(self, x1, y1, x2, y2, style, width=1.0):
        draw_line_dda(self.canvas, self.to_pixel(x1, y1), self.to_pixel(x2, y2), style)

    # ── Output ──────────────────────────────────────────────────────────

    def rows(self, use_braille: bool = True):
        """Yield (row_index, [(col, char, style), ...]) for non-empty cells."""
        render = render_cell_braille if use_braille else render_cell_ascii
        for y, (row_grid, row_color) in enumerate(zip(self.canvas.grid, self.canvas.c_grid)):
            cells = [(x, render(mask), row_color[x])
                     for x, mask in enumerate(row_grid) if mask]
            if cells:
                yield y, cells

    def text(self, use_braille: bool = True) -> str:
        """Render the canvas as plain text lines (no color)."""
        n_cols = len(self.canvas.grid[0]) if self.canvas.grid else 0
        lines = [[' '] * n_cols for _ in self.canvas.grid]
        for y, cells in self.rows(use_braille):
            for x, char, _style in cells:
                lines[y][x] = char
        return '\n'.join(''.join(line).rstrip() for line in lines)

    def blit(self, stdscr, palette, use_braille: bool = True, top: int = 1):
        """Write the canvas to a curses screen, starting at row `top`."""
        th, tw = stdscr.getmaxyx()
        stdscr.erase()
        for y, cells in self.rows(use_braille):
            if y + top >= th:
                break
            for x, char, style in cells:
                if x >= tw - 1:
                    break
                try:
                    stdscr.addstr(y + top, x, char, curses.color_pair(palette.pair_for(style)))
                except curses.error:
                    # Writing the bottom-right cell raises after the write
                    pass
