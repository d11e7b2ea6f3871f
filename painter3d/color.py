#
# PROJECT: painter3d
# MODULE: painter3d/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import curses
import logging
from typing import NamedTuple, Optional

logger = logging.getLogger(__name__)


class RGBA(NamedTuple):
    """Draw style: 0-255 color channels plus alpha in [0, 1]."""
    r: int
    g: int
    b: int
    a: float = 1.0

    def __str__(self):
        return f"rgba({self.r},{self.g},{self.b},{self.a:g})"


def rgba(r, g, b, a=1.0) -> RGBA:
    return RGBA(int(r), int(g), int(b), float(a))


def with_opacity(style: RGBA, opacity: float) -> RGBA:
    """Return style with its alpha multiplied by opacity."""
    return style._replace(a=style.a * opacity)


def parse_hex_color(hex_str, default: Optional[RGBA] = None) -> Optional[RGBA]:
    """
    Turn '#RRGGBB' or 'RRGGBB' into an opaque style.

    Returns default when hex_str is missing or malformed.
    """
    if not hex_str:
        return default
    digits = str(hex_str).strip().lstrip('#')
    if len(digits) != 6:
        return default
    try:
        channels = [int(digits[i:i + 2], 16) for i in (0, 2, 4)]
    except ValueError:
        return default
    return rgba(*channels)


# --- xterm-256 lookup ---

# The 6x6x6 color cube occupies indices 16-231.
# Each axis has values: 0, 95, 135, 175, 215, 255
_CUBE_VALUES = [0, 95, 135, 175, 215, 255]

# ANSI 0-7 approximate RGB values
_ANSI8 = [
    (0, 0, 0),       # 0  black
    (128, 0, 0),     # 1  red
    (0, 128, 0),     # 2  green
    (128, 128, 0),   # 3  yellow
    (0, 0, 128),     # 4  blue
    (128, 0, 128),   # 5  magenta
    (0, 128, 128),   # 6  cyan
    (192, 192, 192), # 7  white
]


def rgb_to_nearest_xterm(r, g, b):
    """Find the nearest xterm-256 index for an (r, g, b) color.
    Searches the 6x6x6 cube and the grayscale ramp for best match."""

    def _nearest_cube_val(v):
        best_i = 0
        best_d = abs(v - _CUBE_VALUES[0])
        for i in range(1, 6):
            d = abs(v - _CUBE_VALUES[i])
            if d < best_d:
                best_d = d
                best_i = i
        return best_i

    ri = _nearest_cube_val(r)
    gi = _nearest_cube_val(g)
    bi = _nearest_cube_val(b)
    cube_idx = 16 + ri * 36 + gi * 6 + bi
    cr, cg, cb = _CUBE_VALUES[ri], _CUBE_VALUES[gi], _CUBE_VALUES[bi]
    cube_dist = (r - cr) ** 2 + (g - cg) ** 2 + (b - cb) ** 2

    # Grayscale ramp 232-255, values 8, 18, ..., 238
    gray_avg = (r + g + b) // 3
    gray_step = max(0, min(23, (gray_avg - 8 + 5) // 10))
    gray_idx = 232 + gray_step
    gv = 8 + gray_step * 10
    gray_dist = (r - gv) ** 2 + (g - gv) ** 2 + (b - gv) ** 2

    return gray_idx if gray_dist < cube_dist else cube_idx


def rgb_to_nearest_ansi8(r, g, b):
    """Nearest basic ANSI color index (0-7), for 8-color terminals."""
    best_idx = 0
    best_dist = None
    for i, (ar, ag, ab) in enumerate(_ANSI8):
        d = (r - ar) ** 2 + (g - ag) ** 2 + (b - ab) ** 2
        if best_dist is None or d < best_dist:
            best_dist = d
            best_idx = i
    return best_idx


def blend_on_black(style: RGBA):
    """Flatten alpha against a black background: terminals have no alpha."""
    a = max(0.0, min(1.0, style.a))
    return (int(style.r * a), int(style.g * a), int(style.b * a))


class Palette:
    """
    Lazily maps draw styles to curses color pairs.

    Color mode cascade:
      1. xterm-256 - 256+ colors: nearest xterm-256 index
      2. 8-color   - basic ANSI palette approximation
      3. Mono      - every style maps to pair 0
    Call start() once after curses.wrapper init.
    """

    def __init__(self, use_color: bool = True):
        self.use_color = use_color
        self.num_colors = 0
        self.pairs = {}
        self._next_pair = 1

    def start(self):
        if not self.use_color:
            return
        try:
            if not curses.has_colors():
                self.use_color = False
                return
            curses.start_color()
            try:
                curses.use_default_colors()
            except curses.error:
                pass
            self.num_colors = curses.COLORS
        except curses.error as e:
            logger.warning("Color initialization failed, using monochrome: %s", e)
            self.use_color = False

    def pair_for(self, style) -> int:
        """Return the curses pair number for a style (0 when unavailable)."""
        if not self.use_color or style is None:
            return 0
        r, g, b = blend_on_black(style)
        if self.num_colors >= 256:
            fg = rgb_to_nearest_xterm(r, g, b)
        elif self.num_colors >= 8:
            fg = rgb_to_nearest_ansi8(r, g, b)
        else:
            return 0

        pair = self.pairs.get(fg)
        if pair is None:
            pair = self._next_pair
            try:
                curses.init_pair(pair, fg, -1)
            except curses.error:
                pair = 0
            else:
                self._next_pair += 1
            self.pairs[fg] = pair
        return pair
