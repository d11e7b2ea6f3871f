#
# PROJECT: painter3d
# MODULE: painter3d/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import math


def draw_line_dda(canvas, p1, p2, style, lit=True):
    """
    Draws a line using the DDA algorithm.
    p1, p2 are (x, y) pixel coordinates; later draws overwrite earlier ones.
    """
    x1, y1 = int(round(p1[0])), int(round(p1[1]))
    x2, y2 = int(round(p2[0])), int(round(p2[1]))

    dx = x2 - x1
    dy = y2 - y1
    if dx == 0 and dy == 0:
        canvas.set_pixel(x1, y1, lit, style)
        return

    step = abs(dx) if abs(dx) > abs(dy) else abs(dy)
    x_inc = dx / step
    y_inc = dy / step

    cx, cy = float(x1), float(y1)
    for _ in range(step + 1):
        canvas.set_pixel(int(round(cx)), int(round(cy)), lit, style)
        cx += x_inc; cy += y_inc


def fill_polygon(canvas, subpaths, style, lit=True):
    """
    Scanline fill of one or more closed polygons using the even-odd rule.
    Each subpath is a list of (x, y) pixel coordinates.
    """
    edges = []
    y_min, y_max = math.inf, -math.inf
    for pts in subpaths:
        if len(pts) < 3:
            continue
        prev = pts[-1]
        for pt in pts:
            if prev[1] != pt[1]:
                edges.append((prev, pt))
            prev = pt
            y_min = min(y_min, pt[1])
            y_max = max(y_max, pt[1])
    if not edges:
        return

    start = max(0, int(math.ceil(y_min - 0.5)))
    end = min(canvas.h - 1, int(math.floor(y_max - 0.5)))
    for y in range(start, end + 1):
        sy = y + 0.5  # sample at pixel center
        xs = []
        for (ax, ay), (bx, by) in edges:
            if (ay <= sy < by) or (by <= sy < ay):
                xs.append(ax + (sy - ay) * (bx - ax) / (by - ay))
        xs.sort()
        for i in range(0, len(xs) - 1, 2):
            x_start = max(0, int(math.ceil(xs[i] - 0.5)))
            x_end = min(canvas.w - 1, int(math.floor(xs[i + 1] - 0.5)))
            for x in range(x_start, x_end + 1):
                canvas.set_pixel(x, y, lit, style)


def quadratic_points(p0, c, p1, segments=12):
    """Flatten a quadratic Bezier from p0 via control c to p1 (p0 excluded)."""
    pts = []
    for i in range(1, segments + 1):
        t = i / segments
        u = 1 - t
        x = u * u * p0[0] + 2 * u * t * c[0] + t * t * p1[0]
        y = u * u * p0[1] + 2 * u * t * c[1] + t * t * p1[1]
        pts.append((x, y))
    return pts


def arc_points(cx, cy, radius, start, end, y_flip=True):
    """
    Points along a circular arc in pixel space.
    Angles are measured counter-clockwise on a +y-up surface, hence the
    y flip when mapping into row-down pixel coordinates.
    """
    sweep = end - start
    segments = max(8, min(360, int(abs(sweep) * max(radius, 1.0))))
    sign = -1 if y_flip else 1
    pts = []
    for i in range(segments + 1):
        a = start + sweep * i / segments
        pts.append((cx + radius * math.cos(a), cy + sign * radius * math.sin(a)))
    return pts
