"""Integer line rasterization onto a :class:`FrameBuffer`."""

from __future__ import annotations

from typing import Iterator, Tuple

from .framebuffer import FrameBuffer


def line_points(x0: int, y0: int, x1: int, y1: int) -> Iterator[Tuple[int, int]]:
    """Yield the grid cells on the segment from ``(x0, y0)`` to ``(x1, y1)``.

    Classic midpoint (Bresenham) walk using integer arithmetic only. Both
    endpoints are always included and consecutive points are 8-connected.
    """

    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy

    x, y = x0, y0
    while True:
        yield x, y
        if x == x1 and y == y1:
            return

        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy


def draw_line(buffer: FrameBuffer, x0: int, y0: int, x1: int, y1: int, char: str) -> int:
    """Plot a line into ``buffer`` and return how many cells landed on the grid."""

    written = 0
    for x, y in line_points(x0, y0, x1, y1):
        if buffer.set_pixel(x, y, char):
            written += 1
    return written
