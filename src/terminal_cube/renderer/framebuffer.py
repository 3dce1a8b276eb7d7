"""Fixed-size character grid backing each animation frame."""

from __future__ import annotations

from typing import List, Optional, Set, Tuple


class FrameBuffer:
    """Height x width grid of single characters with bounds-checked writes."""

    __slots__ = ("_width", "_height", "_background", "_cells")

    def __init__(self, width: int, height: int, *, background: str = " ") -> None:
        if width < 1 or height < 1:
            raise ValueError("FrameBuffer requires width and height >= 1")
        if len(background) != 1:
            raise ValueError("background must be a single character")
        self._width = width
        self._height = height
        self._background = background
        self._cells: List[List[str]] = [[background] * width for _ in range(height)]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def background(self) -> str:
        return self._background

    def clear(self) -> None:
        for row in self._cells:
            row[:] = [self._background] * self._width

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def set_pixel(self, x: int, y: int, char: str) -> bool:
        # Points outside the grid are clipped, not rejected.
        if not self.in_bounds(x, y):
            return False
        self._cells[y][x] = char
        return True

    def get_pixel(self, x: int, y: int) -> Optional[str]:
        if not self.in_bounds(x, y):
            return None
        return self._cells[y][x]

    def plotted(self, char: str) -> Set[Tuple[int, int]]:
        """Return every ``(x, y)`` currently holding ``char``."""

        return {
            (x, y)
            for y, row in enumerate(self._cells)
            for x, cell in enumerate(row)
            if cell == char
        }

    def rows(self) -> List[str]:
        return ["".join(row) for row in self._cells]

    def render(self) -> str:
        return "\n".join(self.rows())
