"""Text selection menu rendered with the same ANSI terminal as the animation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Sequence, Tuple

TITLE_ROW = 2
FIRST_ITEM_ROW = 5
MIN_MENU_SIZE = 4
HELP_TEXT = "Arrow keys to navigate, Enter to select, Q to quit"

_REVERSE = "\033[7m"
_RESET = "\033[0m"


class MenuAction(Enum):
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    CONFIRM = auto()
    CANCEL = auto()
    SHORTCUT = auto()
    NONE = auto()


class MenuResult(Enum):
    CONTINUE = auto()
    SELECTED = auto()
    CANCELLED = auto()


@dataclass(frozen=True, slots=True)
class MenuItem:
    label: str
    key: str
    enabled: bool = True


def action_for_key(key: str) -> MenuAction:
    """Translate a key name from :meth:`TerminalController.poll_keys`."""

    if key == "UP":
        return MenuAction.MOVE_UP
    if key == "DOWN":
        return MenuAction.MOVE_DOWN
    if key in ("\n", "\r"):
        return MenuAction.CONFIRM
    if key == "ESC":
        return MenuAction.CANCEL
    if len(key) == 1 and key.isprintable():
        return MenuAction.SHORTCUT
    return MenuAction.NONE


class Menu:
    """Titled list of items with a single highlighted selection."""

    def __init__(self, title: str, items: Sequence[MenuItem], selected: int = 0) -> None:
        self.title = title
        self.items: List[MenuItem] = list(items)
        if not any(item.enabled for item in self.items):
            raise ValueError("Menu requires at least one enabled item")
        if not 0 <= selected < len(self.items):
            raise ValueError(f"selected index {selected} out of range")
        self.selected = selected
        if not self.items[selected].enabled:
            self._step(1)

    @property
    def current(self) -> MenuItem:
        return self.items[self.selected]

    def replace_item(self, index: int, item: MenuItem) -> None:
        items = list(self.items)
        items[index] = item
        if not any(candidate.enabled for candidate in items):
            raise ValueError("Menu requires at least one enabled item")
        self.items = items
        if not self.current.enabled:
            self._step(1)

    def _step(self, direction: int) -> None:
        # Wraps around and never lands on a disabled item.
        count = len(self.items)
        index = self.selected
        while True:
            index = (index + direction) % count
            if self.items[index].enabled:
                self.selected = index
                return

    def _shortcut(self, key: str) -> Optional[int]:
        wanted = key.lower()
        for index, item in enumerate(self.items):
            if item.enabled and item.key.lower() == wanted:
                return index
        return None

    def handle(self, action: MenuAction, key: str | None = None) -> MenuResult:
        if action is MenuAction.MOVE_UP:
            self._step(-1)
        elif action is MenuAction.MOVE_DOWN:
            self._step(1)
        elif action is MenuAction.CONFIRM:
            if self.current.enabled:
                return MenuResult.SELECTED
        elif action is MenuAction.CANCEL:
            return MenuResult.CANCELLED
        elif action is MenuAction.SHORTCUT and key:
            index = self._shortcut(key)
            if index is not None:
                self.selected = index
                return MenuResult.SELECTED
            if key in ("q", "Q"):
                return MenuResult.CANCELLED
        return MenuResult.CONTINUE

    def handle_key(self, key: str) -> MenuResult:
        return self.handle(action_for_key(key), key)


def _border(width: int, height: int) -> List[List[str]]:
    grid = [[" "] * width for _ in range(height)]
    for x in range(width):
        grid[0][x] = "-"
        grid[height - 1][x] = "-"
    for y in range(height):
        grid[y][0] = "|"
        grid[y][width - 1] = "|"
    for x, y in ((0, 0), (width - 1, 0), (0, height - 1), (width - 1, height - 1)):
        grid[y][x] = "+"
    return grid


def _place(grid: List[List[str]], row: int, text: str, column: int) -> Tuple[int, int]:
    width = len(grid[row])
    start = max(1, column)
    end = min(width - 1, start + len(text))
    for offset, x in enumerate(range(start, end)):
        grid[row][x] = text[offset]
    return start, end


def render_menu(menu: Menu, width: int = 80, height: int = 24) -> str:
    """Render ``menu`` inside a bordered ``width`` x ``height`` box."""

    if width < MIN_MENU_SIZE or height < MIN_MENU_SIZE:
        raise ValueError(f"render_menu requires width and height >= {MIN_MENU_SIZE}")

    grid = _border(width, height)
    highlight: Optional[Tuple[int, int, int]] = None

    if TITLE_ROW < height - 1:
        _place(grid, TITLE_ROW, menu.title, (width - len(menu.title)) // 2)

    for index, item in enumerate(menu.items):
        row = FIRST_ITEM_ROW + index * 2
        if row >= height - 1:
            break
        text = f" [{item.key}] {item.label}"
        if not item.enabled:
            text += " (disabled)"
        start, end = _place(grid, row, text, (width - len(item.label) - 6) // 2)
        if index == menu.selected and item.enabled:
            highlight = (row, start, end)

    help_row = height - 3
    if help_row > TITLE_ROW:
        _place(grid, help_row, HELP_TEXT, 2)

    lines = ["".join(row) for row in grid]
    if highlight is not None:
        row, start, end = highlight
        line = lines[row]
        lines[row] = line[:start] + _REVERSE + line[start:end] + _RESET + line[end:]
    return "\n".join(lines)
