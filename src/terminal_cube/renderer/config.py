"""Fixed rendering constants for the wireframe animation."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Grid size, camera model, pacing and glyphs used by every frame.

    Defaults reproduce the reference animation: an 80x24 grid, camera five
    units behind the origin, 100 frames at roughly 10 frames per second.
    """

    width: int = 80
    height: int = 24
    camera_distance: float = 5.0
    near_plane: float = 0.1
    horizontal_scale: float = 20.0
    vertical_scale: float = 10.0
    depth_step: float = -0.1
    frames: int = 100
    startup_delay: float = 1.0
    frame_delay: float = 0.1
    edge_char: str = "#"
    vertex_char: str = "*"
    background_char: str = " "

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("RenderConfig requires width and height >= 1")
        if self.near_plane <= 0.0:
            raise ValueError("near_plane must be positive")
        if self.frames < 0:
            raise ValueError("frames must be >= 0")
        if self.startup_delay < 0.0 or self.frame_delay < 0.0:
            raise ValueError("delays must be >= 0")
        for name in ("edge_char", "vertex_char", "background_char"):
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(f"{name} must be a single character, got {value!r}")

    @property
    def centre(self) -> tuple[int, int]:
        return self.width // 2, self.height // 2

    def with_overrides(self, **changes: Any) -> "RenderConfig":
        """Return a copy with every non-``None`` override applied."""

        known = {field.name for field in fields(self)}
        unknown = set(changes) - known
        if unknown:
            raise TypeError(f"Unknown RenderConfig fields: {', '.join(sorted(unknown))}")
        applied = {name: value for name, value in changes.items() if value is not None}
        if not applied:
            return self
        return replace(self, **applied)
