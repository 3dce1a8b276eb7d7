"""Vector type and perspective projection into screen space."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional

from .config import RenderConfig


@dataclass(frozen=True, slots=True)
class Vec3:
    """Lightweight immutable 3D vector."""

    x: float
    y: float
    z: float

    def __add__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)


class ScreenPoint(NamedTuple):
    """Integer column/row on the character grid."""

    x: int
    y: int


def project(point: Vec3, config: RenderConfig) -> Optional[ScreenPoint]:
    """Map a model-space point to the grid, or ``None`` when it is not visible.

    The camera sits ``config.camera_distance`` units behind the origin looking
    down +z. Points at or in front of the near plane are reported as ``None``.
    The scale constants are fixed, not derived from a field of view.
    """

    z_offset = point.z + config.camera_distance
    if z_offset <= config.near_plane:
        return None

    x_proj = point.x / z_offset
    y_proj = point.y / z_offset

    centre_x, centre_y = config.centre
    # Rows grow downwards while model y grows upwards.
    screen_x = int(centre_x + x_proj * config.horizontal_scale)
    screen_y = int(centre_y - y_proj * config.vertical_scale)
    return ScreenPoint(screen_x, screen_y)
