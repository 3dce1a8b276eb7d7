"""Wireframe projection and rasterization for a fixed-size character grid."""

from .config import RenderConfig
from .engine import AnimationDriver, DriverState, FrameReport
from .framebuffer import FrameBuffer
from .menu import Menu, MenuAction, MenuItem, MenuResult, action_for_key, render_menu
from .objects import Scene, Wireframe, cube_wireframe
from .projection import ScreenPoint, Vec3, project
from .raster import draw_line, line_points
from .terminal import TerminalController

__all__ = [
    "AnimationDriver",
    "DriverState",
    "FrameBuffer",
    "FrameReport",
    "Menu",
    "MenuAction",
    "MenuItem",
    "MenuResult",
    "RenderConfig",
    "Scene",
    "ScreenPoint",
    "TerminalController",
    "Vec3",
    "Wireframe",
    "action_for_key",
    "cube_wireframe",
    "draw_line",
    "line_points",
    "project",
    "render_menu",
]
