"""Terminal animation of a perspective-projected wireframe cube."""

from .renderer import AnimationDriver, FrameBuffer, RenderConfig, TerminalController

__all__ = ["AnimationDriver", "FrameBuffer", "RenderConfig", "TerminalController"]

__version__ = "0.1.0"
