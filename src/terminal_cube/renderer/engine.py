"""Frame loop that projects, rasterizes and presents the animated solid."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, List, Optional, Protocol, Sequence, Tuple

from .config import RenderConfig
from .framebuffer import FrameBuffer
from .objects import Scene, Wireframe, cube_wireframe
from .projection import ScreenPoint, project
from .raster import draw_line


class Display(Protocol):
    def present(self, frame: str, status: Sequence[str] = ()) -> None:
        ...


class DriverState(Enum):
    IDLE = auto()
    RENDERING = auto()
    DONE = auto()


@dataclass(frozen=True, slots=True)
class FrameReport:
    """What a single call to :meth:`AnimationDriver.render_frame` produced."""

    index: int
    depth_offset: float
    depth_step: float
    projected: Tuple[Optional[ScreenPoint], ...]
    frame: str

    @property
    def visible_vertices(self) -> List[ScreenPoint]:
        return [point for point in self.projected if point is not None]

    def status_line(self) -> str:
        return f"Frame {self.index} - Z offset: {self.depth_offset:.1f}"

    def direction_line(self) -> str:
        # A negative step shrinks z + camera_distance, pulling the solid closer.
        if self.depth_step < 0:
            return "The cube is moving toward the camera!"
        if self.depth_step > 0:
            return "The cube is moving away from the camera!"
        return "The cube is holding still."

    def status_lines(self) -> Tuple[str, str]:
        return self.status_line(), self.direction_line()


class AnimationDriver:
    """Owns the scene and frame buffer and drives them frame by frame.

    The driver starts ``IDLE``, moves to ``RENDERING`` when :meth:`run` is
    called and ends ``DONE`` once the frame count is exhausted, a stop is
    requested, or the display fails to accept a frame.
    """

    def __init__(
        self,
        config: RenderConfig,
        display: Display,
        *,
        wireframe: Wireframe | None = None,
        sleep: Callable[[float], None] = time.sleep,
        should_stop: Callable[[], bool] | None = None,
    ) -> None:
        self.config = config
        self._display = display
        self._sleep = sleep
        self._should_stop = should_stop
        self.scene = Scene(wireframe or cube_wireframe(), depth_step=config.depth_step)
        self.buffer = FrameBuffer(config.width, config.height, background=config.background_char)
        self.state = DriverState.IDLE
        self.frame_index = 0
        self.error: OSError | None = None

    def project_vertices(self) -> Tuple[Optional[ScreenPoint], ...]:
        return tuple(project(vertex, self.config) for vertex in self.scene.transformed_vertices())

    def render_frame(self) -> FrameReport:
        config = self.config
        buffer = self.buffer
        buffer.clear()

        projected = self.project_vertices()

        for a, b in self.scene.wireframe.edges:
            start = projected[a]
            end = projected[b]
            # Edges touching a vertex behind the camera are dropped.
            if start is None or end is None:
                continue
            draw_line(buffer, start.x, start.y, end.x, end.y, config.edge_char)

        for point in projected:
            if point is not None:
                buffer.set_pixel(point.x, point.y, config.vertex_char)

        return FrameReport(
            index=self.frame_index,
            depth_offset=self.scene.depth_offset,
            depth_step=self.scene.depth_step,
            projected=projected,
            frame=buffer.render(),
        )

    def run(self, frames: int | None = None) -> int:
        """Render ``frames`` frames (``config.frames`` by default) and return the count."""

        if self.state is not DriverState.IDLE:
            raise RuntimeError(f"AnimationDriver cannot run from state {self.state.name}")
        total = self.config.frames if frames is None else frames
        if total < 0:
            raise ValueError("frames must be >= 0")

        self.state = DriverState.RENDERING
        try:
            if total and self.config.startup_delay > 0:
                self._sleep(self.config.startup_delay)

            while self.frame_index < total:
                if self._should_stop is not None and self._should_stop():
                    break

                report = self.render_frame()
                try:
                    self._display.present(report.frame, report.status_lines())
                except OSError as exc:
                    self.error = exc
                    break

                self.scene.advance()
                self.frame_index += 1

                if self.config.frame_delay > 0:
                    self._sleep(self.config.frame_delay)
        finally:
            self.state = DriverState.DONE

        return self.frame_index
