"""Predefined wireframe solids and the animated scene state."""

from __future__ import annotations

from typing import Iterator, Sequence, Tuple

from .projection import Vec3

Edge = Tuple[int, int]


class Wireframe:
    """Immutable vertex and edge lists of a single solid."""

    __slots__ = ("_vertices", "_edges")

    def __init__(self, vertices: Sequence[Vec3], edges: Sequence[Edge]) -> None:
        self._vertices: Tuple[Vec3, ...] = tuple(vertices)
        if not self._vertices:
            raise ValueError("Wireframe requires at least one vertex")

        count = len(self._vertices)
        checked = []
        for a, b in edges:
            if not (0 <= a < count and 0 <= b < count):
                raise ValueError(f"Edge ({a}, {b}) references a vertex outside 0..{count - 1}")
            checked.append((a, b))
        self._edges: Tuple[Edge, ...] = tuple(checked)

    @property
    def vertices(self) -> Tuple[Vec3, ...]:
        return self._vertices

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    def __len__(self) -> int:
        return len(self._vertices)


def cube_wireframe(size: float = 2.0) -> Wireframe:
    """Return the reference cube centred at the origin."""

    half = size / 2.0

    vertices = (
        Vec3(-half, -half, -half),  # 0: back bottom left
        Vec3(half, -half, -half),  # 1: back bottom right
        Vec3(half, half, -half),  # 2: back top right
        Vec3(-half, half, -half),  # 3: back top left
        Vec3(-half, -half, half),  # 4: front bottom left
        Vec3(half, -half, half),  # 5: front bottom right
        Vec3(half, half, half),  # 6: front top right
        Vec3(-half, half, half),  # 7: front top left
    )

    edges = (
        # Back face
        (0, 1), (1, 2), (2, 3), (3, 0),
        # Front face
        (4, 5), (5, 6), (6, 7), (7, 4),
        # Connecting edges
        (0, 4), (1, 5), (2, 6), (3, 7),
    )

    return Wireframe(vertices, edges)


class Scene:
    """A wireframe plus the depth offset that moves it along z."""

    def __init__(self, wireframe: Wireframe, *, depth_step: float = -0.1) -> None:
        self._wireframe = wireframe
        self._depth_step = depth_step
        self._steps = 0

    @property
    def wireframe(self) -> Wireframe:
        return self._wireframe

    @property
    def depth_step(self) -> float:
        return self._depth_step

    @property
    def depth_offset(self) -> float:
        # Derived from the step count so frame k sits at exactly k * step.
        return self._steps * self._depth_step

    @property
    def steps(self) -> int:
        return self._steps

    def advance(self) -> float:
        self._steps += 1
        return self.depth_offset

    def reset(self) -> None:
        self._steps = 0

    def transformed_vertices(self) -> Iterator[Vec3]:
        """Yield per-frame working copies with the depth offset applied."""

        shift = Vec3(0.0, 0.0, self.depth_offset)
        for vertex in self._wireframe.vertices:
            yield vertex + shift
