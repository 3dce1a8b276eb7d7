import unittest

from terminal_cube.renderer.framebuffer import FrameBuffer
from terminal_cube.renderer.raster import draw_line, line_points


def _connected(points) -> bool:
    return all(
        max(abs(x1 - x0), abs(y1 - y0)) == 1
        for (x0, y0), (x1, y1) in zip(points, points[1:])
    )


class LinePointsTests(unittest.TestCase):
    def test_horizontal(self) -> None:
        self.assertEqual(list(line_points(0, 0, 4, 0)), [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0)])

    def test_vertical(self) -> None:
        self.assertEqual(list(line_points(2, 3, 2, 0)), [(2, 3), (2, 2), (2, 1), (2, 0)])

    def test_diagonal(self) -> None:
        self.assertEqual(list(line_points(0, 0, 3, 3)), [(0, 0), (1, 1), (2, 2), (3, 3)])

    def test_shallow(self) -> None:
        self.assertEqual(
            list(line_points(0, 0, 5, 2)),
            [(0, 0), (1, 0), (2, 1), (3, 1), (4, 2), (5, 2)],
        )

    def test_degenerate(self) -> None:
        self.assertEqual(list(line_points(7, -3, 7, -3)), [(7, -3)])

    def test_endpoints_and_connectivity(self) -> None:
        cases = [
            (0, 0, 5, 2),
            (5, 2, 0, 0),
            (-3, 4, 10, -7),
            (12, 1, 2, 9),
            (0, 0, 1, 17),
            (40, 12, -20, 13),
        ]
        for x0, y0, x1, y1 in cases:
            with self.subTest(case=(x0, y0, x1, y1)):
                points = list(line_points(x0, y0, x1, y1))
                self.assertEqual(points[0], (x0, y0))
                self.assertEqual(points[-1], (x1, y1))
                self.assertTrue(_connected(points))
                self.assertEqual(len(points), max(abs(x1 - x0), abs(y1 - y0)) + 1)


class DrawLineTests(unittest.TestCase):
    def setUp(self) -> None:
        self.buffer = FrameBuffer(10, 5)

    def test_plots_into_buffer(self) -> None:
        written = draw_line(self.buffer, 0, 0, 5, 2, "#")
        self.assertEqual(written, 6)
        self.assertEqual(
            self.buffer.plotted("#"),
            {(0, 0), (1, 0), (2, 1), (3, 1), (4, 2), (5, 2)},
        )

    def test_single_point(self) -> None:
        self.assertEqual(draw_line(self.buffer, 3, 3, 3, 3, "#"), 1)
        self.assertEqual(self.buffer.plotted("#"), {(3, 3)})

    def test_clips_outside_grid(self) -> None:
        written = draw_line(self.buffer, -5, 2, 20, 2, "#")
        self.assertEqual(written, 10)
        self.assertEqual(self.buffer.plotted("#"), {(x, 2) for x in range(10)})

    def test_entirely_outside_grid(self) -> None:
        self.assertEqual(draw_line(self.buffer, -10, -10, -1, -4, "#"), 0)
        self.assertEqual(self.buffer.plotted("#"), set())


if __name__ == "__main__":
    unittest.main()
