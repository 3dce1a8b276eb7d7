import unittest

from terminal_cube.renderer.framebuffer import FrameBuffer


class FrameBufferTests(unittest.TestCase):
    def setUp(self) -> None:
        self.buffer = FrameBuffer(80, 24)

    def test_starts_blank(self) -> None:
        rows = self.buffer.rows()
        self.assertEqual(len(rows), 24)
        self.assertTrue(all(row == " " * 80 for row in rows))

    def test_set_then_get_inside_bounds(self) -> None:
        for x, y in ((0, 0), (79, 0), (0, 23), (79, 23), (40, 12)):
            with self.subTest(x=x, y=y):
                self.assertTrue(self.buffer.set_pixel(x, y, "#"))
                self.assertEqual(self.buffer.get_pixel(x, y), "#")

    def test_out_of_bounds_is_noop(self) -> None:
        before = self.buffer.render()
        for x, y in ((-1, 0), (0, -1), (80, 0), (0, 24), (-1, -1), (500, 500)):
            with self.subTest(x=x, y=y):
                self.assertFalse(self.buffer.set_pixel(x, y, "#"))
                self.assertIsNone(self.buffer.get_pixel(x, y))
        self.assertEqual(self.buffer.render(), before)

    def test_clear_resets_every_cell(self) -> None:
        self.buffer.set_pixel(3, 4, "*")
        self.buffer.set_pixel(70, 20, "#")
        self.buffer.clear()
        self.assertEqual(self.buffer.plotted("*"), set())
        self.assertEqual(self.buffer.plotted("#"), set())
        self.assertEqual(self.buffer.get_pixel(3, 4), " ")

    def test_render_layout(self) -> None:
        buffer = FrameBuffer(3, 2, background=".")
        buffer.set_pixel(1, 1, "*")
        self.assertEqual(buffer.render(), "...\n.*.")

    def test_invalid_dimensions(self) -> None:
        with self.assertRaises(ValueError):
            FrameBuffer(0, 5)
        with self.assertRaises(ValueError):
            FrameBuffer(5, 5, background="ab")


if __name__ == "__main__":
    unittest.main()
