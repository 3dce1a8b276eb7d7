import dataclasses
import unittest

from terminal_cube.renderer.config import RenderConfig


class RenderConfigTests(unittest.TestCase):
    def test_reference_defaults(self) -> None:
        config = RenderConfig()
        self.assertEqual((config.width, config.height), (80, 24))
        self.assertEqual(config.camera_distance, 5.0)
        self.assertEqual(config.frames, 100)
        self.assertEqual(config.centre, (40, 12))
        self.assertEqual((config.edge_char, config.vertex_char, config.background_char), ("#", "*", " "))

    def test_frozen(self) -> None:
        with self.assertRaises(dataclasses.FrozenInstanceError):
            RenderConfig().width = 10  # type: ignore[misc]

    def test_validation(self) -> None:
        invalid = [
            {"width": 0},
            {"height": -1},
            {"near_plane": 0.0},
            {"frames": -5},
            {"frame_delay": -0.1},
            {"edge_char": "##"},
            {"vertex_char": ""},
        ]
        for kwargs in invalid:
            with self.subTest(kwargs=kwargs):
                with self.assertRaises(ValueError):
                    RenderConfig(**kwargs)

    def test_overrides_skip_none(self) -> None:
        base = RenderConfig()
        updated = base.with_overrides(frames=10, width=None)
        self.assertEqual(updated.frames, 10)
        self.assertEqual(updated.width, 80)
        self.assertIs(base.with_overrides(width=None), base)

    def test_overrides_reject_unknown(self) -> None:
        with self.assertRaises(TypeError):
            RenderConfig().with_overrides(colour="red")


if __name__ == "__main__":
    unittest.main()
