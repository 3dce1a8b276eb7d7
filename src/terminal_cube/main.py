"""Command line entry point for the wireframe cube animation."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, Sequence

from .renderer.config import RenderConfig
from .renderer.engine import AnimationDriver
from .renderer.menu import MIN_MENU_SIZE, Menu, MenuItem, MenuResult, render_menu
from .renderer.terminal import TerminalController

FRAME_CHOICES = (50, 100, 200)


def _single_char(value: str) -> str:
    if len(value) != 1:
        raise argparse.ArgumentTypeError(f"expected a single character, got {value!r}")
    return value


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    defaults = RenderConfig()
    parser = argparse.ArgumentParser(description="Perspective wireframe cube for your terminal")
    parser.add_argument("--width", type=int, default=defaults.width, help="Grid width in columns (default: 80)")
    parser.add_argument("--height", type=int, default=defaults.height, help="Grid height in rows (default: 24)")
    parser.add_argument(
        "--frames",
        type=int,
        default=defaults.frames,
        help="Number of frames to render (default: 100)",
    )
    parser.add_argument(
        "--frame-delay",
        type=float,
        default=defaults.frame_delay,
        help="Seconds to wait after each frame (default: 0.1)",
    )
    parser.add_argument(
        "--startup-delay",
        type=float,
        default=defaults.startup_delay,
        help="Seconds to wait before the first frame (default: 1.0)",
    )
    parser.add_argument(
        "--camera-distance",
        type=float,
        default=defaults.camera_distance,
        help="Distance from camera to the model origin (default: 5)",
    )
    parser.add_argument(
        "--depth-step",
        type=float,
        default=defaults.depth_step,
        help="Depth offset added after every frame (default: -0.1)",
    )
    parser.add_argument("--edge-char", type=_single_char, default=defaults.edge_char, help="Glyph for edges")
    parser.add_argument("--vertex-char", type=_single_char, default=defaults.vertex_char, help="Glyph for vertices")
    parser.add_argument(
        "--menu",
        action="store_true",
        help="Show the launcher menu before playing the animation",
    )
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> RenderConfig:
    return RenderConfig().with_overrides(
        width=args.width,
        height=args.height,
        frames=args.frames,
        frame_delay=args.frame_delay,
        startup_delay=args.startup_delay,
        camera_distance=args.camera_distance,
        depth_step=args.depth_step,
        edge_char=args.edge_char,
        vertex_char=args.vertex_char,
    )


def _emit_warnings(warnings: Sequence[str]) -> None:
    if not warnings:
        return
    for warning in warnings:
        sys.stderr.write(f"[terminal-cube] {warning}\n")
    sys.stderr.flush()


def _direction_label(depth_step: float) -> str:
    return "Depth: approach" if depth_step <= 0 else "Depth: recede"


def _next_frame_count(current: int) -> int:
    for choice in FRAME_CHOICES:
        if choice > current:
            return choice
    return FRAME_CHOICES[0]


def launcher_menu(config: RenderConfig) -> Menu:
    return Menu(
        "TERMINAL CUBE",
        [
            MenuItem("Play animation", "p"),
            MenuItem(_direction_label(config.depth_step), "d"),
            MenuItem(f"Frames: {config.frames}", "f"),
            MenuItem("Quit", "q"),
        ],
    )


def apply_menu_choice(menu: Menu, config: RenderConfig) -> RenderConfig:
    """Update ``config`` for a settings entry and refresh its label."""

    key = menu.current.key
    if key == "d":
        config = config.with_overrides(depth_step=-config.depth_step)
        menu.replace_item(menu.selected, MenuItem(_direction_label(config.depth_step), "d"))
    elif key == "f":
        config = config.with_overrides(frames=_next_frame_count(config.frames))
        menu.replace_item(menu.selected, MenuItem(f"Frames: {config.frames}", "f"))
    return config


def menu_unavailable_reason(config: RenderConfig, input_enabled: bool) -> Optional[str]:
    """Explain why the launcher menu cannot be shown, or return ``None``."""

    if not input_enabled:
        return "Menu needs an interactive terminal; playing the animation directly"
    if config.width < MIN_MENU_SIZE or config.height < MIN_MENU_SIZE:
        return (
            f"Menu needs at least a {MIN_MENU_SIZE}x{MIN_MENU_SIZE} grid, "
            f"got {config.width}x{config.height}; playing the animation directly"
        )
    return None


def _run_animation(config: RenderConfig, controller: TerminalController) -> int:
    def quit_pressed() -> bool:
        return "q" in controller.poll_keys()

    should_stop: Optional[Callable[[], bool]] = quit_pressed if controller.input_enabled else None

    controller.write_line("Press Ctrl+C to stop")
    driver = AnimationDriver(config, controller, should_stop=should_stop)
    rendered = driver.run()

    if driver.error is not None:
        _emit_warnings([f"Display write failed after {rendered} frames: {driver.error}"])
        return 1

    controller.write_line("")
    controller.write_line("Animation complete!")
    return 0


def _run_menu(config: RenderConfig, controller: TerminalController) -> int:
    menu = launcher_menu(config)
    while True:
        controller.present(render_menu(menu, config.width, config.height))
        for key in controller.poll_keys(timeout=0.5):
            result = menu.handle_key(key)
            if result is MenuResult.CANCELLED:
                return 0
            if result is not MenuResult.SELECTED:
                continue

            choice = menu.current.key
            if choice == "q":
                return 0
            if choice == "p":
                status = _run_animation(config, controller)
                if status:
                    return status
            else:
                config = apply_menu_choice(menu, config)
            break


def run(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_arguments(argv)
    try:
        config = config_from_args(args)
    except ValueError as exc:
        _emit_warnings([str(exc)])
        return 2

    controller = TerminalController()
    try:
        with controller:
            if args.menu:
                reason = menu_unavailable_reason(config, controller.input_enabled)
                if reason is None:
                    return _run_menu(config, controller)
                _emit_warnings([reason])
            return _run_animation(config, controller)
    except KeyboardInterrupt:  # pragma: no cover - interactive loop
        controller.restore()
        sys.stdout.write("\nInterrupted. Bye!\n")
        sys.stdout.flush()
        return 130


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
