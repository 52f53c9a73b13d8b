"""Entry point: opens the game window and draws a greeting."""

from __future__ import annotations

import argparse
import sys

import pygame

from dxball.config import get_config
from dxball.fonts import get_font_manager
from dxball.text import Text
from dxball.window import Window

GAME_NAME = "DX-Ball"
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
FONT_NAME = "OpenSans-Regular.ttf"
FONT_SIZE = 36
GREETING = "Hello World!"
WHITE = (255, 255, 255, 255)


def centered_position(
    area_size: tuple[int, int], item_size: tuple[int, int]
) -> tuple[float, float]:
    """Top-left corner that centres an item of item_size in area_size."""
    (area_w, area_h), (item_w, item_h) = area_size, item_size
    return (area_w - item_w) / 2.0, (area_h - item_h) / 2.0


def run(max_frames: int | None = None) -> int:
    """Run the game loop until quit, or for max_frames frames; return frames drawn."""
    pygame.display.init()
    fonts = get_font_manager()
    fonts.initialize()
    config = get_config()
    config.initialize(GAME_NAME, WINDOW_WIDTH, WINDOW_HEIGHT)

    frames = 0
    with Window(GAME_NAME, config.window_width, config.window_height) as window:
        text = Text(window.surface, FONT_NAME, FONT_SIZE, fonts=fonts)
        text.set_text(GREETING, WHITE)
        running = True
        while running and (max_frames is None or frames < max_frames):
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            window.set_clear_color(0, 0, 0, 255)
            window.clear()
            x, y = centered_position(window.size(), text.dimensions())
            text.render(x, y)
            window.present()
            frames += 1
    return frames


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="dxball", description="Run the game.")
    parser.parse_args(argv)
    try:
        pygame.display.init()
    except pygame.error as exc:
        print(f"Failed to initialize SDL: {exc}", file=sys.stderr)
        return 1
    try:
        run()
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        get_font_manager().shutdown()
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())