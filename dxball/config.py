"""Game-wide configuration settings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_GAME_NAME = "Game"
DEFAULT_WINDOW_WIDTH = 800
DEFAULT_WINDOW_HEIGHT = 600


@dataclass
class GameConfig:
    """Identity, window size and asset locations of the game."""

    game_name: str = DEFAULT_GAME_NAME
    window_width: int = DEFAULT_WINDOW_WIDTH
    window_height: int = DEFAULT_WINDOW_HEIGHT

    def initialize(
        self,
        game_name: str = DEFAULT_GAME_NAME,
        window_width: int = DEFAULT_WINDOW_WIDTH,
        window_height: int = DEFAULT_WINDOW_HEIGHT,
    ) -> None:
        """Set the game name and window dimensions."""
        self.game_name = game_name
        self.window_width = window_width
        self.window_height = window_height

    def assets_path(self) -> Path:
        """The assets directory below the current working directory."""
        return Path.cwd() / "assets"

    def fonts_path(self) -> Path:
        return self.assets_path() / "fonts"

    def textures_path(self) -> Path:
        return self.assets_path() / "textures"

    def sounds_path(self) -> Path:
        return self.assets_path() / "sounds"


_CONFIG = GameConfig()


def get_config() -> GameConfig:
    """Return the configuration shared by the whole game."""
    return _CONFIG