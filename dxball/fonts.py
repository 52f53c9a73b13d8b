"""Font discovery and loading from the game's asset directories."""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

logger = logging.getLogger(__name__)

FONT_EXTENSIONS = frozenset({".ttf", ".otf", ".ttc"})


class FontError(RuntimeError):
    """Raised when the font system cannot start or a font cannot be loaded."""


class FontManager:
    """Finds font files under the asset directories and opens them."""

    def __init__(self, root: str | Path | None = None) -> None:
        self._root = Path(root) if root is not None else None
        self._cache: dict[str, Path] = {}
        self.initialized = False

    def _search_paths(self) -> list[Path]:
        base = self._root if self._root is not None else Path.cwd()
        parent = base.parent
        return [
            base / "assets",
            base / "src" / "assets",
            parent / "assets",
            parent / "src" / "assets",
        ]

    def initialize(self) -> None:
        """Start the font system and scan for fonts."""
        try:
            pygame.font.init()
        except pygame.error as exc:
            raise FontError(f"Font system could not initialize: {exc}") from exc
        self.initialized = True
        self.refresh()

    def refresh(self) -> None:
        """Rebuild the cache of font file names and their locations."""
        self._cache.clear()
        for base in self._search_paths():
            if not base.exists():
                continue
            try:
                for entry in base.rglob("*"):
                    if entry.is_file() and entry.suffix.lower() in FONT_EXTENSIONS:
                        self._cache[entry.name] = entry
            except OSError as exc:
                logger.warning("Error searching directory %s: %s", base, exc)

    def find_font_path(self, font_name: str) -> Path | None:
        """The cached location of a font file, or None if it is unknown."""
        return self._cache.get(font_name)

    def available_fonts(self) -> list[str]:
        """File names of all fonts found."""
        return list(self._cache)

    def load_font(self, font_name: str, font_size: int) -> pygame.font.Font:
        """Open the named font at the given point size."""
        if not self.initialized:
            raise FontError("FontManager not initialized!")
        path = self.find_font_path(font_name)
        if path is None:
            self.refresh()
            path = self.find_font_path(font_name)
            if path is None:
                raise FontError(f"Could not find font: {font_name}")
        try:
            return pygame.font.Font(str(path), font_size)
        except (pygame.error, OSError, ValueError) as exc:
            raise FontError(f"Failed to load font! {exc}") from exc

    def shutdown(self) -> None:
        """Stop the font system if it was started."""
        if self.initialized:
            pygame.font.quit()
            self.initialized = False


_FONT_MANAGER = FontManager()


def get_font_manager() -> FontManager:
    """Return the font manager shared by the whole game."""
    return _FONT_MANAGER