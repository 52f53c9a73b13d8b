"""Rendered text that can be drawn onto a surface."""

from __future__ import annotations

import pygame

from dxball.fonts import FontManager, get_font_manager


class TextError(RuntimeError):
    """Raised when text cannot be rendered."""


class Text:
    """A piece of text in one font, rendered once and drawn many times."""

    def __init__(
        self,
        target: pygame.Surface,
        font_name: str,
        font_size: int,
        fonts: FontManager | None = None,
    ) -> None:
        self._target = target
        manager = fonts if fonts is not None else get_font_manager()
        self._font = manager.load_font(font_name, font_size)
        self._image: pygame.Surface | None = None
        self._width = 0
        self._height = 0

    def set_text(self, text: str, color) -> None:
        """Render the given text in the given colour."""
        try:
            image = self._font.render(text, True, color)
        except (pygame.error, ValueError, TypeError) as exc:
            raise TextError(f"Failed to render text surface: {exc}") from exc
        self._image = image
        self._width, self._height = image.get_size()

    def render(self, x: float, y: float) -> None:
        """Draw the text with its top-left corner at (x, y)."""
        if self._image is not None:
            self._target.blit(self._image, (int(x), int(y)))

    def dimensions(self) -> tuple[int, int]:
        """Width and height of the rendered text."""
        return self._width, self._height