"""The game window and its drawing surface."""

from __future__ import annotations

import pygame


class WindowError(RuntimeError):
    """Raised when the window cannot be created or is used after closing."""


class Window:
    """A resizable game window with a clear colour."""

    def __init__(self, title: str, width: int, height: int) -> None:
        try:
            pygame.display.init()
            self._surface: pygame.Surface | None = pygame.display.set_mode(
                (width, height), pygame.RESIZABLE
            )
            pygame.display.set_caption(title)
        except pygame.error as exc:
            raise WindowError(f"Failed to create window: {exc}") from exc
        self._clear_color = pygame.Color(0, 0, 0, 255)

    @property
    def surface(self) -> pygame.Surface:
        """The surface everything is drawn to."""
        if self._surface is None:
            raise WindowError("Window is closed")
        return self._surface

    @property
    def clear_color(self) -> tuple[int, int, int, int]:
        return tuple(self._clear_color)

    def size(self) -> tuple[int, int]:
        """Current width and height of the window."""
        return self.surface.get_size()

    def set_clear_color(self, r: int, g: int, b: int, a: int) -> None:
        """Set the colour used by clear(); each component is 0 to 255."""
        for value in (r, g, b, a):
            if not 0 <= value <= 255:
                raise ValueError(f"colour component out of range: {value}")
        self._clear_color = pygame.Color(r, g, b, a)

    def clear(self) -> None:
        """Fill the window with the clear colour."""
        self.surface.fill(self._clear_color)

    def present(self) -> None:
        """Show what has been drawn."""
        self.surface
        pygame.display.flip()

    def close(self) -> None:
        """Destroy the window; further drawing raises WindowError."""
        if self._surface is not None:
            self._surface = None
            pygame.display.quit()

    def __enter__(self) -> Window:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()