"""The start of an arcade game: configuration, font discovery, a window and centred text."""

__version__ = "1.0.0"
__all__ = ["app", "config", "fonts", "text", "window"]