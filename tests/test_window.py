import pygame
import pytest

from dxball.window import Window, WindowError


@pytest.fixture(autouse=True)
def dummy_video(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    yield
    pygame.display.quit()


def test_size_matches_request():
    with Window("Test", 320, 200) as window:
        assert window.size() == (320, 200)


def test_title_is_set():
    with Window("DX-Ball", 100, 80) as window:
        assert window.size() == (100, 80)
        assert pygame.display.get_caption()[0] == "DX-Ball"


def test_clear_uses_clear_color():
    with Window("Test", 64, 48) as window:
        window.set_clear_color(10, 20, 30, 255)
        window.clear()
        assert tuple(window.surface.get_at((0, 0)))[:3] == (10, 20, 30)
        assert tuple(window.surface.get_at((63, 47)))[:3] == (10, 20, 30)


def test_default_clear_color_is_opaque_black():
    with Window("Test", 16, 16) as window:
        assert window.clear_color == (0, 0, 0, 255)


def test_clear_color_out_of_range():
    with Window("Test", 16, 16) as window:
        with pytest.raises(ValueError):
            window.set_clear_color(256, 0, 0, 255)
        with pytest.raises(ValueError):
            window.set_clear_color(0, -1, 0, 255)


def test_closed_window_rejects_use():
    window = Window("Test", 16, 16)
    window.close()
    with pytest.raises(WindowError):
        window.clear()
    with pytest.raises(WindowError):
        window.present()
    with pytest.raises(WindowError):
        window.size()


def test_exit_closes_window():
    with Window("Test", 16, 16) as window:
        window.present()
    with pytest.raises(WindowError):
        window.size()