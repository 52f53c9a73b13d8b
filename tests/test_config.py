from pathlib import Path

from dxball.config import GameConfig, get_config


def test_defaults():
    config = GameConfig()
    assert config.game_name == "Game"
    assert (config.window_width, config.window_height) == (800, 600)


def test_initialize_sets_values():
    config = GameConfig()
    config.initialize("DX-Ball", 1024, 768)
    assert config.game_name == "DX-Ball"
    assert config.window_width == 1024
    assert config.window_height == 768


def test_initialize_without_arguments_restores_defaults():
    config = GameConfig("Other", 1, 2)
    config.initialize()
    assert (config.game_name, config.window_width, config.window_height) == (
        "Game",
        800,
        600,
    )


def test_paths_follow_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = GameConfig()
    assets = Path.cwd() / "assets"
    assert config.assets_path() == assets
    assert config.fonts_path() == assets / "fonts"
    assert config.textures_path() == assets / "textures"
    assert config.sounds_path() == assets / "sounds"


def test_get_config_is_shared():
    first = get_config()
    second = get_config()
    assert first is second
    first.initialize("Shared", 320, 240)
    assert second.game_name == "Shared"
    first.initialize()
    assert second.game_name == "Game"