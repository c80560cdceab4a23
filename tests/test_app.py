import shutil
from pathlib import Path
from unittest import mock

import pygame
import pytest

from pixeltetris import config
from pixeltetris.app import main

IMAGES = {
    "button-play.png": (80, 40),
    "button-options.png": (80, 40),
    "button-exit.png": (80, 40),
}


@pytest.fixture
def environment(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.setattr(config, "settings", config.Settings())
    for name, size in IMAGES.items():
        surface = pygame.Surface(size)
        surface.fill((10, 20, 30))
        pygame.image.save(surface, str(tmp_path / name))
    font_file = Path(pygame.__file__).parent / pygame.font.get_default_font()
    shutil.copy(font_file, tmp_path / "munro.ttf")
    shutil.copy(font_file, tmp_path / "munro-small.ttf")
    monkeypatch.setattr(config, "ASSETS_DIR", tmp_path)
    yield tmp_path
    pygame.quit()


def test_main_exits_on_quit_event(environment):
    quit_event = pygame.event.Event(pygame.QUIT)
    with mock.patch("pygame.event.poll", return_value=quit_event):
        result = main([])
    assert result == 0
    assert pygame.display.get_init() is False


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "pixeltetris" in capsys.readouterr().out


def test_main_rejects_unknown_argument():
    with pytest.raises(SystemExit) as excinfo:
        main(["--no-such-flag"])
    assert excinfo.value.code == 2