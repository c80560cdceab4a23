import pygame
import pytest

from pixeltetris import config
from pixeltetris.config import BACKGROUND_LIGHT
from pixeltetris.game import Game
from pixeltetris.inputmanager import InputManager
from pixeltetris.optionsstate import OptionsState, SettingChange
from pixeltetris.renderer import Renderer
from pixeltetris.state import StateID

IMAGES = {
    "arrow-left.png": (10, 16),
    "arrow-right.png": (10, 16),
    "button-on-on.png": (60, 30),
    "button-on-off.png": (60, 30),
    "button-off-on.png": (60, 30),
    "button-off-off.png": (60, 30),
    "button-ok.png": (80, 40),
}


@pytest.fixture
def assets(tmp_path, monkeypatch):
    for name, size in IMAGES.items():
        surface = pygame.Surface(size)
        surface.fill((10, 20, 30))
        pygame.image.save(surface, str(tmp_path / name))
    monkeypatch.setattr(config, "ASSETS_DIR", tmp_path)
    return tmp_path


@pytest.fixture
def fresh_settings(monkeypatch):
    settings = config.Settings()
    monkeypatch.setattr(config, "settings", settings)
    return settings


@pytest.fixture
def fonts():
    pygame.font.init()
    yield
    pygame.quit()


def _keys(*keys):
    events = [pygame.event.Event(pygame.KEYDOWN, key=key) for key in keys]
    return _source(events)


def _source(events):
    pending = list(events)

    def poll():
        return pending.pop(0) if pending else None

    return poll


def make_state(poll, assets, fresh_settings, fonts):
    game = Game(InputManager(poll))
    renderer = Renderer(pygame.Surface((640, 360)))
    renderer.medium_font = pygame.font.Font(None, 30)
    renderer.big_font = pygame.font.Font(None, 50)
    game.renderer = renderer
    state = OptionsState(game, game.input_manager)
    state.initialize()
    game.push_state(state)
    return game, state


@pytest.fixture
def setup(assets, fresh_settings, fonts):
    def build(*keys):
        return make_state(_keys(*keys), assets, fresh_settings, fonts)

    return build


def test_initialize_finds_default_scaling_index(setup):
    _, state = setup()
    assert state.resolution_scaling_index == 4
    assert state.index == 0


def test_initialize_rejects_unknown_scaling(assets, fresh_settings, fonts):
    fresh_settings.resolution_scaling = 0.75
    with pytest.raises(ValueError):
        make_state(_keys(), assets, fresh_settings, fonts)


def test_change_resolution_right_is_bounded(setup, fresh_settings):
    _, state = setup()
    state.change_resolution(SettingChange.RIGHT)
    assert fresh_settings.resolution_scaling == 3
    assert state.resolution_scaling_index == 5
    state.change_resolution(SettingChange.RIGHT)
    assert fresh_settings.resolution_scaling == 3
    assert state.resolution_scaling_index == 5


def test_change_resolution_left_is_bounded(setup, fresh_settings):
    _, state = setup()
    for _ in range(10):
        state.change_resolution(SettingChange.LEFT)
    assert fresh_settings.resolution_scaling == 0.25
    assert state.resolution_scaling_index == 0


def test_change_ghost_block(setup, fresh_settings):
    _, state = setup()
    state.change_ghost_block(SettingChange.LEFT)
    assert fresh_settings.ghost_piece_enabled is False
    state.change_ghost_block(SettingChange.LEFT)
    assert fresh_settings.ghost_piece_enabled is False
    state.change_ghost_block(SettingChange.RIGHT)
    assert fresh_settings.ghost_piece_enabled is True


def test_index_moves_within_rows(setup):
    _, state = setup(pygame.K_DOWN, pygame.K_DOWN, pygame.K_DOWN, pygame.K_DOWN)
    state.update()
    assert state.index == 2


def test_index_does_not_go_above_first_row(setup):
    _, state = setup(pygame.K_UP)
    state.update()
    assert state.index == 0


def test_left_on_resolution_row_lowers_scaling(setup, fresh_settings):
    _, state = setup(pygame.K_LEFT)
    state.update()
    assert fresh_settings.resolution_scaling == 1.5


def test_right_on_ghost_row_enables_ghost(setup, fresh_settings):
    fresh_settings.ghost_piece_enabled = False
    _, state = setup(pygame.K_DOWN, pygame.K_RIGHT)
    state.update()
    assert fresh_settings.ghost_piece_enabled is True
    assert fresh_settings.resolution_scaling == 2


def test_select_on_ok_pops_state(setup):
    game, state = setup(pygame.K_DOWN, pygame.K_DOWN, pygame.K_RETURN)
    state.update()
    assert game.states == []


def test_select_on_setting_row_keeps_state(setup):
    game, state = setup(pygame.K_RETURN)
    state.update()
    assert game.states == [state]


def test_back_pops_state(setup):
    game, state = setup(pygame.K_ESCAPE)
    state.update()
    assert game.states == []


def test_quit_sets_exit(assets, fresh_settings, fonts):
    game, state = make_state(
        _source([pygame.event.Event(pygame.QUIT)]), assets, fresh_settings, fonts
    )
    state.update()
    assert state.next_state_id is StateID.EXIT
    assert game.is_game_exiting()


def test_draw_highlights_selected_row(setup):
    game, state = setup()
    state.draw()
    lit = game.renderer.screen.get_at((5, 102))[:3]
    plain = game.renderer.screen.get_at((5, 300))[:3]
    assert tuple(plain) == BACKGROUND_LIGHT
    assert sum(lit) > sum(plain)