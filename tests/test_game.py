import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402
from pygame.math import Vector2  # noqa: E402

from spriteforge.controller import Controller  # noqa: E402
from spriteforge.errors import IllegalOperationError  # noqa: E402
from spriteforge.game import Game, main  # noqa: E402

INPUT_CONFIG = """<InputActions>
  <Action label="Move" type="Vector2D">
    <Binding><up bind="Z"/><down bind="S"/><left bind="Q"/><right bind="D"/></Binding>
  </Action>
  <Action label="Slash" type="Button"><Binding bind="Space"/></Action>
  <Action label="Wand" type="Button"><Binding bind="E"/></Action>
  <Action label="Bow" type="Button"><Binding bind="R"/></Action>
  <Action label="Hit" type="Button"><Binding bind="H"/></Action>
</InputActions>
"""


@pytest.fixture(autouse=True)
def _shutdown_pygame():
    yield
    pygame.quit()


def _resources(tmp_path, scene, input_config=INPUT_CONFIG):
    (tmp_path / "scenes").mkdir()
    (tmp_path / "scenes" / "scene.xml").write_text(scene)
    if input_config is not None:
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "input-config.xml").write_text(input_config)
    return tmp_path


def test_loads_scene_from_resources(tmp_path):
    resources = _resources(tmp_path, '<Scene><GameObject x="10" y="20" sx="1" sy="1"/></Scene>')
    game = Game(resources)
    assert len(game.scene.targets) == 1
    assert game.scene.targets[0].transform.position == Vector2(10, 20)


def test_run_stops_when_window_closed(tmp_path):
    resources = _resources(tmp_path, "<Scene/>")
    game = Game(resources)
    assert game.is_open is True
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    game.run()
    assert game.is_open is False


def test_key_events_drive_controller(tmp_path):
    resources = _resources(
        tmp_path,
        """<Scene>
  <GameObject sx="1" sy="1">
    <Components><Component name="Controller"/></Components>
  </GameObject>
</Scene>""",
    )
    game = Game(resources)
    player = game.scene.targets[0]
    assert player.get_component(Controller).game_object is player
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_d))
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    game.run()
    assert player.transform.position.x > 0
    assert player.transform.position.y == pytest.approx(0.0)


def test_missing_input_config_leaves_no_actions(tmp_path):
    resources = _resources(tmp_path, "<Scene/>", input_config=None)
    game = Game(resources)
    with pytest.raises(KeyError):
        game.input_manager.find_action("Move")


def test_statistics_start_empty(tmp_path):
    resources = _resources(tmp_path, "<Scene/>")
    game = Game(resources)
    assert game.statistics_text == ""


def test_main_reports_invalid_scene(tmp_path):
    resources = _resources(tmp_path, "<Scene><Light/></Scene>")
    with pytest.raises(IllegalOperationError):
        main([str(resources)])