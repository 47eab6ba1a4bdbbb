import uuid

import pytest
from pygame.math import Vector2

from spriteforge.animator import Animator
from spriteforge.controller import Controller
from spriteforge.game_object import GameObject
from spriteforge.input_action import Key, KeyPressed
from spriteforge.input_manager import InputManager

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


def _input_manager(tmp_path):
    path = tmp_path / "input.xml"
    path.write_text(INPUT_CONFIG)
    manager = InputManager()
    manager.load_actions(path)
    return manager


def _tree(tmp_path):
    path = tmp_path / "tree.xml"
    path.write_text(
        f"""<AnimationTree label="tree-{uuid.uuid4().hex}">
  <EntryState label="Idle"/>
  <Parameters>
    <Parameter label="moving" type="Bool" default="false"/>
    <Parameter label="forwardWalk" type="Float" default="0"/>
    <Parameter label="sideWalk" type="Float" default="0"/>
    <Parameter label="slash" type="Trigger" default="false"/>
    <Parameter label="wand" type="Trigger" default="false"/>
    <Parameter label="bow" type="Trigger" default="false"/>
    <Parameter label="hit" type="Trigger" default="false"/>
  </Parameters>
  <Tree>
    <Animation label="Idle" startx="0" starty="0" length="1" frameDuration="100" loop="true" breakable="true"/>
  </Tree>
</AnimationTree>
"""
    )
    return path


def _player(tmp_path, with_animator=True):
    manager = _input_manager(tmp_path)
    go = GameObject()
    animator = Animator(_tree(tmp_path)) if with_animator else None
    if animator is not None:
        go.add_component(animator)
    controller = Controller(manager)
    go.add_component(controller)
    go.start()
    return manager, go, controller, animator


def test_start_finds_animator(tmp_path):
    _, _, controller, animator = _player(tmp_path)
    assert controller.animator is animator


def test_no_input_keeps_position_and_sets_not_moving(tmp_path):
    _, go, controller, animator = _player(tmp_path)
    animator.set_param("moving", True)
    controller.update(0.5)
    assert go.transform.position == Vector2(0, 0)
    assert animator.parameters["moving"].value is False


def test_moves_right_and_updates_animator(tmp_path):
    manager, go, controller, animator = _player(tmp_path)
    manager.process_event(KeyPressed(Key.D))
    controller.update(0.5)
    assert go.transform.position.x == pytest.approx(controller.speed * 0.5)
    assert go.transform.position.y == pytest.approx(0.0)
    assert animator.parameters["moving"].value is True
    assert animator.parameters["sideWalk"].value == 1
    assert animator.parameters["forwardWalk"].value == 0


def test_diagonal_movement_is_normalized(tmp_path):
    manager, go, controller, animator = _player(tmp_path)
    manager.process_event(KeyPressed(Key.D))
    manager.process_event(KeyPressed(Key.Z))
    controller.update(1.0)
    assert go.transform.position.length() == pytest.approx(controller.speed)
    assert go.transform.position.x == pytest.approx(-go.transform.position.y)
    assert animator.parameters["forwardWalk"].value == -1


def test_button_press_sets_trigger(tmp_path):
    manager, _, controller, animator = _player(tmp_path)
    manager.begin_frame()
    manager.process_event(KeyPressed(Key.Space))
    controller.update(0.0)
    assert animator.parameters["slash"].value is True
    assert animator.parameters["wand"].value is False


def test_held_button_does_not_retrigger_next_frame(tmp_path):
    manager, _, controller, animator = _player(tmp_path)
    manager.process_event(KeyPressed(Key.H))
    controller.update(0.0)
    animator.parameters["hit"].get_value()
    manager.begin_frame()
    controller.update(0.0)
    assert animator.parameters["hit"].value is False


def test_moves_without_animator(tmp_path):
    manager, go, controller, _ = _player(tmp_path, with_animator=False)
    manager.process_event(KeyPressed(Key.S))
    controller.update(1.0)
    assert controller.animator is None
    assert go.transform.position.y == pytest.approx(controller.speed)


def test_start_fails_when_action_missing(tmp_path):
    go = GameObject()
    go.add_component(Controller(InputManager()))
    with pytest.raises(KeyError):
        go.start()


def test_update_before_start_raises(tmp_path):
    controller = Controller(_input_manager(tmp_path))
    with pytest.raises(RuntimeError):
        controller.update(0.1)