"""Component moving a game object and feeding its animator from player input."""

from __future__ import annotations

from pygame.math import Vector2

from spriteforge.animator import Animator
from spriteforge.component import Component
from spriteforge.input_action import InputAction
from spriteforge.input_manager import InputManager

_ACTION_PARAMETERS = (("Slash", "slash"), ("Wand", "wand"), ("Bow", "bow"), ("Hit", "hit"))


class Controller(Component):
    """Reads the Move, Slash, Wand, Bow and Hit actions each frame."""

    speed = 100.0

    def __init__(self, input_manager: InputManager) -> None:
        super().__init__()
        self.input_manager = input_manager
        self.animator: Animator | None = None
        self._move_action: InputAction | None = None
        self._button_actions: list[tuple[InputAction, str]] = []

    def start(self) -> None:
        """Look up the input actions and the owning object's animator."""
        if self.game_object is None:
            raise RuntimeError("controller is not attached to a game object")
        self._move_action = self.input_manager.find_action("Move")
        self._button_actions = [
            (self.input_manager.find_action(name), parameter)
            for name, parameter in _ACTION_PARAMETERS
        ]
        self.animator = self.game_object.get_component(Animator)

    def update(self, elapsed: float) -> None:
        if self._move_action is None or self.game_object is None:
            raise RuntimeError("controller has not been started")
        self._move(elapsed)
        for action, parameter in self._button_actions:
            if action.was_performed_this_frame():
                self._set_param(parameter, True)

    def _move(self, elapsed: float) -> None:
        raw = self._move_action.read_value()
        zero = Vector2(0, 0)
        direction = raw.normalize() if raw != zero else zero
        self.game_object.transform.move(direction * self.speed * elapsed)
        if direction == zero:
            self._set_param("moving", False)
        else:
            self._set_param("moving", True)
            self._set_param("forwardWalk", raw.y)
            self._set_param("sideWalk", raw.x)

    def _set_param(self, label: str, value: bool | float) -> None:
        if self.animator is not None:
            self.animator.set_param(label, value)