"""Registry of input actions loaded from an XML configuration."""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET

from spriteforge.input_action import (
    ButtonBinding,
    DirectionalBinding,
    InputAction,
    key_from_name,
)


def _bind(element: ET.Element | None) -> str:
    return "" if element is None else element.get("bind", "")


def _directional_bindings(node: ET.Element) -> list[DirectionalBinding]:
    return [
        DirectionalBinding(
            up=key_from_name(_bind(binding.find("up"))),
            down=key_from_name(_bind(binding.find("down"))),
            left=key_from_name(_bind(binding.find("left"))),
            right=key_from_name(_bind(binding.find("right"))),
        )
        for binding in node
    ]


def _button_bindings(node: ET.Element) -> list[ButtonBinding]:
    return [ButtonBinding(key_from_name(_bind(binding))) for binding in node]


class InputManager:
    """Holds the named input actions and dispatches events to them."""

    def __init__(self) -> None:
        self._actions: dict[str, InputAction] = {}

    def load_actions(self, path: str | os.PathLike[str]) -> None:
        """Read ``<InputActions>`` from ``path``; existing labels are kept."""
        root = ET.parse(path).getroot()
        if root.tag != "InputActions":
            return
        for node in root:
            if node.tag != "Action":
                continue
            label = node.get("label", "")
            kind = node.get("type", "")
            if kind == "Vector2D":
                bindings = _directional_bindings(node)
            elif kind == "Button":
                bindings = _button_bindings(node)
            else:
                continue
            self._actions.setdefault(label, InputAction(label, bindings))

    def find_action(self, name: str) -> InputAction:
        """Return the action called ``name``; KeyError if there is none."""
        try:
            return self._actions[name]
        except KeyError:
            raise KeyError(f"no input action named {name!r}") from None

    def begin_frame(self) -> None:
        for action in self._actions.values():
            action.reset_frame_state()

    def process_event(self, event) -> None:
        for action in self._actions.values():
            action.process_event(event)