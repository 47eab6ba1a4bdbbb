"""Keyboard keys, input events and actions bound to them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto

from pygame.math import Vector2


class Key(Enum):
    """Keyboard keys that can be bound to actions."""

    Unknown = auto()
    A = auto()
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    I = auto()  # noqa: E741
    J = auto()
    K = auto()
    L = auto()
    M = auto()
    N = auto()
    O = auto()  # noqa: E741
    P = auto()
    Q = auto()
    R = auto()
    S = auto()
    T = auto()
    U = auto()
    V = auto()
    W = auto()
    X = auto()
    Y = auto()
    Z = auto()
    Num0 = auto()
    Num1 = auto()
    Num2 = auto()
    Num3 = auto()
    Num4 = auto()
    Num5 = auto()
    Num6 = auto()
    Num7 = auto()
    Num8 = auto()
    Num9 = auto()
    Escape = auto()
    LControl = auto()
    LShift = auto()
    LAlt = auto()
    LSystem = auto()
    RControl = auto()
    RShift = auto()
    RAlt = auto()
    RSystem = auto()
    Menu = auto()
    LBracket = auto()
    RBracket = auto()
    Semicolon = auto()
    Comma = auto()
    Period = auto()
    Apostrophe = auto()
    Slash = auto()
    Backslash = auto()
    Grave = auto()
    Equal = auto()
    Hyphen = auto()
    Space = auto()
    Enter = auto()
    Backspace = auto()
    Tab = auto()
    PageUp = auto()
    PageDown = auto()
    End = auto()
    Home = auto()
    Insert = auto()
    Delete = auto()
    Add = auto()
    Subtract = auto()
    Multiply = auto()
    Divide = auto()
    Left = auto()
    Right = auto()
    Up = auto()
    Down = auto()
    Numpad0 = auto()
    Numpad1 = auto()
    Numpad2 = auto()
    Numpad3 = auto()
    Numpad4 = auto()
    Numpad5 = auto()
    Numpad6 = auto()
    Numpad7 = auto()
    Numpad8 = auto()
    Numpad9 = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()
    F13 = auto()
    F14 = auto()
    F15 = auto()
    Pause = auto()


def key_from_name(name: str) -> Key:
    """Return the key with the given configuration name; KeyError if unknown."""
    try:
        return Key[name]
    except KeyError:
        raise KeyError(f"unknown key name {name!r}") from None


@dataclass(frozen=True)
class KeyPressed:
    code: Key


@dataclass(frozen=True)
class KeyReleased:
    code: Key


@dataclass(frozen=True)
class ButtonBinding:
    key: Key


@dataclass(frozen=True)
class DirectionalBinding:
    up: Key
    down: Key
    left: Key
    right: Key


def _clamp(value: float) -> float:
    return max(-1.0, min(1.0, value))


class InputAction:
    """A named action whose value follows the keys bound to it.

    Button bindings give a bool; directional bindings give a Vector2 whose
    components are clamped to [-1, 1].
    """

    def __init__(self, label: str, bindings: Iterable[ButtonBinding] | Iterable[DirectionalBinding]) -> None:
        self.label = label
        self.bindings = tuple(bindings)
        if all(isinstance(b, ButtonBinding) for b in self.bindings):
            self._directional = False
            self._value: bool | Vector2 = False
        elif all(isinstance(b, DirectionalBinding) for b in self.bindings):
            self._directional = True
            self._value = Vector2(0, 0)
        else:
            raise TypeError("bindings must be all ButtonBinding or all DirectionalBinding")
        self._pressed_this_frame = False
        self._pressed_keys: set[Key] = set()

    @property
    def is_directional(self) -> bool:
        return self._directional

    def reset_frame_state(self) -> None:
        self._pressed_this_frame = False

    def process_event(self, event) -> None:
        """Update the action from a KeyPressed or KeyReleased event; others are ignored."""
        if isinstance(event, KeyPressed):
            self._pressed_keys.add(event.code)
        elif isinstance(event, KeyReleased):
            self._pressed_keys.discard(event.code)
        else:
            return

        if not self._directional:
            is_pressed = any(b.key in self._pressed_keys for b in self.bindings)
            self._pressed_this_frame = not self._value and is_pressed
            self._value = is_pressed
            return

        x = y = 0.0
        for binding in self.bindings:
            if binding.left in self._pressed_keys:
                x -= 1
            if binding.right in self._pressed_keys:
                x += 1
            if binding.up in self._pressed_keys:
                y -= 1
            if binding.down in self._pressed_keys:
                y += 1
        self._value = Vector2(_clamp(x), _clamp(y))

    def was_performed_this_frame(self) -> bool:
        """True if a button action went from released to pressed since the last reset."""
        return self._pressed_this_frame

    def read_value(self) -> bool | Vector2:
        if self._directional:
            return Vector2(self._value)
        return self._value