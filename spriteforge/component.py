"""Base class for behaviours attached to game objects."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from spriteforge.game_object import GameObject


class Component:
    """A behaviour owned by a game object, driven by start and update hooks."""

    def __init__(self) -> None:
        self.game_object: GameObject | None = None

    def attach(self, game_object: GameObject) -> None:
        """Record the game object that owns this component."""
        self.game_object = game_object

    def start(self) -> None:
        """Hook called once before the first update; does nothing by default."""

    def update(self, elapsed: float) -> None:
        """Hook called each frame with the elapsed seconds; does nothing by default."""