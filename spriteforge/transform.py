"""Hierarchical 2D transforms."""

from __future__ import annotations

from pygame.math import Vector2


class Transform:
    """Position, rotation in degrees and scale, relative to an optional parent."""

    def __init__(
        self,
        position=(0.0, 0.0),
        rotation: float = 0.0,
        scale=(1.0, 1.0),
        parent: Transform | None = None,
    ) -> None:
        self._position = Vector2(position)
        self.rotation = float(rotation)
        self._scale = Vector2(scale)
        self.parent = parent
        self._children: list[Transform] = []

    @property
    def position(self) -> Vector2:
        return self._position

    @position.setter
    def position(self, value) -> None:
        self._position = Vector2(value)

    @property
    def scale(self) -> Vector2:
        return self._scale

    @scale.setter
    def scale(self, value) -> None:
        self._scale = Vector2(value)

    @property
    def children(self) -> tuple[Transform, ...]:
        return tuple(self._children)

    def add_child(self, child: Transform) -> None:
        """Attach ``child`` below this transform."""
        child.parent = self
        self._children.append(child)

    @property
    def world_position(self) -> Vector2:
        if self.parent is None:
            return Vector2(self._position)
        return self.parent.world_position + self._position

    @property
    def world_rotation(self) -> float:
        if self.parent is None:
            return self.rotation
        return self.parent.world_rotation + self.rotation

    @property
    def world_scale(self) -> Vector2:
        if self.parent is None:
            return Vector2(self._scale)
        parent_scale = self.parent.world_scale
        return Vector2(parent_scale.x * self._scale.x, parent_scale.y * self._scale.y)

    def move(self, amount) -> None:
        """Translate the local position by ``amount``."""
        self._position += Vector2(amount)

    def rotate(self, amount: float) -> None:
        """Add ``amount`` degrees to the local rotation."""
        self.rotation += float(amount)

    def rescale(self, amount) -> None:
        """Multiply the local scale component-wise by ``amount``."""
        factor = Vector2(amount)
        self._scale = Vector2(self._scale.x * factor.x, self._scale.y * factor.y)