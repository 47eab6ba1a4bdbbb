"""Scene nodes that own components and child objects."""

from __future__ import annotations

from typing import TypeVar

from spriteforge.component import Component
from spriteforge.transform import Transform

C = TypeVar("C", bound=Component)


class GameObject:
    """A node in the scene: a transform, its components and its children."""

    def __init__(self, position=(0.0, 0.0), rotation: float = 0.0, scale=(1.0, 1.0)) -> None:
        self.transform = Transform(position, rotation, scale, None)
        self._components: list[Component] = []
        self._children: list[GameObject] = []

    @property
    def components(self) -> tuple[Component, ...]:
        return tuple(self._components)

    @property
    def children(self) -> tuple[GameObject, ...]:
        return tuple(self._children)

    def start(self) -> None:
        """Start every component, then every child."""
        for component in self._components:
            component.start()
        for child in self._children:
            child.start()

    def update(self, elapsed: float) -> None:
        """Update every component, then every child."""
        for component in self._components:
            component.update(elapsed)
        for child in self._children:
            child.update(elapsed)

    def add_component(self, component: Component) -> None:
        component.attach(self)
        self._components.append(component)

    def add_child(self, child: GameObject) -> None:
        self.transform.add_child(child.transform)
        self._children.append(child)

    def get_component(self, kind: type[C]) -> C | None:
        """Return the first component that is an instance of ``kind``, or None."""
        if not (isinstance(kind, type) and issubclass(kind, Component)):
            raise TypeError("kind must be a subclass of Component")
        return next((c for c in self._components if isinstance(c, kind)), None)