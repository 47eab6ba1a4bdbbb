"""Component that plays sprite-sheet animations driven by an animation graph."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import replace
from types import MappingProxyType

from spriteforge.animator_graph import AnimationState, Parameter
from spriteforge.animator_tree_loader import load_animator_tree
from spriteforge.component import Component
from spriteforge.renderer import Renderer


class Animator(Component):
    """Steps through the frames of the current animation state and follows transitions.

    Each animator keeps its own copy of the graph's parameters; the graph itself
    is shared between every animator loaded from the same tree.
    """

    def __init__(self, animation_tree_path: str | os.PathLike[str]) -> None:
        super().__init__()
        self.graph = load_animator_tree(animation_tree_path)
        self._parameters: dict[str, Parameter] = {
            label: replace(parameter) for label, parameter in self.graph.parameters.items()
        }
        self.renderer: Renderer | None = None
        self._state = self._resolve_state(self.graph.entry)
        self._time = 0.0
        self._frame_x = self._state.start_x
        self._frame_y = self._state.start_y if self._state.start_y >= 0 else 0

    @property
    def state(self) -> AnimationState:
        """The animation state currently playing."""
        return self._state

    @property
    def frame(self) -> tuple[int, int]:
        """Column and row of the current sprite-sheet cell."""
        return (self._frame_x, self._frame_y)

    @property
    def parameters(self) -> Mapping[str, Parameter]:
        """Read-only view of this animator's parameters."""
        return MappingProxyType(self._parameters)

    def start(self) -> None:
        """Find the renderer on the owning game object."""
        if self.game_object is None:
            raise RuntimeError("animator is not attached to a game object")
        self.renderer = self.game_object.get_component(Renderer)

    def update(self, elapsed: float) -> None:
        """Advance the animation by ``elapsed`` seconds and show the current cell."""
        self._time += elapsed
        if self._state.breakable:
            self._make_transition()
        self._switch_frame()
        self._apply_to_renderer()

    def set_param(self, label: str, value: bool | float) -> None:
        """Set a parameter's value; labels the graph does not declare are ignored."""
        parameter = self._parameters.get(label)
        if parameter is not None:
            parameter.value = value

    def _apply_to_renderer(self) -> None:
        if self.renderer is not None:
            self.renderer.set_cut_rect_pos(self._frame_x, self._frame_y)

    def _make_transition(self) -> None:
        state = self._state
        if not state.breakable and self._frame_x - state.start_x != state.length - 1:
            return
        for transition in state.transitions:
            if transition.check(self._parameters):
                self._state = self._resolve_state(transition.target)
                self._frame_x = self._state.start_x
                if self._state.start_y >= 0:
                    self._frame_y = self._state.start_y
                self._time = 0.0
                break

    def _resolve_state(self, target: str) -> AnimationState:
        state = self.graph.states.get(target)
        if state is not None:
            return state
        blend_tree = self.graph.blend_trees[target]
        for transition in blend_tree.transitions:
            if transition.check(self._parameters):
                return self.graph.states[transition.target]
        return self.graph.states[blend_tree.children[0]]

    def _switch_frame(self) -> None:
        duration = self._state.frame_duration / 1000
        if self._time < duration:
            return
        # Keep the surplus so the animation stays roughly in rhythm.
        self._time -= duration
        state = self._state
        if self._frame_x < state.start_x + state.length - 1:
            self._frame_x += 1
        elif state.loop:
            self._frame_x = state.start_x
        else:
            self._make_transition()