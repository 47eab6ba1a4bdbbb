"""Data model of animation graphs: parameters, conditions, transitions and states."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field
from enum import Enum


class ParamType(Enum):
    """Kind of an animator parameter."""

    BOOL = "Bool"
    TRIGGER = "Trigger"
    FLOAT = "Float"


@dataclass
class Parameter:
    """A named animator input; a trigger resets to False once it has been read."""

    type: ParamType
    value: bool | float

    def get_value(self) -> bool | float:
        """Return the current value, consuming it if this is a trigger."""
        value = self.value
        if self.type is ParamType.TRIGGER:
            self.value = False
        return value


class Comparison(Enum):
    """How a condition compares a float parameter with its reference value."""

    EQUALS = "Equals"
    LESS = "Less"
    GREATER = "Greater"


@dataclass(frozen=True)
class Condition:
    """A test of one parameter against a reference value."""

    parameter_name: str
    value: bool | float
    comparison: Comparison = Comparison.EQUALS

    def evaluate(self, parameters: MutableMapping[str, Parameter]) -> bool:
        """Evaluate against ``parameters``; KeyError if the parameter is missing.

        Float parameters use ``<=`` for LESS and ``>=`` for GREATER; other
        parameters are compared for equality. Reading a trigger consumes it.
        """
        param = parameters[self.parameter_name]
        if param.type is ParamType.FLOAT:
            if isinstance(self.value, bool):
                raise TypeError(
                    f"condition on float parameter {self.parameter_name!r} needs a float value"
                )
            current = param.get_value()
            if self.comparison is Comparison.EQUALS:
                return current == self.value
            if self.comparison is Comparison.LESS:
                return current <= self.value
            if self.comparison is Comparison.GREATER:
                return current >= self.value
            return False
        if not isinstance(self.value, bool):
            raise TypeError(
                f"condition on boolean parameter {self.parameter_name!r} needs a bool value"
            )
        return param.get_value() == self.value


@dataclass(frozen=True)
class Transition:
    """A move to ``target`` allowed when every condition holds."""

    target: str
    conditions: tuple[Condition, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "conditions", tuple(self.conditions))

    def check(self, parameters: MutableMapping[str, Parameter]) -> bool:
        """True when there are no parameters at all, or when all conditions hold."""
        if not parameters:
            return True
        return all(condition.evaluate(parameters) for condition in self.conditions)


@dataclass(frozen=True)
class AnimationState:
    """A run of frames on one sprite-sheet row.

    ``start_y`` of -1 or less keeps the row of the previous animation;
    ``frame_duration`` is in milliseconds.
    """

    name: str
    start_x: int
    start_y: int
    length: int
    frame_duration: int
    loop: bool
    breakable: bool
    transitions: tuple[Transition, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "transitions", tuple(self.transitions))


@dataclass(frozen=True)
class BlendTree:
    """A group of states chosen between by the transitions that target them."""

    name: str
    children: tuple[str, ...] = ()
    transitions: tuple[Transition, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))
        object.__setattr__(self, "transitions", tuple(self.transitions))


@dataclass(frozen=True, eq=False)
class AnimatorGraph:
    """A whole animation graph, shared read-only between animators."""

    entry: str
    states: Mapping[str, AnimationState] = field(default_factory=dict)
    blend_trees: Mapping[str, BlendTree] = field(default_factory=dict)
    parameters: Mapping[str, Parameter] = field(default_factory=dict)