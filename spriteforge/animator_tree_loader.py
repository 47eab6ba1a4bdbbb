"""Loading of animation graphs from XML files, with caching by tree label."""

from __future__ import annotations

import os
import re
import xml.etree.ElementTree as ET

from spriteforge.animator_graph import (
    AnimationState,
    AnimatorGraph,
    BlendTree,
    Comparison,
    Condition,
    Parameter,
    ParamType,
    Transition,
)
from spriteforge.errors import IllegalOperationError

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _as_int(element: ET.Element, name: str) -> int:
    match = _INT_PREFIX.match(element.get(name, ""))
    return int(match.group()) if match else 0


def _as_uint(element: ET.Element, name: str) -> int:
    return max(0, _as_int(element, name))


def _as_float_text(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else 0.0


def _as_float(element: ET.Element, name: str) -> float:
    return _as_float_text(element.get(name, ""))


def _as_bool(element: ET.Element, name: str) -> bool:
    text = element.get(name, "")
    return bool(text) and text[0] in "1tTyY"


def _condition_value(text: str | None) -> bool | float:
    if text == "true":
        return True
    if text == "false":
        return False
    return _as_float_text(text or "")


def _parse_file(path: str | os.PathLike[str]) -> ET.Element:
    try:
        return ET.parse(path).getroot()
    except (OSError, ET.ParseError) as exc:
        raise IllegalOperationError("Could not open AnimatorTree file") from exc


def _condition(node: ET.Element) -> Condition:
    if node.tag != "Condition":
        raise IllegalOperationError('Transition node children must be named "Condition"')
    cmp = node.get("cmp", "")
    if cmp == "Less":
        comparison = Comparison.LESS
    elif cmp == "Greater":
        comparison = Comparison.GREATER
    else:
        comparison = Comparison.EQUALS
    return Condition(node.get("parameter", ""), _condition_value(node.get("value")), comparison)


def _transition(node: ET.Element) -> Transition:
    return Transition(node.get("to", ""), tuple(_condition(c) for c in node))


def _state(node: ET.Element, transitions) -> AnimationState:
    return AnimationState(
        name=node.get("label", ""),
        start_x=_as_uint(node, "startx"),
        start_y=_as_int(node, "starty"),
        length=_as_uint(node, "length"),
        frame_duration=_as_uint(node, "frameDuration"),
        loop=_as_bool(node, "loop"),
        breakable=_as_bool(node, "breakable"),
        transitions=tuple(transitions),
    )


def _animation_state(node: ET.Element) -> AnimationState:
    return _state(node, (_transition(t) for t in node if t.tag == "Transition"))


_PARAM_TYPES = {"Trigger": ParamType.TRIGGER, "Bool": ParamType.BOOL, "Float": ParamType.FLOAT}


def _parameters(node: ET.Element | None) -> dict[str, Parameter]:
    parameters: dict[str, Parameter] = {}
    if node is None:
        return parameters
    for param in node:
        kind = _PARAM_TYPES.get(param.get("type", ""))
        if kind is None:
            continue
        if kind is ParamType.FLOAT:
            default: bool | float = _as_float(param, "default")
        else:
            default = _as_bool(param, "default")
        parameters.setdefault(param.get("label", ""), Parameter(kind, default))
    return parameters


def _entry_state(root: ET.Element) -> str:
    entry = root.find("EntryState")
    if entry is None:
        raise IllegalOperationError('An AnimationTree must have a "EntryState"')
    label = entry.get("label", "")
    if not label:
        raise IllegalOperationError('EntryState "label" attribute must be unempty')
    return label


def _blend_tree(node: ET.Element, states: dict[str, AnimationState]) -> BlendTree:
    label = node.get("label", "")
    if not label:
        raise IllegalOperationError('BlendTree node must have a "label" attribute')
    src = node.get("src", "")
    if not src:
        raise IllegalOperationError('BlendTree node must have a "src" attribute')

    tree = _parse_file(src)
    if tree.tag != "BlendTree":
        raise IllegalOperationError('Root node of BlendTree must be named "BlendTree"')

    external = [_transition(t) for t in node if t.tag == "Transition"]
    branches = [b for b in tree if b.tag == "Animation"]

    inner: list[Transition] = [
        Transition(
            branch.get("label", ""),
            tuple(_condition(c) for c in branch if c.tag == "Condition"),
        )
        for branch in branches
    ]

    for branch in branches:
        own_label = branch.get("label", "")
        transitions = list(external)
        for other in branches:
            other_label = other.get("label", "")
            if other_label == own_label:
                continue
            match = next((t for t in inner if t.target == other_label), None)
            if match is not None:
                transitions.append(match)
        states.setdefault(own_label, _state(branch, transitions))

    return BlendTree(label, tuple(b.get("label", "") for b in branches), tuple(inner))


def _states(root: ET.Element, blend_trees: dict[str, BlendTree]) -> dict[str, AnimationState]:
    tree = root.find("Tree")
    if tree is None:
        raise IllegalOperationError('AnimationTree must have a node named "Tree"')
    states: dict[str, AnimationState] = {}
    for node in tree:
        if node.tag == "Animation":
            states.setdefault(node.get("label", ""), _animation_state(node))
        elif node.tag == "BlendTree":
            blend = _blend_tree(node, states)
            blend_trees.setdefault(blend.name, blend)
        else:
            raise IllegalOperationError(
                'Each child node of "Tree" node must be named "Animation" or "BlendTree"'
            )
    return states


class AnimatorTreeLoader:
    """Parses animation graph files, returning one shared graph per tree label."""

    def __init__(self) -> None:
        self._parsed: dict[str, AnimatorGraph] = {}

    def load(self, path: str | os.PathLike[str]) -> AnimatorGraph:
        """Load the graph at ``path``, or the cached graph with the same label."""
        root = _parse_file(path)
        if root.tag != "AnimationTree":
            raise IllegalOperationError('Root node of AnimationTree must be named "AnimationTree"')
        label = root.get("label", "")
        if not label:
            raise IllegalOperationError('AnimationTree "label" attribute must not be empty')

        cached = self._parsed.get(label)
        if cached is not None:
            return cached

        entry = _entry_state(root)
        blend_trees: dict[str, BlendTree] = {}
        states = _states(root, blend_trees)
        graph = AnimatorGraph(
            entry=entry,
            states=states,
            blend_trees=blend_trees,
            parameters=_parameters(root.find("Parameters")),
        )
        self._parsed[label] = graph
        return graph


_default_loader = AnimatorTreeLoader()


def load_animator_tree(path: str | os.PathLike[str]) -> AnimatorGraph:
    """Load an animation graph through the process-wide loader and its cache."""
    return _default_loader.load(path)