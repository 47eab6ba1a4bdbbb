"""Building scenes of game objects from XML scene and prefab files."""

from __future__ import annotations

import os
import sys
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path

from spriteforge.animator import Animator
from spriteforge.component import Component
from spriteforge.controller import Controller
from spriteforge.errors import IllegalOperationError
from spriteforge.game_object import GameObject
from spriteforge.input_manager import InputManager
from spriteforge.renderer import Renderer
from spriteforge.transform import Transform


def _float(element: ET.Element, name: str, default: float = 0.0) -> float:
    text = element.get(name)
    if not text:
        return default
    try:
        return float(text)
    except ValueError:
        return 0.0


def _uint(element: ET.Element, name: str) -> int:
    try:
        return max(0, int(element.get(name, "")))
    except ValueError:
        return 0


@dataclass
class Scene:
    """The root game objects of a loaded scene and every renderer among them."""

    targets: list[GameObject] = field(default_factory=list)
    renderers: list[Renderer] = field(default_factory=list)


class SceneManager:
    """Loads scene files from ``scenes_dir``."""

    def __init__(self, scenes_dir: str | os.PathLike[str], input_manager: InputManager) -> None:
        self.scenes_dir = Path(scenes_dir)
        self.input_manager = input_manager

    def load_scene(self, scene: str) -> Scene:
        """Build the scene file ``scene``; an unreadable file gives an empty scene."""
        path = self.scenes_dir / scene
        loaded = Scene()
        try:
            root = ET.parse(path).getroot()
        except (OSError, ET.ParseError) as exc:
            print(f"Could not open scene because {exc}", file=sys.stderr)
            return loaded
        if root.tag != "Scene":
            return loaded
        for node in root:
            if node.tag == "GameObject":
                loaded.targets.append(self._build_game_object(node, None, loaded.renderers))
            elif node.tag == "Prefab":
                loaded.targets.append(self._build_prefab(node, None, loaded.renderers))
            else:
                raise IllegalOperationError("Scene node children must be GameObject or Prefab")
        return loaded

    def unload_scene(self, scene: Scene) -> None:
        """Drop every object of ``scene``."""
        scene.targets.clear()
        scene.renderers.clear()

    def _build_component(self, node: ET.Element, renderers: list[Renderer]) -> Component:
        name = node.get("name", "")
        if name == "Renderer":
            renderer = Renderer(
                node.get("src", ""), (_uint(node, "sprite_w"), _uint(node, "sprite_h"))
            )
            renderers.append(renderer)
            return renderer
        if name == "Controller":
            return Controller(self.input_manager)
        if name == "Animator":
            return Animator(node.get("src", ""))
        raise IllegalOperationError(f"Unknown component {name!r}")

    def _build_game_object(
        self, node: ET.Element, parent: Transform | None, renderers: list[Renderer]
    ) -> GameObject:
        game_object = GameObject(
            (_float(node, "x"), _float(node, "y")),
            _float(node, "angle"),
            (_float(node, "sx"), _float(node, "sy")),
        )
        game_object.transform.parent = parent
        for child in node:
            if child.tag == "Components":
                for component in child.findall("Component"):
                    game_object.add_component(self._build_component(component, renderers))
            elif child.tag == "GameObject":
                game_object.add_child(
                    self._build_game_object(child, game_object.transform, renderers)
                )
            elif child.tag == "Prefab":
                game_object.add_child(self._build_prefab(child, game_object.transform, renderers))
        return game_object

    def _build_prefab(
        self, node: ET.Element, parent: Transform | None, renderers: list[Renderer]
    ) -> GameObject:
        root: ET.Element | None = None
        try:
            root = ET.parse(node.get("src", "")).getroot()
        except (OSError, ET.ParseError) as exc:
            print(f"Could not open prefab because {exc}", file=sys.stderr)
        if root is None or root.tag != "GameObject":
            raise IllegalOperationError(
                'Prefab files must have a unique root node named "GameObject"'
            )

        prefab = self._build_game_object(root, parent, renderers)
        if "x" in node.attrib or "y" in node.attrib:
            prefab.transform.move((_float(node, "x"), _float(node, "y")))
        if "angle" in node.attrib:
            prefab.transform.rotate(_float(node, "angle"))
        if "sx" in node.attrib or "sy" in node.attrib:
            prefab.transform.rescale((_float(node, "sx", 1.0), _float(node, "sy", 1.0)))
        return prefab