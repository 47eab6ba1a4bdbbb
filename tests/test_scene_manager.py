import pytest
from pygame.math import Vector2

from spriteforge.controller import Controller
from spriteforge.errors import IllegalOperationError
from spriteforge.input_manager import InputManager
from spriteforge.renderer import Renderer
from spriteforge.scene_manager import Scene, SceneManager


def _manager(tmp_path):
    return SceneManager(tmp_path, InputManager())


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_loads_game_object_with_transform(tmp_path):
    _write(
        tmp_path,
        "scene.xml",
        '<Scene><GameObject x="10" y="20" angle="45" sx="2" sy="3"/></Scene>',
    )
    scene = _manager(tmp_path).load_scene("scene.xml")
    assert len(scene.targets) == 1
    transform = scene.targets[0].transform
    assert transform.position == Vector2(10, 20)
    assert transform.rotation == 45
    assert transform.scale == Vector2(2, 3)
    assert transform.parent is None


def test_nested_game_object_is_child(tmp_path):
    _write(
        tmp_path,
        "scene.xml",
        """<Scene>
  <GameObject x="10" y="20" sx="1" sy="1">
    <GameObject x="1" y="2" sx="1" sy="1"/>
  </GameObject>
</Scene>""",
    )
    scene = _manager(tmp_path).load_scene("scene.xml")
    parent = scene.targets[0]
    (child,) = parent.children
    assert child.transform.parent is parent.transform
    assert child.transform.world_position == parent.transform.position + child.transform.position


def test_components_are_built_and_renderers_collected(tmp_path):
    _write(
        tmp_path,
        "scene.xml",
        f"""<Scene>
  <GameObject sx="1" sy="1">
    <Components>
      <Component name="Renderer" src="{tmp_path / 'missing.png'}" sprite_w="16" sprite_h="24"/>
      <Component name="Controller"/>
    </Components>
  </GameObject>
</Scene>""",
    )
    manager = _manager(tmp_path)
    scene = manager.load_scene("scene.xml")
    go = scene.targets[0]
    renderer = go.get_component(Renderer)
    controller = go.get_component(Controller)
    assert scene.renderers == [renderer]
    assert renderer.sprite_size == (16, 24)
    assert controller.input_manager is manager.input_manager
    assert controller.game_object is go


def test_prefab_is_loaded_and_adjusted(tmp_path):
    prefab = _write(
        tmp_path, "prefab.xml", '<GameObject x="1" y="2" angle="10" sx="2" sy="4"/>'
    )
    _write(
        tmp_path,
        "scene.xml",
        f'<Scene><Prefab src="{prefab}" x="10" angle="5" sx="3"/></Scene>',
    )
    scene = _manager(tmp_path).load_scene("scene.xml")
    transform = scene.targets[0].transform
    assert transform.position == Vector2(11, 2)
    assert transform.rotation == pytest.approx(15)
    assert transform.scale == Vector2(6, 4)


def test_prefab_without_overrides_keeps_its_values(tmp_path):
    prefab = _write(tmp_path, "prefab.xml", '<GameObject x="1" y="2" sx="2" sy="4"/>')
    _write(
        tmp_path,
        "scene.xml",
        f'<Scene><GameObject sx="1" sy="1"><Prefab src="{prefab}"/></GameObject></Scene>',
    )
    scene = _manager(tmp_path).load_scene("scene.xml")
    (child,) = scene.targets[0].children
    assert child.transform.position == Vector2(1, 2)
    assert child.transform.scale == Vector2(2, 4)
    assert child.transform.parent is scene.targets[0].transform


def test_prefab_with_wrong_root_raises(tmp_path):
    prefab = _write(tmp_path, "prefab.xml", "<Thing/>")
    _write(tmp_path, "scene.xml", f'<Scene><Prefab src="{prefab}"/></Scene>')
    with pytest.raises(IllegalOperationError):
        _manager(tmp_path).load_scene("scene.xml")


def test_missing_prefab_raises(tmp_path):
    _write(tmp_path, "scene.xml", f'<Scene><Prefab src="{tmp_path / "none.xml"}"/></Scene>')
    with pytest.raises(IllegalOperationError):
        _manager(tmp_path).load_scene("scene.xml")


def test_invalid_scene_child_raises(tmp_path):
    _write(tmp_path, "scene.xml", "<Scene><Light/></Scene>")
    with pytest.raises(IllegalOperationError):
        _manager(tmp_path).load_scene("scene.xml")


def test_unknown_component_raises(tmp_path):
    _write(
        tmp_path,
        "scene.xml",
        '<Scene><GameObject><Components><Component name="Physics"/></Components></GameObject></Scene>',
    )
    with pytest.raises(IllegalOperationError):
        _manager(tmp_path).load_scene("scene.xml")


def test_missing_scene_gives_empty_scene(tmp_path):
    scene = _manager(tmp_path).load_scene("absent.xml")
    assert scene == Scene()


def test_unload_scene_clears_objects(tmp_path):
    _write(tmp_path, "scene.xml", "<Scene><GameObject/><GameObject/></Scene>")
    manager = _manager(tmp_path)
    scene = manager.load_scene("scene.xml")
    assert len(scene.targets) == 2
    manager.unload_scene(scene)
    assert scene.targets == []
    assert scene.renderers == []