# spriteforge

A small component-based 2D game engine built on pygame. Game objects form a
hierarchy of transforms and carry components (renderer, controller,
animator). Scenes and prefabs are described in XML files. Keyboard input is
mapped to named actions through an XML configuration. Sprite-sheet
animations are driven by an XML animation graph with parameters,
conditional transitions and blend trees.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
spriteforge [RESOURCES]
```

`RESOURCES` is the resources directory. It defaults to `resources` and is
laid out like this:

```
resources/
  config/input-config.xml
  scenes/scene.xml
  fonts/Sansation.ttf     (optional; pygame's default font is used otherwise)
```

The command opens a resizable 640x480 window and loads `scenes/scene.xml`.
It starts every object in the scene. The scene is then updated in fixed
steps of 1/60 s. Drawing is capped at 60 frames per second, on a green
background.

The world is always 480 units high. Its width follows the window's aspect
ratio, and it is scaled to fill the window. A small overlay in the top-left
corner shows frames per second and the average time per frame. It is
refreshed once a second.

If the input configuration cannot be read, an error is printed and the game
runs without actions. If the scene file cannot be read, an error is printed
and the scene is empty. Closing the window ends the loop.

## Building blocks

- `spriteforge.game.Game(resources_dir)`: opens the window, loads the input
  configuration and the scene. `run()` runs the loop until the window is
  closed. `spriteforge.game.main(argv=None)` is the command's entry point.
- `spriteforge.game_object.GameObject(position, rotation, scale)`: owns a
  `transform`, components and child objects.
  - `start()` and `update(elapsed)` go to its components first, then to its
    children.
  - `get_component(kind)` returns the first component that is an instance of
    `kind`, or `None`.
- `spriteforge.transform.Transform`: local `position`, `rotation` (degrees)
  and `scale`.
  - `world_position`, `world_rotation` and `world_scale` are computed through
    the parent chain.
  - `move`, `rotate` and `rescale` change the local values.
- `spriteforge.component.Component`: base class with `attach`, `start` and
  `update` hooks.
- `spriteforge.renderer.Renderer(texture_path, sprite_size)`: draws one cell
  of a sprite sheet at its object's world transform. Use
  `set_cut_rect_pos(x, y)` to select the cell and `render(surface)` to draw
  it. If the texture is missing, a message is printed and a white rectangle
  is drawn instead.
- `spriteforge.animator.Animator(animation_tree_path)`: plays the graph's
  states on the object's `Renderer`.
  - It follows transitions as parameters change through
    `set_param(label, value)`. Labels the graph does not declare are
    ignored.
  - Each animator has its own copy of the parameters.
- `spriteforge.controller.Controller(input_manager)`: reads the `Move`,
  `Slash`, `Wand`, `Bow` and `Hit` actions. A missing action raises
  `KeyError` at `start()`.
  - `Move` moves the object at 100 units per second.
  - `Move` also sets the animator parameters `moving`, `forwardWalk` and
    `sideWalk`.
  - The other four actions set the parameters `slash`, `wand`, `bow` and
    `hit` when pressed.
- `spriteforge.input_action`: provides `Key`, `key_from_name`, the events
  `KeyPressed` and `KeyReleased`, and the bindings `ButtonBinding` and
  `DirectionalBinding`.
  - `InputAction.read_value()` gives a bool for a button action. For a
    directional action it gives a `pygame.math.Vector2` clamped to [-1, 1].
  - `was_performed_this_frame()` reports a press since the last
    `reset_frame_state()`.
- `spriteforge.input_manager.InputManager`: `load_actions(path)` reads an
  input configuration. Use `find_action(name)` to get an action,
  `begin_frame()` to reset frame state and `process_event(event)` to feed
  events.
- `spriteforge.scene_manager.SceneManager(scenes_dir, input_manager)`:
  `load_scene(name)` builds a `Scene` holding `targets` and `renderers`.
  `unload_scene(scene)` empties it.
- `spriteforge.animator_tree_loader`: `load_animator_tree(path)` parses an
  animation tree into an `AnimatorGraph`. It caches graphs by tree label;
  `AnimatorTreeLoader` keeps a cache of its own.
- `spriteforge.animator_graph`: the graph's data classes (`Parameter`,
  `Condition`, `Transition`, `AnimationState`, `BlendTree`, `AnimatorGraph`).

## File formats

Input configuration:

```xml
<InputActions>
  <Action label="Move" type="Vector2D">
    <Binding>
      <up bind="Z"/><down bind="S"/><left bind="Q"/><right bind="D"/>
    </Binding>
  </Action>
  <Action label="Slash" type="Button">
    <Binding bind="Space"/>
  </Action>
</InputActions>
```

Key names are the members of `Key`. An unknown name raises `KeyError`.

Scene:

- The root element is `<Scene>`. It holds `<GameObject>` and `<Prefab>`
  elements.
- A game object has the attributes `x`, `y`, `angle`, `sx` and `sy`. A
  missing attribute counts as 0, so give the scale explicitly.
- A game object may contain:
  - `<Components>` holding `<Component name="Renderer" src=".." sprite_w=".." sprite_h=".."/>`,
    `<Component name="Controller"/>` or `<Component name="Animator" src=".."/>`;
  - nested `<GameObject>` elements;
  - `<Prefab>` elements.
- A prefab's `src` names a file whose root is `<GameObject>`. Its optional
  `x`/`y`, `angle` and `sx`/`sy` attributes move, rotate and rescale the
  prefab.
- Texture, animation tree and prefab paths are relative to the working
  directory.

Animation tree:

- The root element is `<AnimationTree label="..">`. It holds `<EntryState label=".."/>`,
  a `<Tree>` and an optional `<Parameters>`.
- `<Tree>` holds two kinds of element:
  - `<Animation label startx starty length frameDuration loop breakable>`
    elements. These contain `<Transition to="..">` elements with
    `<Condition parameter=".." value=".." cmp="Less|Greater"/>` children;
    without `cmp` the condition tests for equality.
  - `<BlendTree label=".." src="..">` elements. The file they name has a
    `<BlendTree>` root holding `<Animation>` branches with conditions.
- `starty="-1"` keeps the row of the previous animation. `frameDuration` is
  in milliseconds.
- Each parameter has `type` (`Trigger`, `Bool` or `Float`), `label` and
  `default`.

Malformed scenes, prefabs and animation trees raise
`spriteforge.errors.IllegalOperationError`, as do unknown component names.

## What it does not do

There is no sound, no networking and no editor. Scenes, prefabs and
animations are written by hand as XML files. Scenes cannot be saved back to
disk. The running game loads the single scene `scene.xml` and has no way to
switch scenes. The only input handled is the keyboard.