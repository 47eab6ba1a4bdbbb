"""The game window, its fixed-step loop and the command that starts it."""

from __future__ import annotations

import argparse
import os
import sys
import time
import xml.etree.ElementTree as ET
from pathlib import Path

import pygame

from spriteforge.input_action import Key, KeyPressed, KeyReleased
from spriteforge.input_manager import InputManager
from spriteforge.scene_manager import SceneManager


def _pygame_keys() -> dict[int, Key]:
    mapping: dict[int, Key] = {}
    for letter in "ABCDEFGHIJKLMNOPQRSTUVWXYZ":
        mapping[getattr(pygame, f"K_{letter.lower()}")] = Key[letter]
    for digit in range(10):
        mapping[getattr(pygame, f"K_{digit}")] = Key[f"Num{digit}"]
        mapping[getattr(pygame, f"K_KP{digit}")] = Key[f"Numpad{digit}"]
    for number in range(1, 16):
        mapping[getattr(pygame, f"K_F{number}")] = Key[f"F{number}"]
    mapping.update(
        {
            pygame.K_ESCAPE: Key.Escape,
            pygame.K_LCTRL: Key.LControl,
            pygame.K_LSHIFT: Key.LShift,
            pygame.K_LALT: Key.LAlt,
            pygame.K_LSUPER: Key.LSystem,
            pygame.K_RCTRL: Key.RControl,
            pygame.K_RSHIFT: Key.RShift,
            pygame.K_RALT: Key.RAlt,
            pygame.K_RSUPER: Key.RSystem,
            pygame.K_MENU: Key.Menu,
            pygame.K_LEFTBRACKET: Key.LBracket,
            pygame.K_RIGHTBRACKET: Key.RBracket,
            pygame.K_SEMICOLON: Key.Semicolon,
            pygame.K_COMMA: Key.Comma,
            pygame.K_PERIOD: Key.Period,
            pygame.K_QUOTE: Key.Apostrophe,
            pygame.K_SLASH: Key.Slash,
            pygame.K_BACKSLASH: Key.Backslash,
            pygame.K_BACKQUOTE: Key.Grave,
            pygame.K_EQUALS: Key.Equal,
            pygame.K_MINUS: Key.Hyphen,
            pygame.K_SPACE: Key.Space,
            pygame.K_RETURN: Key.Enter,
            pygame.K_BACKSPACE: Key.Backspace,
            pygame.K_TAB: Key.Tab,
            pygame.K_PAGEUP: Key.PageUp,
            pygame.K_PAGEDOWN: Key.PageDown,
            pygame.K_END: Key.End,
            pygame.K_HOME: Key.Home,
            pygame.K_INSERT: Key.Insert,
            pygame.K_DELETE: Key.Delete,
            pygame.K_KP_PLUS: Key.Add,
            pygame.K_KP_MINUS: Key.Subtract,
            pygame.K_KP_MULTIPLY: Key.Multiply,
            pygame.K_KP_DIVIDE: Key.Divide,
            pygame.K_LEFT: Key.Left,
            pygame.K_RIGHT: Key.Right,
            pygame.K_UP: Key.Up,
            pygame.K_DOWN: Key.Down,
            pygame.K_PAUSE: Key.Pause,
        }
    )
    return mapping


_PYGAME_KEYS = _pygame_keys()


def _input_event(event: pygame.event.Event) -> KeyPressed | KeyReleased | None:
    if event.type == pygame.KEYDOWN:
        return KeyPressed(_PYGAME_KEYS.get(event.key, Key.Unknown))
    if event.type == pygame.KEYUP:
        return KeyReleased(_PYGAME_KEYS.get(event.key, Key.Unknown))
    return None


class Game:
    """Opens the window, loads the scene from ``resources_dir`` and runs the loop."""

    WIDTH = 640
    HEIGHT = 480
    WORLD_HEIGHT = 480.0
    TIME_PER_FRAME = 1.0 / 60.0
    FRAME_RATE_CAP = 60
    BACKGROUND = (0, 255, 0)
    TEXT_COLOR = (255, 255, 255)

    def __init__(self, resources_dir: str | os.PathLike[str] = "resources") -> None:
        self.resources_dir = Path(resources_dir)
        pygame.init()
        self._window = pygame.display.set_mode((self.WIDTH, self.HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption("Sprite Forge")
        self._world_size = (float(self.WIDTH), float(self.HEIGHT))
        self._font = self._load_font()
        self._open = True
        self._running = False
        self._statistics_text = ""
        self._statistics_time = 0.0
        self._statistics_frames = 0

        self.input_manager = InputManager()
        config = self.resources_dir / "config" / "input-config.xml"
        try:
            self.input_manager.load_actions(config)
        except (OSError, ET.ParseError) as exc:
            print(f"could not open file {config} because : {exc}", file=sys.stderr)

        self.scene_manager = SceneManager(self.resources_dir / "scenes", self.input_manager)
        self.scene = self.scene_manager.load_scene("scene.xml")
        for target in self.scene.targets:
            target.start()

    def _load_font(self) -> pygame.font.Font:
        path = self.resources_dir / "fonts" / "Sansation.ttf"
        if path.is_file():
            return pygame.font.Font(str(path), 10)
        return pygame.font.Font(None, 10)

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def statistics_text(self) -> str:
        return self._statistics_text

    def run(self) -> None:
        """Run fixed-step updates and render until the window is closed."""
        if self._running:
            return
        self._running = True
        clock = pygame.time.Clock()
        last = time.perf_counter()
        since_last_update = 0.0
        while self._open:
            now = time.perf_counter()
            elapsed = now - last
            last = now
            since_last_update += elapsed
            while since_last_update > self.TIME_PER_FRAME:
                since_last_update -= self.TIME_PER_FRAME
                self._process_events()
                self._update(self.TIME_PER_FRAME)
            self._update_statistics(elapsed)
            self._render()
            clock.tick(self.FRAME_RATE_CAP)
        self._running = False

    def _process_events(self) -> None:
        self.input_manager.begin_frame()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._open = False
            elif event.type == pygame.VIDEORESIZE and event.h > 0:
                ratio = event.w / event.h
                self._world_size = (self.WORLD_HEIGHT * ratio, self.WORLD_HEIGHT)
            converted = _input_event(event)
            if converted is not None:
                self.input_manager.process_event(converted)

    def _update(self, elapsed: float) -> None:
        for target in self.scene.targets:
            target.update(elapsed)

    def _render(self) -> None:
        width, height = self._world_size
        world = pygame.Surface((max(1, round(width)), max(1, round(height))))
        world.fill(self.BACKGROUND)
        for renderer in self.scene.renderers:
            renderer.render(world)
        y = 5
        for line in self._statistics_text.splitlines():
            text = self._font.render(line, True, self.TEXT_COLOR)
            world.blit(text, (5, y))
            y += text.get_height()
        pygame.transform.scale(world, self._window.get_size(), self._window)
        pygame.display.flip()

    def _update_statistics(self, elapsed: float) -> None:
        self._statistics_time += elapsed
        self._statistics_frames += 1
        if self._statistics_time >= 1.0:
            microseconds = int(self._statistics_time * 1_000_000) // self._statistics_frames
            self._statistics_text = (
                f"Frames / Second = {self._statistics_frames}\n"
                f"Time / Update = {microseconds} us"
            )
            self._statistics_time -= 1.0
            self._statistics_frames = 0


def main(argv: list[str] | None = None) -> int:
    """Start the game with the resources found in the given directory."""
    parser = argparse.ArgumentParser(prog="spriteforge", description="Run the game.")
    parser.add_argument(
        "resources",
        nargs="?",
        default="resources",
        help="directory holding config/, scenes/ and fonts/ (default: resources)",
    )
    args = parser.parse_args(argv)
    try:
        game = Game(args.resources)
        game.run()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())