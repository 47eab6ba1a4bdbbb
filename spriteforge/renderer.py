"""Component drawing one cell of a sprite sheet at its game object's transform."""

from __future__ import annotations

import sys

import pygame
from pygame.math import Vector2

from spriteforge.component import Component


class Renderer(Component):
    """Draws a sprite-sheet cell of ``sprite_size`` pixels using the world transform."""

    def __init__(self, texture_path: str, sprite_size) -> None:
        super().__init__()
        width, height = sprite_size
        self.sprite_size: tuple[int, int] = (int(width), int(height))
        self.texture: pygame.Surface | None = self._load_texture(texture_path)
        if self.texture is None:
            self.cut_rect = pygame.Rect(0, 0, 0, 0)
        else:
            self.cut_rect = self.texture.get_rect()
        self.position = Vector2(0, 0)
        self.rotation = 0.0
        self.scale = Vector2(1, 1)

    @staticmethod
    def _load_texture(path: str) -> pygame.Surface | None:
        try:
            return pygame.image.load(path)
        except (pygame.error, OSError):
            print(f"Texture at {path} not found", file=sys.stderr)
            return None

    def start(self) -> None:
        self.cut_rect.size = self.sprite_size
        self.set_cut_rect_pos(0, 0)

    def update(self, elapsed: float) -> None:
        """Copy the owning game object's world transform."""
        if self.game_object is None:
            raise RuntimeError("renderer is not attached to a game object")
        transform = self.game_object.transform
        self.position = transform.world_position
        self.rotation = transform.world_rotation
        self.scale = transform.world_scale

    def set_cut_rect_pos(self, x: int, y: int) -> None:
        """Select the sheet cell at column ``x`` and row ``y``."""
        width, height = self.sprite_size
        self.cut_rect.topleft = (x * width, y * height)

    def render(self, surface: pygame.Surface) -> None:
        """Blit the current cell onto ``surface``, anchored at its top-left corner."""
        width, height = self.sprite_size
        sprite = pygame.Surface((width, height), pygame.SRCALPHA)
        if self.texture is None:
            sprite.fill((255, 255, 255))
        else:
            sprite.blit(self.texture, (0, 0), area=self.cut_rect)

        sx, sy = self.scale.x, self.scale.y
        scaled_size = (round(width * abs(sx)), round(height * abs(sy)))
        if scaled_size[0] == 0 or scaled_size[1] == 0:
            return
        image = pygame.transform.scale(sprite, scaled_size)
        if sx < 0 or sy < 0:
            image = pygame.transform.flip(image, sx < 0, sy < 0)
        image = pygame.transform.rotate(image, -self.rotation)

        center = self.position + Vector2(width * sx / 2, height * sy / 2).rotate(self.rotation)
        surface.blit(image, image.get_rect(center=(round(center.x), round(center.y))))