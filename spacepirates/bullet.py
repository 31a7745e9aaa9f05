"""Projectiles fired by the player."""

from __future__ import annotations

import pygame

from spacepirates.geometry import FloatRect

SCALE = 0.5


class Bullet:
    """A sprite that travels in a fixed direction at a fixed speed."""

    def __init__(self, texture: pygame.Surface, x: float, y: float,
                 dir_x: float, dir_y: float, move_speed: float) -> None:
        self.x = float(x)
        self.y = float(y)
        self.direction = (float(dir_x), float(dir_y))
        self.move_speed = float(move_speed)
        tex_w, tex_h = texture.get_size()
        self.width = tex_w * SCALE
        self.height = tex_h * SCALE
        self.image = pygame.transform.scale(
            texture, (max(1, round(self.width)), max(1, round(self.height)))
        )

    @property
    def bounds(self) -> FloatRect:
        return FloatRect(self.x, self.y, self.width, self.height)

    def update(self) -> None:
        """Advance the bullet by one frame."""
        dx, dy = self.direction
        self.x += self.move_speed * dx
        self.y += self.move_speed * dy

    def render(self, target: pygame.Surface) -> None:
        target.blit(self.image, (self.x, self.y))