"""The player's ship."""

from __future__ import annotations

import pygame

from spacepirates.geometry import FloatRect

TEXTURE_PATH = "Textures/lol1.png"
SCALE = 0.1
MOVE_SPEED = 6.0
ATTACK_COOLDOWN_MAX = 2.0
ATTACK_COOLDOWN_STEP = 0.5
HP_MAX = 50


class Player:
    """A ship that moves, fires with a cooldown and loses hit points."""

    def __init__(self, texture: pygame.Surface | None = None) -> None:
        if texture is None:
            texture = pygame.image.load(TEXTURE_PATH)
        self.x = 0.0
        self.y = 0.0
        self.move_speed = MOVE_SPEED
        self.attack_cooldown_max = ATTACK_COOLDOWN_MAX
        self.attack_cooldown = self.attack_cooldown_max
        self.hp_max = HP_MAX
        self.hp = self.hp_max
        tex_w, tex_h = texture.get_size()
        self.width = tex_w * SCALE
        self.height = tex_h * SCALE
        self.image = pygame.transform.scale(
            texture, (max(1, round(self.width)), max(1, round(self.height)))
        )

    @property
    def pos(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def bounds(self) -> FloatRect:
        return FloatRect(self.x, self.y, self.width, self.height)

    def set_position(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def lose_hp(self, value: int) -> None:
        """Reduce hit points, never below zero."""
        self.hp = max(0, self.hp - value)

    def can_attack(self) -> bool:
        """Return True and restart the cooldown if the ship is ready to fire."""
        if self.attack_cooldown >= self.attack_cooldown_max:
            self.attack_cooldown = 0.0
            return True
        return False

    def move(self, dir_x: float, dir_y: float) -> None:
        self.x += self.move_speed * dir_x
        self.y += self.move_speed * dir_y

    def update_attack(self) -> None:
        if self.attack_cooldown < self.attack_cooldown_max:
            self.attack_cooldown += ATTACK_COOLDOWN_STEP

    def update(self) -> None:
        self.update_attack()

    def render(self, target: pygame.Surface) -> None:
        target.blit(self.image, (self.x, self.y))