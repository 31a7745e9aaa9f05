"""The game loop: input, spawning, combat and drawing."""

from __future__ import annotations

import argparse
import os
import random
from typing import Callable, Collection

import pygame

from spacepirates.bullet import Bullet
from spacepirates.enemy import Enemy
from spacepirates.player import Player

WINDOW_WIDTH = 1100
WINDOW_HEIGHT = 900
WINDOW_TITLE = "SPACE PIRATES"
FRAMERATE = 60
BULLET_TEXTURE_PATH = "Textures/01.png"
BACKGROUND_TEXTURE_PATH = "Textures/SPACE2.png"
FONT_PATH = "Fonts/Dosis-Light.otf"
HP_BAR_WIDTH = 300.0
HP_BAR_HEIGHT = 20.0
HP_BAR_TOP = 50.0
ENEMY_CONTACT_DAMAGE = 10


def _read_pygame_controls() -> set[str]:
    keys = pygame.key.get_pressed()
    held = {name for name, key in (("left", pygame.K_a), ("right", pygame.K_d),
                                   ("up", pygame.K_w), ("down", pygame.K_s)) if keys[key]}
    if pygame.mouse.get_pressed()[0]:
        held.add("fire")
    return held


class Game:
    """Holds the world state and drives one frame at a time."""

    def __init__(self, *, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT,
                 player: Player | None = None,
                 bullet_texture: pygame.Surface | None = None,
                 background: pygame.Surface | None = None,
                 rng: random.Random | None = None,
                 input_source: Callable[[], Collection[str]] | None = None) -> None:
        self.width = width
        self.height = height
        self.bullet_texture = (bullet_texture if bullet_texture is not None
                               else pygame.image.load(BULLET_TEXTURE_PATH))
        self.background = (background if background is not None
                           else pygame.image.load(BACKGROUND_TEXTURE_PATH))
        self.player = player if player is not None else Player()
        self.rng = rng if rng is not None else random.Random()
        self.input_source = input_source if input_source is not None else _read_pygame_controls
        self.bullets: list[Bullet] = []
        self.enemies: list[Enemy] = []
        self.spawn_timer_max = 40.0
        self.spawn_timer = self.spawn_timer_max
        self.points = 0
        self.point_text = "TEXT"
        self.hp_bar_width = HP_BAR_WIDTH
        self.window: pygame.Surface | None = None
        self.is_open = False
        self._clock: pygame.time.Clock | None = None
        self._point_font: pygame.font.Font | None = None
        self._game_over_font: pygame.font.Font | None = None

    def _open_window(self) -> None:
        pygame.init()
        self.window = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(WINDOW_TITLE)
        font_path = FONT_PATH if os.path.exists(FONT_PATH) else None
        self._point_font = pygame.font.Font(font_path, 40)
        self._game_over_font = pygame.font.Font(font_path, 70)
        self._clock = pygame.time.Clock()
        self.is_open = True

    def close(self) -> None:
        self.is_open = False

    def run(self) -> None:
        """Open the window and play until it is closed."""
        self._open_window()
        try:
            while self.is_open:
                self.update_poll_events()
                if self.player.hp > 0:
                    self.update()
                self._update_gui()
                if self.is_open:
                    self.render()
                self._clock.tick(FRAMERATE)
        finally:
            pygame.quit()

    def update_poll_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.close()
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.close()

    def update_input(self) -> None:
        held = self.input_source()
        if "left" in held:
            self.player.move(-1.0, 0.0)
        if "right" in held:
            self.player.move(1.0, 0.0)
        if "up" in held:
            self.player.move(0.0, -1.0)
        if "down" in held:
            self.player.move(0.0, 1.0)
        if "fire" in held and self.player.can_attack():
            x, y = self.player.pos
            self.bullets.append(Bullet(self.bullet_texture, x + 16, y, 0.0, -1.0, 5.0))

    def update_bullets(self) -> None:
        """Move every bullet and drop those that left the top of the screen."""
        for bullet in self.bullets:
            bullet.update()
        self.bullets = [b for b in self.bullets if b.bounds.bottom >= 0.0]

    def _spawn_enemies(self) -> None:
        self.spawn_timer += 1.0
        if self.spawn_timer >= self.spawn_timer_max:
            x = self.rng.randrange(self.width) - 40.0
            self.enemies.append(Enemy(x, -100.0, self.rng))
            self.spawn_timer = 0.0

    def update_enemies_and_combat(self) -> None:
        self._spawn_enemies()
        survivors = []
        for enemy in self.enemies:
            enemy.update()
            bounds = enemy.bounds
            hit = next((b for b in self.bullets if b.bounds.intersects(bounds)), None)
            if hit is not None:
                self.points += enemy.points
                self.bullets.remove(hit)
            elif bounds.top > self.height:
                pass
            elif bounds.intersects(self.player.bounds):
                self.player.lose_hp(ENEMY_CONTACT_DAMAGE)
            else:
                survivors.append(enemy)
        self.enemies = survivors

    def update_collision(self) -> None:
        """Keep the player inside the window."""
        player = self.player
        if player.bounds.left < 0.0:
            player.set_position(0.0, player.bounds.top)
        if player.bounds.right >= self.width:
            player.set_position(self.width - player.bounds.width, player.bounds.top)
        if player.bounds.top <= 0.0:
            player.set_position(player.bounds.left, 0.0)
        if player.bounds.bottom >= self.height:
            player.set_position(player.bounds.left, self.height - player.bounds.height)

    def _update_gui(self) -> None:
        self.point_text = f"POINTS : {self.points}"
        self.hp_bar_width = HP_BAR_WIDTH * self.player.hp / self.player.hp_max

    def update(self) -> None:
        self.update_input()
        self._update_gui()
        self.player.update()
        self.update_collision()
        self.update_bullets()
        self.update_enemies_and_combat()

    def _render_gui(self, target: pygame.Surface) -> None:
        target.blit(self._point_font.render(self.point_text, True, (255, 255, 255)), (0, 0))
        back = pygame.Surface((int(HP_BAR_WIDTH), int(HP_BAR_HEIGHT)), pygame.SRCALPHA)
        back.fill((25, 25, 25, 200))
        target.blit(back, (0, HP_BAR_TOP))
        pygame.draw.rect(target, (255, 0, 0),
                         pygame.Rect(0, HP_BAR_TOP, int(self.hp_bar_width), HP_BAR_HEIGHT))

    def render(self) -> None:
        if self.window is None:
            raise RuntimeError("the game window is not open")
        target = self.window
        target.fill((0, 0, 0))
        target.blit(self.background, (0, 0))
        self.player.render(target)
        for bullet in self.bullets:
            bullet.render(target)
        for enemy in self.enemies:
            enemy.render(target)
        self._render_gui(target)
        if self.player.hp <= 0:
            text = self._game_over_font.render("GAME OVER", True, (255, 255, 255))
            target.blit(text, (self.width / 2 - 150, self.height / 2 - 75))
        pygame.display.flip()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="spacepirates", description="Play Space Pirates.")
    parser.parse_args(argv)
    Game().run()
    return 0