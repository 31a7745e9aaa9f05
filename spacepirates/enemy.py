"""Falling polygon enemies."""

from __future__ import annotations

import math
import random

import pygame

from spacepirates.geometry import FloatRect


def _polygon(point_count: int, radius: float) -> list[tuple[float, float]]:
    """Vertices of a regular polygon inscribed in a circle, relative to its box corner."""
    points = []
    for index in range(point_count):
        angle = index * 2 * math.pi / point_count - math.pi / 2
        points.append((math.cos(angle) * radius + radius, math.sin(angle) * radius + radius))
    return points


class Enemy:
    """A coloured regular polygon whose stats depend on its number of corners."""

    def __init__(self, x: float, y: float, rng=None) -> None:
        rng = rng if rng is not None else random
        self.x = float(x)
        self.y = float(y)
        self.point_count = rng.randint(3, 10)
        self.speed = float(self.point_count // 2)
        self.hp_max = self.point_count * 2
        self.hp = self.hp_max
        self.damage = self.point_count
        self.points = self.point_count
        self.radius = float(self.point_count * 4)
        self.color = (rng.randint(1, 255), rng.randint(1, 255), rng.randint(1, 255))
        self._outline = _polygon(self.point_count, self.radius)

    @property
    def bounds(self) -> FloatRect:
        xs = [px for px, _ in self._outline]
        ys = [py for _, py in self._outline]
        return FloatRect(self.x + min(xs), self.y + min(ys),
                         max(xs) - min(xs), max(ys) - min(ys))

    def update(self) -> None:
        """Fall down by one frame's worth of speed."""
        self.y += self.speed

    def render(self, target: pygame.Surface) -> None:
        pygame.draw.polygon(target, self.color,
                            [(self.x + px, self.y + py) for px, py in self._outline])